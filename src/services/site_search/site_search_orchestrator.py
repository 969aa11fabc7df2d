"""
Site search orchestrator service.
Wires the search services together and fronts them with the response cache.
"""

import json
import time
from typing import Dict, Optional, Tuple

from fastapi import BackgroundTasks

from .base import BaseService, SearchCacheManager
from .content import ContentLoader, DocumentBuilder
from .search import QueryProcessor, RelevanceScorer, ResultHighlighter, SearchEngine
from ...core.config import settings
from ...schemas.search_schemas import IndexStats, SearchQuery


class SiteSearchOrchestrator(BaseService):
    """
    Main orchestrator for site search.
    One instance is shared by the whole process; it owns the search index.
    """

    def __init__(self, redis_client=None, data_dir: Optional[str] = None,
                 document_builder: Optional[DocumentBuilder] = None):
        """
        Initialize the site search orchestrator.

        Args:
            redis_client: Optional async redis client for response caching
            data_dir: Optional directory holding the JSON source collections
            document_builder: Optional prebuilt document builder
        """
        super().__init__(SearchCacheManager(redis_client))

        self.content_loader = ContentLoader(data_dir)
        self.document_builder = document_builder or DocumentBuilder(self.content_loader)

        self.query_processor = QueryProcessor()
        self.relevance_scorer = RelevanceScorer()
        self.result_highlighter = ResultHighlighter()
        self.search_engine = SearchEngine(
            self.document_builder, self.query_processor,
            self.relevance_scorer, self.result_highlighter,
            default_limit=settings.search_default_limit,
        )

    def get_service_name(self) -> str:
        """Get the service name."""
        return "site_search_orchestrator"

    @property
    def is_ready(self) -> bool:
        return self.search_engine.is_ready

    def build_index(self) -> int:
        """
        Build (or rebuild) the search index.

        Returns:
            int: Number of indexed documents
        """
        try:
            return self.search_engine.build_index()
        except Exception as e:
            self._handle_service_error(e, "Error building search index")

    async def rebuild_index(self) -> int:
        """
        Build the index and drop every cached response computed from an
        earlier build.

        Returns:
            int: Number of indexed documents
        """
        document_count = self.build_index()
        await self.clear_cache()
        return document_count

    def get_index_stats(self) -> IndexStats:
        return self.search_engine.get_index_stats()

    async def search_site(self, query: SearchQuery,
                          background_tasks: Optional[BackgroundTasks] = None,
                          no_cache: bool = False) -> Tuple[Dict, str]:
        """
        Search the site, serving repeated queries from the response cache.
        Cache keys carry the index fingerprint, so responses computed from an
        earlier build are never served. A hit reports the time of this call.

        Args:
            query: Validated search request
            background_tasks: Optional background tasks for async caching
            no_cache: Whether to bypass the cache

        Returns:
            Tuple[Dict, str]: JSON-ready search response and cache status
                ("hit", "miss" or "bypass")
        """
        started = time.perf_counter()
        try:
            filters = query.filters.dict(exclude_none=True) if query.filters else None
            query_hash = self.query_processor.generate_search_hash(
                query.query, query.language.value, filters, query.limit, query.offset,
                index_version=self.search_engine.index_fingerprint
            )

            if not no_cache:
                cached_response = await self._cache_get(query_hash)
                if cached_response:
                    cached_response["query"] = query.query
                    cached_response["search_time_ms"] = (time.perf_counter() - started) * 1000
                    return cached_response, "hit"

            response = self.search_engine.search(query)
            response_data = json.loads(response.json())

            if not no_cache:
                await self._cache_set(
                    query_hash, response_data, settings.search_cache_ttl, background_tasks
                )

            return response_data, "bypass" if no_cache else "miss"

        except Exception as e:
            self._handle_service_error(e, f"Error searching site (query length {len(query.query)})")

    async def clear_cache(self) -> int:
        return await self.cache.clear_search_responses()

    async def health_check(self) -> Dict:
        """
        Get the health of the search service.

        Returns:
            Dict: Index readiness, size and cache state
        """
        cache_healthy = await self.cache.health_check()
        total_documents = self.get_index_stats().total_documents if self.is_ready else 0
        return {
            "index_ready": self.is_ready,
            "total_documents": total_documents,
            "cache": "connected" if cache_healthy else ("unavailable" if self.cache.enabled else "disabled"),
        }
