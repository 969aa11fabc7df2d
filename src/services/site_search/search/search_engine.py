"""
Search engine for site content.
Owns the in-memory document index and runs ranked searches over it.
"""

import hashlib
import threading
import time
from collections import Counter
from typing import Dict, List, Optional

from ..base import BaseService
from ..content.document_builder import DocumentBuilder
from ....schemas.search_schemas import (
    ContentType, Highlight, IndexStats, SearchDocument, SearchQuery,
    SearchResponse, SearchResult,
)
from .query_processor import QueryProcessor
from .relevance_scorer import RelevanceScorer
from .result_highlighter import ResultHighlighter

DEFAULT_RESULT_LIMIT = 20
MAX_SUGGESTIONS = 5


class SearchEngine(BaseService):
    """
    Main search engine for site content.

    The index is built at most once per instance, either explicitly through
    build_index() or lazily by the first search. After that the document list
    is only ever read, so concurrent searches need no locking.
    """

    def __init__(self, document_builder: DocumentBuilder,
                 query_processor: QueryProcessor,
                 relevance_scorer: RelevanceScorer,
                 result_highlighter: ResultHighlighter,
                 default_limit: int = DEFAULT_RESULT_LIMIT,
                 max_suggestions: int = MAX_SUGGESTIONS):
        """
        Initialize the search engine.

        Args:
            document_builder: Builds the document corpus
            query_processor: Query processor instance
            relevance_scorer: Relevance scorer instance
            result_highlighter: Result highlighter instance
            default_limit: Page size used when a query gives none
            max_suggestions: Maximum suggestions returned for empty result sets
        """
        super().__init__()
        self.document_builder = document_builder
        self.query_processor = query_processor
        self.relevance_scorer = relevance_scorer
        self.result_highlighter = result_highlighter
        self.default_limit = default_limit
        self.max_suggestions = max_suggestions

        self._documents: List[SearchDocument] = []
        self._fingerprint = ""
        self._ready = False
        self._build_lock = threading.Lock()

    def get_service_name(self) -> str:
        """Get the service name."""
        return "search_engine"

    @property
    def is_ready(self) -> bool:
        return self._ready

    def build_index(self) -> int:
        """
        Build the index, fully replacing any previous document collection.

        Returns:
            int: Number of indexed documents
        """
        with self._build_lock:
            return self._build_locked()

    def _build_locked(self) -> int:
        started = time.perf_counter()
        documents = self.document_builder.build()
        self._documents = documents
        self._fingerprint = self._compute_fingerprint(documents)
        self._ready = True
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._log_info(f"Built search index: {len(documents)} documents in {elapsed_ms:.1f}ms")
        return len(documents)

    @staticmethod
    def _compute_fingerprint(documents: List[SearchDocument]) -> str:
        digest = hashlib.md5()
        for document in documents:
            digest.update(document.json().encode())
            digest.update(b"\n")
        return digest.hexdigest()

    @property
    def index_fingerprint(self) -> str:
        """Digest of the indexed documents; changes whenever a build changes the corpus."""
        self._ensure_index()
        return self._fingerprint

    def _ensure_index(self):
        if self._ready:
            return
        with self._build_lock:
            # Another thread may have finished the build while we waited
            if not self._ready:
                self._build_locked()

    def search(self, query: SearchQuery) -> SearchResponse:
        """
        Run a ranked search over the index.

        Args:
            query: Search request; bounds checking is the caller's job

        Returns:
            SearchResponse: Paginated results, grouped page, and suggestions
                when nothing matched
        """
        started = time.perf_counter()
        self._ensure_index()

        language = query.language
        query_terms = self.query_processor.expand_synonyms(query.query)

        type_filter = None
        jurisdiction_filter = None
        if query.filters is not None:
            if query.filters.types is not None:
                type_filter = set(query.filters.types)
            jurisdiction_filter = query.filters.jurisdiction or None

        results: List[SearchResult] = []
        for document in self._documents:
            if type_filter is not None and document.type.value not in type_filter:
                continue
            if (jurisdiction_filter and document.jurisdiction
                    and document.jurisdiction != jurisdiction_filter):
                continue

            scored = self.relevance_scorer.score_document(document, query_terms, language)
            if scored.score <= 0:
                continue

            snippet = self.result_highlighter.highlight(
                document.localized_content(language), scored.matched_terms
            )
            results.append(SearchResult(
                document=document,
                score=scored.score,
                highlights=[Highlight(field="content", snippet=snippet)],
                matched_terms=scored.matched_terms,
            ))

        # sorted() is stable, so equal scores keep index build order
        ranked = sorted(results, key=lambda result: result.score, reverse=True)
        total_count = len(ranked)

        limit = query.limit or self.default_limit
        offset = max(query.offset or 0, 0)
        page = ranked[offset:offset + limit]

        grouped: Dict[str, List[SearchResult]] = {
            content_type.value: [] for content_type in ContentType
        }
        for result in page:
            grouped[result.document.type.value].append(result)

        suggestions: List[str] = []
        if total_count == 0:
            suggestions = self.query_processor.suggest_alternate_terms(
                query.query, self.max_suggestions
            )

        return SearchResponse(
            query=query.query,
            results=page,
            total_count=total_count,
            grouped_results=grouped,
            suggestions=suggestions,
            search_time_ms=(time.perf_counter() - started) * 1000,
        )

    def get_index_stats(self) -> IndexStats:
        """
        Get document counts for the index, building it first if needed.

        Returns:
            IndexStats: Total documents and a per-type breakdown
        """
        self._ensure_index()
        counts = Counter(document.type.value for document in self._documents)
        return IndexStats(
            total_documents=len(self._documents),
            documents_by_type=dict(counts),
        )
