"""
Cache manager specifically for site search services.
Extends the base cache manager with search-specific key handling.
"""

import logging
from typing import Optional, Dict

from ....utils.cache import CacheManager, HOUR

logger = logging.getLogger(__name__)

# Search-specific cache key prefixes
CACHE_KEY_SEARCH_PREFIX = "search:response:"


class SearchCacheManager(CacheManager):
    """
    Cache manager for site search responses.
    The index itself lives in process memory; only rendered responses are cached.
    """

    def __init__(self, redis_client=None, prefix: str = "site_search"):
        super().__init__(redis_client, prefix)
        self.logger = logger

    async def get_search_response(self, query_hash: str) -> Optional[Dict]:
        """
        Get a cached search response.

        Args:
            query_hash: Hash of the normalized search parameters

        Returns:
            Optional[Dict]: Cached response or None
        """
        return await self.get(f"{CACHE_KEY_SEARCH_PREFIX}{query_hash}")

    async def set_search_response(self, query_hash: str, data: Dict, expire: int = HOUR) -> bool:
        """
        Cache a rendered search response.

        Args:
            query_hash: Hash of the normalized search parameters
            data: JSON-ready response
            expire: Expiration time in seconds
        """
        return await self.set(f"{CACHE_KEY_SEARCH_PREFIX}{query_hash}", data, expire)

    async def clear_search_responses(self) -> int:
        """
        Drop every cached search response, e.g. after an index rebuild.

        Returns:
            int: Number of entries cleared
        """
        cleared = await self.clear_pattern(f"{CACHE_KEY_SEARCH_PREFIX}*")
        self.logger.info(f"Cleared {cleared} cached search responses")
        return cleared

    async def health_check(self) -> bool:
        """
        Ping the cache backend.

        Returns:
            bool: True if healthy, False otherwise (or when caching is disabled)
        """
        if not self.enabled:
            return False
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            self.logger.error(f"Cache health check failed: {str(e)}")
            return False
