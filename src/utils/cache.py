from typing import Any, Optional
import json
import logging

logger = logging.getLogger(__name__)

# Cache duration constants
MINUTE = 60
HOUR = MINUTE * 60


class CacheManager:
    """Prefixed JSON cache on top of an async redis client.

    A manager built without a client behaves as an always-empty cache so
    callers never have to branch on redis availability.
    """

    def __init__(self, redis_client=None, prefix: str = "cache"):
        self.redis = redis_client
        self.prefix = prefix

    @property
    def enabled(self) -> bool:
        return self.redis is not None

    def _get_key(self, key: str) -> str:
        """Generate prefixed cache key"""
        return f"{self.prefix}:{key}"

    async def get(self, key: str) -> Optional[Any]:
        """Get data from cache"""
        if not self.enabled:
            return None
        try:
            data = await self.redis.get(self._get_key(key))
            return json.loads(data) if data else None
        except Exception as e:
            logger.error(f"Cache get error for {key}: {e}")
            return None

    async def set(
        self,
        key: str,
        data: Any,
        expire: int = HOUR,  # Default 1 hour
    ) -> bool:
        """Set data in cache with expiration"""
        if not self.enabled:
            return False
        try:
            serialized_data = json.dumps(data)
            await self.redis.set(
                self._get_key(key),
                serialized_data,
                ex=expire
            )
            return True
        except Exception as e:
            logger.error(f"Cache set error for {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete a specific key from cache

        Returns:
            bool: True if key was deleted, False otherwise
        """
        if not self.enabled:
            return False
        try:
            result = await self.redis.delete(self._get_key(key))
            return result > 0
        except Exception as e:
            logger.error(f"Cache delete error for {key}: {e}")
            return False

    async def clear_pattern(self, pattern: str) -> int:
        """Clear all cache entries matching a pattern

        Args:
            pattern: Pattern to match (e.g., "search:*")

        Returns:
            int: Number of keys deleted
        """
        if not self.enabled:
            return 0
        try:
            keys = await self.redis.keys(self._get_key(pattern))
            if keys:
                return await self.redis.delete(*keys)
            return 0
        except Exception as e:
            logger.error(f"Cache clear error for {pattern}: {e}")
            return 0
