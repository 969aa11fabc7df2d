"""
Base service class for site search services.
Provides common functionality and infrastructure.
"""

import logging
from typing import Optional
from abc import ABC, abstractmethod
from fastapi import BackgroundTasks

from .cache_manager import SearchCacheManager

logger = logging.getLogger(__name__)


class BaseService(ABC):
    """
    Base class for all site search services.
    Provides common functionality for logging and caching.
    """

    def __init__(self, cache_manager: Optional[SearchCacheManager] = None):
        """
        Initialize the base service.

        Args:
            cache_manager: Optional SearchCacheManager; pure in-memory services leave it unset
        """
        self.cache = cache_manager
        self.logger = logger

    @abstractmethod
    def get_service_name(self) -> str:
        """
        Get the service name for logging and caching.

        Returns:
            str: The service name
        """
        pass

    def _log_info(self, message: str):
        self.logger.info(f"[{self.get_service_name()}] {message}")

    def _log_warning(self, message: str):
        self.logger.warning(f"[{self.get_service_name()}] {message}")

    async def _cache_get(self, cache_key: str) -> Optional[dict]:
        """
        Get a cached search response with error handling.

        Args:
            cache_key: The query hash to retrieve

        Returns:
            Optional[dict]: Cached data or None if not found
        """
        if self.cache is None:
            return None
        try:
            cached_data = await self.cache.get_search_response(cache_key)
            if cached_data:
                self._log_info(f"Cache hit for key: {cache_key}")
                return cached_data
            return None
        except Exception as e:
            self.logger.error(f"[{self.get_service_name()}] Cache get error for key {cache_key}: {str(e)}")
            return None

    async def _cache_set(self, cache_key: str, data: dict, expire: int,
                         background_tasks: Optional[BackgroundTasks] = None):
        """
        Cache a search response with error handling.

        Args:
            cache_key: The query hash
            data: The data to cache
            expire: Expiration time in seconds
            background_tasks: Optional background tasks for async caching
        """
        if self.cache is None or not self.cache.enabled:
            return
        try:
            if background_tasks:
                background_tasks.add_task(self.cache.set_search_response, cache_key, data, expire)
            else:
                await self.cache.set_search_response(cache_key, data, expire)
            self._log_info(f"Data cached with key: {cache_key}")
        except Exception as e:
            self.logger.error(f"[{self.get_service_name()}] Cache set error for key {cache_key}: {str(e)}")

    def _handle_service_error(self, error: Exception, context: str = ""):
        """
        Handle service errors with proper logging.

        Args:
            error: The exception that occurred
            context: Context information about the error
        """
        error_msg = f"[{self.get_service_name()}] {context}: {str(error)}"
        self.logger.error(error_msg)

        # Re-raise the error for upstream handling
        raise error
