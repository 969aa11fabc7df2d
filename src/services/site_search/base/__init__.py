"""
Base module for site search services.
Contains common infrastructure and base classes.
"""

from .service_base import BaseService
from .cache_manager import SearchCacheManager
from .validators import SearchValidator, ValidationError

__all__ = [
    'BaseService',
    'SearchCacheManager',
    'SearchValidator',
    'ValidationError'
]
