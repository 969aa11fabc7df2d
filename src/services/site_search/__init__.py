"""
Site search services module.
Provides in-memory indexing and ranked search over the site's legal content.
"""

from .site_search_orchestrator import SiteSearchOrchestrator

# Base services
from .base import BaseService, SearchCacheManager, SearchValidator, ValidationError

# Content services
from .content import ContentLoader, DocumentBuilder, SourceCollections

# Search services
from .search import (
    SearchEngine, QueryProcessor, RelevanceScorer, ResultHighlighter, normalize_text
)

__all__ = [
    # Main orchestrator
    'SiteSearchOrchestrator',

    # Base services
    'BaseService',
    'SearchCacheManager',
    'SearchValidator',
    'ValidationError',

    # Content services
    'ContentLoader',
    'DocumentBuilder',
    'SourceCollections',

    # Search services
    'SearchEngine',
    'QueryProcessor',
    'RelevanceScorer',
    'ResultHighlighter',
    'normalize_text'
]
