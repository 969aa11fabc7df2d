"""
Search module for site search services.
Handles query processing, relevance scoring, highlighting and the index.
"""

from .search_engine import SearchEngine
from .query_processor import QueryProcessor, normalize_text
from .relevance_scorer import RelevanceScorer, ScoreResult
from .result_highlighter import ResultHighlighter

__all__ = [
    'SearchEngine',
    'QueryProcessor',
    'normalize_text',
    'RelevanceScorer',
    'ScoreResult',
    'ResultHighlighter'
]
