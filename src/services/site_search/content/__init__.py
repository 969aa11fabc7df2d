"""
Content module for site search services.
Handles source loading and document building.
"""

from .content_loader import ContentLoader
from .document_builder import DocumentBuilder
from .source_records import SourceCollections

__all__ = [
    'ContentLoader',
    'DocumentBuilder',
    'SourceCollections'
]
