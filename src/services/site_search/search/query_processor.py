"""
Query processor for site search.
Handles text normalization, synonym expansion, suggestions and hash generation.
"""

import hashlib
import json
import re
from typing import Dict, List, Optional

from ..base import BaseService
from .legal_synonyms import LEGAL_SYNONYMS

_NON_WORD_RUN = re.compile(r'[^\w\s]+')
_WHITESPACE_RUN = re.compile(r'\s+')


def normalize_text(text: Optional[str]) -> str:
    """
    Canonicalize text for matching: lowercase, punctuation runs to a single
    space, whitespace collapsed, trimmed.

    Every comparison in the search pipeline goes through this function.
    """
    if not text:
        return ""
    normalized = text.lower()
    normalized = _NON_WORD_RUN.sub(' ', normalized)
    normalized = _WHITESPACE_RUN.sub(' ', normalized)
    return normalized.strip()


class QueryProcessor(BaseService):
    """
    Service for processing search queries.
    Expands queries through the legal synonym dictionary and proposes
    alternate terms when nothing matched.
    """

    def __init__(self, synonyms: Optional[Dict[str, List[str]]] = None):
        """
        Initialize the query processor.

        Args:
            synonyms: Optional synonym dictionary (defaults to LEGAL_SYNONYMS)
        """
        super().__init__()
        self.synonyms = synonyms if synonyms is not None else LEGAL_SYNONYMS

    def get_service_name(self) -> str:
        """Get the service name."""
        return "query_processor"

    def expand_synonyms(self, query: str) -> List[str]:
        """
        Expand a raw query into normalized query-term variants.

        The normalized query always comes first. For every word with
        dictionary entries, each synonym contributes the query with that
        word substituted, and the bare synonym itself.

        Args:
            query: Raw search query

        Returns:
            List[str]: De-duplicated variants
        """
        normalized = normalize_text(query)
        words = normalized.split(' ') if normalized else []

        expanded = [normalized]
        seen = {normalized}

        def add(term: str):
            if term not in seen:
                seen.add(term)
                expanded.append(term)

        for position, word in enumerate(words):
            for synonym in self.synonyms.get(word, []):
                synonym = normalize_text(synonym)
                if not synonym:
                    continue
                substituted = words[:position] + [synonym] + words[position + 1:]
                add(' '.join(substituted))
                add(synonym)

        return expanded

    def suggest_alternate_terms(self, query: str, limit: int = 5) -> List[str]:
        """
        Suggest dictionary keys whose synonyms overlap the query, for use
        when a search found nothing.

        Args:
            query: Raw search query
            limit: Maximum number of suggestions

        Returns:
            List[str]: Up to `limit` dictionary keys
        """
        normalized = normalize_text(query)
        if not normalized:
            return []

        suggestions = []
        for term, synonyms in self.synonyms.items():
            for synonym in synonyms:
                candidate = normalize_text(synonym)
                if candidate and (normalized in candidate or candidate in normalized):
                    suggestions.append(term)
                    break
            if len(suggestions) >= limit:
                break

        return suggestions

    def generate_search_hash(self, query: str, language: str = "en",
                             filters: Optional[Dict] = None,
                             limit: Optional[int] = None, offset: int = 0,
                             index_version: str = "") -> str:
        """
        Generate a consistent hash for search parameters.

        Args:
            query: Search query
            language: Search language
            filters: Optional filters
            limit: Page size
            offset: Number of results to skip
            index_version: Fingerprint of the index the response was computed from

        Returns:
            str: Hash string for cache key
        """
        normalized_query = normalize_text(query)
        filters_str = json.dumps(filters, sort_keys=True) if filters else "none"
        params_str = f"{index_version}:{normalized_query}:{language}:{filters_str}:{limit}:{offset}"
        return hashlib.md5(params_str.encode()).hexdigest()
