"""
Validators for site search inputs.
Bounds and shape checks belong to the route layer; the search engine itself
accepts whatever it is given.
"""

import re
from typing import List, Optional, Union
import logging

from ....core.config import settings
from ....schemas.search_schemas import ContentType, Language

logger = logging.getLogger(__name__)

JURISDICTION_PATTERN = re.compile(r"^[A-Za-z][A-Za-z .\-]{1,29}$")

SUSPICIOUS_PATTERNS = [
    r'<script[^>]*>.*?</script>',  # Script tags
    r'javascript:',                # JavaScript URLs
    r'on\w+\s*=',                  # Event handlers
    r'eval\s*\(',                  # Eval functions
]


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class SearchValidator:
    """
    Validator class for site search inputs.
    Provides validation methods for every search request parameter.
    """

    def __init__(self, min_query_length: Optional[int] = None,
                 max_query_length: Optional[int] = None,
                 default_limit: Optional[int] = None,
                 max_limit: Optional[int] = None):
        self.logger = logger
        self.min_query_length = min_query_length or settings.search_min_query_length
        self.max_query_length = max_query_length or settings.search_max_query_length
        self.default_limit = default_limit or settings.search_default_limit
        self.max_limit = max_limit or settings.search_max_limit

    def validate_search_query(self, query: Optional[str]) -> str:
        """
        Validate search query.

        Args:
            query: Search query to validate

        Returns:
            str: Trimmed query

        Raises:
            ValidationError: If query is invalid
        """
        if not isinstance(query, str):
            raise ValidationError("Query parameter 'q' is required")

        query = query.strip()

        if len(query) < self.min_query_length or len(query) > self.max_query_length:
            raise ValidationError(
                f"Query parameter 'q' must be {self.min_query_length}-{self.max_query_length} characters"
            )

        for pattern in SUSPICIOUS_PATTERNS:
            if re.search(pattern, query, re.IGNORECASE):
                raise ValidationError("Search query contains potentially malicious content")

        return query

    def validate_language(self, language: Optional[str]) -> Language:
        """
        Map a requested language onto a supported one. Anything unknown falls back to English.
        """
        if language and language.strip().lower() == Language.ES.value:
            return Language.ES
        return Language.EN

    def validate_content_types(self, types: Union[str, List[str], None]) -> Optional[List[str]]:
        """
        Validate a content type filter.

        Args:
            types: Comma-separated string or list of content type names

        Returns:
            Optional[List[str]]: Validated type names, or None when no filter was given

        Raises:
            ValidationError: If any type name is unknown
        """
        if not types:
            return None

        if isinstance(types, str):
            types = types.split(",")

        cleaned = [t.strip() for t in types if t and t.strip()]
        if not cleaned:
            return None

        valid_types = {content_type.value for content_type in ContentType}
        unknown = [t for t in cleaned if t not in valid_types]
        if unknown:
            raise ValidationError(
                f"Invalid content types: {', '.join(unknown)}. "
                f"Must be one of: {', '.join(sorted(valid_types))}"
            )

        # Preserve order, drop repeats
        return list(dict.fromkeys(cleaned))

    def validate_jurisdiction(self, jurisdiction: Optional[str]) -> Optional[str]:
        """
        Validate a jurisdiction filter such as "CA", "federal" or "EOIR".

        Raises:
            ValidationError: If the jurisdiction is malformed
        """
        if jurisdiction is None or not jurisdiction.strip():
            return None

        jurisdiction = jurisdiction.strip()
        if not JURISDICTION_PATTERN.match(jurisdiction):
            raise ValidationError(f"Invalid jurisdiction: {jurisdiction}")
        return jurisdiction

    def validate_limit(self, limit: Optional[int]) -> int:
        """
        Clamp the page size to 1..max_limit, defaulting when unset.
        """
        if limit is None:
            return self.default_limit
        try:
            limit = int(limit)
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid limit: {limit}")
        if limit < 1:
            return self.default_limit
        return min(limit, self.max_limit)

    def validate_offset(self, offset: Optional[int]) -> int:
        """
        Validate pagination offset.

        Raises:
            ValidationError: If offset is negative or not a number
        """
        if offset is None:
            return 0
        try:
            offset = int(offset)
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid offset: {offset}")
        if offset < 0:
            raise ValidationError("Offset cannot be negative")
        return offset
