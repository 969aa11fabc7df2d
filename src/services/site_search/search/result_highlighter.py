"""
Result highlighter for site search.
Picks the snippet of a document's content that covers the most matched terms.
"""

from typing import List

from ..base import BaseService
from .query_processor import normalize_text

WINDOW_STEP = 20
ELLIPSIS = "..."


class ResultHighlighter(BaseService):
    """
    Service for extracting highlight snippets from search results.
    """

    def __init__(self, default_snippet_length: int = 150, window_step: int = WINDOW_STEP):
        """
        Initialize the result highlighter.

        Args:
            default_snippet_length: Snippet length when the caller gives none
            window_step: Distance in characters between candidate windows
        """
        super().__init__()
        self.default_snippet_length = default_snippet_length
        self.window_step = window_step

    def get_service_name(self) -> str:
        """Get the service name."""
        return "result_highlighter"

    def highlight(self, content: str, matched_terms: List[str],
                  max_length: int = None) -> str:
        """
        Get the snippet of content around the densest cluster of matched terms.

        Candidate windows of `max_length` characters start every `window_step`
        characters. The window containing the most distinct matched terms wins;
        ties keep the earliest window.

        Args:
            content: Language-appropriate document content
            matched_terms: Terms the scorer matched for this document
            max_length: Snippet length

        Returns:
            str: Snippet, with "..." marking text cut at either end
        """
        content = content or ""
        max_length = max_length or self.default_snippet_length

        if len(content) <= max_length:
            return content

        terms = {normalize_text(term) for term in matched_terms}
        terms.discard("")

        best_start = 0
        best_count = 0
        for start in range(0, len(content) - max_length, self.window_step):
            window = normalize_text(content[start:start + max_length])
            count = sum(1 for term in terms if term in window)
            if count > best_count:
                best_count = count
                best_start = start

        snippet = content[best_start:best_start + max_length]
        if best_start > 0:
            snippet = ELLIPSIS + snippet
        if best_start + max_length < len(content):
            snippet = snippet + ELLIPSIS

        return snippet
