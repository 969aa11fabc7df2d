"""
Relevance scorer for site search.
Field-weighted literal matching with a per-content-type boost.
"""

from typing import Dict, List, NamedTuple

from ..base import BaseService
from ....schemas.search_schemas import ContentType, SearchDocument
from .query_processor import normalize_text

TITLE_EXACT_SCORE = 100
TITLE_PARTIAL_SCORE = 50
ALIAS_EXACT_SCORE = 80
ALIAS_PARTIAL_SCORE = 40
TAG_EXACT_SCORE = 30
CONTENT_OCCURRENCE_SCORE = 5
CONTENT_SCORE_CAP = 25

CONTENT_TYPE_BOOSTS: Dict[ContentType, float] = {
    ContentType.GLOSSARY: 1.2,
    ContentType.CHARGE: 1.3,
    ContentType.DIVERSION_PROGRAM: 1.1,
    ContentType.EXPUNGEMENT: 1.1,
    ContentType.LEGAL_RESOURCE: 1.0,
    ContentType.COURT: 0.9,
    ContentType.MOCK_QA: 0.8,
    ContentType.RIGHTS_INFO: 1.15,
}


class ScoreResult(NamedTuple):
    score: float
    matched_terms: List[str]


class RelevanceScorer(BaseService):
    """
    Service for scoring documents against expanded query terms.
    """

    def __init__(self, boosts: Dict[ContentType, float] = None):
        super().__init__()
        self.boosts = boosts or CONTENT_TYPE_BOOSTS

    def get_service_name(self) -> str:
        """Get the service name."""
        return "relevance_scorer"

    def score_document(self, document: SearchDocument, query_terms: List[str],
                       language: str = "en") -> ScoreResult:
        """
        Score one document against the expanded query terms.

        Args:
            document: Document to score
            query_terms: Normalized query variants from synonym expansion
            language: Search language, selects title/content variants

        Returns:
            ScoreResult: Boosted score and the de-duplicated matched terms
        """
        title = normalize_text(document.localized_title(language))
        content = normalize_text(document.localized_content(language))
        aliases = [normalize_text(alias) for alias in document.aliases]
        tags = [normalize_text(tag) for tag in document.tags]

        score = 0
        matched_terms = []

        for term in query_terms:
            term = normalize_text(term)
            if not term:
                continue

            matched = False

            if title == term:
                score += TITLE_EXACT_SCORE
                matched = True
            elif term in title:
                score += TITLE_PARTIAL_SCORE
                matched = True

            if term in aliases:
                score += ALIAS_EXACT_SCORE
                matched = True
            elif any(term in alias for alias in aliases):
                score += ALIAS_PARTIAL_SCORE
                matched = True

            if term in tags:
                score += TAG_EXACT_SCORE
                matched = True

            occurrences = content.count(term)
            if occurrences:
                score += min(occurrences * CONTENT_OCCURRENCE_SCORE, CONTENT_SCORE_CAP)
                matched = True

            if matched and term not in matched_terms:
                matched_terms.append(term)

        boost = self.boosts.get(document.type, 1.0)
        return ScoreResult(score=score * boost, matched_terms=matched_terms)
