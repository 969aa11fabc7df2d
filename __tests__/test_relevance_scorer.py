"""
Tests for field-weighted scoring and content type boosts.
"""

import pytest

from src.schemas.search_schemas import ContentType, Language
from src.services.site_search.search import RelevanceScorer
from src.services.site_search.search.relevance_scorer import CONTENT_TYPE_BOOSTS

from conftest import make_document


@pytest.fixture
def scorer():
    # Neutral boosts so raw field weights are visible
    return RelevanceScorer(boosts={content_type: 1.0 for content_type in ContentType})


def test_exact_title_match(scorer):
    document = make_document("g-1", title="Bail")
    result = scorer.score_document(document, ["bail"])
    assert result.score == 100
    assert result.matched_terms == ["bail"]


def test_partial_title_match(scorer):
    document = make_document("g-1", title="Bail Hearing")
    assert scorer.score_document(document, ["bail"]).score == 50


def test_alias_matches(scorer):
    exact = make_document("g-1", title="Attorney", aliases=("lawyer",))
    partial = make_document("g-2", title="Attorney", aliases=("free lawyer",))
    assert scorer.score_document(exact, ["lawyer"]).score == 80
    assert scorer.score_document(partial, ["lawyer"]).score == 40


def test_tag_match_requires_exact_tag(scorer):
    document = make_document("g-1", title="Bond", tags=("pretrial release",))
    assert scorer.score_document(document, ["pretrial release"]).score == 30
    assert scorer.score_document(document, ["pretrial"]).score == 0


def test_content_occurrences_are_capped(scorer):
    once = make_document("g-1", title="X", content="warrant")
    many = make_document("g-2", title="X", content="warrant " * 9)
    assert scorer.score_document(once, ["warrant"]).score == 5
    assert scorer.score_document(many, ["warrant"]).score == 25


def test_fields_add_up_across_terms(scorer):
    document = make_document(
        "g-1", title="Bail", aliases=("bond",), tags=("bail",),
        content="Bail or bond lets you leave jail.",
    )
    result = scorer.score_document(document, ["bail", "bond"])
    # bail: title 100 + tag 30 + content 5; bond: alias 80 + content 5
    assert result.score == 220
    assert result.matched_terms == ["bail", "bond"]


def test_fields_are_compared_after_normalization(scorer):
    document = make_document("g-1", title="DUI - First Offense", content="")
    assert scorer.score_document(document, ["dui first offense"]).score == 100


def test_no_match_scores_zero(scorer):
    document = make_document("g-1", title="Bail", content="Money for release")
    result = scorer.score_document(document, ["zzqqnomatch"])
    assert result.score == 0
    assert result.matched_terms == []


def test_empty_terms_match_nothing(scorer):
    document = make_document("g-1", title="Bail", content="Money for release")
    assert scorer.score_document(document, ["", "   "]).score == 0


def test_matched_terms_are_deduplicated(scorer):
    document = make_document("g-1", title="Bail")
    assert scorer.score_document(document, ["bail", "BAIL"]).matched_terms == ["bail"]


def test_spanish_fields_used_for_spanish_searches(scorer):
    document = make_document(
        "c-1", doc_type=ContentType.CHARGE, title="Petty Theft", title_es="Robo Menor",
        content="Taking property", content_es="Tomar propiedad ajena",
    )
    assert scorer.score_document(document, ["robo menor"], Language.ES).score == 100
    assert scorer.score_document(document, ["robo menor"], Language.EN).score == 0
    assert scorer.score_document(document, ["propiedad"], "es").score == 5


def test_spanish_search_falls_back_to_default_fields(scorer):
    document = make_document("g-1", title="Bail", content="Money for release")
    assert scorer.score_document(document, ["bail"], Language.ES).score == 100


def test_content_type_boost_ordering():
    scorer = RelevanceScorer()
    scores = {}
    for content_type in ContentType:
        document = make_document("d-1", doc_type=content_type, title="Warrant")
        scores[content_type] = scorer.score_document(document, ["warrant"]).score

    assert scores[ContentType.CHARGE] == pytest.approx(130)
    assert scores[ContentType.MOCK_QA] == pytest.approx(80)
    for higher in ContentType:
        for lower in ContentType:
            if CONTENT_TYPE_BOOSTS[higher] > CONTENT_TYPE_BOOSTS[lower]:
                assert scores[higher] > scores[lower]
