"""
Tests for search request validation.
"""

import pytest

from src.schemas.search_schemas import Language
from src.services.site_search import SearchValidator, ValidationError


@pytest.fixture
def validator():
    return SearchValidator(min_query_length=2, max_query_length=100,
                           default_limit=20, max_limit=50)


def test_query_is_trimmed(validator):
    assert validator.validate_search_query("  bail  ") == "bail"


@pytest.mark.parametrize("query", [None, "", " ", "a", "x" * 101])
def test_query_length_bounds(validator, query):
    with pytest.raises(ValidationError):
        validator.validate_search_query(query)


def test_query_at_bounds(validator):
    assert validator.validate_search_query("ab") == "ab"
    assert validator.validate_search_query("x" * 100) == "x" * 100


def test_script_in_query_rejected(validator):
    with pytest.raises(ValidationError):
        validator.validate_search_query("<script>alert(1)</script>")


def test_language_falls_back_to_english(validator):
    assert validator.validate_language("es") == Language.ES
    assert validator.validate_language(" ES ") == Language.ES
    assert validator.validate_language("fr") == Language.EN
    assert validator.validate_language(None) == Language.EN


def test_content_types(validator):
    assert validator.validate_content_types(None) is None
    assert validator.validate_content_types(" , ") is None
    assert validator.validate_content_types("charge, glossary,charge") == ["charge", "glossary"]
    assert validator.validate_content_types(["mock_qa"]) == ["mock_qa"]


def test_unknown_content_type_rejected(validator):
    with pytest.raises(ValidationError) as excinfo:
        validator.validate_content_types("charge,statute")
    assert "statute" in str(excinfo.value)


def test_jurisdiction(validator):
    assert validator.validate_jurisdiction(None) is None
    assert validator.validate_jurisdiction("  ") is None
    assert validator.validate_jurisdiction(" CA ") == "CA"
    assert validator.validate_jurisdiction("federal") == "federal"
    with pytest.raises(ValidationError):
        validator.validate_jurisdiction("C")
    with pytest.raises(ValidationError):
        validator.validate_jurisdiction("CA; DROP")


def test_limit_is_clamped(validator):
    assert validator.validate_limit(None) == 20
    assert validator.validate_limit(0) == 20
    assert validator.validate_limit(-3) == 20
    assert validator.validate_limit(10) == 10
    assert validator.validate_limit(500) == 50
    with pytest.raises(ValidationError):
        validator.validate_limit("many")


def test_offset(validator):
    assert validator.validate_offset(None) == 0
    assert validator.validate_offset(40) == 40
    with pytest.raises(ValidationError):
        validator.validate_offset(-1)
