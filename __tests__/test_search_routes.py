"""
Tests for the search HTTP endpoints.
"""

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from src.core.config import settings
from src.routers import search_routes
from src.schemas.search_schemas import ContentType
from src.services.site_search import SiteSearchOrchestrator
from src.utils.exception_handlers import validation_exception_handler

from conftest import StaticDocumentBuilder, make_document

SEARCH_URL = f"{settings.api_prefix}/search"


def _documents():
    documents = [
        make_document("glossary-attorney", ContentType.GLOSSARY, "Attorney",
                      "A person licensed to practice law."),
        make_document("charge-ca-dui", ContentType.CHARGE, "DUI - First Offense",
                      "Driving while impaired.", jurisdiction="CA",
                      title_es="Conducir Bajo la Influencia"),
        make_document("charge-tx-dwi", ContentType.CHARGE, "Driving While Intoxicated",
                      "Operating a vehicle while intoxicated.", jurisdiction="TX"),
    ]
    documents += [
        make_document(f"mock_qa-{i}", ContentType.MOCK_QA, f"Warrant question {i}", "Warrant")
        for i in range(60)
    ]
    return documents


@pytest.fixture
def client():
    app = FastAPI()
    app.state.redis = None
    app.state.site_search = SiteSearchOrchestrator(
        None, document_builder=StaticDocumentBuilder(_documents())
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(search_routes.router, prefix=settings.api_prefix)
    return TestClient(app)


def test_search_envelope(client):
    response = client.get(SEARCH_URL, params={"q": "lawyer"})
    assert response.status_code == 200

    payload = response.json()
    assert payload["status_code"] == 200
    body = payload["body"]
    assert body["query"] == "lawyer"
    assert body["total_count"] == 1
    assert body["results"][0]["document"]["id"] == "glossary-attorney"
    assert set(body["grouped_results"]) == {content_type.value for content_type in ContentType}

    metadata = body["metadata"]
    assert metadata["cache_status"] == "miss"
    assert metadata["language"] == "en"
    assert metadata["limit"] == settings.search_default_limit
    assert metadata["offset"] == 0
    assert metadata["response_time_ms"] >= 0


def test_search_filters(client):
    response = client.get(SEARCH_URL, params={
        "q": "driving", "types": "charge", "jurisdiction": "TX"
    })
    assert response.status_code == 200
    ids = [r["document"]["id"] for r in response.json()["body"]["results"]]
    assert ids == ["charge-tx-dwi"]


def test_spanish_search(client):
    response = client.get(SEARCH_URL, params={"q": "conducir", "lang": "es"})
    body = response.json()["body"]
    assert body["metadata"]["language"] == "es"
    assert [r["document"]["id"] for r in body["results"]] == ["charge-ca-dui"]


def test_limit_is_clamped(client):
    body = client.get(SEARCH_URL, params={"q": "warrant", "limit": 500}).json()["body"]
    assert body["total_count"] == 60
    assert len(body["results"]) == settings.search_max_limit
    assert body["metadata"]["limit"] == settings.search_max_limit


def test_no_results_returns_suggestions(client):
    body = client.get(SEARCH_URL, params={"q": "counsel"}).json()["body"]
    assert body["total_count"] == 0
    assert body["results"] == []
    assert "attorney" in body["suggestions"]


@pytest.mark.parametrize("params", [
    {},
    {"q": "a"},
    {"q": "x" * 101},
    {"q": "bail", "types": "statute"},
    {"q": "bail", "jurisdiction": "C"},
    {"q": "bail", "offset": -1},
])
def test_invalid_requests(client, params):
    response = client.get(SEARCH_URL, params=params)
    assert response.status_code == 400
    assert response.json()["body"] is None


def test_non_numeric_limit(client):
    response = client.get(SEARCH_URL, params={"q": "bail", "limit": "many"})
    assert response.status_code == 422
    assert response.json()["body"]["errors"]


def test_stats(client):
    response = client.get(f"{SEARCH_URL}/stats")
    assert response.status_code == 200
    body = response.json()["body"]
    assert body["total_documents"] == 63
    assert body["documents_by_type"] == {"glossary": 1, "charge": 2, "mock_qa": 60}
    assert body["content_type_labels"]["mock_qa"]


def test_health_reports_search_service():
    from main import app

    site_search = SiteSearchOrchestrator(
        None, document_builder=StaticDocumentBuilder(_documents())
    )
    site_search.build_index()
    app.state.redis = None
    app.state.site_search = site_search
    try:
        body = TestClient(app).get("/health").json()
    finally:
        del app.state.site_search

    assert body["status"] == "healthy"
    assert body["dependencies"]["search_index"] == "healthy"
    assert body["dependencies"]["response_cache"] == "disabled"
    assert body["total_documents"] == 63
