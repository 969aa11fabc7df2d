"""
Shared fixtures for the site search tests.
"""

import pytest

from src.schemas.search_schemas import ContentType, SearchDocument
from src.services.site_search.content.source_records import (
    CriminalChargeRecord, DiversionProgramRecord, ExpungementRuleRecord,
    GlossaryTermRecord, MockQARecord, SourceCollections,
)
from src.services.site_search.content.document_builder import DocumentBuilder
from src.services.site_search.search import (
    QueryProcessor, RelevanceScorer, ResultHighlighter, SearchEngine,
)


def make_document(doc_id, doc_type=ContentType.GLOSSARY, title="Untitled", content="",
                  **fields) -> SearchDocument:
    return SearchDocument(
        id=doc_id,
        type=doc_type,
        title=title,
        content=content,
        url=fields.pop("url", f"/test/{doc_id}"),
        **fields
    )


class StaticDocumentBuilder:
    """Stands in for DocumentBuilder with a fixed document list"""

    def __init__(self, documents):
        self.documents = list(documents)
        self.build_calls = 0

    def build(self):
        self.build_calls += 1
        return list(self.documents)


def make_engine(documents, **kwargs) -> SearchEngine:
    return SearchEngine(
        StaticDocumentBuilder(documents),
        QueryProcessor(),
        RelevanceScorer(),
        ResultHighlighter(),
        **kwargs
    )


@pytest.fixture
def source_collections():
    return SourceCollections(
        glossary_terms=[
            GlossaryTermRecord(
                id="attorney", term="Attorney", slug="attorney",
                definition="A person licensed to practice law.",
                tags=["people"], aliases=["counsel"],
            ),
            GlossaryTermRecord(
                id="bail", term="Bail",
                definition="Money given to the court to secure release.",
            ),
        ],
        criminal_charges=[
            CriminalChargeRecord(
                id="ca-dui", name="DUI - First Offense",
                name_es="Conducir Bajo la Influencia",
                jurisdiction="CA", category="traffic",
                description="Driving while impaired",
                description_es="Conducir bajo la influencia del alcohol",
                max_penalty="6 months",
                common_defenses=["Improper stop", "Bad breath test"],
            ),
            CriminalChargeRecord(
                id="tx-theft", name="Theft", jurisdiction="TX", category="property",
                description="Taking property of another",
            ),
        ],
        diversion_programs=[
            DiversionProgramRecord(
                id="la-mhd", name="Mental Health Diversion", state="CA",
                county="Los Angeles County", jurisdiction_type="county",
                program_types=["mental health", "county"],
                eligibility_notes="Qualifying mental disorder.",
            ),
            DiversionProgramRecord(
                id="fl-pti", name="Pretrial Intervention", state="FL",
                jurisdiction_type="state", program_types=["pretrial diversion"],
            ),
        ],
        expungement_rules=[
            ExpungementRuleRecord(
                id="ny", state="New York", state_code="NY",
                overview="Sealing after ten years",
                exclusions=["Sex offenses"], conditions=["Ten years elapsed"],
            ),
            ExpungementRuleRecord(id="nv", state="Nevada", overview="Record sealing available"),
        ],
        mock_qa=[
            MockQARecord(
                id="arr-1", proceeding_type="arraignment", case_phase="arraignment",
                question="How do you plead?", suggested_response="Not guilty.",
                question_es="¿Cómo se declara?", suggested_response_es="No culpable.",
                tags=["plea", "critical"],
            ),
            MockQARecord(
                id="x-1", proceeding_type="competency_hearing", case_phase="pretrial",
                question="Do you understand the proceedings?",
            ),
        ],
    )


@pytest.fixture
def document_builder(source_collections):
    return DocumentBuilder(collections=source_collections)
