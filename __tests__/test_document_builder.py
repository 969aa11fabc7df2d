"""
Tests for mapping source records onto search documents.
"""

from src.schemas.search_schemas import ContentType
from src.services.site_search.content import DocumentBuilder, SourceCollections
from src.services.site_search.content.source_records import GlossaryTermRecord, StaticPageRecord
from src.services.site_search.content.static_pages import STATIC_PAGES


def _by_id(documents):
    return {document.id: document for document in documents}


def test_build_is_deterministic(document_builder):
    first = document_builder.build()
    second = document_builder.build()
    assert [d.id for d in first] == [d.id for d in second]
    assert first == second


def test_build_order_and_counts(document_builder, source_collections):
    documents = document_builder.build()
    types = [document.type for document in documents]

    assert len(documents) == 10 + len(STATIC_PAGES)
    assert types[:2] == [ContentType.GLOSSARY] * 2
    assert types[2:4] == [ContentType.CHARGE] * 2
    assert types[4:6] == [ContentType.DIVERSION_PROGRAM] * 2
    assert types[6:8] == [ContentType.EXPUNGEMENT] * 2
    assert types[8:10] == [ContentType.MOCK_QA] * 2
    assert set(types[10:]) == {ContentType.RIGHTS_INFO}


def test_document_ids_are_unique(document_builder):
    documents = document_builder.build()
    assert len({document.id for document in documents}) == len(documents)


def test_glossary_term(document_builder):
    document = _by_id(document_builder.build())["glossary-attorney"]
    assert document.title == "Attorney"
    assert document.content == "A person licensed to practice law."
    assert document.aliases == ("counsel",)
    assert document.tags == ("people",)
    assert document.url == "/legal-glossary#attorney"
    assert document.title_es is None


def test_glossary_url_falls_back_to_id(document_builder):
    document = _by_id(document_builder.build())["glossary-bail"]
    assert document.url == "/legal-glossary#bail"
    assert document.tags == ()
    assert document.aliases == ()


def test_criminal_charge(document_builder):
    document = _by_id(document_builder.build())["charge-ca-dui"]
    assert document.title == "DUI - First Offense"
    assert document.title_es == "Conducir Bajo la Influencia"
    assert document.content == (
        "Driving while impaired. Common defenses: Improper stop, Bad breath test. "
        "Maximum penalty: 6 months"
    )
    assert document.content_es == "Conducir bajo la influencia del alcohol"
    assert document.tags == ("traffic", "CA")
    assert document.jurisdiction == "CA"
    assert document.url == "/case-guidance?charge=DUI%20-%20First%20Offense"


def test_criminal_charge_without_translation(document_builder):
    document = _by_id(document_builder.build())["charge-tx-theft"]
    assert document.title_es is None
    assert document.content_es is None
    assert document.content == "Taking property of another. Common defenses: . Maximum penalty: "


def test_diversion_program(document_builder):
    document = _by_id(document_builder.build())["diversion_program-la-mhd"]
    assert document.content == (
        "Mental Health Diversion in Los Angeles County. "
        "Program types: mental health, county. Qualifying mental disorder."
    )
    # "county" appears as both a program type and the jurisdiction type
    assert document.tags == ("mental health", "county", "CA")
    assert document.jurisdiction == "CA"


def test_diversion_program_without_county_or_notes(document_builder):
    document = _by_id(document_builder.build())["diversion_program-fl-pti"]
    assert document.content == "Pretrial Intervention in FL. Program types: pretrial diversion."
    assert document.tags == ("pretrial diversion", "FL", "state")


def test_expungement_rule(document_builder):
    document = _by_id(document_builder.build())["expungement-ny"]
    assert document.title == "New York Expungement Rules"
    assert document.content == (
        "Sealing after ten years. Exclusions: Sex offenses. Conditions: Ten years elapsed"
    )
    assert document.tags == ("expungement", "record clearing", "New York")
    assert document.aliases == ("expunction", "record sealing", "record clearing")
    assert document.jurisdiction == "NY"
    assert document.url == "/record-expungement#new-york"


def test_expungement_rule_without_state_code(document_builder):
    document = _by_id(document_builder.build())["expungement-nv"]
    assert document.jurisdiction == "Nevada"
    assert document.content == "Record sealing available. Exclusions: . Conditions: "


def test_mock_qa_entry(document_builder):
    document = _by_id(document_builder.build())["mock_qa-arr-1"]
    assert document.title == "Arraignment Preparation"
    assert document.title_es == "Preparación para Lectura de Cargos"
    assert document.content == "How do you plead? Not guilty."
    assert document.content_es == "¿Cómo se declara? No culpable."
    assert document.tags == ("arraignment", "plea", "critical")
    assert document.url == "/process?proceeding=arraignment"


def test_mock_qa_unknown_proceeding_type(document_builder):
    document = _by_id(document_builder.build())["mock_qa-x-1"]
    assert document.title == "Competency Hearing Preparation"
    assert document.content == "Do you understand the proceedings?"
    assert document.content_es is None
    assert document.tags == ("competency_hearing", "pretrial")


def test_static_pages_are_rights_info(document_builder):
    documents = _by_id(document_builder.build())
    miranda = documents["rights_info-miranda"]
    assert miranda.title == "Miranda Rights"
    assert miranda.title_es == "Derechos Miranda"
    assert "miranda warning" in miranda.aliases
    for page_id in ("speedy-trial", "jury", "attorney", "search-seizure", "phone-search",
                    "immigration-know-your-rights", "page-home"):
        assert f"rights_info-{page_id}" in documents


def test_builder_without_sources_only_has_static_pages():
    documents = DocumentBuilder(static_pages=[]).build()
    assert documents == []


def test_duplicate_ids_keep_first():
    collections = SourceCollections(glossary_terms=[
        GlossaryTermRecord(id="bail", term="Bail", definition="First"),
        GlossaryTermRecord(id="bail", term="Bail", definition="Second"),
    ])
    documents = DocumentBuilder(collections=collections, static_pages=[]).build()
    assert [document.content for document in documents] == ["First"]


def test_custom_static_pages():
    page = StaticPageRecord(id="faq", title="FAQ", content="Questions", url="/faq")
    documents = DocumentBuilder(collections=SourceCollections(), static_pages=[page]).build()
    assert len(documents) == 1
    assert documents[0].id == "rights_info-faq"
    assert documents[0].tags == ()


def test_builder_reads_from_loader(tmp_path):
    import json
    for name in ("criminal_charges", "diversion_programs", "expungement_rules", "mock_qa"):
        (tmp_path / f"{name}.json").write_text("[]", encoding="utf-8")
    (tmp_path / "glossary_terms.json").write_text(
        json.dumps([{"id": "plea", "term": "Plea", "definition": "An answer to a charge."}]),
        encoding="utf-8",
    )

    from src.services.site_search.content import ContentLoader
    builder = DocumentBuilder(ContentLoader(str(tmp_path)), static_pages=[])
    documents = builder.build()
    assert [document.id for document in documents] == ["glossary-plea"]
