"""
Document builder for site search.
Maps every source record onto the uniform SearchDocument schema.
"""

import re
from typing import Iterable, List, Optional
from urllib.parse import quote

from ..base import BaseService
from ....schemas.search_schemas import PROCEEDING_LABELS, ContentType, SearchDocument
from .content_loader import ContentLoader
from .source_records import (
    CriminalChargeRecord, DiversionProgramRecord, ExpungementRuleRecord,
    GlossaryTermRecord, MockQARecord, SourceCollections, StaticPageRecord,
)
from .static_pages import STATIC_PAGES

EXPUNGEMENT_ALIASES = ("expunction", "record sealing", "record clearing")


def _document_id(content_type: ContentType, source_id: str) -> str:
    return f"{content_type.value}-{source_id}"


def _unique(values: Iterable[str]) -> tuple:
    return tuple(dict.fromkeys(value for value in values if value))


class DocumentBuilder(BaseService):
    """
    Service for turning source collections into indexable documents.

    build() has no side effects; the search engine decides when to call it
    and keeps the result.
    """

    def __init__(self, content_loader: Optional[ContentLoader] = None,
                 collections: Optional[SourceCollections] = None,
                 static_pages: Optional[List[StaticPageRecord]] = None):
        """
        Initialize the document builder.

        Args:
            content_loader: Loader for the JSON source collections
            collections: Preloaded collections, used instead of the loader
            static_pages: Hand-authored pages (defaults to STATIC_PAGES)
        """
        super().__init__()
        self.content_loader = content_loader
        self.collections = collections
        self.static_pages = static_pages if static_pages is not None else STATIC_PAGES

    def get_service_name(self) -> str:
        """Get the service name."""
        return "document_builder"

    def _get_collections(self) -> SourceCollections:
        if self.collections is not None:
            return self.collections
        if self.content_loader is not None:
            return self.content_loader.load_collections()
        return SourceCollections()

    def build(self) -> List[SearchDocument]:
        """
        Build the full document list in a fixed order: glossary, charges,
        diversion programs, expungement rules, mock Q&A, static pages.

        Returns:
            List[SearchDocument]: Documents with unique ids
        """
        collections = self._get_collections()

        candidates: List[SearchDocument] = []
        candidates.extend(self.from_glossary_term(term) for term in collections.glossary_terms)
        candidates.extend(self.from_criminal_charge(charge) for charge in collections.criminal_charges)
        candidates.extend(self.from_diversion_program(program) for program in collections.diversion_programs)
        candidates.extend(self.from_expungement_rule(rule) for rule in collections.expungement_rules)
        candidates.extend(self.from_mock_qa(entry) for entry in collections.mock_qa)
        candidates.extend(self.from_static_page(page) for page in self.static_pages)

        documents = []
        seen_ids = set()
        for document in candidates:
            if document.id in seen_ids:
                self._log_warning(f"Skipping duplicate document id: {document.id}")
                continue
            seen_ids.add(document.id)
            documents.append(document)

        self._log_info(
            f"Built {len(documents)} documents "
            f"(glossary={len(collections.glossary_terms)}, "
            f"charges={len(collections.criminal_charges)}, "
            f"diversion={len(collections.diversion_programs)}, "
            f"expungement={len(collections.expungement_rules)}, "
            f"mock_qa={len(collections.mock_qa)}, "
            f"static={len(self.static_pages)})"
        )
        return documents

    def from_glossary_term(self, term: GlossaryTermRecord) -> SearchDocument:
        return SearchDocument(
            id=_document_id(ContentType.GLOSSARY, term.id),
            type=ContentType.GLOSSARY,
            title=term.term,
            content=term.definition,
            tags=tuple(term.tags),
            aliases=tuple(term.aliases),
            url=f"/legal-glossary#{term.slug or term.id}",
        )

    def from_criminal_charge(self, charge: CriminalChargeRecord) -> SearchDocument:
        content = (
            f"{charge.description}. "
            f"Common defenses: {', '.join(charge.common_defenses)}. "
            f"Maximum penalty: {charge.max_penalty}"
        )
        return SearchDocument(
            id=_document_id(ContentType.CHARGE, charge.id),
            type=ContentType.CHARGE,
            title=charge.name,
            title_es=charge.name_es or None,
            content=content,
            content_es=charge.description_es or None,
            tags=_unique([charge.category, charge.jurisdiction]),
            jurisdiction=charge.jurisdiction,
            url=f"/case-guidance?charge={quote(charge.name, safe='')}",
        )

    def from_diversion_program(self, program: DiversionProgramRecord) -> SearchDocument:
        content = (
            f"{program.name} in {program.county or program.state}. "
            f"Program types: {', '.join(program.program_types)}. "
            f"{program.eligibility_notes or ''}"
        ).strip()
        return SearchDocument(
            id=_document_id(ContentType.DIVERSION_PROGRAM, program.id),
            type=ContentType.DIVERSION_PROGRAM,
            title=program.name,
            content=content,
            tags=_unique([*program.program_types, program.state, program.jurisdiction_type]),
            jurisdiction=program.state,
            url=f"/diversion-programs#{program.id}",
        )

    def from_expungement_rule(self, rule: ExpungementRuleRecord) -> SearchDocument:
        content = (
            f"{rule.overview}. "
            f"Exclusions: {', '.join(rule.exclusions)}. "
            f"Conditions: {', '.join(rule.conditions)}"
        )
        state_slug = re.sub(r'\s+', '-', rule.state.strip().lower())
        return SearchDocument(
            id=_document_id(ContentType.EXPUNGEMENT, rule.id),
            type=ContentType.EXPUNGEMENT,
            title=f"{rule.state} Expungement Rules",
            content=content,
            tags=_unique(["expungement", "record clearing", rule.state]),
            aliases=EXPUNGEMENT_ALIASES,
            jurisdiction=rule.state_code or rule.state,
            url=f"/record-expungement#{state_slug}",
        )

    def from_mock_qa(self, entry: MockQARecord) -> SearchDocument:
        label = PROCEEDING_LABELS.get(entry.proceeding_type)
        if label is None:
            fallback = entry.proceeding_type.replace('_', ' ').title()
            label = {'en': fallback, 'es': fallback}

        content = " ".join(part for part in (entry.question, entry.suggested_response) if part)

        content_es = None
        if entry.question_es:
            content_es = " ".join(
                part for part in (entry.question_es, entry.suggested_response_es) if part
            )

        return SearchDocument(
            id=_document_id(ContentType.MOCK_QA, entry.id),
            type=ContentType.MOCK_QA,
            title=f"{label['en']} Preparation",
            title_es=f"Preparación para {label['es']}",
            content=content,
            content_es=content_es,
            tags=_unique([entry.proceeding_type, entry.case_phase, *entry.tags]),
            url=f"/process?proceeding={entry.proceeding_type}",
        )

    def from_static_page(self, page: StaticPageRecord) -> SearchDocument:
        return SearchDocument(
            id=_document_id(ContentType.RIGHTS_INFO, page.id),
            type=ContentType.RIGHTS_INFO,
            title=page.title,
            title_es=page.title_es or None,
            content=page.content,
            tags=tuple(page.tags),
            aliases=tuple(page.aliases),
            url=page.url,
        )
