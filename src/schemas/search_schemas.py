from typing import Optional, List, Dict, Tuple
from enum import Enum
from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """Closed set of searchable content categories"""
    GLOSSARY = "glossary"
    CHARGE = "charge"
    DIVERSION_PROGRAM = "diversion_program"
    EXPUNGEMENT = "expungement"
    LEGAL_RESOURCE = "legal_resource"
    COURT = "court"
    MOCK_QA = "mock_qa"
    RIGHTS_INFO = "rights_info"


class Language(str, Enum):
    """Supported search languages"""
    EN = "en"
    ES = "es"


CONTENT_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    ContentType.GLOSSARY.value: {"en": "Legal Terms", "es": "Términos Legales"},
    ContentType.CHARGE.value: {"en": "Criminal Charges", "es": "Cargos Criminales"},
    ContentType.DIVERSION_PROGRAM.value: {"en": "Diversion Programs", "es": "Programas de Diversión"},
    ContentType.EXPUNGEMENT.value: {"en": "Expungement", "es": "Eliminación de Antecedentes"},
    ContentType.LEGAL_RESOURCE.value: {"en": "Legal Resources", "es": "Recursos Legales"},
    ContentType.COURT.value: {"en": "Court Information", "es": "Información del Tribunal"},
    ContentType.MOCK_QA.value: {"en": "Court Preparation", "es": "Preparación para el Tribunal"},
    ContentType.RIGHTS_INFO.value: {"en": "Know Your Rights", "es": "Conozca Sus Derechos"},
}


class SearchDocument(BaseModel):
    """A single indexed, searchable unit"""
    id: str
    type: ContentType
    title: str
    title_es: Optional[str] = None
    content: str
    content_es: Optional[str] = None
    tags: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    jurisdiction: Optional[str] = None
    url: str

    class Config:
        frozen = True

    def localized_title(self, language: str) -> str:
        if language == Language.ES and self.title_es:
            return self.title_es
        return self.title

    def localized_content(self, language: str) -> str:
        if language == Language.ES and self.content_es:
            return self.content_es
        return self.content


class SearchFilters(BaseModel):
    """Optional result filters. Unknown type names simply match nothing."""
    types: Optional[List[str]] = None
    jurisdiction: Optional[str] = None


class SearchQuery(BaseModel):
    """Schema for a site search request"""
    query: str
    language: Language = Language.EN
    filters: Optional[SearchFilters] = None
    limit: Optional[int] = None
    offset: int = 0


class Highlight(BaseModel):
    field: str
    snippet: str


class SearchResult(BaseModel):
    """Schema for one scored hit"""
    document: SearchDocument
    score: float
    highlights: List[Highlight] = Field(default_factory=list)
    matched_terms: List[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Schema for a site search response"""
    query: str
    results: List[SearchResult] = Field(default_factory=list)
    total_count: int = 0
    grouped_results: Dict[str, List[SearchResult]] = Field(default_factory=dict)
    suggestions: List[str] = Field(default_factory=list)
    search_time_ms: float = 0.0


class IndexStats(BaseModel):
    """Schema for index diagnostics"""
    total_documents: int
    documents_by_type: Dict[str, int] = Field(default_factory=dict)


# Bilingual labels for court proceedings that have canned Q&A practice sets
PROCEEDING_LABELS: Dict[str, Dict[str, str]] = {
    "arraignment": {"en": "Arraignment", "es": "Lectura de Cargos"},
    "bail_hearing": {"en": "Bail Hearing", "es": "Audiencia de Fianza"},
    "pretrial_hearing": {"en": "Pretrial Hearing", "es": "Audiencia Preliminar"},
    "plea_hearing": {"en": "Plea Hearing", "es": "Audiencia de Declaración"},
    "trial": {"en": "Trial", "es": "Juicio"},
    "sentencing": {"en": "Sentencing", "es": "Sentencia"},
    "probation_violation": {"en": "Probation Violation Hearing", "es": "Audiencia de Violación de Libertad Condicional"},
}
