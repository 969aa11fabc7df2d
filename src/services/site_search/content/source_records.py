"""
Typed source records consumed by the document builder.
One model per kind of searchable content; optional fields default to empty.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class GlossaryTermRecord(BaseModel):
    id: str
    term: str
    definition: str
    slug: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    aliases: List[str] = Field(default_factory=list)


class CriminalChargeRecord(BaseModel):
    id: str
    name: str
    name_es: Optional[str] = None
    jurisdiction: str
    category: str
    description: str
    description_es: Optional[str] = None
    code: Optional[str] = None
    max_penalty: str = ""
    common_defenses: List[str] = Field(default_factory=list)


class DiversionProgramRecord(BaseModel):
    id: str
    name: str
    state: str
    county: Optional[str] = None
    jurisdiction_type: str
    program_types: List[str] = Field(default_factory=list)
    eligibility_notes: Optional[str] = None


class ExpungementRuleRecord(BaseModel):
    id: str
    state: str
    state_code: Optional[str] = None
    overview: str
    exclusions: List[str] = Field(default_factory=list)
    conditions: List[str] = Field(default_factory=list)


class MockQARecord(BaseModel):
    id: str
    proceeding_type: str
    case_phase: str
    question: str
    suggested_response: Optional[str] = None
    question_es: Optional[str] = None
    suggested_response_es: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class StaticPageRecord(BaseModel):
    """Hand-authored page, fixed in code"""
    id: str
    title: str
    title_es: Optional[str] = None
    content: str
    tags: List[str] = Field(default_factory=list)
    aliases: List[str] = Field(default_factory=list)
    url: str


class SourceCollections(BaseModel):
    """Everything the document builder reads from the data directory"""
    glossary_terms: List[GlossaryTermRecord] = Field(default_factory=list)
    criminal_charges: List[CriminalChargeRecord] = Field(default_factory=list)
    diversion_programs: List[DiversionProgramRecord] = Field(default_factory=list)
    expungement_rules: List[ExpungementRuleRecord] = Field(default_factory=list)
    mock_qa: List[MockQARecord] = Field(default_factory=list)
