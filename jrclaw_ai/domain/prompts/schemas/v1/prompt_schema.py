"""Pydantic schemas for the records a legal prompt is built from."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class _ResolvableEnum(str, Enum):
    """String enum with a total lookup by stored value or member name."""

    @classmethod
    def resolve(cls, value: object) -> Optional["_ResolvableEnum"]:
        """Return the matching member, or None when the value is not recognised.

        Accepts the stored (Portuguese) value, e.g. "gramatical", or the
        member name in any case with "-" or " " for "_", e.g. "grammatical"
        or "legal-grounding".
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value:
            return None
        try:
            return cls(value)
        except ValueError:
            pass
        name = value.strip().upper().replace("-", "_").replace(" ", "_")
        return cls.__members__.get(name)


class Tone(_ResolvableEnum):
    """Tones that carry an extra writing directive."""

    COMBATIVE = "combativo"
    CONCILIATORY = "conciliatorio"
    DIDACTIC = "didatico"


class Length(_ResolvableEnum):
    """Document lengths that carry an extra writing directive."""

    CONCISE = "conciso"
    EXHAUSTIVE = "exaustivo"


class ReviewType(_ResolvableEnum):
    """Review focus modes."""

    COMPLETE = "completa"
    GRAMMATICAL = "gramatical"
    LEGAL_GROUNDING = "juridica"
    STRATEGIC = "estrategica"
    RISK = "risco"
    CONTRACT = "contrato"


class PromptRecord(BaseModel):
    """Base for request records.

    An explicit null on an optional field means "not provided" and falls
    back to the field default (empty list, empty string, ...). Required
    fields still reject null.
    """

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: object, info: ValidationInfo) -> object:
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class ClientRef(PromptRecord):
    """Client attached to a case."""

    name: str
    tax_id: Optional[str] = None  # CPF or CNPJ


class JudgeRef(PromptRecord):
    """Presiding judge."""

    name: str


class CaseParty(PromptRecord):
    """A party to a case and its procedural role."""

    name: str
    role: str


class Creditor(PromptRecord):
    """A creditor listed in a judicial recovery case."""

    name: str
    creditor_class: str
    updated_value: Optional[float] = Field(default=None, allow_inf_nan=False)


class CaseContext(PromptRecord):
    """Case (processo) data linked to a request."""

    case_number: Optional[str] = None
    case_type: Optional[str] = None
    status: Optional[str] = None
    procedural_phase: Optional[str] = None
    court_division: Optional[str] = None  # vara
    district: Optional[str] = None  # comarca
    court: Optional[str] = None  # tribunal
    state: Optional[str] = None  # UF
    claim_value: Optional[float] = Field(default=None, allow_inf_nan=False)
    risk_value: Optional[float] = Field(default=None, allow_inf_nan=False)
    client: Optional[ClientRef] = None
    judge: Optional[JudgeRef] = None
    parties: list[CaseParty] = Field(default_factory=list)
    creditors: list[Creditor] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class ProjectDocument(PromptRecord):
    """A document attached to a project."""

    title: str
    document_type: str


class ProjectContext(PromptRecord):
    """Project (projeto) data linked to a request."""

    code: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    involved_value: Optional[float] = Field(default=None, allow_inf_nan=False)
    client_name: Optional[str] = None
    documents: list[ProjectDocument] = Field(default_factory=list)


class KnowledgeEntry(PromptRecord):
    """A curated entry from the firm's legal library."""

    title: str
    entry_type: str
    area: Optional[str] = None
    summary: Optional[str] = None
    content: Optional[str] = None
    source: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class ReferenceDocument(PromptRecord):
    """A document the requester uploaded as reference material."""

    filename: str
    label: str
    text: str


class PromptConfig(PromptRecord):
    """Everything needed to build a document generation prompt.

    tone, length and audience are free strings: values outside Tone and
    Length are rendered as given and simply get no extra directive.
    """

    document_type: str
    case: Optional[CaseContext] = None
    project: Optional[ProjectContext] = None
    knowledge_entries: list[KnowledgeEntry] = Field(default_factory=list)

    tone: str = "tecnico"
    length: str = "padrao"
    audience: str = "Juiz"
    include_case_law: bool = True
    include_doctrine: bool = False

    user_instructions: str = ""
    # Accepted for the host application; not rendered into the prompt
    reference_documents: list[ReferenceDocument] = Field(default_factory=list)
