"""Pytest configuration and fixtures."""

import pytest

from jrclaw_ai.core.tenant_context import clear_tenant_context, set_request_id
from jrclaw_ai.domain.prompts.schemas.v1.prompt_schema import (
    CaseContext,
    KnowledgeEntry,
    ProjectContext,
    PromptConfig,
)


@pytest.fixture
def case() -> CaseContext:
    """A judicial recovery case with every section populated."""
    return CaseContext.model_validate({
        "case_number": "0001234-56.2024.8.16.0017",
        "case_type": "RECUPERACAO_JUDICIAL",
        "status": "ATIVO",
        "procedural_phase": "Assembleia de credores",
        "court_division": "1ª Vara Cível",
        "district": "Maringá",
        "court": "TJPR",
        "state": "PR",
        "claim_value": 1200000,
        "risk_value": 350000.5,
        "client": {"name": "Agro Balsas Ltda", "tax_id": "12.345.678/0001-90"},
        "judge": {"name": "Dra. Helena Prado"},
        "parties": [
            {"name": "Agro Balsas Ltda", "role": "Recuperanda"},
            {"name": "Banco Central do Agro S.A.", "role": "Credor"},
        ],
        "creditors": [
            {"name": "Banco Central do Agro S.A.", "creditor_class": "II", "updated_value": 800000},
            {"name": "João Ferreira", "creditor_class": "I"},
        ],
        "tags": ["agro", "urgente"],
    })


@pytest.fixture
def project() -> ProjectContext:
    """A restructuring project with two attached documents."""
    return ProjectContext.model_validate({
        "code": "PRJ-042",
        "title": "Reestruturação de passivos",
        "category": "REESTRUTURACAO",
        "status": "EM_ANDAMENTO",
        "description": "Renegociação com credores bancários",
        "involved_value": 2500000,
        "client_name": "Agro Balsas Ltda",
        "documents": [
            {"title": "Laudo de viabilidade", "document_type": "LAUDO"},
            {"title": "Minuta de acordo", "document_type": "ACORDO"},
        ],
    })


@pytest.fixture
def knowledge_entries() -> list[KnowledgeEntry]:
    """Two library entries in relevance order."""
    return [
        KnowledgeEntry(
            title="Stay period e prorrogação",
            entry_type="JURISPRUDENCIA",
            area="RECUPERACAO_JUDICIAL",
            summary="STJ admite prorrogação excepcional do stay period.",
            content="O prazo do art. 6º, §4º, da LRF pode ser prorrogado.",
            source="STJ, REsp n. 1.699.528/MG",
        ),
        KnowledgeEntry(title="Modelo de plano", entry_type="MODELO"),
    ]


@pytest.fixture
def document_config(case, project, knowledge_entries) -> PromptConfig:
    """A document request with every optional section supplied."""
    return PromptConfig(
        document_type="PETICAO_INICIAL",
        case=case,
        project=project,
        knowledge_entries=knowledge_entries,
        tone="combativo",
        length="exaustivo",
        audience="Juiz",
        include_case_law=True,
        include_doctrine=False,
        user_instructions="Enfatizar a essencialidade dos bens de capital.",
    )


@pytest.fixture(autouse=True)
def reset_context():
    """Keep tenant/request context from leaking between tests."""
    yield
    clear_tenant_context()
    set_request_id(None)
