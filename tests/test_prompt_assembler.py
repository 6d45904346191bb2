"""Tests for chat, document and review prompt assembly."""

import logging

import pytest
from pydantic import ValidationError

from jrclaw_ai.domain.prompts import (
    SECTION_SEPARATOR,
    PromptAssembler,
    PromptConfig,
    build_chat_prompt,
    build_document_prompt,
    build_review_prompt,
)
from jrclaw_ai.domain.prompts.assembler import REVIEW_FOCUS, get_review_focus
from jrclaw_ai.domain.prompts.base_configs import (
    DOCUMENT_TYPE_INSTRUCTIONS,
    LEGAL_IDENTITY,
    WRITING_METHODOLOGY,
)
from jrclaw_ai.domain.prompts.schemas.v1.prompt_schema import ReviewType

CASE_HEADER = "## DADOS DO PROCESSO VINCULADO"
PROJECT_HEADER = "## DADOS DO PROJETO VINCULADO"
KNOWLEDGE_HEADER = "## BASE DE CONHECIMENTO DO ESCRITÓRIO"
CONFIG_HEADER = "## CONFIGURAÇÕES"
INSTRUCTIONS_HEADER = "## INSTRUÇÕES DO ADVOGADO PARA ESTA PEÇA"
TYPE_HEADER = "## INSTRUÇÕES ESPECÍFICAS:"


def _assert_clean_separators(prompt: str) -> None:
    """No doubled or dangling separators."""
    assert SECTION_SEPARATOR + SECTION_SEPARATOR not in prompt
    assert not prompt.endswith(SECTION_SEPARATOR)
    assert not prompt.startswith(SECTION_SEPARATOR)
    for part in prompt.split(SECTION_SEPARATOR):
        assert part.strip()


class TestChatPrompt:
    """Test cases for chat mode prompts."""

    def test_no_context_is_identity_only(self):
        """Without context the chat prompt is exactly the identity block."""
        assert build_chat_prompt() == LEGAL_IDENTITY

    def test_identity_first_and_unmodified(self, case, project, knowledge_entries):
        """The identity block opens the prompt verbatim."""
        prompt = build_chat_prompt(case, project, knowledge_entries)
        assert prompt.startswith(LEGAL_IDENTITY + SECTION_SEPARATOR)

    def test_context_sections_in_order(self, case, project, knowledge_entries):
        """Case, project and library sections follow the identity in order."""
        prompt = build_chat_prompt(case, project, knowledge_entries)
        assert prompt.index(CASE_HEADER) < prompt.index(PROJECT_HEADER) < prompt.index(KNOWLEDGE_HEADER)
        _assert_clean_separators(prompt)

    def test_chat_never_has_document_layers(self, case, project, knowledge_entries):
        """Methodology, configuration and type instructions stay out of chat."""
        prompt = build_chat_prompt(case, project, knowledge_entries)
        assert WRITING_METHODOLOGY not in prompt
        assert CONFIG_HEADER not in prompt
        assert TYPE_HEADER not in prompt

    def test_only_project(self, project):
        """A single attached record gives exactly two sections."""
        prompt = build_chat_prompt(project=project)
        parts = prompt.split(SECTION_SEPARATOR)
        assert len(parts) == 2
        assert parts[0] == LEGAL_IDENTITY
        assert PROJECT_HEADER in parts[1]

    def test_empty_knowledge_list_is_omitted(self):
        """An empty library list adds nothing."""
        assert build_chat_prompt(knowledge_entries=[]) == LEGAL_IDENTITY

    def test_accepts_plain_dicts(self):
        """Records may be passed as dicts."""
        prompt = build_chat_prompt(case={"case_number": "999", "claim_value": 1200000})
        assert "- **Número:** 999" in prompt
        assert "R$ 1.200.000,00" in prompt

    def test_malformed_record_raises(self):
        """A wrong-shaped record fails validation at the boundary."""
        with pytest.raises(ValidationError):
            build_chat_prompt(case={"parties": "not a list"})

    def test_null_lists_are_skipped(self):
        """Null lists on a case behave like missing data."""
        prompt = build_chat_prompt(case={"case_number": "1", "tags": None, "parties": None, "creditors": None})
        assert "- **Número:** 1" in prompt
        assert "### Partes" not in prompt
        assert "**Tags:**" not in prompt

    def test_non_finite_amount_rejected_at_boundary(self):
        """Infinite or NaN amounts fail validation instead of reaching the formatter."""
        with pytest.raises(ValidationError):
            build_chat_prompt(case={"claim_value": float("inf")})


class TestDocumentPrompt:
    """Test cases for document generation prompts."""

    def test_layers_and_sections_in_fixed_order(self, document_config):
        """All sections appear once, in the documented order."""
        prompt = build_document_prompt(document_config)
        markers = [
            LEGAL_IDENTITY,
            WRITING_METHODOLOGY,
            f"{TYPE_HEADER} PETICAO_INICIAL",
            CASE_HEADER,
            PROJECT_HEADER,
            KNOWLEDGE_HEADER,
            CONFIG_HEADER,
            INSTRUCTIONS_HEADER,
        ]
        positions = [prompt.index(marker) for marker in markers]
        assert positions == sorted(positions)
        assert len(prompt.split(SECTION_SEPARATOR)) == len(markers)
        _assert_clean_separators(prompt)

    def test_type_instructions_included(self, document_config):
        """The selected Layer 3 text is included under its title."""
        prompt = build_document_prompt(document_config)
        expected = (
            f"{TYPE_HEADER} PETICAO_INICIAL\n\n{DOCUMENT_TYPE_INSTRUCTIONS['PETICAO_INICIAL']}"
        )
        assert expected in prompt

    def test_only_selected_type_instructions(self, document_config):
        """Instructions for other document types are not included."""
        prompt = build_document_prompt(document_config)
        assert DOCUMENT_TYPE_INSTRUCTIONS["CONTESTACAO"] not in prompt
        assert prompt.count(TYPE_HEADER) == 1

    def test_user_instructions_last(self, document_config):
        """Free-text instructions close the prompt."""
        prompt = build_document_prompt(document_config)
        assert prompt.endswith(
            f"{INSTRUCTIONS_HEADER}\n\nEnfatizar a essencialidade dos bens de capital."
        )

    def test_unknown_document_type_is_not_an_error(self):
        """An unknown type silently drops the type-specific section."""
        prompt = build_document_prompt(PromptConfig(document_type="NON_EXISTENT_KEY"))
        assert TYPE_HEADER not in prompt
        assert LEGAL_IDENTITY in prompt
        assert WRITING_METHODOLOGY in prompt

    def test_minimal_config(self):
        """Without context the prompt has identity, methodology, type and configuration."""
        prompt = build_document_prompt(PromptConfig(document_type="PARECER"))
        parts = prompt.split(SECTION_SEPARATOR)
        assert parts[0] == LEGAL_IDENTITY
        assert parts[1] == WRITING_METHODOLOGY
        assert parts[2].startswith(f"{TYPE_HEADER} PARECER")
        assert parts[3].startswith(f"\n{CONFIG_HEADER}")
        assert len(parts) == 4
        assert INSTRUCTIONS_HEADER not in prompt

    def test_accepts_dict_config(self):
        """The request may be passed as a dict."""
        prompt = build_document_prompt({
            "document_type": "CONTRATO",
            "tone": "conciliatorio",
            "project": {"code": "PRJ-1"},
        })
        assert "- **Código:** PRJ-1" in prompt
        assert "Tom conciliatório:" in prompt

    def test_reference_documents_not_rendered(self):
        """Reference documents are accepted but never rendered."""
        config = PromptConfig(
            document_type="PARECER",
            reference_documents=[{"filename": "a.pdf", "label": "Contrato", "text": "CONTEUDO-SIGILOSO"}],
        )
        assert "CONTEUDO-SIGILOSO" not in build_document_prompt(config)

    def test_missing_document_type_raises(self):
        """document_type is the one required field of a document request."""
        with pytest.raises(ValidationError):
            build_document_prompt({"tone": "combativo"})

    def test_null_optional_fields_are_skipped(self):
        """Null instructions and library entries are treated as absent."""
        prompt = build_document_prompt({
            "document_type": "PARECER",
            "user_instructions": None,
            "knowledge_entries": None,
        })
        assert INSTRUCTIONS_HEADER not in prompt
        assert KNOWLEDGE_HEADER not in prompt
        assert len(prompt.split(SECTION_SEPARATOR)) == 4

    def test_no_warnings_logged_for_absent_data(self, caplog):
        """Missing optional data and unknown keys never log warnings."""
        with caplog.at_level(logging.DEBUG, logger="jrclaw_ai"):
            build_document_prompt(PromptConfig(document_type="DESCONHECIDO", tone="x", length="y"))
            build_review_prompt("desconhecido", "texto")
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestReviewPrompt:
    """Test cases for review prompts."""

    def test_structure(self):
        """Identity, review mode and document sections, in that order."""
        prompt = build_review_prompt("completa", "Texto da peça.")
        parts = prompt.split(SECTION_SEPARATOR)
        assert parts[0] == LEGAL_IDENTITY
        assert parts[1] == (
            f"## MODO DE REVISÃO\n\n{DOCUMENT_TYPE_INSTRUCTIONS['REVISAO_IA']}\n\n"
            f"{REVIEW_FOCUS[ReviewType.COMPLETE]}"
        )
        assert parts[2] == "## DOCUMENTO A REVISAR\n\nTexto da peça."

    def test_no_methodology(self):
        """The writing methodology is never part of a review prompt."""
        assert WRITING_METHODOLOGY not in build_review_prompt("completa", "texto")

    def test_grammatical_focus(self):
        """The grammatical directive is selected and no other."""
        prompt = build_review_prompt("gramatical", "...")
        assert REVIEW_FOCUS[ReviewType.GRAMMATICAL] in prompt
        assert REVIEW_FOCUS[ReviewType.RISK] not in prompt
        assert REVIEW_FOCUS[ReviewType.STRATEGIC] not in prompt

    def test_english_review_type(self):
        """English names select the same directive."""
        prompt = build_review_prompt("grammatical", "...")
        assert REVIEW_FOCUS[ReviewType.GRAMMATICAL] in prompt

    def test_unknown_review_type(self):
        """Unknown types keep the generic checklist and the document, with no directive."""
        prompt = build_review_prompt("unknown_type", "Cláusula 1ª.")
        for focus in REVIEW_FOCUS.values():
            assert focus not in prompt
        assert DOCUMENT_TYPE_INSTRUCTIONS["REVISAO_IA"] in prompt
        assert "Cláusula 1ª." in prompt

    @pytest.mark.parametrize(
        "review_type, member",
        [
            ("completa", ReviewType.COMPLETE),
            ("gramatical", ReviewType.GRAMMATICAL),
            ("juridica", ReviewType.LEGAL_GROUNDING),
            ("legal-grounding", ReviewType.LEGAL_GROUNDING),
            ("estrategica", ReviewType.STRATEGIC),
            ("risco", ReviewType.RISK),
            ("contrato", ReviewType.CONTRACT),
        ],
    )
    def test_focus_lookup(self, review_type, member):
        """Each recognised review type maps to its own directive."""
        assert get_review_focus(review_type) == REVIEW_FOCUS[member]

    def test_focus_directives_are_distinct(self):
        """No two review types share a directive."""
        assert len(set(REVIEW_FOCUS.values())) == len(ReviewType)


class TestIdentityInvariant:
    """The identity block is present, unmodified, in every prompt."""

    @pytest.mark.parametrize("document_type", ["PETICAO_INICIAL", "REVISAO_IA", "NON_EXISTENT_KEY"])
    def test_document_prompts(self, document_type):
        """Document prompts contain the identity block."""
        assert LEGAL_IDENTITY in build_document_prompt(PromptConfig(document_type=document_type))

    def test_assembler_instances_share_layers(self, case):
        """Separate assembler instances build identical prompts."""
        assert PromptAssembler().build_chat_prompt(case) == build_chat_prompt(case)

    def test_review_prompt(self):
        """Review prompts contain the identity block."""
        assert LEGAL_IDENTITY in build_review_prompt("risco", "texto")
