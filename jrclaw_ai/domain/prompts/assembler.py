"""Assembles final system prompts from the fixed layers + request context."""

import logging
from typing import Any, Optional

from jrclaw_ai.domain.prompts.base_configs import (
    DOCUMENT_TYPE_INSTRUCTIONS,
    REVIEW_INSTRUCTIONS_KEY,
    LegalBaseConfig,
)
from jrclaw_ai.domain.prompts.renderer import (
    render_case,
    render_knowledge_entries,
    render_project,
    render_section,
)
from jrclaw_ai.domain.prompts.schemas.v1.prompt_schema import (
    CaseContext,
    KnowledgeEntry,
    ProjectContext,
    PromptConfig,
    ReviewType,
)

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n---\n\n"

# Order of sections in a document generation prompt. Base sections come
# from LegalBaseConfig, the rest are rendered from the request.
DOCUMENT_SECTION_ORDER = [
    "identity",
    "methodology",
    "type_instructions",
    "case",
    "project",
    "knowledge_base",
    "user_config",
    "user_instructions",
]

REVIEW_FOCUS: dict[ReviewType, str] = {
    ReviewType.COMPLETE: "Revisão completa: todos os 5 aspectos com igual profundidade.",
    ReviewType.GRAMMATICAL: "Foco em aspecto 1 (GRAMATICAL): erros, concordância, clareza, terminologia.",
    ReviewType.LEGAL_GROUNDING: "Foco em aspecto 2 (FUNDAMENTAÇÃO JURÍDICA): artigos, precedentes, suficiência.",
    ReviewType.STRATEGIC: "Foco em aspecto 3 (ESTRATÉGICA): eficácia, contra-argumentos, ordem.",
    ReviewType.RISK: "Foco em aspecto 4 (RISCOS): argumentos contra, omissões, prazos.",
    ReviewType.CONTRACT: "Revisão de contrato: cláusulas essenciais, ambiguidade, riscos, conformidade legal.",
}


def get_review_focus(review_type: str) -> str:
    """Return the focus directive for a review type ("" when unrecognised)."""
    focus = ReviewType.resolve(review_type)
    return REVIEW_FOCUS.get(focus, "") if focus else ""


class PromptAssembler:
    """Assembles system prompts for the legal assistant.

    Three prompts are supported:
    1. Chat: identity + whatever case/project/library context is attached
    2. Document generation: identity + methodology + type instructions +
       context + requester configuration + free-text instructions
    3. Review: identity + review mode + the document under review

    Sections are joined with SECTION_SEPARATOR. Missing sections are
    skipped, never rendered empty.
    """

    def __init__(self) -> None:
        """Initialize the assembler with the fixed base layers."""
        self.base_config = LegalBaseConfig

    @property
    def identity(self) -> str:
        return self.base_config.get_section("identity")

    def build_chat_prompt(
        self,
        case: CaseContext | dict[str, Any] | None = None,
        project: ProjectContext | dict[str, Any] | None = None,
        knowledge_entries: Optional[list[KnowledgeEntry | dict[str, Any]]] = None,
    ) -> str:
        """Build the system prompt for chat mode.

        Args:
            case: Linked case, if any
            project: Linked project, if any
            knowledge_entries: Library entries ranked by the caller

        Returns:
            Assembled system prompt string
        """
        parts = [self.identity]

        if case is not None:
            parts.append(render_case(CaseContext.model_validate(case)))
        if project is not None:
            parts.append(render_project(ProjectContext.model_validate(project)))
        if knowledge_entries:
            entries = [KnowledgeEntry.model_validate(entry) for entry in knowledge_entries]
            parts.append(render_knowledge_entries(entries))

        prompt = SECTION_SEPARATOR.join(parts)
        logger.debug(
            "Assembled chat prompt",
            extra={"prompt_kind": "chat", "section_count": len(parts), "prompt_chars": len(prompt)},
        )
        return prompt

    def build_document_prompt(self, config: PromptConfig | dict[str, Any]) -> str:
        """Build the full system prompt for document generation.

        Args:
            config: The document request (validated if given as a dict)

        Returns:
            Assembled system prompt string
        """
        config = PromptConfig.model_validate(config)
        sections = self.base_config.get_all_sections()

        parts = []
        for section_key in DOCUMENT_SECTION_ORDER:
            content = sections.get(section_key) or render_section(section_key, config)
            if content:
                parts.append(content)

        prompt = SECTION_SEPARATOR.join(parts)
        logger.debug(
            "Assembled document prompt",
            extra={
                "prompt_kind": "document",
                "document_type": config.document_type,
                "has_type_instructions": config.document_type in DOCUMENT_TYPE_INSTRUCTIONS,
                "section_count": len(parts),
                "prompt_chars": len(prompt),
            },
        )
        return prompt

    def build_review_prompt(self, review_type: str, document_text: str) -> str:
        """Build the system prompt for reviewing a document.

        Args:
            review_type: Review focus, e.g. "completa" or "gramatical"
            document_text: The text under review, included verbatim

        Returns:
            Assembled system prompt string
        """
        review_instructions = DOCUMENT_TYPE_INSTRUCTIONS.get(REVIEW_INSTRUCTIONS_KEY, "")
        focus = get_review_focus(review_type)

        parts = [
            self.identity,
            f"## MODO DE REVISÃO\n\n{review_instructions}\n\n{focus}",
            f"## DOCUMENTO A REVISAR\n\n{document_text}",
        ]

        prompt = SECTION_SEPARATOR.join(parts)
        logger.debug(
            "Assembled review prompt",
            extra={"prompt_kind": "review", "review_type": review_type, "prompt_chars": len(prompt)},
        )
        return prompt


_default_assembler = PromptAssembler()


def build_chat_prompt(
    case: CaseContext | dict[str, Any] | None = None,
    project: ProjectContext | dict[str, Any] | None = None,
    knowledge_entries: Optional[list[KnowledgeEntry | dict[str, Any]]] = None,
) -> str:
    """Convenience function to build a chat system prompt."""
    return _default_assembler.build_chat_prompt(case, project, knowledge_entries)


def build_document_prompt(config: PromptConfig | dict[str, Any]) -> str:
    """Convenience function to build a document generation prompt."""
    return _default_assembler.build_document_prompt(config)


def build_review_prompt(review_type: str, document_text: str) -> str:
    """Convenience function to build a review prompt."""
    return _default_assembler.build_review_prompt(review_type, document_text)
