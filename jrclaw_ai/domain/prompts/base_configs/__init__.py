"""Static prompt layers for the legal assistant."""

from jrclaw_ai.domain.prompts.base_configs.chat_actions import CHAT_ACTIONS, get_chat_action
from jrclaw_ai.domain.prompts.base_configs.common import LEGAL_IDENTITY, WRITING_METHODOLOGY
from jrclaw_ai.domain.prompts.base_configs.document_types import (
    DOCUMENT_TYPE_INSTRUCTIONS,
    REVIEW_INSTRUCTIONS_KEY,
    get_document_type_instructions,
)


class LegalBaseConfig:
    """Fixed layers shared by every firm.

    Layer 1 (identity) goes into every prompt, Layer 2 (methodology) only
    into document generation prompts. Layer 3 lives in
    DOCUMENT_TYPE_INSTRUCTIONS and is picked per request.
    """

    sections = {
        "identity": LEGAL_IDENTITY,
        "methodology": WRITING_METHODOLOGY,
    }

    @classmethod
    def get_section(cls, section_key: str) -> str | None:
        """Get a base section by key."""
        return cls.sections.get(section_key)

    @classmethod
    def get_all_sections(cls) -> dict[str, str]:
        """Get all base sections."""
        return cls.sections.copy()


__all__ = [
    "CHAT_ACTIONS",
    "DOCUMENT_TYPE_INSTRUCTIONS",
    "LEGAL_IDENTITY",
    "LegalBaseConfig",
    "REVIEW_INSTRUCTIONS_KEY",
    "WRITING_METHODOLOGY",
    "get_chat_action",
    "get_document_type_instructions",
]
