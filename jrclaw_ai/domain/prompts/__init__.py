"""Layered prompt system for the JRCLaw legal assistant.

This module builds the system prompts sent to the language model:
- Base configs: identity, writing methodology and per-document-type text
- Renderer: case, project, library and requester configuration sections
- Assembler: combines both at request time into chat, document or review prompts
"""

from jrclaw_ai.domain.prompts.assembler import (
    SECTION_SEPARATOR,
    PromptAssembler,
    build_chat_prompt,
    build_document_prompt,
    build_review_prompt,
)
from jrclaw_ai.domain.prompts.messages import (
    build_chat_action_message,
    build_generation_user_message,
    build_review_user_message,
)
from jrclaw_ai.domain.prompts.schemas.v1.prompt_schema import (
    CaseContext,
    KnowledgeEntry,
    Length,
    ProjectContext,
    PromptConfig,
    ReviewType,
    Tone,
)

__all__ = [
    "SECTION_SEPARATOR",
    "CaseContext",
    "KnowledgeEntry",
    "Length",
    "ProjectContext",
    "PromptAssembler",
    "PromptConfig",
    "ReviewType",
    "Tone",
    "build_chat_action_message",
    "build_chat_prompt",
    "build_document_prompt",
    "build_generation_user_message",
    "build_review_prompt",
    "build_review_user_message",
]
