"""Model selection for the legal assistant."""

from jrclaw_ai.llm.model_selection import (
    DOC_TYPE_TIER_MAP,
    ModelConfig,
    ModelTier,
    estimate_cost,
    get_chat_model_config,
    get_model_config,
    get_model_for_document_type,
    get_review_model_config,
)

__all__ = [
    "DOC_TYPE_TIER_MAP",
    "ModelConfig",
    "ModelTier",
    "estimate_cost",
    "get_chat_model_config",
    "get_model_config",
    "get_model_for_document_type",
    "get_review_model_config",
]
