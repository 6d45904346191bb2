"""Model tier selection and cost estimates for prompt requests."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from jrclaw_ai.settings import settings


class ModelTier(str, Enum):
    """Model tiers available to the legal assistant."""

    STANDARD = "standard"
    PREMIUM = "premium"


@dataclass(frozen=True)
class ModelConfig:
    """Generation parameters for one model tier."""

    tier: ModelTier
    model: str
    max_output_tokens: int
    temperature: float
    cost_per_mtok_in: float  # USD per million input tokens
    cost_per_mtok_out: float  # USD per million output tokens
    thinking_budget_tokens: Optional[int] = None


# Complex pleadings, opinions and contracts go to the premium tier.
# Anything not listed falls back to standard.
DOC_TYPE_TIER_MAP: dict[str, ModelTier] = {
    # Premium
    "PETICAO_INICIAL": ModelTier.PREMIUM,
    "CONTESTACAO": ModelTier.PREMIUM,
    "REPLICA": ModelTier.PREMIUM,
    "RECONVENCAO": ModelTier.PREMIUM,
    "MEMORIAIS": ModelTier.PREMIUM,
    "ALEGACOES_FINAIS": ModelTier.PREMIUM,
    "EMBARGOS_DECLARACAO": ModelTier.PREMIUM,
    "AGRAVO_INSTRUMENTO": ModelTier.PREMIUM,
    "AGRAVO_INTERNO": ModelTier.PREMIUM,
    "APELACAO": ModelTier.PREMIUM,
    "RECURSO_ESPECIAL": ModelTier.PREMIUM,
    "RECURSO_EXTRAORDINARIO": ModelTier.PREMIUM,
    "CONTRARRAZOES": ModelTier.PREMIUM,
    "RECURSO_ORDINARIO": ModelTier.PREMIUM,
    "CUMPRIMENTO_SENTENCA": ModelTier.PREMIUM,
    "IMPUGNACAO_CUMPRIMENTO": ModelTier.PREMIUM,
    "EMBARGOS_EXECUCAO": ModelTier.PREMIUM,
    "EXCECAO_PRE_EXECUTIVIDADE": ModelTier.PREMIUM,
    "PLANO_RJ": ModelTier.PREMIUM,
    "HABILITACAO_CREDITO": ModelTier.PREMIUM,
    "IMPUGNACAO_CREDITO": ModelTier.PREMIUM,
    "PETICAO_OBJECAO_PLANO": ModelTier.PREMIUM,
    "CONVOLACAO_FALENCIA": ModelTier.PREMIUM,
    "PARECER": ModelTier.PREMIUM,
    "NOTA_TECNICA": ModelTier.PREMIUM,
    "DUE_DILIGENCE": ModelTier.PREMIUM,
    "CONTRATO_GENERICO": ModelTier.PREMIUM,
    "CONTRATO_ARRENDAMENTO_RURAL": ModelTier.PREMIUM,
    "CONTRATO_PARCERIA_AGRICOLA": ModelTier.PREMIUM,
    "CPR_CEDULA_PRODUTO_RURAL": ModelTier.PREMIUM,
    # Standard
    "EMAIL_FORMAL": ModelTier.STANDARD,
    "PROPOSTA_CLIENTE": ModelTier.STANDARD,
    "PROPOSTA_ACORDO": ModelTier.STANDARD,
    "CORRESPONDENCIA_CREDOR": ModelTier.STANDARD,
    "OFICIO": ModelTier.STANDARD,
    "MEMORANDO_INTERNO": ModelTier.STANDARD,
    "RELATORIO_AJ": ModelTier.STANDARD,
    "PROCURACAO_AD_JUDICIA": ModelTier.STANDARD,
    "PROCURACAO_EXTRAJUDICIAL": ModelTier.STANDARD,
    "NOTIFICACAO_EXTRAJUDICIAL": ModelTier.STANDARD,
    "ACORDO_EXTRAJUDICIAL": ModelTier.STANDARD,
    "TERMO_CONFISSAO_DIVIDA": ModelTier.STANDARD,
    "DISTRATO": ModelTier.STANDARD,
}


def _build_configs() -> dict[ModelTier, ModelConfig]:
    """Build tier configs from current settings."""
    return {
        ModelTier.STANDARD: ModelConfig(
            tier=ModelTier.STANDARD,
            model=settings.standard_model,
            max_output_tokens=settings.standard_max_output_tokens,
            temperature=settings.standard_temperature,
            cost_per_mtok_in=3.0,
            cost_per_mtok_out=15.0,
        ),
        ModelTier.PREMIUM: ModelConfig(
            tier=ModelTier.PREMIUM,
            model=settings.premium_model,
            max_output_tokens=settings.premium_max_output_tokens,
            temperature=settings.premium_temperature,
            cost_per_mtok_in=15.0,
            cost_per_mtok_out=75.0,
            thinking_budget_tokens=settings.premium_thinking_budget_tokens,
        ),
    }


def get_model_config(tier: ModelTier | str) -> ModelConfig:
    """Get the config for a model tier.

    Raises:
        ValueError: If the tier does not exist
    """
    configs = _build_configs()
    try:
        return configs[ModelTier(tier)]
    except ValueError:
        raise ValueError(
            f"Unknown model tier: {tier}. Available: {[t.value for t in ModelTier]}"
        ) from None


def get_model_for_document_type(document_type: str, force_premium: bool = False) -> ModelConfig:
    """Return the model config for a document type.

    Falls back to the standard tier if the type is unknown. force_premium
    upgrades any document to the premium tier.
    """
    tier = DOC_TYPE_TIER_MAP.get(document_type, ModelTier.STANDARD)
    if force_premium:
        tier = ModelTier.PREMIUM
    return get_model_config(tier)


def get_review_model_config(use_premium: bool = False) -> ModelConfig:
    """Return the model config for document review."""
    return get_model_config(ModelTier.PREMIUM if use_premium else ModelTier.STANDARD)


def get_chat_model_config() -> ModelConfig:
    """Return the model config for chat replies.

    Chat uses the standard model with its own output limit and temperature.
    """
    return replace(
        get_model_config(ModelTier.STANDARD),
        max_output_tokens=settings.chat_max_output_tokens,
        temperature=settings.chat_temperature,
    )


def estimate_cost(config: ModelConfig, tokens_in: int, tokens_out: int) -> float:
    """Estimate the USD cost of a request for the given token counts."""
    return (
        (tokens_in / 1_000_000) * config.cost_per_mtok_in
        + (tokens_out / 1_000_000) * config.cost_per_mtok_out
    )
