"""User-turn messages sent alongside the assembled system prompts."""

from jrclaw_ai.domain.prompts.base_configs import get_chat_action


def build_generation_user_message(document_type: str, user_instructions: str = "") -> str:
    """Build the user message that asks the model to generate a document."""
    if user_instructions:
        return f"Gere o documento do tipo {document_type}. Instruções adicionais: {user_instructions}"
    return f"Gere o documento do tipo {document_type} com base no contexto fornecido."


def build_review_user_message(review_type: str) -> str:
    """Build the user message that asks the model to review the attached document."""
    return (
        f'Revise o documento acima no modo "{review_type}". '
        "Apresente as sugestões categorizadas por gravidade."
    )


def build_chat_action_message(action_key: str) -> str | None:
    """Build the user message for a one-click chat action.

    Returns None for an unknown action so the caller can fall back to the
    user's own text.
    """
    return get_chat_action(action_key)
