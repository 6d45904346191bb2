"""Application settings using Pydantic BaseSettings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Knowledge base excerpts
    knowledge_excerpt_chars: int = 1500

    # Standard tier (simpler documents, chat, review)
    standard_model: str = "claude-sonnet-4-5-20250929"
    standard_max_output_tokens: int = 4096
    standard_temperature: float = 0.3

    # Premium tier (complex pleadings, opinions, contracts)
    premium_model: str = "claude-opus-4-1-20250805"
    premium_max_output_tokens: int = 16384
    premium_temperature: float = 0.2
    premium_thinking_budget_tokens: int = 10000

    # Chat replies (standard model, shorter and warmer)
    chat_max_output_tokens: int = 2048
    chat_temperature: float = 0.5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
