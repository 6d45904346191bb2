"""Prompt composition engine for the JRCLaw legal practice platform.

Host applications call setup_logging() once at startup to get JSON logs
tagged with the tenant and request ids from core.tenant_context.
"""

from jrclaw_ai.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
