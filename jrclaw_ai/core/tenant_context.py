"""Context variables identifying the firm and request a prompt is built for."""

from contextvars import ContextVar
from typing import Optional

# Context variable for the firm (tenant) id
tenant_id_var: ContextVar[Optional[str]] = ContextVar("tenant_id", default=None)

# Context variable for the host application's request id
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_tenant_context(tenant_id: str | None) -> None:
    """Set the current tenant context.

    Args:
        tenant_id: Firm identifier supplied by the host application
    """
    tenant_id_var.set(tenant_id)


def get_tenant_context() -> str | None:
    """Get the current tenant context.

    Returns:
        Current tenant ID or None
    """
    return tenant_id_var.get()


def clear_tenant_context() -> None:
    """Clear the current tenant context."""
    tenant_id_var.set(None)


def set_request_id(request_id: str | None) -> None:
    """Set the request id the host application is serving."""
    request_id_var.set(request_id)


def get_request_id() -> str | None:
    """Get the current request id."""
    return request_id_var.get()
