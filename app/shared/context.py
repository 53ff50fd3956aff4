"""Request context management using contextvars.

Provides async-safe storage for request-scoped data: the request ID (set by
RequestContextMiddleware) and the authenticated owner ID (set by the auth
dependency). Read by the logging filter so every log line carries both.

Usage:
    set_request_id("3f2a...")
    set_current_owner("user123")
    owner_id = get_current_owner_id()
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_owner_id: ContextVar[str | None] = ContextVar("owner_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the request ID for the current async task."""
    _request_id.set(request_id)


def set_current_owner(owner_id: str | None) -> None:
    """Set the authenticated owner for the current async task.

    Raises:
        ValueError: If owner_id is an empty string.
    """
    if owner_id is not None and not owner_id:
        raise ValueError("owner_id must be a non-empty string or None")
    _owner_id.set(owner_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def get_current_owner_id() -> str | None:
    """Return the current owner ID, or None if not authenticated."""
    return _owner_id.get()


def clear_request_context() -> None:
    """Reset request ID and owner."""
    _request_id.set(None)
    _owner_id.set(None)

