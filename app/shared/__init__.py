"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import (
    clear_request_context,
    get_current_owner_id,
    get_request_id,
    set_current_owner,
    set_request_id,
)
from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    parse_timestamp,
    utc_now,
)

__all__ = [
    "clear_request_context",
    "get_current_owner_id",
    "get_request_id",
    "set_current_owner",
    "set_request_id",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
]
