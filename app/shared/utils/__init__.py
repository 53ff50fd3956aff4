"""Shared utilities: datetime and ID generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    parse_timestamp,
    start_of_day,
    start_of_month,
    start_of_next_day,
    start_of_week,
    utc_now,
)
from app.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
    "start_of_day",
    "start_of_next_day",
    "start_of_week",
    "start_of_month",
]
