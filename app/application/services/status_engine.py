"""Task status derivation.

The stored status is a cache of a derivation: pending and in-progress tasks
decay to overdue once now passes their expected delivery date; completed and
cancelled are terminal and never change on their own. These functions are
pure; TaskService calls them right before every write and on every read.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Protocol

from app.domain.enums import OPEN_STATUSES, TaskStatus


class HasDeadline(Protocol):
    """Anything with a status and an expected delivery date (DTO, ORM row, merged patch)."""

    status: TaskStatus
    expected_delivery_date: datetime


def is_overdue(record: HasDeadline, now: datetime) -> bool:
    """Return True if record is open (pending/in-progress) and past its deadline."""
    return TaskStatus(record.status) in OPEN_STATUSES and now > record.expected_delivery_date


def derive_status(record: HasDeadline, now: datetime) -> TaskStatus:
    """Return the status record should be stored with at time now.

    Terminal statuses are returned unchanged. Otherwise a passed deadline
    yields OVERDUE; anything else keeps the current status (including a
    manually set OVERDUE whose deadline is still ahead).
    """
    if is_overdue(record, now):
        return TaskStatus.OVERDUE
    return TaskStatus(record.status)


def apply_completion(
    current_status: TaskStatus | None,
    current_delivered_on: datetime | None,
    changes: Mapping[str, Any],
    now: datetime,
) -> dict[str, Any]:
    """Keep delivered_on consistent with the status the write will leave behind.

    Works on the merged record (current values overlaid with changes) and
    returns a copy of changes with delivered_on adjusted:
    - resulting status COMPLETED with no delivered_on: stamped with now (an
      explicit non-null delivered_on in changes wins);
    - any other resulting status: delivered_on cleared to None.

    current_status is None for creates.
    """
    result = dict(changes)
    status = result.get("status", current_status)
    if status is None:
        return result
    delivered_on = result.get("delivered_on", current_delivered_on)
    if TaskStatus(status) == TaskStatus.COMPLETED:
        if delivered_on is None:
            result["delivered_on"] = now
    elif delivered_on is not None:
        result["delivered_on"] = None
    return result
