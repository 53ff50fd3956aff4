"""Task field validation for create and update.

Collects every violation before raising, so one ValidationException reports
all bad fields. Produces normalized values (trimmed text, UTC datetimes,
enum members) that are safe to persist.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Any, Mapping

from app.application.dtos.task import TaskCreate
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.exceptions import ValidationException
from app.shared.utils.datetime import parse_timestamp, start_of_day

MAX_ITEM_LENGTH = 500
MAX_ASSIGNED_BY_LENGTH = 100
MAX_NOTES_LENGTH = 1000

UPDATABLE_FIELDS = frozenset({
    "items",
    "expected_delivery_date",
    "delivered_on",
    "assigned_by",
    "status",
    "priority",
    "notes",
})
IMMUTABLE_FIELDS = frozenset({"id", "owner_id", "created_at"})


class _Errors:
    """Accumulates field errors."""

    def __init__(self) -> None:
        self.items: list[dict[str, str]] = []

    def add(self, field: str, message: str) -> None:
        self.items.append({"field": field, "message": message})

    def raise_if_any(self) -> None:
        if self.items:
            fields = ", ".join(e["field"] for e in self.items)
            raise ValidationException(f"Invalid task fields: {fields}", errors=self.items)


def _check_items(value: Any, errors: _Errors) -> list[str] | None:
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        errors.add("items", "At least one task item is required")
        return None
    cleaned: list[str] = []
    for index, item in enumerate(value):
        field = f"items[{index}]"
        if not isinstance(item, str):
            errors.add(field, "Task item must be a string")
            continue
        text = item.strip()
        if not text:
            errors.add(field, "Task item cannot be empty")
        elif len(text) > MAX_ITEM_LENGTH:
            errors.add(field, f"Task item cannot exceed {MAX_ITEM_LENGTH} characters")
        else:
            cleaned.append(text)
    return cleaned


def _check_timestamp(field: str, value: Any, errors: _Errors) -> datetime | None:
    try:
        return parse_timestamp(value)
    except (TypeError, ValueError):
        errors.add(field, f"{field} must be a valid timestamp")
        return None


def _check_text(
    field: str, value: Any, max_length: int, errors: _Errors, *, required: bool
) -> str | None:
    if value is None and not required:
        return ""
    if not isinstance(value, str):
        errors.add(field, f"{field} must be a string")
        return None
    text = value.strip()
    if required and not text:
        errors.add(field, f"{field} is required")
        return None
    if len(text) > max_length:
        errors.add(field, f"{field} cannot exceed {max_length} characters")
        return None
    return text


def _check_enum(field: str, value: Any, enum_cls: type, errors: _Errors) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(enum_cls.values())
        errors.add(field, f"{field} must be one of: {allowed}")
        return None


class TaskValidator:
    """Validate task drafts (create) and change sets (update).

    The calendar timezone decides where "today" starts for the rule that a
    new task cannot be due before the current day.
    """

    def __init__(self, tz: tzinfo = UTC) -> None:
        self.tz = tz

    def validate_create(self, draft: Mapping[str, Any], now: datetime) -> TaskCreate:
        """Validate a new task draft; return normalized TaskCreate or raise ValidationException."""
        errors = _Errors()

        items = None
        if draft.get("items") is None:
            errors.add("items", "At least one task item is required")
        else:
            items = _check_items(draft["items"], errors)

        expected = None
        if draft.get("expected_delivery_date") is None:
            errors.add("expected_delivery_date", "Expected delivery date is required")
        else:
            expected = _check_timestamp(
                "expected_delivery_date", draft["expected_delivery_date"], errors
            )
            if expected is not None and expected < start_of_day(now, self.tz):
                errors.add(
                    "expected_delivery_date",
                    "Expected delivery date cannot be in the past",
                )

        assigned_by = _check_text(
            "assigned_by",
            draft.get("assigned_by"),
            MAX_ASSIGNED_BY_LENGTH,
            errors,
            required=True,
        )

        status = TaskStatus.PENDING
        if draft.get("status") is not None:
            status = _check_enum("status", draft["status"], TaskStatus, errors)

        priority = TaskPriority.MEDIUM
        if draft.get("priority") is not None:
            priority = _check_enum("priority", draft["priority"], TaskPriority, errors)

        notes = _check_text(
            "notes", draft.get("notes"), MAX_NOTES_LENGTH, errors, required=False
        )

        delivered_on = None
        if draft.get("delivered_on") is not None:
            delivered_on = _check_timestamp("delivered_on", draft["delivered_on"], errors)

        errors.raise_if_any()
        return TaskCreate(
            items=items,
            expected_delivery_date=expected,
            assigned_by=assigned_by,
            status=status,
            priority=priority,
            notes=notes,
            delivered_on=delivered_on,
        )

    def validate_update(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        """Validate a partial update; return normalized values keyed by field name.

        Only keys present in changes are validated and returned. delivered_on
        may be explicitly None (clears it); other fields may not be None.
        """
        errors = _Errors()
        values: dict[str, Any] = {}

        for key in changes:
            if key in IMMUTABLE_FIELDS:
                errors.add(key, f"{key} cannot be changed")
            elif key not in UPDATABLE_FIELDS:
                errors.add(key, f"Unknown field: {key}")

        if "items" in changes:
            values["items"] = _check_items(changes["items"], errors)
        if "expected_delivery_date" in changes:
            if changes["expected_delivery_date"] is None:
                errors.add("expected_delivery_date", "Expected delivery date cannot be null")
            else:
                values["expected_delivery_date"] = _check_timestamp(
                    "expected_delivery_date", changes["expected_delivery_date"], errors
                )
        if "delivered_on" in changes:
            raw = changes["delivered_on"]
            values["delivered_on"] = (
                None if raw is None else _check_timestamp("delivered_on", raw, errors)
            )
        if "assigned_by" in changes:
            values["assigned_by"] = _check_text(
                "assigned_by",
                changes["assigned_by"],
                MAX_ASSIGNED_BY_LENGTH,
                errors,
                required=True,
            )
        if "status" in changes:
            values["status"] = _check_enum("status", changes["status"], TaskStatus, errors)
        if "priority" in changes:
            values["priority"] = _check_enum(
                "priority", changes["priority"], TaskPriority, errors
            )
        if "notes" in changes:
            values["notes"] = _check_text(
                "notes", changes["notes"], MAX_NOTES_LENGTH, errors, required=False
            )

        errors.raise_if_any()
        return values
