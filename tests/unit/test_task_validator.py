"""Tests for TaskValidator (create drafts and update change sets)."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.application.services.task_validator import TaskValidator
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.exceptions import ValidationException

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


def _draft(**overrides):
    draft = {
        "items": ["Write report"],
        "expected_delivery_date": NOW + timedelta(days=2),
        "assigned_by": "Alice Smith",
    }
    draft.update(overrides)
    return draft


class TestValidateCreate:
    def test_valid_draft_is_normalized(self) -> None:
        data = TaskValidator().validate_create(
            _draft(
                items=["  Write report  ", "Send it"],
                assigned_by="  Alice Smith ",
                expected_delivery_date="2026-03-12T09:00:00Z",
                priority="high",
                notes=None,
            ),
            NOW,
        )
        assert data.items == ["Write report", "Send it"]
        assert data.assigned_by == "Alice Smith"
        assert data.expected_delivery_date == datetime(2026, 3, 12, 9, 0, tzinfo=UTC)
        assert data.priority == TaskPriority.HIGH
        assert data.status == TaskStatus.PENDING
        assert data.notes == ""

    def test_yesterday_is_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_create(
                _draft(expected_delivery_date=NOW - timedelta(days=1)), NOW
            )
        assert exc_info.value.fields == ["expected_delivery_date"]

    def test_earlier_today_is_accepted(self) -> None:
        """The rule compares against the start of today, not the current instant."""
        data = TaskValidator().validate_create(
            _draft(expected_delivery_date=NOW - timedelta(hours=3)), NOW
        )
        assert data.expected_delivery_date == NOW - timedelta(hours=3)

    def test_start_of_today_uses_configured_timezone(self) -> None:
        # 02:00 UTC on 10 March is still 9 March in New York.
        now = datetime(2026, 3, 10, 2, 0, tzinfo=UTC)
        validator = TaskValidator(ZoneInfo("America/New_York"))
        data = validator.validate_create(
            _draft(expected_delivery_date=datetime(2026, 3, 9, 12, 0, tzinfo=UTC)), now
        )
        assert data.expected_delivery_date.day == 9

    def test_every_violated_field_is_reported(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_create(
                {
                    "items": ["ok", "   ", "x" * 501],
                    "expected_delivery_date": "not a date",
                    "assigned_by": "",
                    "status": "done",
                    "priority": "critical",
                    "notes": "n" * 1001,
                },
                NOW,
            )
        exc = exc_info.value
        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.fields == [
            "items[1]",
            "items[2]",
            "expected_delivery_date",
            "assigned_by",
            "status",
            "priority",
            "notes",
        ]

    def test_missing_required_fields(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_create({}, NOW)
        assert exc_info.value.fields == ["items", "expected_delivery_date", "assigned_by"]

    def test_empty_items_list(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_create(_draft(items=[]), NOW)
        assert exc_info.value.fields == ["items"]

    def test_length_limits_are_inclusive(self) -> None:
        data = TaskValidator().validate_create(
            _draft(items=["x" * 500], assigned_by="a" * 100, notes="n" * 1000), NOW
        )
        assert len(data.items[0]) == 500


class TestValidateUpdate:
    def test_only_supplied_fields_are_returned(self) -> None:
        values = TaskValidator().validate_update({"status": "in-progress"})
        assert values == {"status": TaskStatus.IN_PROGRESS}

    def test_past_delivery_date_is_allowed_on_update(self) -> None:
        values = TaskValidator().validate_update(
            {"expected_delivery_date": "2020-01-01T00:00:00+00:00"}
        )
        assert values["expected_delivery_date"].year == 2020

    def test_delivered_on_can_be_cleared(self) -> None:
        assert TaskValidator().validate_update({"delivered_on": None}) == {
            "delivered_on": None
        }

    def test_immutable_and_unknown_fields_are_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_update(
                {"owner_id": "someone-else", "created_at": NOW, "colour": "red"}
            )
        assert exc_info.value.fields == ["owner_id", "created_at", "colour"]

    def test_null_for_required_fields_is_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskValidator().validate_update(
                {"expected_delivery_date": None, "assigned_by": None, "status": None}
            )
        assert set(exc_info.value.fields) == {
            "expected_delivery_date",
            "assigned_by",
            "status",
        }
