"""Tests for translating predicates to SQL (no database needed)."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.dialects import postgresql

from app.domain.value_objects.predicate import And, Contains, Eq, In, Or, Range
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import escape_like
from app.infrastructure.persistence.repositories.task_repo import (
    TaskRepository,
    items_to_text,
)

NOW = datetime(2026, 3, 10, tzinfo=UTC)


def _compile(predicate):
    expr = TaskRepository(None).where(predicate)
    compiled = expr.compile(dialect=postgresql.dialect())
    return str(compiled), compiled.params


def test_owner_clause_and_status_in() -> None:
    sql, params = _compile(
        And((Eq("owner_id", "owner-1"), In("status", ("pending", "overdue"))))
    )
    assert "task.owner_id = " in sql
    assert "task.status IN" in sql
    assert "owner-1" in params.values()


def test_contains_on_items_uses_text_shadow_column() -> None:
    sql, params = _compile(Contains("items", "report"))
    assert "task.items_text ILIKE" in sql
    assert "ESCAPE" in sql
    assert "%report%" in params.values()


def test_contains_escapes_wildcards() -> None:
    _, params = _compile(Contains("notes", "50%_off"))
    assert "%50\\%\\_off%" in params.values()


def test_range_bounds() -> None:
    sql, _ = _compile(Range("created_at", gte=NOW, lt=NOW))
    assert "task.created_at >=" in sql
    assert "task.created_at <" in sql


def test_empty_or_matches_nothing() -> None:
    sql, _ = _compile(Or(()))
    assert sql == "false"


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValueError, match="no field"):
        TaskRepository(None).where(Eq("colour", "red"))


def test_escape_like_and_items_text() -> None:
    assert escape_like("a\\b") == "a\\\\b"
    assert items_to_text(["one", "two"]) == "one\ntwo"


def test_task_table_indexes_cover_owner_queries() -> None:
    indexes = {
        index.name: [column.name for column in index.columns]
        for index in Task.__table__.indexes
    }
    assert indexes["ix_task_owner_created"] == ["owner_id", "created_at"]
    assert indexes["ix_task_owner_status_due"] == [
        "owner_id",
        "status",
        "expected_delivery_date",
    ]
