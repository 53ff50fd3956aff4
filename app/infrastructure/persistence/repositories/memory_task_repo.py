"""In-process task storage for DATABASE_BACKEND=memory (development and tests).

Predicates are evaluated directly against TaskResult records with the same
semantics as the SQL translation in BaseRepository.where.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any

from app.application.dtos.task import TaskCreate, TaskResult
from app.domain.enums import TaskStatus
from app.domain.value_objects.predicate import (
    And,
    Contains,
    Eq,
    In,
    Or,
    Predicate,
    Range,
    SortSpec,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def matches(predicate: Predicate, task: TaskResult) -> bool:
    """Return True if task satisfies predicate."""
    if isinstance(predicate, And):
        return all(matches(c, task) for c in predicate.clauses)
    if isinstance(predicate, Or):
        return any(matches(c, task) for c in predicate.clauses)
    if isinstance(predicate, Eq):
        return _plain(getattr(task, predicate.field)) == _plain(predicate.value)
    if isinstance(predicate, In):
        value = _plain(getattr(task, predicate.field))
        return value in {_plain(v) for v in predicate.values}
    if isinstance(predicate, Range):
        value = getattr(task, predicate.field)
        if value is None:
            return False
        if predicate.gte is not None and not value >= predicate.gte:
            return False
        if predicate.gt is not None and not value > predicate.gt:
            return False
        if predicate.lte is not None and not value <= predicate.lte:
            return False
        if predicate.lt is not None and not value < predicate.lt:
            return False
        return True
    if isinstance(predicate, Contains):
        value = getattr(task, predicate.field)
        term = predicate.term.casefold()
        if isinstance(value, (list, tuple)):
            return any(term in str(v).casefold() for v in value)
        return value is not None and term in str(value).casefold()
    raise TypeError(f"Unsupported predicate: {predicate!r}")


@dataclass
class InMemoryTaskStore:
    """Process-wide task table, owned by the application lifespan (app.state.task_store)."""

    tasks: dict[str, TaskResult] = field(default_factory=dict)

    def clear(self) -> None:
        self.tasks.clear()


class InMemoryTaskRepository:
    """Task repository over an InMemoryTaskStore. Implements ITaskRepository."""

    def __init__(self, store: InMemoryTaskStore) -> None:
        self.store = store

    async def create_task(
        self,
        owner_id: str,
        data: TaskCreate,
        *,
        created_at: datetime,
        status: TaskStatus,
    ) -> TaskResult:
        task = TaskResult(
            id=generate_cuid(),
            owner_id=owner_id,
            created_at=created_at,
            items=list(data.items),
            expected_delivery_date=data.expected_delivery_date,
            delivered_on=data.delivered_on,
            assigned_by=data.assigned_by,
            status=status,
            priority=data.priority,
            notes=data.notes,
            updated_at=created_at,
        )
        self.store.tasks[task.id] = task
        return task

    async def find_tasks(
        self,
        predicate: Predicate,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> list[TaskResult]:
        found = [t for t in self.store.tasks.values() if matches(predicate, t)]
        # id as tie-breaker keeps pages stable when sort values collide
        found.sort(
            key=lambda t: (_plain(getattr(t, sort.field)), t.id),
            reverse=sort.descending,
        )
        return found[skip : skip + limit]

    async def find_one(self, predicate: Predicate) -> TaskResult | None:
        return next(
            (t for t in self.store.tasks.values() if matches(predicate, t)), None
        )

    async def count_tasks(self, predicate: Predicate) -> int:
        return sum(1 for t in self.store.tasks.values() if matches(predicate, t))

    async def count_by_field(self, predicate: Predicate, field: str) -> dict[str, int]:
        counts: dict[str, int] = {}
        for task in self.store.tasks.values():
            if matches(predicate, task):
                key = str(_plain(getattr(task, field)))
                counts[key] = counts.get(key, 0) + 1
        return counts

    async def update_by_id(
        self, task_id: str, values: dict[str, Any]
    ) -> TaskResult | None:
        task = self.store.tasks.get(task_id)
        if task is None:
            return None
        updated = replace(task, **values, updated_at=utc_now())
        self.store.tasks[task_id] = updated
        return updated

    async def delete_by_id(self, task_id: str) -> bool:
        return self.store.tasks.pop(task_id, None) is not None
