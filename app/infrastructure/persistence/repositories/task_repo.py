"""Task repository (SQLAlchemy). Implements ITaskRepository."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskCreate, TaskResult
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.value_objects.predicate import Predicate, SortSpec
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    storage_errors,
)
from app.shared.utils.datetime import ensure_utc


def items_to_text(items: list[str]) -> str:
    """Shadow value for the items_text search column."""
    return "\n".join(items)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        owner_id=t.owner_id,
        created_at=ensure_utc(t.created_at),
        items=list(t.items),
        expected_delivery_date=ensure_utc(t.expected_delivery_date),
        delivered_on=ensure_utc(t.delivered_on),
        assigned_by=t.assigned_by,
        status=TaskStatus(t.status),
        priority=TaskPriority(t.priority),
        notes=t.notes or "",
        updated_at=ensure_utc(t.updated_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository.

    Searches over items go through items_text, since the JSON list itself
    cannot be matched with ILIKE.
    """

    search_columns = {"items": "items_text"}

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(
        self,
        owner_id: str,
        data: TaskCreate,
        *,
        created_at: datetime,
        status: TaskStatus,
    ) -> TaskResult:
        """Create a task and return the result DTO."""
        task = Task(
            owner_id=owner_id,
            created_at=created_at,
            items=list(data.items),
            items_text=items_to_text(data.items),
            expected_delivery_date=data.expected_delivery_date,
            delivered_on=data.delivered_on,
            assigned_by=data.assigned_by,
            status=status.value,
            priority=data.priority.value,
            notes=data.notes,
        )
        with storage_errors("create_task"):
            created = await self.create(task)
        return _to_result(created)

    async def find_tasks(
        self,
        predicate: Predicate,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> list[TaskResult]:
        with storage_errors("find_tasks"):
            rows = await self.find(predicate, sort, skip=skip, limit=limit)
        return [_to_result(t) for t in rows]

    async def find_one(self, predicate: Predicate) -> TaskResult | None:
        with storage_errors("find_one"):
            rows = await self.find(predicate, SortSpec("created_at"), limit=1)
        return _to_result(rows[0]) if rows else None

    async def count_tasks(self, predicate: Predicate) -> int:
        with storage_errors("count_tasks"):
            return await self.count(predicate)

    async def count_by_field(self, predicate: Predicate, field: str) -> dict[str, int]:
        with storage_errors("count_by_field"):
            return await self.count_grouped(predicate, field)

    async def update_by_id(
        self, task_id: str, values: dict[str, Any]
    ) -> TaskResult | None:
        """Apply values to the task; None if no such task."""
        with storage_errors("update_by_id"):
            task = await self.get_by_id(task_id)
            if task is None:
                return None
            for key, value in values.items():
                setattr(task, key, value.value if isinstance(value, Enum) else value)
            if "items" in values:
                task.items = list(values["items"])
                task.items_text = items_to_text(values["items"])
            await self.db.flush()
            await self.db.refresh(task)
        return _to_result(task)

    async def delete_by_id(self, task_id: str) -> bool:
        with storage_errors("delete_by_id"):
            task = await self.get_by_id(task_id)
            if task is None:
                return False
            await self.delete(task)
        return True
