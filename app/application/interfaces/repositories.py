"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs and domain predicates only; no
infrastructure imports. Every query method takes a predicate value built by
TaskQueryBuilder or TaskService, so implementations never see raw filters.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.task import TaskCreate, TaskResult
    from app.domain.enums import TaskStatus
    from app.domain.value_objects.predicate import Predicate, SortSpec


class ITaskRepository(Protocol):
    """Protocol for task persistence (SQL or memory)."""

    async def create_task(
        self,
        owner_id: str,
        data: TaskCreate,
        *,
        created_at: datetime,
        status: TaskStatus,
    ) -> TaskResult:
        """Persist a new task for owner with the given creation time and derived status."""

    async def find_tasks(
        self,
        predicate: Predicate,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> list[TaskResult]:
        """Return tasks matching predicate, sorted, after skipping skip rows, at most limit."""

    async def find_one(self, predicate: Predicate) -> TaskResult | None:
        """Return the first task matching predicate, or None."""

    async def count_tasks(self, predicate: Predicate) -> int:
        """Return the number of tasks matching predicate."""

    async def count_by_field(self, predicate: Predicate, field: str) -> dict[str, int]:
        """Return counts of matching tasks grouped by field value (absent groups omitted)."""

    async def update_by_id(
        self, task_id: str, values: dict[str, Any]
    ) -> TaskResult | None:
        """Apply values (domain field names) to task; return updated task or None if missing."""

    async def delete_by_id(self, task_id: str) -> bool:
        """Hard-delete task; return True if a row was removed."""
