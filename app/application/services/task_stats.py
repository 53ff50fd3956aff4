"""Per-owner task statistics."""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.task import TaskStats
from app.application.interfaces.repositories import ITaskRepository
from app.domain.enums import OPEN_STATUSES, TaskStatus
from app.domain.value_objects.predicate import And, Eq, In, Range


class TaskStatsAggregator:
    """Compute totals, per-status buckets and the deadline-based overdue count.

    The stored status is a cache that can lag behind the deadline, so two
    overdue figures exist: the stored "overdue" bucket and an independent
    count of open records past their deadline. The independent count is
    reported as overdue; the bucket is kept as stored_overdue.
    """

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def compute(self, owner_id: str, now: datetime) -> TaskStats:
        owned = Eq("owner_id", owner_id)
        total = await self.task_repo.count_tasks(owned)
        buckets = await self.task_repo.count_by_field(owned, "status")
        overdue = await self.task_repo.count_tasks(
            And((
                owned,
                In("status", tuple(s.value for s in sorted(OPEN_STATUSES))),
                Range("expected_delivery_date", lt=now),
            ))
        )
        return TaskStats(
            total=total,
            overdue=overdue,
            pending=buckets.get(TaskStatus.PENDING.value, 0),
            in_progress=buckets.get(TaskStatus.IN_PROGRESS.value, 0),
            completed=buckets.get(TaskStatus.COMPLETED.value, 0),
            cancelled=buckets.get(TaskStatus.CANCELLED.value, 0),
            stored_overdue=buckets.get(TaskStatus.OVERDUE.value, 0),
        )
