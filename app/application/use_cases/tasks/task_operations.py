"""Task operations: create, list, get, update, delete, stats (delegate to ITaskRepository)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from app.application.dtos.task import (
    PaginationMeta,
    TaskFilters,
    TaskPage,
    TaskResult,
    TaskStats,
)
from app.application.interfaces.repositories import ITaskRepository
from app.application.services.status_engine import apply_completion, derive_status
from app.application.services.task_query_builder import TaskQueryBuilder
from app.application.services.task_stats import TaskStatsAggregator
from app.application.services.task_validator import TaskValidator
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.predicate import And, Eq
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class TaskService:
    """Owner-scoped task lifecycle.

    Every write re-derives the stored status right before persisting; reads
    re-derive it for the returned records only. A task that is missing and a
    task owned by someone else both raise ResourceNotFoundException.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        query_builder: TaskQueryBuilder | None = None,
        validator: TaskValidator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.query_builder = query_builder or TaskQueryBuilder(UTC)
        self.validator = validator or TaskValidator(UTC)
        self.stats = TaskStatsAggregator(task_repo)
        self.clock = clock

    def _normalize(self, task: TaskResult, now: datetime) -> TaskResult:
        status = derive_status(task, now)
        return task if status == task.status else replace(task, status=status)

    async def _get_owned(self, owner_id: str, task_id: str) -> TaskResult:
        task = await self.task_repo.find_one(
            And((Eq("owner_id", owner_id), Eq("id", task_id)))
        )
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    @traced("task.create")
    async def create_task(self, owner_id: str, draft: Mapping[str, Any]) -> TaskResult:
        """Validate draft, derive status and persist a new task for owner_id."""
        now = self.clock()
        data = self.validator.validate_create(draft, now)
        coupled = apply_completion(
            None, None, {"status": data.status, "delivered_on": data.delivered_on}, now
        )
        data = replace(data, delivered_on=coupled["delivered_on"])
        status = derive_status(data, now)
        task = await self.task_repo.create_task(
            owner_id, data, created_at=now, status=status
        )
        logger.info("Created task %s (status=%s)", task.id, task.status.value)
        return task

    @traced("task.list")
    async def list_tasks(self, owner_id: str, filters: TaskFilters) -> TaskPage:
        """Return one page of the owner's tasks matching filters, newest first."""
        now = self.clock()
        query = self.query_builder.build(owner_id, filters, now)
        tasks = await self.task_repo.find_tasks(
            query.predicate, query.sort, skip=query.skip, limit=query.limit
        )
        total = await self.task_repo.count_tasks(query.predicate)
        add_span_attributes(total_matching=total)
        return TaskPage(
            tasks=[self._normalize(t, now) for t in tasks],
            pagination=PaginationMeta.build(max(1, filters.page), query.limit, total),
        )

    @traced("task.get")
    async def get_task(self, owner_id: str, task_id: str) -> TaskResult:
        """Return task if it exists and belongs to owner_id; else raise ResourceNotFoundException."""
        task = await self._get_owned(owner_id, task_id)
        return self._normalize(task, self.clock())

    @traced("task.update")
    async def update_task(
        self, owner_id: str, task_id: str, changes: Mapping[str, Any]
    ) -> TaskResult:
        """Apply a partial update; delivered_on follows status into and out of completed."""
        current = await self._get_owned(owner_id, task_id)
        values = self.validator.validate_update(changes)
        now = self.clock()
        values = apply_completion(current.status, current.delivered_on, values, now)
        values["status"] = derive_status(replace(current, **values), now)
        updated = await self.task_repo.update_by_id(task_id, values)
        if updated is None:
            raise ResourceNotFoundException("task", task_id)
        logger.info("Updated task %s (status=%s)", task_id, updated.status.value)
        return updated

    @traced("task.delete")
    async def delete_task(self, owner_id: str, task_id: str) -> None:
        """Hard-delete task if it belongs to owner_id; else raise ResourceNotFoundException."""
        await self._get_owned(owner_id, task_id)
        if not await self.task_repo.delete_by_id(task_id):
            raise ResourceNotFoundException("task", task_id)
        logger.info("Deleted task %s", task_id)

    @traced("task.stats")
    async def get_stats(self, owner_id: str) -> TaskStats:
        """Return status counts and the deadline-based overdue count for owner_id."""
        return await self.stats.compute(owner_id, self.clock())
