"""Tests for TaskExportService row formatting."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

from app.application.dtos.task import TaskCreate, TaskFilters
from app.application.use_cases.tasks import TaskExportService, TaskService
from app.application.use_cases.tasks.task_export import EXPORT_COLUMNS
from app.domain.enums import TaskPriority, TaskStatus
from app.infrastructure.persistence.repositories import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
)

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


async def _repo_with_tasks(count: int) -> InMemoryTaskRepository:
    repo = InMemoryTaskRepository(InMemoryTaskStore())
    for i in range(count):
        await repo.create_task(
            "owner-1",
            TaskCreate(
                items=["Draft budget", "Review slides"],
                expected_delivery_date=NOW + timedelta(days=3),
                assigned_by="Alice Smith",
                priority=TaskPriority.HIGH,
            ),
            created_at=NOW + timedelta(minutes=i),
            status=TaskStatus.IN_PROGRESS,
        )
    return repo


async def test_export_formats_rows() -> None:
    repo = await _repo_with_tasks(1)
    service = TaskExportService(TaskService(repo, clock=lambda: NOW))

    export = await service.export("owner-1", TaskFilters())

    assert export.columns == EXPORT_COLUMNS
    assert export.total_records == 1
    assert export.exported_at == NOW
    assert export.rows[0] == {
        "S.No": 1,
        "Task Created Date": "2026-03-10",
        "Tasks": "Draft budget; Review slides",
        "Expected Delivery Date": "2026-03-13",
        "Delivered On": "Not Delivered",
        "Assigned By": "Alice Smith",
        "Current Status": "In-progress",
        "Priority": "High",
        "Notes": "No notes",
    }


async def test_export_ignores_pagination() -> None:
    repo = await _repo_with_tasks(15)
    service = TaskExportService(TaskService(repo, clock=lambda: NOW))

    export = await service.export("owner-1", TaskFilters(page=2, limit=5))

    assert export.total_records == 15
    assert [row["S.No"] for row in export.rows] == list(range(1, 16))
    assert export.filters.limit == 5


async def test_export_passes_filters_to_listing() -> None:
    task_service = AsyncMock()
    task_service.list_tasks.return_value.tasks = []
    task_service.clock = lambda: NOW
    filters = TaskFilters(status="completed", page=3, limit=2)

    export = await TaskExportService(task_service).export("owner-1", filters)

    passed = task_service.list_tasks.call_args.args[1]
    assert passed.status == "completed"
    assert passed.page == 1
    assert passed.limit > 10_000
    assert export.rows == []
