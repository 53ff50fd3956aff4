"""Tests for TaskStatsAggregator over the in-memory repository."""

from datetime import UTC, datetime, timedelta

from app.application.dtos.task import TaskCreate
from app.application.services.task_stats import TaskStatsAggregator
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.repositories import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
)

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


async def _seed(repo, owner_id, status, deadline, count=1):
    for _ in range(count):
        await repo.create_task(
            owner_id,
            TaskCreate(items=["x"], expected_delivery_date=deadline, assigned_by="A"),
            created_at=NOW - timedelta(days=5),
            status=status,
        )


async def test_stale_pending_records_count_as_overdue_and_pending() -> None:
    repo = InMemoryTaskRepository(InMemoryTaskStore())
    past, future = NOW - timedelta(days=1), NOW + timedelta(days=1)
    # Stored status still pending although the deadline has passed.
    await _seed(repo, "owner-1", TaskStatus.PENDING, past, count=3)
    await _seed(repo, "owner-1", TaskStatus.IN_PROGRESS, future, count=3)
    await _seed(repo, "owner-1", TaskStatus.COMPLETED, past, count=2)
    await _seed(repo, "owner-1", TaskStatus.CANCELLED, past, count=2)
    await _seed(repo, "owner-2", TaskStatus.PENDING, past, count=4)

    stats = await TaskStatsAggregator(repo).compute("owner-1", NOW)

    assert stats.total == 10
    assert stats.overdue == 3
    assert stats.pending == 3
    assert stats.in_progress == 3
    assert stats.completed == 2
    assert stats.cancelled == 2
    assert stats.stored_overdue == 0


async def test_stored_overdue_bucket_is_reported_separately() -> None:
    repo = InMemoryTaskRepository(InMemoryTaskStore())
    await _seed(repo, "owner-1", TaskStatus.OVERDUE, NOW - timedelta(days=2), count=2)
    await _seed(repo, "owner-1", TaskStatus.IN_PROGRESS, NOW - timedelta(hours=1))

    stats = await TaskStatsAggregator(repo).compute("owner-1", NOW)

    assert stats.total == 3
    assert stats.stored_overdue == 2
    # Only open (pending/in-progress) records count toward the derived figure.
    assert stats.overdue == 1


async def test_empty_owner_reports_zero_everywhere() -> None:
    stats = await TaskStatsAggregator(
        InMemoryTaskRepository(InMemoryTaskStore())
    ).compute("nobody", NOW)
    assert (stats.total, stats.overdue, stats.pending, stats.completed) == (0, 0, 0, 0)
