"""DTOs for tasks, task queries, pages, and statistics (no dependency on ORM)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import TaskPriority, TaskStatus
from app.domain.value_objects.predicate import Predicate, SortSpec


@dataclass(frozen=True)
class TaskResult:
    """A stored task as returned by repositories and the task service."""

    id: str
    owner_id: str
    created_at: datetime
    items: list[str]
    expected_delivery_date: datetime
    delivered_on: datetime | None
    assigned_by: str
    status: TaskStatus
    priority: TaskPriority
    notes: str
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TaskCreate:
    """Validated, normalized fields for a new task (output of TaskValidator)."""

    items: list[str]
    expected_delivery_date: datetime
    assigned_by: str
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    notes: str = ""
    delivered_on: datetime | None = None


@dataclass(frozen=True)
class TaskFilters:
    """List/export filter parameters as received from the caller.

    status/priority accept "all" (or None) for no filter. date_filter is one
    of today | week | month | custom; custom needs both start_date and end_date.
    """

    status: str | None = None
    priority: str | None = None
    date_filter: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    search: str | None = None
    page: int = 1
    limit: int = 10


@dataclass(frozen=True)
class TaskQuery:
    """Storage-neutral query plan produced by TaskQueryBuilder."""

    predicate: Predicate
    sort: SortSpec
    skip: int
    limit: int


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination metadata returned alongside a page of tasks."""

    current_page: int
    total_pages: int
    total_matching: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> PaginationMeta:
        """Derive page count and navigation flags from page, page size, and total."""
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_matching=total,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


@dataclass(frozen=True)
class TaskPage:
    """One page of tasks plus pagination metadata."""

    tasks: list[TaskResult]
    pagination: PaginationMeta


@dataclass(frozen=True)
class TaskStats:
    """Per-owner task statistics.

    overdue is computed from deadlines and is the authoritative figure;
    stored_overdue is the count of records whose stored status is already
    "overdue" and can lag behind until those records are written again.
    """

    total: int
    overdue: int
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    cancelled: int = 0
    stored_overdue: int = 0


@dataclass(frozen=True)
class TaskExport:
    """Tabular export of a filtered task set (header row + data rows)."""

    columns: list[str]
    rows: list[dict[str, str | int]]
    exported_at: datetime
    filters: TaskFilters
    total_records: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_records", len(self.rows))
