"""Application DTOs (no ORM dependency)."""

from app.application.dtos.task import (
    PaginationMeta,
    TaskCreate,
    TaskExport,
    TaskFilters,
    TaskPage,
    TaskQuery,
    TaskResult,
    TaskStats,
)

__all__ = [
    "PaginationMeta",
    "TaskCreate",
    "TaskExport",
    "TaskFilters",
    "TaskPage",
    "TaskQuery",
    "TaskResult",
    "TaskStats",
]
