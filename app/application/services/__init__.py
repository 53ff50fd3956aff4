"""Application services: status engine, validation, query building, statistics."""

from app.application.services.status_engine import (
    apply_completion,
    derive_status,
    is_overdue,
)
from app.application.services.task_query_builder import TaskQueryBuilder
from app.application.services.task_stats import TaskStatsAggregator
from app.application.services.task_validator import TaskValidator

__all__ = [
    "TaskQueryBuilder",
    "TaskStatsAggregator",
    "TaskValidator",
    "apply_completion",
    "derive_status",
    "is_overdue",
]
