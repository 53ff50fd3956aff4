"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (task repositories).
"""

from app.application.interfaces import ITaskRepository
from app.application.services import (
    TaskQueryBuilder,
    TaskStatsAggregator,
    TaskValidator,
)
from app.application.use_cases import TaskExportService, TaskService

__all__ = [
    "ITaskRepository",
    "TaskExportService",
    "TaskQueryBuilder",
    "TaskService",
    "TaskStatsAggregator",
    "TaskValidator",
]
