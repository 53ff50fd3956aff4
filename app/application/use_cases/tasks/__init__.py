"""Task use cases."""

from app.application.use_cases.tasks.task_export import EXPORT_COLUMNS, TaskExportService
from app.application.use_cases.tasks.task_operations import TaskService

__all__ = [
    "EXPORT_COLUMNS",
    "TaskExportService",
    "TaskService",
]
