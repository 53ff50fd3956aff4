"""Application use cases: one entry point per workflow."""

from app.application.use_cases.tasks import TaskExportService, TaskService

__all__ = [
    "TaskExportService",
    "TaskService",
]
