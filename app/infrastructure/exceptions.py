"""Infrastructure exceptions for persistence operations.

Storage errors extend TaskTrackerException so presentation can map them
to HTTP responses consistently.
"""

from app.domain.exceptions import TaskTrackerException


class StorageException(TaskTrackerException):
    """Persistence fault or timeout. Never retried by the application."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Storage operation failed: {operation}",
            "STORAGE_ERROR",
            {"operation": operation, "reason": reason},
        )
