"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.memory_task_repo import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "BaseRepository",
    "InMemoryTaskRepository",
    "InMemoryTaskStore",
    "TaskRepository",
]
