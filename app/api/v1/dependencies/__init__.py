"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
"""

from app.api.v1.dependencies.auth import get_owner_id
from app.api.v1.dependencies.db import get_task_repo, get_task_repo_for_write
from app.api.v1.dependencies.task import (
    get_task_export_service,
    get_task_service,
    get_task_service_for_write,
)

__all__ = [
    "get_owner_id",
    "get_task_export_service",
    "get_task_repo",
    "get_task_repo_for_write",
    "get_task_service",
    "get_task_service_for_write",
]
