"""Task service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import ITaskRepository
from app.application.services import TaskQueryBuilder, TaskValidator
from app.application.use_cases.tasks import TaskExportService, TaskService
from app.core.config import get_settings

from . import db as db_deps


def _build_service(task_repo: ITaskRepository) -> TaskService:
    tz = get_settings().tzinfo
    return TaskService(
        task_repo,
        query_builder=TaskQueryBuilder(tz),
        validator=TaskValidator(tz),
    )


async def get_task_service(
    task_repo: Annotated[ITaskRepository, Depends(db_deps.get_task_repo)],
) -> TaskService:
    """Task service for list/get/stats."""
    return _build_service(task_repo)


async def get_task_service_for_write(
    task_repo: Annotated[ITaskRepository, Depends(db_deps.get_task_repo_for_write)],
) -> TaskService:
    """Task service for create/update/delete (transactional)."""
    return _build_service(task_repo)


async def get_task_export_service(
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskExportService:
    """Export feed over the read-only task service."""
    return TaskExportService(task_service, tz=get_settings().tzinfo)
