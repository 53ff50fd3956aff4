"""Task API: thin routes delegating to TaskService."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    get_owner_id,
    get_task_service,
    get_task_service_for_write,
)
from app.application.dtos.task import TaskFilters
from app.application.use_cases.tasks import TaskService
from app.core.config import get_settings
from app.core.limiter import limit_writes
from app.schemas.task import (
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskStatsResponse,
    TaskUpdateRequest,
)

router = APIRouter()


def task_filters(
    page: int = Query(1, description="1-based page number"),
    limit: int | None = Query(None, description="Page size (default from settings)"),
    status: str | None = Query(None, description="Task status or 'all'"),
    priority: str | None = Query(None, description="Task priority or 'all'"),
    date_filter: str | None = Query(
        None, alias="dateFilter", description="today | week | month | custom"
    ),
    start_date: datetime | None = Query(None, alias="startDate"),
    end_date: datetime | None = Query(None, alias="endDate"),
    search: str | None = Query(None, description="Case-insensitive text search"),
) -> TaskFilters:
    """Collect list/export query parameters into TaskFilters."""
    return TaskFilters(
        status=status,
        priority=priority,
        date_filter=date_filter,
        start_date=start_date,
        end_date=end_date,
        search=search,
        page=page,
        limit=limit if limit is not None else get_settings().default_page_size,
    )


@router.get("/stats", response_model=TaskStatsResponse)
async def get_task_stats(
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Status counts for the caller's tasks; overdue is computed from deadlines."""
    stats = await task_svc.get_stats(owner_id)
    return TaskStatsResponse.model_validate(stats)


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create a task owned by the caller."""
    created = await task_svc.create_task(owner_id, body.to_draft())
    return TaskResponse.model_validate(created)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    filters: Annotated[TaskFilters, Depends(task_filters)],
):
    """List the caller's tasks, newest first, with filters and pagination."""
    page = await task_svc.list_tasks(owner_id, filters)
    return TaskListResponse.model_validate(page)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Get one of the caller's tasks by id."""
    task = await task_svc.get_task(owner_id, task_id)
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Partially update one of the caller's tasks."""
    updated = await task_svc.update_task(owner_id, task_id, body.to_changes())
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    owner_id: Annotated[str, Depends(get_owner_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Permanently delete one of the caller's tasks."""
    await task_svc.delete_task(owner_id, task_id)
    return Response(status_code=204)
