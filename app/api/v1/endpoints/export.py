"""Export API: every matching task as a table for client-side spreadsheet rendering."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_owner_id, get_task_export_service
from app.api.v1.endpoints.tasks import task_filters
from app.application.dtos.task import TaskFilters
from app.application.use_cases.tasks import TaskExportService
from app.core.limiter import limit_exports
from app.schemas.task import TaskExportResponse

router = APIRouter()


@router.get("/tasks", response_model=TaskExportResponse)
@limit_exports
async def export_tasks(
    request: Request,
    owner_id: Annotated[str, Depends(get_owner_id)],
    export_svc: Annotated[TaskExportService, Depends(get_task_export_service)],
    filters: Annotated[TaskFilters, Depends(task_filters)],
):
    """Export all of the caller's tasks matching the filters (page and limit are ignored)."""
    export = await export_svc.export(owner_id, filters)
    return TaskExportResponse(
        columns=export.columns,
        rows=export.rows,
        total_records=export.total_records,
        exported_at=export.exported_at,
        filters={
            k: v
            for k, v in asdict(export.filters).items()
            if v is not None and k not in ("page", "limit")
        },
    )
