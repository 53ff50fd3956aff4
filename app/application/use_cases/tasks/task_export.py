"""Task export use case: every matching task as header + rows."""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import UTC, datetime, tzinfo

from app.application.dtos.task import TaskExport, TaskFilters, TaskResult
from app.application.use_cases.tasks.task_operations import TaskService

EXPORT_COLUMNS = [
    "S.No",
    "Task Created Date",
    "Tasks",
    "Expected Delivery Date",
    "Delivered On",
    "Assigned By",
    "Current Status",
    "Priority",
    "Notes",
]


def _format_date(value: datetime, tz: tzinfo) -> str:
    return value.astimezone(tz).strftime("%Y-%m-%d")


def _task_to_row(index: int, task: TaskResult, tz: tzinfo) -> dict[str, str | int]:
    """Build one export row keyed by column header."""
    return {
        "S.No": index,
        "Task Created Date": _format_date(task.created_at, tz),
        "Tasks": "; ".join(task.items),
        "Expected Delivery Date": _format_date(task.expected_delivery_date, tz),
        "Delivered On": (
            _format_date(task.delivered_on, tz) if task.delivered_on else "Not Delivered"
        ),
        "Assigned By": task.assigned_by,
        "Current Status": task.status.value.capitalize(),
        "Priority": task.priority.value.capitalize(),
        "Notes": task.notes or "No notes",
    }


class TaskExportService:
    """Export the owner's tasks matching filters as a table (spreadsheet rendering is client-side).

    Pagination in filters is ignored: the list is fetched as a single
    unbounded page.
    """

    def __init__(self, task_service: TaskService, tz: tzinfo = UTC) -> None:
        self._task_service = task_service
        self._tz = tz

    async def export(self, owner_id: str, filters: TaskFilters) -> TaskExport:
        unbounded = replace(filters, page=1, limit=sys.maxsize)
        page = await self._task_service.list_tasks(owner_id, unbounded)
        rows = [
            _task_to_row(i, task, self._tz)
            for i, task in enumerate(page.tasks, start=1)
        ]
        return TaskExport(
            columns=list(EXPORT_COLUMNS),
            rows=rows,
            exported_at=self._task_service.clock(),
            filters=filters,
        )
