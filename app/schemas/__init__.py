"""Pydantic request/response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.task import (
    PaginationResponse,
    TaskCreateRequest,
    TaskExportResponse,
    TaskListResponse,
    TaskResponse,
    TaskStatsResponse,
    TaskUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "PaginationResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TaskCreateRequest",
    "TaskExportResponse",
    "TaskListResponse",
    "TaskResponse",
    "TaskStatsResponse",
    "TaskUpdateRequest",
]
