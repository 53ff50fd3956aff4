"""Task API schemas.

JSON field names are camelCase (ownerId, expectedDeliveryDate, ...); request
bodies also accept snake_case. Request models stay permissive on value types
so field rules are enforced by TaskValidator, which reports every violated
field at once.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_snake

from app.domain.enums import TaskPriority, TaskStatus


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreateRequest(CamelModel):
    """Request body for creating a task."""

    items: list[str] | None = None
    expected_delivery_date: datetime | str | None = None
    assigned_by: str | None = None
    status: str | None = None
    priority: str | None = None
    notes: str | None = None
    delivered_on: datetime | str | None = None

    def to_draft(self) -> dict[str, Any]:
        """Fields the client sent, keyed by domain field name."""
        return self.model_dump(exclude_unset=True)


class TaskUpdateRequest(CamelModel):
    """Request body for updating a task (partial).

    Unknown keys are kept so validation can reject them (including attempts
    to change id, ownerId or createdAt).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    items: list[str] | None = None
    expected_delivery_date: datetime | str | None = None
    delivered_on: datetime | str | None = None
    assigned_by: str | None = None
    status: str | None = None
    priority: str | None = None
    notes: str | None = None

    def to_changes(self) -> dict[str, Any]:
        """Fields the client sent (explicit nulls included), keyed by domain field name."""
        changes = {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in type(self).model_fields
        }
        for key, value in (self.model_extra or {}).items():
            changes[to_snake(key)] = value
        return changes


class TaskResponse(CamelModel):
    """A stored task."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    owner_id: str
    created_at: datetime
    items: list[str]
    expected_delivery_date: datetime
    delivered_on: datetime | None = None
    assigned_by: str
    status: TaskStatus
    priority: TaskPriority
    notes: str = ""
    updated_at: datetime | None = None


class PaginationResponse(CamelModel):
    """Pagination metadata for a task list page."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    current_page: int
    total_pages: int
    total_matching: int
    has_next_page: bool
    has_prev_page: bool


class TaskListResponse(CamelModel):
    """One page of tasks."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    tasks: list[TaskResponse]
    pagination: PaginationResponse


class TaskStatsResponse(CamelModel):
    """Per-owner task statistics. overdue is the deadline-based count."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    total: int
    overdue: int
    pending: int
    in_progress: int = Field(alias="in-progress")
    completed: int
    cancelled: int
    stored_overdue: int = Field(
        description="Records whose stored status is already overdue (may lag)"
    )


class TaskExportResponse(CamelModel):
    """Export feed: header row plus one row per matching task."""

    columns: list[str]
    rows: list[dict[str, str | int]]
    total_records: int
    exported_at: datetime
    filters: dict[str, Any] = Field(default_factory=dict)
