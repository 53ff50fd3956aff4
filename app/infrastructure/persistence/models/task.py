"""Task ORM model. One row per unit of work, scoped to its owner."""

from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import TaskPriority, TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import OwnedModel


def _in_values(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Task(OwnedModel, Base):
    """Task record. Table: task.

    items is stored as a JSON array for display order; items_text holds the
    same entries joined by newlines so search can use a plain ILIKE.
    """

    __tablename__ = "task"

    items: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    items_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    expected_delivery_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    delivered_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    assigned_by: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TaskStatus.PENDING.value,
        server_default=TaskStatus.PENDING.value,
    )
    priority: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=TaskPriority.MEDIUM.value,
        server_default=TaskPriority.MEDIUM.value,
    )
    notes: Mapped[str] = mapped_column(
        String(1000), nullable=False, default="", server_default=""
    )

    __table_args__ = (
        CheckConstraint(_in_values("status", TaskStatus.values()), name="ck_task_status"),
        CheckConstraint(
            _in_values("priority", TaskPriority.values()), name="ck_task_priority"
        ),
        Index("ix_task_owner_created", "owner_id", "created_at"),
        # Serves status filters and the overdue count (status IN ... AND deadline < now).
        Index(
            "ix_task_owner_status_due", "owner_id", "status", "expected_delivery_date"
        ),
    )
