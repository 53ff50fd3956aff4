"""Domain enumerations for the task tracker.

Enums represent fixed sets of domain values (task status and priority).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for validation or serialization)."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status.

    OVERDUE is derived from the deadline (see status_engine); COMPLETED and
    CANCELLED are terminal and never decay.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Return True for statuses that are never overridden automatically."""
        return self in TERMINAL_STATUSES


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class DateFilter(_ValuesMixin, str, Enum):
    """Named windows over the task creation date."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


TERMINAL_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED})
# Statuses that decay to OVERDUE once the deadline passes.
OPEN_STATUSES = frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS})
