"""Domain layer: enums, value objects (predicates), and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import DateFilter, TaskPriority, TaskStatus
from app.domain.exceptions import (
    AuthenticationException,
    ResourceNotFoundException,
    TaskTrackerException,
    ValidationException,
)
from app.domain.value_objects import And, Contains, Eq, In, Or, Predicate, Range, SortSpec

__all__ = [
    # Enums
    "DateFilter",
    "TaskPriority",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "ResourceNotFoundException",
    "TaskTrackerException",
    "ValidationException",
    # Value objects
    "And",
    "Contains",
    "Eq",
    "In",
    "Or",
    "Predicate",
    "Range",
    "SortSpec",
]
