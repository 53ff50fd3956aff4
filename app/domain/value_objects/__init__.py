"""Domain value objects and shared value types."""

from app.domain.value_objects.predicate import (
    And,
    Contains,
    Eq,
    In,
    Or,
    Predicate,
    Range,
    SortSpec,
    iter_leaves,
)

__all__ = [
    "And",
    "Contains",
    "Eq",
    "In",
    "Or",
    "Predicate",
    "Range",
    "SortSpec",
    "iter_leaves",
]
