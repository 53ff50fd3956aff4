"""Storage-neutral query predicates.

A predicate is a tree of frozen, tagged dataclasses. The query builder
produces them; each repository translates them to its own query language
(SQLAlchemy expressions, in-memory evaluation). Field names are domain
attribute names (e.g. "owner_id", "expected_delivery_date"), never column names.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union


@dataclass(frozen=True)
class Eq:
    """field == value."""

    field: str
    value: Any


@dataclass(frozen=True)
class In:
    """field is one of values."""

    field: str
    values: tuple[Any, ...]


@dataclass(frozen=True)
class Range:
    """Half-open or closed bound on an ordered field. Unset bounds are ignored."""

    field: str
    gte: datetime | None = None
    gt: datetime | None = None
    lte: datetime | None = None
    lt: datetime | None = None

    def __post_init__(self) -> None:
        if self.gte is None and self.gt is None and self.lte is None and self.lt is None:
            raise ValueError(f"Range on {self.field!r} needs at least one bound")


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match.

    For list-valued fields (e.g. items) the predicate matches when any element
    contains the term.
    """

    field: str
    term: str


@dataclass(frozen=True)
class And:
    """All clauses must match. An empty And matches everything."""

    clauses: tuple[Predicate, ...]


@dataclass(frozen=True)
class Or:
    """At least one clause must match. An empty Or matches nothing."""

    clauses: tuple[Predicate, ...]


Predicate = Union[Eq, In, Range, Contains, And, Or]


@dataclass(frozen=True)
class SortSpec:
    """Single-field sort order."""

    field: str
    descending: bool = False


def iter_leaves(predicate: Predicate):
    """Yield every non-composite clause in the predicate tree (depth-first)."""
    if isinstance(predicate, (And, Or)):
        for clause in predicate.clauses:
            yield from iter_leaves(clause)
    else:
        yield predicate
