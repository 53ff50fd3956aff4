"""Build owner-scoped task queries from list/export filters."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from app.application.dtos.task import TaskFilters, TaskQuery
from app.domain.enums import DateFilter
from app.domain.value_objects.predicate import (
    And,
    Contains,
    Eq,
    Or,
    Predicate,
    Range,
    SortSpec,
)
from app.shared.utils.datetime import (
    ensure_utc,
    start_of_day,
    start_of_month,
    start_of_next_day,
    start_of_week,
)

ALL = "all"
SEARCH_FIELDS = ("items", "assigned_by", "notes")
DEFAULT_SORT = SortSpec("created_at", descending=True)
# Largest OFFSET/LIMIT a bigint column can carry.
MAX_ROWS = 2**63 - 1


class TaskQueryBuilder:
    """Translate TaskFilters into a TaskQuery (predicate, sort, skip, limit).

    The owner clause is always the first conjunct and no filter can replace
    it. limit has a floor of 1 and no ceiling below MAX_ROWS, so export can ask
    for every matching record in one page. skip and limit are capped at
    MAX_ROWS so an oversized page reads as empty instead of failing.
    """

    def __init__(self, tz: tzinfo = UTC) -> None:
        self.tz = tz

    def build(self, owner_id: str, filters: TaskFilters, now: datetime) -> TaskQuery:
        clauses: list[Predicate] = [Eq("owner_id", owner_id)]

        if filters.status and filters.status != ALL:
            clauses.append(Eq("status", filters.status))
        if filters.priority and filters.priority != ALL:
            clauses.append(Eq("priority", filters.priority))

        window = self._date_window(filters, now)
        if window is not None:
            clauses.append(window)

        term = (filters.search or "").strip()
        if term:
            clauses.append(Or(tuple(Contains(f, term) for f in SEARCH_FIELDS)))

        page = max(1, filters.page)
        limit = min(max(1, filters.limit), MAX_ROWS)
        return TaskQuery(
            predicate=And(tuple(clauses)),
            sort=DEFAULT_SORT,
            skip=min((page - 1) * limit, MAX_ROWS),
            limit=limit,
        )

    def _date_window(self, filters: TaskFilters, now: datetime) -> Range | None:
        """Return the created_at constraint for date_filter, or None."""
        try:
            kind = DateFilter(filters.date_filter) if filters.date_filter else None
        except ValueError:
            return None
        if kind is DateFilter.TODAY:
            return Range(
                "created_at",
                gte=start_of_day(now, self.tz),
                lt=start_of_next_day(now, self.tz),
            )
        if kind is DateFilter.WEEK:
            return Range("created_at", gte=start_of_week(now, self.tz))
        if kind is DateFilter.MONTH:
            return Range("created_at", gte=start_of_month(now, self.tz))
        if kind is DateFilter.CUSTOM and filters.start_date and filters.end_date:
            return Range(
                "created_at",
                gte=ensure_utc(filters.start_date),
                lte=ensure_utc(filters.end_date),
            )
        return None
