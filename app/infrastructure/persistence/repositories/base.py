"""Base repository: predicate translation, generic reads and writes, storage error mapping."""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import and_, false, func, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.domain.value_objects.predicate import (
    And,
    Contains,
    Eq,
    In,
    Or,
    Predicate,
    Range,
    SortSpec,
)
from app.infrastructure.exceptions import StorageException
from app.infrastructure.persistence.database import Base
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def _plain(value: Any) -> Any:
    """Unwrap enum members to their stored value."""
    return value.value if isinstance(value, Enum) else value


def escape_like(term: str) -> str:
    """Escape ILIKE wildcards % and _ (and the escape char) so term is literal."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver, SQLAlchemy and timeout faults as StorageException."""
    try:
        yield
    except (SQLAlchemyError, TimeoutError, OSError) as e:
        logger.exception("Storage operation failed: %s", operation)
        raise StorageException(operation, e.__class__.__name__) from e


class BaseRepository(Generic[ModelType]):
    """Base repository with predicate-driven find/count plus create and delete.

    Predicate field names are model attribute names. Subclasses map a field
    whose searchable column differs (e.g. a JSON list with a text shadow
    column) through search_columns.
    """

    search_columns: dict[str, str] = {}

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _column(self, field: str) -> Any:
        column = getattr(self.model, field, None)
        if column is None:
            raise ValueError(f"{self.model.__name__} has no field {field!r}")
        return column

    def where(self, predicate: Predicate) -> ColumnElement[bool]:
        """Translate a domain predicate into a SQLAlchemy boolean expression."""
        if isinstance(predicate, And):
            if not predicate.clauses:
                return true()
            return and_(*(self.where(c) for c in predicate.clauses))
        if isinstance(predicate, Or):
            if not predicate.clauses:
                return false()
            return or_(*(self.where(c) for c in predicate.clauses))
        if isinstance(predicate, Eq):
            return self._column(predicate.field) == _plain(predicate.value)
        if isinstance(predicate, In):
            return self._column(predicate.field).in_(
                [_plain(v) for v in predicate.values]
            )
        if isinstance(predicate, Range):
            column = self._column(predicate.field)
            bounds = []
            if predicate.gte is not None:
                bounds.append(column >= predicate.gte)
            if predicate.gt is not None:
                bounds.append(column > predicate.gt)
            if predicate.lte is not None:
                bounds.append(column <= predicate.lte)
            if predicate.lt is not None:
                bounds.append(column < predicate.lt)
            return and_(*bounds)
        if isinstance(predicate, Contains):
            column = self._column(self.search_columns.get(predicate.field, predicate.field))
            return column.ilike(f"%{escape_like(predicate.term)}%", escape="\\")
        raise TypeError(f"Unsupported predicate: {predicate!r}")

    def _order_by(self, sort: SortSpec) -> list[Any]:
        column = self._column(sort.field)
        model: Any = self.model
        # id as tie-breaker keeps pages stable when sort values collide
        if sort.descending:
            return [column.desc(), model.id.desc()]
        return [column.asc(), model.id.asc()]

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def find(
        self, predicate: Predicate, sort: SortSpec, skip: int = 0, limit: int = 10
    ) -> list[ModelType]:
        """Return records matching predicate, ordered by sort, with offset/limit."""
        stmt = (
            select(self.model)
            .where(self.where(predicate))
            .order_by(*self._order_by(sort))
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, predicate: Predicate) -> int:
        """Return the number of records matching predicate."""
        stmt = select(func.count()).select_from(self.model).where(self.where(predicate))
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def count_grouped(self, predicate: Predicate, field: str) -> dict[str, int]:
        """Return {value: count} of matching records grouped by field."""
        column = self._column(field)
        stmt = (
            select(column, func.count())
            .where(self.where(predicate))
            .group_by(column)
        )
        result = await self.db.execute(stmt)
        return {str(_plain(value)): int(n) for value, n in result.all()}

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server-generated columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record (hard delete)."""
        await self.db.delete(obj)
        await self.db.flush()
