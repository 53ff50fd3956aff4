"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, OwnerMixin, TimestampMixin and the combined
OwnedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class OwnerMixin:
    """Mixin for owner-scoped models. owner_id is the identity provider's subject (no FK)."""

    @declared_attr
    def owner_id(cls) -> Mapped[str]:
        return mapped_column(String(128), nullable=False, index=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware).

    created_at is normally supplied by the application so that it matches the
    clock used for status derivation; the server default is a fallback.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class OwnedModel(CuidMixin, OwnerMixin, TimestampMixin):
    """Combined mixin: CUID + owner_id + created_at/updated_at."""

    __abstract__ = True
