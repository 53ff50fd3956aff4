"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OwnedModel,
    OwnerMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.task import Task

__all__ = [
    "CuidMixin",
    "OwnedModel",
    "OwnerMixin",
    "Task",
    "TimestampMixin",
]
