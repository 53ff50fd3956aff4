"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

When database_backend is 'postgres', schema is managed by Alembic migrations.
When database_backend is 'memory', no engine is created and tasks live in an
InMemoryTaskStore on app.state instead.

The Database handle is constructed explicitly by the application lifespan
(open at startup, disposed at shutdown) and stored on app.state.database;
there is no module-level engine.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class Database:
    """Async engine plus session factory with an explicit lifecycle."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Create the engine from settings (pool size, overflow, asyncpg command timeout)."""
        connect_args: dict[str, Any] = {}
        if "asyncpg" in settings.database_url:
            # Per-statement deadline; a timeout surfaces as StorageException.
            connect_args["command_timeout"] = settings.db_command_timeout
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
            connect_args=connect_args,
        )
        logger.info("Database engine created (pool_size=%d)", settings.db_pool_size)
        return cls(engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a read session. Does not commit; use transaction() for writes."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction: commit on success, roll back on exception."""
        async with self.session_factory() as session:
            async with session.begin():
                yield session

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
