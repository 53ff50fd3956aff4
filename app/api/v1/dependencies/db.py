"""Task store dependencies (composition root).

The backend is chosen at startup: the lifespan puts either a Database
(postgres) or an InMemoryTaskStore (memory) on app.state. Read routes get a
plain session; write routes get a session inside a transaction that commits
on success and rolls back on error.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from app.application.interfaces.repositories import ITaskRepository
from app.infrastructure.persistence.repositories import (
    InMemoryTaskRepository,
    TaskRepository,
)


async def get_task_repo(request: Request) -> AsyncIterator[ITaskRepository]:
    """Task repository for read operations."""
    store = request.app.state.task_store
    if store is not None:
        yield InMemoryTaskRepository(store)
        return
    async with request.app.state.database.session() as session:
        yield TaskRepository(session)


async def get_task_repo_for_write(request: Request) -> AsyncIterator[ITaskRepository]:
    """Task repository for writes (transactional)."""
    store = request.app.state.task_store
    if store is not None:
        yield InMemoryTaskRepository(store)
        return
    async with request.app.state.database.transaction() as session:
        yield TaskRepository(session)
