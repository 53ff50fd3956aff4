"""Pytest configuration and fixtures for the task tracker.

HTTP tests run against app.main:app with the in-memory task store (the
lifespan is entered per test, so every test starts with an empty store).
Repository integration tests use TEST_DATABASE_URL and are skipped when it is
not set. All imports use app.*.
"""

import os

# Settings are read when app.main is imported; pin the test environment first.
os.environ["DATABASE_BACKEND"] = "memory"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["TIMEZONE"] = "UTC"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from app.core.config import get_settings

get_settings.cache_clear()

from app.core.limiter import limiter  # noqa: E402
from app.infrastructure.persistence.database import Database  # noqa: E402
from app.infrastructure.security.jwt import create_access_token  # noqa: E402
from app.main import app  # noqa: E402

OWNER_ID = "owner-alice"
OTHER_OWNER_ID = "owner-bob"


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), lifespan included."""
    limiter.reset()
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer headers for OWNER_ID."""
    return {"Authorization": f"Bearer {create_access_token(OWNER_ID)}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Bearer headers for a second owner (isolation tests)."""
    return {"Authorization": f"Bearer {create_access_token(OTHER_OWNER_ID)}"}


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires TEST_DATABASE_URL (postgresql+asyncpg://...) pointing at a
    migrated database. Skips (pytest.skip) when it is not set. Use
    @pytest.mark.requires_db to mark tests that need this fixture; run
    without DB via: pytest -m 'not requires_db'.
    """
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        pytest.skip(
            "Postgres not configured: set TEST_DATABASE_URL, "
            "then run: alembic upgrade head"
        )
    database = Database(create_async_engine(url))
    try:
        async with database.session_factory() as session:
            yield session
            await session.rollback()
    finally:
        await database.dispose()
