"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (persistence handle,
telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: persistence (Database for postgres, InMemoryTaskStore for
    memory), telemetry (if enabled). Shutdown order: telemetry shutdown,
    database dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.database = None
    app.state.task_store = None
    if settings.database_backend == "postgres":
        from app.infrastructure.persistence.database import Database

        app.state.database = Database.from_settings(settings)
    else:
        from app.infrastructure.persistence.repositories import InMemoryTaskStore

        app.state.task_store = InMemoryTaskStore()
        logger.warning("Using in-memory task store; data is lost on restart")

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if app.state.database is not None:
            telemetry.instrument_sqlalchemy(app.state.database.engine)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    if app.state.database is not None:
        await app.state.database.dispose()
        app.state.database = None
