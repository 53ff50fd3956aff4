"""Seed sample tasks for one owner into Postgres.

Tasks go through TaskService, so validation and status derivation are the
same as for API writes. Delivery dates are spread over the coming days.

Usage:
    uv run python -m scripts.seed_dev_data <owner_id> [count]

Requires: DATABASE_URL (Postgres), migrated DB (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import sys
from datetime import timedelta

from dotenv import load_dotenv

from app.application.services import TaskQueryBuilder, TaskValidator
from app.application.use_cases.tasks import TaskService
from app.core.config import get_settings
from app.domain.enums import TaskPriority, TaskStatus
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import TaskRepository
from app.shared.utils.datetime import utc_now

_ASSIGNERS = ["Alice Smith", "Bob Jones", "Carol White"]
_STATUSES = [TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED]
_PRIORITIES = list(TaskPriority)


async def main() -> None:
    """Create count sample tasks for owner_id."""
    load_dotenv()
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.seed_dev_data <owner_id> [count]",
            file=sys.stderr,
        )
        sys.exit(1)
    owner_id = sys.argv[1]
    count = int(sys.argv[2]) if len(sys.argv) > 2 else 12

    settings = get_settings()
    if settings.database_backend != "postgres":
        print("seed_dev_data requires DATABASE_BACKEND=postgres", file=sys.stderr)
        sys.exit(1)

    database = Database.from_settings(settings)
    now = utc_now()
    try:
        async with database.transaction() as session:
            service = TaskService(
                TaskRepository(session),
                query_builder=TaskQueryBuilder(settings.tzinfo),
                validator=TaskValidator(settings.tzinfo),
            )
            for i in range(count):
                task = await service.create_task(
                    owner_id,
                    {
                        "items": [f"Sample task {i + 1}", "Review and report"],
                        "expected_delivery_date": now + timedelta(days=i % 7 + 1),
                        "assigned_by": _ASSIGNERS[i % len(_ASSIGNERS)],
                        "status": _STATUSES[i % len(_STATUSES)].value,
                        "priority": _PRIORITIES[i % len(_PRIORITIES)].value,
                        "notes": "Seeded for development" if i % 2 else "",
                    },
                )
                print(f"Created task {task.id} ({task.status.value})")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
