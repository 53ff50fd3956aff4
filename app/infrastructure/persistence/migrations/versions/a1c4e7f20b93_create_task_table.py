"""create task table

Revision ID: a1c4e7f20b93
Revises:
Create Date: 2026-10-18

Owner-scoped task records. items is a JSON array; items_text mirrors it
(newline-joined) for ILIKE search.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c4e7f20b93"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(length=128), nullable=False),
        sa.Column("items", sa.JSON(), nullable=False),
        sa.Column("items_text", sa.Text(), nullable=False),
        sa.Column("expected_delivery_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("delivered_on", sa.DateTime(timezone=True), nullable=True),
        sa.Column("assigned_by", sa.String(length=100), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="pending"),
        sa.Column("priority", sa.String(length=16), nullable=False, server_default="medium"),
        sa.Column("notes", sa.String(length=1000), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'in-progress', 'completed', 'overdue', 'cancelled')",
            name="ck_task_status",
        ),
        sa.CheckConstraint(
            "priority IN ('low', 'medium', 'high', 'urgent')",
            name="ck_task_priority",
        ),
    )
    op.create_index("ix_task_owner_id", "task", ["owner_id"], unique=False)
    op.create_index(
        "ix_task_owner_created", "task", ["owner_id", "created_at"], unique=False
    )
    op.create_index(
        "ix_task_owner_status_due",
        "task",
        ["owner_id", "status", "expected_delivery_date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_task_owner_status_due", table_name="task")
    op.drop_index("ix_task_owner_created", table_name="task")
    op.drop_index("ix_task_owner_id", table_name="task")
    op.drop_table("task")
