"""create lock_history table

Revision ID: 4c1e2a7d9b30
Revises:
Create Date: 2025-11-03 18:21:44.512301

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from qaudit.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "4c1e2a7d9b30"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "lock_history",
        sa.Column(
            "id",
            BIGINT_PK,
            sa.Identity(start=1),
            nullable=False,
            comment="Insertion sequence; breaks ties between equal timestamps.",
        ),
        sa.Column(
            "evaluation_id",
            sa.String(length=36),
            nullable=False,
            comment="Canonical UUID of the evaluation.",
        ),
        sa.Column(
            "action",
            sa.String(length=20),
            nullable=False,
            comment="Locking action: suspended, unlocked or withdrawn.",
        ),
        sa.Column(
            "occurred_at",
            UTCDateTime(),
            nullable=False,
            comment="UTC instant the action took place.",
        ),
        sa.CheckConstraint(
            "action IN ('suspended', 'unlocked', 'withdrawn')",
            name=op.f("ck_lock_history_known_action"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_lock_history")),
        comment="Append-only lock history read model. One row per locking action.",
    )
    op.create_index(
        op.f("ix_lock_history_evaluation_id_occurred_at"),
        "lock_history",
        ["evaluation_id", "occurred_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(
        op.f("ix_lock_history_evaluation_id_occurred_at"), table_name="lock_history"
    )
    op.drop_table("lock_history")
