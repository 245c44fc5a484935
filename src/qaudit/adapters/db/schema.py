"""Lock history schema.

Defines the append-only ``lock_history`` table: one row per locking action
(suspended, unlocked, withdrawn) on an evaluation.

Constraints (enforced here):

| Constraint                                  | Purpose                   |
|---------------------------------------------|---------------------------|
| CHECK(action IN ('suspended', ...))         | known locking actions     |
| INDEX(evaluation_id, occurred_at)           | per-evaluation history    |
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Identity, Index, String, Table

from qaudit.adapters.db.metadata import metadata
from qaudit.adapters.db.sa_types import BIGINT_PK, UTCDateTime

__all__ = ["lock_history"]

lock_history = Table(
    "lock_history",
    metadata,
    Column(
        "id",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Insertion sequence; breaks ties between equal timestamps.",
    ),
    Column(
        "evaluation_id",
        String(36),
        nullable=False,
        comment="Canonical UUID of the evaluation.",
    ),
    Column(
        "action",
        String(20),
        nullable=False,
        comment="Locking action: suspended, unlocked or withdrawn.",
    ),
    Column(
        "occurred_at",
        UTCDateTime(),
        nullable=False,
        comment="UTC instant the action took place.",
    ),
    CheckConstraint(
        "action IN ('suspended', 'unlocked', 'withdrawn')", name="known_action"
    ),
    Index(None, "evaluation_id", "occurred_at"),
    comment="Append-only lock history read model. One row per locking action.",
)
