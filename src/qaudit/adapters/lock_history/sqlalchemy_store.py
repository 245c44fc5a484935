"""SQLAlchemy-backed lock history store.

Each `save` runs in its own transaction on the given Engine. Driver and
database failures are mapped to `LockHistoryUnavailableError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import DBAPIError

from qaudit.adapters.db.schema import lock_history
from qaudit.interfaces.lock_history import (
    LockAction,
    LockHistoryEntry,
    LockHistoryRepository,
    LockHistoryUnavailableError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class SqlAlchemyLockHistoryRepository(LockHistoryRepository):
    """SQLAlchemy-backed LockHistoryRepository.

    - Uses the `lock_history` table (see adapters.db.schema).
    - Reads are ordered by `occurred_at`, then insertion order.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def save(self, entry: LockHistoryEntry) -> None:
        stmt = insert(lock_history).values(
            evaluation_id=entry.evaluation_id,
            action=entry.action.value,
            occurred_at=entry.occurred_at,
        )
        try:
            with self.engine.begin() as connection:
                connection.execute(stmt)
        except DBAPIError as e:
            raise LockHistoryUnavailableError(str(e)) from e

    def find_by_evaluation_id(self, evaluation_id: str) -> Sequence[LockHistoryEntry]:
        stmt = (
            select(
                lock_history.c.evaluation_id,
                lock_history.c.action,
                lock_history.c.occurred_at,
            )
            .where(lock_history.c.evaluation_id == evaluation_id)
            .order_by(lock_history.c.occurred_at.asc(), lock_history.c.id.asc())
        )
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(stmt).mappings().all()
        except DBAPIError as e:
            raise LockHistoryUnavailableError(str(e)) from e

        return [
            LockHistoryEntry(
                evaluation_id=row["evaluation_id"],
                action=LockAction(row["action"]),
                occurred_at=row["occurred_at"],
            )
            for row in rows
        ]
