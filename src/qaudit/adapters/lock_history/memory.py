"""In memory lock history store.

All rows are stored in memory and lost when the instance is discarded.
"""

from collections.abc import Sequence

from qaudit.interfaces.lock_history import LockHistoryEntry, LockHistoryRepository


class InMemoryLockHistoryRepository(LockHistoryRepository):
    """In-memory LockHistoryRepository for testing and non-durable use cases."""

    def __init__(self) -> None:
        self._entries: list[LockHistoryEntry] = []

    def save(self, entry: LockHistoryEntry) -> None:
        self._entries.append(entry)

    def find_by_evaluation_id(self, evaluation_id: str) -> Sequence[LockHistoryEntry]:
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(
            (e for e in self._entries if e.evaluation_id == evaluation_id),
            key=lambda e: e.occurred_at,
        )
