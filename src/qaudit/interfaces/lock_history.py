"""Lock history interfaces for QAUDIT.

This module defines:
- The `LockHistoryEntry` row recorded for every suspend/unlock/withdraw.
- The `LockHistoryRepository` port (framework-free ABC) storing those rows.
- A small exception hierarchy for adapter failures.

The lock history is a read model: it is only ever appended to from drained
domain events, and the domain never queries it.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# --- Exceptions to standardize adapter behavior ---


class LockHistoryError(Exception):
    """Base class for lock history store errors."""


class LockHistoryUnavailableError(LockHistoryError):
    """Operational/timeout/connection errors; callers may retry."""


# --- Row DTO ---


class LockAction(str, Enum):
    """Locking action recorded in the history."""

    SUSPENDED = "suspended"
    UNLOCKED = "unlocked"
    WITHDRAWN = "withdrawn"


@dataclass(frozen=True, slots=True)
class LockHistoryEntry:
    """One locking action on one evaluation."""

    evaluation_id: str
    action: LockAction
    occurred_at: datetime

    def __post_init__(self) -> None:
        if not self.evaluation_id.strip():
            raise ValueError("evaluation_id must be non-empty")
        if self.occurred_at.tzinfo is None:
            raise ValueError("occurred_at must be tz-aware")


# --- Port ---


class LockHistoryRepository(abc.ABC):
    """Contract for an append-only lock history store."""

    @abc.abstractmethod
    def save(self, entry: LockHistoryEntry) -> None:
        """Append an entry.

        Raises:
            LockHistoryUnavailableError: On transient storage failures.
        """

    @abc.abstractmethod
    def find_by_evaluation_id(self, evaluation_id: str) -> Sequence[LockHistoryEntry]:
        """Return the entries for an evaluation ordered by `occurred_at` ascending."""
