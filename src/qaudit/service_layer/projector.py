"""Projection of lock transitions into the lock history read model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qaudit.domain import events
from qaudit.interfaces.lock_history import LockAction, LockHistoryEntry

if TYPE_CHECKING:
    from qaudit.interfaces.lock_history import LockHistoryRepository

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class LockHistoryProjector:
    """Turns drained lock events into lock history rows."""

    def __init__(self, repository: LockHistoryRepository) -> None:
        self.repository = repository

    def project(self, event: events.DomainEvent) -> None:
        """Append one history row for a lock event.

        Raises:
            ValueError: If the event is not a lock event.
        """
        match event:
            case events.EvaluationSuspended():
                action = LockAction.SUSPENDED
            case events.EvaluationUnlocked():
                action = LockAction.UNLOCKED
            case events.EvaluationWithdrawn():
                action = LockAction.WITHDRAWN
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")

        entry = LockHistoryEntry(
            evaluation_id=str(event.evaluation_id),
            action=action,
            occurred_at=event.occurred_at,
        )
        self.repository.save(entry)
        logger.debug("Projected %s for evaluation %s", action.value, entry.evaluation_id)
