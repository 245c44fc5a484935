"""Base class for all aggregates."""

import abc

from qaudit.domain.events import DomainEvent


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Aggregates are persisted as a whole. State changes that other parts of the
    system care about are queued as domain events and drained by the
    persistence/dispatch boundary after each command.
    """

    def __init__(self) -> None:
        self._pending_events: list[DomainEvent] = []

    # --- Plumbing ---

    def _enqueue(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def pop_events(self) -> list[DomainEvent]:
        """Drain all queued events.

        Returns:
            A list of all events queued since the last call to this method.
            A second call returns an empty list until new events are queued.

        Note: This is NOT thread-safe. It is the caller's responsibility to ensure
        that no other operations are performed on the aggregate between calls to this
        method.
        """

        pending_events = self._pending_events
        self._pending_events = []
        return pending_events

    @property
    def has_pending_events(self) -> bool:
        """Whether any events are waiting to be drained."""
        return bool(self._pending_events)
