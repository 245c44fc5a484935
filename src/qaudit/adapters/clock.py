"""Clocks for QAUDIT."""

from datetime import datetime, timedelta, timezone

from qaudit.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Production clock returning the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """A clock pinned to a given instant.

    Note:
        Intended for tests and replays. Naive datetimes are treated as UTC.
    """

    def __init__(self, at: datetime) -> None:
        self._now = at if at.tzinfo is not None else at.replace(tzinfo=timezone.utc)

    @classmethod
    def at(cls, iso: str) -> "FixedClock":
        """Build a clock from an ISO 8601 string (e.g. ``"2024-06-01"``)."""
        return cls(datetime.fromisoformat(iso))

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by `delta`."""
        self._now += delta
