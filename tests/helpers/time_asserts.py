"""Assertion helpers for instants that must be aware UTC."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def assert_strict_utc(dt: datetime) -> None:
    """Fail unless `dt` is aware, zero-offset, and uses `timezone.utc` itself.

    A fixed zero offset from `astimezone()` on a UTC host would pass a plain
    offset check, so the tzinfo identity is checked too.
    """
    assert dt.tzinfo is not None, "instant must be tz-aware"
    assert dt.utcoffset() == timedelta(0), (
        f"expected UTC offset 0, got {dt.utcoffset()}"
    )
    assert dt.tzinfo is timezone.utc, f"expected timezone.utc, got {dt.tzinfo!r}"
