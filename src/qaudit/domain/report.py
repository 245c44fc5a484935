"""Evaluation report value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from qaudit.domain import errors
from qaudit.domain.value_objects import Rating, StandardId

if TYPE_CHECKING:
    from qaudit.interfaces.clock import Clock

MINIMUM_VALIDITY_DAYS = 180


def require_aware(name: str, value: datetime) -> None:
    """Raise `ValueError` unless `value` carries a timezone."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be tz-aware, got naive {value.isoformat()}")


@dataclass(frozen=True)
class EvaluationReport:
    """Immutable outcome of an audit.

    Use `EvaluationReport.create` to build one; it enforces the creation-time
    invariants that direct construction does not check.
    """

    rating: Rating
    audit_date: datetime
    expiration_date: datetime
    standard_id: StandardId

    @classmethod
    def create(
        cls,
        rating: Rating,
        audit_date: datetime,
        expiration_date: datetime,
        standard_id: StandardId,
        clock: Clock,
    ) -> EvaluationReport:
        """Create a validated report.

        Args:
            rating: Outcome of the audit.
            audit_date: When the audit took place.
            expiration_date: When the result stops being valid.
            standard_id: The standard the client was evaluated against.
            clock: Source of the current time.

        Raises:
            AuditDateInFutureError: If `audit_date` is after `clock.now()`.
            ExpirationTooEarlyError: If `expiration_date` is less than
                180 days after `audit_date`.
            ValueError: If either date is naive.
        """
        require_aware("audit_date", audit_date)
        require_aware("expiration_date", expiration_date)

        now = clock.now()
        if audit_date > now:
            raise errors.AuditDateInFutureError(audit_date, now)

        if expiration_date < audit_date + timedelta(days=MINIMUM_VALIDITY_DAYS):
            raise errors.ExpirationTooEarlyError(
                audit_date, expiration_date, MINIMUM_VALIDITY_DAYS
            )

        return cls(
            rating=rating,
            audit_date=audit_date,
            expiration_date=expiration_date,
            standard_id=standard_id,
        )

    def is_expired_on(self, date: datetime) -> bool:
        """Return True if the report is no longer valid on `date`."""
        return date > self.expiration_date
