"""Audit cadence rules.

A new audit must leave a minimum gap after the most recent prior one; the gap
depends on whether that prior evaluation was positive or negative.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from qaudit.domain import errors
from qaudit.domain.report import require_aware

if TYPE_CHECKING:
    from qaudit.domain.report import EvaluationReport

POSITIVE_EVALUATION_DELAY_DAYS = 180
NEGATIVE_EVALUATION_DELAY_DAYS = 30


def days_between(start: datetime, end: datetime) -> int:
    """Whole days between two instants, ignoring their order.

    Partial days are truncated, so 179 days and 23 hours counts as 179.
    """
    return abs(end - start).days


def check_cadence(reference: EvaluationReport | None, audit_date: datetime) -> None:
    """Validate that an audit on `audit_date` may follow `reference`.

    Args:
        reference: Report of the most recent prior evaluation, if any.
        audit_date: Date of the audit being recorded.

    Raises:
        CannotAuditTooSoonError: If the gap is shorter than the rule allows.
        ValueError: If `audit_date` is naive.
    """
    require_aware("audit_date", audit_date)
    if reference is None:
        return

    if reference.rating.is_positive():
        kind = errors.TooSoonKind.AFTER_POSITIVE
        days_required = POSITIVE_EVALUATION_DELAY_DAYS
    else:
        kind = errors.TooSoonKind.AFTER_NEGATIVE
        days_required = NEGATIVE_EVALUATION_DELAY_DAYS

    days_passed = days_between(reference.audit_date, audit_date)
    if days_passed < days_required:
        raise errors.CannotAuditTooSoonError(kind, days_required, days_passed)
