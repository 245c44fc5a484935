"""Quality Audit Aggregate"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from qaudit.domain import cadence, errors, events
from qaudit.domain.evaluation import Evaluation
from qaudit.domain.report import EvaluationReport
from qaudit.domain.value_objects import (
    ClientId,
    EvaluationId,
    Rating,
    StandardId,
    SupervisorId,
)

from .base import Aggregate

if TYPE_CHECKING:
    from qaudit.interfaces.clock import Clock

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments


class QualityAudit(Aggregate):
    """Aggregate root tracking every evaluation of one client against one standard.

    Two selection rules are used and must not be confused:

    - the *current* evaluation is the one appended last; lock transitions and
      manager/watcher changes act on it;
    - the *most recent* evaluation is the one with the latest audit date; the
      cadence rule is checked against it.
    """

    def __init__(self, client_id: ClientId, standard_id: StandardId) -> None:
        super().__init__()
        self.client_id = client_id
        self.standard_id = standard_id
        self._evaluations: list[Evaluation] = []

    @property
    def evaluations(self) -> Sequence[Evaluation]:
        """All evaluations in insertion order."""
        return tuple(self._evaluations)

    # --- Recording ---

    def record_evaluation(
        self,
        supervisor_id: SupervisorId,
        rating: Rating,
        audit_date: datetime,
        expiration_date: datetime,
        clock: Clock,
    ) -> Evaluation:
        """Record a new evaluation in this audit.

        A positive evaluation replaces the positive evaluation that is still
        active on the new audit date, if any.

        Raises:
            CannotAuditTooSoonError: If the cadence rule is not respected.
            AuditDateInFutureError: If `audit_date` is after `clock.now()`.
            ExpirationTooEarlyError: If the validity period is under 180 days.
        """
        most_recent = self.most_recent_evaluation()
        cadence.check_cadence(
            most_recent.report if most_recent is not None else None, audit_date
        )

        report = EvaluationReport.create(
            rating, audit_date, expiration_date, self.standard_id, clock
        )
        evaluation = Evaluation.record(
            EvaluationId.generate(),
            self.client_id,
            supervisor_id,
            self.standard_id,
            report,
        )

        if rating.is_positive():
            self._replace_active_positive(audit_date, evaluation.id)

        self._evaluations.append(evaluation)
        return evaluation

    def most_recent_evaluation(self) -> Evaluation | None:
        """Return the evaluation with the latest audit date, if any."""
        if not self._evaluations:
            return None
        return max(self._evaluations, key=lambda e: e.report.audit_date)

    def _replace_active_positive(
        self, audit_date: datetime, new_id: EvaluationId
    ) -> None:
        # a scan rather than "the last positive" keeps out-of-order replays working
        for evaluation in self._evaluations:
            if evaluation.report.rating.is_positive() and evaluation.is_active_on(
                audit_date
            ):
                logger.debug("Evaluation %s replaced by %s", evaluation.id, new_id)
                evaluation.mark_as_replaced(new_id)
                return

    # --- Current Evaluation ---

    def current_evaluation(self) -> Evaluation:
        """Return the last appended evaluation.

        Raises:
            NoEvaluationsError: If the audit has no evaluations.
        """
        if not self._evaluations:
            raise errors.NoEvaluationsError(str(self.client_id), str(self.standard_id))
        return self._evaluations[-1]

    # --- Lock Transitions ---

    def suspend_current(self, clock: Clock) -> None:
        """Suspend the current evaluation and queue `EvaluationSuspended`."""
        current = self.current_evaluation()
        now = clock.now()
        current.suspend(now)
        self._enqueue(
            events.EvaluationSuspended(evaluation_id=current.id, suspended_at=now)
        )

    def unlock_current(self, clock: Clock) -> None:
        """Unlock the current evaluation and queue `EvaluationUnlocked`."""
        current = self.current_evaluation()
        current.unlock()
        self._enqueue(
            events.EvaluationUnlocked(evaluation_id=current.id, unlocked_at=clock.now())
        )

    def withdraw_current(self, clock: Clock) -> None:
        """Withdraw the current evaluation and queue `EvaluationWithdrawn`."""
        current = self.current_evaluation()
        now = clock.now()
        current.withdraw(now)
        self._enqueue(
            events.EvaluationWithdrawn(evaluation_id=current.id, withdrawn_at=now)
        )

    def __repr__(self) -> str:
        return (
            f"QualityAudit(client_id={self.client_id}, standard_id={self.standard_id}, "
            f"evaluations={len(self._evaluations)})"
        )
