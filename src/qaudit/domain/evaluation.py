"""Evaluation entity."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from qaudit.domain import errors
from qaudit.domain.value_objects import (
    ClientId,
    EvaluationId,
    StandardId,
    SupervisorId,
    Suspension,
    WatcherId,
    Withdrawal,
)

if TYPE_CHECKING:
    from qaudit.domain.report import EvaluationReport

# pylint: disable=too-many-arguments,too-many-instance-attributes


class Evaluation:
    """A single recorded audit outcome.

    Owns its lock state (suspension / withdrawal), the link to the evaluation
    that replaced it, and the set of parties watching it. Evaluations are never
    deleted; they stay in their audit's history.

    Lock states are mutually exclusive: withdrawing a suspended evaluation
    clears the suspension, and a withdrawn evaluation can be neither
    suspended nor unlocked.
    """

    def __init__(
        self,
        evaluation_id: EvaluationId,
        owner_id: ClientId,
        manager_id: SupervisorId,
        standard_id: StandardId,
        report: EvaluationReport,
    ) -> None:
        self.id = evaluation_id
        self.owner_id = owner_id
        self.manager_id = manager_id
        self.standard_id = standard_id
        self.report = report
        self.suspension: Suspension | None = None
        self.withdrawal: Withdrawal | None = None
        self.replaced_by: EvaluationId | None = None
        self._watchers: list[WatcherId] = []

    # --- Construction Paths ---

    @classmethod
    def record(
        cls,
        evaluation_id: EvaluationId,
        owner_id: ClientId,
        manager_id: SupervisorId,
        standard_id: StandardId,
        report: EvaluationReport,
    ) -> Evaluation:
        """Record a new evaluation from a validated report."""
        return cls(evaluation_id, owner_id, manager_id, standard_id, report)

    # --- Queries ---

    @property
    def watchers(self) -> tuple[WatcherId, ...]:
        return tuple(self._watchers)

    def is_expired_on(self, date: datetime) -> bool:
        return self.report.is_expired_on(date)

    def is_suspended(self) -> bool:
        return self.suspension is not None

    def is_withdrawn(self) -> bool:
        return self.withdrawal is not None

    def is_locked(self) -> bool:
        return self.is_suspended() or self.is_withdrawn()

    def is_replaced(self) -> bool:
        return self.replaced_by is not None

    def is_active_on(self, date: datetime) -> bool:
        """Return True if not expired on `date`, not replaced and not locked."""
        return (
            not self.is_expired_on(date)
            and not self.is_replaced()
            and not self.is_locked()
        )

    # --- State Transitions ---

    def mark_as_replaced(self, replaced_by: EvaluationId) -> None:
        self.replaced_by = replaced_by

    def suspend(self, at: datetime) -> None:
        """Suspend the evaluation.

        Raises:
            CannotLockExpiredError: If the evaluation has expired by `at`.
            AlreadySuspendedError: If the evaluation is already suspended.
            CannotSuspendWithdrawnError: If the evaluation has been withdrawn.
        """
        if self.is_expired_on(at):
            raise errors.CannotLockExpiredError(str(self.id))
        if self.is_suspended():
            raise errors.AlreadySuspendedError(str(self.id))
        if self.is_withdrawn():
            raise errors.CannotSuspendWithdrawnError(str(self.id))

        self.suspension = Suspension(at)

    def unlock(self) -> None:
        """Lift a suspension.

        Raises:
            CannotUnlockError: If the evaluation is not suspended.
        """
        if not self.is_suspended():
            raise errors.CannotUnlockError(str(self.id))

        self.suspension = None

    def withdraw(self, at: datetime) -> None:
        """Withdraw the evaluation for good, replacing any suspension.

        Raises:
            CannotLockExpiredError: If the evaluation has expired by `at`.
            AlreadyWithdrawnError: If the evaluation is already withdrawn.
        """
        if self.is_expired_on(at):
            raise errors.CannotLockExpiredError(str(self.id))
        if self.is_withdrawn():
            raise errors.AlreadyWithdrawnError(str(self.id))

        self.suspension = None
        self.withdrawal = Withdrawal(at)

    def change_manager(self, new_manager_id: SupervisorId) -> None:
        """Hand the evaluation over to another supervisor.

        The new manager stops watching the evaluation, if they were.
        """
        self.manager_id = new_manager_id
        self.remove_watcher(new_manager_id)

    def add_watcher(self, watcher: ClientId | SupervisorId | WatcherId) -> None:
        """Add a watcher; adding an existing watcher is a no-op.

        Raises:
            OwnerCannotBeWatcherError: If `watcher` is the owning client.
            ManagerCannotBeWatcherError: If `watcher` is the managing supervisor.
        """
        watcher_id = WatcherId.of(watcher)
        if watcher_id.is_client(self.owner_id):
            raise errors.OwnerCannotBeWatcherError(str(self.id), watcher_id.value)
        if watcher_id.is_supervisor(self.manager_id):
            raise errors.ManagerCannotBeWatcherError(str(self.id), watcher_id.value)

        if watcher_id not in self._watchers:
            self._watchers.append(watcher_id)

    def remove_watcher(self, watcher: ClientId | SupervisorId | WatcherId) -> None:
        """Remove a watcher; removing an absent watcher is a no-op."""
        watcher_id = WatcherId.of(watcher)
        self._watchers = [w for w in self._watchers if w != watcher_id]

    def __repr__(self) -> str:
        return (
            f"Evaluation(id={self.id}, owner_id={self.owner_id}, "
            f"manager_id={self.manager_id}, rating={self.report.rating.value})"
        )
