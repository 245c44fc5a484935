"""Application services orchestrating the quality audit aggregate."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from qaudit.domain import cadence, errors
from qaudit.domain.aggregates import QualityAudit
from qaudit.domain.evaluation import Evaluation
from qaudit.domain.report import EvaluationReport
from qaudit.domain.value_objects import EvaluationId

if TYPE_CHECKING:
    from qaudit.domain.entities import Client, Standard, Supervisor
    from qaudit.domain.events import DomainEvent
    from qaudit.domain.value_objects import (
        ClientId,
        Rating,
        StandardId,
        SupervisorId,
        WatcherId,
    )
    from qaudit.interfaces.clock import Clock
    from qaudit.interfaces.repositories import (
        ContractRepository,
        EvaluationRepository,
        QualityAuditRepository,
    )

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments


def _validate_prerequisites(
    contracts: ContractRepository,
    client: Client,
    supervisor: Supervisor,
    standard: Standard,
) -> None:
    if not contracts.has_active_contract(client.id, supervisor.id):
        raise errors.NoActiveContractError(str(client.id), str(supervisor.id))
    if not supervisor.has_authority_for(standard.id):
        raise errors.SupervisorNotAuthorizedError(str(supervisor.id), standard.name)


class AuditRecorder:
    """Records evaluations through the `QualityAudit` aggregate."""

    def __init__(
        self,
        contracts: ContractRepository,
        audits: QualityAuditRepository,
        clock: Clock,
    ) -> None:
        self.contracts = contracts
        self.audits = audits
        self.clock = clock

    def record_evaluation(
        self,
        client: Client,
        supervisor: Supervisor,
        standard: Standard,
        rating: Rating,
        audit_date: datetime,
        expiration_date: datetime,
    ) -> Evaluation:
        """Record an evaluation for a client against a standard.

        Loads the client's audit for the standard, creating it on the first
        evaluation, and saves it once the evaluation is recorded.

        Raises:
            NoActiveContractError: If no active contract binds client and supervisor.
            SupervisorNotAuthorizedError: If the supervisor lacks authority
                for the standard.
            CannotAuditTooSoonError: If the cadence rule is not respected.
            AuditDateInFutureError: If the audit date is in the future.
            ExpirationTooEarlyError: If the validity period is too short.
        """
        _validate_prerequisites(self.contracts, client, supervisor, standard)

        audit = self.audits.find_for(client.id, standard.id) or QualityAudit(
            client.id, standard.id
        )
        evaluation = audit.record_evaluation(
            supervisor.id, rating, audit_date, expiration_date, self.clock
        )
        self.audits.save(audit)

        logger.info(
            "Recorded %s evaluation %s for client %s on standard %s",
            rating.value,
            evaluation.id,
            client.id,
            standard.id,
        )
        return evaluation


class AuditManager:
    """Operates on the current evaluation of an existing audit."""

    def __init__(
        self,
        contracts: ContractRepository,
        audits: QualityAuditRepository,
        clock: Clock,
    ) -> None:
        self.contracts = contracts
        self.audits = audits
        self.clock = clock

    # --- Management ---

    def change_manager(
        self, client_id: ClientId, standard_id: StandardId, new_manager_id: SupervisorId
    ) -> None:
        """Hand the current evaluation over to another supervisor.

        Raises:
            NoActiveContractError: If the new manager has no active contract
                with the client.
            AuditNotFoundError: If the client has no audit for the standard.
        """
        if not self.contracts.has_active_contract(client_id, new_manager_id):
            raise errors.NoActiveContractError(str(client_id), str(new_manager_id))

        audit = self._load(client_id, standard_id)
        current = audit.current_evaluation()
        current.change_manager(new_manager_id)
        self.audits.save(audit)

        logger.info("Evaluation %s now managed by %s", current.id, new_manager_id)

    def add_watcher(
        self,
        client_id: ClientId,
        standard_id: StandardId,
        watcher: ClientId | SupervisorId | WatcherId,
    ) -> None:
        audit = self._load(client_id, standard_id)
        current = audit.current_evaluation()
        current.add_watcher(watcher)
        self.audits.save(audit)

        logger.debug("Watcher %s added to evaluation %s", watcher, current.id)

    def remove_watcher(
        self,
        client_id: ClientId,
        standard_id: StandardId,
        watcher: ClientId | SupervisorId | WatcherId,
    ) -> None:
        audit = self._load(client_id, standard_id)
        current = audit.current_evaluation()
        current.remove_watcher(watcher)
        self.audits.save(audit)

        logger.debug("Watcher %s removed from evaluation %s", watcher, current.id)

    # --- Locking ---

    def suspend(
        self, client_id: ClientId, standard_id: StandardId
    ) -> list[DomainEvent]:
        """Suspend the current evaluation; return the drained events."""
        return self._lock(client_id, standard_id, QualityAudit.suspend_current)

    def unlock(self, client_id: ClientId, standard_id: StandardId) -> list[DomainEvent]:
        """Unlock the current evaluation; return the drained events."""
        return self._lock(client_id, standard_id, QualityAudit.unlock_current)

    def withdraw(
        self, client_id: ClientId, standard_id: StandardId
    ) -> list[DomainEvent]:
        """Withdraw the current evaluation; return the drained events."""
        return self._lock(client_id, standard_id, QualityAudit.withdraw_current)

    # --- Internal Helpers ---

    def _lock(
        self,
        client_id: ClientId,
        standard_id: StandardId,
        transition: Callable[[QualityAudit, Clock], None],
    ) -> list[DomainEvent]:
        audit = self._load(client_id, standard_id)
        transition(audit, self.clock)
        self.audits.save(audit)

        events = audit.pop_events()
        for event in events:
            logger.info("%s: evaluation %s", type(event).__name__, event.evaluation_id)
        return events

    def _load(self, client_id: ClientId, standard_id: StandardId) -> QualityAudit:
        if (audit := self.audits.find_for(client_id, standard_id)) is None:
            raise errors.AuditNotFoundError(str(client_id), str(standard_id))
        return audit


class RecordEvaluationService:
    """Records evaluations directly against an `EvaluationRepository`.

    This is the flat, aggregate-free path: it checks contract, authority and
    cadence, but does not replace prior positive evaluations and knows
    nothing of locking. Prefer `AuditRecorder`.
    """

    def __init__(
        self,
        contracts: ContractRepository,
        clock: Clock,
        evaluations: EvaluationRepository,
    ) -> None:
        self.contracts = contracts
        self.clock = clock
        self.evaluations = evaluations

    def record_evaluation(
        self,
        client: Client,
        supervisor: Supervisor,
        standard: Standard,
        rating: Rating,
        audit_date: datetime,
        expiration_date: datetime,
    ) -> Evaluation:
        """Record and save a standalone evaluation.

        Raises:
            The same errors as `AuditRecorder.record_evaluation`.
        """
        _validate_prerequisites(self.contracts, client, supervisor, standard)

        prior = self.evaluations.find_most_recent_for(client.id, standard.id)
        cadence.check_cadence(prior.report if prior is not None else None, audit_date)

        report = EvaluationReport.create(
            rating, audit_date, expiration_date, standard.id, self.clock
        )
        evaluation = Evaluation.record(
            EvaluationId.generate(), client.id, supervisor.id, standard.id, report
        )
        self.evaluations.save(evaluation)
        return evaluation
