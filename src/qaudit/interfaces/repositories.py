"""Repository interfaces for QAUDIT.

Defines the storage contracts the services depend on. Implementations must
serialize writers per (client, standard) key; the core does not lock.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qaudit.domain.aggregates import QualityAudit
    from qaudit.domain.evaluation import Evaluation
    from qaudit.domain.value_objects import (
        ClientId,
        EvaluationId,
        StandardId,
        SupervisorId,
    )

# pylint: disable=too-few-public-methods


class ContractRepository(abc.ABC):
    """Contract for looking up client/supervisor contracts."""

    @abc.abstractmethod
    def has_active_contract(
        self, client_id: ClientId, supervisor_id: SupervisorId
    ) -> bool:
        """Return True if an active contract binds the client and supervisor."""


class QualityAuditRepository(abc.ABC):
    """Contract for storing quality audit aggregates as a whole."""

    @abc.abstractmethod
    def save(self, audit: QualityAudit) -> None:
        """Persist the audit, replacing any previous state for its key."""

    @abc.abstractmethod
    def find_for(
        self, client_id: ClientId, standard_id: StandardId
    ) -> QualityAudit | None:
        """Return the audit for a client and standard, or None."""


class EvaluationRepository(abc.ABC):
    """Contract for storing evaluations individually (legacy flat path)."""

    @abc.abstractmethod
    def save(self, evaluation: Evaluation) -> None:
        """Persist the evaluation."""

    @abc.abstractmethod
    def find_by_id(self, evaluation_id: EvaluationId) -> Evaluation | None:
        """Return the evaluation with this id, or None."""

    @abc.abstractmethod
    def find_most_recent_for(
        self, client_id: ClientId, standard_id: StandardId
    ) -> Evaluation | None:
        """Return the evaluation with the latest audit date, or None."""
