"""In-memory repository implementations.

All state is kept in memory and lost when the instance is discarded.
Use for unit tests, prototyping, or scenarios where durability is not required.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from qaudit.interfaces.repositories import (
    ContractRepository,
    EvaluationRepository,
    QualityAuditRepository,
)

if TYPE_CHECKING:
    from qaudit.domain.aggregates import QualityAudit
    from qaudit.domain.entities import Contract
    from qaudit.domain.evaluation import Evaluation
    from qaudit.domain.value_objects import (
        ClientId,
        EvaluationId,
        StandardId,
        SupervisorId,
    )


class InMemoryContractRepository(ContractRepository):
    """In-memory ContractRepository."""

    def __init__(self, contracts: Iterable[Contract] = ()) -> None:
        self._contracts: list[Contract] = list(contracts)

    def add(self, contract: Contract) -> None:
        self._contracts.append(contract)

    def has_active_contract(
        self, client_id: ClientId, supervisor_id: SupervisorId
    ) -> bool:
        return any(c.binds(client_id, supervisor_id) for c in self._contracts)


class InMemoryQualityAuditRepository(QualityAuditRepository):
    """In-memory QualityAuditRepository keyed by (client, standard)."""

    def __init__(self) -> None:
        self._audits: dict[tuple[ClientId, StandardId], QualityAudit] = {}

    def save(self, audit: QualityAudit) -> None:
        self._audits[(audit.client_id, audit.standard_id)] = audit

    def find_for(
        self, client_id: ClientId, standard_id: StandardId
    ) -> QualityAudit | None:
        return self._audits.get((client_id, standard_id))

    def __len__(self) -> int:
        return len(self._audits)


class InMemoryEvaluationRepository(EvaluationRepository):
    """In-memory EvaluationRepository keyed by evaluation id."""

    def __init__(self, evaluations: Iterable[Evaluation] = ()) -> None:
        self._evaluations: dict[EvaluationId, Evaluation] = {
            e.id: e for e in evaluations
        }

    def save(self, evaluation: Evaluation) -> None:
        self._evaluations[evaluation.id] = evaluation

    def find_by_id(self, evaluation_id: EvaluationId) -> Evaluation | None:
        return self._evaluations.get(evaluation_id)

    def find_most_recent_for(
        self, client_id: ClientId, standard_id: StandardId
    ) -> Evaluation | None:
        matching = [
            e
            for e in self._evaluations.values()
            if e.owner_id == client_id and e.standard_id == standard_id
        ]
        if not matching:
            return None
        return max(matching, key=lambda e: e.report.audit_date)
