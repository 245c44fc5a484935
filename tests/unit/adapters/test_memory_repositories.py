"""Unit tests for the in-memory repositories."""

from qaudit.adapters.repositories import (
    InMemoryContractRepository,
    InMemoryEvaluationRepository,
    InMemoryQualityAuditRepository,
)
from qaudit.domain.aggregates import QualityAudit
from qaudit.domain.entities import Contract
from qaudit.domain.value_objects import (
    ClientId,
    ContractId,
    EvaluationId,
    StandardId,
    SupervisorId,
)
from tests.fixtures.datagen import utc


class TestInMemoryContractRepository:
    """Tests for InMemoryContractRepository."""

    @staticmethod
    def test_empty_repository_has_no_contracts():
        repo = InMemoryContractRepository()
        assert not repo.has_active_contract(ClientId.generate(), SupervisorId.generate())

    @staticmethod
    def test_finds_active_contract():
        cid, sid = ClientId.generate(), SupervisorId.generate()
        repo = InMemoryContractRepository([Contract(ContractId.generate(), cid, sid)])
        assert repo.has_active_contract(cid, sid)
        assert not repo.has_active_contract(cid, SupervisorId.generate())

    @staticmethod
    def test_ignores_inactive_contract():
        cid, sid = ClientId.generate(), SupervisorId.generate()
        repo = InMemoryContractRepository()
        repo.add(Contract(ContractId.generate(), cid, sid, active=False))
        assert not repo.has_active_contract(cid, sid)


class TestInMemoryQualityAuditRepository:
    """Tests for InMemoryQualityAuditRepository."""

    @staticmethod
    def test_find_for_unknown_pair_is_none():
        repo = InMemoryQualityAuditRepository()
        assert repo.find_for(ClientId.generate(), StandardId.generate()) is None

    @staticmethod
    def test_save_then_find():
        repo = InMemoryQualityAuditRepository()
        audit = QualityAudit(ClientId.generate(), StandardId.generate())
        repo.save(audit)
        assert repo.find_for(audit.client_id, audit.standard_id) is audit

    @staticmethod
    def test_audits_are_keyed_by_client_and_standard():
        repo = InMemoryQualityAuditRepository()
        cid = ClientId.generate()
        first = QualityAudit(cid, StandardId.generate())
        second = QualityAudit(cid, StandardId.generate())
        repo.save(first)
        repo.save(second)
        repo.save(first)

        assert len(repo) == 2
        assert repo.find_for(cid, second.standard_id) is second


class TestInMemoryEvaluationRepository:
    """Tests for InMemoryEvaluationRepository."""

    @staticmethod
    def test_find_by_id(make_evaluation):
        evaluation = make_evaluation()
        repo = InMemoryEvaluationRepository([evaluation])
        assert repo.find_by_id(evaluation.id) is evaluation
        assert repo.find_by_id(EvaluationId.generate()) is None

    @staticmethod
    def test_find_most_recent_orders_by_audit_date(make_evaluation):
        owner, std = ClientId.generate(), StandardId.generate()
        newer = make_evaluation(owner_id=owner, audit_date=utc(2024, 6, 1), standard_id=std)
        older = make_evaluation(owner_id=owner, audit_date=utc(2024, 1, 1), standard_id=std)
        repo = InMemoryEvaluationRepository()
        repo.save(newer)
        repo.save(older)

        assert repo.find_most_recent_for(owner, std) is newer

    @staticmethod
    def test_find_most_recent_filters_client_and_standard(make_evaluation):
        owner, std = ClientId.generate(), StandardId.generate()
        repo = InMemoryEvaluationRepository(
            [
                make_evaluation(owner_id=owner),
                make_evaluation(standard_id=std),
            ]
        )
        assert repo.find_most_recent_for(owner, std) is None
