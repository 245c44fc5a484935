"""Unit tests for handlers, driven through a bootstrapped message bus."""

import pytest

from qaudit.adapters.lock_history import InMemoryLockHistoryRepository
from qaudit.bootstrap import bootstrap
from qaudit.domain import errors
from qaudit.domain.entities import Contract
from qaudit.domain.events import EvaluationSuspended, EvaluationUnlocked
from qaudit.domain.value_objects import ContractId, Rating, SupervisorId, WatcherId
from qaudit.interfaces.lock_history import LockAction, LockHistoryUnavailableError
from qaudit.service_layer import commands
from tests.fixtures.datagen import utc

# pylint: disable=redefined-outer-name,magic-value-comparison


class UnreliableLockHistory(InMemoryLockHistoryRepository):
    """In-memory lock history that refuses writes while `down` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.down = False

    def save(self, entry):
        if self.down:
            raise LockHistoryUnavailableError("lock history is unreachable")
        super().save(entry)


@pytest.fixture
def lock_history():
    return UnreliableLockHistory()


@pytest.fixture
def app(clock, contracts, audits, lock_history):
    return bootstrap(
        clock=clock,
        contracts=contracts,
        audits=audits,
        lock_history=lock_history,
    )


@pytest.fixture
def evaluation(app, client, supervisor, standard):
    """Record one evaluation through the bus and return it."""
    app.message_bus.handle(
        commands.RecordEvaluation(
            client=client,
            supervisor=supervisor,
            standard=standard,
            rating=Rating.POSITIVE,
            audit_date=utc(2024, 11, 1),
            expiration_date=utc(2025, 6, 1),
        )
    )
    return app.current_evaluation(client.id, standard.id)


class TestRecordEvaluation:
    """Tests for the record_evaluation handler."""

    @staticmethod
    def test_records_and_returns_no_events(app, client, supervisor, standard):
        produced = app.message_bus.handle(
            commands.RecordEvaluation(
                client, supervisor, standard, Rating.NEGATIVE, utc(2024, 1, 1), utc(2024, 8, 1)
            )
        )
        assert produced == []
        assert len(app.audits.find_for(client.id, standard.id).evaluations) == 1

    @staticmethod
    def test_rejected_recording_creates_no_audit(app, client, supervisor, standard):
        with pytest.raises(errors.ExpirationTooEarlyError):
            app.message_bus.handle(
                commands.RecordEvaluation(
                    client, supervisor, standard, Rating.NEGATIVE, utc(2024, 1, 1), utc(2024, 2, 1)
                )
            )
        assert app.audits.find_for(client.id, standard.id) is None


class TestLockHandlers:
    """Tests for suspend / unlock / withdraw handlers."""

    @staticmethod
    def test_suspend_then_unlock_writes_lock_history(app, evaluation, client, standard):
        suspended = app.message_bus.handle(
            commands.SuspendEvaluation(client.id, standard.id)
        )
        unlocked = app.message_bus.handle(
            commands.UnlockEvaluation(client.id, standard.id)
        )

        assert [type(e) for e in suspended] == [EvaluationSuspended]
        assert [type(e) for e in unlocked] == [EvaluationUnlocked]
        rows = app.lock_history.find_by_evaluation_id(str(evaluation.id))
        assert [r.action for r in rows] == [LockAction.SUSPENDED, LockAction.UNLOCKED]
        assert all(r.occurred_at == app.clock.now() for r in rows)

    @staticmethod
    def test_withdraw_writes_lock_history(app, evaluation, client, standard):
        app.message_bus.handle(commands.WithdrawEvaluation(client.id, standard.id))
        rows = app.lock_history.find_by_evaluation_id(str(evaluation.id))
        assert [r.action for r in rows] == [LockAction.WITHDRAWN]
        assert app.current_evaluation(client.id, standard.id).is_withdrawn()

    @staticmethod
    def test_rejected_command_writes_nothing(app, evaluation, client, standard):
        with pytest.raises(errors.CannotUnlockError):
            app.message_bus.handle(commands.UnlockEvaluation(client.id, standard.id))
        assert app.lock_history.find_by_evaluation_id(str(evaluation.id)) == []


class TestLockHistoryOutage:
    """A lock command whose history row cannot be written leaves no trace."""

    @staticmethod
    def test_failed_projection_keeps_evaluation_unlocked(
        app, evaluation, lock_history, client, standard
    ):
        lock_history.down = True

        with pytest.raises(LockHistoryUnavailableError):
            app.message_bus.handle(commands.SuspendEvaluation(client.id, standard.id))

        current = app.current_evaluation(client.id, standard.id)
        assert not current.is_suspended()
        assert not app.audits.find_for(client.id, standard.id).has_pending_events

    @staticmethod
    def test_command_can_be_retried_once_history_is_back(
        app, evaluation, lock_history, client, standard
    ):
        lock_history.down = True
        with pytest.raises(LockHistoryUnavailableError):
            app.message_bus.handle(commands.SuspendEvaluation(client.id, standard.id))

        lock_history.down = False
        (event,) = app.message_bus.handle(
            commands.SuspendEvaluation(client.id, standard.id)
        )

        assert isinstance(event, EvaluationSuspended)
        assert app.current_evaluation(client.id, standard.id).is_suspended()
        rows = app.lock_history.find_by_evaluation_id(str(evaluation.id))
        assert [r.action for r in rows] == [LockAction.SUSPENDED]

    @staticmethod
    def test_outage_does_not_undo_earlier_commands(
        app, evaluation, lock_history, client, standard
    ):
        app.message_bus.handle(commands.SuspendEvaluation(client.id, standard.id))
        lock_history.down = True

        with pytest.raises(LockHistoryUnavailableError):
            app.message_bus.handle(commands.WithdrawEvaluation(client.id, standard.id))

        current = app.current_evaluation(client.id, standard.id)
        assert current.is_suspended()
        assert not current.is_withdrawn()


class TestManagementHandlers:
    """Tests for change_manager and the watcher handlers."""

    @staticmethod
    def test_change_manager(app, evaluation, client, standard):
        new_manager = SupervisorId.generate()
        app.contracts.add(Contract(ContractId.generate(), client.id, new_manager))

        produced = app.message_bus.handle(
            commands.ChangeManager(client.id, standard.id, new_manager)
        )

        assert produced == []
        assert app.current_evaluation(client.id, standard.id).manager_id == new_manager

    @staticmethod
    def test_add_and_remove_watcher(app, evaluation, client, standard):
        watcher = SupervisorId.generate()

        app.message_bus.handle(commands.AddWatcher(client.id, standard.id, watcher))
        current = app.current_evaluation(client.id, standard.id)
        assert current.watchers == (WatcherId.of(watcher),)

        app.message_bus.handle(commands.RemoveWatcher(client.id, standard.id, watcher))
        assert app.current_evaluation(client.id, standard.id).watchers == ()

    @staticmethod
    def test_rejected_watcher_leaves_watchers_unchanged(app, evaluation, client, standard):
        with pytest.raises(errors.OwnerCannotBeWatcherError):
            app.message_bus.handle(commands.AddWatcher(client.id, standard.id, client.id))
        assert app.current_evaluation(client.id, standard.id).watchers == ()
