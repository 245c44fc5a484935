"""Test the bootstrap function."""

from collections.abc import Callable

import pytest

from qaudit import config
from qaudit.adapters.clock import FixedClock, SystemClock
from qaudit.adapters.db.dialects import UnsupportedDialect
from qaudit.adapters.lock_history import (
    InMemoryLockHistoryRepository,
    SqlAlchemyLockHistoryRepository,
)
from qaudit.bootstrap import bootstrap
from qaudit.bootstrap.bootstrap import build_lock_history, build_message_bus
from qaudit.domain import errors
from qaudit.domain.value_objects import Rating
from qaudit.interfaces.lock_history import LockAction
from qaudit.service_layer import commands
from qaudit.service_layer.commands import Command
from tests.fixtures.datagen import utc

# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument
# pylint: disable=too-few-public-methods
# pylint: disable=magic-value-comparison


class CustomCommand(Command):
    """A custom command for testing."""


class TestBuildLockHistory:
    """Tests for the build_lock_history function."""

    @staticmethod
    def test_without_url_stays_in_memory():
        assert isinstance(build_lock_history(None), InMemoryLockHistoryRepository)

    @staticmethod
    def test_with_url_uses_sqlalchemy():
        store = build_lock_history("sqlite:///:memory:")
        assert isinstance(store, SqlAlchemyLockHistoryRepository)
        assert store.engine.url.get_backend_name() == "sqlite"
        assert store.engine.url.database == ":memory:"

    @staticmethod
    def test_rejects_unsupported_backend():
        with pytest.raises(UnsupportedDialect):
            build_lock_history("mysql+pymysql://u:p@localhost/qaudit")


class TestBuildMessageBus:
    """Tests for the build_message_bus function."""

    @staticmethod
    def test_injects_only_requested_dependencies():
        """Handlers receive the dependencies named in their signature."""
        received = {}

        def sample_handler(cmd: Command, sink: dict) -> list:
            sink["cmd"] = cmd
            return []

        command_handlers: dict[type[Command], Callable[..., list]] = {
            CustomCommand: sample_handler,
        }

        bus = build_message_bus(
            {"sink": received, "unused": object()}, command_handlers, {}
        )
        cmd = CustomCommand()
        bus.handle(cmd)

        assert received == {"cmd": cmd}


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_defaults(monkeypatch):
        monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
        app = bootstrap()
        assert isinstance(app.clock, SystemClock)
        assert isinstance(app.lock_history, InMemoryLockHistoryRepository)
        assert app.recorder.audits is app.manager.audits
        assert app.recorder.audits.backing is app.audits

    @staticmethod
    def test_reads_db_url_from_environment(monkeypatch, tmp_path):
        monkeypatch.setenv(config.DB_URL_ENV_VAR, f"sqlite:///{tmp_path / 'env.db'}")
        app = bootstrap()
        assert isinstance(app.lock_history, SqlAlchemyLockHistoryRepository)

    @staticmethod
    def test_lock_history_persists_through_sqlite(
        sqlite_engine_file, contracts, client, supervisor, standard
    ):
        """Suspending through the bus writes a row to the migrated database."""
        clock = FixedClock.at("2024-12-01")
        app = bootstrap(
            clock=clock,
            contracts=contracts,
            lock_history=SqlAlchemyLockHistoryRepository(sqlite_engine_file),
        )
        bus = app.message_bus
        bus.handle(
            commands.RecordEvaluation(
                client, supervisor, standard, Rating.POSITIVE, utc(2024, 11, 1), utc(2025, 6, 1)
            )
        )
        evaluation = app.current_evaluation(client.id, standard.id)

        bus.handle(commands.SuspendEvaluation(client.id, standard.id))
        clock.advance(utc(2024, 12, 2) - utc(2024, 12, 1))
        bus.handle(commands.WithdrawEvaluation(client.id, standard.id))

        rows = app.lock_history.find_by_evaluation_id(str(evaluation.id))
        assert [(r.action, r.occurred_at) for r in rows] == [
            (LockAction.SUSPENDED, utc(2024, 12, 1)),
            (LockAction.WITHDRAWN, utc(2024, 12, 2)),
        ]

    @staticmethod
    def test_current_evaluation_reads_what_the_bus_recorded(
        contracts, client, supervisor, standard
    ):
        app = bootstrap(clock=FixedClock.at("2024-12-01"), contracts=contracts)
        with pytest.raises(errors.AuditNotFoundError):
            app.current_evaluation(client.id, standard.id)

        app.message_bus.handle(
            commands.RecordEvaluation(
                client, supervisor, standard, Rating.NEGATIVE, utc(2024, 11, 1), utc(2025, 6, 1)
            )
        )

        evaluation = app.current_evaluation(client.id, standard.id)
        assert evaluation.owner_id == client.id
        assert evaluation.report.rating is Rating.NEGATIVE

    @staticmethod
    def test_explicit_url_wins_over_environment(monkeypatch, tmp_path):
        monkeypatch.setenv(config.DB_URL_ENV_VAR, "postgresql://u:p@nowhere/db")
        app = bootstrap(f"sqlite:///{tmp_path / 'explicit.db'}")
        assert app.lock_history.engine.url.get_backend_name() == "sqlite"

    @staticmethod
    @pytest.mark.parametrize("bad", ["", None])
    def test_blank_environment_is_ignored(monkeypatch, bad):
        if bad is None:
            monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
        else:
            monkeypatch.setenv(config.DB_URL_ENV_VAR, bad)
        assert isinstance(bootstrap().lock_history, InMemoryLockHistoryRepository)
