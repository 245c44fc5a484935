"""Bootstrap the message bus with handlers, services and adapters."""

from __future__ import annotations

import inspect
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from qaudit import config
from qaudit.adapters.clock import SystemClock
from qaudit.adapters.db.engine import make_engine
from qaudit.adapters.lock_history import (
    InMemoryLockHistoryRepository,
    SqlAlchemyLockHistoryRepository,
)
from qaudit.adapters.repositories import (
    InMemoryContractRepository,
    InMemoryQualityAuditRepository,
)
from qaudit.adapters.unit_of_work import StagedUnitOfWork
from qaudit.domain import errors
from qaudit.domain.evaluation import Evaluation
from qaudit.domain.value_objects import ClientId, StandardId
from qaudit.interfaces.clock import Clock
from qaudit.interfaces.lock_history import LockHistoryRepository
from qaudit.interfaces.repositories import ContractRepository, QualityAuditRepository
from qaudit.interfaces.unit_of_work import AbstractUnitOfWork
from qaudit.service_layer.handlers import COMMAND_HANDLERS, EVENT_HANDLERS
from qaudit.service_layer.messagebus import MessageBus
from qaudit.service_layer.projector import LockHistoryProjector
from qaudit.service_layer.services import AuditManager, AuditRecorder

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    message_bus: MessageBus
    recorder: AuditRecorder
    manager: AuditManager
    audits: QualityAuditRepository
    contracts: ContractRepository
    lock_history: LockHistoryRepository
    clock: Clock

    def current_evaluation(
        self, client_id: ClientId, standard_id: StandardId
    ) -> Evaluation:
        """Read side of `RecordEvaluation`: commands only return events.

        Raises:
            AuditNotFoundError: If the client has no audit for the standard.
            NoEvaluationsError: If the audit has no evaluations.
        """
        if (audit := self.audits.find_for(client_id, standard_id)) is None:
            raise errors.AuditNotFoundError(str(client_id), str(standard_id))
        return audit.current_evaluation()


def build_lock_history(db_url: str | None) -> LockHistoryRepository:
    """SQLAlchemy-backed lock history for a URL, in-memory otherwise."""
    if db_url is None:
        return InMemoryLockHistoryRepository()
    return SqlAlchemyLockHistoryRepository(make_engine(db_url))


def build_message_bus(
    dependencies: Mapping[str, object],
    command_handlers: Mapping[type, Callable[..., object]] | None = None,
    event_handlers: Mapping[type, list[Callable[..., None]]] | None = None,
    uow: AbstractUnitOfWork | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies, running in `uow` if given."""
    command_handlers = COMMAND_HANDLERS if command_handlers is None else command_handlers
    event_handlers = EVENT_HANDLERS if event_handlers is None else event_handlers

    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    injected_event_handlers = {
        event_type: [inject_dependencies(handler, dependencies) for handler in handlers]
        for event_type, handlers in event_handlers.items()
    }
    return MessageBus(
        command_handlers=injected_command_handlers,
        event_handlers=injected_event_handlers,
        uow=uow,
    )


def bootstrap(
    db_url: str | None = None,
    *,
    clock: Clock | None = None,
    contracts: ContractRepository | None = None,
    audits: QualityAuditRepository | None = None,
    lock_history: LockHistoryRepository | None = None,
) -> AppContainer:
    """Wire the application.

    Args:
        db_url: Database URL for the lock history. Falls back to
            `QAUDIT_DB_URL` when set; without either the history stays in memory.
        clock: Clock to use (system clock by default).
        contracts: Contract lookup (empty in-memory repository by default).
        audits: Audit storage (in-memory by default).
        lock_history: Lock history store; overrides `db_url` when given.

    Returns:
        The wired application.
    """
    if db_url is None and os.environ.get(config.DB_URL_ENV_VAR):
        db_url = config.get_db_url()

    clock = clock or SystemClock()
    contracts = contracts if contracts is not None else InMemoryContractRepository()
    audits = audits if audits is not None else InMemoryQualityAuditRepository()
    lock_history = lock_history if lock_history is not None else build_lock_history(db_url)

    # services see the staged view; outside a command it passes through
    uow = StagedUnitOfWork(audits)
    recorder = AuditRecorder(contracts, uow.audits, clock)
    manager = AuditManager(contracts, uow.audits, clock)
    dependencies = {
        "recorder": recorder,
        "manager": manager,
        "projector": LockHistoryProjector(lock_history),
    }

    logger.debug(
        "Bootstrapped with lock history %s and clock %s",
        type(lock_history).__name__,
        type(clock).__name__,
    )

    return AppContainer(
        message_bus=build_message_bus(dependencies, uow=uow),
        recorder=recorder,
        manager=manager,
        audits=audits,
        contracts=contracts,
        lock_history=lock_history,
        clock=clock,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
