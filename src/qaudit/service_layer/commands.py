"""Module defining Commands."""

from dataclasses import dataclass
from datetime import datetime

from qaudit.domain.entities import Client, Standard, Supervisor
from qaudit.domain.value_objects import (
    ClientId,
    Rating,
    StandardId,
    SupervisorId,
    WatcherId,
)


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RecordEvaluation(Command):
    """Command to record the outcome of an audit."""

    client: Client
    supervisor: Supervisor
    standard: Standard
    rating: Rating
    audit_date: datetime
    expiration_date: datetime


@dataclass(frozen=True)
class AuditCommand(Command):
    """Base class for commands acting on the current evaluation of an audit."""

    client_id: ClientId
    standard_id: StandardId


@dataclass(frozen=True)
class SuspendEvaluation(AuditCommand):
    """Command to suspend the current evaluation."""


@dataclass(frozen=True)
class UnlockEvaluation(AuditCommand):
    """Command to lift the suspension of the current evaluation."""


@dataclass(frozen=True)
class WithdrawEvaluation(AuditCommand):
    """Command to withdraw the current evaluation."""


@dataclass(frozen=True)
class ChangeManager(AuditCommand):
    """Command to hand the current evaluation to another supervisor."""

    new_manager_id: SupervisorId


@dataclass(frozen=True)
class AddWatcher(AuditCommand):
    """Command to add a watcher to the current evaluation."""

    watcher: ClientId | SupervisorId | WatcherId


@dataclass(frozen=True)
class RemoveWatcher(AuditCommand):
    """Command to remove a watcher from the current evaluation."""

    watcher: ClientId | SupervisorId | WatcherId
