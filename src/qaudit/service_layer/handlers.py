"""Command and event handlers.

Command handlers return the domain events drained from the aggregate they
touched; the message bus hands those to the event handlers.
"""

from __future__ import annotations

from collections.abc import Callable

from qaudit.domain import events
from qaudit.domain.events import DomainEvent
from qaudit.service_layer import commands
from qaudit.service_layer.projector import LockHistoryProjector
from qaudit.service_layer.services import AuditManager, AuditRecorder

# --- Command Handlers ---


def record_evaluation(
    cmd: commands.RecordEvaluation, recorder: AuditRecorder
) -> list[DomainEvent]:
    """Record an evaluation through the audit aggregate.

    Like every command it returns events only, and recording queues none.
    Read the new evaluation back with `AppContainer.current_evaluation`.
    """
    recorder.record_evaluation(
        client=cmd.client,
        supervisor=cmd.supervisor,
        standard=cmd.standard,
        rating=cmd.rating,
        audit_date=cmd.audit_date,
        expiration_date=cmd.expiration_date,
    )
    return []


def suspend_evaluation(
    cmd: commands.SuspendEvaluation, manager: AuditManager
) -> list[DomainEvent]:
    return manager.suspend(cmd.client_id, cmd.standard_id)


def unlock_evaluation(
    cmd: commands.UnlockEvaluation, manager: AuditManager
) -> list[DomainEvent]:
    return manager.unlock(cmd.client_id, cmd.standard_id)


def withdraw_evaluation(
    cmd: commands.WithdrawEvaluation, manager: AuditManager
) -> list[DomainEvent]:
    return manager.withdraw(cmd.client_id, cmd.standard_id)


def change_manager(
    cmd: commands.ChangeManager, manager: AuditManager
) -> list[DomainEvent]:
    manager.change_manager(cmd.client_id, cmd.standard_id, cmd.new_manager_id)
    return []


def add_watcher(cmd: commands.AddWatcher, manager: AuditManager) -> list[DomainEvent]:
    manager.add_watcher(cmd.client_id, cmd.standard_id, cmd.watcher)
    return []


def remove_watcher(
    cmd: commands.RemoveWatcher, manager: AuditManager
) -> list[DomainEvent]:
    manager.remove_watcher(cmd.client_id, cmd.standard_id, cmd.watcher)
    return []


# --- Event Handlers ---


def project_lock_history(event: DomainEvent, projector: LockHistoryProjector) -> None:
    """Record a lock event in the lock history."""
    projector.project(event)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., list[DomainEvent]]] = {
    commands.RecordEvaluation: record_evaluation,
    commands.SuspendEvaluation: suspend_evaluation,
    commands.UnlockEvaluation: unlock_evaluation,
    commands.WithdrawEvaluation: withdraw_evaluation,
    commands.ChangeManager: change_manager,
    commands.AddWatcher: add_watcher,
    commands.RemoveWatcher: remove_watcher,
}

EVENT_HANDLERS: dict[type[DomainEvent], list[Callable[..., None]]] = {
    events.EvaluationSuspended: [project_lock_history],
    events.EvaluationUnlocked: [project_lock_history],
    events.EvaluationWithdrawn: [project_lock_history],
}
