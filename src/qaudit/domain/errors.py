"""Domain-layer error definitions."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for business-rule violations.

    These are rejected commands: never retried, always surfaced to the caller.
    """


class InvariantViolation(Exception):
    """Raised when the core is used in a way that should never happen.

    Unlike `DomainError`, these indicate a programmer or integration error
    (e.g. locking an audit that has no evaluations).
    """


# ============================================================================
#                   Recording preconditions
# ============================================================================


class NoActiveContractError(DomainError):
    """Raised when there is no active contract between client and supervisor."""

    def __init__(self, client_id: str, supervisor_id: str) -> None:
        super().__init__(
            f"No active contract between client {client_id} "
            f"and supervisor {supervisor_id}."
        )
        self.client_id = client_id
        self.supervisor_id = supervisor_id


class SupervisorNotAuthorizedError(DomainError):
    """Raised when a supervisor lacks authority for a standard."""

    def __init__(self, supervisor_id: str, standard_name: str) -> None:
        super().__init__(
            f"Supervisor {supervisor_id} is not authorized for standard {standard_name}."
        )
        self.supervisor_id = supervisor_id
        self.standard_name = standard_name


class AuditDateInFutureError(DomainError):
    """Raised when an audit date lies after the current time."""

    def __init__(self, audit_date: datetime, now: datetime) -> None:
        super().__init__(
            f"Audit date {audit_date.isoformat()} cannot be in the future "
            f"(now: {now.isoformat()})."
        )
        self.audit_date = audit_date
        self.now = now


class ExpirationTooEarlyError(DomainError):
    """Raised when an expiration date is too close to the audit date."""

    def __init__(
        self, audit_date: datetime, expiration_date: datetime, minimum_days: int
    ) -> None:
        super().__init__(
            f"Expiration date must be at least {minimum_days} days from audit date "
            f"(audit: {audit_date.isoformat()}, "
            f"expiration: {expiration_date.isoformat()})."
        )
        self.audit_date = audit_date
        self.expiration_date = expiration_date
        self.minimum_days = minimum_days


class TooSoonKind(Enum):
    """Which cadence rule rejected the audit."""

    AFTER_POSITIVE = "positive"
    AFTER_NEGATIVE = "negative"


class CannotAuditTooSoonError(DomainError):
    """Raised when a new audit does not respect the cadence rule."""

    def __init__(self, kind: TooSoonKind, days_required: int, days_passed: int) -> None:
        super().__init__(
            f"Cannot audit within {days_required} days of prior {kind.value} "
            f"evaluation (required: {days_required} days, passed: {days_passed} days)."
        )
        self.kind = kind
        self.days_required = days_required
        self.days_passed = days_passed


# ============================================================================
#                   Lock state conflicts
# ============================================================================


class LockStateError(DomainError):
    """Base class for invalid lock transitions on an evaluation."""

    message = "Invalid lock transition"

    def __init__(self, evaluation_id: str) -> None:
        super().__init__(f"{self.message}: evaluation {evaluation_id}.")
        self.evaluation_id = evaluation_id


class AlreadySuspendedError(LockStateError):
    """Raised when suspending an evaluation that is already suspended."""

    message = "Evaluation is already suspended"


class AlreadyWithdrawnError(LockStateError):
    """Raised when withdrawing an evaluation that is already withdrawn."""

    message = "Evaluation is already withdrawn"


class CannotSuspendWithdrawnError(LockStateError):
    """Raised when suspending a withdrawn evaluation."""

    message = "Cannot suspend a withdrawn evaluation"


class CannotUnlockError(LockStateError):
    """Raised when unlocking an evaluation that is not suspended."""

    message = "Cannot unlock: evaluation is not suspended"


class CannotLockExpiredError(LockStateError):
    """Raised when suspending or withdrawing an expired evaluation."""

    message = "Cannot lock an expired evaluation"


# ============================================================================
#                   Watcher conflicts
# ============================================================================


class WatcherError(DomainError):
    """Base class for rejected watcher changes."""


class OwnerCannotBeWatcherError(WatcherError):
    """Raised when the owning client is added as a watcher."""

    def __init__(self, evaluation_id: str, client_id: str) -> None:
        super().__init__(
            f"Client {client_id} owns evaluation {evaluation_id} "
            "and cannot be a watcher."
        )
        self.evaluation_id = evaluation_id
        self.client_id = client_id


class ManagerCannotBeWatcherError(WatcherError):
    """Raised when the managing supervisor is added as a watcher."""

    def __init__(self, evaluation_id: str, supervisor_id: str) -> None:
        super().__init__(
            f"Supervisor {supervisor_id} manages evaluation {evaluation_id} "
            "and cannot be a watcher."
        )
        self.evaluation_id = evaluation_id
        self.supervisor_id = supervisor_id


# ============================================================================
#                   Aggregate lookup failures
# ============================================================================


class AuditNotFoundError(InvariantViolation):
    """Raised when no audit exists for a client and standard."""

    def __init__(self, client_id: str, standard_id: str) -> None:
        super().__init__(
            f"No audit found for client {client_id} and standard {standard_id}."
        )
        self.client_id = client_id
        self.standard_id = standard_id


class NoEvaluationsError(InvariantViolation):
    """Raised when an operation needs a current evaluation but none exist."""

    def __init__(self, client_id: str, standard_id: str) -> None:
        super().__init__(
            f"No evaluations exist for client {client_id} and standard {standard_id}."
        )
        self.client_id = client_id
        self.standard_id = standard_id
