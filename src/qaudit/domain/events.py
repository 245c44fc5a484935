"""Events"""

import abc
from dataclasses import dataclass
from datetime import datetime

from qaudit.domain.value_objects import EvaluationId


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the owning evaluation and when it happened.
    """

    evaluation_id: EvaluationId

    @property
    @abc.abstractmethod
    def occurred_at(self) -> datetime:
        """Return the instant the event took place."""


@dataclass(frozen=True, slots=True)
class EvaluationSuspended(DomainEvent):
    """Event indicating that an evaluation has been suspended."""

    suspended_at: datetime

    @property
    def occurred_at(self) -> datetime:
        return self.suspended_at


@dataclass(frozen=True, slots=True)
class EvaluationUnlocked(DomainEvent):
    """Event indicating that a suspended evaluation has been unlocked."""

    unlocked_at: datetime

    @property
    def occurred_at(self) -> datetime:
        return self.unlocked_at


@dataclass(frozen=True, slots=True)
class EvaluationWithdrawn(DomainEvent):
    """Event indicating that an evaluation has been withdrawn."""

    withdrawn_at: datetime

    @property
    def occurred_at(self) -> datetime:
        return self.withdrawn_at

