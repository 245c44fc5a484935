"""Module including value objects used across the domain layer."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeVar

I = TypeVar("I", bound="Identifier")

# ============================================================================
#                               Identifiers
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Base class for UUID-backed identifiers.

    Identifiers compare by value and by kind: a `ClientId` never equals a
    `SupervisorId`, even when both wrap the same UUID.
    """

    value: uuid.UUID

    @classmethod
    def generate(cls: type[I]) -> I:
        """Generate a fresh random identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def from_string(cls: type[I], value: str) -> I:
        """Parse an identifier from its canonical string form.

        Raises:
            ValueError: If `value` is not a valid UUID.
        """
        return cls(uuid.UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class ClientId(Identifier):
    """Identifier of a client."""

    __slots__ = ()


class SupervisorId(Identifier):
    """Identifier of a supervisor."""

    __slots__ = ()


class StandardId(Identifier):
    """Identifier of a standard."""

    __slots__ = ()


class EvaluationId(Identifier):
    """Identifier of an evaluation."""

    __slots__ = ()


class ContractId(Identifier):
    """Identifier of a contract."""

    __slots__ = ()


class WatcherKind(Enum):
    """Enumeration of the parties that can watch an evaluation."""

    CLIENT = "client"
    SUPERVISOR = "supervisor"


@dataclass(frozen=True, slots=True)
class WatcherId:
    """A client or a supervisor watching an evaluation.

    Equality compares the kind and the canonical id string.
    """

    kind: WatcherKind
    value: str

    @classmethod
    def of(cls, party_id: ClientId | SupervisorId | WatcherId) -> WatcherId:
        """Tag a client or supervisor id as a watcher."""
        match party_id:
            case WatcherId():
                return party_id
            case ClientId():
                return cls(WatcherKind.CLIENT, str(party_id))
            case SupervisorId():
                return cls(WatcherKind.SUPERVISOR, str(party_id))
            case _:
                raise TypeError(
                    f"Expected ClientId or SupervisorId, got {type(party_id).__name__}"
                )

    def is_client(self, client_id: ClientId) -> bool:
        """Return True if this watcher is the given client."""
        return self.kind is WatcherKind.CLIENT and self.value == str(client_id)

    def is_supervisor(self, supervisor_id: SupervisorId) -> bool:
        """Return True if this watcher is the given supervisor."""
        return self.kind is WatcherKind.SUPERVISOR and self.value == str(supervisor_id)

    def __str__(self) -> str:
        return self.value


# ============================================================================
#                               Evaluation values
# ============================================================================


class Rating(Enum):
    """Enumeration of possible evaluation outcomes"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def is_positive(self) -> bool:
        return self is Rating.POSITIVE

    def is_negative(self) -> bool:
        return self is Rating.NEGATIVE


@dataclass(frozen=True)
class Suspension:
    """Value object recording when an evaluation was suspended."""

    suspended_at: datetime


@dataclass(frozen=True)
class Withdrawal:
    """Value object recording when an evaluation was withdrawn."""

    withdrawn_at: datetime
