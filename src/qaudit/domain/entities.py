"""Reference entities consumed by the audit services."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from qaudit.domain.value_objects import ClientId, ContractId, StandardId, SupervisorId


@dataclass(frozen=True)
class Client:
    """A client subject to quality audits."""

    id: ClientId
    name: str


@dataclass(frozen=True)
class Standard:
    """A standard clients are evaluated against."""

    id: StandardId
    name: str


@dataclass(frozen=True)
class Supervisor:
    """A supervisor authorized to audit against a set of standards."""

    id: SupervisorId
    name: str
    authorized_standards: frozenset[StandardId] = field(default_factory=frozenset)

    @classmethod
    def with_authority(
        cls, supervisor_id: SupervisorId, name: str, standards: Iterable[StandardId]
    ) -> Supervisor:
        """Build a supervisor authorized for the given standards."""
        return cls(supervisor_id, name, frozenset(standards))

    def has_authority_for(self, standard_id: StandardId) -> bool:
        return standard_id in self.authorized_standards


@dataclass(frozen=True)
class Contract:
    """A contract binding a client to a supervisor."""

    id: ContractId
    client_id: ClientId
    supervisor_id: SupervisorId
    active: bool = True

    def binds(self, client_id: ClientId, supervisor_id: SupervisorId) -> bool:
        """Return True if this is an active contract between the two parties."""
        return (
            self.active
            and self.client_id == client_id
            and self.supervisor_id == supervisor_id
        )
