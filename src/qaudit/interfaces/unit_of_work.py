"""Unit of Work interface for QAUDIT.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the audit repository, with abstract commit/rollback methods. The
message bus runs a command and the projection of its events inside one unit,
so a failed projection leaves the audits untouched.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qaudit.interfaces.repositories import QualityAuditRepository


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    audits: QualityAuditRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit."""
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit; anything committed stays.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make the changes staged in this unit visible."""

    @abc.abstractmethod
    def rollback(self):
        """Discard the changes staged since the last commit."""
