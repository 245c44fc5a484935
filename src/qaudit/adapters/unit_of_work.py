"""Staging Unit of Work over any `QualityAuditRepository`.

Inside the unit, audits are loaded as private working copies and saves are
held back; `commit` writes them to the underlying repository, `rollback`
drops them. Outside a unit the staging repository passes straight through.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from qaudit.interfaces.repositories import QualityAuditRepository
from qaudit.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from qaudit.domain.aggregates import QualityAudit
    from qaudit.domain.value_objects import ClientId, StandardId

logger = logging.getLogger(__name__)

AuditKey = tuple["ClientId", "StandardId"]


class StagedQualityAuditRepository(QualityAuditRepository):
    """Holds audit changes back from `backing` until they are flushed."""

    def __init__(self, backing: QualityAuditRepository) -> None:
        self.backing = backing
        self._working: dict[AuditKey, QualityAudit] | None = None
        self._dirty: set[AuditKey] = set()

    @property
    def has_unflushed_changes(self) -> bool:
        return bool(self._dirty)

    def begin(self) -> None:
        self._working = {}
        self._dirty = set()

    def save(self, audit: QualityAudit) -> None:
        if self._working is None:
            self.backing.save(audit)
            return
        key = (audit.client_id, audit.standard_id)
        self._working[key] = audit
        self._dirty.add(key)

    def find_for(
        self, client_id: ClientId, standard_id: StandardId
    ) -> QualityAudit | None:
        if self._working is None:
            return self.backing.find_for(client_id, standard_id)

        key = (client_id, standard_id)
        if key not in self._working:
            stored = self.backing.find_for(client_id, standard_id)
            if stored is None:
                return None
            # mutations on the copy stay invisible until flush()
            self._working[key] = copy.deepcopy(stored)
        return self._working[key]

    def flush(self) -> None:
        if self._working is None:
            return
        for key in self._dirty:
            self.backing.save(self._working[key])
        self._dirty = set()

    def discard(self) -> None:
        self._working = None
        self._dirty = set()


class StagedUnitOfWork(AbstractUnitOfWork):
    """Unit of Work staging audit saves in memory until commit."""

    def __init__(self, audits: QualityAuditRepository) -> None:
        self.audits = StagedQualityAuditRepository(audits)

    def __enter__(self):
        self.audits.begin()
        return super().__enter__()

    def commit(self):
        self.audits.flush()

    def rollback(self):
        if self.audits.has_unflushed_changes:
            logger.debug("Rolling back uncommitted audit changes")
        self.audits.discard()
