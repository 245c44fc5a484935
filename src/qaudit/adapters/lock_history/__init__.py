"""Lock history store adapters."""

from .memory import InMemoryLockHistoryRepository
from .sqlalchemy_store import SqlAlchemyLockHistoryRepository

__all__ = ["InMemoryLockHistoryRepository", "SqlAlchemyLockHistoryRepository"]
