"""Repository adapters."""

from .memory import (
    InMemoryContractRepository,
    InMemoryEvaluationRepository,
    InMemoryQualityAuditRepository,
)

__all__ = [
    "InMemoryContractRepository",
    "InMemoryEvaluationRepository",
    "InMemoryQualityAuditRepository",
]
