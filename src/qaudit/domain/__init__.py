"""Domain layer for QAUDIT.

Contains business rules: the quality audit aggregate, the evaluation entity,
value objects, domain events and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `qaudit.adapters` or `qaudit.service_layer`.
"""
