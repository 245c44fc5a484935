"""Adapters implementing the QAUDIT interfaces (in-memory and SQLAlchemy)."""
