"""Alembic migration scripts for QAUDIT."""
