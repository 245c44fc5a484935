"""Integration tests.

Lock history persistence against real SQLite databases, Alembic migrations
run from the packaged scripts, and the wiring done by `bootstrap()`.
"""
