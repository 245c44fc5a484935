"""Unit tests.

Domain rules, services, the message bus and the in-memory adapters, each
exercised in isolation with a `FixedClock`. Everything here runs without a
database except the SQLite schema and type checks under `adapters/db/`, which
use an in-memory engine.
"""
