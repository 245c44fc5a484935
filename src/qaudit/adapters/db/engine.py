"""Engine factory for the database-backed lock history.

`make_engine` is the only place engines are created, so every connection to a
lock history database is configured the same way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event

from qaudit.adapters.db.dialects import DialectName

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import URL, Engine

logger = logging.getLogger(__name__)

#: Applied to every new SQLite connection. WAL lets readers of the history
#: proceed while an append is in flight.
SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA busy_timeout=5000",
)


def _apply_sqlite_pragmas(dbapi_conn: SQLiteConnection, _conn_record: object) -> None:
    cur = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cur.execute(pragma)
    finally:
        cur.close()


def make_engine(
    url: str | URL, *, echo: bool = False, **engine_kwargs: Any
) -> Engine:
    """Create an Engine for a lock history database.

    Args:
        url: Database URL; only PostgreSQL and SQLite backends are accepted.
        echo: If True, log SQL statements.
        **engine_kwargs: Passed through to `create_engine` (e.g. `poolclass`).

    Raises:
        UnsupportedDialect: If the URL names another backend.
    """
    dialect = DialectName.of(url)
    engine = create_engine(url, echo=echo, **engine_kwargs)

    if dialect is DialectName.SQLITE:
        event.listen(engine, "connect", _apply_sqlite_pragmas)

    logger.debug("Created %s engine for %s", dialect.value, engine.url)
    return engine
