"""Environment and Alembic configuration for QAUDIT.

The only setting is the lock history database URL, read from
`QAUDIT_DB_URL`. Without it the lock history stays in memory.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "QAUDIT_DB_URL"

ALEMBIC_URL_KEY = "sqlalchemy.url"
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"
MIGRATIONS_PACKAGE = "qaudit.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """Raised when a database URL is required but none is configured."""


def get_db_url() -> str:
    """Return `QAUDIT_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError(f"{DB_URL_ENV_VAR} is not set")
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic `Config` for the packaged lock history migrations.

    No ini file is involved. `db_url` may be left out for commands that do
    not connect, such as `alembic history`.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
