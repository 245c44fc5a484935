"""Alembic environment for the QAUDIT lock history schema.

The database URL comes from `-x url=...`, then the `sqlalchemy.url` main
option, then `QAUDIT_DB_URL`. SQLite migrations run in batch mode because
SQLite cannot ALTER most constraints in place.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

# Registers the lock_history table on `metadata` for autogenerate
import qaudit.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from qaudit.adapters.db.dialects import DialectName
from qaudit.adapters.db.engine import make_engine
from qaudit.adapters.db.metadata import metadata
from qaudit.config import ALEMBIC_URL_KEY, DB_URL_ENV_VAR, DatabaseUrlNotSetError

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def resolve_url() -> str:
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option(ALEMBIC_URL_KEY),
        os.environ.get(DB_URL_ENV_VAR),
    )
    for url in candidates:
        # an unexpanded "%(...)s" ini placeholder counts as unset
        if url and "%(" not in url:
            return url
    raise DatabaseUrlNotSetError(
        f"Set {DB_URL_ENV_VAR} to the lock history database URL."
    )


def run_migrations_offline() -> None:
    """Emit the migration SQL to the script output without connecting."""
    context.configure(
        url=resolve_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run the migrations over a live connection."""
    url = resolve_url()
    engine = make_engine(url, poolclass=pool.NullPool)

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=DialectName.of(url) is DialectName.SQLITE,
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
