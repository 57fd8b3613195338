"""Alembic environment for ROSTER.

Both modes compare column types and server defaults so drift between the
schema module and the database shows up in autogenerate. SQLite connections
run in batch mode, which rebuilds tables instead of issuing ALTER TABLE.

The database URL comes from ``-x url=...`` first, then ``sqlalchemy.url`` on
the Alembic config, then the ROSTER_DB_URL environment variable.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# registers the employees and departments tables on the metadata
import roster.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from roster.adapters.db.dialects import DialectName
from roster.adapters.db.metadata import metadata
from roster.config import DB_URL_ENVVAR

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def _is_placeholder(url: str | None) -> bool:
    # alembic.ini templates leave "%(...)s" interpolation markers behind
    return not url or "%(" in url


def get_url() -> str:
    """Return the database URL migrations should run against."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get(DB_URL_ENVVAR),
    )
    for url in candidates:
        if not _is_placeholder(url):
            return url
    raise RuntimeError(f"Set {DB_URL_ENVVAR} to your database URL.")


def run_migrations_offline() -> None:
    """Emit migration SQL as a script, without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    engine = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        dialect = DialectName.from_sqlalchemy(connection)
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=dialect is DialectName.SQLITE,
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
