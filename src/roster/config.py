"""Runtime settings for ROSTER.

The only setting read from the environment is the database URL. Migrations
ship inside the package, so the Alembic configuration is built in code rather
than read from an ``alembic.ini``.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENVVAR = "ROSTER_DB_URL"  # pragma: no mutate

#: Package holding ``env.py`` and the ``versions/`` scripts.
MIGRATIONS_PACKAGE = "roster.adapters.db.alembic"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """ROSTER_DB_URL is unset or empty."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENVVAR} is not set")


def get_db_url() -> str:
    """Return the database URL from ROSTER_DB_URL.

    Raises:
        DatabaseUrlNotSetError: The variable is missing or empty.
    """
    url = os.environ.get(DB_URL_ENVVAR)
    if not url:
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic config pointing at the packaged migrations.

    Args:
        db_url: Database to migrate. Leave as None for commands that only read
            the scripts, such as ``heads`` or ``history``.
        stdout: Stream Alembic prints status lines to.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg
