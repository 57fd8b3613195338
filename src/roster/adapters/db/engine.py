"""Engine construction for the SQL stores.

Every Engine in ROSTER should come from :func:`make_engine`. SQLite
connections get a fixed set of PRAGMAs on connect; PostgreSQL is used as
configured by its URL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

#: Applied in order to each new SQLite DBAPI connection. ``foreign_keys`` is
#: what makes an employee row require an existing department.
SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if ``url`` (a string or :class:`URL`) points at SQLite."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url``.

    Args:
        url: Database connection URL.
        echo: Log every SQL statement through the ``sqlalchemy.engine`` logger.

    Returns:
        Engine: The engine, with :data:`SQLITE_PRAGMAS` hooked in for SQLite.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
