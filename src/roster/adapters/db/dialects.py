"""Dialect handling for the SQL stores.

ROSTER supports PostgreSQL and SQLite. Both offer ``INSERT ... ON CONFLICT DO
NOTHING``, which the department store relies on to make find-or-create safe
under concurrent callers; this module hides the dialect-specific insert
constructs behind one helper.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql.dml import Insert


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize a raw or driver-qualified dialect name.

        Accepts aliases such as 'postgres', 'postgresql+psycopg', 'sqlite+pysqlite'.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Extract the dialect from a SQLAlchemy Engine or Connection.

        Raises:
            UnsupportedDialect: if the object has no dialect or it is unsupported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)


def insert_ignoring_conflicts(
    dialect: DialectName, table: Table, values: dict[str, Any]
) -> Insert:
    """Build an insert that silently skips rows violating a unique constraint.

    Args:
        dialect: The dialect of the connection the statement will run on.
        table: Target table.
        values: Column values for the single row to insert.

    Returns:
        The dialect-specific insert statement.
    """
    if dialect is DialectName.POSTGRES:
        return pg_insert(table).values(**values).on_conflict_do_nothing()
    if dialect is DialectName.SQLITE:
        return sqlite_insert(table).values(**values).on_conflict_do_nothing()
    # unreachable while DialectName only has the two members above
    raise UnsupportedDialect(f"Unsupported dialect: {dialect!r}")  # pragma: no cover
