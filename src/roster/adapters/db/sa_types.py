"""Custom SQLAlchemy column types for ROSTER."""

from sqlalchemy import BigInteger, Integer

__all__ = ["BIGINT_PK"]

# SQLite only autoincrements an INTEGER PRIMARY KEY (rowid alias)
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")
