"""Concrete implementations of the department and employee stores.

- `memory`: dict-backed stores for tests and development.
- `sqlalchemy_stores`: relational stores over a SQLAlchemy Connection.
"""

from .memory import InMemoryDepartmentStore, InMemoryEmployeeStore, InMemoryStoreData
from .sqlalchemy_stores import SqlAlchemyDepartmentStore, SqlAlchemyEmployeeStore

__all__ = [
    "InMemoryStoreData",
    "InMemoryDepartmentStore",
    "InMemoryEmployeeStore",
    "SqlAlchemyDepartmentStore",
    "SqlAlchemyEmployeeStore",
]
