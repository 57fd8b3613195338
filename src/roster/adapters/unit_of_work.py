"""Unit of Work implementations for ROSTER.

- `SqlAlchemyUnitOfWork`: one Connection (and transaction) per ``with`` block,
  with SQLAlchemy-backed stores bound to it.
- `InMemoryUnitOfWork`: dict-backed stores for tests and development. Rows
  written inside a ``with`` block and not committed are dropped on exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roster.adapters.stores.memory import (
    InMemoryDepartmentStore,
    InMemoryEmployeeStore,
    InMemoryStoreData,
)
from roster.adapters.stores.sqlalchemy_stores import (
    SqlAlchemyDepartmentStore,
    SqlAlchemyEmployeeStore,
)
from roster.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.departments = SqlAlchemyDepartmentStore(self.connection)
        self.employees = SqlAlchemyEmployeeStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work sharing one data set across ``with`` blocks."""

    def __init__(self, data: InMemoryStoreData | None = None):
        self.data = data if data is not None else InMemoryStoreData()
        self.departments = InMemoryDepartmentStore(self.data)
        self.employees = InMemoryEmployeeStore(self.data)
        self.committed = False
        self._snapshot: tuple | None = None

    def __enter__(self):
        self._snapshot = self.data.snapshot()
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self._snapshot = None

    def commit(self):
        self.committed = True
        if self._snapshot is not None:
            self._snapshot = self.data.snapshot()

    def rollback(self):
        # outside a with block there is nothing to go back to
        if self._snapshot is not None:
            self.data.restore(self._snapshot)
