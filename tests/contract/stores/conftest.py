"""Store fixtures shared by the contract suite.

Every contract test runs once per backend:
  - `"memory"` → dict-backed stores over one `InMemoryStoreData`
  - `"sql_memory"` → SQLAlchemy stores on an in-memory SQLite connection
  - `"sql_file"` → SQLAlchemy stores on an Alembic-migrated SQLite file
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from roster.adapters.stores.memory import (
    InMemoryDepartmentStore,
    InMemoryEmployeeStore,
    InMemoryStoreData,
)
from roster.adapters.stores.sqlalchemy_stores import (
    SqlAlchemyDepartmentStore,
    SqlAlchemyEmployeeStore,
)
from roster.domain.model import Department, Employee
from roster.interfaces.department_store import DepartmentStore
from roster.interfaces.employee_store import EmployeeStore

# pylint: disable=redefined-outer-name

ENGINES = {"sql_memory": "sqlite_engine_memory", "sql_file": "sqlite_engine_file"}


@dataclass
class Stores:
    """A department store and an employee store over the same backend."""

    departments: DepartmentStore
    employees: EmployeeStore

    def hire(self, name: str, department: str, salary: float = 1.0) -> Employee:
        """Save ``name`` into ``department``, creating the department if needed."""
        dept = self.departments.find_by_name(department) or self.departments.save(
            Department(name=department)
        )
        return self.employees.save(Employee(name=name, salary=salary, department=dept))


@pytest.fixture(params=["memory", "sql_memory", "sql_file"])
def stores(request: pytest.FixtureRequest) -> Iterator[Stores]:
    """Fresh stores for the requested backend."""
    if request.param == "memory":
        data = InMemoryStoreData()
        yield Stores(InMemoryDepartmentStore(data), InMemoryEmployeeStore(data))
        return

    engine = request.getfixturevalue(ENGINES[request.param])
    with engine.connect() as conn:
        yield Stores(SqlAlchemyDepartmentStore(conn), SqlAlchemyEmployeeStore(conn))
        conn.rollback()
