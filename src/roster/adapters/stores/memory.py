"""In-memory department and employee stores.

These stores are intended for testing and development. They do not persist
data, are not thread-safe, and do not provide transactional isolation.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from roster.interfaces.department_store import DepartmentStore
from roster.interfaces.employee_store import EmployeeStore
from roster.interfaces.errors import ConstraintViolationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from roster.domain.model import Department, Employee


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared backing data for the in-memory stores.

    A single instance should be passed to both stores so employees can be
    resolved against the departments they reference. Both mappings are keyed
    by id and preserve insertion (= ascending id) order.
    """

    departments: dict[int, Department] = field(default_factory=dict)
    employees: dict[int, Employee] = field(default_factory=dict)
    department_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))
    employee_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))

    def snapshot(self) -> tuple[dict[int, Department], dict[int, Employee]]:
        """Copy the stored rows.

        Id counters are left out, so ids handed out before a restore are never
        reused, like a database sequence.
        """
        return dict(self.departments), dict(self.employees)

    def restore(
        self, snapshot: tuple[dict[int, Department], dict[int, Employee]]
    ) -> None:
        """Put back the rows captured by :meth:`snapshot`."""
        departments, employees = snapshot
        self.departments = dict(departments)
        self.employees = dict(employees)


class InMemoryDepartmentStore(DepartmentStore):
    """In-memory implementation of the DepartmentStore interface."""

    def __init__(self, data: InMemoryStoreData | None = None) -> None:
        self._data = data if data is not None else InMemoryStoreData()

    def find_by_name(self, name: str) -> Department | None:
        return next(
            (d for d in self._data.departments.values() if d.name == name), None
        )

    def save(self, department: Department) -> Department:
        if not department.is_transient:
            return department
        if (existing := self.find_by_name(department.name)) is not None:
            # mirrors the unique name constraint of the SQL store
            return existing
        saved = replace(department, id=next(self._data.department_ids))
        self._data.departments[saved.id] = saved  # type: ignore[index]
        return saved

    def find_all(self) -> list[Department]:
        return list(self._data.departments.values())


class InMemoryEmployeeStore(EmployeeStore):
    """In-memory implementation of the EmployeeStore interface."""

    def __init__(self, data: InMemoryStoreData | None = None) -> None:
        self._data = data if data is not None else InMemoryStoreData()

    def _select(self, predicate: Callable[[Employee], bool]) -> list[Employee]:
        return [e for e in self._data.employees.values() if predicate(e)]

    def find_all(self) -> list[Employee]:
        return list(self._data.employees.values())

    def find_by_department_name(self, name: str) -> list[Employee]:
        return self._select(lambda e: e.department_name == name)

    def find_by_salary_greater_than(self, salary: float) -> list[Employee]:
        return self._select(lambda e: e.salary > salary)

    def find_by_salary_less_or_equal(self, salary: float) -> list[Employee]:
        return self._select(lambda e: e.salary <= salary)

    def find_by_name_and_department(
        self, name: str, department: Department
    ) -> Employee | None:
        return next(
            (
                e
                for e in self._data.employees.values()
                if e.name == name and e.department.id == department.id
            ),
            None,
        )

    def find_by_id(self, employee_id: int) -> Employee | None:
        return self._data.employees.get(employee_id)

    def save(self, employee: Employee) -> Employee:
        if employee.department.id not in self._data.departments:
            raise ConstraintViolationError(
                "employee", f"unknown department {employee.department.name!r}"
            )
        if self.find_by_name_and_department(employee.name, employee.department):
            raise ConstraintViolationError(
                "employee",
                f"{employee.name!r} already stored in {employee.department.name!r}",
            )
        saved = replace(employee, id=next(self._data.employee_ids))
        self._data.employees[saved.id] = saved  # type: ignore[index]
        return saved
