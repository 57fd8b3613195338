"""Read-side queries.

Each query opens its own unit of work, delegates to the services, and rolls
back on exit (nothing is ever written).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .departments import DepartmentResolver
from .handlers import build_admission_service

if TYPE_CHECKING:
    from roster.domain.model import Department
    from roster.interfaces.unit_of_work import AbstractUnitOfWork

    from .records import EmployeeRecord


class EmployeeQueries:
    """Query facade used by entrypoints.

    Args:
        uow: The unit of work to read through.
    """

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    def list_employees(self) -> list[EmployeeRecord]:
        """Return every employee."""
        with self.uow:
            return build_admission_service(self.uow).list_all()

    def employees_in_department(self, department: str) -> list[EmployeeRecord]:
        """Return the employees of a department."""
        with self.uow:
            return build_admission_service(self.uow).find_by_department(department)

    def employees_by_salary(
        self, salary: float, greater_than: bool = True
    ) -> list[EmployeeRecord]:
        """Return employees earning more than, or at most, ``salary``."""
        with self.uow:
            return build_admission_service(self.uow).find_by_salary(
                salary, greater_than
            )

    def employee_by_id(self, employee_id: int) -> EmployeeRecord:
        """Return one employee.

        Raises:
            EmployeeNotFoundError: If no such employee exists.
        """
        with self.uow:
            return build_admission_service(self.uow).find_by_id(employee_id)

    def list_departments(self) -> list[Department]:
        """Return every department."""
        with self.uow:
            return DepartmentResolver(self.uow.departments).list_all()
