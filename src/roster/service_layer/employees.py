"""Employee admission and lookup.

Query policy:
  - List-returning queries return an empty list when nothing matches; they
    never raise. Only `find_by_id` raises `EmployeeNotFoundError`.
  - `find_by_salary(x, greater_than=False)` is inclusive (salary <= x), so the
    two salary directions partition all employees around the threshold.

The admission sequence (resolve department, check for a duplicate, insert)
is three separate store calls and is not atomic by itself. Stores that need
a strict guarantee must enforce uniqueness of (department, name).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roster.domain.errors import DuplicateEmployeeError, EmployeeNotFoundError

from .records import EmployeeRecord, from_record, to_record, to_records

if TYPE_CHECKING:
    from roster.interfaces.employee_store import EmployeeStore

    from .departments import DepartmentResolver

logger = logging.getLogger(__name__)


class EmployeeAdmissionService:
    """Admits new employees and answers employee queries.

    Args:
        employees: The employee store.
        resolver: Resolves (and creates) the department an employee joins.
    """

    def __init__(self, employees: EmployeeStore, resolver: DepartmentResolver) -> None:
        self._employees = employees
        self._resolver = resolver

    # --------------------------------------------------------------------- #
    # Writes
    # --------------------------------------------------------------------- #

    def admit(self, record: EmployeeRecord) -> None:
        """Admit a new employee into the department named by the record.

        Args:
            record: The employee to admit.

        Raises:
            DuplicateEmployeeError: If an employee with the same name already
                exists in the department. Nothing is written for the employee,
                although the department may have been created.
        """
        department = self._resolver.find_or_create(record.department)

        existing = self._employees.find_by_name_and_department(record.name, department)
        if existing is not None:
            logger.warning(
                "Rejected duplicate employee %r in department %r",
                record.name,
                record.department,
            )
            raise DuplicateEmployeeError(record.name, record.department)

        employee = self._employees.save(from_record(record, department))
        logger.info(
            "Admitted employee %r into department %r (id=%s)",
            employee.name,
            department.name,
            employee.id,
        )

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def list_all(self) -> list[EmployeeRecord]:
        """Return every employee."""
        records = to_records(self._employees.find_all())
        logger.debug("list_all: %d employee(s)", len(records))
        return records

    def find_by_department(self, name: str) -> list[EmployeeRecord]:
        """Return the employees of the department called ``name``."""
        records = to_records(self._employees.find_by_department_name(name))
        logger.debug("find_by_department %r: %d employee(s)", name, len(records))
        return records

    def find_by_salary(self, threshold: float, greater_than: bool) -> list[EmployeeRecord]:
        """Return employees on one side of a salary threshold.

        Args:
            threshold: The salary to compare against.
            greater_than: If True, salaries strictly above ``threshold``;
                otherwise salaries at or below it.
        """
        employees = (
            self._employees.find_by_salary_greater_than(threshold)
            if greater_than
            else self._employees.find_by_salary_less_or_equal(threshold)
        )
        records = to_records(employees)
        logger.debug(
            "find_by_salary %s %s: %d employee(s)",
            ">" if greater_than else "<=",
            threshold,
            len(records),
        )
        return records

    def find_by_id(self, employee_id: int) -> EmployeeRecord:
        """Return the employee with the given id.

        Raises:
            EmployeeNotFoundError: If no such employee exists.
        """
        if (employee := self._employees.find_by_id(employee_id)) is None:
            raise EmployeeNotFoundError(employee_id)
        return to_record(employee)
