"""Interface for the Employee Store."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.domain.model import Department, Employee


class EmployeeStore(abc.ABC):
    """Persistence capability for employees.

    All list-returning lookups are ordered by ascending id. Implementations
    should enforce uniqueness of (department, employee name); the admission
    check in the service layer is not atomic on its own.
    """

    @abc.abstractmethod
    def find_all(self) -> list[Employee]:
        """Return every employee."""

    @abc.abstractmethod
    def find_by_department_name(self, name: str) -> list[Employee]:
        """Return employees whose department name matches exactly.

        Args:
            name: The department name.
        """

    @abc.abstractmethod
    def find_by_salary_greater_than(self, salary: float) -> list[Employee]:
        """Return employees earning strictly more than ``salary``."""

    @abc.abstractmethod
    def find_by_salary_less_or_equal(self, salary: float) -> list[Employee]:
        """Return employees earning ``salary`` or less."""

    @abc.abstractmethod
    def find_by_name_and_department(
        self, name: str, department: Department
    ) -> Employee | None:
        """Look up an employee by name within a persisted department.

        Args:
            name: The employee name (exact match).
            department: A persisted department (``id`` set).

        Returns:
            The employee if found, otherwise None.
        """

    @abc.abstractmethod
    def find_by_id(self, employee_id: int) -> Employee | None:
        """Look up an employee by id."""

    @abc.abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert a transient employee and return it with an assigned id.

        Args:
            employee: The employee to save. Its department must be persisted.

        Returns:
            The persisted employee.

        Raises:
            ConstraintViolationError: If the store rejects the row (e.g. a
                duplicate (department, name) pair written concurrently).
            StorageError: If the backing store fails.
        """
