"""Employee transfer records and mapping to/from the domain model.

An `EmployeeRecord` is the caller-facing shape of an employee: the department
is carried by name rather than by reference, and there is no id.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from roster.domain.model import Employee

if TYPE_CHECKING:
    from collections.abc import Iterable

    from roster.domain.model import Department


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    """Unpersisted employee data crossing the service boundary."""

    name: str
    department: str
    salary: float

    def as_dict(self) -> dict[str, Any]:
        """Return the record as a plain dict (e.g. for JSON output)."""
        return asdict(self)


def to_record(employee: Employee) -> EmployeeRecord:
    """Flatten an employee into a transfer record."""
    return EmployeeRecord(
        name=employee.name,
        department=employee.department_name,
        salary=employee.salary,
    )


def to_records(employees: Iterable[Employee]) -> list[EmployeeRecord]:
    """Flatten a sequence of employees, preserving order."""
    return [to_record(employee) for employee in employees]


def from_record(record: EmployeeRecord, department: Department) -> Employee:
    """Build a transient employee from a record and its resolved department."""
    return Employee(name=record.name, salary=record.salary, department=department)
