"""Input validation and error reporting for transports.

Every transport maps failures the same way:

| Kind              | Raised as                 | Status | Exit code |
|-------------------|---------------------------|--------|-----------|
| not_found         | `EmployeeNotFoundError`   | 404    | 4         |
| duplicate_employee| `DuplicateEmployeeError`  | 409    | 5         |
| validation        | `ValidationError`         | 400    | 2         |
| storage           | `StorageError`            | 500    | 1         |
| internal          | anything else             | 500    | 1         |
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from roster.domain.errors import DuplicateEmployeeError, EmployeeNotFoundError
from roster.interfaces.errors import StorageError
from roster.service_layer.records import EmployeeRecord


class ValidationError(ValueError):
    """Raised when transport input is malformed.

    Attributes:
        field (str): The offending input field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ErrorKind(str, Enum):
    """Error categories exposed to transport clients."""

    NOT_FOUND = "not_found"
    DUPLICATE_EMPLOYEE = "duplicate_employee"
    VALIDATION = "validation"
    STORAGE = "storage"
    INTERNAL = "internal"

    @property
    def status(self) -> int:
        """HTTP-equivalent status code."""
        return _STATUS[self]

    @property
    def exit_code(self) -> int:
        """Process exit code used by the CLI."""
        return _EXIT_CODES[self]


_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_EMPLOYEE: 409,
    ErrorKind.VALIDATION: 400,
    ErrorKind.STORAGE: 500,
    ErrorKind.INTERNAL: 500,
}

_EXIT_CODES = {
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.DUPLICATE_EMPLOYEE: 5,
    ErrorKind.VALIDATION: 2,
    ErrorKind.STORAGE: 1,
    ErrorKind.INTERNAL: 1,
}


@dataclass(frozen=True, slots=True)
class ErrorReport:
    """Structured error payload: what went wrong, for direct display."""

    kind: ErrorKind
    message: str

    @property
    def status(self) -> int:
        """HTTP-equivalent status code."""
        return self.kind.status

    def as_dict(self) -> dict[str, object]:
        """Return the payload as a JSON-ready dict."""
        return {"kind": self.kind.value, "message": self.message, "status": self.status}


def describe_error(exc: BaseException) -> ErrorReport:
    """Map an exception raised by the application to an error report."""
    match exc:
        case EmployeeNotFoundError():
            kind = ErrorKind.NOT_FOUND
        case DuplicateEmployeeError():
            kind = ErrorKind.DUPLICATE_EMPLOYEE
        case ValidationError():
            kind = ErrorKind.VALIDATION
        case StorageError():
            kind = ErrorKind.STORAGE
        case _:
            kind = ErrorKind.INTERNAL
    return ErrorReport(kind=kind, message=str(exc) or type(exc).__name__)


def parse_record(name: str, department: str, salary: float) -> EmployeeRecord:
    """Validate raw transport input and build a transfer record.

    Names are stripped of surrounding whitespace.

    Raises:
        ValidationError: If a name is blank or the salary is negative or not finite.
    """
    name = (name or "").strip()
    department = (department or "").strip()
    if not name:
        raise ValidationError("name", "Name cannot be empty")
    if not department:
        raise ValidationError("department", "Department cannot be empty")
    try:
        salary = float(salary)
    except (TypeError, ValueError) as e:
        raise ValidationError("salary", "Salary must be a non-negative number") from e
    if not math.isfinite(salary) or salary < 0:
        raise ValidationError("salary", "Salary must be a non-negative number")
    return EmployeeRecord(name=name, department=department, salary=salary)


def parse_department_query(department: str) -> str:
    """Normalize a department name used to look employees up.

    Stripped the same way :func:`parse_record` strips names on admission. A
    blank result is still a valid query; it simply matches nobody.
    """
    return (department or "").strip()


def parse_threshold(salary: float) -> float:
    """Validate a salary threshold for the salary query.

    Any finite number is accepted, negative ones included.

    Raises:
        ValidationError: If the threshold is NaN or infinite.
    """
    if not math.isfinite(salary):
        raise ValidationError("salary", "Salary threshold must be a finite number")
    return salary
