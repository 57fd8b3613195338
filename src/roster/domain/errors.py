"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                        Employee related errors
# ============================================================================


class EmployeeNotFoundError(DomainError):
    """Raised when a query for a single employee finds no match.

    Attributes:
        employee_id (int | None): The id that was looked up, if any.
    """

    def __init__(self, employee_id: int | None = None, message: str | None = None):
        super().__init__(message or "Employee not found")
        self.employee_id = employee_id


class DuplicateEmployeeError(DomainError):
    """Raised when an employee with the same name already exists in the department.

    Attributes:
        name (str): The employee name that is already taken.
        department (str): The name of the department it is taken in.
    """

    def __init__(self, name: str, department: str) -> None:
        super().__init__(
            f"Employee with name {name} already exists in department {department}"
        )
        self.name = name
        self.department = department
