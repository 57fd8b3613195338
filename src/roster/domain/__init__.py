"""Domain layer for ROSTER.

Contains the business entities (departments and the employees that belong to
them) and the errors raised when a business rule is violated. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `roster.adapters` or `roster.entrypoints`.
"""

from .errors import DomainError, DuplicateEmployeeError, EmployeeNotFoundError
from .model import Department, Employee

__all__ = [
    "Department",
    "Employee",
    "DomainError",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
]
