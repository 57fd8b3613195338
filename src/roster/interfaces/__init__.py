"""Interfaces (application boundary) for ROSTER.

Defines framework-free application contracts: the department and employee
store ABCs, the unit of work, and the errors stores may raise. Business rules
stay out of this package.

Dependency rule: this package may import `roster.domain` only. It may be
imported by `roster.service_layer`, `roster.adapters`, and `roster.bootstrap`.
"""

from .department_store import DepartmentStore
from .employee_store import EmployeeStore
from .errors import ConstraintViolationError, StorageError, StoreUnavailableError

__all__ = [
    "DepartmentStore",
    "EmployeeStore",
    "StorageError",
    "StoreUnavailableError",
    "ConstraintViolationError",
]
