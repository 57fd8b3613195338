"""Service layer command handlers."""

import logging
from collections.abc import Callable

from roster.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands
from .departments import DepartmentResolver
from .employees import EmployeeAdmissionService
from .records import EmployeeRecord

logger = logging.getLogger(__name__)


def build_admission_service(uow: AbstractUnitOfWork) -> EmployeeAdmissionService:
    """Build an admission service over the stores of an open unit of work."""
    return EmployeeAdmissionService(
        employees=uow.employees,
        resolver=DepartmentResolver(uow.departments),
    )


def admit_employee(cmd: commands.AdmitEmployee, uow: AbstractUnitOfWork) -> None:
    """Admit a new employee.

    A rejected duplicate leaves the unit of work uncommitted, so the department
    row created while resolving is discarded along with it.
    """

    record = EmployeeRecord(name=cmd.name, department=cmd.department, salary=cmd.salary)

    with uow:
        build_admission_service(uow).admit(record)
        uow.commit()


# ============================================================================
#                       Handler Registry
# ============================================================================


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AdmitEmployee: admit_employee,
}
