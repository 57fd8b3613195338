"""SQLAlchemy-backed department and employee stores.

Both stores operate on a SQLAlchemy Connection owned by the unit of work;
they never commit. Database errors are translated to store errors:

- ``IntegrityError`` → `ConstraintViolationError` (e.g. a duplicate employee
  inserted by a concurrent admission)
- any other ``DBAPIError`` → `StoreUnavailableError`

Department saves use ``INSERT ... ON CONFLICT DO NOTHING`` followed by a read,
so concurrent find-or-create calls for the same name end up with the same row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, IntegrityError

from roster.adapters.db.dialects import DialectName, insert_ignoring_conflicts
from roster.adapters.db.schema import departments, employees
from roster.domain.model import Department, Employee
from roster.interfaces.department_store import DepartmentStore
from roster.interfaces.employee_store import EmployeeStore
from roster.interfaces.errors import ConstraintViolationError, StoreUnavailableError

if TYPE_CHECKING:
    from sqlalchemy import Result, RowMapping, Select
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.expression import Executable


class _SqlAlchemyStore:
    """Shared statement execution with error translation."""

    ENTITY: str

    def __init__(self, connection: Connection):
        self.connection = connection

    def _execute(self, stmt: Executable) -> Result:
        try:
            return self.connection.execute(stmt)
        except IntegrityError as e:
            raise ConstraintViolationError(self.ENTITY, str(e.orig or e)) from e
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e


class SqlAlchemyDepartmentStore(_SqlAlchemyStore, DepartmentStore):
    """DepartmentStore implementation for PostgreSQL and SQLite."""

    ENTITY = "department"

    def __init__(self, connection: Connection):
        super().__init__(connection)
        self.dialect = DialectName.from_sqlalchemy(connection)

    def find_by_name(self, name: str) -> Department | None:
        stmt = select(departments.c.id, departments.c.name).where(
            departments.c.name == name
        )
        if not (row := self._execute(stmt).fetchone()):
            return None
        return Department(name=row.name, id=int(row.id))

    def save(self, department: Department) -> Department:
        if not department.is_transient:
            return department

        # A concurrent insert of the same name is skipped, not raised.
        self._execute(
            insert_ignoring_conflicts(
                self.dialect, departments, {"name": department.name}
            )
        )

        if (saved := self.find_by_name(department.name)) is None:
            # Should never happen: the row was either inserted or already there.
            msg = f"department {department.name!r} missing after insert"  # pragma: no cover
            raise StoreUnavailableError(msg)  # pragma: no cover
        return saved

    def find_all(self) -> list[Department]:
        stmt = select(departments.c.id, departments.c.name).order_by(
            departments.c.id.asc()
        )
        return [
            Department(name=row.name, id=int(row.id))
            for row in self._execute(stmt).fetchall()
        ]


class SqlAlchemyEmployeeStore(_SqlAlchemyStore, EmployeeStore):
    """EmployeeStore implementation for PostgreSQL and SQLite."""

    ENTITY = "employee"

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def find_all(self) -> list[Employee]:
        return self._fetch(self._select_employees())

    def find_by_department_name(self, name: str) -> list[Employee]:
        return self._fetch(self._select_employees().where(departments.c.name == name))

    def find_by_salary_greater_than(self, salary: float) -> list[Employee]:
        return self._fetch(self._select_employees().where(employees.c.salary > salary))

    def find_by_salary_less_or_equal(self, salary: float) -> list[Employee]:
        return self._fetch(
            self._select_employees().where(employees.c.salary <= salary)
        )

    def find_by_name_and_department(
        self, name: str, department: Department
    ) -> Employee | None:
        stmt = self._select_employees().where(
            employees.c.name == name,
            employees.c.department_id == department.id,
        )
        found = self._fetch(stmt)
        return found[0] if found else None

    def find_by_id(self, employee_id: int) -> Employee | None:
        found = self._fetch(self._select_employees().where(employees.c.id == employee_id))
        return found[0] if found else None

    def save(self, employee: Employee) -> Employee:
        stmt = (
            employees.insert()
            .values(
                name=employee.name,
                salary=employee.salary,
                department_id=employee.department.id,
            )
            .returning(employees.c.id)
        )
        new_id = self._execute(stmt).scalar_one()
        return Employee(
            name=employee.name,
            salary=employee.salary,
            department=employee.department,
            id=int(new_id),
        )

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @staticmethod
    def _select_employees() -> Select:
        """Employees joined to their department, in ascending id order."""
        return (
            select(
                employees.c.id,
                employees.c.name,
                employees.c.salary,
                departments.c.id.label("department_id"),
                departments.c.name.label("department_name"),
            )
            .join(departments, employees.c.department_id == departments.c.id)
            .order_by(employees.c.id.asc())
        )

    def _fetch(self, stmt: Select) -> list[Employee]:
        return [self._to_employee(row) for row in self._execute(stmt).mappings().all()]

    @staticmethod
    def _to_employee(row: RowMapping) -> Employee:
        return Employee(
            name=row["name"],
            salary=float(row["salary"]),
            department=Department(
                name=row["department_name"], id=int(row["department_id"])
            ),
            id=int(row["id"]),
        )
