"""Admission through the message bus against a migrated SQLite database."""

import pytest

from roster.bootstrap import bootstrap
from roster.domain.errors import DuplicateEmployeeError, EmployeeNotFoundError
from roster.interfaces.errors import ConstraintViolationError
from roster.service_layer.commands import AdmitEmployee
from roster.service_layer.records import EmployeeRecord

# pylint: disable=redefined-outer-name


@pytest.fixture
def app(sqlite_url_file):
    """Application wired to a fresh, migrated SQLite file."""
    return bootstrap(url=sqlite_url_file)


def test_admit_then_query(app):
    """Admitted employees are returned by every query."""
    app.message_bus.handle(AdmitEmployee("Ana", "Eng", 90_000.0))
    app.message_bus.handle(AdmitEmployee("Bo", "Ops", 40_000.0))

    assert app.queries.list_employees() == [
        EmployeeRecord("Ana", "Eng", 90_000.0),
        EmployeeRecord("Bo", "Ops", 40_000.0),
    ]
    assert [r.name for r in app.queries.employees_in_department("Ops")] == ["Bo"]
    assert [r.name for r in app.queries.employees_by_salary(40_000.0)] == ["Ana"]
    assert [r.name for r in app.queries.employees_by_salary(40_000.0, False)] == [
        "Bo"
    ]
    assert app.queries.employee_by_id(1).name == "Ana"
    assert [d.name for d in app.queries.list_departments()] == ["Eng", "Ops"]


def test_department_created_once(app):
    """Admissions into the same department share one department row."""
    app.message_bus.handle(AdmitEmployee("Ana", "Eng", 1.0))
    app.message_bus.handle(AdmitEmployee("Bo", "Eng", 1.0))
    assert len(app.queries.list_departments()) == 1


def test_duplicate_rejected_and_nothing_written(app):
    """A duplicate admission raises and leaves the store unchanged."""
    app.message_bus.handle(AdmitEmployee("Ana", "Eng", 1.0))
    with pytest.raises(DuplicateEmployeeError):
        app.message_bus.handle(AdmitEmployee("Ana", "Eng", 2.0))
    assert app.queries.list_employees() == [EmployeeRecord("Ana", "Eng", 1.0)]


def test_failed_admission_discards_new_department(app):
    """A department created inside a failed unit of work is rolled back.

    A negative salary slips past the service (validation is the transport's job)
    and is refused by the store's CHECK constraint after the department insert.
    """
    app.message_bus.handle(AdmitEmployee("Ana", "Eng", 1.0))

    with pytest.raises(ConstraintViolationError):
        app.message_bus.handle(AdmitEmployee("Bo", "Legal", -1.0))

    assert [d.name for d in app.queries.list_departments()] == ["Eng"]


def test_unknown_id(app):
    """Missing ids raise EmployeeNotFoundError."""
    with pytest.raises(EmployeeNotFoundError):
        app.queries.employee_by_id(1)


def test_empty_queries(app):
    """With no data every list query is empty."""
    assert app.queries.list_employees() == []
    assert app.queries.employees_in_department("Eng") == []
    assert app.queries.employees_by_salary(0.0) == []
    assert app.queries.list_departments() == []
