"""Unit tests for EmployeeAdmissionService."""

import logging

import pytest

from roster.domain.errors import DuplicateEmployeeError, EmployeeNotFoundError
from roster.interfaces.errors import ConstraintViolationError
from roster.service_layer.employees import EmployeeAdmissionService
from roster.service_layer.records import EmployeeRecord

# pylint: disable=redefined-outer-name


@pytest.fixture
def staffed(service, make_record):
    """A service holding four employees across two departments."""
    records = [
        make_record("Ana", "Eng", 90_000.0),
        make_record("Bo", "Eng", 50_000.0),
        make_record("Cy", "Ops", 50_000.0),
        make_record("Di", "Ops", 0.0),
    ]
    for record in records:
        service.admit(record)
    return records


class TestAdmit:
    """Tests for `EmployeeAdmissionService.admit`."""

    @staticmethod
    def test_admit_stores_employee(service, employee_store):
        """An admitted employee is stored with its resolved department."""
        service.admit(EmployeeRecord("Ana", "Eng", 100.0))
        (stored,) = employee_store.find_all()
        assert stored.name == "Ana"
        assert stored.salary == 100.0
        assert stored.department_name == "Eng"
        assert stored.id is not None

    @staticmethod
    def test_admit_creates_department_once(service, department_store):
        """Two admissions into a new department create it only once."""
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        service.admit(EmployeeRecord("Bo", "Eng", 2.0))
        assert [d.name for d in department_store.find_all()] == ["Eng"]

    @staticmethod
    def test_admit_reuses_existing_department(service, resolver, employee_store):
        """Admission joins a department that already exists."""
        eng = resolver.find_or_create("Eng")
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        assert employee_store.find_all()[0].department == eng

    @staticmethod
    def test_duplicate_rejected(service, employee_store):
        """The same name in the same department is rejected."""
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        with pytest.raises(
            DuplicateEmployeeError,
            match="Employee with name Ana already exists in department Eng",
        ):
            service.admit(EmployeeRecord("Ana", "Eng", 999.0))
        assert len(employee_store.find_all()) == 1

    @staticmethod
    def test_duplicate_logged_as_warning(service, caplog):
        """A rejected duplicate leaves a WARNING behind."""
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        with caplog.at_level(logging.WARNING), pytest.raises(DuplicateEmployeeError):
            service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        assert any(rec.levelname == "WARNING" for rec in caplog.records)

    @staticmethod
    def test_same_name_in_other_department_allowed(service, employee_store):
        """Uniqueness is per department."""
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        service.admit(EmployeeRecord("Ana", "Ops", 1.0))
        assert len(employee_store.find_all()) == 2

    @staticmethod
    def test_names_compared_exactly(service, employee_store):
        """Name matching is case-sensitive."""
        service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        service.admit(EmployeeRecord("ana", "Eng", 1.0))
        assert len(employee_store.find_all()) == 2

    @staticmethod
    def test_duplicate_in_new_department_keeps_department(
        resolver, department_store
    ):
        """A department created before a failed save is not removed.

        Uses a store that refuses every write, as a racing admission would.
        """

        class RefusingEmployeeStore:  # pylint: disable=too-few-public-methods
            """Employee store whose save always violates a constraint."""

            def find_by_name_and_department(self, name, department):
                """Never finds anything."""
                return None

            def save(self, employee):
                """Always refuses."""
                raise ConstraintViolationError("employee", "taken")

        service = EmployeeAdmissionService(RefusingEmployeeStore(), resolver)  # type: ignore[arg-type]
        with pytest.raises(ConstraintViolationError):
            service.admit(EmployeeRecord("Ana", "Eng", 1.0))
        assert department_store.find_by_name("Eng") is not None


class TestQueries:
    """Tests for the read operations of `EmployeeAdmissionService`."""

    @staticmethod
    def test_list_all_in_admission_order(service, staffed):
        """list_all returns every employee, oldest first."""
        assert service.list_all() == staffed

    @staticmethod
    def test_list_all_empty(service):
        """An empty store yields an empty list rather than an error."""
        assert service.list_all() == []

    @staticmethod
    def test_find_by_department(service, staffed):
        """Only employees of the named department are returned."""
        assert service.find_by_department("Ops") == staffed[2:]

    @staticmethod
    def test_find_by_unknown_department_is_empty(service, staffed):
        """Unknown departments yield an empty list."""
        assert service.find_by_department("Legal") == []

    @staticmethod
    def test_find_by_department_is_exact(service, staffed):
        """Department lookup is case-sensitive."""
        assert service.find_by_department("eng") == []

    @staticmethod
    def test_salary_greater_than_is_strict(service, staffed):
        """greater_than=True excludes salaries equal to the threshold."""
        found = service.find_by_salary(50_000.0, greater_than=True)
        assert [r.name for r in found] == ["Ana"]

    @staticmethod
    def test_salary_not_greater_is_inclusive(service, staffed):
        """greater_than=False includes salaries equal to the threshold."""
        found = service.find_by_salary(50_000.0, greater_than=False)
        assert [r.name for r in found] == ["Bo", "Cy", "Di"]

    @staticmethod
    def test_salary_zero_threshold(service, staffed):
        """A zero threshold splits unpaid employees from paid ones."""
        assert [r.name for r in service.find_by_salary(0.0, False)] == ["Di"]
        assert len(service.find_by_salary(0.0, True)) == 3

    @staticmethod
    def test_salary_query_empty_result(service, staffed):
        """Nobody above the maximum yields an empty list."""
        assert service.find_by_salary(1e9, greater_than=True) == []

    @staticmethod
    def test_find_by_id(service, staffed, employee_store):
        """find_by_id returns the record of the stored employee."""
        bo = next(e for e in employee_store.find_all() if e.name == "Bo")
        assert service.find_by_id(bo.id) == staffed[1]

    @staticmethod
    def test_find_by_id_missing(service, staffed):
        """An unknown id raises EmployeeNotFoundError."""
        with pytest.raises(EmployeeNotFoundError, match="Employee not found"):
            service.find_by_id(999)

    @staticmethod
    def test_records_carry_department_name(service, staffed):
        """Query results are flat records with the department name."""
        record = service.find_by_department("Eng")[0]
        assert record == EmployeeRecord(name="Ana", department="Eng", salary=90_000.0)


class TestScenarios:
    """Walk-throughs of typical admission and query sequences."""

    @staticmethod
    def test_department_scenario(service):
        """Two Sales hires and one Eng hire; Marketing is empty."""
        service.admit(EmployeeRecord("Alice", "Sales", 60_000.0))
        service.admit(EmployeeRecord("Bob", "Sales", 55_000.0))
        service.admit(EmployeeRecord("Carol", "Eng", 80_000.0))

        assert [r.name for r in service.find_by_department("Sales")] == [
            "Alice",
            "Bob",
        ]
        assert service.find_by_department("Marketing") == []

    @staticmethod
    def test_salary_boundary_scenario(service):
        """An employee exactly at the threshold is only on the 'not greater' side."""
        service.admit(EmployeeRecord("Dan", "Ops", 50_000.0))
        service.admit(EmployeeRecord("Eve", "Ops", 70_000.0))

        at_or_below = service.find_by_salary(50_000.0, greater_than=False)
        above = service.find_by_salary(50_000.0, greater_than=True)
        assert [r.name for r in at_or_below] == ["Dan"]
        assert [r.name for r in above] == ["Eve"]

    @staticmethod
    def test_admit_then_find_by_id(service, employee_store):
        """What was admitted is what find_by_id returns."""
        record = EmployeeRecord("Fay", "Legal", 1.5)
        service.admit(record)
        (stored,) = employee_store.find_all()
        assert service.find_by_id(stored.id) == record
