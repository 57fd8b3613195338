"""Fixtures for service-layer unit tests (in-memory stores only)."""

import pytest

from roster.adapters.stores.memory import (
    InMemoryDepartmentStore,
    InMemoryEmployeeStore,
    InMemoryStoreData,
)
from roster.service_layer.departments import DepartmentResolver
from roster.service_layer.employees import EmployeeAdmissionService

# pylint: disable=redefined-outer-name


@pytest.fixture
def store_data() -> InMemoryStoreData:
    """Fresh backing data shared by both in-memory stores."""
    return InMemoryStoreData()


@pytest.fixture
def department_store(store_data) -> InMemoryDepartmentStore:
    """In-memory department store."""
    return InMemoryDepartmentStore(store_data)


@pytest.fixture
def employee_store(store_data) -> InMemoryEmployeeStore:
    """In-memory employee store over the same data as `department_store`."""
    return InMemoryEmployeeStore(store_data)


@pytest.fixture
def resolver(department_store) -> DepartmentResolver:
    """Department resolver over the in-memory store."""
    return DepartmentResolver(department_store)


@pytest.fixture
def service(employee_store, resolver) -> EmployeeAdmissionService:
    """Admission service over the in-memory stores."""
    return EmployeeAdmissionService(employee_store, resolver)
