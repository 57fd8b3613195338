"""Departments and employees.

Conventions:
  - `id` is assigned by the store on first save; `None` means the value has
    not been persisted yet (transient).
  - An employee holds a one-way reference to its department. There is no
    collection of employees on a department; "employees in department X" is
    a store query.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Department:
    """A named group of employees. Names are logically unique."""

    name: str
    id: int | None = None

    @property
    def is_transient(self) -> bool:
        """True until a store has assigned an id."""
        return self.id is None


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee admitted into exactly one department."""

    name: str
    salary: float
    department: Department
    id: int | None = None

    @property
    def department_name(self) -> str:
        """Name of the owning department."""
        return self.department.name
