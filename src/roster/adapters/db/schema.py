"""Relational schema for departments and employees.

Constraints (enforced here):

| Constraint                          | Purpose                                   |
|-------------------------------------|-------------------------------------------|
| UNIQUE(departments.name)            | one row per department name               |
| UNIQUE(employees.department_id, name)| no duplicate employee within a department |
| FK employees.department_id          | every employee has a persisted department |
| CHECK(salary >= 0)                  | salaries are non-negative                 |
| CHECK(length(name) > 0)             | names are non-empty                       |

The unique constraints are what make admission safe under concurrent callers;
the service-layer duplicate check alone is check-then-act.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Identity,
    Index,
    String,
    Table,
    UniqueConstraint,
)

from .metadata import metadata
from .sa_types import BIGINT_PK

__all__ = ["departments", "employees"]

NAME_LENGTH = 255  # pragma: no mutate

departments = Table(
    "departments",
    metadata,
    Column(
        "id",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Store-assigned department id.",
    ),
    Column(
        "name",
        String(NAME_LENGTH),
        nullable=False,
        unique=True,
        comment="Department name (exact-match lookup key).",
    ),
    CheckConstraint("length(name) > 0", name="name_not_empty"),
    comment="Departments. Created on first use by employee admission.",
)

employees = Table(
    "employees",
    metadata,
    Column(
        "id",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Store-assigned employee id.",
    ),
    Column(
        "name",
        String(NAME_LENGTH),
        nullable=False,
        comment="Employee name; unique within a department.",
    ),
    Column(
        "salary",
        Float(precision=53),
        nullable=False,
        comment="Non-negative salary.",
    ),
    Column(
        "department_id",
        BIGINT_PK,
        ForeignKey("departments.id"),
        nullable=False,
        comment="Owning department.",
    ),
    UniqueConstraint("department_id", "name"),
    CheckConstraint("salary >= 0", name="salary_not_negative"),
    CheckConstraint("length(name) > 0", name="name_not_empty"),
    Index(None, "salary"),
    comment="Employees. One row per admitted employee.",
)
