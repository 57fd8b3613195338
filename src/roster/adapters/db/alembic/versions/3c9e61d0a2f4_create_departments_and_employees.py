"""create departments and employees tables

Revision ID: 3c9e61d0a2f4
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from roster.adapters.db.sa_types import BIGINT_PK

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c9e61d0a2f4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "departments",
        sa.Column(
            "id",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Store-assigned department id.",
        ),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Department name (exact-match lookup key).",
        ),
        sa.CheckConstraint(
            "length(name) > 0", name=op.f("ck_departments_name_not_empty")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_departments")),
        sa.UniqueConstraint("name", name=op.f("uq_departments_name")),
        comment="Departments. Created on first use by employee admission.",
    )

    op.create_table(
        "employees",
        sa.Column(
            "id",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Store-assigned employee id.",
        ),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Employee name; unique within a department.",
        ),
        sa.Column(
            "salary",
            sa.Float(precision=53),
            nullable=False,
            comment="Non-negative salary.",
        ),
        sa.Column(
            "department_id",
            BIGINT_PK,
            nullable=False,
            comment="Owning department.",
        ),
        sa.CheckConstraint(
            "salary >= 0", name=op.f("ck_employees_salary_not_negative")
        ),
        sa.CheckConstraint(
            "length(name) > 0", name=op.f("ck_employees_name_not_empty")
        ),
        sa.ForeignKeyConstraint(
            ["department_id"],
            ["departments.id"],
            name=op.f("fk_employees_department_id_departments"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_employees")),
        sa.UniqueConstraint(
            "department_id", "name", name=op.f("uq_employees_department_id_name")
        ),
        comment="Employees. One row per admitted employee.",
    )
    op.create_index(
        op.f("ix_employees_employees_salary"),
        "employees",
        ["salary"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_employees_employees_salary"), table_name="employees")
    op.drop_table("employees")
    op.drop_table("departments")
