"""The one :class:`~sqlalchemy.MetaData` every ROSTER table attaches to.

Its naming convention gives constraints and indexes stable names, so the
names in the migration scripts match what autogenerate derives from
``schema.py``. For example, the unique department name constraint becomes
``uq_departments_name`` and the employee foreign key becomes
``fk_employees_department_id_departments``.
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
