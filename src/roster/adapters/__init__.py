"""Adapters (infrastructure) for ROSTER.

Provide concrete implementations of the store interfaces (in-memory and
SQLAlchemy), the SQLAlchemy unit of work, and related wiring (engines,
metadata, migrations).

Dependency rule: may import `roster.domain` and `roster.interfaces`; those
packages must not import this one.
"""
