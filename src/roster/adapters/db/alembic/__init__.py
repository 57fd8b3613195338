"""Packaged Alembic migration environment for ROSTER."""
