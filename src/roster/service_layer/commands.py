"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AdmitEmployee(Command):
    """Command to admit a new employee, creating the department if needed."""

    name: str
    department: str
    salary: float
