"""Rendering of command results and errors.

Human-readable output is a Rich table on stdout. With ``--json`` the same data
is printed as JSON, and errors become ``{"error": {"kind", "message",
"status"}}`` on stderr.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from roster.domain.errors import DomainError
from roster.entrypoints.errors import ValidationError, describe_error
from roster.interfaces.errors import StorageError

from .helpers import error

if TYPE_CHECKING:
    from roster.domain.model import Department
    from roster.service_layer.records import EmployeeRecord

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print machine-readable JSON."
)


def echo_json(payload: Any, err: bool = False) -> None:
    """Print ``payload`` as indented JSON."""
    click.echo(json.dumps(payload, indent=2), err=err)


def format_salary(salary: float) -> str:
    """Format a salary with thousands separators and two decimals."""
    return f"{salary:,.2f}"


def render_employees(records: Sequence[EmployeeRecord], as_json: bool) -> None:
    """Print employee records as a table or JSON list."""
    if as_json:
        echo_json([record.as_dict() for record in records])
        return

    table = Table("Name", "Department")
    table.add_column("Salary", justify="right")
    for record in records:
        # plain Text, not markup
        table.add_row(
            Text(record.name), Text(record.department), format_salary(record.salary)
        )
    Console().print(table)


def render_departments(departments: Sequence[Department], as_json: bool) -> None:
    """Print departments as a table or JSON list."""
    if as_json:
        echo_json([{"id": d.id, "name": d.name} for d in departments])
        return

    table = Table("ID", "Name")
    for department in departments:
        table.add_row(str(department.id), Text(department.name))
    Console().print(table)


def reports_errors(func: F) -> F:
    """Turn application errors raised by a command into a report and exit code.

    Domain, validation, and storage errors are printed (as text, or as JSON
    when the command was invoked with ``--json``) and the process exits with
    the code of their error kind. Anything else propagates.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (DomainError, ValidationError, StorageError) as exc:
            report = describe_error(exc)
            logger.debug("Command failed: %s", report, exc_info=True)
            if kwargs.get("as_json"):
                echo_json({"error": report.as_dict()}, err=True)
            else:
                error(report.message)
            raise click.exceptions.Exit(report.kind.exit_code) from exc

    return wrapper  # type: ignore[return-value]
