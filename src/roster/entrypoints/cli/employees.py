"""ROSTER employee commands.

Thin wrappers over the bootstrapped application: ``add`` validates its input
and dispatches an `AdmitEmployee` command; the other commands call the query
facade and render the result. Queries with no match print an informational
line on stderr and exit 0.

Examples
    $ roster employees add "Ana" Eng --salary 90000
    $ roster employees by-salary --salary 50000 --not-greater-than
    $ roster employees show 1 --json
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from roster.entrypoints.errors import (
    parse_department_query,
    parse_record,
    parse_threshold,
)
from roster.service_layer.commands import AdmitEmployee

from .container import get_app
from .helpers import info, success
from .output import echo_json, json_option, render_employees, reports_errors

logger = logging.getLogger(__name__)

SAVED_MSG = "Employee details have been saved successfully."


@click.group(cls=clickx.ExtraGroup)
def employees() -> None:
    """Admit and look up employees."""


@employees.command(name="list")
@json_option
@click.pass_context
@reports_errors
def list_(ctx: click.Context, as_json: bool) -> None:
    """List all employees."""
    records = get_app(ctx).queries.list_employees()
    if not records and not as_json:
        info("No Employees found")
        return
    render_employees(records, as_json)


@employees.command()
@click.argument("name")
@click.argument("department")
@click.option(
    "--salary",
    type=float,
    default=0.0,
    show_default=True,
    help="Salary of the new employee (non-negative).",
)
@json_option
@click.pass_context
@reports_errors
def add(
    ctx: click.Context, name: str, department: str, salary: float, as_json: bool
) -> None:
    """Admit employee NAME into DEPARTMENT (created if it does not exist)."""
    record = parse_record(name, department, salary)
    logger.debug("Admitting %s", record)
    get_app(ctx).message_bus.handle(
        AdmitEmployee(
            name=record.name, department=record.department, salary=record.salary
        )
    )
    if as_json:
        echo_json({"message": SAVED_MSG, "employee": record.as_dict()})
    else:
        success(SAVED_MSG)


@employees.command(name="by-department")
@click.argument("department")
@json_option
@click.pass_context
@reports_errors
def by_department(ctx: click.Context, department: str, as_json: bool) -> None:
    """List the employees of DEPARTMENT."""
    department = parse_department_query(department)
    records = get_app(ctx).queries.employees_in_department(department)
    if not records and not as_json:
        info(f"No employees found in department: {department}")
        return
    render_employees(records, as_json)


@employees.command(name="by-salary")
@click.option(
    "--salary",
    type=float,
    default=0.0,
    show_default=True,
    help="Salary threshold.",
)
@click.option(
    "--greater-than/--not-greater-than",
    "greater_than",
    default=True,
    show_default=True,
    help="Earning strictly more than the threshold, or at most the threshold.",
)
@json_option
@click.pass_context
@reports_errors
def by_salary(
    ctx: click.Context, salary: float, greater_than: bool, as_json: bool
) -> None:
    """List employees above (or at/below) a salary threshold."""
    salary = parse_threshold(salary)
    records = get_app(ctx).queries.employees_by_salary(salary, greater_than)
    if not records and not as_json:
        direction = "more" if greater_than else "less"
        info(f"No employees found earning {direction} than: {salary}")
        return
    render_employees(records, as_json)


@employees.command()
@click.argument("employee_id", metavar="ID", type=int)
@json_option
@click.pass_context
@reports_errors
def show(ctx: click.Context, employee_id: int, as_json: bool) -> None:
    """Show the employee with the given ID."""
    record = get_app(ctx).queries.employee_by_id(employee_id)
    if as_json:
        echo_json(record.as_dict())
    else:
        render_employees([record], as_json=False)
