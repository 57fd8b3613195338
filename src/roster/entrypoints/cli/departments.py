"""ROSTER department commands."""

from __future__ import annotations

import click
import click_extra as clickx

from .container import get_app
from .helpers import info
from .output import json_option, render_departments, reports_errors


@click.group(cls=clickx.ExtraGroup)
def departments() -> None:
    """Inspect departments (created automatically on admission)."""


@departments.command(name="list")
@json_option
@click.pass_context
@reports_errors
def list_(ctx: click.Context, as_json: bool) -> None:
    """List all departments."""
    found = get_app(ctx).queries.list_departments()
    if not found and not as_json:
        info("No departments found")
        return
    render_departments(found, as_json)
