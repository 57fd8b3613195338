"""ROSTER DB CLI - forward-only Alembic wrappers.

``roster db`` manages the schema of the database named by ``ROSTER_DB_URL``.
Only forward operations are offered; ``downgrade`` and ``stamp`` are left to
Alembic itself.

Human-oriented notices go to stderr and Alembic output to stdout. ``upgrade``
asks for confirmation unless ``--force`` or ``--sql`` is given.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from roster import config
from roster.adapters.db.engine import make_engine

from .container import MISSING_DB_URL_MSG
from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

INVALID_URL_FORMAT_MSG = (
    f"The value of {config.DB_URL_ENVVAR} is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    f"{config.DB_URL_ENVVAR} is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the roster schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'roster db upgrade' to update the schema."

verbose_option = click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show Alembic's verbose output."
)


class SchemaStatus(Enum):
    """Where the database schema stands relative to the packaged migrations."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"

    @classmethod
    def compare(cls, current: str | None, head: str | None) -> SchemaStatus:
        """Classify a database at revision ``current`` against ``head``."""
        if current is None:
            return cls.UNINITIALIZED
        if current == head:
            return cls.UP_TO_DATE
        return cls.OUT_OF_DATE


def _reachable_url() -> str:
    """Return ``ROSTER_DB_URL`` after checking that the database answers."""
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        with make_engine(url).connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


def _current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _head_revision(cfg: Config) -> str | None:
    heads_ = ScriptDirectory.from_config(cfg).get_heads()
    return heads_[0] if heads_ else None


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Show the revision the database is at."""
    cfg = config.build_alembic_config(db_url=_reachable_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Show the head revision(s) shipped with ROSTER."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Mark the revision the database is at (needs a reachable database).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show the revision history."""
    url = _reachable_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _reachable_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database reachability and schema status."""
    try:
        url = _reachable_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        raise click.exceptions.Exit(1) from e

    engine = make_engine(url)
    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")

    rev = _current_revision(engine)
    schema = SchemaStatus.compare(rev, _head_revision(config.build_alembic_config(url)))
    click.echo(f"Schema  : {rev} ({schema.value})" if rev else f"Schema  : {schema.value}")
    if schema is not SchemaStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
