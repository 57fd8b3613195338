"""ROSTER CLI entry point.

Defines the top-level ``roster`` command (via Click-Extra), configures logging
for the run, and registers the command groups.

Groups
- ``roster employees`` - admit employees and query them.
- ``roster departments`` - list the departments created by admissions.
- ``roster db`` - forward-only schema management (upgrade/current/heads/history/status).

Examples
    $ roster --version
    $ roster db upgrade --force
    $ roster -v employees add "Ana" Eng --salary 90000
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roster import __version__
from roster.logging import config_console_handler, config_flight_recorder, log_startup

from .db import db as db_group
from .departments import departments as departments_group
from .employees import employees as employees_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("roster", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """ROSTER command-line interface.

    ROSTER keeps a small register of employees grouped into departments.
    Admitting an employee creates their department on first use; the same
    name cannot be admitted twice into one department.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Environment:', fg='blue', bold=True, underline=True)}",
        "  ROSTER_DB_URL   SQLAlchemy URL of the roster database",
        "  ROSTER_LOG_PATH flight recorder file, default "
        + hyperlink(DEFAULT_LOG_PATH.as_uri()),
    ]
)


def _effective_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING shifted one level per -v/-q, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Lower the WARNING console threshold by one level per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Raise the WARNING console threshold by one level per repetition.",
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    default=False,
    help="Show DEBUG output with timestamps, logger names and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ROSTER_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="ROSTER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    default=True,
    show_envvar=True,
    help=(
        "Keep the last DEBUG-level log records in memory and write them to "
        "--log-path when a WARNING or ERROR occurs (or on exit with --force-flush)."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    default=False,
    show_default=True,
    show_envvar=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="ROSTER_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Set the minimum level of a logger (NAME=LEVEL), for both console and "
        "flight recorder. Repeatable, e.g. -L sqlalchemy.engine=INFO. "
        "sqlalchemy and alembic default to WARNING."
    ),
)
@clickx.pass_context
def roster(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROSTER command-line interface."""

    level = _effective_level(verbose_count, quiet_count)

    # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


roster.add_command(employees_group)
roster.add_command(departments_group)
roster.add_command(db_group)
