"""Console and flight-recorder logging for the ROSTER CLI.

The console handler is a Rich handler on stderr, so it never mixes with
table or JSON output on stdout. The flight recorder is a
:class:`~logging.handlers.MemoryHandler` that keeps recent DEBUG records in
memory and writes them to a file only when a WARNING or worse comes in.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from roster.config import DB_URL_ENVVAR

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "roster"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[sqlalchemy]``, ``[alembic]`` and so on.

    ROSTER's own records get an empty prefix. No record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Debug mode lowers it to DEBUG.
        debug_mode: Show timestamps, logger names and source paths.
        color: False turns colors off, following ``--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to ``path``.

    The file is truncated when the handler is created, so it only ever holds
    records from the current run.

    Args:
        path: File the buffered records are flushed to.
        capacity: Records kept in memory before a forced flush.
        flush_level: Records at this level or above flush the buffer.
        flush_on_close: Also flush whatever is buffered at shutdown.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def describe_database() -> str:
    """Describe the configured database for diagnostics, password hidden."""
    raw = os.environ.get(DB_URL_ENVVAR)
    if not raw:
        return "<unset>"
    try:
        return make_url(raw).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid URL>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log the INFO startup line, then one DEBUG line per diagnostic."""
    logger.info(
        "ROSTER %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    diagnostics: dict[str, object] = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "SQLAlchemy": sqlalchemy.__version__,
        "Alembic": alembic.__version__,
        "Database": describe_database(),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    if flight_recorder:
        diagnostics["Flight recorder"] = (
            f"path={log_path or '<none>'}, capacity={flight_capacity}, "
            f"flush_on_close={force_flush_fr}"
        )
    diagnostics["Per-logger overrides"] = {
        name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()
    } or "<none>"

    for key, value in diagnostics.items():
        logger.debug("%s: %s", key, value)
