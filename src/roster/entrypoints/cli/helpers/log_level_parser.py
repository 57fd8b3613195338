"""Parser for the repeatable ``-L NAME=LEVEL`` CLI option."""

import logging
import re

import click

# SQLAlchemy logs every statement at INFO; keep it quiet unless asked.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten one string or a sequence of strings into NAME=LEVEL items.

    Items may be separated by commas and/or whitespace, as happens when the
    option comes from ``ROSTER_LOGGER_LEVELS``.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into ``{logger_name: level}``.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = level
    return levels
