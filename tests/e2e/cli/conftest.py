"""Fixtures for end-to-end CLI tests.

Provides a CliRunner, an environment pointing ROSTER at a migrated SQLite
file, and a test-only `log-demo` command for logging tests.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from roster.entrypoints.cli.main import roster

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a roster logger and a third-party logger."""
    logger = logging.getLogger("roster.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo the root-logger configuration each CLI invocation installs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the `roster` group for the duration of a test."""
    roster.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(roster, "log-demo")


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Flight-recorder file inside the test's temp dir."""
    return tmp_path / "latest.log"


@pytest.fixture
def runner(log_path: Path) -> CliRunner:
    """CliRunner whose flight recorder writes under tmp_path."""
    return CliRunner(env={"ROSTER_LOG_PATH": str(log_path)})


@pytest.fixture
def db_env(sqlite_url_file: str) -> dict[str, str]:
    """Environment pointing ROSTER at a fresh, migrated SQLite file."""
    return {"ROSTER_DB_URL": sqlite_url_file}


@pytest.fixture
def invoke(runner, db_env):
    """Invoke `roster` with ``args`` against the test database."""

    def _invoke(*args: str, **kwargs):
        return runner.invoke(roster, list(args), env=db_env, **kwargs)

    return _invoke
