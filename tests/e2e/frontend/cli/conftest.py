"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log records at every level
(and a library-style warning through the warnings module), plus fixtures to register
it, obtain a CliRunner, and run inside an isolated filesystem.
"""

import logging
import warnings

import click
import pytest
from click.testing import CliRunner

from littleutils.entrypoints.cli.main import littleutils
from littleutils.fileutils import reset_directories

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("littleutils.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@click.command()
def warn_demo():
    """Emit a single UserWarning, as a third-party library would."""
    warnings.warn("demo.bin uses a deprecated layout", UserWarning, stacklevel=1)


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_demos():
    """Register the demo commands for the duration of a test."""
    littleutils.add_command(log_demo, name="log-demo")
    littleutils.add_command(warn_demo, name="warn-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(littleutils, "log-demo")
        _remove_command_everywhere(littleutils, "warn-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    yield CliRunner()
    # the CLI turns on logging.captureWarnings; undo it so the next invocation
    # re-installs its hook over pytest's per-test warnings.showwarning
    logging.captureWarnings(False)


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem and reset cached directories."""
    reset_directories()
    with runner.isolated_filesystem():
        yield
    reset_directories()
