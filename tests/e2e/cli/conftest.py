"""Fixtures for end-to-end CLI logging tests.

Provides a test-only `log-demo` Click command that emits log messages at every
level, plus a fixture that registers it on the top-level `casecraft` group.
"""

import logging

import click
import pytest

from casecraft.entrypoints.cli.main import casecraft


@click.command()
def log_demo():
    """Emit representative log messages on a casecraft and a third-party logger."""
    logger = logging.getLogger("casecraft.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    casecraft.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(casecraft, "log-demo")
