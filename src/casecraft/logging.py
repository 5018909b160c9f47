"""Logging helpers used by the Casecraft CLI and library.

This module provides utilities for configuring console logging with Rich and
a filter that annotates third-party log records with a short prefix used by
console formatting. Library modules only emit DEBUG records through
``logging.getLogger(__name__)``; handlers are attached by the CLI.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "casecraft"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[click_extra]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and allow it through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True (record is not filtered out).
        """
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr so converted text on stdout stays clean. In
    debug mode the handler is set to DEBUG and includes timestamps, logger
    names and source file/line information; otherwise a short third-party
    prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # keep consistent with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a human-friendly startup line and detailed diagnostics.

    Emits an informational one-line summary with the application version and
    console level. Additional DEBUG-level diagnostics cover Python and
    platform versions, process id, current working directory, Click/Rich
    versions, the active handler types and any per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "CASECRAFT %s - console=%s",
        app_version,
        logging.getLevelName(level),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", _distribution_version("click"))
    logger.debug("Rich: %s", _distribution_version("rich"))
    logger.debug(
        "Handlers: %s",
        [type(h).__name__ for h in handlers],
    )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
