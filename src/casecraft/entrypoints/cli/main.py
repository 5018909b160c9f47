"""Casecraft CLI entry point.

Defines the top-level ``casecraft`` command (via Click-Extra) and registers
the conversion subcommands.

Currently available commands
- ``casecraft slug`` / ``camel`` / ``dot``: convert text to one style.
- ``casecraft convert --style STYLE``: convert text to a selectable style.
- ``casecraft demo``: print example conversions.

Notes
- The CLI version is sourced from `casecraft.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logging goes to stderr through Rich; stdout only carries converted text.

Examples
    $ casecraft --version
    $ casecraft -v slug "Hello World"
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from casecraft import __version__
from casecraft.config import LOGGER_LEVEL_ENVVAR
from casecraft.logging import config_console_handler, log_startup

from .convert_cmds import COMMANDS
from .helpers.log_level_parser import DEFAULT_LIB_LEVELS, parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """CASECRAFT command-line interface.

    Convert free-form text such as "first name", "SCREEN_NAME" or
    "camelCaseString" to slug-case, camelCase or dot.case.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        f"(e.g. -L casecraft.domain=DEBUG) or via {LOGGER_LEVEL_ENVVAR} "
        "(comma/space list)."
    ),
    default=tuple(
        f"{name}={logging.getLevelName(lvl)}"
        for name, lvl in DEFAULT_LIB_LEVELS.items()
    ),
    envvar=LOGGER_LEVEL_ENVVAR,
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def casecraft(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """CASECRAFT command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    casecraft.add_command(command)
