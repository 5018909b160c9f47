"""CASECRAFT conversion commands.

Thin wrappers over `casecraft.domain` converters.

Behavior
- Every TEXT argument is converted independently and printed on its own line
  to **stdout**; notices and errors go to **stderr**.
- A failing argument does not stop the others. The command exits with status 1
  if any argument failed.

Examples
    $ casecraft slug "Hello World"
    hello-world
    $ casecraft camel user_id SCREEN_NAME
    userId
    screenName
    $ CASECRAFT_STYLE=dot casecraft convert "first name"
    first.name
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import click

from casecraft import config
from casecraft.domain.converters import to_camel_case, to_dot_case, to_slug
from casecraft.domain.errors import CaseConversionError, UnknownStyleError
from casecraft.domain.styles import STYLE_ALIASES, CaseStyle

from .helpers.messages import error, warn

logger = logging.getLogger(__name__)

SLUG_EXAMPLES = (
    "Hello World",
    "camelCaseString",
    "This is a Test!",
    "Special@#Characters---Here",
    "  Leading and trailing   ",
    "already-slugified-string",
    "multiple   spaces",
    "snake_case_example",
)

WORD_CASE_EXAMPLES = (
    "first name",
    "user_id",
    "SCREEN_NAME",
    "mobile-number",
)


def _run(texts: Iterable[str], style: CaseStyle) -> None:
    """Convert each text with *style*, echoing results and reporting failures."""
    ctx = click.get_current_context()
    failures = 0
    for text in texts:
        try:
            result = style.converter(text)
        except CaseConversionError as e:
            failures += 1
            logger.debug("Conversion of %r to %s failed", text, style.value, exc_info=e)
            error(f"{text!r}: {e}")
            continue
        if not result:
            warn(f"{text!r} produced an empty {style.value} result.")
        click.echo(result)

    if failures:
        logger.info("%d input(s) could not be converted", failures)
        ctx.exit(1)


def _resolve_style(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,
    value: str | None,
) -> CaseStyle:
    """Click callback turning --style (or CASECRAFT_STYLE) into a CaseStyle."""
    if value is None:
        try:
            return config.get_default_style()
        except config.InvalidStyleSettingError as e:
            raise click.BadParameter(str(e), param=param) from e
    try:
        return CaseStyle.parse(value)
    except UnknownStyleError as e:
        raise click.BadParameter(str(e), param=param) from e


texts_argument = click.argument("texts", metavar="TEXT...", nargs=-1, required=True)


@click.command()
@texts_argument
def slug(texts: tuple[str, ...]) -> None:
    """Convert TEXT to a lowercase, hyphen-delimited slug."""
    _run(texts, CaseStyle.SLUG)


@click.command()
@texts_argument
def camel(texts: tuple[str, ...]) -> None:
    """Convert TEXT to camelCase."""
    _run(texts, CaseStyle.CAMEL)


@click.command()
@texts_argument
def dot(texts: tuple[str, ...]) -> None:
    """Convert TEXT to dot.case."""
    _run(texts, CaseStyle.DOT)


@click.command()
@click.option(
    "--style",
    "-s",
    "style",
    callback=_resolve_style,
    help=(
        f"Target case style: {', '.join(CaseStyle.names())} "
        f"(aliases: {', '.join(STYLE_ALIASES)}). "
        f"Defaults to ${config.STYLE_ENVVAR}, then '{config.DEFAULT_STYLE.value}'."
    ),
    default=None,
)
@texts_argument
def convert(style: CaseStyle, texts: tuple[str, ...]) -> None:
    """Convert TEXT to the selected case style."""
    _run(texts, style)


def _print_examples(
    title: str, examples: Iterable[str], converter: Callable[[str], str]
) -> None:
    click.secho(title, bold=True)
    for example in examples:
        click.echo(f'"{example}" -> "{converter(example)}"')


@click.command()
def demo() -> None:
    """Print example conversions for every case style."""
    _print_examples("slug", SLUG_EXAMPLES, to_slug)
    _print_examples("camel", WORD_CASE_EXAMPLES, to_camel_case)
    _print_examples("dot", WORD_CASE_EXAMPLES, to_dot_case)


COMMANDS = (slug, camel, dot, convert, demo)
