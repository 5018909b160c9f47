"""Terminal message helpers for the Casecraft CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages go to stderr so converted text on stdout stays pipe-friendly.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  'Hello!!' produced an empty slug.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  '123': Input must not be numeric``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
