"""Word splitting shared by the camelCase and dot.case converters.

Input is validated fail-fast before any cleaning happens:

1. Non-strings and empty/whitespace-only strings are rejected.
2. Numeric literals (``"123"``, ``"-1.5e3"``) are rejected.

The remaining text is split on camelCase boundaries and on runs of
underscores, hyphens and whitespace. Everything that is not an ASCII letter,
digit or separator is dropped. Tokens keep their original casing; acronym
handling is left to the converters (see `is_acronym`).
"""

import logging
import re

from casecraft.domain.errors import (
    InvalidInputError,
    NoValidWordsError,
    NumericInputError,
)

logger = logging.getLogger(__name__)

# optional sign, then "1", "1.", "1.5" or ".5", then an optional exponent
NUMERIC_LITERAL_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")
SEPARATOR_RUN_PATTERN = re.compile(r"[_\-\s]+")
NON_WORD_PATTERN = re.compile(r"[^a-zA-Z0-9 ]+")
ACRONYM_PATTERN = re.compile(r"[A-Z0-9]+")


def is_numeric_literal(text: str) -> bool:
    """Return True if *text* (ignoring surrounding whitespace) is a number.

    Args:
        text: Candidate string.

    Returns:
        bool: True for literals such as ``"42"``, ``"+3.14"``, ``".5"`` or
        ``"1e-9"``; False for anything else, including ``"Infinity"`` and
        hexadecimal notation.
    """
    return NUMERIC_LITERAL_PATTERN.fullmatch(text.strip()) is not None


def is_acronym(token: str) -> bool:
    """Return True if *token* is made only of uppercase ASCII letters and digits."""
    return ACRONYM_PATTERN.fullmatch(token) is not None


def validate_input(value: object) -> str:
    """Check that *value* is convertible and return it as a string.

    Args:
        value: Raw caller input.

    Returns:
        str: The unchanged input.

    Raises:
        InvalidInputError: If *value* is not a string or is blank.
        NumericInputError: If *value* is a numeric literal.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(value)
    if is_numeric_literal(value):
        raise NumericInputError(value)
    return value


def split_words(value: object) -> list[str]:
    """Split *value* into an ordered list of word tokens.

    Args:
        value: Text to split; validated with `validate_input` first.

    Returns:
        list[str]: Non-empty tokens in input order, original casing preserved.

    Raises:
        InvalidInputError: If *value* is not a string or is blank.
        NumericInputError: If *value* is a numeric literal.
        NoValidWordsError: If no tokens survive cleaning.

    Example:
        >>> split_words("userID_value")
        ['user', 'ID', 'value']
    """
    text = validate_input(value)

    cleaned = CAMEL_BOUNDARY_PATTERN.sub(r"\1 \2", text)
    cleaned = SEPARATOR_RUN_PATTERN.sub(" ", cleaned)
    cleaned = NON_WORD_PATTERN.sub("", cleaned)

    words = [word for word in cleaned.strip().split(" ") if word]
    if not words:
        raise NoValidWordsError(text)

    logger.debug("Split %r into %s", text, words)
    return words
