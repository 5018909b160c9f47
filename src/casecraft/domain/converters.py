"""Case converters: slug-case, camelCase and dot.case.

`to_slug` is total: it never raises and may return an empty string.
`to_camel_case` and `to_dot_case` share the validation and splitting rules of
`casecraft.domain.words` and propagate its errors unchanged.
"""

import logging
import re

from casecraft.domain.words import is_acronym, split_words

logger = logging.getLogger(__name__)

SLUG_CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")
SLUG_WHITESPACE_PATTERN = re.compile(r"\s+")
SLUG_INVALID_CHARS_PATTERN = re.compile(r"[^a-z0-9-]")
SLUG_HYPHEN_RUN_PATTERN = re.compile(r"-+")

DOT_DELIMITER = "."


def to_slug(text: str) -> str:
    """Convert *text* to a lowercase, hyphen-delimited slug.

    Steps, in order:
    1. split camelCase boundaries with a hyphen (``camelCase`` → ``camel-Case``)
    2. lowercase
    3. replace whitespace runs with a hyphen
    4. drop everything except ``a-z``, ``0-9`` and ``-``
    5. collapse hyphen runs
    6. strip leading/trailing hyphens

    Args:
        text: Any string.

    Returns:
        str: The slug; empty if nothing survives cleaning.

    Example:
        >>> to_slug("  Leading and trailing   ")
        'leading-and-trailing'
    """
    slug = SLUG_CAMEL_BOUNDARY_PATTERN.sub(r"\1-\2", text)
    slug = slug.lower()
    slug = SLUG_WHITESPACE_PATTERN.sub("-", slug)
    slug = SLUG_INVALID_CHARS_PATTERN.sub("", slug)
    slug = SLUG_HYPHEN_RUN_PATTERN.sub("-", slug)
    slug = slug.strip("-")
    logger.debug("Slugified %r -> %r", text, slug)
    return slug


def _camel_word(word: str, index: int) -> str:
    if is_acronym(word):
        word = word.lower()
    if index == 0:
        return word[:1].lower() + word[1:]
    return word[:1].upper() + word[1:]


def to_camel_case(text: str) -> str:
    """Convert *text* to camelCase.

    The first word starts lowercase, every following word starts uppercase,
    and acronyms (``ID``, ``HTTP2``) are lowercased before that rule applies.
    Other words keep their inner casing.

    Args:
        text: Non-empty, non-numeric string.

    Returns:
        str: The camelCase string.

    Raises:
        InvalidInputError: If *text* is not a string or is blank.
        NumericInputError: If *text* is a numeric literal.
        NoValidWordsError: If *text* has no letters or digits.

    Example:
        >>> to_camel_case("SCREEN_NAME")
        'screenName'
    """
    words = split_words(text)
    result = "".join(_camel_word(word, index) for index, word in enumerate(words))
    logger.debug("Camel-cased %r -> %r", text, result)
    return result


def to_dot_case(text: str) -> str:
    """Convert *text* to dot.case.

    Every word, acronym or not, is lowercased and words are joined by ``.``.

    Raises:
        InvalidInputError: If *text* is not a string or is blank.
        NumericInputError: If *text* is a numeric literal.
        NoValidWordsError: If *text* has no letters or digits.
    """
    words = split_words(text)
    result = DOT_DELIMITER.join(word.lower() for word in words)
    logger.debug("Dot-cased %r -> %r", text, result)
    return result
