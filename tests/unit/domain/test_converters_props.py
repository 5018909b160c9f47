"""Hypothesis property tests for the case converters.

Properties:

- **Slug idempotence**: slugifying a slug changes nothing.
- **Slug shape**: a slug is empty or lowercase alphanumeric runs joined by
  single hyphens.
- **camelCase shape**: valid input yields only ASCII letters/digits, starting
  lowercase when the first word starts with a letter.
- **dot.case shape**: valid input yields lowercase words joined by single dots,
  one per split word.
- **Closed failure set**: arbitrary text either converts or raises a
  `CaseConversionError`, never anything else.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from casecraft.domain.converters import to_camel_case, to_dot_case, to_slug
from casecraft.domain.errors import CaseConversionError
from casecraft.domain.words import split_words

pytestmark = [pytest.mark.property]

SLUG_SHAPE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
CAMEL_SHAPE = re.compile(r"[A-Za-z0-9]+")
DOT_SHAPE = re.compile(r"[a-z0-9]+(?:\.[a-z0-9]+)*")

# ============================================================================
#                               Strategies
# ============================================================================

words = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True)
separators = st.sampled_from([" ", "_", "-", "  ", " _-", "\t"])


@st.composite
def phrases(draw) -> str:
    """Draw words that start with a letter, joined by assorted separators."""
    parts = draw(st.lists(words, min_size=1, max_size=6))
    text = parts[0]
    for part in parts[1:]:
        text += draw(separators) + part
    return text


# ============================================================================
#                               Properties
# ============================================================================


@given(st.text())
def test_slug_is_idempotent(text):
    """to_slug(to_slug(x)) == to_slug(x)."""
    slug = to_slug(text)
    assert to_slug(slug) == slug


@given(st.text())
def test_slug_shape(text):
    """A slug is empty or matches the slug grammar."""
    slug = to_slug(text)
    assert slug == "" or SLUG_SHAPE.fullmatch(slug)


@given(phrases())
def test_camel_case_shape(text):
    """camelCase output has no separators and starts lowercase."""
    result = to_camel_case(text)
    assert CAMEL_SHAPE.fullmatch(result)
    assert result[0].islower()


@given(phrases())
def test_dot_case_shape(text):
    """dot.case output is lowercase with one dot between consecutive words."""
    result = to_dot_case(text)
    assert DOT_SHAPE.fullmatch(result)
    assert result.split(".") == [word.lower() for word in split_words(text)]


@given(st.text())
def test_failures_are_conversion_errors(text):
    """Arbitrary text converts or raises CaseConversionError, nothing else."""
    for converter in (to_camel_case, to_dot_case):
        try:
            converter(text)
        except CaseConversionError:
            pass
