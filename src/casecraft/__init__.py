"""CASECRAFT

String case-conversion helpers: slug-case, camelCase and dot.case.
Conversions are pure functions; invalid input is rejected with a typed
error before any transformation work begins.
"""

from casecraft.domain.converters import to_camel_case, to_dot_case, to_slug
from casecraft.domain.errors import (
    CaseConversionError,
    InvalidInputError,
    NoValidWordsError,
    NumericInputError,
    UnknownStyleError,
)
from casecraft.domain.styles import CaseStyle, convert

__all__ = [
    "__version__",
    "CaseConversionError",
    "CaseStyle",
    "InvalidInputError",
    "NoValidWordsError",
    "NumericInputError",
    "UnknownStyleError",
    "convert",
    "to_camel_case",
    "to_dot_case",
    "to_slug",
]
__version__ = "0.1.0"
