"""Case style registry.

Maps each supported `CaseStyle` to its converter so callers (and the CLI) can
pick a conversion by name.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from casecraft.domain.converters import to_camel_case, to_dot_case, to_slug
from casecraft.domain.errors import UnknownStyleError

STYLE_ALIASES = {
    "kebab": "slug",
    "camelcase": "camel",
    "dotcase": "dot",
}


class CaseStyle(Enum):
    """Enumeration of supported case styles.

    Styles:
    - SLUG: lowercase words joined by hyphens (``hello-world``).
    - CAMEL: camelCase (``helloWorld``).
    - DOT: lowercase words joined by dots (``hello.world``).
    """

    SLUG = "slug"
    CAMEL = "camel"
    DOT = "dot"

    @classmethod
    def parse(cls, name: str | CaseStyle) -> CaseStyle:
        """Resolve a style from its value or an alias, case-insensitively.

        Args:
            name: A `CaseStyle` (returned unchanged) or a name such as
                ``"Slug"``, ``"kebab"`` or ``"camelCase"``.

        Returns:
            CaseStyle: The matching style.

        Raises:
            UnknownStyleError: If *name* matches no style or alias.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = STYLE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as e:
            raise UnknownStyleError(str(name), cls.names()) from e

    @classmethod
    def names(cls) -> list[str]:
        """Return the canonical style names."""
        return [style.value for style in cls]

    @property
    def converter(self) -> Callable[[str], str]:
        """Return the conversion function for this style."""
        return CONVERTERS[self]


CONVERTERS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.SLUG: to_slug,
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.DOT: to_dot_case,
}


def convert(text: str, style: str | CaseStyle) -> str:
    """Convert *text* using the converter registered for *style*.

    Args:
        text: Text to convert.
        style: A `CaseStyle` or a name accepted by `CaseStyle.parse`.

    Returns:
        str: The converted text.

    Raises:
        UnknownStyleError: If *style* is not recognized.
        CaseConversionError: Any error raised by the selected converter.
    """
    return CaseStyle.parse(style).converter(text)
