"""Configuration utilities for CASECRAFT.

This module centralizes small helpers and constants related to application configuration.
"""

import os

from casecraft.domain.errors import UnknownStyleError
from casecraft.domain.styles import CaseStyle

ENVVAR_PREFIX = "CASECRAFT"  # pragma: no mutate
STYLE_ENVVAR = f"{ENVVAR_PREFIX}_STYLE"  # pragma: no mutate
LOGGER_LEVEL_ENVVAR = f"{ENVVAR_PREFIX}_LOGGER_LEVEL"  # pragma: no mutate

DEFAULT_STYLE = CaseStyle.SLUG


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidStyleSettingError(ConfigError):
    """Raised when the CASECRAFT_STYLE environment variable names an unknown style."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{STYLE_ENVVAR}={value!r} is not a valid case style "
            f"(expected one of: {', '.join(CaseStyle.names())})."
        )
        self.value = value


def get_default_style() -> CaseStyle:
    """Get the default case style from the environment.

    Returns:
        The style named by `CASECRAFT_STYLE`, or `DEFAULT_STYLE` if unset/empty.

    Raises:
        InvalidStyleSettingError: If `CASECRAFT_STYLE` names an unknown style.
    """
    if not (value := os.environ.get(STYLE_ENVVAR)):
        return DEFAULT_STYLE
    try:
        return CaseStyle.parse(value)
    except UnknownStyleError as e:
        raise InvalidStyleSettingError(value) from e
