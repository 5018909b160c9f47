"""Domain-layer error definitions."""

# ============================================================================
#                           General conversion errors
# ============================================================================


class CaseConversionError(ValueError):
    """Base class for case-conversion errors."""


class InvalidInputError(CaseConversionError):
    """Raised when the input is not a string, or is empty/whitespace-only."""

    def __init__(self, value: object = None) -> None:
        super().__init__("Input must be a non-empty string")
        self.value = value


class NumericInputError(CaseConversionError):
    """Raised when the input is a numeric literal such as ``"12.5"``."""

    def __init__(self, value: str) -> None:
        super().__init__("Input must not be numeric")
        self.value = value


class NoValidWordsError(CaseConversionError):
    """Raised when cleaning strips every word out of the input."""

    def __init__(self, value: str) -> None:
        super().__init__("Input must contain at least one valid word")
        self.value = value


# ============================================================================
#                           Style registry errors
# ============================================================================


class UnknownStyleError(CaseConversionError):
    """Raised when a case style name does not match any known style."""

    def __init__(self, name: str, choices: list[str] | None = None) -> None:
        message = f"Unknown case style '{name}'."
        if choices:
            message += f" Expected one of: {', '.join(choices)}."
        super().__init__(message)
        self.name = name
        self.choices = choices or []
