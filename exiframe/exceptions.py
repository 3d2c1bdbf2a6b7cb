"""Custom exceptions for ExiFrame."""


class ExiFrameError(Exception):
    """Base exception for ExiFrame errors."""
    pass


class FractionConversionError(ExiFrameError, ValueError):
    """Raised when a decimal cannot be approximated as a fraction.

    Exposure times are always finite and non-negative, so this signals a
    caller bug rather than bad image data.

    Attributes:
        number: The rejected input value
    """

    def __init__(self, number: float):
        """Initialize fraction conversion error.

        Args:
            number: The rejected input value
        """
        super().__init__(number)
        self.number = number

    def __str__(self) -> str:
        """Return string representation of error."""
        return f"Cannot convert {self.number!r} to a fraction (expected a finite, non-negative number)"


class RenderError(ExiFrameError):
    """Raised when a framed image cannot be composed or encoded."""
    pass
