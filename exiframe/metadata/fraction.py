"""Decimal to fraction conversion for shutter speed display."""

import math
from dataclasses import dataclass

from exiframe.exceptions import FractionConversionError

# Maximum error allowed, scaled by the square of the current denominator
PRECISION = 1.0e-6


@dataclass(frozen=True)
class Fraction:
    """A numerator/denominator pair, as shown on a shutter speed dial.

    Unlike ``fractions.Fraction`` this keeps the exact pair produced by the
    continued-fraction approximation, so ``Fraction(1, 200)`` always prints as
    ``1/200``.

    Attributes:
        numerator: Fraction numerator
        denominator: Fraction denominator (at least 1 for converted values)
    """
    numerator: int
    denominator: int

    @property
    def fractional_expression(self) -> str:
        """Return the fraction as ``"<numerator>/<denominator>"``."""
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.fractional_expression

    def __float__(self) -> float:
        return self.numerator / self.denominator

    @classmethod
    def from_decimal(cls, number: float) -> "Fraction":
        """Approximate a decimal with the simplest fraction within precision.

        Walks the continued-fraction expansion of ``number``, keeping the
        previous and current convergents, until the remainder is within
        ``PRECISION * k**2`` where ``k`` is the current denominator.

        Args:
            number: Finite, non-negative decimal (e.g. an exposure time)

        Returns:
            Fraction approximating ``number``

        Raises:
            TypeError: If number is not a real number
            FractionConversionError: If number is NaN, infinite or negative

        Examples:
            >>> Fraction.from_decimal(0.005)
            Fraction(numerator=1, denominator=200)
            >>> str(Fraction.from_decimal(2.5))
            '5/2'
        """
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise TypeError(
                f"Expected a real number, got {type(number).__name__}"
            )
        if not math.isfinite(number) or number < 0:
            raise FractionConversionError(number)

        x = float(number)
        a = math.floor(x)
        h1, k1, h, k = 1, 0, a, 1

        while x - a > PRECISION * k * k:
            x = 1.0 / (x - a)
            a = math.floor(x)
            h1, k1, h, k = h, k, h1 + a * h, k1 + a * k

        return cls(numerator=h, denominator=k)
