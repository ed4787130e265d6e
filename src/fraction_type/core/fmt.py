"""
Formatting helpers: canonical text for Fraction values.

The canonical form is the parser's round-trip counterpart:
  Fraction(MINUS, 3, 4) -> '-3/4'
  Fraction(PLUS, 3, 4)  -> '3/4'
  Fraction(PLUS, 2, 1)  -> '2'
Values are already reduced, so formatting never needs to divide.
"""

from typing import Tuple

from .constants import MINUS, SLASH
from .exc import FractionDomainError
from .value import Fraction, Sign


def format_fraction(value: Fraction) -> str:
    """Render `value` as 'N', '-N', 'N/D' or '-N/D'."""
    if not isinstance(value, Fraction):
        raise FractionDomainError(f"format_fraction(): expected Fraction, got {type(value).__name__}")
    prefix = MINUS if value.sign is Sign.MINUS else ""
    if value.denominator == 1:
        return f"{prefix}{value.numerator}"
    return f"{prefix}{value.numerator}{SLASH}{value.denominator}"


def fmt_parts(value: Fraction) -> Tuple[str, int, int]:
    """Return (sign_char, numerator, denominator) for display/logging only."""
    if not isinstance(value, Fraction):
        raise FractionDomainError(f"fmt_parts(): expected Fraction, got {type(value).__name__}")
    return ("-" if value.is_negative() else "+", value.numerator, value.denominator)


__all__ = [
    "format_fraction",
    "fmt_parts",
]
