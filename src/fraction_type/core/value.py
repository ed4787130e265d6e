"""
Fraction value: a signed rational with unsigned integer components.

- Sign is held in `Sign`, never in the components; numerator and denominator are magnitudes.
- Components are bounded by MAX_COMPONENT (unsigned 64-bit) and checked at construction.
- Values are reduced to lowest terms on construction, so structural equality is
  rational equality and the dataclass hash is consistent with it.
- Zero is canonicalised to (PLUS, 0, 1); there is no negative zero.
"""

from __future__ import annotations

import fractions
import math
from dataclasses import dataclass
from enum import Enum

from .constants import MAX_COMPONENT
from .exc import FractionDomainError, NumericRangeError, ZeroDenominatorError


class Sign(Enum):
    """Sign of a fraction value; the enum value is the multiplier."""

    PLUS = 1
    MINUS = -1

    def flip(self) -> "Sign":
        return Sign.MINUS if self is Sign.PLUS else Sign.PLUS


def _check_component(name: str, v: int) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{name} must be int, got {type(v).__name__}")
    if v < 0:
        raise FractionDomainError(f"{name} must be >= 0 (sign is carried separately), got {v}")
    if v > MAX_COMPONENT:
        raise NumericRangeError(f"{name} {v} exceeds maximum component {MAX_COMPONENT}")


@dataclass(frozen=True)
class Fraction:
    """Immutable signed fraction kept in lowest terms."""

    sign: Sign
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        if not isinstance(self.sign, Sign):
            raise TypeError(f"sign must be Sign, got {type(self.sign).__name__}")
        _check_component("numerator", self.numerator)
        _check_component("denominator", self.denominator)
        if self.denominator == 0:
            raise ZeroDenominatorError("denominator must be non-zero")

        n, d = self.numerator, self.denominator
        if n == 0:
            object.__setattr__(self, "sign", Sign.PLUS)
            object.__setattr__(self, "denominator", 1)
            return
        g = math.gcd(n, d)
        if g != 1:
            object.__setattr__(self, "numerator", n // g)
            object.__setattr__(self, "denominator", d // g)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Fraction":
        return Fraction(Sign.PLUS, 0, 1)

    @classmethod
    def from_int(cls, v: int) -> "Fraction":
        """Build n/1 from a signed Python int."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"from_int expects int, got {type(v).__name__}")
        return cls(Sign.MINUS if v < 0 else Sign.PLUS, abs(v), 1)

    @classmethod
    def from_fraction(cls, f: fractions.Fraction) -> "Fraction":
        """Bridge from the stdlib rational; components must still fit MAX_COMPONENT."""
        if not isinstance(f, fractions.Fraction):
            raise TypeError(f"from_fraction expects fractions.Fraction, got {type(f).__name__}")
        return cls(Sign.MINUS if f < 0 else Sign.PLUS, abs(f.numerator), f.denominator)

    # ------------- conversions -------------

    def as_fraction(self) -> fractions.Fraction:
        """Return the value as an exact stdlib Fraction."""
        return fractions.Fraction(self.sign.value * self.numerator, self.denominator)

    def __str__(self) -> str:
        from .fmt import format_fraction

        return format_fraction(self)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_negative(self) -> bool:
        return self.sign is Sign.MINUS

    def is_integer(self) -> bool:
        return self.denominator == 1

    # ------------- unary -------------

    def __neg__(self) -> "Fraction":
        return Fraction(self.sign.flip(), self.numerator, self.denominator)

    def __abs__(self) -> "Fraction":
        if self.sign is Sign.PLUS:
            return self
        return Fraction(Sign.PLUS, self.numerator, self.denominator)

    # ------------- comparisons (integer domain) -------------

    def _cmp_core(self, other: "Fraction") -> int:
        # Cross-multiply signed numerators; denominators are positive.
        a = self.sign.value * self.numerator * other.denominator
        b = other.sign.value * other.numerator * self.denominator
        return (a > b) - (a < b)

    def __lt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._cmp_core(other) >= 0


__all__ = [
    "Sign",
    "Fraction",
]
