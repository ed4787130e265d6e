"""
Core exception types for fraction_type.core.

These are dependency-free and may be imported by all core modules.
"""

from typing import Optional

__all__ = [
    "FractionError",
    "FractionSyntaxError",
    "NumericRangeError",
    "ZeroDenominatorError",
    "FractionDomainError",
]


class FractionError(ValueError):
    """Base class for every failure reported by the core.

    Attributes
    ----------
    text : str | None
        The input being parsed, when the failure came from the parser.
    position : int | None
        Offset into `text` where the failure was detected.
    """

    def __init__(self, message: str, *, text: Optional[str] = None, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.text = text
        self.position = position


class FractionSyntaxError(FractionError):
    """Raised when input matches neither the ratio nor the integer form."""
    pass


class NumericRangeError(FractionError):
    """Raised when a numerator or denominator exceeds the component width."""
    pass


class ZeroDenominatorError(FractionError):
    """Raised when a fraction would be constructed with a zero denominator."""
    pass


class FractionDomainError(FractionError):
    """Raised when a component magnitude is negative."""
    pass
