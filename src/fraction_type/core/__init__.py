"""
Fraction Type Core
==================

Unified exports for the integer-domain fraction value, its grammar parser and
its canonical formatter. Components are unsigned 64-bit magnitudes with a
separate sign, always reduced to lowest terms.
"""

# NOTE:
#   `core` holds the only non-trivial logic of the package. Parsing and
#   formatting are pure functions; hosts own value lifetime and persistence.

# Integer-domain constants
from .constants import (
    COMPONENT_BITS,
    MAX_COMPONENT,
    MAX_COMPONENT_DIGITS,
)

# Value primitives
from .value import (
    Sign,
    Fraction,
)

# Grammar parser
from .parser import (
    ParseResult,
    parse_fraction,
    parse,
)

# Canonical text
from .fmt import (
    format_fraction,
    fmt_parts,
)

# Core exceptions
from .exc import (
    FractionError,
    FractionSyntaxError,
    NumericRangeError,
    ZeroDenominatorError,
    FractionDomainError,
)

__all__ = [
    # constants
    "COMPONENT_BITS",
    "MAX_COMPONENT",
    "MAX_COMPONENT_DIGITS",
    # value
    "Sign",
    "Fraction",
    # parser
    "ParseResult",
    "parse_fraction",
    "parse",
    # fmt
    "format_fraction",
    "fmt_parts",
    # exceptions
    "FractionError",
    "FractionSyntaxError",
    "NumericRangeError",
    "ZeroDenominatorError",
    "FractionDomainError",
]
