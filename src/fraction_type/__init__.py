# Top-level API for fraction_type.
"""
Top-level API for fraction_type.

A signed rational value type with a text grammar:
  - parse: text -> Fraction ("3/4", "- 3 / 4", "7")
  - format_fraction: Fraction -> canonical text ("-3/4", "7")
  - fraction_in / fraction_out: the textual input/output pair a host type registers

Everything is re-exported from `fraction_type.core`; the host boundary lives in
`fraction_type.io`.
"""

from __future__ import annotations

from .core import (
    Sign,
    Fraction,
    ParseResult,
    parse_fraction,
    parse,
    format_fraction,
    FractionError,
    FractionSyntaxError,
    NumericRangeError,
    ZeroDenominatorError,
    FractionDomainError,
)
from .io import fraction_in, fraction_out, fraction_recv, fraction_send

__version__ = "0.1.0"

__all__ = [
    # value
    "Sign",
    "Fraction",
    # text
    "ParseResult",
    "parse_fraction",
    "parse",
    "format_fraction",
    # host boundary
    "fraction_in",
    "fraction_out",
    "fraction_recv",
    "fraction_send",
    # exceptions
    "FractionError",
    "FractionSyntaxError",
    "NumericRangeError",
    "ZeroDenominatorError",
    "FractionDomainError",
]
