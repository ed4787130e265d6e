"""
Fraction Core Constants (integer domain)
========================================

Component width and grammar terminals shared by the value type and the parser.
"""

# NOTE: MAX_COMPONENT bounds both numerator and denominator magnitudes; the sign is stored separately.

# ---------------------------------------------------------------------------
# Component width
# ---------------------------------------------------------------------------

#: Components are unsigned integers of this many bits.
COMPONENT_BITS: int = 64
MAX_COMPONENT: int = (1 << COMPONENT_BITS) - 1   # 18446744073709551615

#: Number of decimal digits in MAX_COMPONENT. A digit run longer than this
#: (after leading zeros) is out of range without converting it.
MAX_COMPONENT_DIGITS: int = len(str(MAX_COMPONENT))


# ---------------------------------------------------------------------------
# Grammar terminals
# ---------------------------------------------------------------------------

DIGITS: str = "0123456789"
SPACE: str = " "
MINUS: str = "-"
SLASH: str = "/"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "COMPONENT_BITS",
    "MAX_COMPONENT",
    "MAX_COMPONENT_DIGITS",
    "DIGITS",
    "SPACE",
    "MINUS",
    "SLASH",
]
