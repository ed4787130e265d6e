"""
Grammar parser: text -> Fraction.

Grammar (informal EBNF):

    fraction   := ratio | integer
    ratio      := signed_int ws* '/' ws* digits
    integer    := signed_int
    signed_int := ws* ('-' ws*)? digits
    digits     := [0-9]+
    ws         := ' '

Alternatives are tried in order: ratio first, then the bare integer, which is a
prefix of the ratio form. Each call gets its own scanner; there is no shared state
besides the debug flag.

- `parse_fraction` is the remainder-tolerant primitive and reports where the match ended.
- `parse` is the value boundary: the whole input must be consumed.
- Range and zero-denominator failures inside a matched ratio are raised at once;
  only syntactic failures fall through to the next alternative.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .constants import DIGITS, MAX_COMPONENT, MAX_COMPONENT_DIGITS, MINUS, SLASH, SPACE
from .exc import FractionSyntaxError, NumericRangeError, ZeroDenominatorError
from .value import Fraction, Sign

# Debug printing control
DEBUG_PARSER = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSER:
        print(msg)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParseResult:
    """Outcome of a successful match.

    Fields:
    - value: the parsed (reduced) fraction.
    - end: index in the input just after the match.
    - rest: unconsumed remainder of the input (empty for a full match).
    """

    value: Fraction
    end: int
    rest: str


@dataclass(frozen=True)
class _SignedDigits:
    sign: Sign
    digits: str
    start: int  # index of the first digit
    end: int


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class _Scanner:
    """Recursive-descent matcher over a single input string.

    Matchers return the new position (or a match object) on success and None on
    a syntactic miss. The furthest miss is remembered for the error message.
    """

    def __init__(self, text: str):
        self.text = text
        self.furthest = -1
        self.expected = ""

    def _miss(self, pos: int, expected: str) -> None:
        if pos > self.furthest:
            self.furthest = pos
            self.expected = expected
        elif pos == self.furthest and expected not in self.expected.split(" or "):
            self.expected = f"{self.expected} or {expected}"
        return None

    def describe_at(self, pos: int) -> str:
        if pos >= len(self.text):
            return "end of input"
        return repr(self.text[pos])

    # ------------- terminals -------------

    def space0(self, pos: int) -> int:
        while pos < len(self.text) and self.text[pos] == SPACE:
            pos += 1
        return pos

    def char(self, pos: int, ch: str) -> Optional[int]:
        if pos < len(self.text) and self.text[pos] == ch:
            return pos + 1
        return self._miss(pos, repr(ch))

    def digit1(self, pos: int) -> Optional[Tuple[str, int]]:
        end = pos
        while end < len(self.text) and self.text[end] in DIGITS:
            end += 1
        if end == pos:
            return self._miss(pos, "digit")
        return self.text[pos:end], end

    # ------------- productions -------------

    def signed_int(self, pos: int) -> Optional[_SignedDigits]:
        sign = Sign.PLUS
        pos = self.space0(pos)
        after_minus = self.char(pos, MINUS)
        if after_minus is not None:
            sign = Sign.MINUS
            pos = self.space0(after_minus)
        run = self.digit1(pos)
        if run is None:
            return None
        digits, end = run
        return _SignedDigits(sign, digits, pos, end)

    def ratio(self, pos: int) -> Optional[ParseResult]:
        num = self.signed_int(pos)
        if num is None:
            return None
        after_slash = self.char(self.space0(num.end), SLASH)
        if after_slash is None:
            return None
        den_start = self.space0(after_slash)
        run = self.digit1(den_start)
        if run is None:
            return None
        den_digits, end = run
        _dbg(f"ratio: sign={num.sign.name}, num={num.digits!r}@{num.start}, den={den_digits!r}@{den_start}")
        n = self.component(num.digits, num.start)
        d = self.component(den_digits, den_start)
        if d == 0:
            raise ZeroDenominatorError("denominator must be non-zero", text=self.text, position=den_start)
        return self.result(Fraction(num.sign, n, d), end)

    def integer(self, pos: int) -> Optional[ParseResult]:
        num = self.signed_int(pos)
        if num is None:
            return None
        _dbg(f"integer: sign={num.sign.name}, num={num.digits!r}@{num.start}")
        return self.result(Fraction(num.sign, self.component(num.digits, num.start), 1), num.end)

    # ------------- helpers -------------

    def component(self, digits: str, start: int) -> int:
        """Convert an unsigned base-10 run, rejecting values above MAX_COMPONENT."""
        significant = digits.lstrip("0") or "0"
        # Length check first so overlong runs never become huge ints.
        if len(significant) > MAX_COMPONENT_DIGITS or int(significant) > MAX_COMPONENT:
            raise NumericRangeError(
                f"digit run of length {len(digits)} exceeds maximum component {MAX_COMPONENT}",
                text=self.text,
                position=start,
            )
        return int(significant)

    def result(self, value: Fraction, end: int) -> ParseResult:
        return ParseResult(value=value, end=end, rest=self.text[end:])

    def syntax_error(self, pos: int) -> FractionSyntaxError:
        return FractionSyntaxError(
            f"expected {self.expected}, found {self.describe_at(pos)}",
            text=self.text,
            position=pos,
        )


# Tried in order; the first alternative that matches wins.
_ALTERNATIVES: Tuple[Callable[[_Scanner, int], Optional[ParseResult]], ...] = (
    _Scanner.ratio,
    _Scanner.integer,
)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def _match(scanner: _Scanner, pos: int) -> ParseResult:
    for alternative in _ALTERNATIVES:
        res = alternative(scanner, pos)
        if res is not None:
            _dbg(f"match: {alternative.__name__} matched {scanner.text[pos:res.end]!r}, rest={res.rest!r}")
            return res
    _dbg(f"match: no alternative matched {scanner.text!r} (furthest={scanner.furthest})")
    raise scanner.syntax_error(scanner.furthest)


def parse_fraction(text: str, pos: int = 0) -> ParseResult:
    """Match a fraction literal at `text[pos:]`, tolerating trailing input.

    Raises FractionSyntaxError when no alternative matches, NumericRangeError for
    oversize digit runs and ZeroDenominatorError for a zero denominator.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_fraction expects str, got {type(text).__name__}")
    if pos < 0 or pos > len(text):
        raise ValueError(f"start position {pos} outside input of length {len(text)}")
    return _match(_Scanner(text), pos)


def parse(text: str) -> Fraction:
    """Parse a complete fraction literal; any unconsumed input is a syntax error."""
    if not isinstance(text, str):
        raise TypeError(f"parse expects str, got {type(text).__name__}")
    scanner = _Scanner(text)
    res = _match(scanner, 0)
    if res.rest:
        # A deeper miss (e.g. '1/' missing its denominator) explains more than the leftover.
        if scanner.furthest > res.end:
            raise scanner.syntax_error(scanner.furthest)
        raise FractionSyntaxError(
            f"unexpected trailing input {res.rest!r}",
            text=text,
            position=res.end,
        )
    return res.value


__all__ = [
    "ParseResult",
    "parse_fraction",
    "parse",
]
