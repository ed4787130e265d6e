"""Command line front end: parse fraction literals and print their canonical text."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .core import FractionError, fmt_parts, format_fraction, parse
from .core import parser as _parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fraction-type",
        description="Parse fraction literals (e.g. '3/4', '- 6 / 8', '7') and print canonical text.",
    )
    parser.add_argument("literals", nargs="+", help="Fraction literals to parse")
    parser.add_argument("--parts", action="store_true", help="Also print sign, numerator and denominator")
    parser.add_argument("--debug", action="store_true", help="Trace parser alternatives")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _parser.DEBUG_PARSER = bool(args.debug)

    failed = 0
    for literal in args.literals:
        try:
            value = parse(literal)
        except FractionError as e:
            failed += 1
            print(f"{literal!r} -> error: {type(e).__name__}: {e}", file=sys.stderr)
            continue
        line = f"{literal!r} -> {format_fraction(value)}"
        if args.parts:
            sign, num, den = fmt_parts(value)
            line += f"  (sign={sign}, numerator={num}, denominator={den})"
        print(line)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
