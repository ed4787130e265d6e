"""Demo: fraction literal parsing, reduction and canonical formatting.

Scenarios covered:
S1) Sign/space placements of 1/1 (including leading spaces) all reduce to the same value
S2) Reduction and canonical text (2/4, 2/1, -6/8)
S3) Zero has a single representation (-0, 0/7)
S4) Rejections: syntax, zero denominator, out-of-range digit runs
S5) Remainder-tolerant primitive vs full-consumption boundary
"""
from __future__ import annotations

from typing import Callable, Dict, List
import argparse
import sys

from fraction_type import FractionError, format_fraction, parse, parse_fraction
from fraction_type.core import MAX_COMPONENT, fmt_parts

# ---------- pretty printers ----------

def show(literal: str) -> None:
    try:
        v = parse(literal)
    except FractionError as e:
        print(f"  - {literal!r:>28} -> {type(e).__name__}: {e}")
        return
    sign, num, den = fmt_parts(v)
    print(f"  - {literal!r:>28} -> {format_fraction(v):<12} (sign={sign}, num={num}, den={den})")


def run_scenario(title: str, literals: List[str]) -> None:
    print("\n" + "=" * 80)
    print(f"Scenario: {title}")
    for literal in literals:
        show(literal)


def run_remainder_scenario() -> None:
    print("\n" + "=" * 80)
    print("Scenario: S5) parse_fraction keeps the remainder; parse rejects it")
    for literal in ["3/4 apples", "12abc", "5 /x"]:
        res = parse_fraction(literal)
        print(f"  - parse_fraction({literal!r}) -> {format_fraction(res.value)}, rest={res.rest!r}")
        show(literal)


# ---------- scenarios ----------

SCENARIOS: Dict[str, Callable[[], None]] = {
    "S1": lambda: run_scenario("S1) sign/space placements of 1/1", ["1", " 1", "- 1", "1 / 1", "-1 /1", " - 1 / 1"]),
    "S2": lambda: run_scenario("S2) reduction and canonical text", ["2/4", "2/1", "-6/8", "0010 / 0004"]),
    "S3": lambda: run_scenario("S3) single zero", ["0", "-0", "- 0 / 7"]),
    "S4": lambda: run_scenario(
        "S4) rejections",
        ["", "abc", "1/", "/1", "1.5", "1 1/2", "1/0", f"{MAX_COMPONENT + 1}"],
    ),
    "S5": run_remainder_scenario,
}


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Fraction parse/format demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,S4)")
    args = parser.parse_args(argv)

    selected = list(SCENARIOS) if args.only is None else [s.strip() for s in args.only.split(",")]
    unknown = [sid for sid in selected if sid not in SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario ids: {', '.join(unknown)}")
    for sid in selected:
        SCENARIOS[sid]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
