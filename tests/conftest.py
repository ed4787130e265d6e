from __future__ import annotations

import pytest

from fraction_type.core import Fraction, Sign
from fraction_type.core import parser as parser_mod


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def half() -> Fraction:
    return Fraction(Sign.PLUS, 1, 2)


@pytest.fixture()
def neg_half() -> Fraction:
    return Fraction(Sign.MINUS, 1, 2)


@pytest.fixture()
def parser_debug(monkeypatch):
    """Enable parser tracing for one test; restored afterwards."""
    monkeypatch.setattr(parser_mod, "DEBUG_PARSER", True)
    return parser_mod
