import pytest

from fraction_type.core.constants import MAX_COMPONENT
from fraction_type.core.exc import (
    FractionError,
    FractionSyntaxError,
    NumericRangeError,
    ZeroDenominatorError,
)
from fraction_type.core.parser import ParseResult, parse, parse_fraction
from fraction_type.core.value import Fraction, Sign


def _pos(n: int, d: int = 1) -> Fraction:
    return Fraction(Sign.PLUS, n, d)


def _neg(n: int, d: int = 1) -> Fraction:
    return Fraction(Sign.MINUS, n, d)


# -----------------------------
# Accepted forms
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", _pos(1)),
        ("-1", _neg(1)),
        ("- 1", _neg(1)),
        ("1/1", _pos(1)),
        ("1 /1", _pos(1)),
        ("1/ 1", _pos(1)),
        ("1 / 1", _pos(1)),
        ("-1/1", _neg(1)),
        ("-1 /1", _neg(1)),
        ("-1/ 1", _neg(1)),
        ("-1 / 1", _neg(1)),
        ("- 1/1", _neg(1)),
        ("- 1 /1", _neg(1)),
        ("- 1/ 1", _neg(1)),
        ("- 1 / 1", _neg(1)),
        ("1/2", _pos(1, 2)),
        ("2/1", _pos(2)),
    ],
)
def test_sign_and_space_placements(text, expected):
    print(f"[parse-table] {text!r} -> expect {expected}")
    assert parse(text) == expected


@pytest.mark.parametrize("text", ["1/2", "1 /2", "1/ 2", "1 / 2", "1   /   2"])
def test_whitespace_around_slash(text):
    assert parse(text) == parse("1/2")


@pytest.mark.parametrize("text", ["-1/2", "- 1/2", "- 1 /2", "- 1 / 2", "-    1/2"])
def test_sign_placement(text):
    v = parse(text)
    assert v == _neg(1, 2)
    assert v.is_negative()


@pytest.mark.parametrize(
    "text,expected",
    [
        (" 1", _pos(1)),
        ("  1/2", _pos(1, 2)),
        (" -1", _neg(1)),
        (" -1/2", _neg(1, 2)),
        ("  - 1 / 2", _neg(1, 2)),
    ],
)
def test_leading_spaces_before_sign(text, expected):
    print(f"[parse-leading-space] {text!r} -> expect {expected}")
    assert parse(text) == expected


def test_leading_spaces_shift_error_positions():
    with pytest.raises(NumericRangeError) as info:
        parse(f"  {MAX_COMPONENT + 1}")
    assert info.value.position == 2
    with pytest.raises(FractionSyntaxError) as info:
        parse("   ")
    assert info.value.position == 3
    assert "expected '-' or digit, found end of input" in str(info.value)


def test_trailing_space_still_rejected():
    with pytest.raises(FractionSyntaxError):
        parse(" 1 ")


def test_bare_integer_has_denominator_one():
    print("[parse-integer] '7' -> expect 7/1")
    v = parse("7")
    assert v == parse("7/1")
    assert v.denominator == 1


def test_reduction_on_parse():
    assert parse("2/4") == parse("1/2")
    v = parse("-10 / 15")
    assert (v.sign, v.numerator, v.denominator) == (Sign.MINUS, 2, 3)


@pytest.mark.parametrize("text", ["0", "-0", "- 0", "0/7", "-0/7", "- 0 / 9", "000"])
def test_zero_collapses_sign(text):
    print(f"[parse-zero] {text!r} -> expect canonical zero")
    v = parse(text)
    assert v == Fraction.zero()
    assert v.sign is Sign.PLUS


def test_leading_zeros():
    assert parse("007/014") == _pos(1, 2)
    assert parse("0" * 40 + str(MAX_COMPONENT)).numerator == MAX_COMPONENT


def test_max_component_accepted():
    v = parse(f"-{MAX_COMPONENT}/{MAX_COMPONENT - 1}")
    assert (v.sign, v.numerator, v.denominator) == (Sign.MINUS, MAX_COMPONENT, MAX_COMPONENT - 1)


# -----------------------------
# Rejections
# -----------------------------

@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "1/",
        "/1",
        "-",
        "- ",
        "1 ",
        "+1",
        "--1",
        "1.5",
        "1 1/2",
        "1/2/3",
        "1/-2",
        "1 2",
        "1\t/2",
        "\uff11",  # fullwidth digit one
        "\u0661/2",  # arabic-indic digit one
        "1/2x",
    ],
)
def test_syntax_errors(text):
    print(f"[parse-syntax] {text!r} -> expect FractionSyntaxError")
    with pytest.raises(FractionSyntaxError):
        parse(text)


@pytest.mark.parametrize(
    "text,position",
    [
        ("", 0),
        ("abc", 0),
        ("1/", 2),
        ("/1", 0),
        ("-", 1),
        ("1/-2", 2),
        ("1/2/3", 3),
        ("1/2x", 3),
    ],
)
def test_syntax_error_position(text, position):
    with pytest.raises(FractionSyntaxError) as info:
        parse(text)
    print(f"[parse-syntax-pos] {text!r} ->", info.value)
    assert info.value.position == position
    assert info.value.text == text
    assert f"position {position}" in str(info.value)


def test_syntax_error_message_names_expectation():
    with pytest.raises(FractionSyntaxError) as info:
        parse("abc")
    assert "expected '-' or digit" in str(info.value)
    assert "'a'" in str(info.value)
    with pytest.raises(FractionSyntaxError) as info:
        parse("1/")
    assert "expected digit, found end of input" in str(info.value)


@pytest.mark.parametrize(
    "text,position",
    [
        ("1/0", 2),
        ("0/0", 2),
        ("- 3 / 000", 6),
        ("5/ 0", 3),
    ],
)
def test_zero_denominator(text, position):
    print(f"[parse-zero-den] {text!r} -> expect ZeroDenominatorError at {position}")
    with pytest.raises(ZeroDenominatorError) as info:
        parse(text)
    assert info.value.position == position


@pytest.mark.parametrize(
    "text,position",
    [
        (str(MAX_COMPONENT + 1), 0),
        (f"-{MAX_COMPONENT + 1}", 1),
        (f"-  {MAX_COMPONENT + 1}", 3),
        (f"1/{MAX_COMPONENT + 1}", 2),
        ("9" * 25, 0),
        ("1" + "0" * 5000, 0),
    ],
)
def test_numeric_range(text, position):
    print(f"[parse-range] digit run of length {len(text)} -> expect NumericRangeError")
    with pytest.raises(NumericRangeError) as info:
        parse(text)
    assert info.value.position == position


def test_range_error_not_masked_by_fallback():
    # The ratio matched structurally; its denominator error must not fall back to '1'.
    with pytest.raises(NumericRangeError):
        parse_fraction(f"1/{MAX_COMPONENT + 1}")
    with pytest.raises(ZeroDenominatorError):
        parse_fraction("1/0")


def test_all_failures_are_fraction_errors():
    for text in ["", "1/0", "9" * 30]:
        with pytest.raises(FractionError):
            parse(text)


@pytest.mark.parametrize("bad", [None, 12, b"1/2"])
def test_non_str_input(bad):
    with pytest.raises(TypeError):
        parse(bad)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        parse_fraction(bad)  # type: ignore[arg-type]


# -----------------------------
# Remainder-tolerant primitive
# -----------------------------

def test_parse_fraction_returns_remainder():
    print("[parse_fraction] '3/4 apples' -> expect 3/4 with rest ' apples'")
    res = parse_fraction("3/4 apples")
    assert isinstance(res, ParseResult)
    assert res.value == _pos(3, 4)
    assert res.end == 3
    assert res.rest == " apples"


def test_parse_fraction_falls_back_to_integer():
    res = parse_fraction("12abc")
    assert res.value == _pos(12)
    assert res.rest == "abc"
    res = parse_fraction("5 /x")
    assert res.value == _pos(5)
    assert res.end == 1
    assert res.rest == " /x"


def test_parse_fraction_full_match_has_empty_rest():
    res = parse_fraction("- 6 / 8")
    assert res.value == _neg(3, 4)
    assert res.rest == ""
    assert res.end == len("- 6 / 8")


def test_parse_fraction_from_offset():
    res = parse_fraction("x=1/2;", pos=2)
    assert res.value == _pos(1, 2)
    assert res.end == 5
    assert res.rest == ";"


def test_parse_fraction_no_match():
    with pytest.raises(FractionSyntaxError):
        parse_fraction("")
    with pytest.raises(FractionSyntaxError) as info:
        parse_fraction("x1", pos=0)
    assert info.value.position == 0


@pytest.mark.parametrize("start", [-1, 4])
def test_parse_fraction_bad_offset(start):
    with pytest.raises(ValueError):
        parse_fraction("1/2", pos=start)


# -----------------------------
# Debug tracing
# -----------------------------

def test_debug_trace(parser_debug, capsys):
    parse("1 / 2")
    out = capsys.readouterr().out
    print(out)
    assert "ratio:" in out
    assert "match: ratio matched" in out


def test_debug_off_by_default(capsys):
    parse("1 / 2")
    assert capsys.readouterr().out == ""
