import math

import pytest

from cutil.charconv import parse_float, parse_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [("0", 0), ("-1", -1), ("1", 1)],
)
def test_parse_int_decimal(text, expected):
    assert parse_int(text) == expected


def test_parse_int_hex():
    assert parse_int("8086", 16) == 0x8086


@pytest.mark.parametrize("number", [0, 7, -42, 123456789, -987654321])
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number
    assert parse_int(format(number, "x"), 16) == number
    assert parse_int(format(number, "b"), 2) == number


def test_parse_int_reads_prefix_only():
    assert parse_int("12abc") == 12


def test_parse_int_uppercase_hex_digits():
    assert parse_int("FF", 16) == parse_int("ff", 16)


def test_parse_int_rejects_digit_outside_base():
    with pytest.raises(ValueError):
        parse_int("9", 8)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_parse_int_bad_base(base):
    with pytest.raises(ValueError):
        parse_int("1", base)


def test_parse_float_simple():
    assert parse_float("0.1") == 0.1


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1e-10, 6.02e23, -3.5e-7])
def test_parse_float_round_trip(value):
    assert parse_float(repr(value)) == value


def test_parse_float_special_values():
    assert parse_float("inf") == math.inf
    assert parse_float("-Infinity") == -math.inf
    assert math.isnan(parse_float("nan"))


def test_parse_float_prefix():
    assert parse_float("2.5xyz") == 2.5
    assert parse_float("1e") == 1.0


@pytest.mark.parametrize("text", ["", "abc", "+1.0", "-", "."])
def test_parse_float_invalid(text):
    with pytest.raises(ValueError):
        parse_float(text)


def test_parse_float_out_of_range():
    with pytest.raises(ValueError):
        parse_float("1e999")