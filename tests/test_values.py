import math

import pytest

from iniconf.values import (
    format_bool,
    format_double,
    format_long,
    parse_bool,
    parse_double,
    parse_long,
)


def test_parse_long_decimal():
    assert parse_long("42") == 42
    assert parse_long("-17") == -17
    assert parse_long("+8") == 8


def test_parse_long_leading_whitespace_accepted():
    assert parse_long(" 12") == 12


@pytest.mark.parametrize("text", ["", "0x", "12abc", "abc", "-", "1.5", "12 ", "0xZZ"])
def test_parse_long_invalid(text):
    assert parse_long(text) is None


def test_parse_long_hex_matches_int():
    assert parse_long("0x1F") == int("1F", 16)
    assert parse_long("0X10") == int("10", 16)


def test_parse_long_saturates():
    huge = parse_long("9" * 30)
    assert huge == parse_long("9" * 25)
    assert huge > 0
    tiny = parse_long("-" + "9" * 30)
    assert tiny == parse_long("-" + "9" * 25)
    assert tiny < 0


def test_parse_long_rejects_text_too_long_for_buffer():
    assert parse_long("1" * 70) is None


@pytest.mark.parametrize("value", [0, 1, -1, 255, 123456789, -(2**63), 2**63 - 1])
def test_long_decimal_round_trip(value):
    assert parse_long(format_long(value)) == value


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 2**63 - 1])
def test_long_hex_round_trip(value):
    text = format_long(value, True)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value
    assert parse_long(text) == value


def test_format_long_negative_hex_is_twos_complement():
    assert format_long(-1, True) == "0xffffffffffffffff"


def test_format_long_out_of_range():
    with pytest.raises(OverflowError):
        format_long(2**63)


def test_parse_double_simple():
    assert parse_double("1.5") == 1.5
    assert parse_double("-2.25") == -2.25
    assert parse_double("1e3") == 1e3
    assert parse_double(".5") == 0.5


def test_parse_double_hex_and_special():
    assert parse_double("0x1p3") == float.fromhex("0x1p3")
    assert parse_double("inf") == math.inf
    assert parse_double("-Infinity") == -math.inf
    assert math.isnan(parse_double("nan"))


@pytest.mark.parametrize("text", ["", "abc", "1_0", "1.5 ", "1e", "1.5x", "--1"])
def test_parse_double_invalid(text):
    assert parse_double(text) is None


@pytest.mark.parametrize("value", [0.0, 0.5, -3.25, 1234.125])
def test_double_round_trip(value):
    assert parse_double(format_double(value)) == value


def test_format_double_six_decimals():
    assert format_double(0.5) == "0.500000"
    assert len(format_double(3.0).split(".")[1]) == 6


@pytest.mark.parametrize(
    "text,expected",
    [
        ("true", True),
        ("Yes", True),
        ("1", True),
        ("on", True),
        ("ON", True),
        ("false", False),
        ("No", False),
        ("0", False),
        ("off", False),
        ("OF", False),
    ],
)
def test_parse_bool_recognised(text, expected):
    assert parse_bool(text) is expected


@pytest.mark.parametrize("text", ["", "o", "maybe", "2", "x"])
def test_parse_bool_unrecognised(text):
    assert parse_bool(text) is None


def test_format_bool_strings():
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


@pytest.mark.parametrize("value", [True, False])
def test_bool_round_trip(value):
    assert parse_bool(format_bool(value)) is value