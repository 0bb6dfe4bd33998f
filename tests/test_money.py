from decimal import Decimal

import pytest

from app.utils.money import D, format_usd, parse_amount, to_json_number, to_minor_units


@pytest.mark.parametrize("amount, cents", [
    ("180", 18000),
    ("75.50", 7550),
    ("10.005", 1001),   # half-up at the boundary
    ("0.125", 13),
    ("0.124", 12),
])
def test_to_minor_units_rounds_half_up(amount, cents):
    assert to_minor_units(D(amount)) == cents


def test_to_minor_units_never_negative():
    assert to_minor_units(D("-5")) == 0


def test_float_input_goes_through_str():
    # 10.005 as a float is 10.00499..., str() keeps the literal the client sent
    assert to_minor_units(D(10.005)) == 1001


@pytest.mark.parametrize("raw, expected", [
    (200, Decimal("200")),
    ("75.50", Decimal("75.50")),
    (" 12 ", Decimal("12")),
    ("abc", None),
    ("", None),
    (float("nan"), None),
    (float("inf"), None),
    ("Infinity", None),
    (True, None),
])
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_format_usd():
    assert format_usd(D("100")) == "$100.00"
    assert format_usd(D("1234.5")) == "$1,234.50"


def test_to_json_number():
    assert to_json_number(D("180.00")) == 180
    assert isinstance(to_json_number(D("180.00")), int)
    assert to_json_number(D("75.50")) == 75.5
