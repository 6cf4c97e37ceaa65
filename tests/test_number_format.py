import math

import pytest

from allwayscalc.utils.number_format import format_hours, format_inr, format_number, parse_number, round_value


@pytest.mark.parametrize(
    "raw,expected",
    [("12", 12.0), (" 2.5 ", 2.5), (7, 7.0), ("", None), ("abc", None), (None, None), ("inf", None), ("nan", None), (True, None)],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_round_value_rounds_half_up():
    assert round_value(2.675, 2) == 2.68
    assert round_value(0.1 + 0.2, 6) == 0.3
    assert round_value(None) is None
    assert math.isinf(round_value(math.inf))


@pytest.mark.parametrize(
    "value,decimals,expected",
    [(2.5, None, "2.5"), (100.0, None, "100"), (40.0, 4, "40"), (1 / 3, 4, "0.3333"), (-0.0, 2, "0"), (12, None, "12")],
)
def test_format_number_strips_trailing_zeros(value, decimals, expected):
    assert format_number(value, decimals) == expected


def test_format_number_infinity():
    assert format_number(math.inf) == "Infinity"


@pytest.mark.parametrize(
    "value,expected",
    [(100, "₹100"), (1150.0, "₹1,150"), (2666.666, "₹2,666.67"), (1234567.891, "₹12,34,567.89"), (-500.5, "-₹500.5"), (None, "₹0")],
)
def test_format_inr_uses_indian_grouping(value, expected):
    assert format_inr(value) == expected


@pytest.mark.parametrize(
    "hours,expected",
    [(100 / 60, "1 hour 40 minutes"), (2, "2 hours"), (0.5, "30 minutes"), (0, "0 minutes"), (1.9999, "2 hours")],
)
def test_format_hours(hours, expected):
    assert format_hours(hours) == expected


@pytest.mark.parametrize("value,decimals", [(1e22, 6), (-3.5e25, 6), (1.5e300, 2), (9.99e27, 3)])
def test_round_value_handles_values_wider_than_default_precision(value, decimals):
    assert round_value(value, decimals) == value


def test_large_values_format_in_full():
    assert format_number(1e22, 6) == "10000000000000000000000"
    assert format_inr(1e22) == "₹10,00,00,00,00,00,00,00,00,00,000"
    assert format_inr(-math.inf) == "-₹Infinity"
