# tests/test_utils.py
import pytest

from pos_frontend.utils.helpers import fmt_date, fmt_money
from pos_frontend.utils.validators import non_empty, parse_float_or, parse_int_or


@pytest.mark.parametrize("text,expected", [
    ("3", 3),
    ("12abc", 12),
    ("3.7", 3),
    (" 4 ", 4),
    ("abc", 1),
    ("", 1),
    (None, 1),
    ("0", 1),
])
def test_parse_int_or(text, expected):
    assert parse_int_or(text, 1) == expected


@pytest.mark.parametrize("text,expected", [
    ("150", 150.0),
    ("12.5kg", 12.5),
    (".5", 0.5),
    ("abc", 0.0),
    ("", 0.0),
    ("0", 0.0),
])
def test_parse_float_or(text, expected):
    assert parse_float_or(text, 0.0) == expected


def test_non_empty():
    assert non_empty("x")
    assert not non_empty("   ")
    assert not non_empty(None)


def test_fmt_money():
    assert fmt_money(1234.5) == "1,234.50"
    assert fmt_money("10") == "10.00"
    assert fmt_money(None) == ""
    assert fmt_money(None, sentinel="-") == "-"
    assert fmt_money("n/a") == "n/a"


def test_fmt_date():
    assert fmt_date("2024-01-05T10:11:12Z") == "2024-01-05"
    assert fmt_date("2024-01-05T10:11:12.000+05:00") == "2024-01-05"
    assert fmt_date("yesterday") == "yesterday"
    assert fmt_date(None) == ""
