"""Tests for localized number helpers."""

import math

import pytest

from src.utils.numbers import (
    clamp,
    coerce_non_negative,
    format_grouped_number,
    parse_localized_number,
    round_half_up,
    safe_percent,
    to_ascii_digits,
    to_persian_digits,
)


def test_digit_scripts_round_trip():
    """Persian and Arabic-Indic digits should map to ASCII and back."""
    assert to_ascii_digits("۱۲۳٤٥٦") == "123456"
    assert to_persian_digits(2025) == "۲۰۲۵"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("۱٬۲۳۴٫۵", 1234.5),
        ("12,000", 12000.0),
        (" ۲۵ ", 25.0),
        ("1.2.3", 1.23),
        ("-7", -7.0),
        ("+5", 5.0),
        ("1e5", 100000.0),
        ("۲٫۵e۳", 2500.0),
        (".5", 0.5),
        (42, 42.0),
    ],
)
def test_parse_localized_number_accepts_localized_text(text, expected):
    """Grouping, digit scripts and repeated dots should be normalized."""
    assert parse_localized_number(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text", [None, "", "abc", "12a", "-", "+", "e5", "1e", "1e999", float("nan")]
)
def test_parse_localized_number_returns_zero_for_invalid_input(text):
    """Invalid input should never raise and parse as 0."""
    assert parse_localized_number(text) == 0.0


def test_format_grouped_number_uses_persian_separators():
    """The fa locale should use Persian digits and separators."""
    assert format_grouped_number(1234567) == "۱٬۲۳۴٬۵۶۷"
    assert format_grouped_number(1234.5, max_fraction_digits=2) == "۱٬۲۳۴٫۵"
    assert format_grouped_number(1234.5, 2, locale="en") == "1,234.5"
    assert format_grouped_number(float("inf"), locale="en") == "0"


def test_round_half_up_differs_from_bankers_rounding():
    """Halves should always round up, including negative halves."""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.49) == 2


def test_small_numeric_helpers():
    """clamp, coerce_non_negative and safe_percent should handle edges."""
    assert clamp(150, 0, 100) == 100
    assert clamp(-1, 0, 100) == 0
    assert coerce_non_negative("۱۵") == 15.0
    assert coerce_non_negative(-3) == 0.0
    assert coerce_non_negative(math.inf) == 0.0
    assert safe_percent(25, 200) == 12.5
    assert safe_percent(25, 0) == 0.0


@pytest.mark.parametrize("locale", ["fa", "en"])
@pytest.mark.parametrize("digits", [0, 1, 2])
@pytest.mark.parametrize(
    "text",
    ["۱٬۲۳۴٫۵", "12,345.678", "-1234.25", "0.004", "۱٫۲.۳", "987654321"],
)
def test_parsing_formatted_text_gives_back_the_number(text, digits, locale):
    """Formatted output should parse back to the value at display precision."""
    value = parse_localized_number(text)
    rendered = format_grouped_number(value, max_fraction_digits=digits, locale=locale)

    assert parse_localized_number(rendered) == pytest.approx(round(value, digits))
