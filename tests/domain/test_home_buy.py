"""Tests for the home purchase timeline."""

import math

import pytest

from src.domain.services.home_buy import (
    MONTHLY_ERROR,
    NO_PROGRESS_ERROR,
    PRICE_ERROR,
    SAVINGS_ERROR,
    calculate_home_buy,
    estimate_home_buy_range,
)


def test_months_are_rounded_up():
    """Any remainder should cost one more month."""
    result = calculate_home_buy(1000, 100, 200)

    assert result.months == 5
    assert result.remaining == 900
    assert result.error is None


def test_savings_already_cover_price():
    """Savings at or above the price should need no months."""
    result = calculate_home_buy(1000, 1000, 0)

    assert result.months == 0
    assert result.remaining == 0


@pytest.mark.parametrize(
    ("price", "savings", "monthly", "error"),
    [
        (0, 0, 10, PRICE_ERROR),
        (math.nan, 0, 10, PRICE_ERROR),
        (100, -1, 10, SAVINGS_ERROR),
        (100, 0, -5, MONTHLY_ERROR),
        (100, 0, math.inf, MONTHLY_ERROR),
    ],
)
def test_invalid_inputs_return_messages(price, savings, monthly, error):
    """Invalid inputs should be reported, not raised."""
    result = calculate_home_buy(price, savings, monthly)

    assert result.months is None
    assert result.error == error


def test_zero_monthly_saving_cannot_progress():
    """A zero monthly saving below the price should report no progress."""
    result = calculate_home_buy(1000, 100, 0)

    assert result.months is None
    assert result.remaining == 900
    assert result.error == NO_PROGRESS_ERROR


def test_income_range_orders_slow_base_fast():
    """Saving a larger share of income should be faster."""
    home_range = estimate_home_buy_range(income=1000, savings=0, price=30_000)

    assert home_range.base.months == 100
    assert home_range.slow.months == 120
    assert home_range.fast.months == 86


def test_income_range_without_income_reports_error():
    """Zero income means zero saving and no progress."""
    home_range = estimate_home_buy_range(income=0, savings=0, price=1000)

    assert home_range.base.error == NO_PROGRESS_ERROR
