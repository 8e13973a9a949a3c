"""Months until savings cover a home price."""

import math

from src.domain.models.home_buy import HomeBuyRange, HomeBuyResult

PRICE_ERROR = "قیمت خانه باید عددی بزرگ‌تر از ۰ باشد."
SAVINGS_ERROR = "پس‌انداز فعلی باید عددی بزرگ‌تر یا مساوی ۰ باشد."
MONTHLY_ERROR = "پس‌انداز ماهانه باید عددی بزرگ‌تر یا مساوی ۰ باشد."
NO_PROGRESS_ERROR = "با پس‌انداز ماهانه ۰، در این مدل MVP به قیمت خانه نمی‌رسی."

BASE_SAVING_SHARE = 0.30
SLOW_SAVING_SHARE = 0.25
FAST_SAVING_SHARE = 0.35


def _is_valid(value, allow_zero: bool) -> bool:
    if value is None or not math.isfinite(value):
        return False
    return value >= 0 if allow_zero else value > 0


def calculate_home_buy(
    price: float,
    savings: float,
    monthly_saving: float,
) -> HomeBuyResult:
    """Return the months needed to save up for ``price``.

    Prices and savings do not grow; the remaining gap is divided by the
    monthly saving and rounded up.

    Args:
        price: Home price, must be positive.
        savings: Current savings, must be non-negative.
        monthly_saving: Monthly saving, must be non-negative.

    Returns:
        HomeBuyResult: Months (0 when savings already cover the price) or
        an error message.
    """
    if not _is_valid(price, allow_zero=False):
        return HomeBuyResult(months=None, remaining=0.0, error=PRICE_ERROR)
    if not _is_valid(savings, allow_zero=True):
        return HomeBuyResult(months=None, remaining=0.0, error=SAVINGS_ERROR)
    if not _is_valid(monthly_saving, allow_zero=True):
        return HomeBuyResult(months=None, remaining=0.0, error=MONTHLY_ERROR)

    if savings >= price:
        return HomeBuyResult(months=0, remaining=0.0)

    remaining = price - savings
    if monthly_saving == 0:
        return HomeBuyResult(
            months=None,
            remaining=remaining,
            error=NO_PROGRESS_ERROR,
        )
    return HomeBuyResult(
        months=math.ceil(remaining / monthly_saving),
        remaining=remaining,
    )


def estimate_home_buy_range(
    income: float,
    savings: float,
    price: float,
) -> HomeBuyRange:
    """Estimate timelines when saving 30%, 25% and 35% of monthly income."""
    return HomeBuyRange(
        base=calculate_home_buy(price, savings, income * BASE_SAVING_SHARE),
        slow=calculate_home_buy(price, savings, income * SLOW_SAVING_SHARE),
        fast=calculate_home_buy(price, savings, income * FAST_SAVING_SHARE),
    )


__all__ = [
    "PRICE_ERROR",
    "SAVINGS_ERROR",
    "MONTHLY_ERROR",
    "NO_PROGRESS_ERROR",
    "calculate_home_buy",
    "estimate_home_buy_range",
]
