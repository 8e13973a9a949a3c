"""Purchasing power of money under constant annual inflation."""

import math

from src.domain.models.purchasing_power import (
    HistoricalInflation,
    InflationScenario,
    PurchasingPowerPoint,
    PurchasingPowerResult,
)
from src.utils.numbers import round_half_up

BASE_JALALI_YEAR = 1404

INFLATION_SCENARIOS = (
    ("خوش‌بینانه", 20.0),
    ("متوسط (تاریخی)", 30.0),
    ("بدبینانه (واقعی اخیر)", 45.0),
)

HISTORICAL_INFLATION = (
    HistoricalInflation(1393, 15.6),
    HistoricalInflation(1394, 11.9),
    HistoricalInflation(1395, 9.0),
    HistoricalInflation(1396, 9.6),
    HistoricalInflation(1397, 31.2),
    HistoricalInflation(1398, 41.2),
    HistoricalInflation(1399, 36.4),
    HistoricalInflation(1400, 40.2),
    HistoricalInflation(1401, 45.8),
    HistoricalInflation(1402, 42.3),
    HistoricalInflation(1403, 40.0),
    HistoricalInflation(1404, 44.6),
    HistoricalInflation(1405, 42.0, "پیش‌بینی"),
)


def purchasing_power(amount: float, inflation_percent: float, years: float) -> float:
    """Return ``amount / (1 + inflation/100) ** years``.

    Inflation at or below -100% has no meaning here and returns the amount
    unchanged.
    """
    base = 1 + inflation_percent / 100
    if base <= 0:
        return amount
    return amount / base**years


def format_compact_amount(value: float) -> str:
    """Render large toman amounts in millions or billions."""
    if value is None or not math.isfinite(value):
        return "—"
    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.1f} میلیارد"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f} میلیون"
    return f"{round_half_up(value):,}"


def project_purchasing_power(
    amount: float,
    inflation_percent: float,
    years: int,
    base_year: int = BASE_JALALI_YEAR,
) -> PurchasingPowerResult:
    """Project purchasing power with a yearly series and fixed scenarios.

    Args:
        amount: Amount in today's money.
        inflation_percent: Expected annual inflation.
        years: Horizon in whole years.
        base_year: Jalali year the amount is valued in.

    Returns:
        PurchasingPowerResult: Value after ``years`` plus the yearly decay
        series and the three reference scenarios.
    """
    horizon = max(0, int(years))
    value = purchasing_power(amount, inflation_percent, horizon)
    series = [
        PurchasingPowerPoint(
            year=base_year + year,
            value=purchasing_power(amount, inflation_percent, year),
        )
        for year in range(horizon + 1)
    ]
    scenarios = [
        InflationScenario(
            label=label,
            rate_percent=rate,
            value=purchasing_power(amount, rate, horizon),
        )
        for label, rate in INFLATION_SCENARIOS
    ]
    loss = (1 - value / amount) * 100 if amount else 0.0
    return PurchasingPowerResult(
        amount=amount,
        inflation_percent=inflation_percent,
        years=horizon,
        value=value,
        loss_percent=loss,
        target_year=base_year + horizon,
        series=series,
        scenarios=scenarios,
    )


__all__ = [
    "BASE_JALALI_YEAR",
    "INFLATION_SCENARIOS",
    "HISTORICAL_INFLATION",
    "purchasing_power",
    "format_compact_amount",
    "project_purchasing_power",
]
