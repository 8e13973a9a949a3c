"""Domain models for the purchasing power projection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchasingPowerPoint:
    year: int
    value: float


@dataclass(frozen=True)
class InflationScenario:
    label: str
    rate_percent: float
    value: float


@dataclass(frozen=True)
class HistoricalInflation:
    """Annual inflation for a Jalali year; ``note`` marks forecasts."""

    year: int
    rate_percent: float
    note: str | None = None


@dataclass(frozen=True)
class PurchasingPowerResult:
    """Future purchasing power of an amount under inflation."""

    amount: float
    inflation_percent: float
    years: int
    value: float
    loss_percent: float
    target_year: int
    series: list[PurchasingPowerPoint]
    scenarios: list[InflationScenario]


__all__ = [
    "PurchasingPowerPoint",
    "InflationScenario",
    "HistoricalInflation",
    "PurchasingPowerResult",
]
