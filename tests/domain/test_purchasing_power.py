"""Tests for the purchasing power projection."""

import pytest

from src.domain.services.purchasing_power import (
    BASE_JALALI_YEAR,
    HISTORICAL_INFLATION,
    format_compact_amount,
    project_purchasing_power,
    purchasing_power,
)


def test_purchasing_power_discounts_by_inflation():
    """Value should shrink by the compounded inflation factor."""
    assert purchasing_power(1000, 25, 2) == pytest.approx(640)
    assert purchasing_power(1000, 0, 10) == 1000
    assert purchasing_power(1000, -100, 3) == 1000


def test_project_builds_series_and_scenarios():
    """The projection should include every year and three scenarios."""
    result = project_purchasing_power(10_000_000, 25, 2)

    assert result.target_year == BASE_JALALI_YEAR + 2
    assert [point.year for point in result.series] == [1404, 1405, 1406]
    assert result.series[0].value == 10_000_000
    assert result.value == pytest.approx(6_400_000)
    assert result.loss_percent == pytest.approx(36)
    assert [scenario.rate_percent for scenario in result.scenarios] == [
        20.0,
        30.0,
        45.0,
    ]
    assert result.scenarios[0].value == pytest.approx(10_000_000 / 1.44)


def test_project_zero_amount_has_no_loss():
    """A zero amount should not divide by zero."""
    result = project_purchasing_power(0, 40, 5)

    assert result.value == 0
    assert result.loss_percent == 0.0


def test_format_compact_amount():
    """Large values should switch to millions and billions."""
    assert format_compact_amount(2_500_000_000) == "2.5 میلیارد"
    assert format_compact_amount(6_400_000) == "6.4 میلیون"
    assert format_compact_amount(12_345.5) == "12,346"
    assert format_compact_amount(float("nan")) == "—"


def test_historical_inflation_marks_forecast():
    """Only the latest year should be flagged as a forecast."""
    forecasts = [item.year for item in HISTORICAL_INFLATION if item.note]

    assert forecasts == [1405]
