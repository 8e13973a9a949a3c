"""Tests for the gold savings goal simulation."""

import random

import pytest

from src.domain.constants import MAX_MONTHS
from src.domain.models.gold import GoldSimulationParameters
from src.domain.services import gold_simulation
from src.domain.services.gold_simulation import (
    build_scenarios,
    estimate_month_range,
    monthly_rate,
    project_gold_goal,
    scenario_parameters,
    simulate_bank_deposit,
    simulate_gold,
)


def _params(**overrides) -> GoldSimulationParameters:
    values = {
        "target": 1000.0,
        "current_grams": 0.0,
        "monthly_saving_grams": 1.0,
        "gold_price": 100.0,
    }
    values.update(overrides)
    return GoldSimulationParameters(**values)


def test_monthly_rate_compounds_to_annual():
    """Twelve monthly steps should compound back to the annual rate."""
    assert monthly_rate(0) == 0
    assert (1 + monthly_rate(26.8242)) ** 12 == pytest.approx(1.268242)
    assert monthly_rate(-100) == -1.0
    assert monthly_rate(-150) == -1.0


def test_simulate_gold_flat_prices_reaches_goal_linearly():
    """Without growth or costs the goal is target / (grams * price)."""
    result = simulate_gold(_params())

    assert result.months == 10
    assert result.is_unrealistic is False
    assert result.final_grams == pytest.approx(10)
    assert result.gap_today == 1000


def test_purchase_costs_reduce_grams_per_month():
    """Buy fee and tax should shrink the grams added each month."""
    result = simulate_gold(_params(buy_fee=40, buy_tax=60))

    assert result.months == 20


def test_existing_holding_already_covers_target():
    """Liquid value above the target should finish at month 0."""
    result = simulate_gold(_params(current_grams=20, sell_fee=3))

    assert result.months == 0
    assert result.gap_today == 0
    assert result.liquid_value_at_reach == pytest.approx(1940)


def test_no_saving_is_unrealistic():
    """Zero monthly saving below the target should hit the month cap."""
    result = simulate_gold(_params(monthly_saving_grams=0, current_grams=1))

    assert result.months == MAX_MONTHS
    assert result.is_unrealistic is True


def test_zero_achievement_rate_is_unrealistic():
    """An achievement rate of 0 adds no grams."""
    result = simulate_gold(_params(achievement_rate=0))

    assert result.is_unrealistic is True


def test_growth_shortens_the_horizon():
    """Positive gold growth should never take longer than flat prices."""
    flat = simulate_gold(_params(target=100_000))
    growing = simulate_gold(_params(target=100_000, gold_growth=30))

    assert growing.months < flat.months


def test_inflating_target_lengthens_the_horizon():
    """Growing the target with inflation should delay the goal."""
    fixed = simulate_gold(_params(target=100_000, gold_growth=10, inflation=40))
    inflating = simulate_gold(
        _params(
            target=100_000,
            gold_growth=10,
            inflation=40,
            adjust_target_for_inflation=True,
        )
    )

    assert inflating.months > fixed.months
    assert inflating.target_at_reach > 100_000


def test_bank_deposit_uses_cash_equivalent():
    """The bank path should save grams times price every month."""
    result = simulate_bank_deposit(_params())

    assert result.months == 10
    assert result.is_unrealistic is False


def test_bank_deposit_without_money_is_unrealistic():
    """No balance and no saving should be flagged as unrealistic."""
    result = simulate_bank_deposit(_params(monthly_saving_grams=0))

    assert result.months == MAX_MONTHS
    assert result.is_unrealistic is True


def test_month_range_is_reproducible_with_seed():
    """Seeded runs should return the same ordered range."""
    params = _params(target=50_000, gold_growth=20, volatility=25)

    first = estimate_month_range(params, runs=30, rng=random.Random(7))
    second = estimate_month_range(params, runs=30, rng=random.Random(7))

    assert first == second
    assert first.best <= first.worst


def test_month_range_without_volatility_matches_base():
    """Zero volatility should collapse the range onto the base case."""
    params = _params(target=5000, gold_growth=20)
    base = simulate_gold(params)

    month_range = estimate_month_range(params, runs=10, rng=random.Random(1))

    assert month_range.best == base.months
    assert month_range.worst == base.months


def test_scenario_parameters_shift_assumptions():
    """Scenarios should move growth and inflation by ten points."""
    optimistic, pessimistic = scenario_parameters(
        _params(gold_growth=-45, usd_growth=20, inflation=5)
    )

    assert optimistic.gold_growth == -35
    assert optimistic.usd_growth == 30
    assert optimistic.inflation == 0
    assert pessimistic.gold_growth == -50
    assert pessimistic.usd_growth == 10
    assert pessimistic.inflation == 15


def test_scenarios_are_ordered():
    """Optimistic should not be slower than base, base not slower than worst."""
    params = _params(
        target=200_000,
        usd_growth=25,
        gold_growth=20,
        inflation=30,
        adjust_target_for_inflation=True,
    )

    scenarios = build_scenarios(params)

    assert scenarios.optimistic.months <= scenarios.base.months
    assert scenarios.base.months <= scenarios.pessimistic.months


def test_pessimistic_can_beat_base_when_usd_blend_drops_out():
    """At 10% USD growth the pessimistic USD rate is 0 and gold runs alone."""
    params = _params(target=10_000, usd_growth=10, gold_growth=100)

    scenarios = build_scenarios(params)

    assert scenarios.pessimistic.months == 26
    assert scenarios.pessimistic.months < scenarios.base.months
    assert scenarios.optimistic.months <= scenarios.base.months


def test_optimistic_can_trail_base_when_usd_blend_kicks_in():
    """At 0% USD growth only the optimistic scenario blends in USD."""
    params = _params(target=10_000, usd_growth=0, gold_growth=100)

    scenarios = build_scenarios(params)

    assert scenarios.optimistic.months > scenarios.base.months


def test_project_gold_goal_not_started_without_price():
    """A missing price or target should produce an empty result."""
    result = project_gold_goal(_params(gold_price=0))

    assert result.has_started is False
    assert result.range is None
    assert result.bank is None
    assert result.notes == []


def test_project_gold_goal_combines_results():
    """A started projection should carry range, bank path and notes."""
    result = project_gold_goal(
        _params(volatility=10, gold_growth=5),
        runs=5,
        rng=random.Random(3),
    )

    assert result.has_started is True
    assert result.range is not None
    assert result.bank.months == 10
    assert result.scenarios.base is result.base
    assert gold_simulation.NOTE_RANGE in result.notes
    assert gold_simulation.NOTE_BLENDED_GROWTH in result.notes
    assert gold_simulation.NOTE_LONG_HORIZON not in result.notes


def test_project_gold_goal_warns_on_long_horizon():
    """More than twenty years to the goal should add a warning note."""
    result = project_gold_goal(
        _params(target=1_000_000, monthly_saving_grams=0.1),
        enable_range=False,
    )

    assert result.range is None
    assert result.base.months > 240
    assert gold_simulation.NOTE_LONG_HORIZON in result.notes
    assert gold_simulation.NOTE_RANGE not in result.notes
