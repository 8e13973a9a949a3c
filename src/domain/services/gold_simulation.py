"""Month-by-month projection of a gold savings goal.

The base case is deterministic. Randomized runs add Gaussian noise to the
monthly growth (Box-Muller on a caller-supplied ``random.Random``) and are
used to build a 15th/85th percentile range. Every loop is bounded by
``MAX_MONTHS``; hitting the bound marks the result as unrealistic.
"""

from dataclasses import replace
import math
import random

from src.domain.constants import (
    DEFAULT_RANGE_RUNS,
    GOLD_BLEND_WEIGHT,
    MAX_MONTHS,
    RANGE_BEST_PERCENTILE,
    RANGE_WORST_PERCENTILE,
    SCENARIO_DELTA,
    SCENARIO_GROWTH_FLOOR,
    USD_BLEND_WEIGHT,
    VERY_LONG_MONTHS,
)
from src.domain.models.gold import (
    EMPTY_RESULT,
    BankDepositResult,
    CombinedResult,
    GoldSimulationParameters,
    MonthRange,
    ScenarioSet,
    SimulationResult,
)

NOTE_NOT_A_FORECAST = (
    "این ابزار «پیش‌بینی قطعی» نیست؛ یک تخمین بر اساس فرض‌های شماست."
)
NOTE_BLENDED_GROWTH = (
    "قیمت طلا ماهانه با ترکیب رشد طلا و رشد دلار به‌روزرسانی می‌شود."
)
NOTE_INFLATING_TARGET = "هدف شما نیز با تورم رشد می‌کند."
NOTE_RANGE = "بازه‌ی نتیجه با شبیه‌سازی ساده‌ی ریسک محاسبه شده است."
NOTE_LONG_HORIZON = (
    "هشدار: با این پس‌انداز و فرض‌ها، هدف نیاز به زمان بسیار طولانی دارد. "
    "افزایش پس‌انداز ماهانه می‌تواند کمک بزرگی کند."
)
NOTE_REAL_RISKS = "ریسک‌های واقعی می‌تواند نتایج را تغییر دهد."


def monthly_rate(annual_percent: float) -> float:
    """Return the monthly compounding equivalent of an annual rate.

    Rates at or below -100% cannot be compounded and map to -1.
    """
    base = 1 + annual_percent / 100
    if base <= 0:
        return -1.0
    return base ** (1 / 12) - 1


def _standard_normal(rng: random.Random) -> float:
    u = 0.0
    v = 0.0
    while u == 0:
        u = rng.random()
    while v == 0:
        v = rng.random()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def _effective_growth(params: GoldSimulationParameters) -> float:
    gold = monthly_rate(params.gold_growth)
    usd = params.usd_growth
    if math.isfinite(usd) and usd != 0:
        return USD_BLEND_WEIGHT * monthly_rate(usd) + GOLD_BLEND_WEIGHT * gold
    return gold


def _grams_added_per_month(params: GoldSimulationParameters) -> float:
    saved = params.monthly_saving_grams * params.achievement_rate / 100
    purchase_loss = 1 + (params.buy_fee + params.buy_tax) / 100
    if purchase_loss <= 0:
        return 0.0
    return saved / purchase_loss


def simulate_gold(
    params: GoldSimulationParameters,
    randomize: bool = False,
    rng: random.Random | None = None,
) -> SimulationResult:
    """Simulate months until the liquid gold value reaches the target.

    Args:
        params: Simulation inputs, already clamped.
        randomize: Add Gaussian noise to the monthly growth.
        rng: Random source for noisy runs.

    Returns:
        SimulationResult: Months to the goal and values at that month.
    """
    rng = rng or random.Random()
    sell_factor = 1 - params.sell_fee / 100
    grams = params.current_grams
    price = params.gold_price
    target = params.target

    now_value = grams * price
    gap_today = max(0.0, params.target - now_value)

    if not params.adjust_target_for_inflation:
        liquid_now = now_value * sell_factor
        if liquid_now >= params.target:
            return SimulationResult(
                months=0,
                is_unrealistic=False,
                current_value=now_value,
                gap_today=0.0,
                target_at_reach=params.target,
                final_grams=grams,
                liquid_value_at_reach=liquid_now,
            )

    grams_per_month = _grams_added_per_month(params)
    if grams_per_month <= 0:
        return SimulationResult(
            months=MAX_MONTHS,
            is_unrealistic=True,
            current_value=now_value,
            gap_today=gap_today,
            target_at_reach=target,
            final_grams=grams,
            liquid_value_at_reach=now_value * sell_factor,
        )

    growth = _effective_growth(params)
    inflation = monthly_rate(params.inflation)
    noise_std = params.volatility / 100 / math.sqrt(12)
    storage = params.storage / 100 / 12

    for month in range(1, MAX_MONTHS + 1):
        if params.adjust_target_for_inflation:
            target *= 1 + inflation

        shock = 0.0
        if params.shock > 0 and month % 12 == 0:
            shock = params.shock / 100

        noise = _standard_normal(rng) * noise_std if randomize else 0.0
        price *= (1 + growth + noise) * (1 + shock)
        grams += grams_per_month
        if storage > 0:
            price *= 1 - storage

        liquid = grams * price * sell_factor
        if liquid >= target:
            return SimulationResult(
                months=month,
                is_unrealistic=False,
                current_value=now_value,
                gap_today=gap_today,
                target_at_reach=target,
                final_grams=grams,
                liquid_value_at_reach=liquid,
            )

    return SimulationResult(
        months=MAX_MONTHS,
        is_unrealistic=True,
        current_value=now_value,
        gap_today=gap_today,
        target_at_reach=target,
        final_grams=grams,
        liquid_value_at_reach=grams * price * sell_factor,
    )


def simulate_bank_deposit(params: GoldSimulationParameters) -> BankDepositResult:
    """Simulate the same monthly budget placed in a bank deposit.

    The gram budget is converted to cash at today's price and scaled by the
    achievement rate; purchase costs do not apply.
    """
    monthly_cash = (
        params.monthly_saving_grams
        * params.gold_price
        * params.achievement_rate
        / 100
    )
    bank = monthly_rate(params.bank_rate)
    inflation = monthly_rate(params.inflation)
    balance = params.current_grams * params.gold_price
    target = params.target

    if monthly_cash <= 0 and balance <= 0:
        return BankDepositResult(months=MAX_MONTHS, is_unrealistic=True)

    for month in range(1, MAX_MONTHS + 1):
        if params.adjust_target_for_inflation:
            target *= 1 + inflation
        balance *= 1 + bank
        balance += monthly_cash
        if balance >= target:
            return BankDepositResult(months=month, is_unrealistic=False)

    return BankDepositResult(months=MAX_MONTHS, is_unrealistic=True)


def estimate_month_range(
    params: GoldSimulationParameters,
    runs: int = DEFAULT_RANGE_RUNS,
    rng: random.Random | None = None,
) -> MonthRange:
    """Return the 15th/85th percentile months over randomized runs."""
    rng = rng or random.Random()
    count = max(1, int(runs))
    months = sorted(
        simulate_gold(params, randomize=True, rng=rng).months
        for _ in range(count)
    )
    return MonthRange(
        best=months[math.floor(count * RANGE_BEST_PERCENTILE)],
        worst=months[math.floor(count * RANGE_WORST_PERCENTILE)],
    )


def scenario_parameters(
    params: GoldSimulationParameters,
) -> tuple[GoldSimulationParameters, GoldSimulationParameters]:
    """Return the optimistic and pessimistic parameter sets."""
    optimistic = replace(
        params,
        gold_growth=params.gold_growth + SCENARIO_DELTA,
        usd_growth=params.usd_growth + SCENARIO_DELTA,
        inflation=max(0.0, params.inflation - SCENARIO_DELTA),
    )
    pessimistic = replace(
        params,
        gold_growth=max(SCENARIO_GROWTH_FLOOR, params.gold_growth - SCENARIO_DELTA),
        usd_growth=max(SCENARIO_GROWTH_FLOOR, params.usd_growth - SCENARIO_DELTA),
        inflation=params.inflation + SCENARIO_DELTA,
    )
    return optimistic, pessimistic


def build_scenarios(
    params: GoldSimulationParameters,
    base: SimulationResult | None = None,
) -> ScenarioSet:
    """Run the deterministic optimistic, base and pessimistic scenarios."""
    optimistic, pessimistic = scenario_parameters(params)
    return ScenarioSet(
        optimistic=simulate_gold(optimistic),
        base=base if base is not None else simulate_gold(params),
        pessimistic=simulate_gold(pessimistic),
    )


def build_notes(
    base: SimulationResult,
    adjust_target_for_inflation: bool,
    enable_range: bool,
) -> list[str]:
    notes = [NOTE_NOT_A_FORECAST, NOTE_BLENDED_GROWTH]
    if adjust_target_for_inflation:
        notes.append(NOTE_INFLATING_TARGET)
    if enable_range:
        notes.append(NOTE_RANGE)
    if base.months > VERY_LONG_MONTHS:
        notes.append(NOTE_LONG_HORIZON)
    notes.append(NOTE_REAL_RISKS)
    return notes


def project_gold_goal(
    params: GoldSimulationParameters,
    enable_range: bool = True,
    runs: int = DEFAULT_RANGE_RUNS,
    rng: random.Random | None = None,
) -> CombinedResult:
    """Run the base case, range, bank comparison and scenarios.

    Args:
        params: Clamped simulation inputs.
        enable_range: Build the randomized best/worst range.
        runs: Number of randomized runs for the range.
        rng: Random source for the range.

    Returns:
        CombinedResult: ``has_started`` is False, with empty results, when
        the target or the gold price is not positive.
    """
    if params.target <= 0 or params.gold_price <= 0:
        return CombinedResult(
            has_started=False,
            base=EMPTY_RESULT,
            scenarios=ScenarioSet(EMPTY_RESULT, EMPTY_RESULT, EMPTY_RESULT),
        )

    base = simulate_gold(params)
    month_range = (
        estimate_month_range(params, runs=runs, rng=rng) if enable_range else None
    )
    return CombinedResult(
        has_started=True,
        base=base,
        scenarios=build_scenarios(params, base=base),
        range=month_range,
        bank=simulate_bank_deposit(params),
        notes=build_notes(
            base,
            params.adjust_target_for_inflation,
            enable_range,
        ),
    )


__all__ = [
    "monthly_rate",
    "simulate_gold",
    "simulate_bank_deposit",
    "estimate_month_range",
    "scenario_parameters",
    "build_scenarios",
    "build_notes",
    "project_gold_goal",
]
