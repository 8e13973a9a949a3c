"""Domain models for the gold savings goal projection."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GoldSimulationParameters:
    """Inputs of a gold savings simulation.

    Amounts are in toman, holdings in grams and every rate is an annual
    percentage unless stated otherwise.

    Attributes:
        target: Goal amount in today's money.
        current_grams: Gold already held.
        monthly_saving_grams: Planned monthly purchase in grams.
        gold_price: Current price per gram.
        usd_growth: Annual USD growth; blended 70/30 with gold when non-zero.
        gold_growth: Annual gold price growth.
        inflation: Annual inflation used to inflate the target.
        bank_rate: Annual bank deposit rate for the comparison path.
        buy_fee: Purchase fee.
        buy_tax: Purchase tax.
        sell_fee: Fee applied when liquidating.
        storage: Annual storage cost.
        volatility: Annual volatility for randomized runs.
        shock: One-off price jump applied every twelfth month.
        achievement_rate: Share of the planned saving actually made.
        adjust_target_for_inflation: Grow the target with inflation.
    """

    target: float
    current_grams: float
    monthly_saving_grams: float
    gold_price: float
    usd_growth: float = 0.0
    gold_growth: float = 0.0
    inflation: float = 0.0
    bank_rate: float = 0.0
    buy_fee: float = 0.0
    buy_tax: float = 0.0
    sell_fee: float = 0.0
    storage: float = 0.0
    volatility: float = 0.0
    shock: float = 0.0
    achievement_rate: float = 100.0
    adjust_target_for_inflation: bool = False


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one gold simulation run."""

    months: int
    is_unrealistic: bool
    current_value: float
    gap_today: float
    target_at_reach: float
    final_grams: float
    liquid_value_at_reach: float


EMPTY_RESULT = SimulationResult(
    months=0,
    is_unrealistic=False,
    current_value=0.0,
    gap_today=0.0,
    target_at_reach=0.0,
    final_grams=0.0,
    liquid_value_at_reach=0.0,
)


@dataclass(frozen=True)
class BankDepositResult:
    """Months needed when the same budget goes to a bank deposit."""

    months: int
    is_unrealistic: bool


@dataclass(frozen=True)
class MonthRange:
    """15th/85th percentile months over randomized runs."""

    best: int
    worst: int


@dataclass(frozen=True)
class ScenarioSet:
    """Deterministic runs with perturbed growth and inflation."""

    optimistic: SimulationResult
    base: SimulationResult
    pessimistic: SimulationResult


@dataclass(frozen=True)
class CombinedResult:
    """Everything the gold goal screen needs."""

    has_started: bool
    base: SimulationResult
    scenarios: ScenarioSet
    range: MonthRange | None = None
    bank: BankDepositResult | None = None
    notes: list[str] = field(default_factory=list)


__all__ = [
    "GoldSimulationParameters",
    "SimulationResult",
    "EMPTY_RESULT",
    "BankDepositResult",
    "MonthRange",
    "ScenarioSet",
    "CombinedResult",
]
