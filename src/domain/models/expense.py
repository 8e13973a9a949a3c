"""Domain models for the expense leak analysis."""

from dataclasses import dataclass, field

CATEGORY_IDS = (
    "saving",
    "housing",
    "food",
    "transport",
    "lifestyle",
    "health",
    "bills",
    "finance",
)
EXPENSE_MODES = ("quick", "detailed", "mixed")
HOUSING_PROFILES = ("renter", "owned_mortgage", "owned_paid")
FAMILY_PROFILES = ("single", "couple", "family4", "family5")
CITY_PROFILES = ("tehran", "big", "mid", "small")


@dataclass(frozen=True)
class ExpenseProfile:
    """Household profile used only for peer benchmarks."""

    housing: str = "renter"
    family: str = "single"
    city: str = "big"


@dataclass(frozen=True)
class AnnualItem:
    """Once-a-year expense tagged with the Jalali month it falls in."""

    id: str
    amount: float
    month_name: str
    label: str | None = None


@dataclass(frozen=True)
class CustomItem:
    """Ad-hoc monthly expense outside the fixed categories."""

    name: str
    amount: float


@dataclass(frozen=True)
class ExpenseInput:
    """Monthly budget as entered by the user.

    Attributes:
        monthly_income: Net monthly income.
        monthly_saving: Planned monthly saving.
        emergency_fund_balance: Current emergency fund.
        inflation_rate_percent: Expected annual inflation.
        mode: ``quick``, ``detailed`` or ``mixed``.
        quick: Category id to monthly total.
        detailed: Detailed field id to monthly amount.
        annual_items: Yearly one-off expenses.
        custom_items: Extra monthly expenses.
        profile: Household profile for peer benchmarks.
    """

    monthly_income: float
    monthly_saving: float = 0.0
    emergency_fund_balance: float = 0.0
    inflation_rate_percent: float = 0.0
    mode: str = "quick"
    quick: dict[str, float] | None = None
    detailed: dict[str, float] | None = None
    annual_items: list[AnnualItem] = field(default_factory=list)
    custom_items: list[CustomItem] = field(default_factory=list)
    profile: ExpenseProfile = field(default_factory=ExpenseProfile)


@dataclass(frozen=True)
class ExpenseSummary:
    """Monthly totals. ``total_expenses`` excludes saving."""

    income: float
    total_expenses: float
    total_custom_expenses: float
    total_annual_amount: float
    annual_monthly: float
    saving: float
    balance: float
    balance_with_annual: float


@dataclass(frozen=True)
class HealthFactor:
    label: str
    severity: str


@dataclass(frozen=True)
class HealthScore:
    """Overall 0-100 budget health score."""

    score: int
    level: str
    level_label: str
    factors: list[HealthFactor]


@dataclass(frozen=True)
class CategoryBreakdown:
    id: str
    label: str
    amount: float
    percent_of_income: float
    status: str
    ideal_range_percent: tuple[float, float] | None = None
    warn_range_percent: tuple[float, float] | None = None
    tag_text: str | None = None


@dataclass(frozen=True)
class LeakItem:
    label: str
    amount: float
    percent_of_category: float
    field_id: str | None = None


@dataclass(frozen=True)
class DetectedLeak:
    """Category spending above its ideal share of income."""

    category_id: str
    category_label: str
    total_amount: float
    percent_of_income: float
    severity: str
    top_items: list[LeakItem] = field(default_factory=list)
    note: str | None = None


@dataclass(frozen=True)
class PeerCard:
    """Comparison of one category with similar households."""

    category_id: str
    label: str
    user_percent: float
    peer_average_percent: float
    peer_range_percent: tuple[int, int]
    status: str
    status_label: str


@dataclass(frozen=True)
class RuleSlice:
    label: str
    target_percent: float
    actual_percent: float
    gap_percent: float


@dataclass(frozen=True)
class RuleResult:
    """50/30/20 budget rule breakdown."""

    slices: list[RuleSlice]
    note: str | None = None


@dataclass(frozen=True)
class FragilityResult:
    fixed_expense_percent: float
    ratio: float
    level: str
    label: str


@dataclass(frozen=True)
class DarkMoneyResult:
    """Flexible spending above the heuristic threshold."""

    dark_amount: float
    percent_of_income: float
    label: str
    note: str | None = None


@dataclass(frozen=True)
class HeatmapMonth:
    month_label: str
    amount: float
    percent_of_annual: float | None = None


@dataclass(frozen=True)
class HeatmapResult:
    months: list[HeatmapMonth]
    peak_month_label: str | None = None


@dataclass(frozen=True)
class ExpenseOutput:
    """Full result of an expense leak analysis."""

    input: ExpenseInput
    summary: ExpenseSummary
    health: HealthScore
    categories: list[CategoryBreakdown]
    leaks: list[DetectedLeak]
    peers: list[PeerCard]
    rule_50_30_20: RuleResult | None = None
    fragility: FragilityResult | None = None
    dark_money: DarkMoneyResult | None = None
    heatmap: HeatmapResult | None = None


@dataclass(frozen=True)
class ExpenseToolRunSummary:
    mode: str
    income: float
    total_expenses: float
    balance: float
    balance_with_annual: float
    health_score: int
    health_level: str
    main_leak_categories: list[str]


__all__ = [
    "CATEGORY_IDS",
    "EXPENSE_MODES",
    "HOUSING_PROFILES",
    "FAMILY_PROFILES",
    "CITY_PROFILES",
    "ExpenseProfile",
    "AnnualItem",
    "CustomItem",
    "ExpenseInput",
    "ExpenseSummary",
    "HealthFactor",
    "HealthScore",
    "CategoryBreakdown",
    "LeakItem",
    "DetectedLeak",
    "PeerCard",
    "RuleSlice",
    "RuleResult",
    "FragilityResult",
    "DarkMoneyResult",
    "HeatmapMonth",
    "HeatmapResult",
    "ExpenseOutput",
    "ExpenseToolRunSummary",
]
