"""Domain models for the financial taste questionnaire scoring."""

from dataclasses import dataclass, field

AXES = (
    "risk_capacity",
    "risk_tolerance",
    "spending_taste",
    "behavioral_bias",
    "money_avoidance",
    "money_worship",
    "money_status",
    "money_vigilance",
    "money_motivation",
)

Q32_OPTIONS = ("security", "freedom", "luxury", "giving", "status", "growth")


@dataclass(frozen=True)
class QuestionSpec:
    """How one answer feeds the axes.

    Attributes:
        id: Question number.
        scale: Number of answer options (4 or 5).
        axis_weights: Axis name to weight.
        reverse: The first option is the high end of the axis.
    """

    id: int
    scale: int
    axis_weights: dict[str, float]
    reverse: bool = False


@dataclass(frozen=True)
class ProfileSpec:
    key: str
    title: str
    weights: dict[str, float]
    bias: float = 0.0


@dataclass(frozen=True)
class FinancialTasteInput:
    """Answers keyed by question number plus the question 32 choices."""

    answers: dict[int, float] = field(default_factory=dict)
    q32_selected: tuple[str, ...] = ()


@dataclass(frozen=True)
class Composite:
    real_risk: int
    luxury: int
    defensive: int
    volatility: int
    mismatch: int


@dataclass(frozen=True)
class RankedProfile:
    key: str
    title: str
    score: int


@dataclass(frozen=True)
class ProfileRanking:
    """Profiles sorted by score; confidence comes from the top gap."""

    dominant: RankedProfile
    secondary: list[RankedProfile]
    confidence: str
    scored: list[RankedProfile]


@dataclass(frozen=True)
class FlagResult:
    key: str
    title: str
    score: int
    level: str
    reason: str
    suggestions: list[str]


@dataclass(frozen=True)
class RadarAxis:
    key: str
    label: str
    value: int


@dataclass(frozen=True)
class ReportSection:
    title: str
    bullets: list[str] = field(default_factory=list)
    paragraphs: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SuggestedTool:
    title: str
    href: str
    why: str


@dataclass(frozen=True)
class FinancialTasteReport:
    headline: str
    subheadline: str
    radar_axes: list[RadarAxis]
    strengths: list[str]
    growth_areas: list[str]
    flags: list[FlagResult]
    action_plan: list[ReportSection]
    suggested_tools: list[SuggestedTool]


@dataclass(frozen=True)
class FinancialTasteOutput:
    """Axis scores, composites, profiles, behavioral flags and the report."""

    axes: dict[str, int]
    composite: Composite
    profiles: ProfileRanking
    flags: list[FlagResult]
    highlighted_flags: list[FlagResult]
    report: FinancialTasteReport


__all__ = [
    "AXES",
    "Q32_OPTIONS",
    "QuestionSpec",
    "ProfileSpec",
    "FinancialTasteInput",
    "Composite",
    "RankedProfile",
    "ProfileRanking",
    "FlagResult",
    "RadarAxis",
    "ReportSection",
    "SuggestedTool",
    "FinancialTasteReport",
    "FinancialTasteOutput",
]
