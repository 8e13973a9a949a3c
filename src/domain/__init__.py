"""Domain package for the calculation engines and their models."""

from .constants import MAX_MONTHS, VERY_LONG_MONTHS
from .models import (
    ExpenseInput,
    ExpenseOutput,
    GoldSimulationParameters,
    LoanSchedule,
    ToolRunRecord,
)
from .policies import format_month_range, format_months_result
from .services import (
    analyze,
    compute_schedule,
    project_gold_goal,
    simulate_gold,
)

__all__ = [
    "MAX_MONTHS",
    "VERY_LONG_MONTHS",
    "ExpenseInput",
    "ExpenseOutput",
    "GoldSimulationParameters",
    "LoanSchedule",
    "ToolRunRecord",
    "format_month_range",
    "format_months_result",
    "analyze",
    "compute_schedule",
    "project_gold_goal",
    "simulate_gold",
]
