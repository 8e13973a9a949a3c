"""Domain services package."""

from .amortization import compute_schedule, find_loan_preset, term_in_months
from .expense_leak import analyze
from .financial_taste import assess_financial_taste
from .gold_simulation import (
    estimate_month_range,
    project_gold_goal,
    simulate_bank_deposit,
    simulate_gold,
)
from .home_buy import calculate_home_buy, estimate_home_buy_range
from .purchasing_power import project_purchasing_power, purchasing_power

__all__ = [
    "compute_schedule",
    "find_loan_preset",
    "term_in_months",
    "analyze",
    "assess_financial_taste",
    "estimate_month_range",
    "project_gold_goal",
    "simulate_bank_deposit",
    "simulate_gold",
    "calculate_home_buy",
    "estimate_home_buy_range",
    "project_purchasing_power",
    "purchasing_power",
]
