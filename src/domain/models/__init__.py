"""Domain models package."""

from .expense import (
    AnnualItem,
    CustomItem,
    ExpenseInput,
    ExpenseOutput,
    ExpenseProfile,
)
from .financial_taste import (
    FinancialTasteInput,
    FinancialTasteOutput,
    FlagResult,
    ProfileRanking,
)
from .gold import (
    BankDepositResult,
    CombinedResult,
    GoldSimulationParameters,
    MonthRange,
    ScenarioSet,
    SimulationResult,
)
from .home_buy import HomeBuyRange, HomeBuyResult
from .loan import AmortizationRow, LoanPreset, LoanSchedule
from .purchasing_power import PurchasingPowerResult
from .tool_run import SaveToolRunResult, StoredToolRun, ToolRunRecord

__all__ = [
    "FinancialTasteInput",
    "FinancialTasteOutput",
    "FlagResult",
    "ProfileRanking",
    "AnnualItem",
    "CustomItem",
    "ExpenseInput",
    "ExpenseOutput",
    "ExpenseProfile",
    "BankDepositResult",
    "CombinedResult",
    "GoldSimulationParameters",
    "MonthRange",
    "ScenarioSet",
    "SimulationResult",
    "HomeBuyRange",
    "HomeBuyResult",
    "AmortizationRow",
    "LoanPreset",
    "LoanSchedule",
    "PurchasingPowerResult",
    "SaveToolRunResult",
    "StoredToolRun",
    "ToolRunRecord",
]
