"""Application use cases package."""

from .analyze_expense_leak import AnalyzeExpenseLeakUseCase, ExpenseLeakAnalysis
from .assess_financial_taste import (
    AssessFinancialTasteUseCase,
    FinancialTasteAssessment,
    FinancialTasteForm,
)
from .calculate_loan import CalculateLoanUseCase, LoanCalculation, LoanForm
from .estimate_home_buy import EstimateHomeBuyUseCase, HomeBuyEstimate, HomeBuyForm
from .estimate_purchasing_power import (
    EstimatePurchasingPowerUseCase,
    PurchasingPowerEstimate,
    PurchasingPowerForm,
)
from .list_tool_runs import ListToolRunsUseCase
from .project_gold_goal import (
    GoldGoalForm,
    GoldGoalProjection,
    ProjectGoldGoalUseCase,
)
from .save_tool_run import SaveToolRunResult, SaveToolRunUseCase

__all__ = [
    "AnalyzeExpenseLeakUseCase",
    "ExpenseLeakAnalysis",
    "AssessFinancialTasteUseCase",
    "FinancialTasteAssessment",
    "FinancialTasteForm",
    "CalculateLoanUseCase",
    "LoanCalculation",
    "LoanForm",
    "EstimateHomeBuyUseCase",
    "HomeBuyEstimate",
    "HomeBuyForm",
    "EstimatePurchasingPowerUseCase",
    "PurchasingPowerEstimate",
    "PurchasingPowerForm",
    "ListToolRunsUseCase",
    "GoldGoalForm",
    "GoldGoalProjection",
    "ProjectGoldGoalUseCase",
    "SaveToolRunResult",
    "SaveToolRunUseCase",
]
