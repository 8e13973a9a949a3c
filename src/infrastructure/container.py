"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.tool_run_repository import ToolRunRepositoryPort
from src.application.use_cases.analyze_expense_leak import (
    AnalyzeExpenseLeakUseCase,
)
from src.application.use_cases.assess_financial_taste import (
    AssessFinancialTasteUseCase,
)
from src.application.use_cases.calculate_loan import CalculateLoanUseCase
from src.application.use_cases.estimate_home_buy import EstimateHomeBuyUseCase
from src.application.use_cases.estimate_purchasing_power import (
    EstimatePurchasingPowerUseCase,
)
from src.application.use_cases.list_tool_runs import ListToolRunsUseCase
from src.application.use_cases.project_gold_goal import ProjectGoldGoalUseCase
from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import TakhminoSettings
from src.infrastructure.tool_run_repository import SqlAlchemyToolRunRepository


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_tool_run_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: TakhminoSettings | None = None,
) -> ToolRunRepositoryPort | None:
    """Return the tool-run repository, or None when storage is disabled."""
    resolved = settings or TakhminoSettings.from_env()
    if resolved.tool_runs_backend != "sqlalchemy":
        return None
    return SqlAlchemyToolRunRepository(db_port or build_database_adapter())


def build_tool_run_saver(
    repository: ToolRunRepositoryPort | None = None,
    settings: TakhminoSettings | None = None,
) -> SaveToolRunUseCase:
    """Return the save use case wired to the configured repository."""
    resolved_repo = repository or build_tool_run_repository(settings=settings)
    return SaveToolRunUseCase(resolved_repo, logger=get_app_logger())


def build_calculate_loan(
    settings: TakhminoSettings | None = None,
) -> CalculateLoanUseCase:
    return CalculateLoanUseCase(build_tool_run_saver(settings=settings))


def build_project_gold_goal(
    settings: TakhminoSettings | None = None,
) -> ProjectGoldGoalUseCase:
    """Return the gold goal use case configured from settings."""
    resolved = settings or TakhminoSettings.from_env()
    return ProjectGoldGoalUseCase(
        build_tool_run_saver(settings=resolved),
        range_runs=resolved.range_runs,
        random_seed=resolved.random_seed,
        locale=resolved.locale,
    )


def build_analyze_expense_leak(
    settings: TakhminoSettings | None = None,
) -> AnalyzeExpenseLeakUseCase:
    return AnalyzeExpenseLeakUseCase(build_tool_run_saver(settings=settings))


def build_estimate_home_buy(
    settings: TakhminoSettings | None = None,
) -> EstimateHomeBuyUseCase:
    resolved = settings or TakhminoSettings.from_env()
    return EstimateHomeBuyUseCase(
        build_tool_run_saver(settings=resolved),
        locale=resolved.locale,
    )


def build_estimate_purchasing_power(
    settings: TakhminoSettings | None = None,
) -> EstimatePurchasingPowerUseCase:
    return EstimatePurchasingPowerUseCase(build_tool_run_saver(settings=settings))


def build_assess_financial_taste(
    settings: TakhminoSettings | None = None,
) -> AssessFinancialTasteUseCase:
    return AssessFinancialTasteUseCase(build_tool_run_saver(settings=settings))


def build_list_tool_runs(
    db_port: DatabaseEnginePort | None = None,
) -> ListToolRunsUseCase:
    """Return the listing use case; it always reads through SQLAlchemy."""
    return ListToolRunsUseCase(
        SqlAlchemyToolRunRepository(db_port or build_database_adapter())
    )


__all__ = [
    "build_database_adapter",
    "build_tool_run_repository",
    "build_tool_run_saver",
    "build_calculate_loan",
    "build_project_gold_goal",
    "build_analyze_expense_leak",
    "build_estimate_home_buy",
    "build_estimate_purchasing_power",
    "build_assess_financial_taste",
    "build_list_tool_runs",
]
