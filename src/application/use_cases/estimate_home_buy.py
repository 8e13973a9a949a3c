"""Use case for the home purchase timeline."""

from dataclasses import asdict, dataclass

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import TOOL_NAMES, TOOL_RUN_SCHEMA
from src.domain.models.home_buy import HomeBuyRange, HomeBuyResult
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.policies.display import format_months_result
from src.domain.services.home_buy import (
    calculate_home_buy,
    estimate_home_buy_range,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import parse_localized_number

TOOL_SLUG = "home-buy"
TOOL_VERSION = "1"


@dataclass(frozen=True)
class HomeBuyForm:
    """Raw home-buy form input.

    ``monthly_saving`` drives the direct estimate; ``income`` drives the
    30/25/35 percent range when given.
    """

    price: str = ""
    savings: str = ""
    monthly_saving: str = ""
    income: str = ""


@dataclass(frozen=True)
class HomeBuyEstimate:
    result: HomeBuyResult
    display: str | None
    income_range: HomeBuyRange | None = None
    saved: SaveToolRunResult | None = None


class EstimateHomeBuyUseCase:
    """Estimate when savings cover a home price and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
        locale: str = "fa",
    ) -> None:
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()
        self._locale = locale

    def execute(self, form: HomeBuyForm) -> HomeBuyEstimate:
        price = parse_localized_number(form.price)
        savings = parse_localized_number(form.savings)
        monthly = parse_localized_number(form.monthly_saving)
        income = parse_localized_number(form.income)

        result = calculate_home_buy(price, savings, monthly)
        income_range = None
        if income > 0:
            income_range = estimate_home_buy_range(income, savings, price)

        if result.error is not None:
            self._logger.warning(f"Home buy estimate failed: {result.error}")
            return HomeBuyEstimate(result, None, income_range)

        display = format_months_result(result.months, locale=self._locale)
        self._logger.info(f"Home buy estimated: months={result.months}")

        saved = None
        if self._saver is not None:
            raw_data = {
                "inputs": {
                    "price": price,
                    "savings": savings,
                    "monthlySaving": monthly,
                    "income": income,
                },
                "result": asdict(result),
                "incomeRange": asdict(income_range) if income_range else None,
                "meta": {"schema": TOOL_RUN_SCHEMA, "toolVersion": 1},
            }
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=TOOL_VERSION,
                    raw_data=raw_data,
                    summary=f"زمان تقریبی خرید خانه: {display}",
                )
            )
        return HomeBuyEstimate(result, display, income_range, saved)


__all__ = ["EstimateHomeBuyUseCase", "HomeBuyForm", "HomeBuyEstimate"]
