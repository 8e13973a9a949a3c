"""Use case for the gold savings goal projection."""

from dataclasses import asdict, dataclass
import random

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import (
    DEFAULT_RANGE_RUNS,
    TOOL_NAMES,
    TOOL_RUN_SCHEMA,
    VERY_LONG_MONTHS,
)
from src.domain.models.gold import CombinedResult, GoldSimulationParameters
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.policies.display import format_month_range, format_months_result
from src.domain.services.gold_simulation import project_gold_goal
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import clamp, parse_localized_number

TOOL_SLUG = "gold-goal"
TOOL_VERSION = "1"


@dataclass(frozen=True)
class GoldGoalForm:
    """Raw gold goal form input as localized text."""

    target: str = ""
    current_grams: str = ""
    monthly_saving_grams: str = ""
    gold_price: str = ""
    usd_growth: str = "۲۵"
    gold_growth: str = "۲۰"
    inflation: str = "۴۴"
    bank_rate: str = "۲۵"
    buy_fee: str = "۰"
    buy_tax: str = "۹"
    sell_fee: str = "۳"
    storage: str = "۰٫۸"
    volatility: str = "۸"
    shock: str = "۰"
    achievement_rate: str = "۱۰۰"
    adjust_target_for_inflation: bool = False
    enable_range: bool = True


@dataclass(frozen=True)
class GoldGoalProjection:
    params: GoldSimulationParameters
    result: CombinedResult
    headline: str
    range_text: str | None
    saved: SaveToolRunResult | None = None


def parameters_from_form(form: GoldGoalForm) -> GoldSimulationParameters:
    """Parse and clamp the form into simulation parameters."""

    def percent(text: str, upper: float = 100.0) -> float:
        return clamp(parse_localized_number(text), 0.0, upper)

    return GoldSimulationParameters(
        target=parse_localized_number(form.target),
        current_grams=max(0.0, parse_localized_number(form.current_grams)),
        monthly_saving_grams=max(
            0.0, parse_localized_number(form.monthly_saving_grams)
        ),
        gold_price=parse_localized_number(form.gold_price),
        usd_growth=parse_localized_number(form.usd_growth),
        gold_growth=parse_localized_number(form.gold_growth),
        inflation=parse_localized_number(form.inflation),
        bank_rate=parse_localized_number(form.bank_rate),
        buy_fee=percent(form.buy_fee),
        buy_tax=percent(form.buy_tax),
        sell_fee=percent(form.sell_fee),
        storage=percent(form.storage),
        volatility=percent(form.volatility),
        shock=percent(form.shock, upper=300.0),
        achievement_rate=percent(form.achievement_rate),
        adjust_target_for_inflation=form.adjust_target_for_inflation,
    )


class ProjectGoldGoalUseCase:
    """Project months to a gold savings goal and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
        range_runs: int = DEFAULT_RANGE_RUNS,
        random_seed: int | None = None,
        locale: str = "fa",
    ) -> None:
        """Initialize the use case.

        Args:
            tool_run_saver: Optional tool-run saver.
            logger: Optional logger compatible with logging.Logger-like API.
            range_runs: Randomized runs behind the best/worst range.
            random_seed: Seed for reproducible ranges.
            locale: Locale for the rendered durations.
        """
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()
        self._range_runs = range_runs
        self._random_seed = random_seed
        self._locale = locale

    def execute(self, form: GoldGoalForm) -> GoldGoalProjection:
        params = parameters_from_form(form)
        rng = random.Random(self._random_seed)
        result = project_gold_goal(
            params,
            enable_range=form.enable_range,
            runs=self._range_runs,
            rng=rng,
        )

        headline = format_months_result(
            result.base.months,
            locale=self._locale,
            very_long_after=VERY_LONG_MONTHS,
        )
        range_text = None
        if result.range is not None:
            range_text = format_month_range(
                result.range.best,
                result.range.worst,
                locale=self._locale,
                very_long_after=VERY_LONG_MONTHS,
            )

        if not result.has_started:
            self._logger.debug("Gold goal not started: missing target or price")
            return GoldGoalProjection(params, result, headline, range_text)

        self._logger.info(
            f"Gold goal projected: months={result.base.months}, "
            f"unrealistic={result.base.is_unrealistic}"
        )

        saved = None
        if self._saver is not None:
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=TOOL_VERSION,
                    raw_data={
                        "inputs": asdict(params),
                        "result": asdict(result),
                        "meta": {"schema": TOOL_RUN_SCHEMA, "toolVersion": 1},
                    },
                    summary=self._build_summary(headline, range_text),
                )
            )
        return GoldGoalProjection(params, result, headline, range_text, saved)

    @staticmethod
    def _build_summary(headline: str, range_text: str | None) -> str:
        summary = f"زمان رسیدن به هدف طلا: {headline}."
        if range_text:
            summary += f" بازه: {range_text}."
        return summary


__all__ = [
    "GoldGoalForm",
    "GoldGoalProjection",
    "ProjectGoldGoalUseCase",
    "parameters_from_form",
]
