"""Use case for the purchasing power projection."""

from dataclasses import asdict, dataclass

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import TOOL_NAMES, TOOL_RUN_SCHEMA
from src.domain.models.purchasing_power import PurchasingPowerResult
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.services.purchasing_power import (
    format_compact_amount,
    project_purchasing_power,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import clamp, parse_localized_number, to_persian_digits

TOOL_SLUG = "purchasing-power"
TOOL_VERSION = "1"
MAX_YEARS = 30


@dataclass(frozen=True)
class PurchasingPowerForm:
    amount: str = "۱۰٬۰۰۰٬۰۰۰"
    inflation: str = "۳۵"
    years: str = "۵"


@dataclass(frozen=True)
class PurchasingPowerEstimate:
    result: PurchasingPowerResult
    summary: str
    saved: SaveToolRunResult | None = None


class EstimatePurchasingPowerUseCase:
    """Project purchasing power and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
    ) -> None:
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()

    def execute(self, form: PurchasingPowerForm) -> PurchasingPowerEstimate:
        """Project the amount forward.

        Amount and inflation are floored at 0; the horizon is clamped to
        1-30 years.
        """
        amount = max(0.0, parse_localized_number(form.amount))
        inflation = max(0.0, parse_localized_number(form.inflation))
        years = int(clamp(parse_localized_number(form.years), 1, MAX_YEARS))

        result = project_purchasing_power(amount, inflation, years)
        summary = (
            f"قدرت خرید تقریبی در سال {to_persian_digits(result.target_year)}: "
            f"حدود {to_persian_digits(format_compact_amount(result.value))}"
        )
        self._logger.info(
            f"Purchasing power projected: years={years}, "
            f"loss={result.loss_percent:.1f}%"
        )

        saved = None
        if self._saver is not None:
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=TOOL_VERSION,
                    raw_data={
                        "result": asdict(result),
                        "meta": {"schema": TOOL_RUN_SCHEMA, "toolVersion": 1},
                    },
                    summary=summary,
                )
            )
        return PurchasingPowerEstimate(result, summary, saved)


__all__ = [
    "EstimatePurchasingPowerUseCase",
    "PurchasingPowerForm",
    "PurchasingPowerEstimate",
]
