"""Use case for the loan installment calculator."""

from dataclasses import dataclass

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import TOOL_NAMES, TOOL_RUN_SCHEMA
from src.domain.models.loan import LoanPreset, LoanSchedule
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.services.amortization import (
    compute_schedule,
    find_loan_preset,
    term_in_months,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import (
    format_grouped_number,
    parse_localized_number,
    round_half_up,
    to_persian_digits,
)

TOOL_SLUG = "loan"
TOOL_VERSION = "1"
PREVIEW_ROWS = 12


@dataclass(frozen=True)
class LoanForm:
    """Raw loan form input.

    Attributes:
        preset_key: Loan product key, see ``LOAN_PRESETS``.
        amount: Localized loan amount text.
        rate: Localized annual rate text; empty uses the preset default.
        duration: Localized duration text; empty uses the preset default.
        duration_unit: ``month`` or ``year``.
        fee_method: Fee allocation for benevolent loans.
    """

    preset_key: str = "gharz"
    amount: str = ""
    rate: str = ""
    duration: str = ""
    duration_unit: str = "month"
    fee_method: str = "annual-first"


@dataclass(frozen=True)
class LoanCalculation:
    preset: LoanPreset
    amount: float
    annual_rate: float
    months: int
    fee_method: str | None
    schedule: LoanSchedule
    summary: str
    saved: SaveToolRunResult | None = None


class CalculateLoanUseCase:
    """Compute a loan schedule from form input and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
    ) -> None:
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()

    def execute(self, form: LoanForm) -> LoanCalculation | None:
        """Return the loan schedule, or None when the input is unusable.

        Args:
            form: Raw form input.

        Returns:
            LoanCalculation | None: None for a non-positive amount or term,
            or a negative rate.
        """
        preset = find_loan_preset(form.preset_key)
        amount = parse_localized_number(form.amount)

        if form.rate.strip():
            rate = parse_localized_number(form.rate)
        else:
            rate = preset.annual_rate_percent

        if form.duration.strip():
            months = term_in_months(
                parse_localized_number(form.duration),
                form.duration_unit,
            )
        else:
            months = term_in_months(preset.term_value, preset.term_unit)

        if amount <= 0 or months <= 0 or rate < 0:
            self._logger.warning(
                f"Loan input rejected: amount={amount}, months={months}, "
                f"rate={rate}"
            )
            return None

        is_benevolent = preset.kind == "benevolent"
        fee_method = form.fee_method if is_benevolent else None
        schedule = compute_schedule(
            amount,
            rate,
            months,
            kind=preset.kind,
            fee_method=form.fee_method,
        )
        summary = self._build_summary(schedule, months, is_benevolent)
        self._logger.info(
            f"Loan schedule computed: preset={preset.key}, months={months}, "
            f"total_interest={schedule.total_interest:.0f}"
        )

        saved = None
        if self._saver is not None:
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=TOOL_VERSION,
                    raw_data=self._build_raw_data(
                        form, preset, amount, rate, months, fee_method, schedule
                    ),
                    summary=summary,
                )
            )

        return LoanCalculation(
            preset=preset,
            amount=amount,
            annual_rate=rate,
            months=months,
            fee_method=fee_method,
            schedule=schedule,
            summary=summary,
            saved=saved,
        )

    @staticmethod
    def _build_summary(
        schedule: LoanSchedule,
        months: int,
        is_benevolent: bool,
    ) -> str:
        interest_label = "کل کارمزد" if is_benevolent else "کل سود"
        installment = format_grouped_number(round_half_up(schedule.monthly_average))
        interest = format_grouped_number(round_half_up(schedule.total_interest))
        return (
            f"قسط ماهانه {installment} تومان. "
            f"مدت {to_persian_digits(months)} ماه. "
            f"{interest_label} {interest} تومان."
        )

    @staticmethod
    def _build_raw_data(
        form: LoanForm,
        preset: LoanPreset,
        amount: float,
        rate: float,
        months: int,
        fee_method: str | None,
        schedule: LoanSchedule,
    ) -> dict:
        return {
            "inputs": {
                "loanTypeId": preset.key,
                "loanTypeName": preset.label,
                "isGharz": preset.kind == "benevolent",
                "gharzMethod": fee_method,
                "amount": amount,
                "annualRate": rate,
                "durationValue": parse_localized_number(form.duration),
                "durationUnit": form.duration_unit,
                "months": months,
            },
            "result": {
                "monthlyAverage": schedule.monthly_average,
                "totalInterest": schedule.total_interest,
                "totalPayment": schedule.total_payment,
                "realRate": schedule.effective_rate_percent,
                "scheduleLength": len(schedule.schedule),
                "schedulePreview": [
                    {
                        "month": row.month,
                        "interest": row.interest,
                        "principal": row.principal,
                        "payment": row.payment,
                        "endBalance": row.end_balance,
                        "isFeeMonth": row.is_fee_month,
                    }
                    for row in schedule.schedule[:PREVIEW_ROWS]
                ],
            },
            "meta": {"schema": TOOL_RUN_SCHEMA, "toolVersion": 1},
        }


__all__ = ["CalculateLoanUseCase", "LoanForm", "LoanCalculation"]
