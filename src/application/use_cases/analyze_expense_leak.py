"""Use case for the expense leak analysis."""

from dataclasses import dataclass

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import TOOL_NAMES
from src.domain.models.expense import ExpenseInput, ExpenseOutput
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.services.expense_leak import (
    ENGINE_VERSION,
    analyze,
    build_tool_run_raw_data,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import (
    format_grouped_number,
    round_half_up,
    to_persian_digits,
)

TOOL_SLUG = "expense-leak"


@dataclass(frozen=True)
class ExpenseLeakAnalysis:
    output: ExpenseOutput
    summary: str
    saved: SaveToolRunResult | None = None


def build_summary_text(output: ExpenseOutput) -> str:
    """Return the one-line Persian summary stored with the run."""
    summary = output.summary

    def money(value: float) -> str:
        return format_grouped_number(round_half_up(value))

    return (
        f"درآمد: {money(summary.income)} تومان | "
        f"کل هزینه‌ها: {money(summary.total_expenses)} تومان | "
        f"تراز: {money(summary.balance)} تومان | "
        f"نمره سلامت مالی: {to_persian_digits(output.health.score)}"
    )


class AnalyzeExpenseLeakUseCase:
    """Analyze a monthly budget and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
    ) -> None:
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()

    def execute(self, data: ExpenseInput) -> ExpenseLeakAnalysis:
        """Run the analysis.

        Args:
            data: Budget input.

        Returns:
            ExpenseLeakAnalysis: Engine output, summary text and save result.
        """
        output = analyze(data)
        summary = build_summary_text(output)
        self._logger.info(
            f"Expense leak analyzed: score={output.health.score}, "
            f"leaks={[leak.category_id for leak in output.leaks]}"
        )

        saved = None
        if self._saver is not None:
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=ENGINE_VERSION,
                    raw_data=build_tool_run_raw_data(output),
                    summary=summary,
                )
            )
        return ExpenseLeakAnalysis(output=output, summary=summary, saved=saved)


__all__ = [
    "AnalyzeExpenseLeakUseCase",
    "ExpenseLeakAnalysis",
    "build_summary_text",
]
