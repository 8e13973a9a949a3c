"""Tests for CalculateLoanUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.calculate_loan import (
    CalculateLoanUseCase,
    LoanForm,
)
from src.domain.models.tool_run import SaveToolRunResult


class _FakeSaver:
    def __init__(self) -> None:
        self.records = []

    def execute(self, record):
        self.records.append(record)
        return SaveToolRunResult(ok=True, id="run-1")


def test_execute_uses_preset_defaults() -> None:
    """Empty rate and duration should fall back to the preset."""
    saver = _FakeSaver()
    use_case = CalculateLoanUseCase(saver, logger=MagicMock())

    calculation = use_case.execute(
        LoanForm(preset_key="shakhsi", amount="۱۰۰٬۰۰۰٬۰۰۰")
    )

    assert calculation.amount == 100_000_000
    assert calculation.annual_rate == 23.0
    assert calculation.months == 60
    assert calculation.fee_method is None
    assert len(calculation.schedule.schedule) == 60
    assert calculation.saved.id == "run-1"
    assert "کل سود" in calculation.summary
    assert "۶۰ ماه" in calculation.summary


def test_execute_records_benevolent_run() -> None:
    """Benevolent loans should store the fee method and a schedule preview."""
    saver = _FakeSaver()
    use_case = CalculateLoanUseCase(saver, logger=MagicMock())

    calculation = use_case.execute(
        LoanForm(
            preset_key="gharz",
            amount="1,200,000",
            rate="4",
            duration="2",
            duration_unit="year",
            fee_method="annual-first",
        )
    )

    assert calculation.months == 24
    assert calculation.schedule.total_interest == pytest.approx(72_000)
    assert calculation.summary.startswith("قسط ماهانه ")
    assert "کل کارمزد ۷۲٬۰۰۰ تومان." in calculation.summary

    record = saver.records[0]
    assert record.tool_slug == "loan"
    assert record.raw_data["inputs"]["isGharz"] is True
    assert record.raw_data["inputs"]["gharzMethod"] == "annual-first"
    assert record.raw_data["inputs"]["months"] == 24
    assert len(record.raw_data["result"]["schedulePreview"]) == 12
    assert record.raw_data["meta"]["schema"] == "takhmino.toolrun.v1"


@pytest.mark.parametrize(
    "form",
    [
        LoanForm(amount=""),
        LoanForm(amount="1000", duration="0"),
        LoanForm(amount="1000", rate="-2"),
    ],
)
def test_execute_rejects_unusable_input(form) -> None:
    """Invalid forms should return None without saving."""
    saver = _FakeSaver()
    logger = MagicMock()
    use_case = CalculateLoanUseCase(saver, logger=logger)

    assert use_case.execute(form) is None
    assert saver.records == []
    logger.warning.assert_called_once()


def test_execute_without_saver() -> None:
    """A missing saver should still return the calculation."""
    use_case = CalculateLoanUseCase(logger=MagicMock())

    calculation = use_case.execute(LoanForm(preset_key="custom", amount="1200"))

    assert calculation.months == 12
    assert calculation.saved is None
    assert calculation.schedule.monthly_average == pytest.approx(100)
