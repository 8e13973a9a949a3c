"""Tests for EstimateHomeBuyUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.estimate_home_buy import (
    EstimateHomeBuyUseCase,
    HomeBuyForm,
)
from src.domain.models.tool_run import SaveToolRunResult
from src.domain.services.home_buy import PRICE_ERROR


class _FakeSaver:
    def __init__(self) -> None:
        self.records = []

    def execute(self, record):
        self.records.append(record)
        return SaveToolRunResult(ok=True, id="home-1")


def test_execute_estimates_and_saves() -> None:
    """A valid form should render the duration and store the run."""
    saver = _FakeSaver()
    use_case = EstimateHomeBuyUseCase(saver, logger=MagicMock())

    estimate = use_case.execute(
        HomeBuyForm(
            price="۳۰٬۰۰۰",
            savings="0",
            monthly_saving="1000",
            income="1000",
        )
    )

    assert estimate.result.months == 30
    assert estimate.display == "حدود ۳ سال"
    assert estimate.income_range.base.months == 100
    assert estimate.saved.id == "home-1"
    assert saver.records[0].summary == "زمان تقریبی خرید خانه: حدود ۳ سال"


def test_execute_reports_error_without_saving() -> None:
    """Invalid input should return the error and skip saving."""
    saver = _FakeSaver()
    logger = MagicMock()
    use_case = EstimateHomeBuyUseCase(saver, logger=logger, locale="en")

    estimate = use_case.execute(HomeBuyForm(price="", savings="10"))

    assert estimate.result.error == PRICE_ERROR
    assert estimate.display is None
    assert estimate.income_range is None
    assert saver.records == []
    logger.warning.assert_called_once()
