"""Tests for ProjectGoldGoalUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.project_gold_goal import (
    GoldGoalForm,
    ProjectGoldGoalUseCase,
    parameters_from_form,
)
from src.domain.models.tool_run import SaveToolRunResult


class _FakeSaver:
    def __init__(self) -> None:
        self.records = []

    def execute(self, record):
        self.records.append(record)
        return SaveToolRunResult(ok=True, id="gold-1")


def _flat_form(**overrides) -> GoldGoalForm:
    values = {
        "target": "۱٬۰۰۰",
        "current_grams": "0",
        "monthly_saving_grams": "1",
        "gold_price": "100",
        "usd_growth": "0",
        "gold_growth": "0",
        "inflation": "0",
        "bank_rate": "0",
        "buy_tax": "0",
        "sell_fee": "0",
        "storage": "0",
        "volatility": "0",
    }
    values.update(overrides)
    return GoldGoalForm(**values)


def test_parameters_from_form_clamps_percentages() -> None:
    """Cost percentages are clamped and grams cannot go negative."""
    params = parameters_from_form(
        GoldGoalForm(
            target="1000",
            current_grams="-5",
            gold_price="100",
            sell_fee="150",
            shock="400",
            achievement_rate="-10",
        )
    )

    assert params.current_grams == 0
    assert params.sell_fee == 100
    assert params.shock == 300
    assert params.achievement_rate == 0
    assert params.storage == 0.8
    assert params.buy_tax == 9


def test_execute_projects_and_saves() -> None:
    """A started projection should render durations and save the run."""
    saver = _FakeSaver()
    use_case = ProjectGoldGoalUseCase(
        saver,
        logger=MagicMock(),
        range_runs=5,
        random_seed=1,
    )

    projection = use_case.execute(_flat_form())

    assert projection.result.base.months == 10
    assert projection.headline == "حدود ۱۰ ماه"
    assert projection.range_text == "حدود ۱۰ ماه"
    assert projection.saved.id == "gold-1"
    record = saver.records[0]
    assert record.tool_slug == "gold-goal"
    assert record.summary == (
        "زمان رسیدن به هدف طلا: حدود ۱۰ ماه. بازه: حدود ۱۰ ماه."
    )
    assert record.raw_data["result"]["base"]["months"] == 10


def test_execute_without_range_uses_english_locale() -> None:
    """The locale should drive the headline and no range is built."""
    use_case = ProjectGoldGoalUseCase(logger=MagicMock(), locale="en")

    projection = use_case.execute(_flat_form(enable_range=False))

    assert projection.headline == "~10 months"
    assert projection.range_text is None
    assert projection.saved is None


def test_execute_not_started_skips_saving() -> None:
    """Missing price or target should not be stored."""
    saver = _FakeSaver()
    use_case = ProjectGoldGoalUseCase(saver, logger=MagicMock())

    projection = use_case.execute(GoldGoalForm(target="1000"))

    assert projection.result.has_started is False
    assert projection.saved is None
    assert saver.records == []
