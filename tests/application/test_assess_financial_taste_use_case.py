"""Tests for AssessFinancialTasteUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.assess_financial_taste import (
    AssessFinancialTasteUseCase,
    FinancialTasteForm,
    parse_answers,
)
from src.domain.models.tool_run import SaveToolRunResult


class _FakeSaver:
    def __init__(self) -> None:
        self.records = []

    def execute(self, record):
        self.records.append(record)
        return SaveToolRunResult(ok=True, id="taste-1")


def test_parse_answers_accepts_localized_text() -> None:
    """Persian digits are parsed and blank or invalid answers dropped."""
    assert parse_answers({"۲": "۴", "6": "۱", "7": "", "x": "3", 9: 2}) == {
        2: 4,
        6: 1,
        9: 2,
    }


def test_execute_scores_and_saves() -> None:
    """A filled questionnaire should be scored and stored with its answers."""
    saver = _FakeSaver()
    use_case = AssessFinancialTasteUseCase(saver, logger=MagicMock())

    assessment = use_case.execute(
        FinancialTasteForm(
            answers={"۲": "۴", "6": "۱"},
            q32_selected=("security",),
        )
    )

    assert assessment.answered == 3
    assert assessment.saved.id == "taste-1"
    assert assessment.output.axes["money_motivation"] == 75
    assert "عدم‌تناسب تحمل و ظرفیت ریسک" in assessment.summary
    record = saver.records[0]
    assert record.tool_slug == "financial-taste"
    assert record.tool_name == "ذائقه مالی"
    assert record.version == "v1"
    assert record.summary == assessment.summary
    assert record.raw_data["inputs"] == {
        "answers": {"2": 4, "6": 1},
        "q32Selected": ["security"],
    }
    assert record.raw_data["result"]["flags"][0] == {
        "key": "risk_mismatch",
        "score": 100,
        "level": "high",
    }


def test_execute_skips_empty_questionnaire() -> None:
    """No answers means nothing to score or save."""
    saver = _FakeSaver()
    logger = MagicMock()
    use_case = AssessFinancialTasteUseCase(saver, logger=logger)

    assessment = use_case.execute(FinancialTasteForm())

    assert assessment.output is None
    assert assessment.answered == 0
    assert saver.records == []
    logger.debug.assert_called_once()
