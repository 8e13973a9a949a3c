"""Use case for the financial taste questionnaire."""

from dataclasses import asdict, dataclass, field

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.domain.constants import TOOL_NAMES, TOOL_RUN_SCHEMA
from src.domain.models.financial_taste import (
    FinancialTasteInput,
    FinancialTasteOutput,
)
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.domain.services.financial_taste import (
    CONFIDENCE_LABELS,
    ENGINE_VERSION,
    PROFILE_COPY,
    assess_financial_taste,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.numbers import parse_localized_number, round_half_up

TOOL_SLUG = "financial-taste"


@dataclass(frozen=True)
class FinancialTasteForm:
    """Raw questionnaire answers.

    ``answers`` maps question numbers (int or text) to the chosen option
    (int or localized text); ``q32_selected`` holds the motivation keys.
    """

    answers: dict = field(default_factory=dict)
    q32_selected: tuple[str, ...] = ()


@dataclass(frozen=True)
class FinancialTasteAssessment:
    output: FinancialTasteOutput | None
    answered: int
    summary: str | None = None
    saved: SaveToolRunResult | None = None


def parse_answers(raw_answers: dict) -> dict[int, int]:
    """Convert form answers to whole option numbers, dropping blanks."""
    answers = {}
    for question, raw in (raw_answers or {}).items():
        question_id = round_half_up(parse_localized_number(question))
        value = round_half_up(parse_localized_number(raw))
        if question_id > 0 and value > 0:
            answers[question_id] = value
    return answers


def build_summary_text(output: FinancialTasteOutput) -> str:
    dominant = output.profiles.dominant
    intro = PROFILE_COPY.get(dominant.key, ("",))[0]
    flags = "، ".join(flag.title for flag in output.highlighted_flags) or "ندارد"
    return (
        f"ذائقه مالی: {dominant.title} | "
        f"اطمینان: {CONFIDENCE_LABELS[output.profiles.confidence]} | "
        f"{intro} | هشدارها: {flags}"
    )


def build_raw_data(
    answers: dict[int, int],
    q32_selected: tuple[str, ...],
    output: FinancialTasteOutput,
) -> dict:
    return {
        "inputs": {
            "answers": {str(key): value for key, value in sorted(answers.items())},
            "q32Selected": list(q32_selected),
        },
        "result": {
            "axes": output.axes,
            "composite": asdict(output.composite),
            "dominant": asdict(output.profiles.dominant),
            "secondary": [asdict(item) for item in output.profiles.secondary],
            "confidence": output.profiles.confidence,
            "flags": [
                {"key": flag.key, "score": flag.score, "level": flag.level}
                for flag in output.flags
            ],
        },
        "meta": {"schema": TOOL_RUN_SCHEMA, "engineVersion": ENGINE_VERSION},
    }


class AssessFinancialTasteUseCase:
    """Score the questionnaire and record the run."""

    def __init__(
        self,
        tool_run_saver: SaveToolRunUseCase | None = None,
        logger=None,
    ) -> None:
        self._saver = tool_run_saver
        self._logger = logger or get_app_logger()

    def execute(self, form: FinancialTasteForm) -> FinancialTasteAssessment:
        """Score ``form``; an empty questionnaire is neither scored nor saved."""
        answers = parse_answers(form.answers)
        q32_selected = tuple(form.q32_selected or ())
        answered = len(answers) + (1 if q32_selected else 0)
        if answered == 0:
            self._logger.debug("Financial taste skipped: no answers")
            return FinancialTasteAssessment(output=None, answered=0)

        output = assess_financial_taste(
            FinancialTasteInput(answers=answers, q32_selected=q32_selected)
        )
        summary = build_summary_text(output)
        self._logger.info(
            f"Financial taste assessed: answered={answered}, "
            f"dominant={output.profiles.dominant.key}, "
            f"flags={[flag.key for flag in output.highlighted_flags]}"
        )

        saved = None
        if self._saver is not None:
            saved = self._saver.execute(
                ToolRunRecord(
                    tool_slug=TOOL_SLUG,
                    tool_name=TOOL_NAMES[TOOL_SLUG],
                    version=ENGINE_VERSION,
                    raw_data=build_raw_data(answers, q32_selected, output),
                    summary=summary,
                )
            )
        return FinancialTasteAssessment(output, answered, summary, saved)


__all__ = [
    "AssessFinancialTasteUseCase",
    "FinancialTasteAssessment",
    "FinancialTasteForm",
    "build_summary_text",
    "parse_answers",
]
