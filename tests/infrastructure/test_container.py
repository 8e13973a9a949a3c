"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.save_tool_run import SaveToolRunUseCase
from src.infrastructure import container
from src.infrastructure.settings import TakhminoSettings
from src.infrastructure.tool_run_repository import SqlAlchemyToolRunRepository


def test_tool_run_repository_disabled_by_default():
    """A disabled backend should produce no repository."""
    settings = TakhminoSettings(tool_runs_backend="disabled")

    assert container.build_tool_run_repository(settings=settings) is None


def test_tool_run_repository_uses_sqlalchemy_backend():
    """The sqlalchemy backend should wrap the given database port."""
    port = object()
    settings = TakhminoSettings(tool_runs_backend="sqlalchemy")

    repository = container.build_tool_run_repository(
        db_port=port,
        settings=settings,
    )

    assert isinstance(repository, SqlAlchemyToolRunRepository)
    assert repository._db_port is port


def test_build_tool_run_saver_wraps_repository(monkeypatch):
    """The saver should keep the repository it was given."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()

    saver = container.build_tool_run_saver(repository=repository)

    assert isinstance(saver, SaveToolRunUseCase)
    assert saver._repository is repository


def test_build_project_gold_goal_applies_settings(monkeypatch):
    """Range runs, seed and locale should come from settings."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = TakhminoSettings(locale="en", range_runs=12, random_seed=3)

    use_case = container.build_project_gold_goal(settings=settings)

    assert use_case._range_runs == 12
    assert use_case._random_seed == 3
    assert use_case._locale == "en"
    assert use_case._saver._repository is None


def test_build_list_tool_runs_uses_given_port():
    """The listing use case should read through the provided port."""
    port = object()

    use_case = container.build_list_tool_runs(db_port=port)

    assert use_case._repository._db_port is port


def test_build_assess_financial_taste_wires_saver(monkeypatch):
    """The questionnaire use case should save through the configured saver."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = TakhminoSettings(tool_runs_backend="disabled")

    use_case = container.build_assess_financial_taste(settings=settings)

    assert isinstance(use_case._saver, SaveToolRunUseCase)
    assert use_case._saver._repository is None
