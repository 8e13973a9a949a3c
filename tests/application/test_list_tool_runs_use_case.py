"""Tests for ListToolRunsUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.list_tool_runs import ListToolRunsUseCase


def test_execute_strips_slug_and_clamps_limit() -> None:
    """The slug should be trimmed and the limit bounded to 500."""
    repository = MagicMock()
    repository.fetch_recent.return_value = ["run"]
    use_case = ListToolRunsUseCase(repository, logger=MagicMock())

    result = use_case.execute(tool_slug="  loan ", limit=10_000)

    assert result == ["run"]
    repository.fetch_recent.assert_called_once_with(tool_slug="loan", limit=500)


def test_execute_blank_slug_lists_everything() -> None:
    """A blank slug and a non-positive limit should be normalized."""
    repository = MagicMock()
    repository.fetch_recent.return_value = []
    use_case = ListToolRunsUseCase(repository, logger=MagicMock())

    use_case.execute(tool_slug="   ", limit=0)

    repository.fetch_recent.assert_called_once_with(tool_slug=None, limit=1)
