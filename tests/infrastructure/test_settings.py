"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import TakhminoSettings


@pytest.fixture
def fake_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "TAKHMINO_LOCALE",
        "TOOL_RUNS_BACKEND",
        "TAKHMINO_RANGE_RUNS",
        "TAKHMINO_RANDOM_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults(fake_logger) -> None:
    """Unset variables should fall back to the defaults."""
    settings = TakhminoSettings.from_env()

    assert settings == TakhminoSettings()
    assert settings.tool_runs_backend == "disabled"
    fake_logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, fake_logger) -> None:
    """Valid values should be parsed and normalized."""
    monkeypatch.setenv("TAKHMINO_LOCALE", " EN ")
    monkeypatch.setenv("TOOL_RUNS_BACKEND", "SQLAlchemy")
    monkeypatch.setenv("TAKHMINO_RANGE_RUNS", "120")
    monkeypatch.setenv("TAKHMINO_RANDOM_SEED", "42")

    settings = TakhminoSettings.from_env()

    assert settings.locale == "en"
    assert settings.tool_runs_backend == "sqlalchemy"
    assert settings.range_runs == 120
    assert settings.random_seed == 42


def test_from_env_warns_on_invalid_values(monkeypatch, fake_logger) -> None:
    """Unsupported or malformed values should be logged and replaced."""
    monkeypatch.setenv("TAKHMINO_LOCALE", "de")
    monkeypatch.setenv("TOOL_RUNS_BACKEND", "redis")
    monkeypatch.setenv("TAKHMINO_RANGE_RUNS", "5000")
    monkeypatch.setenv("TAKHMINO_RANDOM_SEED", "abc")

    settings = TakhminoSettings.from_env()

    assert settings.locale == "fa"
    assert settings.tool_runs_backend == "disabled"
    assert settings.range_runs == 30
    assert settings.random_seed is None
    assert fake_logger.warning.call_count == 4
