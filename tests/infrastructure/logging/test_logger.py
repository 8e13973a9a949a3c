"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_subdir(tmp_path, monkeypatch):
    """The builder should log to logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250321"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("takhmino.test.builder")
        .subdir("tools")
        .prefix("tool_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "tools" / "20250321_tool_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    assert builder.build() is built
    for handler in built.handlers:
        handler.close()
    built.handlers.clear()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honored."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("takhmino.test.factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["formatter"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "app"
    built.handlers.clear()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "calc.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_delegates_every_level(monkeypatch):
    """Each level method should forward to the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("takhmino")
    for level in ("info", "warning", "error", "debug", "critical"):
        getattr(wrapper, level)(f"{level} message")
        getattr(fake_logger, level).assert_called_with(f"{level} message")

    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_use_their_own_files(monkeypatch):
    """App and usage loggers should be separate singletons and log dirs."""
    configs = []

    def _fake_build(self):
        configs.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert configs == [
        ("takhmino.app", "app", "app_logs"),
        ("takhmino.usage", "usage", "usage_logs"),
    ]
