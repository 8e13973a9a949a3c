"""Tests for the check_tool_runs_db adapter."""

from src.adapters import check_tool_runs_db


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_logs_successful_check(monkeypatch):
    """The CLI should log the connection URL and execute SELECT 1."""
    engine = _DummyEngine("sqlite:///runs.db")

    class _Adapter:
        def get_tool_runs_engine(self):
            return engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        check_tool_runs_db,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        check_tool_runs_db,
        "get_app_logger",
        lambda: _Logger(),
    )

    check_tool_runs_db.main()

    assert "sqlite:///runs.db" in log_messages[0]
    assert log_messages[-1] == "Tool runs connection is working."
    assert engine.connection.executed == ["SELECT 1"]
