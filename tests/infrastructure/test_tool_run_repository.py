"""Tests for the SQLAlchemy tool-run repository."""

from datetime import datetime
import json
from types import SimpleNamespace

from src.domain.models.tool_run import ToolRunRecord
from src.infrastructure.tool_run_repository import (
    INSERT_TOOL_RUN_SQL,
    SqlAlchemyToolRunRepository,
)


class _Result:
    def __init__(self, rows) -> None:
        self._rows = rows

    def all(self):
        return self._rows


class _DummyConnection:
    def __init__(self, rows=None) -> None:
        self.rows = rows or []
        self.calls: list[tuple] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, statement, params=None):
        self.calls.append((statement, params))
        return _Result(self.rows)


class _DummyEngine:
    def __init__(self, rows=None) -> None:
        self.connection = _DummyConnection(rows)
        self.began = False

    def begin(self):
        self.began = True
        return self.connection

    def connect(self):
        return self.connection


class _Port:
    def __init__(self, engine) -> None:
        self.engine = engine

    def get_tool_runs_engine(self):
        return self.engine


def test_save_inserts_row_inside_transaction():
    """save should insert one row and return its generated id."""
    engine = _DummyEngine()
    repository = SqlAlchemyToolRunRepository(_Port(engine))
    record = ToolRunRecord(
        tool_slug="loan",
        tool_name="محاسبه قسط وام",
        version=1,
        raw_data={"inputs": {"amount": 1000}, "note": "وام"},
        summary="قسط ماهانه",
    )

    run_id = repository.save(record)

    assert engine.began is True
    statement, params = engine.connection.calls[0]
    assert statement is INSERT_TOOL_RUN_SQL
    assert params["id"] == run_id
    assert len(run_id) == 32
    assert params["version"] == "1"
    assert params["tool_slug"] == "loan"
    assert "وام" in params["raw_data"]
    assert json.loads(params["raw_data"]) == record.raw_data
    assert params["created_at"].tzinfo is not None


def test_fetch_recent_maps_rows_and_filters_by_slug():
    """fetch_recent should bind the slug filter and decode JSON payloads."""
    row = SimpleNamespace(
        id="abc",
        tool_slug="home-buy",
        tool_name="خانه",
        version=1,
        raw_data='{"result": {"months": 12}}',
        summary="summary",
        created_at="2025-03-01T10:30:00",
    )
    engine = _DummyEngine([row])
    repository = SqlAlchemyToolRunRepository(_Port(engine))

    runs = repository.fetch_recent(tool_slug="home-buy", limit=5)

    statement, params = engine.connection.calls[0]
    assert "tool_slug = :tool_slug" in str(statement)
    assert params == {"limit": 5, "tool_slug": "home-buy"}
    assert len(runs) == 1
    assert runs[0].version == "1"
    assert runs[0].raw_data == {"result": {"months": 12}}
    assert runs[0].created_at == datetime(2025, 3, 1, 10, 30)


def test_fetch_recent_without_slug_keeps_native_values():
    """Without a slug there is no filter; dict and datetime pass through."""
    created = datetime(2025, 1, 1, 8, 0)
    row = SimpleNamespace(
        id=7,
        tool_slug="loan",
        tool_name="وام",
        version="1",
        raw_data={"ok": True},
        summary="s",
        created_at=created,
    )
    engine = _DummyEngine([row])
    repository = SqlAlchemyToolRunRepository(_Port(engine))

    runs = repository.fetch_recent()

    statement, params = engine.connection.calls[0]
    assert "tool_slug = :tool_slug" not in str(statement)
    assert params == {"limit": 50}
    assert runs[0].id == "7"
    assert runs[0].raw_data == {"ok": True}
    assert runs[0].created_at is created
