"""SQLAlchemy-backed repository for calculator runs.

The ``tool_runs`` table is owned by the surrounding application; this module
only reads and writes rows with the columns below::

    id TEXT PRIMARY KEY, tool_slug TEXT, tool_name TEXT, version TEXT,
    raw_data TEXT (JSON), summary TEXT, created_at TIMESTAMP
"""

from datetime import datetime, timezone
import json
import uuid

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.tool_run_repository import ToolRunRepositoryPort
from src.domain.models.tool_run import StoredToolRun, ToolRunRecord

INSERT_TOOL_RUN_SQL = text(
    """
    INSERT INTO tool_runs (
        id,
        tool_slug,
        tool_name,
        version,
        raw_data,
        summary,
        created_at
    )
    VALUES (
        :id,
        :tool_slug,
        :tool_name,
        :version,
        :raw_data,
        :summary,
        :created_at
    )
    """
)


class SqlAlchemyToolRunRepository(ToolRunRepositoryPort):
    """Repository storing tool runs through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tool-runs engine.
        """
        self._db_port = db_port

    def save(self, record: ToolRunRecord) -> str:
        """Insert ``record`` and return its generated id."""
        run_id = uuid.uuid4().hex
        params = {
            "id": run_id,
            "tool_slug": record.tool_slug,
            "tool_name": record.tool_name,
            "version": str(record.version),
            "raw_data": json.dumps(record.raw_data, ensure_ascii=False),
            "summary": record.summary,
            "created_at": datetime.now(timezone.utc),
        }
        engine = self._db_port.get_tool_runs_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_TOOL_RUN_SQL, params)
        return run_id

    def fetch_recent(
        self,
        tool_slug: str | None = None,
        limit: int = 50,
    ) -> list[StoredToolRun]:
        """Return the newest runs, optionally for one calculator."""
        query = self._build_query(tool_slug)
        params: dict[str, object] = {"limit": int(limit)}
        if tool_slug:
            params["tool_slug"] = tool_slug

        engine = self._db_port.get_tool_runs_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            StoredToolRun(
                id=str(row.id),
                tool_slug=row.tool_slug,
                tool_name=row.tool_name,
                version=str(row.version),
                summary=row.summary,
                created_at=self._coerce_datetime(row.created_at),
                raw_data=self._coerce_json(row.raw_data),
            )
            for row in rows
        ]

    @staticmethod
    def _build_query(tool_slug: str | None):
        base_sql = """
        SELECT id, tool_slug, tool_name, version, raw_data, summary, created_at
        FROM tool_runs
        WHERE 1=1
        """
        if tool_slug:
            base_sql += " AND tool_slug = :tool_slug"
        base_sql += " ORDER BY created_at DESC LIMIT :limit"
        return text(base_sql)

    @staticmethod
    def _coerce_json(value):
        """Decode JSON text; drivers with native JSON return dicts already."""
        if value is None or isinstance(value, dict):
            return value
        return json.loads(value)

    @staticmethod
    def _coerce_datetime(value) -> datetime:
        if isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value))


__all__ = ["SqlAlchemyToolRunRepository", "INSERT_TOOL_RUN_SQL"]
