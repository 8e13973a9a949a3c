"""SQLAlchemy engine for the ``tool_runs`` store.

``TOOL_RUNS_DB_URL`` (read from the environment or a ``.env`` file) points
at the database shared with the surrounding application. A single pooled
engine is created on first use.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

TOOL_RUNS_DB_URL_ENV = "TOOL_RUNS_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the tool-runs engine.

    Server databases get a small ``QueuePool`` with pre-ping, since runs are
    written from short Streamlit reruns. SQLite keeps SQLAlchemy's default
    pool and may be used across Streamlit's script threads.
    """
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_tool_runs_engine: Optional[Engine] = None


def get_tool_runs_engine() -> Engine:
    """Return the shared tool-runs engine, creating it on first call."""
    global _tool_runs_engine
    if _tool_runs_engine is None:
        db_url = _get_env_var(TOOL_RUNS_DB_URL_ENV)
        _tool_runs_engine = _create_engine(db_url)
    return _tool_runs_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the module-level engine through ``DatabaseEnginePort``."""

    def get_tool_runs_engine(self) -> Engine:
        return get_tool_runs_engine()


__all__ = [
    "TOOL_RUNS_DB_URL_ENV",
    "get_tool_runs_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
