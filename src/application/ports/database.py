"""Database ports for the calculators.

This module defines the application-layer protocol for accessing the
database engine that stores tool runs. Infrastructure implementations are
expected to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the tool-runs database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_tool_runs_engine(self) -> Engine:
        """Get the engine for the tool-runs database.

        Returns:
            Engine: SQLAlchemy engine connected to the tool-runs store.
        """


__all__ = ["DatabaseEnginePort"]
