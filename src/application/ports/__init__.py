"""Application ports package."""

from .database import DatabaseEnginePort
from .tool_run_repository import ToolRunRepositoryPort

__all__ = ["DatabaseEnginePort", "ToolRunRepositoryPort"]
