"""Domain models for stored calculator runs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ToolRunRecord:
    """A calculator run ready to be stored.

    Attributes:
        tool_slug: Calculator identifier such as ``loan``.
        tool_name: Display name of the calculator.
        version: Engine or payload version.
        raw_data: JSON-serialisable inputs and outputs.
        summary: Short human-readable outcome.
    """

    tool_slug: str
    tool_name: str
    version: str
    raw_data: dict[str, Any]
    summary: str


@dataclass(frozen=True)
class StoredToolRun:
    """A calculator run read back from the store."""

    id: str
    tool_slug: str
    tool_name: str
    version: str
    summary: str
    created_at: datetime
    raw_data: dict[str, Any] | None = None


@dataclass(frozen=True)
class SaveToolRunResult:
    """Outcome of a save attempt; ``reason`` is set when ``ok`` is False."""

    ok: bool
    id: str | None = None
    reason: str | None = None


__all__ = ["ToolRunRecord", "StoredToolRun", "SaveToolRunResult"]
