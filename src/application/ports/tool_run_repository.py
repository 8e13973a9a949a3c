"""Port for persisting calculator runs."""

from typing import Protocol

from src.domain.models.tool_run import StoredToolRun, ToolRunRecord


class ToolRunRepositoryPort(Protocol):
    """Port for storing and listing tool runs."""

    def save(self, record: ToolRunRecord) -> str:
        """Persist a tool run.

        Args:
            record: Run to store.

        Returns:
            str: Identifier of the stored run.
        """

    def fetch_recent(
        self,
        tool_slug: str | None = None,
        limit: int = 50,
    ) -> list[StoredToolRun]:
        """Return the most recent runs, newest first.

        Args:
            tool_slug: Optional calculator filter.
            limit: Maximum number of runs.

        Returns:
            list[StoredToolRun]: Stored runs.
        """


__all__ = ["ToolRunRepositoryPort"]
