"""Use case to list recently stored calculator runs."""

from src.application.ports.tool_run_repository import ToolRunRepositoryPort
from src.domain.models.tool_run import StoredToolRun
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_LIMIT = 50
MAX_LIMIT = 500


class ListToolRunsUseCase:
    """Return the most recent tool runs, optionally for one calculator."""

    def __init__(self, repository: ToolRunRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        tool_slug: str | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[StoredToolRun]:
        """Fetch runs newest first.

        Args:
            tool_slug: Optional calculator filter; blank means all.
            limit: Maximum number of runs, clamped to 1-500.

        Returns:
            list[StoredToolRun]: Stored runs.
        """
        slug = tool_slug.strip() if tool_slug else None
        bounded = max(1, min(MAX_LIMIT, int(limit)))
        runs = self._repository.fetch_recent(tool_slug=slug or None, limit=bounded)
        self._logger.info(
            f"Listed {len(runs)} tool runs (slug={slug or 'all'}, limit={bounded})"
        )
        return runs


__all__ = ["ListToolRunsUseCase"]
