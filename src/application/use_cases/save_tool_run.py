"""Use case for recording a calculator run.

Saving is best-effort: a failed save must never break the calculation that
produced it, so every outcome is reported through ``SaveToolRunResult``.
"""

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.tool_run_repository import ToolRunRepositoryPort
from src.domain.models.tool_run import SaveToolRunResult, ToolRunRecord
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class SaveToolRunUseCase:
    """Persist a tool run and report the outcome without raising."""

    def __init__(
        self,
        repository: ToolRunRepositoryPort | None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Tool-run store, or None when storage is disabled.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving one line per run.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, record: ToolRunRecord) -> SaveToolRunResult:
        """Store ``record``.

        Args:
            record: Run to store.

        Returns:
            SaveToolRunResult: ``ok`` with the new id, or a ``reason`` of
            ``invalid``, ``disabled`` or ``server``.
        """
        if not record.tool_slug or not record.tool_name:
            self._logger.warning("Tool run rejected: missing slug or name")
            return SaveToolRunResult(ok=False, reason="invalid")

        self._usage_logger.info(f"{record.tool_slug} | {record.summary}")

        if self._repository is None:
            self._logger.debug(
                f"Tool run storage disabled; {record.tool_slug} not saved"
            )
            return SaveToolRunResult(ok=False, reason="disabled")

        try:
            run_id = self._repository.save(record)
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Failed to save {record.tool_slug} tool run: {exc}"
            )
            return SaveToolRunResult(ok=False, reason="server")

        self._logger.info(f"Saved {record.tool_slug} tool run {run_id}")
        return SaveToolRunResult(ok=True, id=run_id)


__all__ = ["SaveToolRunUseCase", "SaveToolRunResult"]
