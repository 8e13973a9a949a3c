"""CLI adapter listing recently stored calculator runs.

The optional ``TOOL_RUNS_SLUG`` environment variable filters by calculator
and ``TOOL_RUNS_LIMIT`` bounds the number of rows (default 50).
"""

import os

from src.application.use_cases.list_tool_runs import (
    DEFAULT_LIMIT,
    ListToolRunsUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.tool_run_repository import SqlAlchemyToolRunRepository


def _read_limit(logger) -> int:
    raw = os.getenv("TOOL_RUNS_LIMIT", "").strip()
    if not raw:
        return DEFAULT_LIMIT
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer TOOL_RUNS_LIMIT={raw!r}")
        return DEFAULT_LIMIT


def main() -> None:
    """List stored tool runs, newest first."""
    logger = get_app_logger()
    repository = SqlAlchemyToolRunRepository(SqlAlchemyDatabaseEngineAdapter())
    use_case = ListToolRunsUseCase(repository=repository, logger=logger)

    runs = use_case.execute(
        tool_slug=os.getenv("TOOL_RUNS_SLUG"),
        limit=_read_limit(logger),
    )

    if not runs:
        print("No tool runs stored.")
        return
    for run in runs:
        print(
            f"{run.created_at:%Y-%m-%d %H:%M} | {run.tool_slug} | "
            f"v{run.version} | {run.summary}"
        )
    print(f"{len(runs)} tool runs listed.")


if __name__ == "__main__":  # pragma: no cover
    main()
