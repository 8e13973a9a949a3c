"""Settings helpers for the calculators and their adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from src.domain.constants import DEFAULT_RANGE_RUNS
from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_LOCALES = ("fa", "en")
SUPPORTED_BACKENDS = ("sqlalchemy", "disabled")
MAX_RANGE_RUNS = 1000


@dataclass(frozen=True)
class TakhminoSettings:
    """Runtime settings sourced from the environment.

    Attributes:
        locale: Display locale (fa or en).
        range_runs: Randomized runs behind the gold goal range.
        random_seed: Optional seed for reproducible ranges.
        tool_runs_backend: Tool-run storage backend (sqlalchemy or disabled).
    """

    locale: str = "fa"
    range_runs: int = DEFAULT_RANGE_RUNS
    random_seed: Optional[int] = None
    tool_runs_backend: str = "disabled"

    @classmethod
    def from_env(cls) -> "TakhminoSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by their defaults.

        Returns:
            TakhminoSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()

        locale = os.getenv("TAKHMINO_LOCALE", "fa").strip().lower()
        if locale not in SUPPORTED_LOCALES:
            logger.warning(f"Unsupported TAKHMINO_LOCALE={locale!r}; using fa")
            locale = "fa"

        backend = os.getenv("TOOL_RUNS_BACKEND", "disabled").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unsupported TOOL_RUNS_BACKEND={backend!r}; storage disabled"
            )
            backend = "disabled"

        range_runs = cls._parse_int(
            os.getenv("TAKHMINO_RANGE_RUNS"),
            "TAKHMINO_RANGE_RUNS",
            logger,
        )
        if range_runs is None or not 1 <= range_runs <= MAX_RANGE_RUNS:
            if range_runs is not None:
                logger.warning(
                    f"TAKHMINO_RANGE_RUNS must be 1-{MAX_RANGE_RUNS}; "
                    f"using {DEFAULT_RANGE_RUNS}"
                )
            range_runs = DEFAULT_RANGE_RUNS

        random_seed = cls._parse_int(
            os.getenv("TAKHMINO_RANDOM_SEED"),
            "TAKHMINO_RANDOM_SEED",
            logger,
        )
        return cls(
            locale=locale,
            range_runs=range_runs,
            random_seed=random_seed,
            tool_runs_backend=backend,
        )

    @staticmethod
    def _parse_int(raw: Optional[str], name: str, logger) -> Optional[int]:
        """Parse an optional integer environment value.

        Args:
            raw: Raw value or None.
            name: Variable name used in warnings.
            logger: Logger used for warnings.

        Returns:
            Optional[int]: Parsed value, or None when unset or invalid.
        """
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Ignoring non-integer {name}={raw!r}")
            return None


__all__ = ["TakhminoSettings"]
