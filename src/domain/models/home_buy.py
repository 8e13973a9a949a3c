"""Domain models for the home purchase timeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HomeBuyResult:
    """Months until savings cover the home price.

    ``months`` is ``None`` when the inputs are invalid or no progress is
    possible; ``error`` then carries the message shown to the user.
    """

    months: int | None
    remaining: float
    error: str | None = None


@dataclass(frozen=True)
class HomeBuyRange:
    """Timelines when saving different shares of monthly income."""

    base: HomeBuyResult
    slow: HomeBuyResult
    fast: HomeBuyResult


__all__ = ["HomeBuyResult", "HomeBuyRange"]
