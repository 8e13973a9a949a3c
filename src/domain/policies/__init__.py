"""Domain policies package."""

from .display import format_month_range, format_months_result

__all__ = ["format_month_range", "format_months_result"]
