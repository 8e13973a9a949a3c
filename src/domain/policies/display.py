"""Display rules for "time to goal" results.

Durations under a year are shown in months. From twelve months on they are
shown in whole years, rounded up so a wait is never understated.
"""

import math

from src.utils.numbers import round_half_up, to_persian_digits

_TEXTS = {
    "fa": {
        "now": "همین الان",
        "very_long": "خیلی طولانی",
        "unknown": "—",
    },
    "en": {
        "now": "right now",
        "very_long": "very long",
        "unknown": "—",
    },
}


def _texts(locale: str) -> dict[str, str]:
    return _TEXTS.get(locale, _TEXTS["en"])


def _months_text(count: int, locale: str) -> str:
    if locale == "fa":
        return f"حدود {to_persian_digits(count)} ماه"
    unit = "month" if count == 1 else "months"
    return f"~{count} {unit}"


def _years_text(count: int, locale: str) -> str:
    if locale == "fa":
        return f"حدود {to_persian_digits(count)} سال"
    unit = "year" if count == 1 else "years"
    return f"~{count} {unit}"


def _span_text(lo: int, hi: int, unit: str, locale: str) -> str:
    if locale == "fa":
        label = "ماه" if unit == "month" else "سال"
        return (
            f"حدود {to_persian_digits(lo)} تا {to_persian_digits(hi)} {label}"
        )
    return f"~{lo}-{hi} {unit}s"


def format_months_result(
    months: float,
    locale: str = "en",
    very_long_after: int | None = None,
) -> str:
    """Render a month count as a short human-readable duration.

    Args:
        months: Months until the goal is reached.
        locale: ``"fa"`` or ``"en"``.
        very_long_after: Optional horizon above which the result is shown as
            "very long".

    Returns:
        str: ``"~N months"`` below a year, ``"~N years"`` (ceiling) otherwise.
    """
    texts = _texts(locale)
    if months is None or not math.isfinite(months) or months <= 0:
        return texts["now"]
    if very_long_after is not None and months > very_long_after:
        return texts["very_long"]
    if months < 12:
        return _months_text(round_half_up(months), locale)
    return _years_text(math.ceil(months / 12), locale)


def format_month_range(
    best: float,
    worst: float,
    locale: str = "en",
    very_long_after: int | None = None,
) -> str:
    """Render a ``best``/``worst`` month range with the same unit rule.

    Both ends collapse into a single value when they render identically.
    """
    texts = _texts(locale)
    if (
        best is None
        or worst is None
        or not math.isfinite(best)
        or not math.isfinite(worst)
    ):
        return texts["unknown"]
    lo = max(0.0, min(best, worst))
    hi = max(best, worst)
    if very_long_after is not None and hi > very_long_after:
        return texts["very_long"]

    if hi < 12:
        a = max(0, round_half_up(lo))
        b = max(0, round_half_up(hi))
        if a == b:
            return _months_text(a, locale)
        return _span_text(a, b, "month", locale)

    a = max(0, math.ceil(lo / 12))
    b = max(0, math.ceil(hi / 12))
    if a == b:
        return _years_text(a, locale)
    return _span_text(a, b, "year", locale)


__all__ = ["format_months_result", "format_month_range"]
