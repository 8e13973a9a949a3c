"""Helpers for localized numeric text (Persian, Arabic-Indic and ASCII)."""

import math
import re

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
THOUSANDS_SEPARATORS = (",", "٬", "،")
PERSIAN_DECIMAL_SEPARATOR = "٫"
PERSIAN_GROUP_SEPARATOR = "٬"

_TO_ASCII = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, "0123456789" * 2)
_TO_PERSIAN = str.maketrans("0123456789", PERSIAN_DIGITS)
_TO_PERSIAN_SEPARATORS = str.maketrans(
    {",": PERSIAN_GROUP_SEPARATOR, ".": PERSIAN_DECIMAL_SEPARATOR}
)
_NUMBER_PATTERN = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


def to_ascii_digits(text: str) -> str:
    """Map Persian and Arabic-Indic digits to ASCII digits."""
    return str(text).translate(_TO_ASCII)


def to_persian_digits(text) -> str:
    """Map ASCII digits to Persian digits."""
    return str(text).translate(_TO_PERSIAN)


def parse_localized_number(text) -> float:
    """Parse free-form localized numeric text into a finite float.

    Thousands separators and whitespace are dropped, every digit script is
    mapped to ASCII and only the first decimal point is kept (digits after
    any further dot are appended to the fractional part). A leading sign and
    an exponent are accepted.

    Args:
        text: Raw user input such as ``"۱٬۲۳۴٫۵"`` or ``"12,000"``.

    Returns:
        float: Parsed value, or ``0.0`` for empty, invalid or non-finite
        input.
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
        return value if math.isfinite(value) else 0.0

    cleaned = to_ascii_digits(text)
    for separator in THOUSANDS_SEPARATORS:
        cleaned = cleaned.replace(separator, "")
    cleaned = "".join(cleaned.split())
    cleaned = cleaned.replace(PERSIAN_DECIMAL_SEPARATOR, ".")

    head, dot, tail = cleaned.partition(".")
    if dot:
        cleaned = f"{head}.{tail.replace('.', '')}"

    if not _NUMBER_PATTERN.match(cleaned):
        return 0.0
    value = float(cleaned)
    return value if math.isfinite(value) else 0.0


def format_grouped_number(
    value: float,
    max_fraction_digits: int = 0,
    locale: str = "fa",
) -> str:
    """Format a number with thousands grouping for display.

    Args:
        value: Number to render.
        max_fraction_digits: Upper bound on rendered fraction digits.
        locale: ``"fa"`` for Persian digits and separators, ``"en"`` for ASCII.

    Returns:
        str: Grouped representation without trailing fraction zeros.
    """
    number = float(value) if value is not None else 0.0
    if not math.isfinite(number):
        number = 0.0
    digits = max(0, int(max_fraction_digits))
    text = f"{number:,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    if locale == "fa":
        return text.translate(_TO_PERSIAN_SEPARATORS).translate(_TO_PERSIAN)
    return text


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``."""
    return max(lo, min(hi, value))


def coerce_non_negative(value) -> float:
    """Return ``value`` as a float, or 0 when negative, non-finite or missing."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        number = parse_localized_number(value)
    else:
        number = float(value)
    if not math.isfinite(number) or number <= 0:
        return 0.0
    return number


def safe_percent(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator * 100`` or 0 for a degenerate base."""
    if not denominator or not math.isfinite(denominator):
        return 0.0
    return numerator / denominator * 100


__all__ = [
    "PERSIAN_DIGITS",
    "ARABIC_DIGITS",
    "to_ascii_digits",
    "to_persian_digits",
    "parse_localized_number",
    "format_grouped_number",
    "round_half_up",
    "clamp",
    "coerce_non_negative",
    "safe_percent",
]
