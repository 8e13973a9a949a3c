"""Domain constants shared by the calculators."""

MAX_MONTHS = 1200
VERY_LONG_MONTHS = 240
DEFAULT_RANGE_RUNS = 30
RANGE_BEST_PERCENTILE = 0.15
RANGE_WORST_PERCENTILE = 0.85

SCENARIO_DELTA = 10.0
SCENARIO_GROWTH_FLOOR = -50.0

USD_BLEND_WEIGHT = 0.7
GOLD_BLEND_WEIGHT = 0.3

TOOL_RUN_SCHEMA = "takhmino.toolrun.v1"

TOOL_NAMES = {
    "loan": "محاسبه قسط وام",
    "gold-goal": "هدف طلا",
    "expense-leak": "نشت‌یاب مالی",
    "home-buy": "چند سال دیگه می‌تونم خونه بخرم؟",
    "purchasing-power": "قدرت خرید پول",
    "financial-taste": "ذائقه مالی",
}


__all__ = [
    "MAX_MONTHS",
    "VERY_LONG_MONTHS",
    "DEFAULT_RANGE_RUNS",
    "RANGE_BEST_PERCENTILE",
    "RANGE_WORST_PERCENTILE",
    "SCENARIO_DELTA",
    "SCENARIO_GROWTH_FLOOR",
    "USD_BLEND_WEIGHT",
    "GOLD_BLEND_WEIGHT",
    "TOOL_RUN_SCHEMA",
    "TOOL_NAMES",
]
