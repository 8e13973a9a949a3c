"""Expense leak analysis: budget health, category status, leaks and peers.

``analyze`` is a pure pipeline over normalised category totals. Amounts are
monthly toman; percentages are of monthly income. Nothing here raises for bad
numbers: negative or non-finite amounts count as 0 and a missing income
yields the "no income" result.
"""

from dataclasses import asdict, replace
import math

import jdatetime

from src.domain.models.expense import (
    CATEGORY_IDS,
    AnnualItem,
    CategoryBreakdown,
    DarkMoneyResult,
    DetectedLeak,
    ExpenseInput,
    ExpenseOutput,
    ExpenseSummary,
    ExpenseToolRunSummary,
    FragilityResult,
    HealthFactor,
    HealthScore,
    HeatmapMonth,
    HeatmapResult,
    LeakItem,
    PeerCard,
    RuleResult,
    RuleSlice,
)
from src.utils.numbers import clamp, round_half_up, safe_percent

ENGINE_VERSION = "1.0.0"

FIELD_CATEGORIES = {
    "rent": "housing",
    "mortgage": "housing",
    "charge": "housing",
    "grocery": "food",
    "restaurant": "food",
    "cafe": "food",
    "delivery": "food",
    "lunch_out": "food",
    "fuel": "transport",
    "taxi": "transport",
    "public": "transport",
    "clothing": "lifestyle",
    "entertain": "lifestyle",
    "small": "lifestyle",
    "medicine": "health",
    "doctor": "health",
    "beauty": "health",
    "gym": "health",
    "hygiene": "health",
    "utilities": "bills",
    "internet": "bills",
    "subs": "bills",
    "loan": "finance",
    "installment": "finance",
    "credit_inst": "finance",
}

FIELD_LABELS = {
    "rent": "اجاره",
    "mortgage": "قسط مسکن",
    "charge": "شارژ ساختمان",
    "grocery": "خرید خوراکی",
    "restaurant": "رستوران",
    "cafe": "کافه",
    "delivery": "سفارش آنلاین غذا",
    "lunch_out": "ناهار بیرون",
    "fuel": "سوخت",
    "taxi": "تاکسی اینترنتی",
    "public": "حمل‌ونقل عمومی",
    "clothing": "پوشاک",
    "entertain": "تفریح",
    "small": "خریدهای خرد",
    "medicine": "دارو",
    "doctor": "پزشک",
    "beauty": "آرایشی",
    "gym": "باشگاه",
    "hygiene": "بهداشتی",
    "utilities": "آب، برق و گاز",
    "internet": "اینترنت و موبایل",
    "subs": "اشتراک‌ها",
    "loan": "قسط وام",
    "installment": "خرید اقساطی",
    "credit_inst": "کارت اعتباری",
}

CATEGORY_LABELS = {
    "saving": "پس‌انداز",
    "housing": "مسکن",
    "food": "خوراک",
    "transport": "حمل‌ونقل",
    "lifestyle": "سبک زندگی",
    "health": "سلامت و بهداشت",
    "bills": "قبوض",
    "finance": "بدهی‌ها",
}

IDEAL_RANGES = {
    "saving": (10, 20),
    "housing": (15, 35),
    "food": (10, 25),
    "transport": (5, 15),
    "lifestyle": (5, 15),
    "health": (3, 7),
    "bills": (4, 8),
    "finance": (0, 15),
}

WARN_RANGES = {
    "saving": (5, 10),
    "housing": (35, 55),
    "food": (25, 40),
    "transport": (15, 25),
    "lifestyle": (15, 25),
    "health": (7, 15),
    "bills": (8, 14),
    "finance": (15, 30),
}

LEVEL_LABELS = {
    "excellent": "عالی",
    "good": "خوب",
    "average": "متوسط",
    "weak": "ضعیف",
    "critical": "بحرانی",
}

LEAK_NOTES = {
    "severe": (
        "این دسته بخش بزرگی از درآمد را مصرف می‌کند؛ اگر هدف‌گذاری "
        "کوتاه‌مدت دارید، از اینجا شروع کنید."
    ),
    "moderate": (
        "این دسته نسبت به بازه هدف کمی بالاست؛ یک سقف ماهانه ساده "
        "می‌تواند کمک کند."
    ),
    "mild": (
        "کمی بالاتر از بازه هدف است؛ اگر بودجه تنگ است، این‌جا را "
        "بازبینی کنید."
    ),
}

PEER_BASE_RANGES = {
    "lt20": {
        "housing": (38, 42),
        "food": (27, 32),
        "transport": (10, 14),
        "lifestyle": (8, 12),
    },
    "20to40": {
        "housing": (30, 35),
        "food": (20, 25),
        "transport": (10, 14),
        "lifestyle": (12, 16),
    },
    "gt40": {
        "housing": (22, 28),
        "food": (14, 18),
        "transport": (10, 14),
        "lifestyle": (16, 20),
    },
}
PEER_SHARED_RANGES = {
    "health": (2, 7),
    "bills": (4, 8),
    "finance": (0, 14),
}
PEER_CITY_FACTORS = {"tehran": 1.2, "mid": 0.8, "small": 0.65}
PEER_FAMILY_FOOD_FACTORS = {"couple": 1.1, "family4": 1.2, "family5": 1.35}
PEER_STATUS_LABELS = {
    "much_higher": "خیلی بالاتر از مشابه‌ها",
    "higher": "کمی بالاتر از مشابه‌ها",
    "similar": "نزدیک به مشابه‌ها",
    "lower": "کمی کمتر از مشابه‌ها",
    "much_lower": "خیلی کمتر از مشابه‌ها",
}

RULE_TARGETS = (
    ("needs", "نیازها", 50.0),
    ("wants", "خواسته‌ها", 30.0),
    ("savings", "پس‌انداز", 20.0),
)
NEEDS_CATEGORIES = ("housing", "food", "transport", "health", "bills")
FIXED_CATEGORIES = ("housing", "bills", "finance")
FLEXIBLE_CATEGORIES = ("food", "transport", "lifestyle")

FRAGILITY_LABELS = {
    "low": "شکنندگی پایین",
    "medium": "شکنندگی متوسط",
    "high": "شکنندگی بالا",
    "critical": "شکنندگی بحرانی",
}

DARK_MONEY_ALLOWANCE = 0.15
DARK_MONEY_MIN_PERCENT = 3.0


def _non_negative(value) -> float:
    if value is None:
        return 0.0
    number = float(value)
    return number if math.isfinite(number) and number > 0 else 0.0


def normalize_input(data: ExpenseInput) -> ExpenseInput:
    """Return a copy of ``data`` with every amount coerced to >= 0."""
    quick = None
    if data.quick is not None:
        quick = {key: _non_negative(value) for key, value in data.quick.items()}
    detailed = None
    if data.detailed is not None:
        detailed = {
            key: _non_negative(value) for key, value in data.detailed.items()
        }
    return replace(
        data,
        monthly_income=_non_negative(data.monthly_income),
        monthly_saving=_non_negative(data.monthly_saving),
        emergency_fund_balance=_non_negative(data.emergency_fund_balance),
        inflation_rate_percent=_non_negative(data.inflation_rate_percent),
        quick=quick,
        detailed=detailed,
        annual_items=[
            replace(item, amount=_non_negative(item.amount))
            for item in data.annual_items or []
        ],
        custom_items=[
            replace(item, amount=_non_negative(item.amount))
            for item in data.custom_items or []
        ],
    )


def compute_category_totals(data: ExpenseInput) -> dict[str, float]:
    """Merge quick totals and detailed fields into one total per category.

    Saving always comes from ``monthly_saving``; unknown keys are ignored.
    """
    totals = {category: 0.0 for category in CATEGORY_IDS}
    totals["saving"] = data.monthly_saving

    for category, value in (data.quick or {}).items():
        if category == "saving" or category not in totals:
            continue
        totals[category] += value or 0.0

    for field_id, value in (data.detailed or {}).items():
        category = FIELD_CATEGORIES.get(field_id)
        if category is None:
            continue
        totals[category] += value or 0.0

    return totals


def build_summary(data: ExpenseInput, totals: dict[str, float]) -> ExpenseSummary:
    custom_total = sum(item.amount for item in data.custom_items)
    expenses = (
        sum(totals[category] for category in CATEGORY_IDS if category != "saving")
        + custom_total
    )
    annual_total = sum(item.amount for item in data.annual_items)
    annual_monthly = annual_total / 12
    balance = data.monthly_income - expenses - totals["saving"]
    return ExpenseSummary(
        income=data.monthly_income,
        total_expenses=expenses,
        total_custom_expenses=custom_total,
        total_annual_amount=annual_total,
        annual_monthly=annual_monthly,
        saving=totals["saving"],
        balance=balance,
        balance_with_annual=balance - annual_monthly,
    )


def _health_level(score: int) -> str:
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 50:
        return "average"
    if score >= 30:
        return "weak"
    return "critical"


def _saving_tier(ratio: float) -> tuple[int, str]:
    if ratio >= 0.2:
        return 100, "پس‌انداز عالی (۲۰٪ یا بیشتر)"
    if ratio >= 0.1:
        return 80, "پس‌انداز خوب (۱۰–۲۰٪)"
    if ratio >= 0.05:
        return 55, "پس‌انداز متوسط (۵–۱۰٪)"
    return 20, "پس‌انداز ضعیف (کمتر از ۵٪)"


def _debt_tier(ratio: float) -> tuple[int, str]:
    if ratio == 0:
        return 100, "بدون بدهی ماهانه"
    if ratio < 0.15:
        return 80, "بدهی پایین (کمتر از ۱۵٪ درآمد)"
    if ratio <= 0.25:
        return 55, "بدهی متوسط (۱۵–۲۵٪ درآمد)"
    if ratio <= 0.36:
        return 30, "بدهی سنگین (۲۵–۳۶٪ درآمد)"
    return 10, "بدهی بحرانی (بیش از ۳۶٪ درآمد)"


def _fragility_tier(ratio: float) -> tuple[int, str]:
    if ratio < 0.3:
        return 100, "شکنندگی پایین (هزینه‌های ثابت زیر ۳۰٪)"
    if ratio < 0.5:
        return 75, "شکنندگی قابل‌قبول (۳۰–۵۰٪)"
    if ratio < 0.65:
        return 45, "شکنندگی متوسط (۵۰–۶۵٪)"
    if ratio < 0.8:
        return 20, "شکنندگی بالا (۶۵–۸۰٪)"
    return 5, "شکنندگی بحرانی (بیش از ۸۰٪)"


def _margin_tier(ratio: float) -> tuple[int, str]:
    if ratio >= 0.1:
        return 100, "حاشیه امن عالی (مازاد ۱۰٪ یا بیشتر)"
    if ratio >= 0.05:
        return 70, "حاشیه امن کافی (مازاد ۵–۱۰٪)"
    if ratio > 0:
        return 40, "حاشیه امن کم (مازاد کمتر از ۵٪)"
    return 10, "کسری بودجه ماهانه"


def build_health_score(
    summary: ExpenseSummary,
    totals: dict[str, float],
) -> HealthScore:
    """Score budget health from 0 to 100.

    The score blends saving rate (30%), debt ratio (25%), fixed-cost
    fragility (20%), monthly margin (15%) and a constant 60 (10%).
    """
    income = summary.income
    if not income:
        return HealthScore(
            score=0,
            level="weak",
            level_label="بدون درآمد ثبت‌شده",
            factors=[HealthFactor("درآمد ثبت نشده است", "warning")],
        )

    saving_r = safe_percent(summary.saving, income) / 100
    debt_r = safe_percent(totals["finance"], income) / 100
    fixed = sum(totals[category] for category in FIXED_CATEGORIES)
    fragility_r = safe_percent(fixed, income) / 100
    margin_r = safe_percent(summary.balance, income) / 100

    saving_score, saving_label = _saving_tier(saving_r)
    debt_score, debt_label = _debt_tier(debt_r)
    fragility_score, fragility_label = _fragility_tier(fragility_r)
    margin_score, margin_label = _margin_tier(margin_r)

    score = round_half_up(
        0.3 * saving_score
        + 0.25 * debt_score
        + 0.2 * fragility_score
        + 0.15 * margin_score
        + 0.1 * 60
    )
    score = int(clamp(score, 0, 100))
    level = _health_level(score)

    if saving_r >= 0.1:
        saving_severity = "positive"
    elif saving_r >= 0.05:
        saving_severity = "neutral"
    else:
        saving_severity = "warning"

    if debt_r == 0:
        debt_severity = "positive"
    elif debt_r <= 0.25:
        debt_severity = "neutral"
    else:
        debt_severity = "warning"

    if fragility_r < 0.5:
        fragility_severity = "neutral"
    elif fragility_r < 0.65:
        fragility_severity = "warning"
    else:
        fragility_severity = "critical"

    if margin_r >= 0.05:
        margin_severity = "positive"
    elif margin_r > 0:
        margin_severity = "neutral"
    else:
        margin_severity = "warning"

    return HealthScore(
        score=score,
        level=level,
        level_label=LEVEL_LABELS[level],
        factors=[
            HealthFactor(saving_label, saving_severity),
            HealthFactor(debt_label, debt_severity),
            HealthFactor(fragility_label, fragility_severity),
            HealthFactor(margin_label, margin_severity),
        ],
    )


def _classify_saving(pct: float, ideal, warn) -> tuple[str, str]:
    if pct < warn[0]:
        return "too_low", "خیلی کم"
    if pct < ideal[0]:
        return "slightly_high", "کم"
    if pct >= ideal[1]:
        return "ok", "عالی"
    return "ok", "قابل بهبود"


def _classify_spending(pct: float, ideal, warn) -> tuple[str, str]:
    if pct > warn[1]:
        return "very_high", "بسیار بالا"
    if pct > warn[0]:
        return "high", "بالا"
    if pct > ideal[1]:
        return "slightly_high", "کمی بالا"
    return "ok", "نرمال"


def build_categories(
    income: float,
    totals: dict[str, float],
) -> list[CategoryBreakdown]:
    """Classify each category against its ideal and warning bands."""
    categories = []
    for category in CATEGORY_IDS:
        amount = totals[category]
        pct = safe_percent(amount, income)
        ideal = IDEAL_RANGES.get(category)
        warn = WARN_RANGES.get(category)
        tag = None
        if amount <= 0:
            status, tag = "not_set", "ثبت نشده"
        elif ideal is None:
            status = "informational"
        elif category == "saving":
            status, tag = _classify_saving(pct, ideal, warn)
        else:
            status, tag = _classify_spending(pct, ideal, warn)
        categories.append(
            CategoryBreakdown(
                id=category,
                label=CATEGORY_LABELS[category],
                amount=amount,
                percent_of_income=pct,
                status=status,
                ideal_range_percent=ideal,
                warn_range_percent=warn,
                tag_text=tag,
            )
        )
    return categories


def _leak_items(category: str, detailed: dict[str, float] | None, total: float):
    items = [
        LeakItem(
            label=FIELD_LABELS[field_id],
            amount=amount,
            percent_of_category=safe_percent(amount, total),
            field_id=field_id,
        )
        for field_id, amount in (detailed or {}).items()
        if FIELD_CATEGORIES.get(field_id) == category and amount > 0
    ]
    items.sort(key=lambda item: item.amount, reverse=True)
    return items[:3]


def build_leaks(
    income: float,
    categories: list[CategoryBreakdown],
    detailed: dict[str, float] | None = None,
) -> list[DetectedLeak]:
    """Return the two categories furthest above their ideal band.

    Severity is ``severe`` beyond 15 points over the band, ``moderate``
    beyond 5 and ``mild`` otherwise.
    """
    if not income:
        return []

    candidates = [
        category
        for category in categories
        if category.id != "saving"
        and category.amount > 0
        and category.percent_of_income > (category.ideal_range_percent or (0, 0))[1]
    ]
    candidates.sort(key=lambda category: category.percent_of_income, reverse=True)

    leaks = []
    for category in candidates[:2]:
        over = category.percent_of_income - category.ideal_range_percent[1]
        if over > 15:
            severity = "severe"
        elif over > 5:
            severity = "moderate"
        else:
            severity = "mild"
        leaks.append(
            DetectedLeak(
                category_id=category.id,
                category_label=category.label,
                total_amount=category.amount,
                percent_of_income=category.percent_of_income,
                severity=severity,
                top_items=_leak_items(category.id, detailed, category.amount),
                note=LEAK_NOTES[severity],
            )
        )
    return leaks


def income_bracket(income: float) -> str:
    if income < 20_000_000:
        return "lt20"
    if income <= 40_000_000:
        return "20to40"
    return "gt40"


def peer_range(category: str, income: float, profile) -> tuple[int, int] | None:
    """Return the peer percentage range for ``category`` or None."""
    base = PEER_BASE_RANGES[income_bracket(income)]
    bounds = base.get(category) or PEER_SHARED_RANGES.get(category)
    if bounds is None:
        return None
    low, high = bounds

    if category == "housing":
        if profile.housing == "owned_paid":
            low, high = 3, 9
        elif profile.housing == "owned_mortgage":
            low, high = round_half_up(low * 0.7), round_half_up(high * 0.7)
        elif profile.city in PEER_CITY_FACTORS:
            factor = PEER_CITY_FACTORS[profile.city]
            low, high = round_half_up(low * factor), round_half_up(high * factor)

    if category == "food":
        factor = PEER_FAMILY_FOOD_FACTORS.get(profile.family, 1.0)
        low, high = round_half_up(low * factor), round_half_up(high * factor)

    return low, high


def build_peers(
    income: float,
    categories: list[CategoryBreakdown],
    profile,
) -> list[PeerCard]:
    if not income:
        return []

    cards = []
    for category in categories:
        if category.id == "saving":
            continue
        bounds = peer_range(category.id, income, profile)
        if bounds is None:
            continue
        low, high = bounds
        user_pct = category.percent_of_income
        if user_pct > high + 4:
            status = "much_higher"
        elif user_pct > high:
            status = "higher"
        elif user_pct < low - 3:
            status = "much_lower"
        elif user_pct < low:
            status = "lower"
        else:
            status = "similar"
        cards.append(
            PeerCard(
                category_id=category.id,
                label=category.label,
                user_percent=user_pct,
                peer_average_percent=(low + high) / 2,
                peer_range_percent=(low, high),
                status=status,
                status_label=PEER_STATUS_LABELS[status],
            )
        )
    return cards


def build_rule_50_30_20(
    income: float,
    totals: dict[str, float],
) -> RuleResult | None:
    """Compare needs, wants and savings with the 50/30/20 rule."""
    if not income:
        return None
    amounts = {
        "needs": sum(totals[category] for category in NEEDS_CATEGORIES),
        "wants": totals["lifestyle"],
        "savings": totals["saving"],
    }
    slices = []
    for key, label, target in RULE_TARGETS:
        actual = safe_percent(amounts[key], income)
        slices.append(
            RuleSlice(
                label=label,
                target_percent=target,
                actual_percent=actual,
                gap_percent=actual - target,
            )
        )

    note = None
    if slices[0].gap_percent > 0:
        note = "هزینه‌های ضروری بیش از نیمی از درآمد را می‌گیرد."
    elif slices[2].gap_percent < 0:
        note = "سهم پس‌انداز کمتر از ۲۰٪ درآمد است."
    return RuleResult(slices=slices, note=note)


def build_fragility(
    income: float,
    totals: dict[str, float],
) -> FragilityResult | None:
    """Share of income locked in fixed costs (housing, bills and debt)."""
    if not income:
        return None
    fixed = sum(totals[category] for category in FIXED_CATEGORIES)
    pct = safe_percent(fixed, income)
    if pct < 30:
        level = "low"
    elif pct < 50:
        level = "medium"
    elif pct < 65:
        level = "high"
    else:
        level = "critical"
    return FragilityResult(
        fixed_expense_percent=pct,
        ratio=fixed / income,
        level=level,
        label=FRAGILITY_LABELS[level],
    )


def build_dark_money(
    income: float,
    totals: dict[str, float],
) -> DarkMoneyResult | None:
    """Flexible spending above 15% of income, if it reaches 3% of income."""
    if not income:
        return None
    flexible = sum(totals[category] for category in FLEXIBLE_CATEGORIES)
    dark = max(0.0, flexible - DARK_MONEY_ALLOWANCE * income)
    pct = safe_percent(dark, income)
    if pct < DARK_MONEY_MIN_PERCENT:
        return None
    return DarkMoneyResult(
        dark_amount=dark,
        percent_of_income=pct,
        label="پول گم‌شده در هزینه‌های منعطف",
        note=(
            "بخشی از خوراک، حمل‌ونقل و سبک زندگی بالاتر از حد معمول است و "
            "با یک سقف ماهانه قابل آزادسازی است."
        ),
    )


def _month_key(name: str) -> str:
    return "".join(str(name).split()).replace("\u200c", "").lower()


def _month_index(name: str) -> int | None:
    raw = str(name).strip()
    if raw.isdigit() and 1 <= int(raw) <= 12:
        return int(raw) - 1
    key = _month_key(raw)
    for names in (jdatetime.date.j_months_fa, jdatetime.date.j_months_en):
        for index, candidate in enumerate(names):
            if _month_key(candidate) == key:
                return index
    return None


def build_heatmap(annual_items: list[AnnualItem]) -> HeatmapResult | None:
    """Spread annual items over the twelve Jalali months.

    Month names may be Persian or transliterated Jalali names, or month
    numbers. Items with an unknown month are left out.
    """
    amounts = [0.0] * 12
    for item in annual_items:
        index = _month_index(item.month_name)
        if index is None or item.amount <= 0:
            continue
        amounts[index] += item.amount

    total = sum(amounts)
    if total <= 0:
        return None

    labels = jdatetime.date.j_months_fa
    months = [
        HeatmapMonth(
            month_label=labels[index],
            amount=amount,
            percent_of_annual=safe_percent(amount, total),
        )
        for index, amount in enumerate(amounts)
    ]
    peak = max(range(12), key=lambda index: amounts[index])
    return HeatmapResult(months=months, peak_month_label=labels[peak])


def analyze(data: ExpenseInput) -> ExpenseOutput:
    """Run the full expense leak analysis.

    Args:
        data: Raw budget input.

    Returns:
        ExpenseOutput: Summary, health score, categories, leaks, peers and
        the derived 50/30/20, fragility, dark money and heatmap views.
    """
    normalized = normalize_input(data)
    totals = compute_category_totals(normalized)
    summary = build_summary(normalized, totals)
    income = summary.income
    categories = build_categories(income, totals)
    return ExpenseOutput(
        input=normalized,
        summary=summary,
        health=build_health_score(summary, totals),
        categories=categories,
        leaks=build_leaks(income, categories, normalized.detailed),
        peers=build_peers(income, categories, normalized.profile),
        rule_50_30_20=build_rule_50_30_20(income, totals),
        fragility=build_fragility(income, totals),
        dark_money=build_dark_money(income, totals),
        heatmap=build_heatmap(normalized.annual_items),
    )


def build_tool_run_summary(output: ExpenseOutput) -> ExpenseToolRunSummary:
    return ExpenseToolRunSummary(
        mode=output.input.mode,
        income=output.summary.income,
        total_expenses=output.summary.total_expenses,
        balance=output.summary.balance,
        balance_with_annual=output.summary.balance_with_annual,
        health_score=output.health.score,
        health_level=output.health.level,
        main_leak_categories=[leak.category_id for leak in output.leaks][:3],
    )


def build_tool_run_raw_data(output: ExpenseOutput) -> dict:
    """Return the JSON-ready payload stored with an expense leak run."""
    return {
        "version": ENGINE_VERSION,
        "input": asdict(output.input),
        "output": asdict(output),
        "summary": asdict(build_tool_run_summary(output)),
    }


__all__ = [
    "ENGINE_VERSION",
    "FIELD_CATEGORIES",
    "CATEGORY_LABELS",
    "normalize_input",
    "compute_category_totals",
    "build_summary",
    "build_health_score",
    "build_categories",
    "build_leaks",
    "income_bracket",
    "peer_range",
    "build_peers",
    "build_rule_50_30_20",
    "build_fragility",
    "build_dark_money",
    "build_heatmap",
    "analyze",
    "build_tool_run_summary",
    "build_tool_run_raw_data",
]
