"""Scoring for the financial taste questionnaire.

Answers are mapped onto nine axes (0-100) with per-question weights; the
multi-choice question 32 nudges the axes afterwards. Axes feed composite
indices, eight weighted profiles and six behavioral flags, and the report
is assembled from fixed Persian copy.
"""

import math

from src.domain.models.financial_taste import (
    AXES,
    Composite,
    FinancialTasteInput,
    FinancialTasteOutput,
    FinancialTasteReport,
    FlagResult,
    ProfileRanking,
    ProfileSpec,
    QuestionSpec,
    RadarAxis,
    RankedProfile,
    ReportSection,
    SuggestedTool,
)
from src.utils.numbers import clamp, round_half_up

ENGINE_VERSION = "v1"
NEUTRAL_AXIS = 50
Q32_ALPHA = 0.25
Q32_BOOST_PER_SELECTION = 3
Q32_BOOST_CAP = 12
Q32_DEFAULT_MOTIVATION = 60

# questions 13, 14 and 32 only feed flags or the injection
QUESTION_SPECS = (
    QuestionSpec(1, 4, {"risk_capacity": 0.9}, reverse=True),
    QuestionSpec(2, 4, {"risk_capacity": 1.2}),
    QuestionSpec(3, 4, {"risk_capacity": 0.8, "money_vigilance": 0.4}),
    QuestionSpec(4, 4, {"risk_capacity": 1.0}, reverse=True),
    QuestionSpec(5, 4, {"risk_capacity": 1.1}, reverse=True),
    QuestionSpec(6, 4, {"risk_tolerance": 1.3}),
    QuestionSpec(
        7, 4, {"risk_tolerance": 1.1, "behavioral_bias": 0.3}, reverse=True
    ),
    QuestionSpec(8, 4, {"risk_tolerance": 1.0}),
    QuestionSpec(9, 4, {"risk_tolerance": 0.9, "behavioral_bias": 0.4}),
    QuestionSpec(10, 4, {"spending_taste": 1.2}),
    QuestionSpec(11, 4, {"spending_taste": 1.0, "money_status": 0.6}),
    QuestionSpec(12, 4, {"spending_taste": 1.0}),
    QuestionSpec(15, 4, {"behavioral_bias": 1.2}, reverse=True),
    QuestionSpec(16, 4, {"behavioral_bias": 0.8}),
    QuestionSpec(17, 5, {"money_avoidance": 1.0}),
    QuestionSpec(18, 5, {"money_avoidance": 1.0}),
    QuestionSpec(19, 5, {"money_avoidance": 1.0}),
    QuestionSpec(20, 5, {"money_worship": 1.0}),
    QuestionSpec(21, 5, {"money_worship": 1.0}),
    QuestionSpec(22, 5, {"money_worship": 1.0}),
    QuestionSpec(23, 5, {"money_status": 1.0}),
    QuestionSpec(24, 5, {"money_status": 1.0}),
    QuestionSpec(25, 5, {"money_status": 1.0}),
    QuestionSpec(26, 5, {"money_vigilance": 1.0}),
    QuestionSpec(27, 5, {"money_vigilance": 1.0}),
    QuestionSpec(28, 5, {"money_vigilance": 1.0}),
    QuestionSpec(29, 4, {"behavioral_bias": 0.7, "risk_tolerance": 0.4}),
    QuestionSpec(30, 4, {"behavioral_bias": 0.6}),
    QuestionSpec(31, 4, {"behavioral_bias": 1.0}, reverse=True),
    QuestionSpec(33, 4, {"money_motivation": 1.0}),
    QuestionSpec(34, 4, {"money_motivation": 1.0, "money_vigilance": 0.3}),
    QuestionSpec(35, 5, {"money_vigilance": 1.0}),
    QuestionSpec(36, 5, {"money_avoidance": 1.0}),
    QuestionSpec(37, 5, {"money_worship": 1.0}),
    QuestionSpec(38, 5, {"money_status": 1.0}),
    QuestionSpec(39, 5, {"money_vigilance": 0.9}),
    QuestionSpec(40, 5, {"money_status": 0.9}),
)

Q32_VECTORS = {
    "security": {
        "money_motivation": 1.0,
        "money_vigilance": 0.7,
        "risk_tolerance": -0.2,
    },
    "freedom": {
        "money_motivation": 1.0,
        "risk_tolerance": 0.2,
        "money_vigilance": 0.1,
    },
    "luxury": {
        "money_motivation": 1.0,
        "spending_taste": 0.6,
        "money_worship": 0.5,
        "money_status": 0.3,
    },
    "giving": {"money_motivation": 1.0, "money_vigilance": 0.1},
    "status": {
        "money_motivation": 1.0,
        "money_status": 0.9,
        "spending_taste": 0.2,
        "money_worship": 0.3,
    },
    "growth": {
        "money_motivation": 1.0,
        "risk_tolerance": 0.4,
        "money_vigilance": 0.2,
    },
}

PROFILE_SPECS = (
    ProfileSpec(
        "security_guardian",
        "محافظ امنیت",
        {
            "money_vigilance": 1.2,
            "money_avoidance": 0.6,
            "risk_tolerance": -0.8,
            "risk_capacity": -0.4,
            "spending_taste": -0.4,
            "behavioral_bias": -0.2,
        },
    ),
    ProfileSpec(
        "rational_strategist",
        "استراتژیست منطقی",
        {
            "risk_capacity": 0.9,
            "money_vigilance": 0.7,
            "behavioral_bias": -0.6,
            "risk_tolerance": 0.4,
            "spending_taste": -0.2,
        },
    ),
    ProfileSpec(
        "opportunistic_adventurer",
        "ماجراجوی فرصت‌طلب",
        {
            "risk_tolerance": 1.1,
            "risk_capacity": 0.6,
            "money_worship": 0.4,
            "money_status": 0.3,
            "behavioral_bias": 0.3,
            "money_vigilance": -0.3,
        },
    ),
    ProfileSpec(
        "impulsive_thrillseeker",
        "هیجانیِ پرریسک",
        {
            "risk_tolerance": 1.0,
            "behavioral_bias": 1.0,
            "risk_capacity": -0.4,
            "money_worship": 0.4,
            "money_vigilance": -0.6,
        },
    ),
    ProfileSpec(
        "luxury_enthusiast",
        "لوکس‌پسند",
        {
            "spending_taste": 1.1,
            "money_status": 0.9,
            "money_worship": 0.7,
            "money_vigilance": -0.4,
            "risk_tolerance": 0.2,
        },
    ),
    ProfileSpec(
        "status_competitor",
        "رقابتیِ جایگاه‌محور",
        {
            "money_status": 1.2,
            "money_worship": 0.6,
            "spending_taste": 0.6,
            "behavioral_bias": 0.3,
            "money_vigilance": -0.4,
        },
    ),
    ProfileSpec(
        "anxious_saver",
        "پس‌اندازگرِ مضطرب",
        {
            "money_avoidance": 1.0,
            "money_vigilance": 0.8,
            "risk_tolerance": -0.7,
            "behavioral_bias": 0.2,
            "spending_taste": -0.5,
        },
    ),
    ProfileSpec(
        "balanced_pragmatist",
        "عمل‌گرا و متعادل",
        {
            "behavioral_bias": -0.5,
            "money_vigilance": 0.4,
            "risk_tolerance": 0.3,
            "risk_capacity": 0.3,
            "spending_taste": 0.2,
        },
    ),
)

AXIS_LABELS = {
    "risk_capacity": "ظرفیت ریسک",
    "risk_tolerance": "تحمل ریسک",
    "spending_taste": "سبک خرج‌کردن",
    "behavioral_bias": "سوگیری رفتاری",
    "money_avoidance": "پرهیز از پول",
    "money_worship": "پرستش پول",
    "money_status": "پول و جایگاه",
    "money_vigilance": "هوشیاری مالی",
    "money_motivation": "انگیزه پول",
}

CONFIDENCE_LABELS = {"high": "بالا", "medium": "متوسط", "low": "پایین"}

PROFILE_COPY = {
    "security_guardian": (
        "امنیت و کنترل برای شما اولویت دارد.",
        ["پس‌انداز و کنترل خرج", "احتیاط منطقی"],
        ["ریسک عقب‌ماندن از رشد بلندمدت", "نیاز به سبد مرحله‌ای"],
    ),
    "rational_strategist": (
        "تصمیم‌ها بیشتر مبتنی بر تحلیل و برنامه‌ریزی است.",
        ["تصمیم‌گیری منطقی", "تعادل رشد/امنیت"],
        ["گاهی اقدام دیرهنگام", "نیاز به ساده‌سازی تصمیم"],
    ),
    "opportunistic_adventurer": (
        "به فرصت‌های رشد علاقه دارید و با نوسان کنار می‌آیید.",
        ["پذیرش ریسک برای رشد", "انعطاف"],
        ["ریسک هیجان بازار", "نیاز به قواعد مدیریت ریسک"],
    ),
    "impulsive_thrillseeker": (
        "ریسک‌پذیری بالا و امکان تصمیم هیجانی.",
        ["جرئت اقدام", "تحمل نوسان"],
        ["ضررهای غیرضروری", "نیاز به پلن خروج"],
    ),
    "luxury_enthusiast": (
        "کیفیت و تجربه برای شما مهم است.",
        ["انگیزه رشد درآمد", "حساسیت به کیفیت"],
        ["ریسک overspending", "نیاز به بودجه لذت"],
    ),
    "status_competitor": (
        "تصویر اجتماعی روی تصمیم‌های مالی اثر دارد.",
        ["انگیزه پیشرفت", "هدف‌گذاری بلندپروازانه"],
        ["ریسک خرید نمایشی", "تفکیک ارزش شخصی از دارایی"],
    ),
    "anxious_saver": (
        "احتیاط بالا و امکان دغدغه مالی.",
        ["کنترل بالا", "پرهیز از عجله"],
        ["اجتناب از تصمیم لازم", "قدم‌به‌قدم سرمایه‌گذاری"],
    ),
    "balanced_pragmatist": (
        "نگاه عمل‌گرایانه و متعادل.",
        ["تعادل", "سازگاری"],
        ["نیاز به مقصد مالی روشن‌تر"],
    ),
}

STRENGTH_TEXT = {
    "money_vigilance": "هوشیاری مالی و توجه به پس‌انداز در شما بالاست.",
    "risk_capacity": "ظرفیت ریسک شما برای تصمیم‌های بلندمدت مناسب است.",
    "risk_tolerance": "تحمل نوسان شما خوب است.",
    "behavioral_bias": "کمتر تحت تاثیر هیجان تصمیم می‌گیرید.",
}

GROWTH_TEXT = {
    "money_vigilance": "نظم مالی و بودجه‌بندی را قوی‌تر کنید.",
    "risk_tolerance": "برای نوسان، سبد کم‌نوسان‌تر بچینید.",
    "behavioral_bias": "قواعد ثابت تصمیم‌گیری را اجرا کنید.",
    "money_avoidance": "اجتناب مالی را به تصمیم‌های کوچک تبدیل کنید.",
}

DEFAULT_ACTION_PLAN = ReportSection(
    title="برنامه اقدام پیشنهادی",
    bullets=[
        "یک هدف مالی ۳ ماهه تعیین کنید.",
        "بودجه را ساده کنید (پس‌انداز/ثابت/لذت).",
        "برای سرمایه‌گذاری پلن خروج بنویسید.",
    ],
)


def _answer(answers: dict[int, float], question_id: int) -> float:
    value = answers.get(question_id)
    if value is None or not math.isfinite(value):
        return 0
    return value


def answer_to_unit(raw: float, scale: int, reverse: bool = False) -> float:
    """Map a 1..scale answer to 0..1, flipped for reverse-keyed questions."""
    unit = (raw - 1) / (scale - 1)
    return 1 - unit if reverse else unit


def compute_base_axes(answers: dict[int, float]) -> dict[str, int]:
    """Return weighted axis scores; axes without answers stay at 50."""
    sums = {axis: 0.0 for axis in AXES}
    weights = {axis: 0.0 for axis in AXES}
    for spec in QUESTION_SPECS:
        raw = _answer(answers, spec.id)
        if not raw:
            continue
        unit = answer_to_unit(clamp(raw, 1, spec.scale), spec.scale, spec.reverse)
        for axis, weight in spec.axis_weights.items():
            sums[axis] += unit * weight
            weights[axis] += weight

    axes = {}
    for axis in AXES:
        if weights[axis] <= 0:
            axes[axis] = NEUTRAL_AXIS
        else:
            axes[axis] = int(
                clamp(round_half_up(sums[axis] / weights[axis] * 100), 0, 100)
            )
    return axes


def compute_q32_injection(selected) -> dict[str, int]:
    """Average the vectors of the chosen motivations into axis offsets.

    Unknown options are ignored. ``money_motivation`` also gets a boost of
    three points per choice, capped at twelve.
    """
    totals: dict[str, float] = {}
    count = 0
    for key in selected or ():
        vector = Q32_VECTORS.get(key)
        if vector is None:
            continue
        count += 1
        for axis, weight in vector.items():
            totals[axis] = totals.get(axis, 0.0) + weight
    if count == 0:
        return {}

    injection = {
        axis: int(clamp(round_half_up(value / count * 100), -100, 100))
        for axis, value in totals.items()
    }
    boost = clamp(count * Q32_BOOST_PER_SELECTION, 0, Q32_BOOST_CAP)
    motivation = injection.get("money_motivation", Q32_DEFAULT_MOTIVATION)
    injection["money_motivation"] = int(clamp(motivation + boost, 0, 100))
    return injection


def apply_q32_injection(
    axes: dict[str, int],
    injection: dict[str, int],
    alpha: float = Q32_ALPHA,
) -> dict[str, int]:
    result = dict(axes)
    for axis, offset in injection.items():
        base = result.get(axis, 0)
        result[axis] = int(clamp(round_half_up(base + offset * alpha), 0, 100))
    return result


def compute_composite(axes: dict[str, int]) -> Composite:
    def bounded(value: float) -> int:
        return int(clamp(round_half_up(value), 0, 100))

    return Composite(
        real_risk=round_half_up((axes["risk_capacity"] + axes["risk_tolerance"]) / 2),
        luxury=bounded(
            0.45 * axes["spending_taste"]
            + 0.30 * axes["money_status"]
            + 0.25 * axes["money_worship"]
        ),
        defensive=bounded(
            0.55 * axes["money_vigilance"] + 0.45 * axes["money_avoidance"]
        ),
        volatility=bounded(
            0.55 * axes["behavioral_bias"]
            + 0.25 * axes["risk_tolerance"]
            + 0.20 * (100 - axes["money_vigilance"])
        ),
        mismatch=bounded(abs(axes["risk_capacity"] - axes["risk_tolerance"]) * 1.2),
    )


def score_profile(axes: dict[str, int], profile: ProfileSpec) -> int:
    total = 0.0
    weight_sum = 0.0
    for axis, weight in profile.weights.items():
        total += axes[axis] * weight
        weight_sum += abs(weight)
    base = total / weight_sum if weight_sum else 0.0
    return int(clamp(round_half_up(base + profile.bias), 0, 100))


def rank_profiles(axes: dict[str, int]) -> ProfileRanking:
    """Rank every profile; confidence is high for a 12-point lead, medium for 6."""
    scored = sorted(
        (
            RankedProfile(spec.key, spec.title, score_profile(axes, spec))
            for spec in PROFILE_SPECS
        ),
        key=lambda profile: -profile.score,
    )
    dominant = scored[0]
    secondary = scored[1:3]
    gap = dominant.score - (secondary[0].score if secondary else 0)
    if gap >= 12:
        confidence = "high"
    elif gap >= 6:
        confidence = "medium"
    else:
        confidence = "low"
    return ProfileRanking(dominant, secondary, confidence, scored)


def _to_100_from_4(raw: float) -> int:
    return int(clamp(round_half_up((raw - 1) / 3 * 100), 0, 100))


def _four_point(answers: dict[int, float], question_id: int) -> int:
    raw = _answer(answers, question_id)
    return _to_100_from_4(clamp(raw, 1, 4)) if raw else 0


def _level(score: int, high: int = 70, medium: int = 45) -> str:
    if score >= high:
        return "high"
    if score >= medium:
        return "medium"
    return "low"


def flag_risk_mismatch(composite: Composite) -> FlagResult:
    score = composite.mismatch
    level = _level(score, high=60, medium=35)
    return FlagResult(
        key="risk_mismatch",
        title="عدم‌تناسب تحمل و ظرفیت ریسک",
        score=score,
        level=level,
        reason=(
            "تحمل و ظرفیت ریسک شما نسبتاً همخوان است."
            if level == "low"
            else "بین تحمل ریسک روانی و ظرفیت واقعی ریسک شما فاصله معناداری دیده می‌شود."
        ),
        suggestions=[
            "اگر تحمل ریسک بالاست ولی ظرفیت پایین: اندازه موقعیت‌ها را کوچک‌تر کنید و صندوق اضطراری را تقویت کنید.",
            "اگر ظرفیت بالاست ولی تحمل پایین: با سبد کم‌نوسان‌تر شروع کنید و مرحله‌ای ریسک را افزایش دهید.",
        ],
    )


def flag_overconfidence(answers: dict[int, float], axes: dict[str, int]) -> FlagResult:
    self_rating = _four_point(answers, 16)
    allocation = _four_point(answers, 8)
    score = int(
        clamp(
            round_half_up(
                0.45 * self_rating + 0.35 * allocation + 0.20 * axes["risk_tolerance"]
            ),
            0,
            100,
        )
    )
    level = _level(score)
    return FlagResult(
        key="overconfidence",
        title="ریسک اعتمادبه‌نفس بیش از حد",
        score=score,
        level=level,
        reason=(
            "ترکیب اعتمادبه‌نفس بالا و تمایل به وارد کردن درصد زیاد سرمایه می‌تواند باعث ریسک‌های غیرضروری شود."
            if level == "high"
            else "سطح اعتمادبه‌نفس شما در محدوده قابل کنترل است."
        ),
        suggestions=[
            "برای هر تصمیم سقف ریسک تعریف کنید (مثلاً ۱–۲٪ کل سرمایه در هر معامله).",
            "قبل از ورود، سناریوی ضرر و حد خروج را از قبل بنویسید.",
        ],
    )


def flag_fomo_fud(answers: dict[int, float]) -> FlagResult:
    # options 1 of q31 and q15 mean "a lot"
    emotional = 100 - _four_point(answers, 31) if _answer(answers, 31) else 0
    social = 100 - _four_point(answers, 15) if _answer(answers, 15) else 0
    trend = _four_point(answers, 14)
    score = int(
        clamp(round_half_up(0.55 * emotional + 0.25 * social + 0.20 * trend), 0, 100)
    )
    level = _level(score)
    return FlagResult(
        key="fomo_fud",
        title="ریسک تصمیم‌گیری احساسی (FOMO/FUD)",
        score=score,
        level=level,
        reason=(
            "نشانه‌هایی از تاثیرپذیری از هیجان بازار و تصمیم‌های عجولانه دیده می‌شود."
            if level == "high"
            else "ریسک تصمیم‌گیری احساسی شما در محدوده کنترل‌شده است."
        ),
        suggestions=[
            "قانون ۲۴ ساعت: تصمیم خرید/فروش را یک روز عقب بیندازید مگر طبق پلن.",
            "مصرف شبکه‌های اجتماعی را محدود کنید و فقط بعد از تحلیل شخصی اقدام کنید.",
        ],
    )


_WIN_POINTS = {1: 100, 2: 40, 3: 30}
_LOSS_POINTS = {2: 85, 3: 75, 4: 55}


def flag_disposition(answers: dict[int, float]) -> FlagResult:
    q14 = _answer(answers, 14)
    q13 = _answer(answers, 13)
    q30 = _answer(answers, 30)
    win = _WIN_POINTS.get(q14, 70) if q14 else 0
    loss = _LOSS_POINTS.get(q13, 45) if q13 else 0
    second_win = _WIN_POINTS.get(q30, 75) if q30 else 0
    score = int(
        clamp(round_half_up(0.40 * win + 0.35 * loss + 0.25 * second_win), 0, 100)
    )
    level = _level(score)
    return FlagResult(
        key="disposition_effect",
        title="سوگیری نگه‌داشتن ضرر و قفل کردن سود (Disposition Effect)",
        score=score,
        level=level,
        reason=(
            "الگوی «سریع سود را می‌گیرم، ضرر را نگه می‌دارم» می‌تواند بازده بلندمدت را کاهش دهد."
            if level == "high"
            else "نشانه‌های سوگیری disposition در حد کنترل‌شده است."
        ),
        suggestions=[
            "قواعد خروج از پیش تعریف‌شده داشته باشید (حد ضرر/حد سود یا زمان‌محور).",
            "اگر تحلیل عوض شد، خروج کنید، حتی اگر در ضرر هستید.",
        ],
    )


def flag_overspending(axes: dict[str, int]) -> FlagResult:
    base = round_half_up(
        0.45 * axes["spending_taste"]
        + 0.30 * axes["money_worship"]
        + 0.25 * axes["money_status"]
    )
    amplifier = round_half_up((100 - axes["money_vigilance"]) * 0.25)
    score = int(clamp(base + amplifier, 0, 100))
    level = _level(score)
    return FlagResult(
        key="overspending_risk",
        title="ریسک خرج‌کردن هیجانی/افراطی",
        score=score,
        level=level,
        reason=(
            "گرایش به خرج‌کردن برای لذت/جایگاه همراه با کنترل مالی پایین‌تر دیده می‌شود."
            if level == "high"
            else "ریسک خرج‌کردن افراطی شما پایین تا متوسط است."
        ),
        suggestions=[
            "بودجه لذت ماهانه تعیین کنید و از آن فراتر نروید.",
            "قبل از خریدهای بزرگ، قانون «۳ روز فکر کردن» را اجرا کنید.",
        ],
    )


def flag_anxiety_avoidance(axes: dict[str, int]) -> FlagResult:
    score = int(
        clamp(
            round_half_up(
                0.55 * axes["money_avoidance"]
                + 0.25 * (100 - axes["risk_tolerance"])
                + 0.20 * axes["money_vigilance"]
            ),
            0,
            100,
        )
    )
    level = _level(score)
    return FlagResult(
        key="anxiety_avoidance",
        title="اضطراب/اجتناب مالی",
        score=score,
        level=level,
        reason=(
            "نشانه‌هایی از اضطراب مالی یا تمایل به اجتناب از تصمیم‌های مالی دیده می‌شود."
            if level == "high"
            else "سطح اضطراب/اجتناب مالی شما در محدوده قابل مدیریت است."
        ),
        suggestions=[
            "تصمیم‌ها را خرد کنید: به جای یک تصمیم بزرگ، چند تصمیم کوچک بگیرید.",
            "از چک‌لیست ساده (هدف/ریسک/پلن خروج) برای کاهش اضطراب استفاده کنید.",
        ],
    )


def build_flags(
    answers: dict[int, float],
    axes: dict[str, int],
    composite: Composite,
) -> list[FlagResult]:
    return [
        flag_risk_mismatch(composite),
        flag_overconfidence(answers, axes),
        flag_fomo_fud(answers),
        flag_disposition(answers),
        flag_overspending(axes),
        flag_anxiety_avoidance(axes),
    ]


def _headline(title: str, composite: Composite) -> str:
    if composite.mismatch >= 60:
        return f"ذائقه مالی شما: {title} (با عدم‌تناسب ریسک)"
    return f"ذائقه مالی شما: {title}"


def _subheadline(composite: Composite) -> str:
    if composite.real_risk >= 70 and composite.volatility >= 60:
        return "ریسک‌پذیری بالا دارید؛ کنترل هیجان کلید عملکرد شماست."
    if composite.defensive >= 70:
        return "امنیت مالی برای شما اولویت است؛ با برنامه می‌توانید رشد را هم اضافه کنید."
    if composite.luxury >= 70:
        return "سبک خرج‌کردن شما گرایش به تجربه و کیفیت دارد؛ بودجه‌بندی تعادل ایجاد می‌کند."
    return "الگوی شما متعادل است؛ با چند اصلاح کوچک می‌توانید نتیجه‌ها را بهتر کنید."


def _strengths_and_growth(axes: dict[str, int]) -> tuple[list[str], list[str]]:
    strengths = []
    growth = []
    for axis in AXES:
        value = axes[axis]
        if value >= 70 and axis in STRENGTH_TEXT:
            strengths.append(STRENGTH_TEXT[axis])
        if value <= 35 and axis in GROWTH_TEXT:
            growth.append(GROWTH_TEXT[axis])
    return strengths, growth


def _action_plan(highlighted: list[FlagResult]) -> list[ReportSection]:
    plan = [
        ReportSection(
            title=f"اقدام پیشنهادی برای: {flag.title}",
            bullets=list(flag.suggestions),
            paragraphs=[flag.reason],
        )
        for flag in highlighted[:3]
    ]
    return plan or [DEFAULT_ACTION_PLAN]


def _suggested_tools(
    composite: Composite,
    highlighted: list[FlagResult],
) -> list[SuggestedTool]:
    tools = []
    if composite.defensive >= 65:
        tools.append(
            SuggestedTool(
                "ماشین‌حساب صندوق اضطراری",
                "/tools/emergency-fund",
                "برای تقویت امنیت مالی و کاهش اضطراب.",
            )
        )
    if composite.luxury >= 65:
        tools.append(
            SuggestedTool(
                "ماشین‌حساب بودجه‌بندی ماهانه",
                "/tools/budget",
                "برای کنترل خرج‌کردن و حفظ تعادل.",
            )
        )
    if any(flag.key == "risk_mismatch" for flag in highlighted):
        tools.append(
            SuggestedTool(
                "سنجش آگاهی مالی (تطبیقی)",
                "/tools/financial-literacy",
                "برای کاهش خطاهای ریسکی و تصمیم بهتر.",
            )
        )
    return tools[:3]


def build_report(
    axes: dict[str, int],
    composite: Composite,
    profiles: ProfileRanking,
    highlighted: list[FlagResult],
) -> FinancialTasteReport:
    _, copy_strengths, copy_growth = PROFILE_COPY.get(
        profiles.dominant.key, ("", [], [])
    )
    strengths, growth = _strengths_and_growth(axes)
    watch = [f"مراقب باشید: {flag.title}" for flag in highlighted]
    return FinancialTasteReport(
        headline=_headline(profiles.dominant.title, composite),
        subheadline=_subheadline(composite),
        radar_axes=[
            RadarAxis(axis, AXIS_LABELS[axis], axes[axis]) for axis in AXES
        ],
        strengths=(copy_strengths + strengths)[:6],
        growth_areas=(copy_growth + growth + watch)[:6],
        flags=highlighted,
        action_plan=_action_plan(highlighted),
        suggested_tools=_suggested_tools(composite, highlighted),
    )


def assess_financial_taste(data: FinancialTasteInput) -> FinancialTasteOutput:
    """Score a completed (or partial) questionnaire.

    Args:
        data: Answers keyed by question number and the question 32 choices.

    Returns:
        FinancialTasteOutput: Axes, composites, ranked profiles, flags (all
        six and the non-low ones sorted by score) and the report.
    """
    answers = data.answers or {}
    base_axes = compute_base_axes(answers)
    axes = apply_q32_injection(base_axes, compute_q32_injection(data.q32_selected))
    composite = compute_composite(axes)
    profiles = rank_profiles(axes)
    flags = build_flags(answers, axes, composite)
    highlighted = sorted(
        (flag for flag in flags if flag.level != "low"),
        key=lambda flag: -flag.score,
    )
    return FinancialTasteOutput(
        axes=axes,
        composite=composite,
        profiles=profiles,
        flags=flags,
        highlighted_flags=highlighted,
        report=build_report(axes, composite, profiles, highlighted),
    )


__all__ = [
    "ENGINE_VERSION",
    "QUESTION_SPECS",
    "Q32_VECTORS",
    "PROFILE_SPECS",
    "AXIS_LABELS",
    "CONFIDENCE_LABELS",
    "PROFILE_COPY",
    "answer_to_unit",
    "compute_base_axes",
    "compute_q32_injection",
    "apply_q32_injection",
    "compute_composite",
    "score_profile",
    "rank_profiles",
    "build_flags",
    "build_report",
    "assess_financial_taste",
]
