"""Streamlit entry point for the Takhmino calculators."""

from collections.abc import Sequence

import streamlit as st
import altair as alt

from src.application.use_cases.analyze_expense_leak import ExpenseLeakAnalysis
from src.application.use_cases.calculate_loan import LoanCalculation, LoanForm
from src.application.use_cases.estimate_home_buy import (
    HomeBuyEstimate,
    HomeBuyForm,
)
from src.application.use_cases.estimate_purchasing_power import (
    PurchasingPowerEstimate,
    PurchasingPowerForm,
)
from src.application.use_cases.project_gold_goal import (
    GoldGoalForm,
    GoldGoalProjection,
)
from src.domain.constants import TOOL_NAMES, VERY_LONG_MONTHS
from src.domain.models.expense import (
    CATEGORY_IDS,
    AnnualItem,
    CategoryBreakdown,
    ExpenseInput,
    ExpenseProfile,
)
from src.domain.models.loan import AmortizationRow
from src.domain.models.purchasing_power import PurchasingPowerPoint
from src.domain.models.tool_run import SaveToolRunResult
from src.domain.policies.display import format_months_result
from src.domain.services.amortization import LOAN_PRESETS
from src.domain.services.expense_leak import CATEGORY_LABELS
from src.domain.services.purchasing_power import HISTORICAL_INFLATION
from src.infrastructure.container import (
    build_analyze_expense_leak,
    build_calculate_loan,
    build_estimate_home_buy,
    build_estimate_purchasing_power,
    build_project_gold_goal,
)
from src.utils.numbers import (
    format_grouped_number,
    parse_localized_number,
    round_half_up,
    to_persian_digits,
)

PAGES = (
    "loan",
    "gold-goal",
    "expense-leak",
    "home-buy",
    "purchasing-power",
)
STATUS_COLORS = {
    "ok": "#2e7d32",
    "slightly_high": "#f6c453",
    "high": "#f4a261",
    "very_high": "#e76f51",
    "too_low": "#e76f51",
    "informational": "#6c8ead",
}


def _fetch_loan_calculation(form: LoanForm) -> LoanCalculation | None:
    """Compute a loan schedule through the configured use case."""
    return build_calculate_loan().execute(form)


@st.cache_data(show_spinner=False)
def _load_loan_calculation(form: LoanForm) -> LoanCalculation | None:
    """Cached wrapper around _fetch_loan_calculation."""
    return _fetch_loan_calculation(form)


def _fetch_gold_projection(form: GoldGoalForm) -> GoldGoalProjection:
    return build_project_gold_goal().execute(form)


@st.cache_data(show_spinner=False)
def _load_gold_projection(form: GoldGoalForm) -> GoldGoalProjection:
    """Cached wrapper around _fetch_gold_projection."""
    return _fetch_gold_projection(form)


def _fetch_expense_analysis(data: ExpenseInput) -> ExpenseLeakAnalysis:
    return build_analyze_expense_leak().execute(data)


@st.cache_data(show_spinner=False)
def _load_expense_analysis(data: ExpenseInput) -> ExpenseLeakAnalysis:
    """Cached wrapper around _fetch_expense_analysis."""
    return _fetch_expense_analysis(data)


def _fetch_home_buy_estimate(form: HomeBuyForm) -> HomeBuyEstimate:
    return build_estimate_home_buy().execute(form)


@st.cache_data(show_spinner=False)
def _load_home_buy_estimate(form: HomeBuyForm) -> HomeBuyEstimate:
    """Cached wrapper around _fetch_home_buy_estimate."""
    return _fetch_home_buy_estimate(form)


def _fetch_purchasing_power(
    form: PurchasingPowerForm,
) -> PurchasingPowerEstimate:
    return build_estimate_purchasing_power().execute(form)


@st.cache_data(show_spinner=False)
def _load_purchasing_power(
    form: PurchasingPowerForm,
) -> PurchasingPowerEstimate:
    """Cached wrapper around _fetch_purchasing_power."""
    return _fetch_purchasing_power(form)


def _format_toman(value: float) -> str:
    """Format a Toman amount with Persian digits and grouping."""
    return f"{format_grouped_number(round_half_up(value))} تومان"


def _format_percent(value: float) -> str:
    return f"{format_grouped_number(value, max_fraction_digits=1)}٪"


def _format_duration(months: int, is_unrealistic: bool) -> str:
    if is_unrealistic:
        return "خیلی طولانی"
    return format_months_result(
        months,
        locale="fa",
        very_long_after=VERY_LONG_MONTHS,
    )


def _render_save_status(saved: SaveToolRunResult | None) -> None:
    """Show whether the run was stored."""
    if saved is None or saved.reason == "disabled":
        return
    if saved.ok:
        st.caption(f"این محاسبه ذخیره شد ({saved.id}).")
    else:
        st.caption("ذخیره محاسبه ناموفق بود.")


def _schedule_chart_data(
    rows: Sequence[AmortizationRow],
) -> list[dict[str, float | int | bool]]:
    """Prepare Altair data for the remaining balance line."""
    return [
        {
            "month": row.month,
            "balance": row.end_balance,
            "payment": row.payment,
            "fee_month": row.is_fee_month,
        }
        for row in rows
    ]


def _render_loan_page() -> None:
    """Render the loan installment calculator."""
    labels = {preset.key: preset.label for preset in LOAN_PRESETS}
    preset_key = st.selectbox(
        "نوع وام",
        options=list(labels),
        format_func=lambda key: labels[key],
    )
    amount = st.text_input("مبلغ وام (تومان)", value="")
    rate = st.text_input("نرخ سالانه (درصد)", placeholder="پیش‌فرض")
    duration_col, unit_col = st.columns(2)
    duration = duration_col.text_input("مدت", placeholder="پیش‌فرض")
    duration_unit = unit_col.selectbox(
        "واحد",
        options=["month", "year"],
        format_func=lambda unit: "ماه" if unit == "month" else "سال",
    )
    fee_method = st.radio(
        "روش کارمزد",
        options=["annual-first", "monthly"],
        format_func=lambda method: (
            "اول هر سال" if method == "annual-first" else "ماهانه"
        ),
        horizontal=True,
    )

    calculation = _load_loan_calculation(
        LoanForm(
            preset_key=preset_key,
            amount=amount,
            rate=rate,
            duration=duration,
            duration_unit=duration_unit,
            fee_method=fee_method,
        )
    )
    if calculation is None:
        st.info("مبلغ و مدت وام را وارد کنید.")
        return

    schedule = calculation.schedule
    monthly_col, interest_col, total_col = st.columns(3)
    monthly_col.metric("قسط ماهانه", _format_toman(schedule.monthly_average))
    interest_col.metric("کل سود/کارمزد", _format_toman(schedule.total_interest))
    total_col.metric("کل بازپرداخت", _format_toman(schedule.total_payment))
    st.caption(
        f"نرخ واقعی: {_format_percent(schedule.effective_rate_percent)}"
    )

    chart = alt.Chart(
        alt.Data(values=_schedule_chart_data(schedule.schedule))
    ).mark_line(point=True).encode(
        x=alt.X("month:Q", title="ماه"),
        y=alt.Y("balance:Q", title="مانده"),
        tooltip=["month:Q", "balance:Q", "payment:Q"],
    )
    st.altair_chart(chart, width="stretch")
    st.dataframe(
        [
            {
                "ماه": row.month,
                "قسط": round_half_up(row.payment),
                "سود": round_half_up(row.interest),
                "اصل": round_half_up(row.principal),
                "مانده": round_half_up(row.end_balance),
            }
            for row in schedule.schedule
        ],
        width="stretch",
        hide_index=True,
        height=360,
    )
    _render_save_status(calculation.saved)


def _render_gold_page() -> None:
    """Render the gold savings goal projection."""
    defaults = GoldGoalForm()
    target = st.text_input("هدف (تومان)")
    current_grams = st.text_input("طلای فعلی (گرم)")
    monthly = st.text_input("خرید ماهانه (گرم)")
    price = st.text_input("قیمت هر گرم (تومان)")

    with st.expander("فرض‌ها"):
        usd_growth = st.text_input("رشد دلار (٪)", value=defaults.usd_growth)
        gold_growth = st.text_input("رشد طلا (٪)", value=defaults.gold_growth)
        inflation = st.text_input("تورم (٪)", value=defaults.inflation)
        bank_rate = st.text_input("سود بانکی (٪)", value=defaults.bank_rate)
        buy_fee = st.text_input("کارمزد خرید (٪)", value=defaults.buy_fee)
        buy_tax = st.text_input("اجرت و مالیات خرید (٪)", value=defaults.buy_tax)
        sell_fee = st.text_input("هزینه فروش (٪)", value=defaults.sell_fee)
        storage = st.text_input("نگهداری سالانه (٪)", value=defaults.storage)
        volatility = st.text_input("نوسان (٪)", value=defaults.volatility)
        shock = st.text_input("شوک سالانه قیمت (٪)", value=defaults.shock)
        achievement = st.text_input(
            "درصد تحقق پس‌انداز",
            value=defaults.achievement_rate,
        )
        adjust = st.checkbox("هدف با تورم رشد کند")
        enable_range = st.checkbox("نمایش بازه", value=True)

    projection = _load_gold_projection(
        GoldGoalForm(
            target=target,
            current_grams=current_grams,
            monthly_saving_grams=monthly,
            gold_price=price,
            usd_growth=usd_growth,
            gold_growth=gold_growth,
            inflation=inflation,
            bank_rate=bank_rate,
            buy_fee=buy_fee,
            buy_tax=buy_tax,
            sell_fee=sell_fee,
            storage=storage,
            volatility=volatility,
            shock=shock,
            achievement_rate=achievement,
            adjust_target_for_inflation=adjust,
            enable_range=enable_range,
        )
    )
    result = projection.result
    if not result.has_started:
        st.info("هدف و قیمت طلا را وارد کنید.")
        return

    headline_col, range_col = st.columns(2)
    headline_col.metric("زمان رسیدن", projection.headline)
    if projection.range_text:
        range_col.metric("بازه", projection.range_text)

    optimistic, base, pessimistic = st.columns(3)
    for column, title, scenario in (
        (optimistic, "خوش‌بینانه", result.scenarios.optimistic),
        (base, "پایه", result.scenarios.base),
        (pessimistic, "بدبینانه", result.scenarios.pessimistic),
    ):
        column.caption(title)
        column.write(_format_duration(scenario.months, scenario.is_unrealistic))
    if result.bank is not None:
        st.caption(
            "سپرده بانکی: "
            + _format_duration(result.bank.months, result.bank.is_unrealistic)
        )
    for note in result.notes:
        st.caption(note)
    _render_save_status(projection.saved)


def _read_amount(label: str, key: str) -> float:
    return parse_localized_number(st.text_input(label, key=key))


def _category_chart_data(
    categories: Sequence[CategoryBreakdown],
) -> list[dict[str, str | float]]:
    """Prepare Altair data for the category bars, skipping empty ones."""
    return [
        {
            "category": item.label,
            "percent": item.percent_of_income,
            "amount_label": _format_toman(item.amount),
            "status": item.status,
        }
        for item in categories
        if item.amount > 0
    ]


def _render_expense_page() -> None:
    """Render the expense leak finder in quick mode."""
    income = _read_amount("درآمد ماهانه (تومان)", "income")
    emergency = _read_amount("صندوق اضطراری (تومان)", "emergency")
    quick = {
        category: _read_amount(CATEGORY_LABELS[category], f"cat-{category}")
        for category in CATEGORY_IDS
    }

    housing_col, family_col, city_col = st.columns(3)
    housing = housing_col.selectbox(
        "مسکن",
        ["renter", "owned_mortgage", "owned_paid"],
    )
    family = family_col.selectbox(
        "خانوار",
        ["single", "couple", "family4", "family5"],
    )
    city = city_col.selectbox("شهر", ["tehran", "big", "mid", "small"], index=1)

    annual_amount = _read_amount("هزینه سالانه (تومان)", "annual-amount")
    annual_month = st.text_input("ماه هزینه سالانه", value="فروردین")
    annual_items = []
    if annual_amount > 0:
        annual_items.append(
            AnnualItem(id="annual-1", amount=annual_amount, month_name=annual_month)
        )

    if income <= 0:
        st.info("درآمد ماهانه را وارد کنید.")
        return

    analysis = _load_expense_analysis(
        ExpenseInput(
            monthly_income=income,
            monthly_saving=quick.get("saving", 0.0),
            emergency_fund_balance=emergency,
            mode="quick",
            quick=quick,
            annual_items=annual_items,
            profile=ExpenseProfile(housing=housing, family=family, city=city),
        )
    )
    output = analysis.output

    score_col, balance_col = st.columns(2)
    score_col.metric(
        "نمره سلامت مالی",
        to_persian_digits(output.health.score),
        output.health.level_label,
    )
    balance_col.metric("تراز ماهانه", _format_toman(output.summary.balance))
    for factor in output.health.factors:
        st.caption(factor.label)

    chart = alt.Chart(
        alt.Data(values=_category_chart_data(output.categories))
    ).mark_bar(cornerRadius=4).encode(
        x=alt.X("percent:Q", title="درصد از درآمد"),
        y=alt.Y("category:N", sort="-x", title=None),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(
                domain=list(STATUS_COLORS),
                range=list(STATUS_COLORS.values()),
            ),
            legend=None,
        ),
        tooltip=["category:N", "amount_label:N", "percent:Q"],
    )
    st.subheader("سهم دسته‌ها")
    st.altair_chart(chart, width="stretch")

    if output.leaks:
        st.subheader("نشتی‌ها")
        for leak in output.leaks:
            st.warning(
                f"{leak.category_label}: {_format_percent(leak.percent_of_income)}"
                f" از درآمد. {leak.note or ''}".strip()
            )
    if output.peers:
        st.subheader("مقایسه با خانوارهای مشابه")
        st.dataframe(
            [
                {
                    "دسته": peer.label,
                    "شما": _format_percent(peer.user_percent),
                    "میانگین": _format_percent(peer.peer_average_percent),
                    "وضعیت": peer.status_label,
                }
                for peer in output.peers
            ],
            width="stretch",
            hide_index=True,
        )
    if output.fragility is not None:
        st.caption(f"شکنندگی: {output.fragility.label}")
    if output.dark_money is not None:
        st.caption(output.dark_money.label)
    if output.heatmap is not None and output.heatmap.peak_month_label:
        st.caption(f"ماه پرهزینه: {output.heatmap.peak_month_label}")
    _render_save_status(analysis.saved)


def _render_home_buy_page() -> None:
    """Render the home purchase timeline."""
    price = st.text_input("قیمت خانه (تومان)")
    savings = st.text_input("پس‌انداز فعلی (تومان)")
    monthly = st.text_input("پس‌انداز ماهانه (تومان)")
    income = st.text_input("درآمد ماهانه (اختیاری)")

    estimate = _load_home_buy_estimate(
        HomeBuyForm(
            price=price,
            savings=savings,
            monthly_saving=monthly,
            income=income,
        )
    )
    if estimate.result.error is not None:
        st.info(estimate.result.error)
    else:
        st.metric("زمان تقریبی خرید", estimate.display)

    if estimate.income_range is not None:
        rows = []
        for title, result in (
            ("۲۵٪ درآمد", estimate.income_range.slow),
            ("۳۰٪ درآمد", estimate.income_range.base),
            ("۳۵٪ درآمد", estimate.income_range.fast),
        ):
            rows.append(
                {
                    "سناریو": title,
                    "ماه": "—"
                    if result.months is None
                    else to_persian_digits(result.months),
                }
            )
        st.dataframe(rows, width="stretch", hide_index=True)
    _render_save_status(estimate.saved)


def _purchasing_power_chart_data(
    series: Sequence[PurchasingPowerPoint],
) -> list[dict[str, int | float]]:
    return [{"year": point.year, "value": point.value} for point in series]


def _render_purchasing_power_page() -> None:
    """Render the purchasing power projection."""
    defaults = PurchasingPowerForm()
    amount = st.text_input("مبلغ (تومان)", value=defaults.amount)
    inflation = st.text_input("تورم سالانه (٪)", value=defaults.inflation)
    years = st.text_input("چند سال بعد", value=defaults.years)

    estimate = _load_purchasing_power(
        PurchasingPowerForm(amount=amount, inflation=inflation, years=years)
    )
    result = estimate.result
    value_col, loss_col = st.columns(2)
    value_col.metric(
        f"ارزش در سال {to_persian_digits(result.target_year)}",
        _format_toman(result.value),
    )
    loss_col.metric("کاهش قدرت خرید", _format_percent(result.loss_percent))

    chart = alt.Chart(
        alt.Data(values=_purchasing_power_chart_data(result.series))
    ).mark_area(opacity=0.6).encode(
        x=alt.X("year:O", title="سال"),
        y=alt.Y("value:Q", title="ارزش"),
        tooltip=["year:O", "value:Q"],
    )
    st.altair_chart(chart, width="stretch")

    st.dataframe(
        [
            {
                "سناریو": scenario.label,
                "تورم": _format_percent(scenario.rate_percent),
                "ارزش": _format_toman(scenario.value),
            }
            for scenario in result.scenarios
        ],
        width="stretch",
        hide_index=True,
    )
    with st.expander("تورم سال‌های گذشته"):
        st.dataframe(
            [
                {
                    "سال": to_persian_digits(item.year),
                    "تورم": _format_percent(item.rate_percent),
                    "توضیح": item.note or "",
                }
                for item in HISTORICAL_INFLATION
            ],
            width="stretch",
            hide_index=True,
        )
    _render_save_status(estimate.saved)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="تخمینو", layout="wide")
    st.title("تخمینو")

    page = st.sidebar.selectbox(
        "ابزار",
        list(PAGES),
        format_func=lambda slug: TOOL_NAMES[slug],
    )
    st.subheader(TOOL_NAMES[page])
    if page == "loan":
        _render_loan_page()
    elif page == "gold-goal":
        _render_gold_page()
    elif page == "expense-leak":
        _render_expense_page()
    elif page == "home-buy":
        _render_home_buy_page()
    else:
        _render_purchasing_power_page()


if __name__ == "__main__":  # pragma: no cover
    main()
