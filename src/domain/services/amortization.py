"""Loan amortization schedules.

Two loan families are supported:

* ``standard``: a level-payment annuity with monthly compounding.
* ``benevolent`` (gharz-al-hasaneh): no compounding. A fee is charged on the
  outstanding balance either once per 12-month cycle (``annual-first``) or
  monthly on the declining balance (``monthly``).
"""

import math

from src.domain.models.loan import AmortizationRow, LoanPreset, LoanSchedule

LOAN_PRESETS = (
    LoanPreset("gharz", "قرض‌الحسنه", 4.0, 10, "year", "benevolent"),
    LoanPreset("moshavereh", "مضاربه/مشارکت", 23.0, 1, "year", "standard"),
    LoanPreset("maskan", "مسکن", 18.0, 20, "year", "standard"),
    LoanPreset("shakhsi", "شخصی/نقدی", 23.0, 5, "year", "standard"),
    LoanPreset("custom", "سایر (دستی)", 0.0, 1, "year", "standard"),
)


def find_loan_preset(key: str | None) -> LoanPreset:
    """Return the preset for ``key``, falling back to the first preset."""
    for preset in LOAN_PRESETS:
        if preset.key == key:
            return preset
    return LOAN_PRESETS[0]


def term_in_months(value: float, unit: str = "month") -> int:
    """Convert a duration in months or years to whole months.

    Args:
        value: Duration amount.
        unit: ``"month"`` or ``"year"``.

    Returns:
        int: Whole months, or 0 for a non-positive or non-finite duration.
    """
    if value is None or not math.isfinite(value) or value <= 0:
        return 0
    months = value * 12 if unit == "year" else value
    return int(math.floor(months))


def _sanitize(principal, annual_rate_percent, term_months):
    amount = principal if principal is not None else 0.0
    if not math.isfinite(amount) or amount < 0:
        amount = 0.0
    term = term_months if term_months is not None else 1
    if not math.isfinite(term):
        term = 1
    months = max(1, int(math.floor(term)))
    rate = annual_rate_percent if annual_rate_percent is not None else 0.0
    if not math.isfinite(rate):
        rate = 0.0
    return float(amount), float(rate), months


def _annual_first_rows(amount, rate, months):
    fee_months = math.ceil(months / 12)
    installments = months - fee_months
    if installments <= 0:
        return None

    installment = amount / installments
    balance = amount
    rows = []
    for month in range(1, months + 1):
        if (month - 1) % 12 == 0:
            is_fee_month = True
            interest = balance * rate / 100
            principal = 0.0
        else:
            is_fee_month = False
            interest = 0.0
            principal = installment
            # last installment takes whatever is left
            if month == months or balance - principal < 1:
                principal = balance
        start = balance
        balance -= principal
        rows.append(
            AmortizationRow(
                month=month,
                start_balance=start,
                interest=interest,
                principal=principal,
                payment=principal + interest,
                end_balance=max(0.0, balance),
                is_fee_month=is_fee_month,
            )
        )
    return rows


def _monthly_fee_rows(amount, rate, months):
    principal = amount / months
    balance = amount
    rows = []
    for month in range(1, months + 1):
        interest = balance * rate / 100 / 12
        start = balance
        balance -= principal
        rows.append(
            AmortizationRow(
                month=month,
                start_balance=start,
                interest=interest,
                principal=principal,
                payment=principal + interest,
                end_balance=max(0.0, balance),
            )
        )
    return rows


def _annuity_rows(amount, rate, months):
    r = rate / 12 / 100
    if r == 0:
        payment = amount / months
    else:
        growth = (1 + r) ** months
        payment = amount * r * growth / (growth - 1)

    balance = amount
    rows = []
    for month in range(1, months + 1):
        interest = balance * r
        principal = payment - interest
        row_payment = payment
        if month == months:
            principal = balance
            row_payment = principal + interest
        start = balance
        balance -= principal
        rows.append(
            AmortizationRow(
                month=month,
                start_balance=start,
                interest=interest,
                principal=principal,
                payment=row_payment,
                end_balance=max(0.0, balance),
            )
        )
    return rows


def compute_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    kind: str = "standard",
    fee_method: str = "annual-first",
) -> LoanSchedule:
    """Compute the repayment schedule of a loan.

    The function is total: a negative or non-finite principal is treated as
    0, the term is floored to at least one month and a non-finite rate is
    treated as 0.

    Args:
        principal: Loan amount.
        annual_rate_percent: Nominal annual rate, or the annual fee rate for
            benevolent loans.
        term_months: Number of monthly payments.
        kind: ``"standard"`` or ``"benevolent"``.
        fee_method: ``"annual-first"`` or ``"monthly"`` (benevolent only).
            Annual-first falls back to monthly when the term leaves no month
            for principal repayment.

    Returns:
        LoanSchedule: One row per month plus totals.
    """
    amount, rate, months = _sanitize(principal, annual_rate_percent, term_months)

    if kind == "benevolent":
        rows = None
        if fee_method == "annual-first":
            rows = _annual_first_rows(amount, rate, months)
        if rows is None:
            rows = _monthly_fee_rows(amount, rate, months)
    else:
        rows = _annuity_rows(amount, rate, months)

    total_interest = sum(row.interest for row in rows)
    total_payment = sum(row.payment for row in rows)
    return LoanSchedule(
        schedule=rows,
        total_interest=total_interest,
        total_payment=total_payment,
        monthly_average=total_payment / months,
        effective_rate_percent=(
            total_interest / amount * 100 if amount > 0 else 0.0
        ),
    )


__all__ = [
    "LOAN_PRESETS",
    "find_loan_preset",
    "term_in_months",
    "compute_schedule",
]
