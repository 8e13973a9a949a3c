"""Domain models for loan amortization."""

from dataclasses import dataclass

LOAN_KINDS = ("standard", "benevolent")
FEE_METHODS = ("annual-first", "monthly")


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a repayment schedule.

    Attributes:
        month: 1-based month index.
        start_balance: Outstanding principal before this month's payment.
        interest: Interest or fee charged this month.
        principal: Principal repaid this month.
        payment: Total paid this month (interest plus principal).
        end_balance: Outstanding principal after the payment, never negative.
        is_fee_month: True for fee-only months of annual-first schedules.
    """

    month: int
    start_balance: float
    interest: float
    principal: float
    payment: float
    end_balance: float
    is_fee_month: bool = False


@dataclass(frozen=True)
class LoanSchedule:
    """Full schedule and totals for a loan.

    ``effective_rate_percent`` is total interest as a share of the principal,
    not an annualised rate.
    """

    schedule: list[AmortizationRow]
    total_interest: float
    total_payment: float
    monthly_average: float
    effective_rate_percent: float


@dataclass(frozen=True)
class LoanPreset:
    """Common Iranian loan product with its default terms."""

    key: str
    label: str
    annual_rate_percent: float
    term_value: int
    term_unit: str
    kind: str


__all__ = [
    "LOAN_KINDS",
    "FEE_METHODS",
    "AmortizationRow",
    "LoanSchedule",
    "LoanPreset",
]
