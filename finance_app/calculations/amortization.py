"""
Loan Amortization Calculations

Implements the EMI (fixed monthly installment) formula and a month-by-month
payoff simulation with optional recurring prepayments.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

PREPAYMENT_FREQUENCIES = ("monthly", "quarterly", "yearly")

# Months between extra payments for each prepayment frequency
_FREQUENCY_INTERVAL = {"monthly": 1, "quarterly": 3, "yearly": 12}


@dataclass(frozen=True)
class AmortizationAssumptions:
    """Constants used by the payoff simulation."""

    # Iterations allowed, as a multiple of the nominal tenure in months
    iteration_multiplier: int = 2
    # A balance at or below this amount counts as paid off
    payoff_tolerance: float = 1.0


DEFAULT_ASSUMPTIONS = AmortizationAssumptions()


@dataclass(frozen=True)
class Prepayment:
    """Recurring extra payment applied on top of the EMI."""

    amount: float
    frequency: str = "monthly"


@dataclass(frozen=True)
class LoanParameters:
    """Inputs for a loan comparison."""

    principal: float
    annual_rate_percent: float
    tenure_years: int
    prepayment: Optional[Prepayment] = None

    @property
    def total_months(self) -> int:
        return self.tenure_years * 12


@dataclass(frozen=True)
class AmortizationResult:
    """Outcome of a single payoff simulation."""

    total_interest: float
    total_amount: float
    months: int
    hit_iteration_limit: bool = False


@dataclass(frozen=True)
class PrepaymentComparison:
    """Baseline loan vs the same loan with prepayments."""

    emi: float
    regular: AmortizationResult
    prepayment: AmortizationResult
    interest_saved: float
    months_saved: int


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite, non-negative number")


def compute_emi(principal: float, annual_rate_percent: float, total_months: int) -> float:
    """
    Calculate the fixed monthly installment for a loan.

    Standard annuity formula with the rate given as a percentage
    (8.5 means 8.5% per year).

    Args:
        principal: Loan amount
        annual_rate_percent: Annual interest rate in percent
        total_months: Number of monthly installments

    Returns:
        Monthly payment, or 0.0 when principal or rate is zero
    """
    _require_non_negative("principal", principal)
    _require_non_negative("annual_rate_percent", annual_rate_percent)
    if total_months <= 0:
        raise ValueError("total_months must be positive")

    if principal == 0 or annual_rate_percent == 0:
        return 0.0

    monthly_rate = annual_rate_percent / 12 / 100
    growth = (1 + monthly_rate) ** total_months

    return principal * monthly_rate * growth / (growth - 1)


def loan_payment(principal: float, annual_rate_percent: float, total_months: int) -> float:
    """
    Monthly payment that clears the loan over ``total_months``.

    Same as :func:`compute_emi`, except that an interest-free loan is repaid
    straight-line (principal / months) instead of returning 0.
    """
    if annual_rate_percent == 0:
        _require_non_negative("principal", principal)
        if total_months <= 0:
            raise ValueError("total_months must be positive")
        return principal / total_months
    return compute_emi(principal, annual_rate_percent, total_months)


def _extra_due(month: int, frequency: str) -> bool:
    """Whether a prepayment falls in the given 1-based month."""
    return month % _FREQUENCY_INTERVAL[frequency] == 0


def simulate_amortization(
    principal: float,
    annual_rate_percent: float,
    total_months: int,
    payment: float,
    extra_payment: float = 0.0,
    frequency: str = "monthly",
    assumptions: AmortizationAssumptions = DEFAULT_ASSUMPTIONS,
) -> AmortizationResult:
    """
    Simulate paying a loan down month by month.

    Each month the interest on the outstanding balance is charged and the
    rest of the payment reduces principal. On months matching ``frequency``
    the extra payment is applied as well. When the month's principal plus
    extra would overshoot the balance, only the balance is paid.

    The loop runs at most ``iteration_multiplier * total_months`` times so a
    payment that never covers the interest cannot spin forever; the result
    reports whether that bound was reached.
    """
    _require_non_negative("principal", principal)
    _require_non_negative("annual_rate_percent", annual_rate_percent)
    _require_non_negative("payment", payment)
    _require_non_negative("extra_payment", extra_payment)
    if total_months <= 0:
        raise ValueError("total_months must be positive")
    if frequency not in _FREQUENCY_INTERVAL:
        raise ValueError(
            f"frequency must be one of {', '.join(PREPAYMENT_FREQUENCIES)}"
        )

    monthly_rate = annual_rate_percent / 12 / 100
    max_iterations = assumptions.iteration_multiplier * total_months

    balance = principal
    total_interest = 0.0
    months = 0

    while balance > assumptions.payoff_tolerance and months < max_iterations:
        interest = balance * monthly_rate
        principal_pmt = payment - interest

        extra = 0.0
        if extra_payment > 0 and _extra_due(months + 1, frequency):
            extra = extra_payment

        # Final payment clears whatever is left
        if principal_pmt + extra > balance:
            principal_pmt = balance
            extra = 0.0

        balance -= principal_pmt + extra
        total_interest += interest
        months += 1

        if balance <= 0:
            break

    hit_limit = balance > assumptions.payoff_tolerance
    if hit_limit:
        logger.warning(
            f"Amortization stopped after {months} months with "
            f"{balance:.2f} outstanding (payment {payment:.2f})"
        )

    return AmortizationResult(
        total_interest=total_interest,
        total_amount=principal + total_interest,
        months=months,
        hit_iteration_limit=hit_limit,
    )


def compare_prepayment(
    loan: LoanParameters,
    assumptions: AmortizationAssumptions = DEFAULT_ASSUMPTIONS,
) -> PrepaymentComparison:
    """Run the regular schedule and the prepayment schedule side by side."""
    if loan.tenure_years <= 0:
        raise ValueError("tenure_years must be positive")

    months = loan.total_months
    emi = loan_payment(loan.principal, loan.annual_rate_percent, months)

    regular = simulate_amortization(
        loan.principal, loan.annual_rate_percent, months, emi, 0.0, "monthly", assumptions
    )

    if loan.prepayment is None:
        prepaid = regular
    else:
        prepaid = simulate_amortization(
            loan.principal,
            loan.annual_rate_percent,
            months,
            emi,
            loan.prepayment.amount,
            loan.prepayment.frequency,
            assumptions,
        )

    return PrepaymentComparison(
        emi=emi,
        regular=regular,
        prepayment=prepaid,
        interest_saved=regular.total_amount - prepaid.total_amount,
        months_saved=regular.months - prepaid.months,
    )
