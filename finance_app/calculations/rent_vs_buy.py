"""
Rent vs Buy Comparison

Runs the buying and renting scenarios side by side, month by month, over a
fixed horizon and compares the net wealth each one ends with.

Buying: pay EMI until the loan tenure ends, pay maintenance, and hold a
property that appreciates monthly.

Renting: invest the down payment and buying costs instead, let that corpus
earn returns, and add (or draw) the monthly difference between the buyer's
outflow (EMI + maintenance) and the rent.
"""

import math
from dataclasses import dataclass
from typing import List

from finance_app.calculations.amortization import loan_payment


@dataclass(frozen=True)
class OwnershipAssumptions:
    """Constants of the ownership model."""

    maintenance_inflation_percent: float = 4.0


DEFAULT_ASSUMPTIONS = OwnershipAssumptions()


@dataclass(frozen=True)
class RentingParameters:
    monthly_rent: float
    annual_rent_increase_percent: float
    annual_investment_return_percent: float


@dataclass(frozen=True)
class BuyingParameters:
    property_price: float
    down_payment_percent: float
    loan_rate_percent: float
    loan_tenure_years: int
    annual_appreciation_percent: float
    one_time_buying_cost_percent: float
    monthly_maintenance: float


@dataclass(frozen=True)
class OwnershipParameters:
    horizon_years: int
    renting: RentingParameters
    buying: BuyingParameters


@dataclass(frozen=True)
class OwnershipYearPoint:
    """Year-end snapshot of both scenarios."""

    year: int
    buying_wealth: float
    renting_wealth: float
    property_value: float
    outstanding_loan: float
    invested_corpus: float


@dataclass(frozen=True)
class OwnershipSummary:
    emi: float
    loan_amount: float
    initial_corpus: float
    final_buying_wealth: float
    final_renting_wealth: float
    final_property_value: float
    outstanding_loan: float
    total_rent_paid: float
    total_emi_paid: float
    total_maintenance_paid: float
    winner: str
    margin: float


@dataclass(frozen=True)
class OwnershipComparison:
    series: List[OwnershipYearPoint]
    summary: OwnershipSummary


def _validate(params: OwnershipParameters) -> None:
    if params.horizon_years <= 0:
        raise ValueError("horizon_years must be positive")
    if params.buying.loan_tenure_years <= 0:
        raise ValueError("loan_tenure_years must be positive")
    if params.buying.property_price <= 0:
        raise ValueError("property_price must be positive")
    if params.buying.down_payment_percent > 100:
        raise ValueError("down_payment_percent cannot exceed 100")

    for group in (params.renting, params.buying):
        for name, value in vars(group).items():
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite, non-negative number")


def simulate_ownership(
    params: OwnershipParameters,
    assumptions: OwnershipAssumptions = DEFAULT_ASSUMPTIONS,
) -> OwnershipComparison:
    """
    Simulate renting and buying over ``horizon_years * 12`` months.

    Rent and maintenance step up at each year end, after that year's
    snapshot month has been processed. The renter's corpus is not clamped:
    when rent outgrows the buyer's outflow it can be drawn below zero.
    """
    _validate(params)
    buy = params.buying
    rent = params.renting

    months = params.horizon_years * 12
    loan_months = buy.loan_tenure_years * 12
    down_payment = buy.property_price * buy.down_payment_percent / 100
    buying_costs = buy.property_price * buy.one_time_buying_cost_percent / 100
    loan_amount = buy.property_price - down_payment

    monthly_rate = buy.loan_rate_percent / 12 / 100
    emi = loan_payment(loan_amount, buy.loan_rate_percent, loan_months)

    initial_corpus = down_payment + buying_costs
    corpus = initial_corpus
    property_value = buy.property_price
    outstanding = loan_amount
    current_rent = rent.monthly_rent
    maintenance = buy.monthly_maintenance

    total_rent = 0.0
    total_emi = 0.0
    total_maintenance = 0.0
    series = []

    for month in range(1, months + 1):
        # Buying
        if month <= loan_months:
            interest = outstanding * monthly_rate
            outstanding -= emi - interest
            total_emi += emi
            emi_due = emi
        else:
            outstanding = 0.0
            emi_due = 0.0

        total_maintenance += maintenance
        property_value *= 1 + buy.annual_appreciation_percent / 100 / 12

        # Renting
        total_rent += current_rent
        surplus = (emi_due + maintenance) - current_rent
        corpus *= 1 + rent.annual_investment_return_percent / 100 / 12
        corpus += surplus

        if month % 12 == 0:
            current_rent *= 1 + rent.annual_rent_increase_percent / 100
            maintenance *= 1 + assumptions.maintenance_inflation_percent / 100

            owed = max(outstanding, 0.0)
            series.append(
                OwnershipYearPoint(
                    year=month // 12,
                    buying_wealth=property_value - owed,
                    renting_wealth=corpus,
                    property_value=property_value,
                    outstanding_loan=owed,
                    invested_corpus=corpus,
                )
            )

    # Rounding can leave a tiny negative balance; report it as settled
    final_outstanding = max(outstanding, 0.0)
    final_buying = property_value - final_outstanding
    final_renting = corpus

    return OwnershipComparison(
        series=series,
        summary=OwnershipSummary(
            emi=emi,
            loan_amount=loan_amount,
            initial_corpus=initial_corpus,
            final_buying_wealth=final_buying,
            final_renting_wealth=final_renting,
            final_property_value=property_value,
            outstanding_loan=final_outstanding,
            total_rent_paid=total_rent,
            total_emi_paid=total_emi,
            total_maintenance_paid=total_maintenance,
            winner="buy" if final_buying > final_renting else "rent",
            margin=abs(final_buying - final_renting),
        ),
    )
