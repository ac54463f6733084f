"""
Dashboard Summary

Rolls a device's saved SIP and EMI inputs up into the headline figures of
the dashboard: monthly EMI, projected SIP value, a rough net worth and an
asset split.
"""

from dataclasses import dataclass
from typing import List

from finance_app.calculations.amortization import loan_payment
from finance_app.calculations.sip import simulate_step_up_growth, summarize_growth


@dataclass(frozen=True)
class DashboardAssumptions:
    """Rough ratios used for the estimates, and defaults for unsaved inputs."""

    # Share of the loan amount counted as equity already built
    equity_built_share: float = 0.4
    # Liquid buffer, as a share of the projected SIP value
    liquid_buffer_share: float = 0.1

    default_sip_return_percent: float = 12.0
    default_sip_years: int = 10
    default_emi_rate_percent: float = 8.5
    default_emi_tenure_years: int = 20


DEFAULT_ASSUMPTIONS = DashboardAssumptions()


@dataclass(frozen=True)
class DashboardInputs:
    sip_monthly: float = 0.0
    sip_step_up_percent: float = 0.0
    sip_return_percent: float = DEFAULT_ASSUMPTIONS.default_sip_return_percent
    sip_years: int = DEFAULT_ASSUMPTIONS.default_sip_years
    loan_amount: float = 0.0
    emi_rate_percent: float = DEFAULT_ASSUMPTIONS.default_emi_rate_percent
    emi_tenure_years: int = DEFAULT_ASSUMPTIONS.default_emi_tenure_years


@dataclass(frozen=True)
class AssetSlice:
    name: str
    value: float


@dataclass(frozen=True)
class DashboardSummary:
    sip_monthly: float
    sip_years: int
    sip_invested: float
    sip_future_value: float
    emi_monthly: float
    emi_tenure_years: int
    net_worth: float
    projected_wealth: float
    assets: List[AssetSlice]


def summarize_dashboard(
    inputs: DashboardInputs, assumptions: DashboardAssumptions = DEFAULT_ASSUMPTIONS
) -> DashboardSummary:
    """
    Compute the dashboard figures.

    The property is assumed to be worth the loan amount, so it counts in full
    towards projected wealth but only ``equity_built_share`` of it towards
    today's net worth.
    """
    if inputs.loan_amount > 0:
        emi = loan_payment(
            inputs.loan_amount, inputs.emi_rate_percent, inputs.emi_tenure_years * 12
        )
    else:
        emi = 0.0

    sip_position = summarize_growth(
        simulate_step_up_growth(
            inputs.sip_monthly,
            inputs.sip_step_up_percent,
            inputs.sip_return_percent,
            inputs.sip_years,
        )
    )
    future_value = sip_position.value

    return DashboardSummary(
        sip_monthly=inputs.sip_monthly,
        sip_years=inputs.sip_years,
        sip_invested=sip_position.invested,
        sip_future_value=future_value,
        emi_monthly=emi,
        emi_tenure_years=inputs.emi_tenure_years,
        net_worth=sip_position.invested + inputs.loan_amount * assumptions.equity_built_share,
        projected_wealth=future_value + inputs.loan_amount,
        assets=[
            AssetSlice("Equity (SIP)", future_value),
            AssetSlice("Real Estate", inputs.loan_amount),
            AssetSlice("Liquid/Other", future_value * assumptions.liquid_buffer_share),
        ],
    )
