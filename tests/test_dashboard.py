"""
Tests for the dashboard summary.
"""

import pytest
from finance_app.calculations.amortization import compute_emi
from finance_app.calculations.dashboard import (
    DashboardAssumptions,
    DashboardInputs,
    summarize_dashboard,
)
from finance_app.calculations.sip import simulate_step_up_growth


class TestDashboardSummary:
    """Test headline figures built from saved SIP and EMI inputs."""

    def test_defaults_without_saved_inputs(self):
        summary = summarize_dashboard(DashboardInputs())

        assert summary.emi_monthly == 0
        assert summary.sip_future_value == 0
        assert summary.net_worth == 0
        assert summary.projected_wealth == 0
        assert summary.sip_years == 10
        assert summary.emi_tenure_years == 20

    def test_figures_follow_the_calculators(self):
        inputs = DashboardInputs(
            sip_monthly=10000,
            sip_step_up_percent=10,
            sip_return_percent=12,
            sip_years=15,
            loan_amount=5000000,
            emi_rate_percent=8.5,
            emi_tenure_years=20,
        )
        summary = summarize_dashboard(inputs)
        position = simulate_step_up_growth(10000, 10, 12, 15)[-1]

        assert summary.emi_monthly == pytest.approx(compute_emi(5000000, 8.5, 240))
        assert summary.sip_invested == pytest.approx(position.invested)
        assert summary.sip_future_value == pytest.approx(position.value)
        assert summary.projected_wealth == pytest.approx(position.value + 5000000)
        assert summary.net_worth == pytest.approx(position.invested + 5000000 * 0.4)

    def test_asset_split(self):
        inputs = DashboardInputs(sip_monthly=5000, loan_amount=3000000)
        summary = summarize_dashboard(inputs)

        assets = {a.name: a.value for a in summary.assets}
        assert list(assets) == ["Equity (SIP)", "Real Estate", "Liquid/Other"]
        assert assets["Equity (SIP)"] == summary.sip_future_value
        assert assets["Real Estate"] == 3000000
        assert assets["Liquid/Other"] == pytest.approx(summary.sip_future_value * 0.1)

    def test_interest_free_loan_repaid_straight_line(self):
        summary = summarize_dashboard(
            DashboardInputs(loan_amount=1200000, emi_rate_percent=0, emi_tenure_years=10)
        )
        assert summary.emi_monthly == 10000

    def test_ratios_are_configurable(self):
        inputs = DashboardInputs(sip_monthly=5000, loan_amount=1000000)
        assumptions = DashboardAssumptions(equity_built_share=1.0, liquid_buffer_share=0)
        summary = summarize_dashboard(inputs, assumptions)

        assert summary.net_worth == pytest.approx(summary.sip_invested + 1000000)
        assert summary.assets[-1].value == 0

    def test_invalid_inputs_rejected(self):
        with pytest.raises(ValueError):
            summarize_dashboard(DashboardInputs(sip_years=0))
