"""
Tests for the FIRE projection.
"""

import pytest
from finance_app.calculations.fire import FireAssumptions, FireParameters, simulate_fire


def make_params(**overrides) -> FireParameters:
    values = dict(
        current_age=30,
        monthly_expenses=20000,
        current_savings=0,
        monthly_investment=50000,
        annual_step_up_percent=10,
        annual_return_percent=12,
        annual_inflation_percent=6,
        fire_variant="standard",
    )
    values.update(overrides)
    return FireParameters(**values)


class TestFireProjection:
    """Test wealth and target trajectories."""

    def test_series_runs_to_age_80(self):
        result = simulate_fire(make_params())
        assert len(result.series) == 51
        assert result.series[0].age == 30
        assert result.series[-1].age == 80
        assert [p.year for p in result.series] == list(range(51))

    def test_target_is_25x_inflated_expenses(self):
        result = simulate_fire(make_params(monthly_expenses=10000))
        assert result.series[0].target == pytest.approx(120000 * 25)
        assert result.series[1].target == pytest.approx(120000 * 1.06 * 25)
        assert result.series[1].annual_expenses == pytest.approx(120000 * 1.06)

    def test_annual_compounding_on_post_contribution_balance(self):
        result = simulate_fire(
            make_params(
                current_savings=100000,
                monthly_investment=1000,
                annual_step_up_percent=0,
                annual_return_percent=10,
            )
        )
        assert result.series[1].wealth == pytest.approx((100000 + 12000) * 1.1)

    def test_variant_multipliers(self):
        targets = {
            variant: simulate_fire(make_params(monthly_expenses=10000, fire_variant=variant)).series[0].target
            for variant in ("lean", "standard", "fat")
        }
        assert targets["lean"] == pytest.approx(2400000)
        assert targets["standard"] == pytest.approx(3000000)
        assert targets["fat"] == pytest.approx(6000000)

    def test_custom_corpus_multiple(self):
        assumptions = FireAssumptions(corpus_multiple=30)
        result = simulate_fire(make_params(monthly_expenses=10000), assumptions)
        assert result.series[0].target == pytest.approx(3600000)


class TestFireAge:
    """Test first-crossing FIRE age."""

    def test_fire_age_found_with_strong_savings(self):
        result = simulate_fire(make_params())
        assert result.achieved
        assert 30 < result.fire_age < 80

        index = result.fire_age - 30
        crossing = result.series[index]
        assert crossing.wealth >= crossing.target
        assert result.corpus_needed == crossing.target
        # First crossing: every earlier age was short of its target
        for point in result.series[:index]:
            assert point.wealth < point.target
        assert result.years_to_fire == index

    def test_no_savings_never_reaches_fire(self):
        result = simulate_fire(make_params(current_savings=0, monthly_investment=0))
        assert result.fire_age is None
        assert result.corpus_needed is None
        assert result.years_to_fire is None
        assert not result.achieved
        assert result.final_wealth == 0

    def test_zero_expenses_achieved_immediately(self):
        result = simulate_fire(make_params(monthly_expenses=0, current_savings=0, monthly_investment=0))
        assert result.fire_age == 30
        assert result.corpus_needed == 0
        assert result.current_freedom_years is None

    def test_already_financially_independent(self):
        result = simulate_fire(make_params(monthly_expenses=10000, current_savings=10000000))
        assert result.fire_age == 30
        assert result.years_to_fire == 0

    def test_leaner_variant_retires_no_later(self):
        ages = [simulate_fire(make_params(fire_variant=v)).fire_age for v in ("lean", "standard", "fat")]
        assert ages[0] <= ages[1] <= ages[2]

    def test_current_freedom_years(self):
        result = simulate_fire(make_params(monthly_expenses=25000, current_savings=600000))
        assert result.current_freedom_years == pytest.approx(2.0)

    def test_age_beyond_horizon_rejected(self):
        with pytest.raises(ValueError):
            simulate_fire(make_params(current_age=81))

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError):
            simulate_fire(make_params(fire_variant="barista"))
