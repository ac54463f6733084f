"""
Tests for the old vs new tax regime comparison.
"""

import pytest
from finance_app.calculations.tax import (
    NEW_REGIME,
    OLD_REGIME,
    Deductions,
    TaxInputs,
    compare_tax_regimes,
    compute_regime_tax,
    slab_tax,
)


class TestSlabTax:
    """Test the progressive slab walk."""

    def test_old_regime_slabs(self):
        assert slab_tax(250000, OLD_REGIME.slabs) == 0
        assert slab_tax(500000, OLD_REGIME.slabs) == pytest.approx(12500)
        assert slab_tax(1000000, OLD_REGIME.slabs) == pytest.approx(112500)
        assert slab_tax(1325000, OLD_REGIME.slabs) == pytest.approx(210000)

    def test_new_regime_slabs(self):
        assert slab_tax(400000, NEW_REGIME.slabs) == 0
        assert slab_tax(1475000, NEW_REGIME.slabs) == pytest.approx(101250)
        # 20k + 40k + 60k + 80k + 100k + 30% of 6L
        assert slab_tax(3000000, NEW_REGIME.slabs) == pytest.approx(480000)


class TestTaxComparison:
    """Test both regimes end to end."""

    def test_regression_vector(self):
        inputs = TaxInputs(
            gross_salary=1500000,
            other_income=50000,
            deductions=Deductions(section_80c=150000, section_80d=25000),
        )
        result = compare_tax_regimes(inputs)

        assert result.old_regime.total_deductions == 225000
        assert result.old_regime.taxable_income == 1325000
        assert result.old_regime.base_tax == pytest.approx(210000)
        assert result.old_tax == pytest.approx(218400)

        assert result.new_regime.taxable_income == 1475000
        assert result.new_regime.base_tax == pytest.approx(101250)
        assert result.new_tax == pytest.approx(105300)

        assert result.preferred_regime == "new"
        assert result.annual_savings == pytest.approx(113100)

    def test_deduction_caps(self):
        inputs = TaxInputs(
            gross_salary=2000000,
            deductions=Deductions(section_80c=300000, home_loan_interest=500000),
        )
        old = compute_regime_tax(inputs, OLD_REGIME)
        assert old.total_deductions == 150000 + 200000 + 50000

    def test_new_regime_ignores_itemized_deductions(self):
        inputs = TaxInputs(
            gross_salary=2000000,
            deductions=Deductions(section_80c=150000, section_80d=50000, hra=200000),
        )
        new = compute_regime_tax(inputs, NEW_REGIME)
        assert new.total_deductions == 75000
        assert new.taxable_income == 1925000

    def test_taxable_income_floors_at_zero(self):
        inputs = TaxInputs(gross_salary=100000, deductions=Deductions(section_80c=150000))
        result = compare_tax_regimes(inputs)
        assert result.old_regime.taxable_income == 0
        assert result.new_regime.taxable_income == 25000
        assert result.old_tax == 0
        assert result.new_tax == 0

    def test_tie_prefers_new_regime(self):
        result = compare_tax_regimes(TaxInputs(gross_salary=300000))
        assert result.old_tax == result.new_tax == 0
        assert result.preferred_regime == "new"
        assert result.annual_savings == 0

    def test_old_regime_preferred_with_large_deductions(self):
        inputs = TaxInputs(
            gross_salary=1300000,
            deductions=Deductions(
                section_80c=150000, section_80d=50000, hra=300000, home_loan_interest=200000
            ),
        )
        result = compare_tax_regimes(inputs)
        # Old taxable 550,000 vs new taxable 1,225,000
        assert result.old_tax < result.new_tax
        assert result.preferred_regime == "old"

    def test_negative_income_rejected(self):
        with pytest.raises(ValueError):
            compare_tax_regimes(TaxInputs(gross_salary=-1))


class TestRebateCliff:
    """Test the section 87A rebate is all-or-nothing."""

    def test_old_regime_at_threshold_pays_nothing(self):
        # 550,000 - 50,000 standard deduction = 500,000 taxable
        result = compute_regime_tax(TaxInputs(gross_salary=550000), OLD_REGIME)
        assert result.taxable_income == 500000
        assert result.total_tax == 0

    def test_old_regime_one_rupee_over_pays_full_tax(self):
        result = compute_regime_tax(TaxInputs(gross_salary=550001), OLD_REGIME)
        assert result.taxable_income == 500001
        assert result.base_tax == pytest.approx(12500.2)
        assert result.total_tax == pytest.approx(12500.2 * 1.04)

    def test_new_regime_at_threshold_pays_nothing(self):
        result = compute_regime_tax(TaxInputs(gross_salary=1275000), NEW_REGIME)
        assert result.taxable_income == 1200000
        assert result.total_tax == 0

    def test_new_regime_one_rupee_over_pays_full_tax(self):
        result = compute_regime_tax(TaxInputs(gross_salary=1275001), NEW_REGIME)
        assert result.taxable_income == 1200001
        assert result.base_tax == pytest.approx(60000.15)
        assert result.total_tax == pytest.approx(60000.15 * 1.04)
