"""
Income Tax Regime Comparison (FY 2025-26)

Computes tax under the old and the new regime for the same income and
reports which one is cheaper.

Both regimes apply a section 87A rebate as a cliff: at or below the
threshold the whole liability is waived, one rupee above it the full slab
tax applies.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class TaxRegimeRules:
    """
    Slab table and allowances for one regime.

    ``slabs`` holds (lower_bound, rate) pairs in ascending order; income above
    each lower bound, up to the next one, is taxed at that rate.
    """

    name: str
    standard_deduction: float
    slabs: Tuple[Tuple[float, float], ...]
    rebate_threshold: float
    cess_rate: float = 0.04
    allows_itemized_deductions: bool = True
    deduction_caps: Dict[str, float] = field(default_factory=dict)


OLD_REGIME = TaxRegimeRules(
    name="old",
    standard_deduction=50000,
    slabs=((250000, 0.05), (500000, 0.20), (1000000, 0.30)),
    rebate_threshold=500000,
    deduction_caps={"section_80c": 150000, "home_loan_interest": 200000},
)

NEW_REGIME = TaxRegimeRules(
    name="new",
    standard_deduction=75000,
    slabs=(
        (400000, 0.05),
        (800000, 0.10),
        (1200000, 0.15),
        (1600000, 0.20),
        (2000000, 0.25),
        (2400000, 0.30),
    ),
    rebate_threshold=1200000,
    allows_itemized_deductions=False,
)


@dataclass(frozen=True)
class Deductions:
    section_80c: float = 0.0
    section_80d: float = 0.0
    hra: float = 0.0
    home_loan_interest: float = 0.0
    other: float = 0.0


@dataclass(frozen=True)
class TaxInputs:
    gross_salary: float
    other_income: float = 0.0
    deductions: Deductions = field(default_factory=Deductions)

    @property
    def total_income(self) -> float:
        return self.gross_salary + self.other_income


@dataclass(frozen=True)
class RegimeTax:
    regime: str
    total_deductions: float
    taxable_income: float
    base_tax: float
    cess: float
    total_tax: float


@dataclass(frozen=True)
class TaxComparison:
    old_regime: RegimeTax
    new_regime: RegimeTax
    preferred_regime: str
    annual_savings: float

    @property
    def old_tax(self) -> float:
        return self.old_regime.total_tax

    @property
    def new_tax(self) -> float:
        return self.new_regime.total_tax


def slab_tax(taxable_income: float, slabs: Tuple[Tuple[float, float], ...]) -> float:
    """
    Progressive tax on ``taxable_income``.

    Walks the slabs from the top down, taxing the portion above each lower
    bound and then capping the remaining income at that bound.
    """
    tax = 0.0
    remaining = taxable_income
    for lower_bound, rate in reversed(slabs):
        if remaining > lower_bound:
            tax += (remaining - lower_bound) * rate
            remaining = lower_bound
    return tax


def _capped(rules: TaxRegimeRules, name: str, amount: float) -> float:
    cap = rules.deduction_caps.get(name)
    return amount if cap is None else min(amount, cap)


def regime_deductions(deductions: Deductions, rules: TaxRegimeRules) -> float:
    """Total deductions allowed under ``rules``, standard deduction included."""
    if not rules.allows_itemized_deductions:
        return rules.standard_deduction

    itemized = sum(
        _capped(rules, name, value) for name, value in vars(deductions).items()
    )
    return itemized + rules.standard_deduction


def compute_regime_tax(inputs: TaxInputs, rules: TaxRegimeRules) -> RegimeTax:
    """Tax payable under a single regime."""
    total_deductions = regime_deductions(inputs.deductions, rules)
    taxable = max(0.0, inputs.total_income - total_deductions)

    base_tax = slab_tax(taxable, rules.slabs)
    # Section 87A rebate
    if taxable <= rules.rebate_threshold:
        base_tax = 0.0

    cess = base_tax * rules.cess_rate
    return RegimeTax(
        regime=rules.name,
        total_deductions=total_deductions,
        taxable_income=taxable,
        base_tax=base_tax,
        cess=cess,
        total_tax=base_tax + cess,
    )


def _validate(inputs: TaxInputs) -> None:
    values = {"gross_salary": inputs.gross_salary, "other_income": inputs.other_income}
    values.update(vars(inputs.deductions))
    for name, value in values.items():
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite, non-negative number")


def compare_tax_regimes(
    inputs: TaxInputs,
    old_rules: TaxRegimeRules = OLD_REGIME,
    new_rules: TaxRegimeRules = NEW_REGIME,
) -> TaxComparison:
    """Compute both regimes; the new regime is preferred on a tie."""
    _validate(inputs)

    old = compute_regime_tax(inputs, old_rules)
    new = compute_regime_tax(inputs, new_rules)

    return TaxComparison(
        old_regime=old,
        new_regime=new,
        preferred_regime="new" if new.total_tax <= old.total_tax else "old",
        annual_savings=abs(old.total_tax - new.total_tax),
    )
