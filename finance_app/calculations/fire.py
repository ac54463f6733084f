"""
FIRE (Financial Independence, Retire Early) Projection

Year-by-year comparison of accumulated wealth against the corpus needed to
retire at each age under the 4% rule.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FireAssumptions:
    """Constants of the FIRE model."""

    # 4% withdrawal rule -> 25x annual expenses
    corpus_multiple: float = 25.0
    max_age: int = 80
    variant_multipliers: Dict[str, float] = field(
        default_factory=lambda: {"lean": 0.8, "standard": 1.0, "fat": 2.0}
    )


DEFAULT_ASSUMPTIONS = FireAssumptions()


@dataclass(frozen=True)
class FireParameters:
    current_age: int
    monthly_expenses: float
    current_savings: float
    monthly_investment: float
    annual_step_up_percent: float
    annual_return_percent: float
    annual_inflation_percent: float
    fire_variant: str = "standard"


@dataclass(frozen=True)
class FirePoint:
    age: int
    year: int
    wealth: float
    target: float
    annual_expenses: float


@dataclass(frozen=True)
class FireResult:
    series: List[FirePoint]
    fire_age: Optional[int]
    corpus_needed: Optional[float]
    final_wealth: float
    years_to_fire: Optional[int]
    current_freedom_years: Optional[float]

    @property
    def achieved(self) -> bool:
        return self.fire_age is not None


def _validate(params: FireParameters, assumptions: FireAssumptions) -> None:
    for name in (
        "monthly_expenses",
        "current_savings",
        "monthly_investment",
        "annual_step_up_percent",
        "annual_return_percent",
        "annual_inflation_percent",
    ):
        value = getattr(params, name)
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite, non-negative number")
    if params.current_age < 0 or params.current_age > assumptions.max_age:
        raise ValueError(f"current_age must be between 0 and {assumptions.max_age}")
    if params.fire_variant not in assumptions.variant_multipliers:
        raise ValueError(
            f"fire_variant must be one of {', '.join(assumptions.variant_multipliers)}"
        )


def simulate_fire(
    params: FireParameters, assumptions: FireAssumptions = DEFAULT_ASSUMPTIONS
) -> FireResult:
    """
    Project wealth and the FIRE target from the current age to ``max_age``.

    Growth is compounded annually: the year's contributions are added and the
    return is earned on the post-contribution balance. This is a deliberate
    approximation; monthly compounding would shift every figure.

    The FIRE age is the first age at which wealth reaches that age's target.
    """
    _validate(params, assumptions)

    multiplier = assumptions.variant_multipliers[params.fire_variant]
    annual_expenses_now = params.monthly_expenses * 12 * multiplier
    inflation = params.annual_inflation_percent / 100
    years_to_project = assumptions.max_age - params.current_age

    wealth = params.current_savings
    sip = params.monthly_investment
    fire_age = None
    corpus_needed = None
    series = []

    for year in range(years_to_project + 1):
        age = params.current_age + year
        expenses = annual_expenses_now * (1 + inflation) ** year
        target = expenses * assumptions.corpus_multiple

        series.append(
            FirePoint(age=age, year=year, wealth=wealth, target=target, annual_expenses=expenses)
        )

        if fire_age is None and wealth >= target:
            fire_age = age
            corpus_needed = target

        annual_investment = sip * 12
        interest = (wealth + annual_investment) * params.annual_return_percent / 100
        wealth = wealth + annual_investment + interest

        sip *= 1 + params.annual_step_up_percent / 100

    return FireResult(
        series=series,
        fire_age=fire_age,
        corpus_needed=corpus_needed,
        final_wealth=wealth,
        years_to_fire=fire_age - params.current_age if fire_age is not None else None,
        current_freedom_years=(
            params.current_savings / annual_expenses_now if annual_expenses_now > 0 else None
        ),
    )
