"""
Step-Up SIP Calculations

Projects a monthly investment plan whose contribution rises by a fixed
percentage every year.
"""

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ContributionParameters:
    """Inputs for a step-up SIP projection."""

    monthly_amount: float
    annual_step_up_percent: float
    annual_return_percent: float
    years: int


@dataclass(frozen=True)
class ContributionPoint:
    """Position of the plan at the end of a year."""

    year: int
    invested: float
    value: float
    gain: float


def simulate_step_up_growth(
    monthly_amount: float,
    annual_step_up_percent: float,
    annual_return_percent: float,
    years: int,
) -> List[ContributionPoint]:
    """
    Simulate a step-up SIP month by month.

    Each month's contribution is added before that month's return is
    applied. The contribution is raised by ``annual_step_up_percent`` after
    every 12 months.

    Args:
        monthly_amount: Contribution in the first year
        annual_step_up_percent: Yearly increase of the contribution, in percent
        annual_return_percent: Expected annual return, in percent
        years: Length of the plan

    Returns:
        One point per completed year
    """
    for name, value in (
        ("monthly_amount", monthly_amount),
        ("annual_step_up_percent", annual_step_up_percent),
        ("annual_return_percent", annual_return_percent),
    ):
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite, non-negative number")
    if years <= 0:
        raise ValueError("years must be positive")

    monthly_rate = annual_return_percent / 12 / 100
    balance = 0.0
    total_invested = 0.0
    contribution = monthly_amount
    points = []

    for year in range(1, years + 1):
        for _ in range(12):
            balance = (balance + contribution) * (1 + monthly_rate)
            total_invested += contribution

        points.append(
            ContributionPoint(
                year=year,
                invested=total_invested,
                value=balance,
                gain=balance - total_invested,
            )
        )

        contribution *= 1 + annual_step_up_percent / 100

    return points


def summarize_growth(points: List[ContributionPoint]) -> ContributionPoint:
    """Final position of the plan (zeros for an empty projection)."""
    if not points:
        return ContributionPoint(year=0, invested=0.0, value=0.0, gain=0.0)
    return points[-1]


def project_growth(params: ContributionParameters) -> List[ContributionPoint]:
    """Run :func:`simulate_step_up_growth` for a parameter set."""
    return simulate_step_up_growth(
        params.monthly_amount,
        params.annual_step_up_percent,
        params.annual_return_percent,
        params.years,
    )
