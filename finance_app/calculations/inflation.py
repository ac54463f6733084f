"""
Inflation Calculations

Shows how a fixed sum loses purchasing power over time.
"""

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ErosionParameters:
    """Amount to discount, the inflation rate and how many years to run."""

    initial_amount: float
    annual_inflation_percent: float
    years: int


@dataclass(frozen=True)
class ErosionPoint:
    """Purchasing power of the initial amount after ``year`` years."""

    year: int
    value: float
    loss: float


@dataclass(frozen=True)
class ErosionSummary:
    """Headline figures for the last year of the series."""

    final_value: float
    amount_lost: float
    percent_lost: float


def simulate_erosion(
    initial_amount: float, annual_inflation_percent: float, years: int
) -> List[ErosionPoint]:
    """
    Discount ``initial_amount`` by inflation for years 0..years inclusive.

    value(year) = initial_amount / (1 + rate) ** year
    """
    if not math.isfinite(initial_amount) or initial_amount <= 0:
        raise ValueError("initial_amount must be a positive number")
    if not math.isfinite(annual_inflation_percent) or annual_inflation_percent < 0:
        raise ValueError("annual_inflation_percent must be a finite, non-negative number")
    if years <= 0:
        raise ValueError("years must be positive")

    rate = annual_inflation_percent / 100
    points = []

    for year in range(years + 1):
        value = initial_amount / (1 + rate) ** year
        points.append(ErosionPoint(year=year, value=value, loss=initial_amount - value))

    return points


def summarize_erosion(initial_amount: float, points: List[ErosionPoint]) -> ErosionSummary:
    """Headline figures: final value and the share of value lost."""
    final_value = points[-1].value
    amount_lost = initial_amount - final_value
    return ErosionSummary(
        final_value=final_value,
        amount_lost=amount_lost,
        percent_lost=amount_lost / initial_amount * 100,
    )


def project_erosion(params: ErosionParameters) -> List[ErosionPoint]:
    """Run :func:`simulate_erosion` for a parameter set."""
    return simulate_erosion(
        params.initial_amount, params.annual_inflation_percent, params.years
    )
