"""
Financial calculation API endpoints.

These endpoints accept calculator inputs and return the projection results.
Rates are percentages throughout (8.5 means 8.5%).
"""

import logging
from dataclasses import asdict
from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from finance_app.calculations import amortization, sip, inflation, fire, rent_vs_buy, tax

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(calculator: str, exc: ValueError) -> HTTPException:
    logger.warning(f"Rejected {calculator} inputs: {exc}")
    return HTTPException(status_code=400, detail=str(exc))


class PrepaymentInput(BaseModel):
    """Recurring prepayment on a loan."""

    amount: float = Field(..., ge=0)
    frequency: Literal["monthly", "quarterly", "yearly"] = "monthly"


class EMIInput(BaseModel):
    """Input for EMI calculation."""

    loan_amount: float = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0)
    tenure_years: int = Field(..., gt=0, le=50)
    prepayment: Optional[PrepaymentInput] = None


class ScenarioResult(BaseModel):
    total_interest: float
    total_amount: float
    months: int
    hit_iteration_limit: bool


class EMIResponse(BaseModel):
    """Regular loan vs prepayment scenario."""

    emi: float
    regular: ScenarioResult
    prepayment: ScenarioResult
    interest_saved: float
    months_saved: int


@router.post("/emi", response_model=EMIResponse)
async def calculate_emi(inputs: EMIInput):
    """Compare a loan with and without prepayments."""
    loan = amortization.LoanParameters(
        principal=inputs.loan_amount,
        annual_rate_percent=inputs.interest_rate,
        tenure_years=inputs.tenure_years,
        prepayment=(
            amortization.Prepayment(inputs.prepayment.amount, inputs.prepayment.frequency)
            if inputs.prepayment
            else None
        ),
    )
    try:
        comparison = amortization.compare_prepayment(loan)
    except ValueError as e:
        raise _bad_request("EMI", e)

    return EMIResponse(**asdict(comparison))


class SIPInput(BaseModel):
    """Input for step-up SIP projection."""

    monthly_investment: float = Field(..., ge=0)
    step_up_percent: float = Field(0.0, ge=0)
    return_rate: float = Field(..., ge=0)
    years: int = Field(..., gt=0, le=60)


@router.post("/sip")
async def calculate_sip(inputs: SIPInput):
    """Project a step-up SIP year by year."""
    try:
        points = sip.project_growth(
            sip.ContributionParameters(
                monthly_amount=inputs.monthly_investment,
                annual_step_up_percent=inputs.step_up_percent,
                annual_return_percent=inputs.return_rate,
                years=inputs.years,
            )
        )
    except ValueError as e:
        raise _bad_request("SIP", e)

    return {
        "series": [asdict(p) for p in points],
        "summary": asdict(sip.summarize_growth(points)),
    }


class InflationInput(BaseModel):
    """Input for purchasing-power erosion."""

    initial_amount: float = Field(..., gt=0)
    inflation_rate: float = Field(..., ge=0)
    years: int = Field(..., gt=0, le=100)


@router.post("/inflation")
async def calculate_inflation(inputs: InflationInput):
    """Show how inflation erodes a fixed amount."""
    try:
        points = inflation.project_erosion(
            inflation.ErosionParameters(
                initial_amount=inputs.initial_amount,
                annual_inflation_percent=inputs.inflation_rate,
                years=inputs.years,
            )
        )
    except ValueError as e:
        raise _bad_request("inflation", e)

    return {
        "series": [asdict(p) for p in points],
        "summary": asdict(inflation.summarize_erosion(inputs.initial_amount, points)),
    }


class FireInput(BaseModel):
    """Input for the FIRE projection."""

    current_age: int = Field(..., ge=0, le=80)
    monthly_expenses: float = Field(..., ge=0)
    current_savings: float = Field(0.0, ge=0)
    monthly_investment: float = Field(0.0, ge=0)
    step_up_percent: float = Field(0.0, ge=0)
    return_rate: float = Field(..., ge=0)
    inflation_rate: float = Field(..., ge=0)
    fire_type: Literal["lean", "standard", "fat"] = "standard"


class FirePointResponse(BaseModel):
    age: int
    year: int
    wealth: float
    target: float
    annual_expenses: float


class FireResponse(BaseModel):
    """Wealth vs FIRE target by age."""

    series: List[FirePointResponse]
    fire_age: Optional[int] = None
    corpus_needed: Optional[float] = None
    final_wealth: float
    years_to_fire: Optional[int] = None
    current_freedom_years: Optional[float] = None


@router.post("/fire", response_model=FireResponse)
async def calculate_fire(inputs: FireInput):
    """Find the first age at which wealth covers the retirement corpus."""
    params = fire.FireParameters(
        current_age=inputs.current_age,
        monthly_expenses=inputs.monthly_expenses,
        current_savings=inputs.current_savings,
        monthly_investment=inputs.monthly_investment,
        annual_step_up_percent=inputs.step_up_percent,
        annual_return_percent=inputs.return_rate,
        annual_inflation_percent=inputs.inflation_rate,
        fire_variant=inputs.fire_type,
    )
    try:
        result = fire.simulate_fire(params)
    except ValueError as e:
        raise _bad_request("FIRE", e)

    return FireResponse(**asdict(result))


class RentVsBuyInput(BaseModel):
    """Input for the rent vs buy comparison."""

    time_horizon: int = Field(..., gt=0, le=40)

    # Renting
    monthly_rent: float = Field(..., ge=0)
    rent_increase: float = Field(5.0, ge=0)
    investment_return: float = Field(7.0, ge=0)

    # Buying
    property_price: float = Field(..., gt=0)
    down_payment_percent: float = Field(20.0, ge=0, le=100)
    loan_interest: float = Field(..., ge=0)
    loan_tenure: int = Field(..., gt=0, le=40)
    appreciation: float = Field(6.0, ge=0)
    buying_costs_percent: float = Field(7.0, ge=0)
    maintenance: float = Field(0.0, ge=0)


@router.post("/rent-vs-buy")
async def calculate_rent_vs_buy(inputs: RentVsBuyInput):
    """Compare net wealth from renting and investing vs buying."""
    params = rent_vs_buy.OwnershipParameters(
        horizon_years=inputs.time_horizon,
        renting=rent_vs_buy.RentingParameters(
            monthly_rent=inputs.monthly_rent,
            annual_rent_increase_percent=inputs.rent_increase,
            annual_investment_return_percent=inputs.investment_return,
        ),
        buying=rent_vs_buy.BuyingParameters(
            property_price=inputs.property_price,
            down_payment_percent=inputs.down_payment_percent,
            loan_rate_percent=inputs.loan_interest,
            loan_tenure_years=inputs.loan_tenure,
            annual_appreciation_percent=inputs.appreciation,
            one_time_buying_cost_percent=inputs.buying_costs_percent,
            monthly_maintenance=inputs.maintenance,
        ),
    )
    try:
        comparison = rent_vs_buy.simulate_ownership(params)
    except ValueError as e:
        raise _bad_request("rent vs buy", e)

    return asdict(comparison)


class TaxInput(BaseModel):
    """Input for the tax regime comparison."""

    gross_salary: float = Field(..., ge=0)
    other_income: float = Field(0.0, ge=0)
    deduction_80c: float = Field(0.0, ge=0)
    deduction_80d: float = Field(0.0, ge=0)
    hra: float = Field(0.0, ge=0)
    home_loan_interest: float = Field(0.0, ge=0)
    other_deductions: float = Field(0.0, ge=0)


class RegimeResponse(BaseModel):
    regime: str
    total_deductions: float
    taxable_income: float
    base_tax: float
    cess: float
    total_tax: float


class TaxResponse(BaseModel):
    """Old vs new regime."""

    old_regime: RegimeResponse
    new_regime: RegimeResponse
    preferred_regime: str
    annual_savings: float


@router.post("/tax", response_model=TaxResponse)
async def calculate_tax(inputs: TaxInput):
    """Compute tax under both regimes and pick the cheaper one."""
    tax_inputs = tax.TaxInputs(
        gross_salary=inputs.gross_salary,
        other_income=inputs.other_income,
        deductions=tax.Deductions(
            section_80c=inputs.deduction_80c,
            section_80d=inputs.deduction_80d,
            hra=inputs.hra,
            home_loan_interest=inputs.home_loan_interest,
            other=inputs.other_deductions,
        ),
    )
    try:
        comparison = tax.compare_tax_regimes(tax_inputs)
    except ValueError as e:
        raise _bad_request("tax", e)

    return TaxResponse(**asdict(comparison))
