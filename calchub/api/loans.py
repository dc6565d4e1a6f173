"""
Loan and mortgage calculation API endpoints.
"""

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from calchub.calculations import mortgage
from calchub.calculations.affordability import compute_affordability
from calchub.calculations.amortization import compute_amortization
from calchub.calculations.errors import CalculationError

router = APIRouter()


class AmortizationInput(BaseModel):
    """Input for amortization calculation."""

    principal: float = Field(gt=0)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(gt=0)
    start_date: Optional[date] = None


class ScheduleRow(BaseModel):
    period: int
    starting_balance: float
    payment: float
    principal_paid: float
    interest_paid: float
    ending_balance: float
    payment_date: Optional[date] = None


class AmortizationResponse(BaseModel):
    payment: float
    total_interest: float
    total_payment: float
    schedule: List[ScheduleRow]


@router.post("/amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: AmortizationInput):
    """Generate loan amortization schedule."""
    result = compute_amortization(
        inputs.principal,
        inputs.annual_rate_percent,
        inputs.term_years,
        start_date=inputs.start_date,
    )
    if result is None:
        raise HTTPException(status_code=400, detail="Amortization calculation failed")
    return asdict(result)


class AffordabilityInput(BaseModel):
    """Input for house affordability calculation."""

    annual_income: float = Field(gt=0)
    monthly_debts: float = Field(default=0.0, ge=0)
    down_payment: float = Field(default=0.0, ge=0)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(default=30, gt=0)
    property_tax_rate_percent: float = Field(default=1.2, ge=0, le=100)
    insurance_rate_percent: float = Field(default=0.5, ge=0, le=100)
    front_end_limit_percent: float = Field(default=28.0, gt=0, le=100)
    back_end_limit_percent: float = Field(default=36.0, gt=0, le=100)


class AffordabilityResponse(BaseModel):
    price: float
    max_payment: float
    limiting_factor: str


@router.post("/affordability", response_model=AffordabilityResponse)
async def calculate_affordability(inputs: AffordabilityInput):
    """Estimate the maximum affordable home price."""
    result = compute_affordability(**inputs.model_dump())
    if result is None:
        raise HTTPException(status_code=400, detail="Affordability calculation failed")
    return asdict(result)


class MortgageInput(BaseModel):
    """Input for conventional mortgage calculation."""

    loan_amount: float = Field(gt=0)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(default=30, gt=0)
    annual_taxes: float = Field(default=0.0, ge=0)
    annual_insurance: float = Field(default=0.0, ge=0)
    pmi_rate_percent: float = Field(default=0.0, ge=0)
    include_schedule: bool = False


@router.post("/mortgage")
async def calculate_mortgage(inputs: MortgageInput):
    """Monthly mortgage payment breakdown."""
    params = inputs.model_dump(exclude={"include_schedule"})
    try:
        result = mortgage.calculate_mortgage(**params)
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    response = asdict(result)
    if not inputs.include_schedule:
        response.pop("schedule")
    return response


class FhaLoanInput(BaseModel):
    """Input for FHA loan calculation."""

    home_price: float = Field(gt=0)
    down_payment_percent: float = Field(default=3.5, ge=0, lt=100)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(default=30, gt=0)
    upfront_mip_percent: float = Field(default=1.75, ge=0)
    annual_mip_percent: float = Field(default=0.55, ge=0)
    annual_taxes: float = Field(default=0.0, ge=0)
    annual_insurance: float = Field(default=0.0, ge=0)


@router.post("/fha-loan")
async def calculate_fha_loan(inputs: FhaLoanInput):
    """Monthly payment for an FHA loan."""
    try:
        result = mortgage.calculate_fha_loan(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)


class VaLoanInput(BaseModel):
    """Input for VA loan calculation."""

    loan_amount: float = Field(gt=0)
    annual_rate_percent: float = Field(ge=0)
    term_years: int = Field(default=30, gt=0)
    funding_fee_percent: float = Field(default=2.15, ge=0)
    annual_taxes: float = Field(default=0.0, ge=0)
    annual_insurance: float = Field(default=0.0, ge=0)


@router.post("/va-loan")
async def calculate_va_loan(inputs: VaLoanInput):
    """Monthly payment for a VA loan."""
    try:
        result = mortgage.calculate_va_loan(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)
