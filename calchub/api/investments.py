"""
Investment and time-value-of-money API endpoints.
"""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from calchub.calculations import irr, tvm
from calchub.calculations.depreciation import DepreciationMethod, compute_depreciation
from calchub.calculations.errors import CalculationError
from calchub.calculations.tvm import (
    AnnuityType,
    CompoundingFrequency,
    PaymentFrequency,
    compute_annuity_value,
)

router = APIRouter()


class DepreciationInput(BaseModel):
    """Input for depreciation schedule."""

    cost: float = Field(gt=0)
    salvage: float = Field(default=0.0, ge=0)
    life_years: int = Field(gt=0)
    method: DepreciationMethod = DepreciationMethod.straight_line


class DepreciationRow(BaseModel):
    year: int
    depreciation_expense: float
    accumulated_depreciation: float
    book_value: float


class DepreciationResponse(BaseModel):
    schedule: List[DepreciationRow]
    total_depreciation: float


@router.post("/depreciation", response_model=DepreciationResponse)
async def calculate_depreciation(inputs: DepreciationInput):
    """Generate a depreciation schedule."""
    result = compute_depreciation(
        inputs.cost, inputs.salvage, inputs.life_years, inputs.method
    )
    if result is None:
        raise HTTPException(status_code=400, detail="Depreciation calculation failed")
    return asdict(result)


class AnnuityInput(BaseModel):
    """Input for annuity valuation."""

    annuity_type: AnnuityType
    payment: float = Field(gt=0)
    annual_rate_percent: float = Field(ge=0)
    periods: int = Field(gt=0)
    frequency: PaymentFrequency = PaymentFrequency.annually


@router.post("/annuity")
async def calculate_annuity(inputs: AnnuityInput):
    """Present or future value of an ordinary annuity."""
    value = compute_annuity_value(
        inputs.annuity_type,
        inputs.payment,
        inputs.annual_rate_percent,
        inputs.periods,
        inputs.frequency,
    )
    if value is None:
        raise HTTPException(status_code=400, detail="Annuity calculation failed")
    return {"value": value}


class FutureValueInput(BaseModel):
    """Input for compound interest / future value."""

    principal: float = Field(ge=0)
    annual_rate_percent: float = Field(ge=0)
    years: float = Field(gt=0)
    compounding: CompoundingFrequency = CompoundingFrequency.monthly
    contribution: float = Field(default=0.0, ge=0)
    contribution_frequency: CompoundingFrequency = CompoundingFrequency.monthly


@router.post("/future-value")
async def calculate_future_value(inputs: FutureValueInput):
    """Future value of a lump sum with regular contributions."""
    try:
        result = tvm.calculate_future_value(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)


class PresentValueInput(BaseModel):
    future_value: float = Field(ge=0)
    rate_percent: float = Field(ge=0)
    periods: float = Field(gt=0)


@router.post("/present-value")
async def calculate_present_value(inputs: PresentValueInput):
    """Discount a future amount to today."""
    try:
        value = tvm.calculate_present_value(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"present_value": value}


class RoiInput(BaseModel):
    initial_investment: float = Field(gt=0)
    final_value: float = Field(ge=0)


@router.post("/roi")
async def calculate_roi(inputs: RoiInput):
    """Return on investment."""
    try:
        result = tvm.calculate_roi(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)


class RetirementInput(BaseModel):
    """Input for retirement savings projection."""

    current_age: int = Field(ge=0)
    retirement_age: int = Field(gt=0)
    current_savings: float = Field(default=0.0, ge=0)
    annual_contribution: float = Field(default=0.0, ge=0)
    annual_return_percent: float = Field(gt=-100)


@router.post("/retirement")
async def calculate_retirement(inputs: RetirementInput):
    """Projected savings at retirement age."""
    try:
        result = tvm.calculate_retirement_savings(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)


class IRRInput(BaseModel):
    """Input for IRR calculation."""

    cash_flows: List[float] = Field(min_length=2)
    periods_per_year: int = Field(default=1, gt=0, le=365)


class IRRResponse(BaseModel):
    """Response with IRR calculation."""

    irr: float
    annual_irr: float
    multiple: float
    profit: float
    npv_at_10_percent: float


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_endpoint(inputs: IRRInput):
    """Calculate IRR for given cash flows."""
    irr_val = irr.compute_irr(inputs.cash_flows)
    if irr_val is None:
        raise HTTPException(status_code=400, detail="IRR calculation failed")

    return IRRResponse(
        irr=irr_val,
        annual_irr=irr.periodic_to_annual_rate(irr_val / 100, inputs.periods_per_year)
        * 100,
        multiple=irr.calculate_multiple(inputs.cash_flows),
        profit=irr.calculate_profit(inputs.cash_flows),
        npv_at_10_percent=irr.calculate_npv(inputs.cash_flows, 0.10),
    )


class PaybackInput(BaseModel):
    initial_investment: float = Field(gt=0)
    cash_flows: List[float] = Field(min_length=1)


class PaybackResponse(BaseModel):
    payback_years: Optional[float]
    recovered: bool


@router.post("/payback-period", response_model=PaybackResponse)
async def calculate_payback_period(inputs: PaybackInput):
    """Years until an investment is paid back."""
    try:
        years = irr.calculate_payback_period(
            inputs.initial_investment, inputs.cash_flows
        )
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PaybackResponse(payback_years=years, recovered=years is not None)
