"""
Fitness and health API endpoints.
"""

from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from calchub.calculations import fitness
from calchub.calculations.errors import CalculationError

router = APIRouter()

Sex = Literal["male", "female"]


class EnergyInput(BaseModel):
    """Input for BMR / TDEE calculation (metric units)."""

    sex: Sex
    age: int = Field(gt=0)
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    activity_level: str = "sedentary"
    goal: str = "maintain"


@router.post("/bmr")
async def calculate_bmr(inputs: EnergyInput):
    """Basal metabolic rate, TDEE and goal calories."""
    try:
        result = fitness.calculate_energy_needs(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)


class BmiInput(BaseModel):
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)


@router.post("/bmi")
async def calculate_bmi(inputs: BmiInput):
    """Body mass index and weight category."""
    try:
        bmi = fitness.calculate_bmi(inputs.weight_kg, inputs.height_cm)
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"bmi": bmi, "category": fitness.bmi_category(bmi)}


class BodyFatInput(BaseModel):
    """Input for US Navy body fat estimate (centimetres)."""

    sex: Sex
    height_cm: float = Field(gt=0)
    neck_cm: float = Field(gt=0)
    waist_cm: float = Field(gt=0)
    hip_cm: Optional[float] = Field(default=None, gt=0)


@router.post("/body-fat")
async def calculate_body_fat(inputs: BodyFatInput):
    """Body fat percentage by the US Navy method."""
    try:
        body_fat = fitness.calculate_body_fat_navy(**inputs.model_dump())
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"body_fat_percent": body_fat}
