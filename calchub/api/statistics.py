"""
Statistics API endpoints.
"""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, model_validator

from calchub.calculations import statistics
from calchub.calculations.errors import CalculationError

router = APIRouter()


class ConfidenceIntervalInput(BaseModel):
    """Input for a confidence interval, from summary figures or raw values."""

    confidence_level: str = "95"
    mean: Optional[float] = None
    std_dev: Optional[float] = Field(default=None, ge=0)
    sample_size: Optional[int] = Field(default=None, gt=0)
    values: Optional[List[float]] = None

    @model_validator(mode="after")
    def check_inputs(self):
        summary = (self.mean, self.std_dev, self.sample_size)
        if self.values is None and any(v is None for v in summary):
            raise ValueError("Provide either values or mean, std_dev and sample_size")
        return self


@router.post("/confidence-interval")
async def calculate_confidence_interval(inputs: ConfidenceIntervalInput):
    """Confidence interval for a mean."""
    try:
        if inputs.values is not None:
            result = statistics.confidence_interval_from_sample(
                inputs.values, inputs.confidence_level
            )
        else:
            result = statistics.calculate_confidence_interval(
                inputs.mean,
                inputs.std_dev,
                inputs.sample_size,
                inputs.confidence_level,
            )
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return asdict(result)
