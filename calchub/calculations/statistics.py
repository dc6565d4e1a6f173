"""
Confidence Interval Calculations

Normal-approximation confidence intervals for a sample mean.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from calchub.calculations.errors import InvalidInputError

# Two-sided z-scores keyed by confidence level (percent)
Z_SCORES = {
    "80": 1.282,
    "85": 1.440,
    "90": 1.645,
    "95": 1.960,
    "99": 2.576,
    "99.5": 2.807,
    "99.9": 3.291,
}


@dataclass
class ConfidenceInterval:
    """Interval around a sample mean."""

    lower: float
    upper: float
    margin_of_error: float


def z_score(confidence_level: Union[str, float]) -> float:
    """Look up the z-score for a confidence level such as 95 or '99.5'."""
    try:
        key = format(float(confidence_level), "g")
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid confidence level: {confidence_level}")

    if key not in Z_SCORES:
        raise InvalidInputError(
            f"Unsupported confidence level: {confidence_level} "
            f"(choose from {', '.join(Z_SCORES)})"
        )
    return Z_SCORES[key]


def calculate_confidence_interval(
    mean: float,
    std_dev: float,
    sample_size: int,
    confidence_level: Union[str, float] = "95",
) -> ConfidenceInterval:
    """
    Confidence interval for a mean: mean ± z * (σ / √n).

    Args:
        mean: Sample mean
        std_dev: Population (or sample) standard deviation
        sample_size: Number of observations
        confidence_level: Confidence level in percent

    Raises:
        InvalidInputError: If the inputs are out of range
    """
    if not math.isfinite(mean):
        raise InvalidInputError("Sample mean must be a number")
    if not math.isfinite(std_dev) or std_dev < 0:
        raise InvalidInputError("Standard deviation must be zero or positive")
    if sample_size <= 0:
        raise InvalidInputError("Sample size must be a positive integer")

    z = z_score(confidence_level)
    standard_error = std_dev / math.sqrt(sample_size)
    margin = z * standard_error

    return ConfidenceInterval(
        lower=mean - margin,
        upper=mean + margin,
        margin_of_error=margin,
    )


def confidence_interval_from_sample(
    values: Sequence[float], confidence_level: Union[str, float] = "95"
) -> ConfidenceInterval:
    """Confidence interval using the mean and sample standard deviation of raw data."""
    data = np.asarray(values, dtype=float)
    if data.size < 2:
        raise InvalidInputError("At least 2 observations required")
    if not np.all(np.isfinite(data)):
        raise InvalidInputError("Observations must be finite numbers")

    return calculate_confidence_interval(
        mean=float(data.mean()),
        std_dev=float(data.std(ddof=1)),
        sample_size=int(data.size),
        confidence_level=confidence_level,
    )
