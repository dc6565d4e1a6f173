"""
Financial Calculation Engine

Pure formula modules behind every calculator: loans, depreciation,
time value of money, root-finding solvers, statistics and health metrics.
"""

from calchub.calculations import (
    affordability,
    amortization,
    depreciation,
    errors,
    fitness,
    irr,
    mortgage,
    statistics,
    tvm,
)
from calchub.calculations.affordability import compute_affordability
from calchub.calculations.amortization import compute_amortization
from calchub.calculations.depreciation import compute_depreciation
from calchub.calculations.irr import compute_irr
from calchub.calculations.tvm import compute_annuity_value

__all__ = [
    "affordability",
    "amortization",
    "depreciation",
    "errors",
    "fitness",
    "irr",
    "mortgage",
    "statistics",
    "tvm",
    "compute_affordability",
    "compute_amortization",
    "compute_annuity_value",
    "compute_depreciation",
    "compute_irr",
]
