"""
Depreciation Calculations

Year-by-year depreciation schedules for straight-line, double-declining
balance and sum-of-years'-digits methods.
"""

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from calchub.calculations.errors import CalculationError, InvalidInputError

logger = logging.getLogger(__name__)

# Book values this close to salvage are treated as fully depreciated
BOOK_VALUE_TOLERANCE = 0.005


class DepreciationMethod(str, enum.Enum):
    """Supported depreciation methods."""

    straight_line = "straight_line"
    double_declining_balance = "double_declining_balance"
    sum_of_years_digits = "sum_of_years_digits"


@dataclass
class DepreciationEntry:
    """One year of a depreciation schedule."""

    year: int
    depreciation_expense: float
    accumulated_depreciation: float
    book_value: float


@dataclass
class DepreciationResult:
    """Depreciation schedule with total depreciation taken."""

    schedule: List[DepreciationEntry] = field(default_factory=list)
    total_depreciation: float = 0.0


def _annual_expense(
    method: DepreciationMethod,
    depreciable_base: float,
    book_value: float,
    life_years: int,
    year: int,
) -> float:
    """Unclamped depreciation expense for a single year."""
    if method == DepreciationMethod.straight_line:
        return depreciable_base / life_years

    if method == DepreciationMethod.double_declining_balance:
        return book_value * (2 / life_years)

    # Sum of years' digits: base * remaining life / (L(L+1)/2)
    digits_sum = life_years * (life_years + 1) / 2
    remaining_life = life_years - year + 1
    return depreciable_base * (remaining_life / digits_sum)


def generate_depreciation_schedule(
    cost: float,
    salvage: float,
    life_years: int,
    method: Union[DepreciationMethod, str] = DepreciationMethod.straight_line,
) -> List[DepreciationEntry]:
    """
    Generate a depreciation schedule.

    Expense is clamped so book value never drops below salvage, and the
    final year is adjusted so the closing book value equals salvage exactly.

    Args:
        cost: Initial cost of the asset
        salvage: Salvage value at the end of useful life
        life_years: Useful life in years
        method: Depreciation method

    Returns:
        List of depreciation entries, one per year

    Raises:
        InvalidInputError: If the inputs are out of range or method is unknown
    """
    if not math.isfinite(cost) or cost <= 0:
        raise InvalidInputError("Initial cost must be a positive number")
    if not math.isfinite(salvage) or salvage < 0:
        raise InvalidInputError("Salvage value must be zero or positive")
    if salvage > cost:
        raise InvalidInputError("Salvage value cannot be greater than the initial cost")
    if (
        not math.isfinite(life_years)
        or life_years <= 0
        or life_years != int(life_years)
    ):
        raise InvalidInputError("Useful life must be a positive whole number of years")
    life_years = int(life_years)

    try:
        method = DepreciationMethod(method)
    except ValueError:
        raise InvalidInputError(f"Unknown depreciation method: {method}")

    depreciable_base = cost - salvage
    schedule = []
    accumulated = 0.0
    book_value = cost

    for year in range(1, life_years + 1):
        if book_value <= salvage:
            expense = 0.0
        else:
            expense = _annual_expense(
                method, depreciable_base, book_value, life_years, year
            )
            # Never depreciate below salvage
            if book_value - expense < salvage:
                expense = max(0.0, book_value - salvage)

        accumulated += expense
        book_value -= expense

        if book_value - salvage < BOOK_VALUE_TOLERANCE:
            book_value = salvage

        schedule.append(
            DepreciationEntry(
                year=year,
                depreciation_expense=expense,
                accumulated_depreciation=accumulated,
                book_value=book_value,
            )
        )

    final = schedule[-1]
    if final.book_value != salvage:
        # Push any residual (e.g. declining balance never reaching salvage)
        # into the last year
        final.depreciation_expense += final.book_value - salvage
        final.book_value = salvage
        final.accumulated_depreciation = sum(
            entry.depreciation_expense for entry in schedule
        )

    return schedule


def compute_depreciation(
    cost: float,
    salvage: float,
    life_years: int,
    method: Union[DepreciationMethod, str] = DepreciationMethod.straight_line,
) -> Optional[DepreciationResult]:
    """
    Depreciate an asset over its useful life.

    Returns:
        DepreciationResult, or None if the inputs are invalid
    """
    try:
        schedule = generate_depreciation_schedule(cost, salvage, life_years, method)
    except CalculationError as e:
        logger.warning(f"Depreciation failed: {e}")
        return None

    return DepreciationResult(
        schedule=schedule,
        total_depreciation=schedule[-1].accumulated_depreciation,
    )
