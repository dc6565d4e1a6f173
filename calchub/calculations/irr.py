"""
IRR and NPV Calculations

Implements IRR by bisection over a fixed rate bracket, plus the simple
cash-flow metrics (multiple, profit, payback period) shown alongside it.
"""

import logging
import math
from typing import List, Optional

from calchub.calculations.errors import (
    BracketError,
    CalculationError,
    ConvergenceError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = 1e-5
LOWER_RATE = -0.99  # -100% would divide by zero
UPPER_RATE = 1.0


def calculate_npv(cash_flows: List[float], discount_rate: float) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Args:
        cash_flows: Array of cash flows (negative = outflow, positive = inflow)
        discount_rate: Per-period discount rate (e.g., 0.10 for 10%)

    Returns:
        NPV value; +/-inf when a discount factor underflows to zero, nan
        when those infinite terms have opposite signs
    """
    npv = 0.0
    for period, cf in enumerate(cash_flows):
        try:
            discount = (1 + discount_rate) ** period
        except OverflowError:
            discount = math.inf

        if discount == 0:
            # Rates near -100% over long series
            npv += math.copysign(math.inf, cf) if cf else 0.0
        else:
            npv += cf / discount
    return npv


def _validate_cash_flows(cash_flows: List[float]):
    if len(cash_flows) < 2:
        raise InvalidInputError("At least 2 cash flows required")
    if not all(math.isfinite(cf) for cf in cash_flows):
        raise InvalidInputError("Cash flows must be finite numbers")
    if cash_flows[0] >= 0:
        raise InvalidInputError("Initial cash flow must be negative (investment)")
    if not any(cf > 0 for cf in cash_flows[1:]):
        raise InvalidInputError("At least one positive cash flow (return) is required")


def solve_irr(cash_flows: List[float]) -> float:
    """
    Calculate IRR (Internal Rate of Return) by bisection.

    Searches rates in [-99%, 100%]. Stops when |NPV| or the bracket width
    falls below TOLERANCE.

    Args:
        cash_flows: Periodic cash flows, first one negative

    Returns:
        Per-period IRR as a percentage (e.g., 10.0 for 10%)

    Raises:
        InvalidInputError: If the cash flows have no investment/return shape
        BracketError: If no root lies inside the rate bounds
        ConvergenceError: If the iteration cap is reached
    """
    _validate_cash_flows(cash_flows)

    low_rate = LOWER_RATE
    high_rate = UPPER_RATE
    npv_low = calculate_npv(cash_flows, low_rate)
    npv_high = calculate_npv(cash_flows, high_rate)

    if math.isnan(npv_low) or math.isnan(npv_high):
        raise BracketError("NPV is undefined at the edge of the search range")
    if npv_low == 0:
        return low_rate * 100
    if npv_high == 0:
        return high_rate * 100
    if npv_low * npv_high > 0:
        raise BracketError(
            f"IRR is outside the {LOWER_RATE:.0%} to {UPPER_RATE:.0%} search range"
        )

    for _ in range(MAX_ITERATIONS):
        mid_rate = (low_rate + high_rate) / 2
        npv_mid = calculate_npv(cash_flows, mid_rate)

        if math.isnan(npv_mid):
            raise ConvergenceError(f"NPV is undefined at {mid_rate:.4%}")
        if abs(npv_mid) < TOLERANCE:
            return mid_rate * 100

        if npv_low * npv_mid < 0:
            high_rate = mid_rate
        else:
            low_rate = mid_rate
            npv_low = npv_mid

        if high_rate - low_rate < TOLERANCE:
            return (low_rate + high_rate) / 2 * 100

    raise ConvergenceError("IRR calculation did not converge")


def compute_irr(cash_flows: List[float]) -> Optional[float]:
    """IRR as a percentage, or None when no solution is found."""
    try:
        return solve_irr(cash_flows)
    except CalculationError as e:
        logger.warning(f"IRR calculation failed: {e}")
        return None


def calculate_multiple(cash_flows: List[float]) -> float:
    """
    Calculate equity multiple.

    Args:
        cash_flows: Array of cash flows (investments are negative)

    Returns:
        Multiple (e.g., 2.0 = 2.0x return)
    """
    total_inflows = sum(cf for cf in cash_flows if cf > 0)
    total_outflows = abs(sum(cf for cf in cash_flows if cf < 0))

    if total_outflows == 0:
        raise InvalidInputError("No investment (outflows) found")

    return total_inflows / total_outflows


def calculate_profit(cash_flows: List[float]) -> float:
    """Calculate profit (total inflows minus total outflows)."""
    return sum(cash_flows)


def calculate_payback_period(
    initial_investment: float, cash_flows: List[float]
) -> Optional[float]:
    """
    Years until cumulative cash flows recover the initial investment.

    The recovery year is pro-rated, assuming its cash flow arrives evenly.

    Returns:
        Payback period in years, or None if never recovered
    """
    if not math.isfinite(initial_investment) or initial_investment <= 0:
        raise InvalidInputError("Initial investment must be a positive number")
    if any(not math.isfinite(cf) or cf < 0 for cf in cash_flows):
        raise InvalidInputError("Cash flows must be zero or positive numbers")

    cumulative = 0.0
    for year, cf in enumerate(cash_flows, start=1):
        if cumulative + cf >= initial_investment:
            return (year - 1) + (initial_investment - cumulative) / cf
        cumulative += cf

    return None


def periodic_to_annual_rate(periodic_rate: float, periods_per_year: int = 12) -> float:
    """Convert a periodic rate (e.g. monthly IRR) to an effective annual rate."""
    return ((1 + periodic_rate) ** periods_per_year) - 1
