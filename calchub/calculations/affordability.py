"""
House Affordability

Finds the most expensive home whose monthly PITI (principal, interest,
taxes and insurance) fits within front-end and back-end debt-to-income
limits.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from calchub.calculations.amortization import calculate_payment
from calchub.calculations.errors import (
    BracketError,
    CalculationError,
    ConvergenceError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
PRICE_TOLERANCE = 100.0  # dollars
INCOME_MULTIPLE_CAP = 10  # upper search bound is 10x annual income

FRONT_END = "front_end"
BACK_END = "back_end"


@dataclass
class AffordabilityResult:
    """Affordable home price and the payment budget that set it."""

    price: float
    max_payment: float
    limiting_factor: str  # FRONT_END or BACK_END


def calculate_piti(
    price: float,
    down_payment: float,
    annual_rate: float,
    term_months: int,
    tax_rate: float,
    insurance_rate: float,
) -> float:
    """
    Monthly PITI for a home price.

    Rates are annual decimals; taxes and insurance are a share of the price.
    """
    loan_amount = max(0.0, price - down_payment)
    principal_and_interest = calculate_payment(loan_amount, annual_rate, term_months)

    monthly_taxes = price * tax_rate / 12
    monthly_insurance = price * insurance_rate / 12
    return principal_and_interest + monthly_taxes + monthly_insurance


def max_housing_payment(
    annual_income: float,
    monthly_debts: float,
    front_end_limit: float,
    back_end_limit: float,
):
    """
    Largest monthly PITI allowed by the debt-to-income limits.

    Limits are decimals (0.28 for 28%).

    Returns:
        Tuple of (max PITI, limiting factor)
    """
    monthly_income = annual_income / 12
    front_end_max = monthly_income * front_end_limit
    back_end_max = monthly_income * back_end_limit - monthly_debts

    limiting_factor = FRONT_END if front_end_max <= back_end_max else BACK_END
    return max(0.0, min(front_end_max, back_end_max)), limiting_factor


def solve_affordable_price(
    target_payment: float,
    annual_income: float,
    down_payment: float,
    annual_rate: float,
    term_months: int,
    tax_rate: float,
    insurance_rate: float,
) -> float:
    """
    Binary-search the home price whose PITI matches the target payment.

    The search runs over [down_payment, annual_income * 10].

    Raises:
        BracketError: If even the upper bound costs less than the target
        ConvergenceError: If the iteration cap is reached
    """
    low_price = down_payment
    high_price = annual_income * INCOME_MULTIPLE_CAP
    monthly_rate = annual_rate / 12

    def piti(price):
        return calculate_piti(
            price, down_payment, annual_rate, term_months, tax_rate, insurance_rate
        )

    # Taxes and insurance on the down payment alone already exceed the budget
    if piti(low_price) >= target_payment:
        return down_payment

    if high_price <= low_price or piti(high_price) < target_payment:
        raise BracketError(
            f"Affordable price exceeds the search limit of {high_price:,.0f}"
        )

    payment_tolerance = PRICE_TOLERANCE * monthly_rate + 1

    for _ in range(MAX_ITERATIONS):
        guess_price = (low_price + high_price) / 2
        calculated = piti(guess_price)

        if (
            abs(calculated - target_payment) < payment_tolerance
            or high_price - low_price < PRICE_TOLERANCE
        ):
            return max(down_payment, guess_price)

        if calculated > target_payment:
            high_price = guess_price
        else:
            low_price = guess_price

    raise ConvergenceError("Affordability search did not converge")


def compute_affordability(
    annual_income: float,
    monthly_debts: float,
    down_payment: float,
    annual_rate_percent: float,
    term_years: int,
    property_tax_rate_percent: float,
    insurance_rate_percent: float,
    front_end_limit_percent: float = 28.0,
    back_end_limit_percent: float = 36.0,
) -> Optional[AffordabilityResult]:
    """
    Estimate the maximum affordable home price.

    Args:
        annual_income: Gross annual income
        monthly_debts: Existing monthly debt payments
        down_payment: Cash available for the down payment
        annual_rate_percent: Mortgage interest rate in percent
        term_years: Mortgage term in years
        property_tax_rate_percent: Annual property tax as percent of price
        insurance_rate_percent: Annual home insurance as percent of price
        front_end_limit_percent: Max housing cost as percent of gross income
        back_end_limit_percent: Max total debt as percent of gross income

    Returns:
        AffordabilityResult, or None if no price can be determined
    """
    inputs = {
        "annual_income": annual_income,
        "monthly_debts": monthly_debts,
        "down_payment": down_payment,
        "annual_rate_percent": annual_rate_percent,
        "term_years": term_years,
        "property_tax_rate_percent": property_tax_rate_percent,
        "insurance_rate_percent": insurance_rate_percent,
        "front_end_limit_percent": front_end_limit_percent,
        "back_end_limit_percent": back_end_limit_percent,
    }

    try:
        for name, value in inputs.items():
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(f"{name} must be zero or positive")
        if annual_income <= 0:
            raise InvalidInputError("annual_income must be positive")
        if term_years <= 0:
            raise InvalidInputError("term_years must be positive")
        if front_end_limit_percent <= 0 or back_end_limit_percent <= 0:
            raise InvalidInputError("Debt-to-income limits must be positive")

        max_payment, limiting_factor = max_housing_payment(
            annual_income,
            monthly_debts,
            front_end_limit_percent / 100,
            back_end_limit_percent / 100,
        )
        price = solve_affordable_price(
            target_payment=max_payment,
            annual_income=annual_income,
            down_payment=down_payment,
            annual_rate=annual_rate_percent / 100,
            term_months=int(term_years * 12),
            tax_rate=property_tax_rate_percent / 100,
            insurance_rate=insurance_rate_percent / 100,
        )
    except CalculationError as e:
        logger.warning(f"Affordability calculation failed: {e}")
        return None

    return AffordabilityResult(
        price=price, max_payment=max_payment, limiting_factor=limiting_factor
    )
