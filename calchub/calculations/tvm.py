"""
Time Value of Money

Closed-form annuity, compound growth, future value and present value
calculations.
"""

import enum
import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from calchub.calculations.errors import CalculationError, InvalidInputError

logger = logging.getLogger(__name__)


class AnnuityType(str, enum.Enum):
    """Which end of the annuity to value."""

    present_value = "present_value"
    future_value = "future_value"


class PaymentFrequency(str, enum.Enum):
    """How often annuity payments are made."""

    monthly = "monthly"
    quarterly = "quarterly"
    annually = "annually"


class CompoundingFrequency(str, enum.Enum):
    """How often interest compounds or contributions are made."""

    annually = "annually"
    semi_annually = "semi-annually"
    quarterly = "quarterly"
    monthly = "monthly"
    daily = "daily"


PERIODS_PER_YEAR = {
    "annually": 1,
    "semi-annually": 2,
    "quarterly": 4,
    "monthly": 12,
    "daily": 365,
}


@dataclass
class FutureValueResult:
    """Future value of a lump sum plus periodic contributions."""

    future_value: float
    total_interest: float
    total_contributions: float  # Includes the initial principal


@dataclass
class RetirementResult:
    """Projected savings at retirement."""

    balance: float
    contributed: float  # Includes current savings
    growth: float


@dataclass
class RoiResult:
    """Return on investment and the profit behind it."""

    roi_percent: float
    profit: float


def annuity_future_value(payment: float, rate: float, periods: int) -> float:
    """FV of an ordinary annuity: PMT * ((1+i)^n - 1) / i."""
    if rate == 0:
        return payment * periods
    return payment * (((1 + rate) ** periods - 1) / rate)


def annuity_present_value(payment: float, rate: float, periods: int) -> float:
    """PV of an ordinary annuity: PMT * (1 - (1+i)^-n) / i."""
    if rate == 0:
        return payment * periods
    return payment * ((1 - (1 + rate) ** -periods) / rate)


def calculate_annuity_value(
    annuity_type: Union[AnnuityType, str],
    payment: float,
    annual_rate_percent: float,
    periods: int,
    frequency: Union[PaymentFrequency, str] = PaymentFrequency.annually,
) -> float:
    """
    Value an ordinary annuity.

    Args:
        annuity_type: 'present_value' or 'future_value'
        payment: Payment made each period
        annual_rate_percent: Annual interest rate in percent
        periods: Number of years of payments
        frequency: Payment frequency; the annual rate is split evenly
            across payments

    Raises:
        InvalidInputError: If any input is out of range
    """
    try:
        annuity_type = AnnuityType(annuity_type)
        frequency = PaymentFrequency(frequency)
    except ValueError as e:
        raise InvalidInputError(str(e))

    if not math.isfinite(payment) or payment <= 0:
        raise InvalidInputError("Payment amount must be a positive number")
    if not math.isfinite(annual_rate_percent) or annual_rate_percent < 0:
        raise InvalidInputError("Interest rate must be zero or positive")
    if periods <= 0:
        raise InvalidInputError("Number of periods must be a positive integer")

    per_year = PERIODS_PER_YEAR[frequency.value]
    rate_per_period = annual_rate_percent / 100 / per_year
    total_periods = periods * per_year

    try:
        if annuity_type == AnnuityType.future_value:
            value = annuity_future_value(payment, rate_per_period, total_periods)
        else:
            value = annuity_present_value(payment, rate_per_period, total_periods)
    except OverflowError:
        value = math.inf

    if not math.isfinite(value):
        raise CalculationError("Annuity value is not a finite number")
    return value


def compute_annuity_value(
    annuity_type: Union[AnnuityType, str],
    payment: float,
    annual_rate_percent: float,
    periods: int,
    frequency: Union[PaymentFrequency, str] = PaymentFrequency.annually,
) -> Optional[float]:
    """Annuity value, or None if it cannot be calculated."""
    try:
        return calculate_annuity_value(
            annuity_type, payment, annual_rate_percent, periods, frequency
        )
    except CalculationError as e:
        logger.warning(f"Annuity calculation failed: {e}")
        return None


def calculate_compound_growth(present_value: float, rate: float, periods: float) -> float:
    """Grow a value at a per-period rate: PV * (1+r)^n."""
    return present_value * (1 + rate) ** periods


def calculate_future_value(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding: Union[CompoundingFrequency, str] = CompoundingFrequency.monthly,
    contribution: float = 0.0,
    contribution_frequency: Union[CompoundingFrequency, str] = CompoundingFrequency.monthly,
) -> FutureValueResult:
    """
    Future value of a lump sum with optional regular contributions.

    Contributions made at a different frequency than compounding are
    valued through the effective annual rate.

    Raises:
        InvalidInputError: If any input is out of range
    """
    try:
        compounding = CompoundingFrequency(compounding)
        contribution_frequency = CompoundingFrequency(contribution_frequency)
    except ValueError as e:
        raise InvalidInputError(str(e))

    if not math.isfinite(principal) or principal < 0:
        raise InvalidInputError("Principal must be zero or positive")
    if not math.isfinite(annual_rate_percent) or annual_rate_percent < 0:
        raise InvalidInputError("Interest rate must be zero or positive")
    if not math.isfinite(years) or years <= 0:
        raise InvalidInputError("Years must be a positive number")
    if not math.isfinite(contribution) or contribution < 0:
        raise InvalidInputError("Contribution must be zero or positive")

    annual_rate = annual_rate_percent / 100
    n = PERIODS_PER_YEAR[compounding.value]
    m = PERIODS_PER_YEAR[contribution_frequency.value]

    try:
        fv_principal = calculate_compound_growth(principal, annual_rate / n, n * years)

        fv_contributions = 0.0
        if contribution > 0:
            effective_annual_rate = (1 + annual_rate / n) ** n - 1
            rate_per_contribution = (1 + effective_annual_rate) ** (1 / m) - 1
            fv_contributions = annuity_future_value(
                contribution, rate_per_contribution, m * years
            )
    except OverflowError:
        raise CalculationError("Future value is not a finite number")

    future_value = fv_principal + fv_contributions
    if not math.isfinite(future_value):
        raise CalculationError("Future value is not a finite number")
    contributed = contribution * m * years

    return FutureValueResult(
        future_value=future_value,
        total_interest=future_value - principal - contributed,
        total_contributions=principal + contributed,
    )


def calculate_present_value(
    future_value: float, rate_percent: float, periods: float
) -> float:
    """
    Discount a future amount back to today: FV / (1+r)^n.

    Args:
        future_value: Amount received in the future
        rate_percent: Discount rate per period in percent
        periods: Number of periods
    """
    if not math.isfinite(future_value) or future_value < 0:
        raise InvalidInputError("Future value must be zero or positive")
    if not math.isfinite(rate_percent) or rate_percent < 0:
        raise InvalidInputError("Discount rate must be zero or positive")
    if not math.isfinite(periods) or periods <= 0:
        raise InvalidInputError("Number of periods must be positive")

    try:
        return future_value / (1 + rate_percent / 100) ** periods
    except OverflowError:
        # Discounted to nothing
        return 0.0


def calculate_roi(initial_investment: float, final_value: float) -> RoiResult:
    """Return on investment as a percentage of the amount invested."""
    if not math.isfinite(initial_investment) or initial_investment <= 0:
        raise InvalidInputError("Initial investment must be a positive number")
    if not math.isfinite(final_value) or final_value < 0:
        raise InvalidInputError("Final value must be zero or positive")

    profit = final_value - initial_investment
    return RoiResult(roi_percent=profit / initial_investment * 100, profit=profit)


def calculate_retirement_savings(
    current_age: int,
    retirement_age: int,
    current_savings: float,
    annual_contribution: float,
    annual_return_percent: float,
) -> RetirementResult:
    """
    Project savings at retirement.

    Each year's contribution is added at the start of the year and grows
    with the balance: balance = (balance + contribution) * (1 + r).

    Args:
        current_age: Age today in years
        retirement_age: Age at retirement in years
        current_savings: Amount saved so far
        annual_contribution: Amount added every year
        annual_return_percent: Expected annual return in percent

    Returns:
        RetirementResult with the projected balance, the total contributed
        (including current savings) and the growth on top of it

    Raises:
        InvalidInputError: If retirement is not after the current age or
            an amount is out of range
        CalculationError: If the projected balance is not a finite number
    """
    if not math.isfinite(current_age) or not math.isfinite(retirement_age):
        raise InvalidInputError("Ages must be numbers")
    years = int(retirement_age) - int(current_age)
    if years <= 0:
        raise InvalidInputError("Retirement age must be after the current age")
    if not math.isfinite(current_savings) or current_savings < 0:
        raise InvalidInputError("Current savings must be zero or positive")
    if not math.isfinite(annual_contribution) or annual_contribution < 0:
        raise InvalidInputError("Annual contribution must be zero or positive")
    if not math.isfinite(annual_return_percent) or annual_return_percent <= -100:
        raise InvalidInputError("Annual return must be greater than -100%")

    growth_factor = 1 + annual_return_percent / 100
    balance = current_savings
    for _ in range(years):
        balance = (balance + annual_contribution) * growth_factor

    if not math.isfinite(balance):
        raise CalculationError("Retirement balance is not a finite number")

    contributed = current_savings + annual_contribution * years
    return RetirementResult(
        balance=balance, contributed=contributed, growth=balance - contributed
    )
