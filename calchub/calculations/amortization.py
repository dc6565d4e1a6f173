"""
Loan Amortization Calculations

Implements level loan payments and month-by-month amortization schedules,
matching Excel's PMT, IPMT, and PPMT functions.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from calchub.calculations.errors import CalculationError, InvalidInputError

logger = logging.getLogger(__name__)

# Balances below this are treated as fully paid off
BALANCE_TOLERANCE = 0.005


@dataclass
class AmortizationEntry:
    """One payment period of an amortization schedule."""

    period: int
    starting_balance: float
    payment: float
    principal_paid: float
    interest_paid: float
    ending_balance: float
    payment_date: Optional[date] = None


@dataclass
class AmortizationResult:
    """Level payment, totals and the full schedule for a loan."""

    payment: float
    total_interest: float
    total_payment: float
    schedule: List[AmortizationEntry] = field(default_factory=list)


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: int
) -> float:
    """
    Calculate monthly loan payment.

    Matches Excel's PMT() function.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.05 for 5%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount (positive number)

    Raises:
        CalculationError: If the payment is not a finite number
    """
    if principal <= 0:
        return 0.0
    if amortization_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12

    if monthly_rate == 0:
        return principal / amortization_months

    try:
        growth = (1 + monthly_rate) ** amortization_months
        payment = principal * monthly_rate * growth / (growth - 1)
    except OverflowError:
        payment = math.inf

    if not math.isfinite(payment):
        raise CalculationError("Loan payment is not a finite number")
    return payment


def calculate_remaining_balance(
    principal: float,
    annual_rate: float,
    amortization_months: int,
    payments_completed: int,
) -> float:
    """Calculate remaining loan balance after N payments."""
    monthly_rate = annual_rate / 12
    payment = calculate_payment(principal, annual_rate, amortization_months)

    if monthly_rate == 0:
        return max(0.0, principal - payment * payments_completed)

    balance = principal * ((1 + monthly_rate) ** payments_completed) - payment * (
        ((1 + monthly_rate) ** payments_completed - 1) / monthly_rate
    )

    return max(0.0, balance)


def _validate_loan(principal: float, annual_rate: float, amortization_months: int):
    if not math.isfinite(principal) or principal <= 0:
        raise InvalidInputError("Loan amount must be a positive number")
    if not math.isfinite(annual_rate) or annual_rate < 0:
        raise InvalidInputError("Interest rate must be zero or positive")
    if amortization_months <= 0:
        raise InvalidInputError("Loan term must be a positive number of months")


def generate_amortization_schedule(
    principal: float,
    annual_rate: float,
    amortization_months: int,
    start_date: Optional[date] = None,
) -> List[AmortizationEntry]:
    """
    Generate a full amortization schedule.

    The last period pays off whatever balance remains, so the final
    ending balance is exactly zero.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal
        amortization_months: Amortization period in months
        start_date: Date of first payment (entries are undated if omitted)

    Returns:
        List of amortization entries

    Raises:
        InvalidInputError: If the loan parameters are out of range
    """
    _validate_loan(principal, annual_rate, amortization_months)

    monthly_rate = annual_rate / 12
    payment = calculate_payment(principal, annual_rate, amortization_months)
    balance = principal
    schedule = []

    for period in range(1, amortization_months + 1):
        interest = balance * monthly_rate
        principal_pmt = payment - interest
        current_payment = payment

        if period == amortization_months:
            # Final payment clears the balance
            principal_pmt = balance
            current_payment = principal_pmt + interest

        ending_balance = balance - principal_pmt

        schedule.append(
            AmortizationEntry(
                period=period,
                starting_balance=balance,
                payment=current_payment,
                principal_paid=principal_pmt,
                interest_paid=interest,
                ending_balance=0.0 if ending_balance < BALANCE_TOLERANCE else ending_balance,
                payment_date=(
                    start_date + relativedelta(months=period - 1)
                    if start_date
                    else None
                ),
            )
        )

        balance = ending_balance

        # Paid off ahead of schedule
        if balance <= BALANCE_TOLERANCE and period < amortization_months:
            schedule[-1].ending_balance = 0.0
            break

    return schedule


def calculate_total_interest(schedule: List[AmortizationEntry]) -> float:
    """Calculate total interest paid over loan term."""
    return sum(entry.interest_paid for entry in schedule)


def calculate_total_payment(schedule: List[AmortizationEntry]) -> float:
    """Calculate total of all payments (principal and interest)."""
    return sum(entry.payment for entry in schedule)


def compute_amortization(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    start_date: Optional[date] = None,
) -> Optional[AmortizationResult]:
    """
    Amortize a fixed-rate loan with monthly payments.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual interest rate in percent (e.g., 5 for 5%)
        term_years: Loan term in years
        start_date: Optional date of the first payment

    Returns:
        AmortizationResult, or None if the loan cannot be amortized
    """
    try:
        if not math.isfinite(annual_rate_percent):
            raise InvalidInputError("Interest rate must be a number")
        if not math.isfinite(term_years) or term_years <= 0:
            raise InvalidInputError("Loan term must be a positive number of years")
        annual_rate = annual_rate_percent / 100
        months = int(term_years * 12)
        schedule = generate_amortization_schedule(
            principal, annual_rate, months, start_date=start_date
        )
    except CalculationError as e:
        logger.warning(f"Amortization failed: {e}")
        return None

    return AmortizationResult(
        payment=calculate_payment(principal, annual_rate, months),
        total_interest=calculate_total_interest(schedule),
        total_payment=calculate_total_payment(schedule),
        schedule=schedule,
    )
