"""
Mortgage Product Calculations

Monthly housing payments for conventional (with PMI), FHA and VA loans.
"""

import math
from dataclasses import dataclass, field
from typing import List

from calchub.calculations.amortization import (
    AmortizationEntry,
    calculate_payment,
    calculate_total_interest,
    generate_amortization_schedule,
)
from calchub.calculations.errors import CalculationError, InvalidInputError

FHA_MIN_DOWN_PAYMENT_PERCENT = 3.5


@dataclass
class MortgageResult:
    """Monthly cost breakdown of a conventional mortgage."""

    principal_and_interest: float
    taxes: float
    insurance: float
    pmi: float
    total_monthly: float
    total_interest: float
    total_payment: float  # Principal plus interest over the full term
    schedule: List[AmortizationEntry] = field(default_factory=list)


@dataclass
class FhaLoanResult:
    principal_and_interest: float
    upfront_mip: float
    monthly_mip: float
    total_monthly: float
    base_loan: float
    total_loan: float


@dataclass
class VaLoanResult:
    principal_and_interest: float
    funding_fee: float
    total_monthly: float
    total_loan: float


def _check_non_negative(**values):
    for name, value in values.items():
        if not math.isfinite(value) or value < 0:
            raise InvalidInputError(f"{name} must be zero or positive")


def _check_term(term_years: int):
    if term_years <= 0:
        raise InvalidInputError("Loan term must be a positive number of years")


def _monthly_principal_and_interest(
    loan_amount: float, annual_rate_percent: float, term_years: int
) -> float:
    payment = calculate_payment(loan_amount, annual_rate_percent / 100, term_years * 12)
    if not math.isfinite(payment):
        raise CalculationError("Monthly payment is not a finite number")
    return payment


def calculate_mortgage(
    loan_amount: float,
    annual_rate_percent: float,
    term_years: int,
    annual_taxes: float = 0.0,
    annual_insurance: float = 0.0,
    pmi_rate_percent: float = 0.0,
) -> MortgageResult:
    """
    Monthly PITI plus PMI for a conventional mortgage.

    PMI is charged as an annual percentage of the original loan amount.

    Raises:
        InvalidInputError: If any input is out of range
    """
    _check_non_negative(
        annual_rate_percent=annual_rate_percent,
        annual_taxes=annual_taxes,
        annual_insurance=annual_insurance,
        pmi_rate_percent=pmi_rate_percent,
    )

    schedule = generate_amortization_schedule(
        loan_amount, annual_rate_percent / 100, term_years * 12
    )
    principal_and_interest = _monthly_principal_and_interest(
        loan_amount, annual_rate_percent, term_years
    )

    taxes = annual_taxes / 12
    insurance = annual_insurance / 12
    pmi = loan_amount * pmi_rate_percent / 100 / 12
    total_interest = calculate_total_interest(schedule)

    return MortgageResult(
        principal_and_interest=principal_and_interest,
        taxes=taxes,
        insurance=insurance,
        pmi=pmi,
        total_monthly=principal_and_interest + taxes + insurance + pmi,
        total_interest=total_interest,
        total_payment=loan_amount + total_interest,
        schedule=schedule,
    )


def calculate_fha_loan(
    home_price: float,
    down_payment_percent: float,
    annual_rate_percent: float,
    term_years: int,
    upfront_mip_percent: float = 1.75,
    annual_mip_percent: float = 0.55,
    annual_taxes: float = 0.0,
    annual_insurance: float = 0.0,
) -> FhaLoanResult:
    """
    Monthly payment for an FHA loan.

    The upfront MIP is financed into the loan; the annual MIP is charged
    monthly on the base loan amount.

    Raises:
        InvalidInputError: If any input is out of range
    """
    _check_non_negative(
        annual_rate_percent=annual_rate_percent,
        upfront_mip_percent=upfront_mip_percent,
        annual_mip_percent=annual_mip_percent,
        annual_taxes=annual_taxes,
        annual_insurance=annual_insurance,
    )
    _check_term(term_years)
    if not math.isfinite(home_price) or home_price <= 0:
        raise InvalidInputError("Home price must be a positive number")
    if not FHA_MIN_DOWN_PAYMENT_PERCENT <= down_payment_percent < 100:
        raise InvalidInputError(
            f"FHA down payment must be at least {FHA_MIN_DOWN_PAYMENT_PERCENT}%"
        )

    base_loan = home_price * (1 - down_payment_percent / 100)
    upfront_mip = base_loan * upfront_mip_percent / 100
    total_loan = base_loan + upfront_mip

    principal_and_interest = _monthly_principal_and_interest(
        total_loan, annual_rate_percent, term_years
    )
    monthly_mip = base_loan * annual_mip_percent / 100 / 12

    return FhaLoanResult(
        principal_and_interest=principal_and_interest,
        upfront_mip=upfront_mip,
        monthly_mip=monthly_mip,
        total_monthly=(
            principal_and_interest
            + monthly_mip
            + annual_taxes / 12
            + annual_insurance / 12
        ),
        base_loan=base_loan,
        total_loan=total_loan,
    )


def calculate_va_loan(
    loan_amount: float,
    annual_rate_percent: float,
    term_years: int,
    funding_fee_percent: float = 2.15,
    annual_taxes: float = 0.0,
    annual_insurance: float = 0.0,
) -> VaLoanResult:
    """
    Monthly payment for a VA loan with the funding fee financed.

    Raises:
        InvalidInputError: If any input is out of range
    """
    _check_non_negative(
        annual_rate_percent=annual_rate_percent,
        funding_fee_percent=funding_fee_percent,
        annual_taxes=annual_taxes,
        annual_insurance=annual_insurance,
    )
    _check_term(term_years)
    if not math.isfinite(loan_amount) or loan_amount <= 0:
        raise InvalidInputError("Loan amount must be a positive number")

    funding_fee = loan_amount * funding_fee_percent / 100
    total_loan = loan_amount + funding_fee
    principal_and_interest = _monthly_principal_and_interest(
        total_loan, annual_rate_percent, term_years
    )

    return VaLoanResult(
        principal_and_interest=principal_and_interest,
        funding_fee=funding_fee,
        total_monthly=principal_and_interest + annual_taxes / 12 + annual_insurance / 12,
        total_loan=total_loan,
    )
