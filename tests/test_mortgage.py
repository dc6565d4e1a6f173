"""
Tests for conventional, FHA and VA mortgage payments.
"""

import pytest

from calchub.calculations.amortization import calculate_payment
from calchub.calculations.errors import InvalidInputError
from calchub.calculations.mortgage import (
    calculate_fha_loan,
    calculate_mortgage,
    calculate_va_loan,
)


class TestConventionalMortgage:
    def test_monthly_breakdown(self):
        result = calculate_mortgage(
            200000,
            5,
            30,
            annual_taxes=2400,
            annual_insurance=1200,
            pmi_rate_percent=0.5,
        )
        assert abs(result.principal_and_interest - 1073.64) < 0.01
        assert result.taxes == pytest.approx(200)
        assert result.insurance == pytest.approx(100)
        assert result.pmi == pytest.approx(83.333, abs=0.001)
        assert result.total_monthly == pytest.approx(
            result.principal_and_interest + 200 + 100 + 83.3333, abs=0.001
        )

    def test_totals_follow_schedule(self):
        result = calculate_mortgage(200000, 5, 30)
        assert abs(result.total_interest - 186511.57) < 1.0
        assert result.total_payment == pytest.approx(200000 + result.total_interest)
        assert len(result.schedule) == 360
        assert result.schedule[-1].ending_balance == 0

    def test_rejects_negative_taxes(self):
        with pytest.raises(InvalidInputError):
            calculate_mortgage(200000, 5, 30, annual_taxes=-1)


class TestFhaLoan:
    def test_mip_financed(self):
        result = calculate_fha_loan(300000, 3.5, 6, 30)
        assert result.base_loan == pytest.approx(289500)
        assert result.upfront_mip == pytest.approx(5066.25)
        assert result.total_loan == pytest.approx(294566.25)
        assert result.monthly_mip == pytest.approx(132.6875)
        assert result.principal_and_interest == pytest.approx(
            calculate_payment(294566.25, 0.06, 360)
        )
        assert result.total_monthly == pytest.approx(
            result.principal_and_interest + result.monthly_mip
        )

    def test_includes_taxes_and_insurance(self):
        result = calculate_fha_loan(
            300000, 10, 6, 30, annual_taxes=3600, annual_insurance=1200
        )
        assert result.total_monthly == pytest.approx(
            result.principal_and_interest + result.monthly_mip + 400
        )

    def test_minimum_down_payment(self):
        with pytest.raises(InvalidInputError, match="3.5%"):
            calculate_fha_loan(300000, 3, 6, 30)


class TestVaLoan:
    def test_funding_fee_financed(self):
        result = calculate_va_loan(250000, 6, 30)
        assert result.funding_fee == pytest.approx(5375)
        assert result.total_loan == pytest.approx(255375)
        assert result.principal_and_interest == pytest.approx(
            calculate_payment(255375, 0.06, 360)
        )

    def test_zero_rate(self):
        result = calculate_va_loan(360000, 0, 30, funding_fee_percent=0)
        assert result.principal_and_interest == pytest.approx(1000)

    def test_requires_positive_loan(self):
        with pytest.raises(InvalidInputError):
            calculate_va_loan(0, 6, 30)
