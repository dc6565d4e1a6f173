"""
Tests for time-value-of-money calculations.
"""

import pytest

from calchub.calculations.errors import CalculationError, InvalidInputError
from calchub.calculations.tvm import (
    calculate_annuity_value,
    calculate_compound_growth,
    calculate_future_value,
    calculate_present_value,
    calculate_retirement_savings,
    calculate_roi,
    compute_annuity_value,
)


class TestAnnuity:
    def test_future_value(self):
        value = compute_annuity_value("future_value", 100, 5, 10, "annually")
        assert value == pytest.approx(1257.789, abs=0.001)

    def test_present_value(self):
        value = compute_annuity_value("present_value", 100, 5, 10, "annually")
        assert value == pytest.approx(772.173, abs=0.001)

    def test_monthly_frequency_splits_rate(self):
        value = compute_annuity_value("future_value", 100, 12, 1, "monthly")
        # 12 payments at 1% per month
        assert value == pytest.approx(100 * (1.01**12 - 1) / 0.01)

    def test_quarterly_frequency(self):
        value = compute_annuity_value("present_value", 500, 8, 2, "quarterly")
        assert value == pytest.approx(500 * (1 - 1.02**-8) / 0.02)

    @pytest.mark.parametrize("annuity_type", ["present_value", "future_value"])
    @pytest.mark.parametrize(
        "frequency,per_year", [("monthly", 12), ("quarterly", 4), ("annually", 1)]
    )
    def test_zero_rate_is_sum_of_payments(self, annuity_type, frequency, per_year):
        value = compute_annuity_value(annuity_type, 250, 0, 3, frequency)
        assert value == 250 * 3 * per_year

    @pytest.mark.parametrize(
        "args",
        [
            ("future_value", 0, 5, 10, "annually"),
            ("future_value", 100, -5, 10, "annually"),
            ("future_value", 100, 5, 0, "annually"),
            ("future_value", 100, 5, 10, "weekly"),
            ("perpetuity", 100, 5, 10, "annually"),
        ],
    )
    def test_invalid_inputs_return_none(self, args):
        assert compute_annuity_value(*args) is None

    def test_overflow_is_a_calculation_error(self):
        assert compute_annuity_value("future_value", 100, 1000, 100000, "monthly") is None

    def test_calculate_raises(self):
        with pytest.raises(InvalidInputError):
            calculate_annuity_value("future_value", -1, 5, 10)


class TestCompounding:
    def test_compound_growth(self):
        assert calculate_compound_growth(1000, 0.10, 2) == pytest.approx(1210)

    def test_future_value_lump_sum(self):
        result = calculate_future_value(1000, 12, 1, "monthly")
        assert result.future_value == pytest.approx(1000 * 1.01**12)
        assert result.total_contributions == 1000
        assert result.total_interest == pytest.approx(result.future_value - 1000)

    def test_future_value_with_contributions(self):
        result = calculate_future_value(1000, 12, 1, "monthly", 100, "monthly")
        expected = 1000 * 1.01**12 + 100 * (1.01**12 - 1) / 0.01
        assert result.future_value == pytest.approx(expected, rel=1e-9)
        assert result.total_contributions == pytest.approx(2200)

    def test_zero_rate_contributions(self):
        result = calculate_future_value(0, 0, 2, "annually", 50, "quarterly")
        assert result.future_value == pytest.approx(400)
        assert result.total_interest == pytest.approx(0)

    def test_future_value_rejects_unknown_frequency(self):
        with pytest.raises(InvalidInputError):
            calculate_future_value(1000, 5, 1, "hourly")

    def test_present_value(self):
        assert calculate_present_value(1210, 10, 2) == pytest.approx(1000)

    def test_present_value_rejects_zero_periods(self):
        with pytest.raises(InvalidInputError):
            calculate_present_value(1000, 5, 0)

    def test_future_value_overflow_raises(self):
        with pytest.raises(CalculationError):
            calculate_future_value(1000, 1000000, 1000, "daily")

    def test_present_value_of_unreachable_amount_is_zero(self):
        assert calculate_present_value(1000, 1000000, 1000) == 0.0


class TestRoi:
    def test_gain(self):
        result = calculate_roi(1000, 1250)
        assert result.roi_percent == pytest.approx(25)
        assert result.profit == 250

    def test_loss(self):
        result = calculate_roi(1000, 800)
        assert result.roi_percent == pytest.approx(-20)

    def test_requires_investment(self):
        with pytest.raises(InvalidInputError):
            calculate_roi(0, 100)


class TestRetirementSavings:
    def test_contributions_grow_with_balance(self):
        result = calculate_retirement_savings(30, 32, 1000, 100, 10)
        # (1000 + 100) * 1.1 = 1210, then (1210 + 100) * 1.1 = 1441
        assert result.balance == pytest.approx(1441)
        assert result.contributed == pytest.approx(1200)
        assert result.growth == pytest.approx(241)

    def test_zero_return_is_sum_of_deposits(self):
        result = calculate_retirement_savings(40, 65, 5000, 2000, 0)
        assert result.balance == pytest.approx(5000 + 2000 * 25)
        assert result.growth == pytest.approx(0)

    @pytest.mark.parametrize("retirement_age", [30, 25])
    def test_retirement_must_follow_current_age(self, retirement_age):
        with pytest.raises(InvalidInputError):
            calculate_retirement_savings(30, retirement_age, 1000, 100, 5)

    def test_rejects_negative_savings(self):
        with pytest.raises(InvalidInputError):
            calculate_retirement_savings(30, 65, -1, 100, 5)
