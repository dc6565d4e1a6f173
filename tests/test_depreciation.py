"""
Tests for depreciation schedules.
"""

import pytest

from calchub.calculations.depreciation import (
    DepreciationMethod,
    compute_depreciation,
    generate_depreciation_schedule,
)
from calchub.calculations.errors import InvalidInputError


class TestStraightLine:
    def test_constant_expense(self):
        """Cost 50k, salvage 5k over 5 years depreciates 9k per year."""
        result = compute_depreciation(50000, 5000, 5, "straight_line")
        assert [e.depreciation_expense for e in result.schedule] == [9000] * 5
        assert [e.book_value for e in result.schedule] == [
            41000,
            32000,
            23000,
            14000,
            5000,
        ]
        assert result.total_depreciation == 45000

    def test_years_are_numbered_from_one(self):
        schedule = generate_depreciation_schedule(1000, 0, 4)
        assert [e.year for e in schedule] == [1, 2, 3, 4]


class TestDoubleDecliningBalance:
    def test_clamps_at_salvage(self):
        schedule = generate_depreciation_schedule(
            10000, 1000, 5, DepreciationMethod.double_declining_balance
        )
        expenses = [e.depreciation_expense for e in schedule]
        assert expenses == pytest.approx([4000, 2400, 1440, 864, 296])
        assert schedule[-1].book_value == 1000

    def test_book_value_never_below_salvage(self):
        schedule = generate_depreciation_schedule(
            10000, 4000, 6, "double_declining_balance"
        )
        assert all(e.book_value >= 4000 for e in schedule)
        # Salvage reached in year 3, nothing left to depreciate afterwards
        assert all(e.depreciation_expense == 0 for e in schedule[3:])

    def test_residual_pushed_into_final_year(self):
        """Declining balance never reaches zero salvage on its own."""
        schedule = generate_depreciation_schedule(
            1000, 0, 3, "double_declining_balance"
        )
        assert schedule[-1].book_value == 0
        assert schedule[-1].accumulated_depreciation == pytest.approx(1000, abs=0.01)
        assert schedule[-1].depreciation_expense == pytest.approx(1000 / 9, abs=0.01)


class TestSumOfYearsDigits:
    def test_expense_declines_linearly(self):
        schedule = generate_depreciation_schedule(
            15000, 0, 5, DepreciationMethod.sum_of_years_digits
        )
        expenses = [e.depreciation_expense for e in schedule]
        assert expenses == pytest.approx([5000, 4000, 3000, 2000, 1000])
        assert schedule[-1].book_value == 0


class TestTerminalInvariant:
    @pytest.mark.parametrize("method", list(DepreciationMethod))
    @pytest.mark.parametrize(
        "cost,salvage,life",
        [
            (50000, 5000, 5),
            (12345.67, 1234.56, 7),
            (999.99, 0, 3),
            (80000, 80000, 4),
            (3000, 100, 1),
            (250000, 17500, 27),
        ],
    )
    def test_final_book_value_equals_salvage(self, method, cost, salvage, life):
        result = compute_depreciation(cost, salvage, life, method)
        final = result.schedule[-1]
        assert final.book_value == salvage
        assert abs(final.accumulated_depreciation - (cost - salvage)) < 0.01
        assert abs(result.total_depreciation - (cost - salvage)) < 0.01
        assert len(result.schedule) == life


class TestInvalidInputs:
    @pytest.mark.parametrize(
        "cost,salvage,life,method",
        [
            (0, 0, 5, "straight_line"),
            (1000, -1, 5, "straight_line"),
            (1000, 2000, 5, "straight_line"),
            (1000, 100, 0, "straight_line"),
            (1000, 100, 2.5, "straight_line"),
            (1000, 100, 5, "units_of_production"),
            (float("nan"), 100, 5, "straight_line"),
        ],
    )
    def test_returns_none(self, cost, salvage, life, method):
        assert compute_depreciation(cost, salvage, life, method) is None

    def test_generate_raises(self):
        with pytest.raises(InvalidInputError, match="Salvage value cannot be greater"):
            generate_depreciation_schedule(1000, 2000, 5)
