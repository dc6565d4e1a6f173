"""
Tests for fitness and health calculations.
"""

import pytest

from calchub.calculations.errors import InvalidInputError
from calchub.calculations.fitness import (
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_body_fat_navy,
    calculate_energy_needs,
    feet_inches_to_cm,
    pounds_to_kg,
)


class TestBmr:
    def test_male(self):
        assert calculate_bmr(80, 180, 30, "male") == pytest.approx(1780)

    def test_female(self):
        assert calculate_bmr(60, 165, 25, "female") == pytest.approx(1345.25)

    def test_sex_is_case_insensitive(self):
        assert calculate_bmr(80, 180, 30, "Male") == calculate_bmr(80, 180, 30, "male")

    def test_energy_needs(self):
        needs = calculate_energy_needs(80, 180, 30, "male", "moderate", "weight_loss")
        assert needs.bmr == 1780
        assert needs.tdee == 2759
        assert needs.goal_calories == 2207

    def test_unknown_activity_level(self):
        with pytest.raises(InvalidInputError):
            calculate_energy_needs(80, 180, 30, "male", "couch")

    def test_rejects_invalid_sex(self):
        with pytest.raises(InvalidInputError):
            calculate_bmr(80, 180, 30, "other")

    def test_rejects_non_positive_weight(self):
        with pytest.raises(InvalidInputError):
            calculate_bmr(0, 180, 30, "male")


class TestBmi:
    def test_bmi(self):
        assert calculate_bmi(70, 175) == pytest.approx(22.857, abs=0.001)

    @pytest.mark.parametrize(
        "bmi,category",
        [
            (17.0, "Underweight"),
            (18.5, "Normal weight"),
            (24.9, "Normal weight"),
            (25.0, "Overweight"),
            (30.0, "Obese"),
        ],
    )
    def test_categories(self, bmi, category):
        assert bmi_category(bmi) == category


class TestBodyFat:
    def test_male(self):
        body_fat = calculate_body_fat_navy("male", 178, 38, 86)
        assert 15 < body_fat < 20

    def test_female(self):
        body_fat = calculate_body_fat_navy("female", 165, 33, 71, hip_cm=97)
        assert 20 < body_fat < 32

    def test_female_requires_hip(self):
        with pytest.raises(InvalidInputError, match="Hip"):
            calculate_body_fat_navy("female", 165, 33, 71)

    def test_waist_must_exceed_neck(self):
        with pytest.raises(InvalidInputError):
            calculate_body_fat_navy("male", 178, 40, 38)


class TestUnitConversions:
    def test_pounds_to_kg(self):
        assert pounds_to_kg(100) == pytest.approx(45.3592)

    def test_feet_inches_to_cm(self):
        assert feet_inches_to_cm(6) == pytest.approx(182.88)
        assert feet_inches_to_cm(5, 10) == pytest.approx(177.8)
