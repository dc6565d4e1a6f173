"""
Fitness and Health Calculations

BMR/TDEE (Mifflin-St Jeor), BMI, and US Navy body fat estimates.
"""

import math
from dataclasses import dataclass
from typing import Optional

from calchub.calculations.errors import InvalidInputError

KG_PER_POUND = 0.453592
CM_PER_INCH = 2.54

MALE_S_FACTOR = 5
FEMALE_S_FACTOR = -161

ACTIVITY_FACTORS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

# Share of TDEE to eat for each goal
GOAL_MULTIPLIERS = {
    "maintain": 1.0,
    "mild_loss": 0.9,
    "weight_loss": 0.8,
    "extreme_loss": 0.6,
    "mild_gain": 1.1,
    "weight_gain": 1.2,
    "fast_gain": 1.4,
}


@dataclass
class EnergyNeeds:
    """Daily energy figures in whole kcal."""

    bmr: int
    tdee: int
    goal_calories: int


def pounds_to_kg(pounds: float) -> float:
    return pounds * KG_PER_POUND


def feet_inches_to_cm(feet: float, inches: float = 0.0) -> float:
    return (feet * 12 + inches) * CM_PER_INCH


def _check_sex(sex: str) -> str:
    sex = sex.lower()
    if sex not in ("male", "female"):
        raise InvalidInputError(f"Sex must be 'male' or 'female', got {sex!r}")
    return sex


def _check_positive(**values):
    for name, value in values.items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"{name} must be a positive number")


def calculate_bmr(weight_kg: float, height_cm: float, age: int, sex: str) -> float:
    """
    Basal metabolic rate (kcal/day) by the Mifflin-St Jeor equation.

    BMR = 10 * weight + 6.25 * height - 5 * age + s,
    where s is +5 for men and -161 for women.
    """
    sex = _check_sex(sex)
    _check_positive(weight_kg=weight_kg, height_cm=height_cm, age=age)

    s = MALE_S_FACTOR if sex == "male" else FEMALE_S_FACTOR
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + s


def calculate_energy_needs(
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: str,
    activity_level: str = "sedentary",
    goal: str = "maintain",
) -> EnergyNeeds:
    """BMR, total daily energy expenditure, and calories for a weight goal."""
    if activity_level not in ACTIVITY_FACTORS:
        raise InvalidInputError(f"Unknown activity level: {activity_level}")
    if goal not in GOAL_MULTIPLIERS:
        raise InvalidInputError(f"Unknown goal: {goal}")

    bmr = calculate_bmr(weight_kg, height_cm, age, sex)
    tdee = bmr * ACTIVITY_FACTORS[activity_level]

    return EnergyNeeds(
        bmr=round(bmr),
        tdee=round(tdee),
        goal_calories=round(tdee * GOAL_MULTIPLIERS[goal]),
    )


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index: weight (kg) / height (m) squared."""
    _check_positive(weight_kg=weight_kg, height_cm=height_cm)
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def calculate_body_fat_navy(
    sex: str,
    height_cm: float,
    neck_cm: float,
    waist_cm: float,
    hip_cm: Optional[float] = None,
) -> float:
    """
    Body fat percentage by the US Navy circumference method.

    Measurements are converted to inches before applying the formula.
    Women also need a hip measurement. Results below zero are floored at 0.
    """
    sex = _check_sex(sex)
    _check_positive(height_cm=height_cm, neck_cm=neck_cm, waist_cm=waist_cm)

    height_in = height_cm / CM_PER_INCH
    neck_in = neck_cm / CM_PER_INCH
    waist_in = waist_cm / CM_PER_INCH

    if sex == "male":
        circumference = waist_in - neck_in
        if circumference <= 0:
            raise InvalidInputError("Waist must be larger than neck")
        body_fat = (
            86.010 * math.log10(circumference)
            - 70.041 * math.log10(height_in)
            + 36.76
        )
    else:
        if hip_cm is None:
            raise InvalidInputError("Hip measurement is required for women")
        _check_positive(hip_cm=hip_cm)
        circumference = waist_in + hip_cm / CM_PER_INCH - neck_in
        if circumference <= 0:
            raise InvalidInputError("Waist plus hip must be larger than neck")
        body_fat = (
            163.205 * math.log10(circumference)
            - 97.684 * math.log10(height_in)
            - 78.387
        )

    return max(0.0, body_fat)
