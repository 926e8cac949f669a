"""Personal attributes and target calorie formulas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum


class Gender(Enum):
    """Gender used by the calorie formulas; the value is its display name."""

    MALE = "Male"
    FEMALE = "Female"


class ActivityLevel(IntEnum):
    """Daily activity level; the integer value is the stored form."""

    SEDENTARY = 0
    LIGHTLY_ACTIVE = 1
    MODERATELY_ACTIVE = 2
    VERY_ACTIVE = 3
    EXTREMELY_ACTIVE = 4

    @property
    def factor(self) -> float:
        """Multiplier applied to the basal metabolic rate."""
        return _ACTIVITY_FACTORS[self]

    @property
    def label(self) -> str:
        """Human readable name."""
        return _ACTIVITY_LABELS[self]


_ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

_ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately Active",
    ActivityLevel.VERY_ACTIVE: "Very Active",
    ActivityLevel.EXTREMELY_ACTIVE: "Extremely Active",
}


class TargetCalorieCalculator(ABC):
    """Strategy that turns personal data into a daily calorie target."""

    name: str = ""

    @abstractmethod
    def calculate_target_calories(
        self,
        gender: Gender,
        weight_kg: float,
        height_cm: float,
        age: int,
        activity_level: ActivityLevel,
    ) -> float:
        """Return the daily calorie target."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HarrisBenedictCalculator(TargetCalorieCalculator):
    """Revised Harris-Benedict equation."""

    name = "Harris-Benedict Equation"

    def calculate_target_calories(self, gender, weight_kg, height_cm, age, activity_level):
        if gender is Gender.MALE:
            bmr = 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
        else:
            bmr = 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age
        return bmr * ActivityLevel(activity_level).factor


class MifflinStJeorCalculator(TargetCalorieCalculator):
    """Mifflin-St Jeor equation."""

    name = "Mifflin-St Jeor Equation"

    def calculate_target_calories(self, gender, weight_kg, height_cm, age, activity_level):
        bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
        bmr += 5 if gender is Gender.MALE else -161
        return bmr * ActivityLevel(activity_level).factor


_CALCULATORS: dict[str, type[TargetCalorieCalculator]] = {
    HarrisBenedictCalculator.name: HarrisBenedictCalculator,
    MifflinStJeorCalculator.name: MifflinStJeorCalculator,
}


def calculator_by_name(name: str) -> TargetCalorieCalculator:
    """Create the calculator whose display name is ``name``.

    Raises ValueError for an unknown name.
    """
    try:
        return _CALCULATORS[name]()
    except KeyError:
        raise ValueError(f"unknown calorie calculator: {name!r}") from None