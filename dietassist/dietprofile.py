"""The user's personal data and calorie target."""

from __future__ import annotations

from pathlib import Path

from .calculator import (
    ActivityLevel,
    Gender,
    HarrisBenedictCalculator,
    TargetCalorieCalculator,
    calculator_by_name,
)
from .food import format_number
from .observer import Subject

DEFAULT_WEIGHT = 70.0
DEFAULT_ACTIVITY = ActivityLevel.MODERATELY_ACTIVE
_INITIAL_DATE = "2023-01-01"


def _pairs(line: str):
    """Yield (key, value) text pairs from a ``key:value,key:value`` line."""
    parts = line.split(",") if line else []
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        key, _, value = part.partition(":")
        yield key, value


def _latest_on_or_before(values: dict, date: str, default):
    if date in values:
        return values[date]
    earlier = [d for d in values if d <= date]
    return values[max(earlier)] if earlier else default


class DietProfile(Subject):
    """Gender, height, age, dated weights and activity levels, and a formula."""

    def __init__(self, path: str | Path = "profile.txt") -> None:
        super().__init__()
        self.path = Path(path)
        self._gender = Gender.MALE
        self._height = 170.0
        self._age = 30
        self._calculator: TargetCalorieCalculator = HarrisBenedictCalculator()
        self.weights: dict[str, float] = {_INITIAL_DATE: DEFAULT_WEIGHT}
        self.activity_levels: dict[str, ActivityLevel] = {_INITIAL_DATE: DEFAULT_ACTIVITY}

    @property
    def gender(self) -> Gender:
        return self._gender

    @gender.setter
    def gender(self, value: Gender) -> None:
        self._gender = value
        self.notify_observers()

    @property
    def height(self) -> float:
        """Height in centimetres."""
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value
        self.notify_observers()

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        self._age = value
        self.notify_observers()

    @property
    def calculator(self) -> TargetCalorieCalculator:
        return self._calculator

    @calculator.setter
    def calculator(self, value: TargetCalorieCalculator) -> None:
        self._calculator = value
        self.notify_observers()

    def set_weight(self, date: str, weight: float) -> None:
        """Record the weight in kilograms on a date."""
        self.weights[date] = weight
        self.notify_observers()

    def weight(self, date: str) -> float:
        """Weight on the date, else the latest earlier one, else the default."""
        return _latest_on_or_before(self.weights, date, DEFAULT_WEIGHT)

    def set_activity_level(self, date: str, level: ActivityLevel) -> None:
        """Record the activity level on a date."""
        self.activity_levels[date] = level
        self.notify_observers()

    def activity_level(self, date: str) -> ActivityLevel:
        """Activity level on the date, else the latest earlier one, else the default."""
        return _latest_on_or_before(self.activity_levels, date, DEFAULT_ACTIVITY)

    def target_calories(self, date: str) -> float:
        """Daily calorie target for the date using the chosen formula."""
        return self._calculator.calculate_target_calories(
            self._gender, self.weight(date), self._height, self._age, self.activity_level(date)
        )

    def load(self) -> bool:
        """Read the profile from the file.

        Returns False if the file cannot be opened. An unknown calculator name
        keeps the current one. Raises ValueError for malformed numbers or an
        unknown activity level.
        """
        try:
            with self.path.open(encoding="utf-8") as fh:
                lines = iter(fh.read().splitlines())
        except OSError:
            print("Could not open profile file. Creating a new one when saving.")
            return False

        basics = next(lines, None)
        if basics is not None:
            fields = basics.split(";", 3)
            fields += [""] * (4 - len(fields))
            gender_text, height_text, age_text, calculator_name = fields
            self._gender = Gender.MALE if gender_text == "Male" else Gender.FEMALE
            self._height = float(height_text)
            self._age = int(age_text)
            try:
                self._calculator = calculator_by_name(calculator_name)
            except ValueError:
                pass

        self.weights = {date: float(value) for date, value in _pairs(next(lines, ""))}
        self.activity_levels = {
            date: ActivityLevel(int(value)) for date, value in _pairs(next(lines, ""))
        }
        return True

    def save(self) -> bool:
        """Write the profile to the file; returns False if it cannot be written."""
        weights = ",".join(
            f"{date}:{format_number(self.weights[date])}" for date in sorted(self.weights)
        )
        levels = ",".join(
            f"{date}:{int(self.activity_levels[date])}" for date in sorted(self.activity_levels)
        )
        text = (
            f"{self._gender.value};{format_number(self._height)};{self._age};"
            f"{self._calculator.name}\n{weights}\n{levels}\n"
        )
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError:
            print("Could not open profile file for writing.")
            return False
        return True