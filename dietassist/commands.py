"""Undoable edits to the food database, the daily log and the profile."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import suppress

from .calculator import ActivityLevel, Gender, TargetCalorieCalculator
from .dailylog import DailyLog
from .database import FoodDatabase
from .dietprofile import DietProfile
from .food import Food, format_number


class Command(ABC):
    """An action that can be carried out and later reverted."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the action."""

    @abstractmethod
    def __str__(self) -> str:
        """Short description of the action."""


class AddFoodCommand(Command):
    """Log servings of a food on the log's current date."""

    def __init__(self, log: DailyLog, food: Food, servings: float) -> None:
        self.log = log
        self.food = food
        self.servings = servings

    def execute(self) -> None:
        self.log.add_food_to_current_day(self.food, self.servings)

    def undo(self) -> None:
        entries = self.log.current_day_log().entries
        for index in reversed(range(len(entries))):
            entry = entries[index]
            if entry.food is self.food and entry.servings == self.servings:
                self.log.remove_food_from_current_day(index)
                break

    def __str__(self) -> str:
        return f"Add {format_number(self.servings)} serving(s) of {self.food.identifier}"


class RemoveFoodCommand(Command):
    """Remove an entry, by position, from the log's current date.

    Raises IndexError at construction if there is no entry at ``index``.
    """

    def __init__(self, log: DailyLog, index: int) -> None:
        self.log = log
        self.index = index
        self.saved_entry = log.current_day_log().entries[index]

    def execute(self) -> None:
        self.log.remove_food_from_current_day(self.index)

    def undo(self) -> None:
        self.log.add_food_to_current_day(self.saved_entry.food, self.saved_entry.servings)

    def __str__(self) -> str:
        return (
            f"Remove {format_number(self.saved_entry.servings)} serving(s) of "
            f"{self.saved_entry.food.identifier}"
        )


class ChangeDateCommand(Command):
    """Select another date in the log."""

    def __init__(self, log: DailyLog, new_date: str) -> None:
        self.log = log
        self.old_date = log.current_date
        self.new_date = new_date

    def execute(self) -> None:
        self.log.current_date = self.new_date

    def undo(self) -> None:
        self.log.current_date = self.old_date

    def __str__(self) -> str:
        return f"Change date from {self.old_date} to {self.new_date}"


class AddFoodToDbCommand(Command):
    """Add a food to the database."""

    def __init__(self, database: FoodDatabase, food: Food) -> None:
        self.database = database
        self.food = food

    def execute(self) -> None:
        self.database.add_food(self.food)

    def undo(self) -> None:
        with suppress(KeyError):
            self.database.remove_food(self.food.identifier)

    def __str__(self) -> str:
        return f"Add food '{self.food.identifier}' to database"


class SetGenderCommand(Command):
    """Change the profile's gender."""

    def __init__(self, profile: DietProfile, new_gender: Gender) -> None:
        self.profile = profile
        self.old_gender = profile.gender
        self.new_gender = new_gender

    def execute(self) -> None:
        self.profile.gender = self.new_gender

    def undo(self) -> None:
        self.profile.gender = self.old_gender

    def __str__(self) -> str:
        return "Change gender"


class SetHeightCommand(Command):
    """Change the profile's height in centimetres."""

    def __init__(self, profile: DietProfile, new_height: float) -> None:
        self.profile = profile
        self.old_height = profile.height
        self.new_height = new_height

    def execute(self) -> None:
        self.profile.height = self.new_height

    def undo(self) -> None:
        self.profile.height = self.old_height

    def __str__(self) -> str:
        return (
            f"Change height from {format_number(self.old_height)} to "
            f"{format_number(self.new_height)} cm"
        )


class SetAgeCommand(Command):
    """Change the profile's age."""

    def __init__(self, profile: DietProfile, new_age: int) -> None:
        self.profile = profile
        self.old_age = profile.age
        self.new_age = new_age

    def execute(self) -> None:
        self.profile.age = self.new_age

    def undo(self) -> None:
        self.profile.age = self.old_age

    def __str__(self) -> str:
        return f"Change age from {self.old_age} to {self.new_age}"


class SetWeightCommand(Command):
    """Record a weight on a date; undo records the weight that applied before."""

    def __init__(self, profile: DietProfile, date: str, new_weight: float) -> None:
        self.profile = profile
        self.date = date
        self.old_weight = profile.weight(date)
        self.new_weight = new_weight

    def execute(self) -> None:
        self.profile.set_weight(self.date, self.new_weight)

    def undo(self) -> None:
        self.profile.set_weight(self.date, self.old_weight)

    def __str__(self) -> str:
        return (
            f"Change weight for {self.date} from {format_number(self.old_weight)} "
            f"to {format_number(self.new_weight)} kg"
        )


class SetActivityLevelCommand(Command):
    """Record an activity level on a date."""

    def __init__(self, profile: DietProfile, date: str, new_level: ActivityLevel) -> None:
        self.profile = profile
        self.date = date
        self.old_level = profile.activity_level(date)
        self.new_level = new_level

    def execute(self) -> None:
        self.profile.set_activity_level(self.date, self.new_level)

    def undo(self) -> None:
        self.profile.set_activity_level(self.date, self.old_level)

    def __str__(self) -> str:
        return f"Change activity level for {self.date}"


class SetCalculatorCommand(Command):
    """Switch the profile's calorie formula."""

    def __init__(self, profile: DietProfile, new_calculator: TargetCalorieCalculator) -> None:
        self.profile = profile
        self.old_calculator = profile.calculator
        self.new_calculator = new_calculator

    def execute(self) -> None:
        self.profile.calculator = self.new_calculator

    def undo(self) -> None:
        self.profile.calculator = self.old_calculator

    def __str__(self) -> str:
        return "Change calorie calculator"


class UndoManager:
    """Runs commands and keeps them on a stack so they can be reverted."""

    def __init__(self) -> None:
        self._stack: list[Command] = []

    def __len__(self) -> int:
        return len(self._stack)

    def execute_command(self, command: Command) -> None:
        """Execute the command and remember it; a command that raises is not kept."""
        command.execute()
        self._stack.append(command)
        print(f"Command executed: {command}")

    def can_undo(self) -> bool:
        """True if there is a command to revert."""
        return bool(self._stack)

    def undo(self) -> Command | None:
        """Revert and return the latest command; None if there is nothing to undo."""
        if not self._stack:
            return None
        command = self._stack[-1]
        command.undo()
        self._stack.pop()
        return command

    def history(self) -> list[str]:
        """Descriptions of remembered commands, oldest first."""
        return [str(command) for command in self._stack]

    def clear_history(self) -> None:
        """Forget every remembered command."""
        self._stack.clear()