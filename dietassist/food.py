"""Basic and composite foods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def format_number(value: float) -> str:
    """Format a number with six significant digits, trailing zeros dropped."""
    return f"{value:g}"


@dataclass(eq=False)
class Food(ABC):
    """A food identified by a unique name and described by keywords."""

    identifier: str
    keywords: list[str]

    @abstractmethod
    def calories_per_serving(self) -> float:
        """Calories in one serving."""

    @abstractmethod
    def serialize(self) -> str:
        """One-line text form used in the food database file."""

    def matches_all_keywords(self, search_keys) -> bool:
        """True if every search key is a substring of some keyword."""
        return all(self._matches(key) for key in search_keys)

    def matches_any_keyword(self, search_keys) -> bool:
        """True if any search key matches, or if there are no search keys."""
        search_keys = list(search_keys)
        if not search_keys:
            return True
        return any(self._matches(key) for key in search_keys)

    def _matches(self, key: str) -> bool:
        return any(key in keyword for keyword in self.keywords)

    def _header(self) -> str:
        return (
            f"{self.identifier} ({', '.join(self.keywords)}) - "
            f"{format_number(self.calories_per_serving())} calories per serving"
        )


@dataclass(eq=False)
class BasicFood(Food):
    """A food with a fixed calorie count per serving."""

    calories: float

    def calories_per_serving(self) -> float:
        return self.calories

    def serialize(self) -> str:
        return f"BASIC;{self.identifier};{','.join(self.keywords)};{format_number(self.calories)}"

    def __str__(self) -> str:
        return self._header()


@dataclass(eq=False)
class FoodComponent:
    """A number of servings of another food inside a composite food."""

    food: Food
    servings: float


@dataclass(eq=False)
class CompositeFood(Food):
    """A food made of servings of other foods."""

    components: list[FoodComponent]

    def calories_per_serving(self) -> float:
        return sum(c.food.calories_per_serving() * c.servings for c in self.components)

    def serialize(self) -> str:
        parts = ",".join(
            f"{c.food.identifier}:{format_number(c.servings)}" for c in self.components
        )
        return f"COMPOSITE;{self.identifier};{','.join(self.keywords)};{parts}"

    def __str__(self) -> str:
        lines = [self._header(), "Components:"]
        lines.extend(
            f"  - {format_number(c.servings)} serving(s) of {c.food.identifier}"
            for c in self.components
        )
        return "\n".join(lines) + "\n"