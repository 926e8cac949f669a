"""Persistent collection of foods keyed by identifier."""

from __future__ import annotations

from pathlib import Path

from .food import BasicFood, CompositeFood, Food, FoodComponent


def _split_list(text: str, sep: str = ",") -> list[str]:
    """Split like reading delimited fields: a trailing separator adds nothing."""
    if not text:
        return []
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


class FoodDatabase:
    """All known foods, stored one per line in a text file."""

    def __init__(self, path: str | Path = "foods.txt") -> None:
        self.path = Path(path)
        self._foods: dict[str, Food] = {}

    def __len__(self) -> int:
        return len(self._foods)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._foods

    def __iter__(self):
        return iter(self.all_foods())

    def add_food(self, food: Food) -> None:
        """Add a food; raises ValueError if its identifier is already taken."""
        if food.identifier in self._foods:
            raise ValueError(f"food {food.identifier!r} already exists")
        self._foods[food.identifier] = food

    def remove_food(self, identifier: str) -> Food:
        """Remove and return a food; raises KeyError if it is unknown."""
        try:
            return self._foods.pop(identifier)
        except KeyError:
            raise KeyError(identifier) from None

    def get_food(self, identifier: str) -> Food | None:
        """The food with this identifier, or None."""
        return self._foods.get(identifier)

    def find_foods(self, keywords, match_all: bool) -> list[Food]:
        """Foods matching all (or any) of the keywords, ordered by identifier."""
        keywords = list(keywords)
        if match_all:
            return [f for f in self.all_foods() if f.matches_all_keywords(keywords)]
        return [f for f in self.all_foods() if f.matches_any_keyword(keywords)]

    def all_foods(self) -> list[Food]:
        """Every food, ordered by identifier."""
        return [self._foods[key] for key in sorted(self._foods)]

    def load(self) -> bool:
        """Replace the contents with the foods in the file.

        Returns False if the file cannot be opened. Raises ValueError for a
        malformed number or a component naming an unknown food.
        """
        self._foods.clear()
        try:
            with self.path.open(encoding="utf-8") as fh:
                lines = [line.rstrip("\n") for line in fh]
        except OSError:
            print("Could not open database file. Creating a new one when saving.")
            return False

        pending: list[tuple[CompositeFood, list[tuple[str, float]]]] = []
        for line in lines:
            fields = line.split(";", 3)
            fields += [""] * (4 - len(fields))
            kind, identifier, keywords_text, rest = fields
            keywords = _split_list(keywords_text)
            if kind == "BASIC":
                self._foods[identifier] = BasicFood(identifier, keywords, float(rest))
            elif kind == "COMPOSITE":
                refs = []
                for part in _split_list(rest):
                    component_id, _, servings = part.partition(":")
                    refs.append((component_id, float(servings)))
                food = CompositeFood(identifier, keywords, [])
                self._foods[identifier] = food
                pending.append((food, refs))

        for food, refs in pending:
            for component_id, servings in refs:
                component = self._foods.get(component_id)
                if component is None:
                    raise ValueError(
                        f"food {food.identifier!r} refers to unknown food {component_id!r}"
                    )
                food.components.append(FoodComponent(component, servings))
        return True

    def save(self) -> bool:
        """Write every food to the file; returns False if it cannot be written."""
        text = "".join(food.serialize() + "\n" for food in self.all_foods())
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError:
            print("Could not open database file for writing.")
            return False
        return True