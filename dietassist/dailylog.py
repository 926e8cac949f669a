"""Food intake log kept per calendar date."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as _date
from pathlib import Path

from .database import FoodDatabase
from .food import Food, format_number
from .observer import Subject


def _split_fields(text: str, sep: str = ",") -> list[str]:
    """Split delimited fields; a trailing separator adds no empty field."""
    if not text:
        return []
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass(eq=False)
class LogEntry:
    """A number of servings of one food eaten on a day."""

    food: Food
    servings: float

    def calories(self) -> float:
        """Calories of all servings in this entry."""
        return self.food.calories_per_serving() * self.servings

    def serialize(self) -> str:
        """Text form used in the log file."""
        return f"{self.food.identifier}:{format_number(self.servings)}"

    def __str__(self) -> str:
        return (
            f"{format_number(self.servings)} serving(s) of {self.food.identifier} "
            f"({format_number(self.calories())} calories)"
        )


@dataclass
class DayLog:
    """Entries logged for a single day, in the order they were added."""

    entries: list[LogEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def add_entry(self, entry: LogEntry) -> None:
        """Append an entry."""
        self.entries.append(entry)

    def remove_entry(self, index: int) -> LogEntry | None:
        """Remove and return the entry at ``index``; out of range does nothing."""
        if 0 <= index < len(self.entries):
            return self.entries.pop(index)
        return None

    def total_calories(self) -> float:
        """Calories of every entry together."""
        return sum((entry.calories() for entry in self.entries), 0.0)

    def __str__(self) -> str:
        lines = ["Daily Food Log:"]
        lines.extend(f"{number}. {entry}" for number, entry in enumerate(self.entries, 1))
        lines.append(f"Total Calories: {format_number(self.total_calories())}")
        return "\n".join(lines) + "\n"


class DailyLog(Subject):
    """Day logs for every date, with one date selected as current."""

    def __init__(
        self,
        path: str | Path = "dailylog.txt",
        database: FoodDatabase | None = None,
        current_date: str | None = None,
    ) -> None:
        super().__init__()
        self.path = Path(path)
        self.database = database if database is not None else FoodDatabase()
        self._logs: dict[str, DayLog] = {}
        self._current_date = current_date or _date.today().isoformat()

    @property
    def current_date(self) -> str:
        """The selected date as YYYY-MM-DD."""
        return self._current_date

    @current_date.setter
    def current_date(self, value: str) -> None:
        self._current_date = value
        self.notify_observers()

    def current_day_log(self) -> DayLog:
        """The log of the current date, created empty if there is none."""
        return self._logs.setdefault(self._current_date, DayLog())

    def date_exists(self, date: str) -> bool:
        """True if the date has a day log."""
        return date in self._logs

    def all_dates(self) -> list[str]:
        """Every date with a day log, sorted."""
        return sorted(self._logs)

    def add_food_to_current_day(self, food: Food, servings: float) -> None:
        """Log servings of a food on the current date."""
        self.current_day_log().add_entry(LogEntry(food, servings))
        self.notify_observers()

    def remove_food_from_current_day(self, index: int) -> LogEntry | None:
        """Remove an entry of the current date by position."""
        removed = self.current_day_log().remove_entry(index)
        self.notify_observers()
        return removed

    def load(self) -> bool:
        """Replace all day logs with those in the file.

        Foods are looked up in the database; entries naming unknown foods are
        dropped. Returns False if the file cannot be opened. Raises ValueError
        for a malformed serving count.
        """
        self._logs.clear()
        try:
            with self.path.open(encoding="utf-8") as fh:
                lines = fh.read().splitlines()
        except OSError:
            print("Could not open log file. Creating a new one when saving.")
            return False

        for line in lines:
            if not line:
                continue
            day, _, entries_text = line.partition(";")
            day_log = DayLog()
            for part in _split_fields(entries_text):
                food_id, _, servings_text = part.partition(":")
                servings = float(servings_text)
                food = self.database.get_food(food_id)
                if food is not None:
                    day_log.add_entry(LogEntry(food, servings))
            self._logs[day] = day_log
        return True

    def save(self) -> bool:
        """Write all day logs to the file; returns False if it cannot be written."""
        text = "".join(
            f"{day};{','.join(entry.serialize() for entry in self._logs[day])}\n"
            for day in self.all_dates()
        )
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError:
            print("Could not open log file for writing.")
            return False
        return True