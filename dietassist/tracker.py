"""Prints a daily calorie summary whenever the food log changes."""

from __future__ import annotations

from .dailylog import DailyLog
from .dietprofile import DietProfile
from .observer import Observer, Subject


class FoodTracker(Observer):
    """Watches a log and a profile and reports intake against the target."""

    def __init__(self, log: DailyLog, profile: DietProfile) -> None:
        self.log = log
        self.profile = profile
        log.add_observer(self)
        profile.add_observer(self)

    def __enter__(self) -> FoodTracker:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def update(self, subject: Subject | None = None) -> None:
        """Show the summary unless the change came from the profile."""
        if subject is not self.profile:
            self.display_daily_summary()

    def daily_summary(self) -> str:
        """Summary text for the log's current date."""
        date = self.log.current_date
        target = self.profile.target_calories(date)
        consumed = self.log.current_day_log().total_calories()
        difference = consumed - target
        if difference < 0:
            verdict = "under target"
        elif difference > 0:
            verdict = "over target"
        else:
            verdict = "exactly on target"
        return (
            f"\n===== Daily Summary for {date} =====\n"
            f"Target Calories: {target:.1f}\n"
            f"Consumed Calories: {consumed:.1f}\n"
            f"Difference: {difference:.1f} ({verdict})\n"
        )

    def display_daily_summary(self) -> None:
        """Print the summary."""
        print(self.daily_summary(), end="")

    def close(self) -> None:
        """Stop watching the log and the profile."""
        self.log.remove_observer(self)
        self.profile.remove_observer(self)