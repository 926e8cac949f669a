"""Interactive menu-driven diet assistant."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from .calculator import (
    ActivityLevel,
    Gender,
    HarrisBenedictCalculator,
    MifflinStJeorCalculator,
)
from .commands import (
    AddFoodCommand,
    AddFoodToDbCommand,
    ChangeDateCommand,
    Command,
    RemoveFoodCommand,
    SetActivityLevelCommand,
    SetAgeCommand,
    SetCalculatorCommand,
    SetGenderCommand,
    SetHeightCommand,
    SetWeightCommand,
    UndoManager,
)
from .dailylog import DailyLog
from .database import FoodDatabase
from .dietprofile import DietProfile
from .food import BasicFood, CompositeFood, FoodComponent, format_number
from .tracker import FoodTracker

TITLE = "YADA (Yet Another Diet Assistant)"


def parse_keywords(text: str, lowercase: bool = False) -> list[str]:
    """Split comma separated keywords, trimming spaces and tabs and dropping blanks."""
    keywords = []
    for part in text.split(","):
        keyword = part.strip(" \t")
        if lowercase:
            keyword = keyword.lower()
        if keyword:
            keywords.append(keyword)
    return keywords


class DietManagerApp:
    """Text menus over the food database, the daily log and the profile."""

    def __init__(
        self,
        data_dir: str | Path = ".",
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        data_dir = Path(data_dir)
        self._input = input_func
        self.database = FoodDatabase(data_dir / "foods.txt")
        self.log = DailyLog(data_dir / "dailylog.txt", database=self.database)
        self.profile = DietProfile(data_dir / "profile.txt")
        self.undo_manager = UndoManager()
        self.tracker = FoodTracker(self.log, self.profile)
        self.running = True

    # ----- input helpers -------------------------------------------------

    def _ask(self, prompt: str) -> str:
        reader = self._input if self._input is not None else input
        return reader(prompt).rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _ask_float(self, prompt: str) -> float | None:
        try:
            return float(self._ask(prompt).strip())
        except ValueError:
            return None

    def _execute(self, command: Command) -> bool:
        try:
            self.undo_manager.execute_command(command)
        except ValueError as exc:
            print(f"Error: {exc}")
            return False
        return True

    # ----- top level -----------------------------------------------------

    def init(self) -> None:
        """Load every data file and show the summary for the current date."""
        self.database.load()
        self.log.load()
        self.profile.load()
        print(f"Welcome to {TITLE}!")
        self.tracker.display_daily_summary()

    def run(self) -> None:
        """Load the data and serve the main menu until the user exits."""
        self.init()
        actions = {
            1: self._manage_foods,
            2: self._log_foods,
            3: self._manage_profile,
            4: self._select_date,
            5: self._undo,
            6: self.save_data,
            7: self._exit,
        }
        try:
            while self.running:
                self._display_main_menu()
                action = actions.get(self._ask_int("Enter choice: "))
                if action is None:
                    print("Invalid choice. Try again.")
                else:
                    action()
        except EOFError:
            print()
            self.running = False

    def _display_main_menu(self) -> None:
        print(f"\n===== {TITLE} =====")
        print(f"Current Date: {self.log.current_date}")
        print("1. Manage Foods")
        print("2. Log Foods")
        print("3. Manage Profile")
        print("4. Select Date")
        print("5. Undo Last Action")
        print("6. Save Data")
        print("7. Exit")

    def _undo(self) -> None:
        if self.undo_manager.can_undo():
            self.undo_manager.undo()
            print("Last action undone.")
        else:
            print("Nothing to undo.")

    def _exit(self) -> None:
        self.running = False
        self.save_data()
        print("Thank you for using YADA. Goodbye!")

    # ----- foods ---------------------------------------------------------

    def _manage_foods(self) -> None:
        actions = {
            1: self._view_all_foods,
            2: self._search_foods,
            3: self._add_basic_food,
            4: self._create_composite_food,
        }
        while True:
            print("\n===== Manage Foods =====")
            print("1. View All Foods")
            print("2. Search Foods")
            print("3. Add Basic Food")
            print("4. Create Composite Food")
            print("5. Back to Main Menu")
            choice = self._ask_int("Enter choice: ")
            if choice is None:
                print("Invalid input. Please enter a number.")
            elif choice == 5:
                return
            elif choice in actions:
                actions[choice]()
            else:
                print("Invalid choice. Try again.")

    def _view_all_foods(self) -> None:
        print("\n===== All Foods =====")
        foods = self.database.all_foods()
        if not foods:
            print("No foods in database.")
            return
        for number, food in enumerate(foods, 1):
            print(f"{number}. {food}")

    def _search_foods(self) -> None:
        print("\n===== Search Foods =====")
        keywords = parse_keywords(self._ask("Enter keywords (comma separated): "))
        match_all = self._ask_int("Match (1) All keywords or (2) Any keyword? ") == 1
        results = self.database.find_foods(keywords, match_all)
        print("\n===== Search Results =====")
        if not results:
            print("No matching foods found.")
            return
        for number, food in enumerate(results, 1):
            print(f"{number}. {food}")

    def _ask_new_identifier(self) -> str | None:
        identifier = self._ask("Enter food identifier: ")
        if self.database.get_food(identifier) is not None:
            print("A food with this identifier already exists.")
            return None
        return identifier

    def _add_basic_food(self) -> None:
        print("\n===== Add Basic Food =====")
        identifier = self._ask_new_identifier()
        if identifier is None:
            return
        keywords = parse_keywords(self._ask("Enter keywords (comma separated): "))
        calories = self._ask_float("Enter calories per serving: ")
        if calories is None:
            print("Invalid number.")
            return
        food = BasicFood(identifier, keywords, calories)
        if self._execute(AddFoodToDbCommand(self.database, food)):
            print("Basic food added successfully.")
        else:
            print("Failed to add food.")

    def _create_composite_food(self) -> None:
        print("\n===== Create Composite Food =====")
        identifier = self._ask_new_identifier()
        if identifier is None:
            return
        keywords = parse_keywords(self._ask("Enter keywords (comma separated): "))

        components: list[FoodComponent] = []
        while True:
            foods = self.database.all_foods()
            print("\nAvailable Foods:")
            for number, food in enumerate(foods, 1):
                print(f"{number}. {food.identifier}")
            index = self._ask_int("Select food number (0 to finish): ")
            if index == 0:
                break
            if index is None or not 1 <= index <= len(foods):
                print("Invalid food number.")
                continue
            servings = self._ask_float("Enter number of servings: ")
            if servings is None:
                print("Invalid number.")
                continue
            components.append(FoodComponent(foods[index - 1], servings))
            print("Component added.")

        if not components:
            print("Composite food must have at least one component.")
            return
        food = CompositeFood(identifier, keywords, components)
        if self._execute(AddFoodToDbCommand(self.database, food)):
            print("Composite food created successfully.")
        else:
            print("Failed to create composite food.")

    # ----- log -----------------------------------------------------------

    def _log_foods(self) -> None:
        while True:
            print(f"\n===== Log Foods for {self.log.current_date} =====")
            print(self.log.current_day_log(), end="")
            print("\n1. Add Food to Log")
            print("2. Remove Food from Log")
            print("3. Back to Main Menu")
            choice = self._ask_int("Enter choice: ")
            if choice == 1:
                self._add_food_to_log()
            elif choice == 2:
                self._remove_food_from_log()
            elif choice == 3:
                return
            else:
                print("Invalid choice. Try again.")

    def _add_food_to_log(self) -> None:
        print("\n===== Add Food to Log =====")
        print("1. Select from all foods")
        print("2. Search for food")
        choice = self._ask_int("Enter choice: ")
        if choice == 1:
            foods = self.database.all_foods()
        elif choice == 2:
            keywords = parse_keywords(
                self._ask("Enter keywords (comma separated): "), lowercase=True
            )
            match_all = self._ask_int("Match (1) All keywords or (2) Any keyword? ") == 1
            foods = self.database.find_foods(keywords, match_all)
        else:
            print("Invalid choice.")
            return

        if not foods:
            print("No foods available.")
            return
        print("\nAvailable Foods:")
        for number, food in enumerate(foods, 1):
            print(
                f"{number}. {food.identifier} "
                f"({format_number(food.calories_per_serving())} calories per serving)"
            )
        index = self._ask_int("Select food number: ")
        if index is None or not 1 <= index <= len(foods):
            print("Invalid food number.")
            return
        servings = self._ask_float("Enter number of servings: ")
        if servings is None:
            print("Invalid number.")
            return
        self._execute(AddFoodCommand(self.log, foods[index - 1], servings))
        print("Food added to log.")

    def _remove_food_from_log(self) -> None:
        print("\n===== Remove Food from Log =====")
        entries = self.log.current_day_log().entries
        if not entries:
            print("No entries to remove.")
            return
        print("Current Entries:")
        for number, entry in enumerate(entries, 1):
            print(f"{number}. {entry}")
        index = self._ask_int("Select entry number to remove: ")
        if index is None or not 1 <= index <= len(entries):
            print("Invalid entry number.")
            return
        self._execute(RemoveFoodCommand(self.log, index - 1))
        print("Entry removed from log.")

    # ----- profile -------------------------------------------------------

    def _manage_profile(self) -> None:
        actions = {
            1: self._view_profile,
            2: self._edit_basic_info,
            3: self._update_weight,
            4: self._update_activity_level,
            5: self._change_calculator,
        }
        while True:
            print("\n===== Manage Profile =====")
            print("1. View Profile")
            print("2. Edit Basic Information")
            print("3. Update Current Weight")
            print("4. Update Activity Level")
            print("5. Change Target Calorie Calculator")
            print("6. Back to Main Menu")
            choice = self._ask_int("Enter choice: ")
            if choice == 6:
                return
            action = actions.get(choice)
            if action is None:
                print("Invalid choice. Try again.")
            else:
                action()

    def _view_profile(self) -> None:
        date = self.log.current_date
        profile = self.profile
        print("\n===== Profile Information =====")
        print(f"Gender: {profile.gender.value}")
        print(f"Height: {format_number(profile.height)} cm")
        print(f"Age: {profile.age} years")
        print(f"Current Weight: {format_number(profile.weight(date))} kg")
        print(f"Activity Level: {profile.activity_level(date).label}")
        print(f"Target Calorie Calculator: {profile.calculator.name}")
        print(f"Target Calories: {format_number(profile.target_calories(date))} calories")

    def _edit_basic_info(self) -> None:
        print("\n===== Edit Basic Information =====")
        gender_choice = self._ask_int("Select Gender (1: Male, 2: Female): ")
        gender = Gender.FEMALE if gender_choice == 2 else Gender.MALE
        self._execute(SetGenderCommand(self.profile, gender))

        height = self._ask_float("Enter Height (cm): ")
        if height is None:
            print("Invalid number.")
            return
        self._execute(SetHeightCommand(self.profile, height))

        age = self._ask_int("Enter Age: ")
        if age is None:
            print("Invalid number.")
            return
        self._execute(SetAgeCommand(self.profile, age))
        print("Basic information updated.")

    def _update_weight(self) -> None:
        date = self.log.current_date
        print("\n===== Update Weight =====")
        print(f"Current weight for {date}: {format_number(self.profile.weight(date))} kg")
        weight = self._ask_float("Enter new weight (kg): ")
        if weight is None:
            print("Invalid number.")
            return
        self._execute(SetWeightCommand(self.profile, date, weight))
        print("Weight updated.")

    def _update_activity_level(self) -> None:
        print("\n===== Update Activity Level =====")
        for level in ActivityLevel:
            print(f"{level.value + 1}. {level.label}")
        choice = self._ask_int("Select activity level: ")
        if choice is None or not 1 <= choice <= len(ActivityLevel):
            print("Invalid choice.")
            return
        level = ActivityLevel(choice - 1)
        self._execute(SetActivityLevelCommand(self.profile, self.log.current_date, level))
        print("Activity level updated.")

    def _change_calculator(self) -> None:
        print("\n===== Change Target Calorie Calculator =====")
        options = {1: HarrisBenedictCalculator, 2: MifflinStJeorCalculator}
        for number, calculator_type in options.items():
            print(f"{number}. {calculator_type.name}")
        calculator_type = options.get(self._ask_int("Select calculator: "))
        if calculator_type is None:
            print("Invalid choice.")
            return
        self._execute(SetCalculatorCommand(self.profile, calculator_type()))
        print(f"Calculator changed to {calculator_type.name}.")

    # ----- dates and saving ---------------------------------------------

    def _select_date(self) -> None:
        print("\n===== Select Date =====")
        print(f"Current date: {self.log.current_date}")
        print("1. Enter specific date")
        print("2. Select from existing dates")
        choice = self._ask_int("Enter choice: ")
        if choice == 1:
            new_date = self._ask("Enter date (YYYY-MM-DD): ")
            if len(new_date) != 10 or new_date[4] != "-" or new_date[7] != "-":
                print("Invalid date format. Use YYYY-MM-DD.")
                return
        elif choice == 2:
            dates = self.log.all_dates()
            if not dates:
                print("No dates available in log.")
                return
            print("Available Dates:")
            for number, day in enumerate(dates, 1):
                print(f"{number}. {day}")
            index = self._ask_int("Select date number: ")
            if index is None or not 1 <= index <= len(dates):
                print("Invalid date number.")
                return
            new_date = dates[index - 1]
        else:
            print("Invalid choice.")
            return
        self._execute(ChangeDateCommand(self.log, new_date))
        print(f"Date changed to {new_date}.")

    def save_data(self) -> bool:
        """Save the database, the log and the profile; True if all were written."""
        print("\n===== Saving Data =====")
        results = {
            "Food database": self.database.save(),
            "Daily log": self.log.save(),
            "Profile": self.profile.save(),
        }
        if all(results.values()):
            print("All data saved successfully.")
            return True
        print("Some data could not be saved.")
        for name, saved in results.items():
            if not saved:
                print(f"- {name} not saved.")
        return False


def main(argv=None) -> int:
    """Start the interactive assistant."""
    parser = argparse.ArgumentParser(prog="dietassist", description=TITLE)
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding foods.txt, dailylog.txt and profile.txt",
    )
    args = parser.parse_args(argv)
    DietManagerApp(args.data_dir).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())