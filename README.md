# dietassist

A console diet assistant. It keeps:

- a **food database** of basic foods (with calories per serving) and composite
  foods built from servings of other foods,
- a **daily log** of the foods eaten on each date,
- a **diet profile** (gender, height, age, and weight and activity level by
  date), from which a target calorie figure is worked out with either the
  Harris-Benedict or the Mifflin-St Jeor equation.

Whenever the log changes (an entry is added or removed, or another date is
selected), a daily summary shows the target calories, the calories consumed and
the difference. Every change made through the menus can be undone, one step at a
time.

## Installing

```
pip install .
```

## Running

```
dietassist
dietassist --data-dir path/to/data
```

The program loads `foods.txt`, `dailylog.txt` and `profile.txt` from the data
directory (the current directory by default). Any file that is missing is
reported and written on the next save. It then shows the main menu:

1. Manage Foods: view, search, add basic foods, create composite foods
2. Log Foods: add or remove entries for the current date
3. Manage Profile: view and edit the profile, change the calculator
4. Select Date: type a date (`YYYY-MM-DD`) or pick one already in the log
5. Undo Last Action
6. Save Data
7. Exit (saves first)

The current date starts as today. Keyword searches take comma-separated
keywords and can match all of them or any of them; a keyword matches a food
when it appears anywhere inside one of the food's keywords. An empty keyword
list matches every food.

A typed date is only checked for its shape (ten characters with `-` in the
fifth and eighth places), not for being a real calendar date. Data is written
only when you choose Save Data or Exit.

## File formats

`foods.txt`, one food per line:

```
BASIC;apple;fruit,red;95
COMPOSITE;fruit salad;fruit,salad;apple:2,banana:1
```

A composite food that names a food not in the file makes loading fail with
`ValueError`.

`dailylog.txt`, one date per line; entries for foods that are not in the
database are dropped when loading:

```
2024-03-01;apple:1,fruit salad:0.5
```

`profile.txt`, three lines: the basic information, weights by date, and
activity levels by date (0 = sedentary … 4 = extremely active):

```
Male;170;30;Harris-Benedict Equation
2023-01-01:70
2023-01-01:2
```

When no weight or activity level is recorded for a date, the latest one
recorded on an earlier date applies, else 70 kg and moderately active.

## Using it as a library

```python
from dietassist.calculator import ActivityLevel, Gender, MifflinStJeorCalculator
from dietassist.food import BasicFood, CompositeFood, FoodComponent

apple = BasicFood("apple", ["fruit", "red"], 95)
banana = BasicFood("banana", ["fruit", "yellow"], 105)
salad = CompositeFood("fruit salad", ["fruit", "salad"],
                      [FoodComponent(apple, 2), FoodComponent(banana, 1)])
print(salad.calories_per_serving())   # 295
print(salad.serialize())              # COMPOSITE;fruit salad;fruit,salad;apple:2,banana:1

calc = MifflinStJeorCalculator()
print(calc.calculate_target_calories(Gender.FEMALE, 60, 165, 28, ActivityLevel.LIGHTLY_ACTIVE))
```

The modules:

- `dietassist.calculator`: `Gender`, `ActivityLevel`, `HarrisBenedictCalculator`,
  `MifflinStJeorCalculator`, `calculator_by_name()`
- `dietassist.food`: `BasicFood`, `CompositeFood`, `FoodComponent`
- `dietassist.database`: `FoodDatabase` (`add_food`, `remove_food`, `get_food`,
  `find_foods`, `all_foods`, `load`, `save`)
- `dietassist.dailylog`: `LogEntry`, `DayLog`, `DailyLog`
- `dietassist.dietprofile`: `DietProfile`
- `dietassist.tracker`: `FoodTracker`, which prints the daily summary
- `dietassist.commands`: undoable commands and `UndoManager`
- `dietassist.app`: `DietManagerApp` and `main()`

## Tests

```
pip install .[test]
pytest
```