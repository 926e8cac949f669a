import pytest

from dietassist.calculator import (
    ActivityLevel,
    Gender,
    HarrisBenedictCalculator,
    MifflinStJeorCalculator,
    TargetCalorieCalculator,
    calculator_by_name,
)

CALCULATOR_TYPES = [HarrisBenedictCalculator, MifflinStJeorCalculator]
CALCULATOR_NAMES = ["Harris-Benedict Equation", "Mifflin-St Jeor Equation"]


def test_names_match_source():
    assert HarrisBenedictCalculator().name == "Harris-Benedict Equation"
    assert MifflinStJeorCalculator().name == "Mifflin-St Jeor Equation"


def test_base_is_abstract():
    with pytest.raises(TypeError):
        TargetCalorieCalculator()


@pytest.mark.parametrize(
    "value, factor",
    [(0, 1.2), (1, 1.375), (2, 1.55), (3, 1.725), (4, 1.9)],
)
def test_activity_factors(value, factor):
    assert ActivityLevel(value).factor == factor


def test_activity_labels_and_values():
    assert ActivityLevel(1).label == "Lightly Active"
    assert [int(level) for level in ActivityLevel] == [0, 1, 2, 3, 4]


def test_mifflin_worked_example():
    result = MifflinStJeorCalculator().calculate_target_calories(
        Gender.MALE, 70.0, 170.0, 30, ActivityLevel.SEDENTARY
    )
    assert result == pytest.approx(1941.0)


@pytest.mark.parametrize("calc_name", CALCULATOR_NAMES)
def test_target_rises_with_activity(calc_name):
    calc = calculator_by_name(calc_name)
    values = [
        calc.calculate_target_calories(Gender.FEMALE, 60, 165, 40, level)
        for level in ActivityLevel
    ]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("calc_name", CALCULATOR_NAMES)
def test_target_rises_with_weight_and_falls_with_age(calc_name):
    calc = calculator_by_name(calc_name)
    light = calc.calculate_target_calories(Gender.MALE, 60, 175, 30, ActivityLevel.VERY_ACTIVE)
    heavy = calc.calculate_target_calories(Gender.MALE, 90, 175, 30, ActivityLevel.VERY_ACTIVE)
    older = calc.calculate_target_calories(Gender.MALE, 60, 175, 60, ActivityLevel.VERY_ACTIVE)
    assert heavy > light
    assert older < light


@pytest.mark.parametrize("calc_name", CALCULATOR_NAMES)
def test_integer_activity_level_accepted(calc_name):
    calc = calculator_by_name(calc_name)
    as_enum = calc.calculate_target_calories(Gender.MALE, 80, 180, 25, ActivityLevel.VERY_ACTIVE)
    as_int = calc.calculate_target_calories(Gender.MALE, 80, 180, 25, 3)
    assert as_int == pytest.approx(as_enum)


def test_factor_scales_linearly():
    calc = HarrisBenedictCalculator()
    base = calc.calculate_target_calories(Gender.FEMALE, 55, 160, 35, ActivityLevel.SEDENTARY)
    high = calc.calculate_target_calories(Gender.FEMALE, 55, 160, 35, ActivityLevel.EXTREMELY_ACTIVE)
    assert high / base == pytest.approx(1.9 / 1.2)


def test_mifflin_male_female_gap_is_constant():
    calc = MifflinStJeorCalculator()
    gaps = {
        round(
            calc.calculate_target_calories(Gender.MALE, w, 170, 30, ActivityLevel.SEDENTARY)
            - calc.calculate_target_calories(Gender.FEMALE, w, 170, 30, ActivityLevel.SEDENTARY),
            6,
        )
        for w in (50, 70, 90)
    }
    assert len(gaps) == 1


@pytest.mark.parametrize("calc_type", CALCULATOR_TYPES)
def test_calculator_by_name_round_trip(calc_type):
    calc = calc_type()
    made = calculator_by_name(calc.name)
    assert type(made) is type(calc)


def test_calculator_by_name_unknown():
    with pytest.raises(ValueError):
        calculator_by_name("Nonexistent Equation")


def test_gender_values():
    assert Gender("Male") is Gender.MALE
    assert Gender.FEMALE.value == "Female"