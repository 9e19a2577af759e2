"""Tests for nutrient extraction."""

import pytest

from calorie_counter.domain.errors import MissingEnergyDataError
from calorie_counter.services.nutrients import (
    extract_calories_per_100g,
    extract_macronutrients,
)
from tests.conftest import candidate


def test_kcal_preferred_over_kilojoules() -> None:
    food = candidate("Oats", nutrients=[(1062, 1600), (1008, 389)])

    assert extract_calories_per_100g(food) == 389


def test_kilojoules_converted_when_kcal_missing() -> None:
    food = candidate("Oats", nutrients=[(1062, 418.4)])

    calories = extract_calories_per_100g(food)

    assert calories == 100
    assert isinstance(calories, int)


def test_kilojoules_used_when_kcal_is_zero() -> None:
    food = candidate("Oats", nutrients=[(1008, 0), (1062, 1000)])

    assert extract_calories_per_100g(food) == 239


def test_atwater_energy_counts_as_kcal() -> None:
    food = candidate("Beans, kidney", nutrients=[(2047, 333)])

    assert extract_calories_per_100g(food) == 333


def test_missing_energy_names_the_food() -> None:
    food = candidate("Salt, table", nutrients=[(1008, 0), (1062, 0)])

    with pytest.raises(MissingEnergyDataError, match="Salt, table") as exc_info:
        extract_calories_per_100g(food)

    assert exc_info.value.description == "Salt, table"


def test_required_macros_default_to_zero() -> None:
    food = candidate("Sugar", nutrients=[(1008, 387), (1005, 100)])

    macros = extract_macronutrients(food)

    assert macros.protein == 0
    assert macros.total_fat == 0
    assert macros.carbohydrates == 100


def test_optional_macros_only_set_when_positive() -> None:
    food = candidate(
        "Bread, whole wheat",
        nutrients=[(1003, 13), (1004, 3.4), (1005, 43), (1079, 6), (2000, 0)],
    )

    macros = extract_macronutrients(food)

    assert macros.fiber == 6
    assert macros.sugars is None
    assert macros.saturated_fat is None


def test_alternate_sugar_id_used() -> None:
    food = candidate("Apple", nutrients=[(1063, 10.4)])

    assert extract_macronutrients(food).sugars == 10.4
