"""Tests for serving size resolution."""

from calorie_counter.services.servings import resolve_serving_grams
from tests.conftest import candidate


def test_gram_serving_size_used_directly() -> None:
    food = candidate(
        "Granola bar", serving_size=40, serving_size_unit="g", measures=[("bar", 35)]
    )

    assert resolve_serving_grams(food) == 40


def test_grm_unit_counts_as_grams() -> None:
    food = candidate("Crackers", serving_size=30, serving_size_unit="GRM")

    assert resolve_serving_grams(food) == 30


def test_non_gram_unit_uses_matching_measure() -> None:
    food = candidate(
        "Milk, whole",
        serving_size=2,
        serving_size_unit="cup",
        measures=[("tablespoon", 15.2), ("cup", 244)],
    )

    assert resolve_serving_grams(food) == 488


def test_unmatched_unit_uses_first_measure() -> None:
    food = candidate(
        "Juice",
        serving_size=240,
        serving_size_unit="MLT",
        measures=[("fl oz", 31), ("cup", 248)],
    )

    assert resolve_serving_grams(food) == 31


def test_measures_without_serving_size_use_first_measure() -> None:
    food = candidate("Chicken biryani", measures=[("cup", 156), ("plate", 400)])

    assert resolve_serving_grams(food) == 156


def test_unitless_serving_size_uses_first_measure_unscaled() -> None:
    food = candidate("Soup", serving_size=2, measures=[("bowl", 250), ("cup", 240)])

    assert resolve_serving_grams(food) == 250


def test_no_serving_information_defaults_to_100_grams() -> None:
    assert resolve_serving_grams(candidate("Rice")) == 100


def test_zero_serving_size_is_ignored() -> None:
    food = candidate("Rice", serving_size=0, serving_size_unit="g")

    assert resolve_serving_grams(food) == 100
