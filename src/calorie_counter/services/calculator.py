"""Scale per-100g nutrition to servings."""

from collections.abc import Callable
from dataclasses import fields
from decimal import ROUND_HALF_UP, Decimal

from calorie_counter.domain.nutrition import Macronutrients


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero instead of to the nearest even digit."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calories_per_serving(calories_per_100g: float, serving_grams: float) -> int:
    """Return kcal in one serving of the given weight."""
    return int(round_half_up(calories_per_100g * serving_grams / 100))


def total_calories(per_serving: int, servings: float) -> int:
    """Return kcal across all servings."""
    return int(round_half_up(per_serving * servings))


def scale_macronutrients(
    per_100g: Macronutrients, serving_grams: float
) -> Macronutrients:
    """Scale per-100g macronutrients to one serving, to one decimal."""
    return _map_present(
        per_100g, lambda value: round_half_up(value * serving_grams / 100, 1)
    )


def multiply_macronutrients(
    per_serving: Macronutrients, servings: float
) -> Macronutrients:
    """Multiply per-serving macronutrients by the serving count."""
    return _map_present(per_serving, lambda value: round_half_up(value * servings, 1))


def _map_present(
    macros: Macronutrients, func: Callable[[float], float]
) -> Macronutrients:
    values: dict[str, float | None] = {}
    for field in fields(macros):
        value = getattr(macros, field.name)
        values[field.name] = None if value is None else func(value)
    return Macronutrients(**values)
