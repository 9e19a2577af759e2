"""Calorie calculation pipeline backed by USDA FDC."""

import logging
import math
from dataclasses import dataclass

from calorie_counter.domain.errors import (
    InvalidServingsError,
    MissingEnergyDataError,
    NoCandidatesError,
)
from calorie_counter.domain.nutrition import NutritionBreakdown
from calorie_counter.services.calculator import (
    calories_per_serving,
    multiply_macronutrients,
    scale_macronutrients,
    total_calories,
)
from calorie_counter.services.fetcher import FoodFetcher
from calorie_counter.services.matching import select_best_match
from calorie_counter.services.nutrients import (
    extract_calories_per_100g,
    extract_macronutrients,
)
from calorie_counter.services.query import normalize_query
from calorie_counter.services.servings import resolve_serving_grams

SOURCE_LABEL = "USDA FoodData Central"
MAX_SERVINGS = 10_000

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Estimate calories and macros for a dish from one FDC search."""

    fetcher: FoodFetcher

    async def calculate(self, dish_name: str, servings: float) -> NutritionBreakdown:
        """Match the dish against FDC and scale its nutrition to the servings."""
        query = normalize_query(dish_name)
        if not math.isfinite(servings) or not 0 < servings <= MAX_SERVINGS:
            raise InvalidServingsError(servings, MAX_SERVINGS)

        candidates = await self.fetcher.fetch(query.normalized)
        if not candidates:
            raise NoCandidatesError(query.original)

        match = select_best_match(candidates, query)
        food = match.candidate
        _logger.debug(
            "FDC match: query=%s matched=%s fdc_id=%s data_type=%s tier=%s",
            query.original,
            food.description,
            food.fdc_id,
            food.data_type,
            match.tier,
        )

        try:
            calories_100g = extract_calories_per_100g(food)
        except MissingEnergyDataError as exc:
            raise MissingEnergyDataError(food.description, query.original) from exc
        macros_100g = extract_macronutrients(food)
        serving_grams = resolve_serving_grams(food)

        per_serving = calories_per_serving(calories_100g, serving_grams)
        macros_per_serving = scale_macronutrients(macros_100g, serving_grams)
        return NutritionBreakdown(
            dish_name=query.original,
            servings=servings,
            calories_per_100g=calories_100g,
            macronutrients_per_100g=macros_100g,
            serving_grams=serving_grams,
            calories_per_serving=per_serving,
            total_calories=total_calories(per_serving, servings),
            macronutrients_per_serving=macros_per_serving,
            total_macronutrients=multiply_macronutrients(macros_per_serving, servings),
            match=match,
        )
