"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class DataTier(StrEnum):
    """FoodData Central data types, best-curated first."""

    FOUNDATION = "Foundation"
    SR_LEGACY = "SR Legacy"
    SURVEY = "Survey (FNDDS)"
    BRANDED = "Branded"


@dataclass(frozen=True)
class NutrientSample:
    """Single nutrient value reported for a food."""

    nutrient_id: int
    value: float
    unit: str


@dataclass(frozen=True)
class FoodMeasure:
    """Household measure with its weight in grams."""

    unit_name: str
    gram_weight: float


@dataclass(frozen=True)
class Candidate:
    """Food record returned by a FoodData Central search."""

    fdc_id: int
    description: str
    data_type: str
    nutrients: tuple[NutrientSample, ...] = ()
    serving_size: float | None = None
    serving_size_unit: str | None = None
    measures: tuple[FoodMeasure, ...] = ()
    brand: str | None = None
    category: str | None = None
    published_date: str | None = None

    @property
    def tier(self) -> DataTier | None:
        """Return the data tier, or None for labels FDC may add later."""
        try:
            return DataTier(self.data_type)
        except ValueError:
            return None


@dataclass(frozen=True)
class MatchResult:
    """Candidate chosen by the match selector and how it was chosen."""

    candidate: Candidate
    tier: str
    score: float | None = None


@dataclass(frozen=True)
class Macronutrients:
    """Macronutrient amounts in grams.

    Optional fields stay None when the source has no positive value for them.
    """

    protein: float
    total_fat: float
    carbohydrates: float
    fiber: float | None = None
    sugars: float | None = None
    saturated_fat: float | None = None


@dataclass(frozen=True)
class NutritionBreakdown:
    """Computed nutrition for a dish and serving count."""

    dish_name: str
    servings: float
    calories_per_100g: float
    macronutrients_per_100g: Macronutrients
    serving_grams: float
    calories_per_serving: int
    total_calories: int
    macronutrients_per_serving: Macronutrients
    total_macronutrients: Macronutrients
    match: MatchResult

    @property
    def food(self) -> Candidate:
        """Return the matched candidate."""
        return self.match.candidate
