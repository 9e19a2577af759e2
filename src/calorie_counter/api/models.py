"""Pydantic models for the calorie API."""

from pydantic import BaseModel, Field

from calorie_counter.domain.nutrition import Macronutrients, NutritionBreakdown
from calorie_counter.services.nutrition import MAX_SERVINGS, SOURCE_LABEL


class CalorieRequest(BaseModel):
    """Request body for a calorie lookup."""

    dish_name: str = Field(min_length=1)
    servings: float = Field(gt=0, le=MAX_SERVINGS, allow_inf_nan=False)


class MacronutrientsModel(BaseModel):
    """Macronutrient amounts in grams."""

    protein: float
    total_fat: float
    carbohydrates: float
    fiber: float | None = None
    sugars: float | None = None
    saturated_fat: float | None = None

    @classmethod
    def from_domain(cls, macros: Macronutrients) -> "MacronutrientsModel":
        """Build the model from domain macronutrients."""
        return cls(
            protein=macros.protein,
            total_fat=macros.total_fat,
            carbohydrates=macros.carbohydrates,
            fiber=macros.fiber,
            sugars=macros.sugars,
            saturated_fat=macros.saturated_fat,
        )


class IngredientBreakdown(BaseModel):
    """Per-100g nutrition of the matched food."""

    name: str
    calories_per_100g: int | float
    macronutrients_per_100g: MacronutrientsModel
    serving_size: str
    data_type: str
    external_id: int
    brand: str | None = None
    category: str | None = None


class MatchedFood(BaseModel):
    """Identity of the FDC food used for the estimate."""

    name: str
    external_id: int
    data_type: str
    published_date: str | None = None


class CalorieResponse(BaseModel):
    """Calorie and macronutrient estimate for a dish."""

    dish_name: str
    servings: float
    calories_per_serving: int
    total_calories: int
    macronutrients_per_serving: MacronutrientsModel
    total_macronutrients: MacronutrientsModel
    source: str = SOURCE_LABEL
    ingredient_breakdown: list[IngredientBreakdown]
    matched_food: MatchedFood

    @classmethod
    def from_breakdown(cls, breakdown: NutritionBreakdown) -> "CalorieResponse":
        """Assemble the response body for a computed breakdown."""
        food = breakdown.food
        return cls(
            dish_name=breakdown.dish_name,
            servings=breakdown.servings,
            calories_per_serving=breakdown.calories_per_serving,
            total_calories=breakdown.total_calories,
            macronutrients_per_serving=MacronutrientsModel.from_domain(
                breakdown.macronutrients_per_serving
            ),
            total_macronutrients=MacronutrientsModel.from_domain(
                breakdown.total_macronutrients
            ),
            ingredient_breakdown=[
                IngredientBreakdown(
                    name=food.description,
                    calories_per_100g=_compact(breakdown.calories_per_100g),
                    macronutrients_per_100g=MacronutrientsModel.from_domain(
                        breakdown.macronutrients_per_100g
                    ),
                    serving_size=format_grams(breakdown.serving_grams),
                    data_type=food.data_type,
                    external_id=food.fdc_id,
                    brand=food.brand,
                    category=food.category,
                )
            ],
            matched_food=MatchedFood(
                name=food.description,
                external_id=food.fdc_id,
                data_type=food.data_type,
                published_date=food.published_date,
            ),
        )


class ErrorResponse(BaseModel):
    """Error body returned for failed requests."""

    error: str
    message: str
    status_code: int
    details: list[str] | None = None


def format_grams(grams: float) -> str:
    """Render a gram weight, dropping a trailing ``.0``."""
    if float(grams).is_integer():
        return f"{int(grams)}g"
    return f"{round(grams, 2)}g"


def _compact(value: float) -> int | float:
    """Return whole numbers as ints so they serialize without ``.0``."""
    if float(value).is_integer():
        return int(value)
    return value
