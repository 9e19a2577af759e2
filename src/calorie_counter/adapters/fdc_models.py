"""Pydantic models for FoodData Central search payloads."""

from pydantic import BaseModel, ConfigDict, Field


class FdcNutrientRef(BaseModel):
    """Nested nutrient reference used by food detail payloads."""

    id: int | None = None
    unit_name: str | None = Field(default=None, alias="unitName")


class FdcFoodNutrient(BaseModel):
    """Nutrient entry on a food.

    Search results use flat ``nutrientId``/``value`` keys, food detail payloads
    nest the id under ``nutrient`` and report ``amount`` instead.
    """

    nutrient_id: int | None = Field(default=None, alias="nutrientId")
    value: float | None = None
    amount: float | None = None
    unit_name: str | None = Field(default=None, alias="unitName")
    nutrient: FdcNutrientRef | None = None

    def resolved_id(self) -> int | None:
        """Return the nutrient id from either payload shape."""
        if self.nutrient_id is not None:
            return self.nutrient_id
        if self.nutrient is not None:
            return self.nutrient.id
        return None

    def resolved_value(self) -> float | None:
        """Return the nutrient amount from either payload shape."""
        return self.value if self.value is not None else self.amount

    def resolved_unit(self) -> str:
        """Return the nutrient unit, empty when FDC leaves it out."""
        if self.unit_name:
            return self.unit_name
        if self.nutrient is not None and self.nutrient.unit_name:
            return self.nutrient.unit_name
        return ""


class FdcFoodMeasure(BaseModel):
    """Household measure attached to survey and legacy foods."""

    measure_unit_name: str = Field(default="", alias="measureUnitName")
    gram_weight: float | None = Field(default=None, alias="gramWeight")


class FdcFoodCategory(BaseModel):
    """Food category object used by non-branded foods."""

    description: str | None = None


class FdcFood(BaseModel):
    """Food record from a search result."""

    model_config = ConfigDict(extra="ignore")

    fdc_id: int = Field(alias="fdcId")
    description: str = ""
    data_type: str = Field(default="", alias="dataType")
    published_date: str | None = Field(default=None, alias="publishedDate")
    brand_owner: str | None = Field(default=None, alias="brandOwner")
    brand_name: str | None = Field(default=None, alias="brandName")
    food_category: str | FdcFoodCategory | None = Field(
        default=None, alias="foodCategory"
    )
    food_nutrients: list[FdcFoodNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )
    food_measures: list[FdcFoodMeasure] = Field(
        default_factory=list, alias="foodMeasures"
    )
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")

    def category_name(self) -> str | None:
        """Return the category label for either category shape."""
        if isinstance(self.food_category, FdcFoodCategory):
            return self.food_category.description
        return self.food_category


class FdcSearchResponse(BaseModel):
    """Top-level search response."""

    model_config = ConfigDict(extra="ignore")

    total_hits: int | None = Field(default=None, alias="totalHits")
    foods: list[FdcFood]
