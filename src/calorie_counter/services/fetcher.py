"""Fetch candidate foods from FoodData Central."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from calorie_counter.adapters.fdc_client import FdcClient
from calorie_counter.adapters.fdc_models import FdcFood, FdcSearchResponse
from calorie_counter.domain.errors import UpstreamUnavailable
from calorie_counter.domain.nutrition import (
    Candidate,
    DataTier,
    FoodMeasure,
    NutrientSample,
)

_logger = logging.getLogger(__name__)

SEARCH_DATA_TYPES = tuple(tier.value for tier in DataTier)


@dataclass
class FoodFetcher:
    """Run one FDC search and convert the results into candidates."""

    fdc_client: FdcClient
    page_size: int = 25

    async def fetch(self, query: str) -> list[Candidate]:
        """Return candidates in the order FDC supplied them."""
        payload = await self.fdc_client.search_foods(
            query,
            data_types=SEARCH_DATA_TYPES,
            page_size=self.page_size,
            sort_by="dataType.keyword",
            sort_order="asc",
        )
        try:
            response = FdcSearchResponse.model_validate(payload)
        except ValidationError as exc:
            _logger.error("FDC search payload rejected: query=%s error=%s", query, exc)
            raise UpstreamUnavailable("Invalid response from USDA API") from exc
        candidates = [_to_candidate(food) for food in response.foods]
        _logger.debug(
            "FDC search: query=%s results=%s total_hits=%s",
            query,
            len(candidates),
            response.total_hits,
        )
        return candidates


def _to_candidate(food: FdcFood) -> Candidate:
    """Convert a validated FDC food into a domain candidate."""
    nutrients = []
    for nutrient in food.food_nutrients:
        nutrient_id = nutrient.resolved_id()
        value = nutrient.resolved_value()
        if nutrient_id is None or value is None:
            continue
        nutrients.append(
            NutrientSample(
                nutrient_id=nutrient_id,
                value=value,
                unit=nutrient.resolved_unit(),
            )
        )
    measures = tuple(
        FoodMeasure(
            unit_name=measure.measure_unit_name, gram_weight=measure.gram_weight
        )
        for measure in food.food_measures
        if measure.gram_weight is not None
    )
    return Candidate(
        fdc_id=food.fdc_id,
        description=food.description,
        data_type=food.data_type,
        nutrients=tuple(nutrients),
        serving_size=food.serving_size,
        serving_size_unit=food.serving_size_unit,
        measures=measures,
        brand=food.brand_owner or food.brand_name,
        category=food.category_name(),
        published_date=food.published_date,
    )
