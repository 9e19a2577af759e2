"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from calorie_counter.adapters.fdc_client import FdcClient
from calorie_counter.api.limiter import build_limiter
from calorie_counter.config import Settings
from calorie_counter.containers import AppContainer
from calorie_counter.domain.nutrition import Candidate, FoodMeasure, NutrientSample
from calorie_counter.services.fetcher import FoodFetcher
from calorie_counter.services.nutrition import NutritionService


def fdc_food(  # noqa: PLR0913
    description: str,
    *,
    fdc_id: int = 1,
    data_type: str = "Survey (FNDDS)",
    kcal: float | None = None,
    kj: float | None = None,
    protein: float | None = None,
    fat: float | None = None,
    carbs: float | None = None,
    fiber: float | None = None,
    sugars: float | None = None,
    saturated_fat: float | None = None,
    serving_size: float | None = None,
    serving_size_unit: str | None = None,
    measures: Sequence[tuple[str, float]] = (),
    **extra: object,
) -> dict[str, object]:
    """Build a food record shaped like an FDC search result."""
    nutrients = [
        (1008, kcal, "KCAL"),
        (1062, kj, "kJ"),
        (1003, protein, "G"),
        (1004, fat, "G"),
        (1005, carbs, "G"),
        (1079, fiber, "G"),
        (2000, sugars, "G"),
        (1258, saturated_fat, "G"),
    ]
    food: dict[str, object] = {
        "fdcId": fdc_id,
        "description": description,
        "lowercaseDescription": description.lower(),
        "dataType": data_type,
        "publishedDate": "2020-10-30",
        "foodNutrients": [
            {"nutrientId": nutrient_id, "value": value, "unitName": unit}
            for nutrient_id, value, unit in nutrients
            if value is not None
        ],
        "foodMeasures": [
            {"measureUnitName": name, "gramWeight": grams, "disseminationText": name}
            for name, grams in measures
        ],
    }
    if serving_size is not None:
        food["servingSize"] = serving_size
    if serving_size_unit is not None:
        food["servingSizeUnit"] = serving_size_unit
    food.update(extra)
    return food


def candidate(  # noqa: PLR0913
    description: str,
    *,
    fdc_id: int = 1,
    data_type: str = "Survey (FNDDS)",
    nutrients: Sequence[tuple[int, float]] = (),
    serving_size: float | None = None,
    serving_size_unit: str | None = None,
    measures: Sequence[tuple[str, float]] = (),
) -> Candidate:
    """Build a domain candidate directly."""
    return Candidate(
        fdc_id=fdc_id,
        description=description,
        data_type=data_type,
        nutrients=tuple(
            NutrientSample(nutrient_id=nutrient_id, value=value, unit="")
            for nutrient_id, value in nutrients
        ),
        serving_size=serving_size,
        serving_size_unit=serving_size_unit,
        measures=tuple(
            FoodMeasure(unit_name=name, gram_weight=grams) for name, grams in measures
        ),
    )


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client returning canned foods and recording searches."""

    foods: list[dict[str, object]] = field(default_factory=list)
    payload: dict[str, object] | None = None
    error: Exception | None = None
    searches: list[dict[str, object]] = field(default_factory=list)
    closed: bool = False

    async def search_foods(
        self,
        query: str,
        *,
        data_types: Sequence[str],
        page_size: int = 25,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        self.searches.append(
            {
                "query": query,
                "data_types": list(data_types),
                "page_size": page_size,
                "sort_by": sort_by,
                "sort_order": sort_order,
            }
        )
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            return self.payload
        return {"totalHits": len(self.foods), "foods": self.foods}

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        api_tokens="test-token",
        rate_limit_requests=100,
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def nutrition_service(fdc_client: FakeFdcClient) -> NutritionService:
    return NutritionService(fetcher=FoodFetcher(fdc_client=fdc_client))


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    nutrition_service: NutritionService,
) -> AppContainer:
    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=settings,
        fdc_client=fdc_client,
        nutrition_service=nutrition_service,
        rate_limiter=build_limiter(settings),
        close_resources=close_resources,
    )
