"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from slowapi import Limiter

from calorie_counter.adapters.fdc_client import FdcClient, HttpxFdcClient
from calorie_counter.api.limiter import build_limiter
from calorie_counter.config import Settings
from calorie_counter.services.fetcher import FoodFetcher
from calorie_counter.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fdc_client: FdcClient
    nutrition_service: NutritionService
    rate_limiter: Limiter
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    nutrition_service = NutritionService(
        fetcher=FoodFetcher(
            fdc_client=fdc_client,
            page_size=resolved_settings.fdc_page_size,
        )
    )
    rate_limiter = build_limiter(resolved_settings)

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        fdc_client=fdc_client,
        nutrition_service=nutrition_service,
        rate_limiter=rate_limiter,
        close_resources=close_resources,
    )
