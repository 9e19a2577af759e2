"""Tests for container wiring."""

import asyncio

from calorie_counter.adapters.fdc_client import HttpxFdcClient
from calorie_counter.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.nutrition_service is not None
    assert isinstance(container.fdc_client, HttpxFdcClient)
    assert container.fdc_client.timeout_seconds == 10
    assert container.nutrition_service.fetcher.page_size == 25
    asyncio.run(container.close_resources())
