"""USDA FoodData Central API client."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx

from calorie_counter.domain.errors import (
    UpstreamAuthError,
    UpstreamBadRequest,
    UpstreamTimeout,
    UpstreamUnavailable,
)

MAX_PAGE_SIZE = 200

_logger = logging.getLogger(__name__)


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self,
        query: str,
        *,
        data_types: Sequence[str],
        page_size: int = 25,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 10
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_foods(
        self,
        query: str,
        *,
        data_types: Sequence[str],
        page_size: int = 25,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        """Search foods by query, translating failures into upstream errors."""
        url = f"{self.base_url}/foods/search"
        try:
            response = await self.http_client.post(
                url,
                params={"api_key": self.api_key},
                json={
                    "query": query.strip(),
                    "dataType": list(data_types),
                    "pageSize": min(page_size, MAX_PAGE_SIZE),
                    "sortBy": sort_by,
                    "sortOrder": sort_order,
                },
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as exc:
            _logger.error("FDC search timed out: query=%s", query)
            raise UpstreamTimeout("USDA API request timeout") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            _logger.error(
                "FDC search failed: query=%s status=%s body=%s",
                query,
                status_code,
                exc.response.text[:500],
            )
            if status_code == httpx.codes.BAD_REQUEST:
                raise UpstreamBadRequest("Invalid search query for USDA API") from exc
            if status_code in {httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN}:
                raise UpstreamAuthError("Invalid USDA API key") from exc
            raise UpstreamUnavailable("Failed to search foods from USDA API") from exc
        except httpx.RequestError as exc:
            _logger.error("FDC search transport error: query=%s error=%s", query, exc)
            raise UpstreamUnavailable("Failed to search foods from USDA API") from exc
        except ValueError as exc:
            _logger.error("FDC search returned a non-JSON body: query=%s", query)
            raise UpstreamUnavailable("Invalid response from USDA API") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
