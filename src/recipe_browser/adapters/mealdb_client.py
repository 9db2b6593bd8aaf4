"""TheMealDB API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from recipe_browser.domain.errors import MalformedPayloadError


class MealDbClient(Protocol):
    """Interface for TheMealDB API interactions."""

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category and return raw API data."""

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Look up a meal by id and return raw API data."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxMealDbClient":
        """Create a TheMealDB client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category."""
        return await self._get("filter.php", {"c": category})

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Look up full meal details by id."""
        return await self._get("lookup.php", {"i": meal_id})

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, object]:
        url = f"{self.base_url.rstrip('/')}/{path}"
        response = await self.http_client.get(
            url,
            params=params,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedPayloadError(f"{path} returned a non-JSON body") from exc
        if not isinstance(payload, dict):
            raise MalformedPayloadError(f"{path} returned a non-object body")
        return payload
