"""Catalog service backed by TheMealDB."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from recipe_browser.adapters.mealdb_client import MealDbClient
from recipe_browser.domain.errors import (
    DecodeError,
    EmptyResponseError,
    FetchDecodeError,
    NetworkError,
    NotFoundError,
)
from recipe_browser.domain.meals import MealDetail, MealSummary
from recipe_browser.services.decoding import decode_detail, decode_summary_list

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class CatalogService:
    """Fetches meal listings and details; every call hits the API."""

    client: MealDbClient
    dessert_category: str = "Dessert"
    debug: bool = False

    async def list_desserts(self) -> list[MealSummary]:
        """Return dessert summaries sorted by name."""
        payload = await self._fetch(
            lambda: self.client.filter_by_category(self.dessert_category),
            action="list_desserts",
        )
        try:
            meals = decode_summary_list(payload)
        except DecodeError as exc:
            _logger.warning("Catalog list_desserts decode failed: %s", exc)
            raise FetchDecodeError(exc) from exc
        meals.sort(key=lambda meal: meal.name)
        if self.debug:
            _logger.info("Catalog list_desserts: results=%s", len(meals))
        return meals

    async def get_meal_detail(self, meal_id: str) -> MealDetail:
        """Return full details for a single meal."""
        if not meal_id:
            raise ValueError("meal_id must be non-empty")
        payload = await self._fetch(
            lambda: self.client.lookup_meal(meal_id),
            action=f"get_meal_detail:{meal_id}",
        )
        try:
            detail = decode_detail(payload)
        except EmptyResponseError as exc:
            _logger.warning("Catalog meal not found: meal_id=%s", meal_id)
            raise NotFoundError(meal_id, exc) from exc
        except DecodeError as exc:
            _logger.warning("Catalog meal %s decode failed: %s", meal_id, exc)
            raise FetchDecodeError(exc) from exc
        if self.debug:
            _logger.info(
                "Catalog get_meal_detail: meal_id=%s ingredients=%s",
                meal_id,
                len(detail.ingredients),
            )
        return detail

    async def _fetch(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Run a client call, translating transport and body failures."""
        try:
            return await func()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            _logger.warning(
                "Catalog %s failed (status=%s): %s",
                action,
                _status_code_from_exception(exc),
                exc,
            )
            raise NetworkError(exc) from exc
        except DecodeError as exc:
            _logger.warning("Catalog %s returned an unreadable body: %s", action, exc)
            raise FetchDecodeError(exc) from exc


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
