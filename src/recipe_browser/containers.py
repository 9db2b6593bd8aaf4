"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_browser.adapters.mealdb_client import HttpxMealDbClient, MealDbClient
from recipe_browser.config import Settings
from recipe_browser.services.catalog import CatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    mealdb_client: MealDbClient
    catalog_service: CatalogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mealdb_client = HttpxMealDbClient.create(
        base_url=resolved_settings.mealdb_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    catalog_service = CatalogService(
        client=mealdb_client,
        dessert_category=resolved_settings.dessert_category,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await mealdb_client.close()

    return AppContainer(
        settings=resolved_settings,
        mealdb_client=mealdb_client,
        catalog_service=catalog_service,
        close_resources=close_resources,
    )
