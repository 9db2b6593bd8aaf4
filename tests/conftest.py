"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from recipe_browser.adapters.mealdb_client import MealDbClient
from recipe_browser.config import Settings
from recipe_browser.containers import AppContainer
from recipe_browser.services.catalog import CatalogService


def detail_record(**overrides: object) -> dict[str, object]:
    """Build a lookup record with every numbered field null."""
    record: dict[str, object] = {
        "idMeal": "52768",
        "strMeal": "Apple Frangipan Tart",
        "strInstructions": "Preheat the oven.\r\nBake for 20 minutes.",
        "strYoutube": "https://www.youtube.com/watch?v=rp8Slv4INLk",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wxywrq1468235067.jpg",
        "strSource": None,
    }
    for index in range(1, 21):
        record[f"strIngredient{index}"] = None
        record[f"strMeasure{index}"] = None
    record.update(overrides)
    return record


@dataclass
class FakeMealDbClient(MealDbClient):
    """Fake TheMealDB client with in-memory responses."""

    list_payload: dict[str, object] = field(
        default_factory=lambda: {
            "meals": [
                {
                    "idMeal": "52893",
                    "strMeal": "Apple & Blackberry Crumble",
                    "strMealThumb": "https://www.themealdb.com/images/media/meals/xvsurr1511719182.jpg",
                },
                {
                    "idMeal": "52768",
                    "strMeal": "Apple Frangipan Tart",
                    "strMealThumb": "https://www.themealdb.com/images/media/meals/wxywrq1468235067.jpg",
                },
                {
                    "idMeal": "52855",
                    "strMeal": "Banana Pancakes",
                    "strMealThumb": "https://www.themealdb.com/images/media/meals/sywswr1511383814.jpg",
                },
            ]
        }
    )
    detail_payload: dict[str, object] = field(
        default_factory=lambda: {
            "meals": [
                detail_record(
                    strIngredient1="digestive biscuits",
                    strMeasure1="175g/6oz",
                    strIngredient2="butter",
                    strMeasure2="75g/3oz",
                    strIngredient3="Bramley apples",
                    strMeasure3="200g/7oz",
                )
            ]
        }
    )
    categories: list[str] = field(default_factory=list)
    lookups: list[str] = field(default_factory=list)

    async def filter_by_category(self, category: str) -> dict[str, object]:
        self.categories.append(category)
        return self.list_payload

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        self.lookups.append(meal_id)
        return self.detail_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(mealdb_base_url="https://mealdb.test/api/json/v1/1")


@pytest.fixture
def mealdb_client() -> FakeMealDbClient:
    return FakeMealDbClient()


@pytest.fixture
def container(settings: Settings, mealdb_client: FakeMealDbClient) -> AppContainer:
    catalog_service = CatalogService(client=mealdb_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        mealdb_client=mealdb_client,
        catalog_service=catalog_service,
        close_resources=close_resources,
    )
