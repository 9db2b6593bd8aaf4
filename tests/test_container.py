"""Tests for container wiring."""

import asyncio

from recipe_browser.adapters.mealdb_client import HttpxMealDbClient
from recipe_browser.config import Settings
from recipe_browser.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.catalog_service is not None
    assert isinstance(container.mealdb_client, HttpxMealDbClient)
    assert container.mealdb_client.base_url == settings.mealdb_base_url
    asyncio.run(container.close_resources())


def test_settings_defaults_point_at_public_api(monkeypatch) -> None:
    monkeypatch.delenv("MEALDB_BASE_URL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    settings = Settings(_env_file=None)

    assert settings.mealdb_base_url == "https://themealdb.com/api/json/v1/1"
    assert settings.dessert_category == "Dessert"
    assert settings.debug is False


def test_settings_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("MEALDB_BASE_URL", "http://localhost:9000/api")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "2.5")
    settings = Settings(_env_file=None)

    assert settings.mealdb_base_url == "http://localhost:9000/api"
    assert settings.request_timeout_seconds == 2.5
