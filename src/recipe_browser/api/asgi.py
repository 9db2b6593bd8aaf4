"""ASGI entrypoint for the recipe browser API."""

from recipe_browser.api.app import create_app
from recipe_browser.containers import build_container

app = create_app(build_container())
