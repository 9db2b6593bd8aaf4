"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from recipe_browser.api.schemas import MealDetailOut, MealListOut, MealSummaryOut
from recipe_browser.app_logging import configure_logging
from recipe_browser.containers import AppContainer
from recipe_browser.domain.errors import FetchError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/desserts")
    async def list_desserts(request: Request) -> MealListOut:
        """Return dessert summaries sorted by name."""
        state_container: AppContainer = request.app.state.container
        try:
            meals = await state_container.catalog_service.list_desserts()
        except FetchError as exc:
            logger.exception("Failed to list desserts")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return MealListOut(meals=[MealSummaryOut.from_domain(meal) for meal in meals])

    @app.get("/meals/{meal_id}")
    async def meal_detail(meal_id: str, request: Request) -> MealDetailOut:
        """Return full details for a meal."""
        state_container: AppContainer = request.app.state.container
        try:
            detail = await state_container.catalog_service.get_meal_detail(meal_id)
        except NotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except FetchError as exc:
            logger.exception("Failed to fetch meal", extra={"meal_id": meal_id})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return MealDetailOut.from_domain(detail)

    return app
