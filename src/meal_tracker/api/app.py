"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from meal_tracker.api.foods import router as foods_router
from meal_tracker.api.meals import router as meals_router
from meal_tracker.api.profile import router as profile_router
from meal_tracker.api.water import router as water_router
from meal_tracker.app_logging import configure_logging
from meal_tracker.containers import AppContainer
from meal_tracker.domain.events import ChangeEvent


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    def log_change(event: ChangeEvent) -> None:
        logger.info(
            "Store changed: entity=%s action=%s id=%s",
            event.entity,
            event.action,
            event.record_id,
        )

    container.changes.subscribe(log_change)

    app = FastAPI()
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(water_router)
    app.include_router(profile_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
