"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fitness_tracker.api.account import router as account_router
from fitness_tracker.api.logs import router as logs_router
from fitness_tracker.api.nutrition import router as nutrition_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.errors import FitnessTrackerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting fitness tracker",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Fitness Tracker", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(FitnessTrackerError)
    async def handle_app_error(
        request: Request, exc: FitnessTrackerError
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(account_router)
    app.include_router(nutrition_router)
    app.include_router(workouts_router)
    app.include_router(logs_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
