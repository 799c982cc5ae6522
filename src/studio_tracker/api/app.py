"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studio_tracker.api.reports import router as reports_router
from studio_tracker.api.studio import router as studio_router
from studio_tracker.app_logging import configure_logging
from studio_tracker.containers import AppContainer
from studio_tracker.domain.errors import NotFoundError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.studio_settings_service.ensure_defaults()
        logger.info("Studio tracker ready: store=%s", container.settings.record_store)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(studio_router)
    app.include_router(reports_router)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
