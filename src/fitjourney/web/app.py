"""FastAPI application for the fitjourney API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..db.engine import init_db
from ..errors import FitJourneyError, InternalError
from ..logging_setup import configure_logging
from .routers import user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    settings: Settings = app.state.settings
    settings.ensure_data_dir()
    await init_db(settings.db_path)
    yield


async def handle_fitjourney_error(request: Request, exc: FitJourneyError) -> JSONResponse:
    """Convert a domain error into its JSON body."""
    if exc.status_code >= 500:
        logger.error(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        exc = InternalError()
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the full error and return a generic 500."""
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings.from_env()
    settings.require_jwt_secret()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="fitjourney",
        description="Workout logging and calorie dashboard API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FitJourneyError, handle_fitjourney_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(user.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
