"""
FastAPI application for the combined data service.

This module initializes and configures the FastAPI application that serves
the combined data endpoint.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from combined_data_service import __version__
from combined_data_service.api.endpoints import combined
from combined_data_service.config import get_settings
from combined_data_service.errors import CombinedDataError

APP_NAME = "CombinedDataService"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Creates the HTTP client shared by all requests on startup and closes it
    on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {APP_NAME} v{__version__}")

    app.state.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))
    try:
        yield
    finally:
        logger.info("Shutting down application")
        await app.state.http_client.aclose()


async def combined_data_error_handler(request: Request, exc: CombinedDataError) -> PlainTextResponse:
    """Report a pipeline failure as a plain-text 500 response."""
    logger.error(f"{type(exc).__name__} while serving {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=500)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=APP_NAME,
        version=__version__,
        description="Joins comments, posts and users from upstream endpoints into one feed.",
        debug=settings.debug_mode,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug_mode else None,
        redoc_url="/redoc" if settings.debug_mode else None,
    )

    app.add_exception_handler(CombinedDataError, combined_data_error_handler)
    app.include_router(combined.router, tags=["combined"])

    @app.get("/health", tags=["health"], summary="Health Check")
    async def health_check():
        """Report service status without contacting the upstreams."""
        return {
            "status": "healthy",
            "service": APP_NAME,
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


# Create the application instance
app = create_app()
