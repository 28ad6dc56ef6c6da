"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn --factory app.main:create_app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status  # The FastAPI framework
from fastapi.middleware.cors import CORSMiddleware  # Cross-Origin Resource Sharing
from fastapi.responses import JSONResponse

from app.core.config import Settings  # Application settings
from app.core.logging import configure_logging
from app.environments.base import APIError, ConfigurationError
from app.environments.google.calendar import GoogleCalendarClient
from app.routers import events  # Calendar JSON views


logger = logging.getLogger("calendar_api.main")


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------
# Fail fast: without an API key every events request would fail upstream,
# so refuse to start instead. Test suites set TESTING=True and replace the
# calendar client with a fake.
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if not settings.TESTING and not settings.resolve_api_key():
        raise ConfigurationError(
            "You must set GOOGLE_CALENDAR_API_KEY or provide it in "
            f"{settings.GOOGLE_CALENDAR_API_KEY_FILE!r}"
        )
    logger.info(f"{settings.APP_NAME} started for calendar {settings.GOOGLE_CALENDAR_ID}")
    yield


# ---------------------------------------------------------------------------
# EXCEPTION HANDLERS
# ---------------------------------------------------------------------------
async def upstream_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Any upstream failure fails the whole request with 502; no partial result."""
    logger.error(f"Upstream calendar failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": "upstream calendar unavailable"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; read from the environment if omitted

    Returns:
        The configured app, with settings and calendar client on app.state
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    # -----------------------------------------------------------------------
    # CREATE FASTAPI APPLICATION
    # -----------------------------------------------------------------------
    # - docs_url: Swagger UI, visit http://localhost:8000/docs
    # - redoc_url: ReDoc, visit http://localhost:8000/redoc
    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.calendar_client = GoogleCalendarClient(settings)

    # -----------------------------------------------------------------------
    # CORS
    # -----------------------------------------------------------------------
    # The API is public and read-only. CORSMiddleware answers preflight
    # requests; the middleware below sets the header on every response,
    # including requests sent without an Origin header.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    app.add_exception_handler(APIError, upstream_error_handler)

    # -----------------------------------------------------------------------
    # REGISTER ROUTERS
    # -----------------------------------------------------------------------
    # events.router: /json, /events/{year}/{month}, /events/{year}/{month}/calendar
    app.include_router(events.router)

    @app.get("/health", tags=["health"])
    def health_check():
        """
        Simple health check endpoint.

        Does NOT contact the calendar upstream.

        Returns:
            {"status": "ok"}
        """
        return {"status": "ok"}

    return app
