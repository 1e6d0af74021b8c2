"""
Builds the workout generator FastAPI app.

`create_app(settings)` wires Sentry, CORS and the health, generation and
exercise-catalog routers. The settings it was built with are kept on
`app.state.settings`. Tests pass their own Settings; uvicorn imports the
module-level `app`, which reads the environment:

    uvicorn backend.main:app --reload
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app from `settings`, or from the environment when omitted."""
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Workout Generator API",
        description="AI workout generation over a synced exercise catalog",
        version="1.0.0",
    )
    app.state.settings = settings

    _configure_cors(app)
    _include_routers(app)

    if not settings.generation_configured:
        logger.warning("OPENAI_API_KEY not set; AI endpoints will report NOT_CONFIGURED")

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for workout-generator")


def _configure_cors(app: FastAPI) -> None:
    """Allow the web app origins to call the API from the browser."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:3001", "*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Mount routers; /health sits at the root."""
    from api.routers import (
        health_router,
        generation_router,
        exercises_router,
    )

    app.include_router(health_router)
    app.include_router(generation_router)
    app.include_router(exercises_router)


app = create_app()
