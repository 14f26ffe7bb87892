"""
FastAPI app for the plan engine.

Serves plan generation (``/plans``) and the server half of the suggestion
proxy (``/generate-workout``) so browser clients never hold the provider key.
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plan_engine import __version__
from plan_engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Headers sent by Supabase JS clients calling the proxy endpoint
PROXY_CLIENT_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app; ``settings`` defaults to the environment."""
    settings = settings or get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Workout Plan Engine",
        description="Timed workout plans with AI-ordered exercises and a local fallback",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=PROXY_CLIENT_HEADERS,
    )
    _include_routers(app)

    return app


def _init_sentry(settings: Settings) -> None:
    """Report errors to Sentry outside tests; trace every request except in production."""
    if not settings.sentry_dsn or settings.is_test:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1 if settings.is_production else 1.0,
    )
    logger.info(f"Sentry initialized ({settings.environment})")


def _include_routers(app: FastAPI) -> None:
    from plan_engine.api.routers import (
        health_router,
        plans_router,
        suggestions_router,
    )

    app.include_router(health_router)
    app.include_router(plans_router)
    app.include_router(suggestions_router)
