"""
Wiring for the plan generator.

``build_plan_generator`` assembles a ``PlanGenerator`` from settings: the
catalog is wrapped so it falls back to the default set, the proxy tier is
enabled when a proxy URL is known, and the direct tier when a provider
key is configured.

Usage:
    from plan_engine.engine import generate_plan
    from plan_engine.domain.models import Preferences

    plan = await generate_plan(Preferences(
        goal="muscle",
        equipment=["bodyweight", "dumbbell"],
        duration_minutes=30,
        difficulty="intermediate",
    ))
"""

import logging
from typing import List, Optional

from supabase import create_client

from plan_engine.application.ports import ExerciseCatalog
from plan_engine.domain.models import PlanItem, Preferences
from plan_engine.infrastructure.catalog import FallbackExerciseCatalog
from plan_engine.infrastructure.db import SupabaseExerciseCatalog
from plan_engine.infrastructure.suggestion_proxy_client import ProxySuggestionClient
from plan_engine.services.llm.client import DirectSuggestionClient
from plan_engine.services.plan_generator import GeneratorConfig, PlanGenerator
from plan_engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_catalog(settings: Settings) -> Optional[ExerciseCatalog]:
    """Supabase catalog if credentials are configured, else None."""
    if not settings.supabase_url or not settings.supabase_key:
        return None
    return SupabaseExerciseCatalog(create_client(settings.supabase_url, settings.supabase_key))


def build_direct_client(settings: Settings) -> Optional[DirectSuggestionClient]:
    if not settings.gemini_api_key:
        return None
    return DirectSuggestionClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.direct_timeout_seconds,
        rest_seconds=settings.rest_seconds,
    )


def build_plan_generator(
    settings: Optional[Settings] = None,
    catalog: Optional[ExerciseCatalog] = None,
) -> PlanGenerator:
    """
    Build a fully wired plan generator.

    Args:
        settings: Settings to use (defaults to get_settings())
        catalog: Catalog override; defaults to Supabase when configured

    Returns:
        PlanGenerator whose catalog never fails
    """
    settings = settings or get_settings()
    primary = catalog if catalog is not None else build_catalog(settings)
    if primary is None:
        logger.info("No exercise catalog configured, using the default exercise set")

    proxy_client = None
    if settings.suggestion_proxy_url:
        proxy_client = ProxySuggestionClient(
            url=settings.suggestion_proxy_url,
            api_key=settings.supabase_anon_key,
            timeout=settings.proxy_timeout_seconds,
        )

    return PlanGenerator(
        catalog=FallbackExerciseCatalog(primary, timeout=settings.catalog_timeout_seconds),
        config=GeneratorConfig.from_settings(settings),
        proxy_client=proxy_client,
        direct_client=build_direct_client(settings),
    )


async def generate_plan(
    preferences: Preferences,
    settings: Optional[Settings] = None,
) -> List[PlanItem]:
    """Generate a plan with a generator built from ``settings``."""
    return await build_plan_generator(settings).generate_plan(preferences)
