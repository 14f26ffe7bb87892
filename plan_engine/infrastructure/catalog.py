"""
Catalog boundary.

The engine requires a non-empty catalog. ``load_catalog`` reads the
configured catalog and substitutes the curated default set when the read
fails, times out or returns nothing.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from plan_engine.application.ports import ExerciseCatalog
from plan_engine.domain.models import Exercise
from plan_engine.infrastructure.default_exercises import DEFAULT_EXERCISES

logger = logging.getLogger(__name__)


async def load_catalog(
    catalog: Optional[ExerciseCatalog],
    timeout: float,
    defaults: Sequence[Exercise] = DEFAULT_EXERCISES,
) -> List[Exercise]:
    """
    Read the catalog, falling back to ``defaults``.

    Args:
        catalog: Catalog to read; None goes straight to the defaults
        timeout: Seconds to wait for the catalog
        defaults: Substitute set

    Returns:
        A non-empty exercise list when ``defaults`` is non-empty
    """
    if catalog is None:
        return list(defaults)

    try:
        exercises = await asyncio.wait_for(catalog.get_exercises(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Exercise catalog timed out after {timeout}s, using default set")
        return list(defaults)
    except Exception as e:
        logger.warning(f"Exercise catalog unavailable ({e}), using default set")
        return list(defaults)

    if not exercises:
        logger.warning("Exercise catalog is empty, using default set")
        return list(defaults)
    return exercises


class FallbackExerciseCatalog:
    """
    Catalog that never fails and never returns an empty list.

    Wraps the real catalog with ``load_catalog`` so the plan generator only
    ever sees a usable exercise list.
    """

    def __init__(
        self,
        primary: Optional[ExerciseCatalog],
        timeout: float,
        defaults: Sequence[Exercise] = DEFAULT_EXERCISES,
    ):
        self._primary = primary
        self._timeout = timeout
        self._defaults = list(defaults)

    async def get_exercises(self) -> List[Exercise]:
        return await load_catalog(self._primary, self._timeout, self._defaults)
