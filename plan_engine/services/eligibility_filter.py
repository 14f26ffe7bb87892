"""
Eligibility filter.

Keeps exercises the user can do with their equipment at or below their
difficulty ceiling. The goal is not a filter criterion.
"""

import logging
from typing import Iterable, List, Sequence, Set, Tuple

from plan_engine.domain.models import Difficulty, Exercise, Preferences, TagFacets
from plan_engine.services.tag_classifier import BODYWEIGHT, classify, normalize_equipment

logger = logging.getLogger(__name__)


def equipment_allowed(facets: TagFacets, owned: Set[str]) -> bool:
    """Every piece of equipment the exercise needs must be owned."""
    return facets.equipment <= owned


def difficulty_allowed(facets: TagFacets, ceiling: Difficulty) -> bool:
    """At least one of the exercise's difficulty levels must be under the ceiling."""
    return any(ceiling.admits(level) for level in facets.difficulty)


def owned_equipment(preferences: Preferences) -> Set[str]:
    return {normalize_equipment(item) for item in preferences.equipment}


def classify_all(exercises: Iterable[Exercise]) -> List[Tuple[Exercise, TagFacets]]:
    return [(exercise, classify(exercise)) for exercise in exercises]


def filter_eligible(
    exercises: Sequence[Exercise],
    preferences: Preferences,
) -> List[Exercise]:
    """
    Filter the catalog by equipment and difficulty.

    Args:
        exercises: Full catalog
        preferences: User preferences

    Returns:
        Eligible exercises in catalog order; may be empty
    """
    owned = owned_equipment(preferences)
    eligible = [
        exercise
        for exercise, facets in classify_all(exercises)
        if equipment_allowed(facets, owned)
        and difficulty_allowed(facets, preferences.difficulty)
    ]
    logger.debug(
        f"Eligibility filter kept {len(eligible)}/{len(exercises)} exercises "
        f"(equipment={sorted(owned)}, difficulty={preferences.difficulty.value})"
    )
    return eligible


def filter_bodyweight(
    exercises: Sequence[Exercise],
    preferences: Preferences,
) -> List[Exercise]:
    """
    Widened filter: bodyweight-only exercises, ignoring the user's equipment.

    The difficulty rule still applies.
    """
    bodyweight = {BODYWEIGHT}
    return [
        exercise
        for exercise, facets in classify_all(exercises)
        if equipment_allowed(facets, bodyweight)
        and difficulty_allowed(facets, preferences.difficulty)
    ]
