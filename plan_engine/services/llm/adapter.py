"""
AI suggestion adapter.

Wraps one suggestion transport with a timeout and validates the returned
ids against the eligible set. The AI boundary is untrusted input: unknown
ids are dropped, and too few survivors is a failure.
"""

import asyncio
import logging
from typing import Dict, List, Sequence

from plan_engine.application.exceptions import (
    SuggestionInsufficient,
    SuggestionTransportError,
)
from plan_engine.application.ports import SuggestionClient
from plan_engine.core.constants import MIN_SUGGESTED_EXERCISES
from plan_engine.domain.models import Exercise, Preferences

logger = logging.getLogger(__name__)


def validate_ids(ids: Sequence[str], eligible: Sequence[Exercise]) -> List[Exercise]:
    """
    Resolve suggested ids against the eligible set, keeping the suggested order.

    Unknown ids are dropped.
    """
    by_id: Dict[str, Exercise] = {ex.id: ex for ex in eligible}
    resolved = []
    for exercise_id in ids:
        exercise = by_id.get(exercise_id)
        if exercise is None:
            logger.warning(f"Suggestion referenced unknown exercise id: {exercise_id}")
            continue
        resolved.append(exercise)
    return resolved


class SuggestionAdapter:
    """One AI tier: a transport, its timeout and the validation threshold."""

    def __init__(
        self,
        client: SuggestionClient,
        timeout: float,
        min_count: int = MIN_SUGGESTED_EXERCISES,
    ):
        self._client = client
        self._timeout = timeout
        self._min_count = min_count

    @property
    def name(self) -> str:
        return self._client.name

    async def suggest(
        self,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> List[Exercise]:
        """
        Ask the transport for an ordering and validate it.

        Args:
            eligible: Exercises the AI may choose from
            preferences: The user's preferences

        Returns:
            Validated exercises in suggested order

        Raises:
            SuggestionTransportError: Transport failure or timeout
            SuggestionParseError: No ids could be read from the response
            SuggestionInsufficient: Fewer than ``min_count`` ids survived validation
        """
        try:
            ids = await asyncio.wait_for(
                self._client.request_ids(eligible, preferences),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise SuggestionTransportError(
                f"{self.name} suggestion timed out after {self._timeout}s"
            ) from e

        validated = validate_ids(ids, eligible)
        if len(validated) < self._min_count:
            raise SuggestionInsufficient(
                f"{self.name} suggestion kept {len(validated)} of {len(ids)} ids, "
                f"need {self._min_count}",
                validated_count=len(validated),
            )
        return validated
