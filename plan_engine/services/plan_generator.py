"""
Plan generator: the fallback coordinator.

Runs a bounded state machine over three tiers so that a plan is always
produced for a non-empty eligible set:

1. TRY_EDGE - AI ordering through the trusted proxy
2. TRY_DIRECT - AI ordering straight from the provider (needs a client credential)
3. LOCAL_FALLBACK - unbiased shuffle plus greedy packing

Every suggestion failure is absorbed and advances the machine. Only
``CatalogUnavailable`` and ``NoEligibleExercises`` reach the caller.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from plan_engine.application.exceptions import (
    CatalogUnavailable,
    NoEligibleExercises,
    SuggestionError,
    SuggestionInsufficient,
    SuggestionTransportError,
)
from plan_engine.application.ports import ExerciseCatalog, SuggestionClient
from plan_engine.core.constants import (
    DEFAULT_REST_SECONDS,
    MIN_SUGGESTED_EXERCISES,
    SUGGESTION_OVERSHOOT_SECONDS,
)
from plan_engine.domain.models import (
    Exercise,
    GenerationResult,
    GenerationTier,
    PlanItem,
    Preferences,
    count_exercises,
)
from plan_engine.services.candidate_selector import shuffle
from plan_engine.services.eligibility_filter import filter_bodyweight, filter_eligible
from plan_engine.services.llm.adapter import SuggestionAdapter
from plan_engine.services.plan_packer import pack_plan, pack_suggested_plan

logger = logging.getLogger(__name__)

# Cap on the exponential backoff between attempts within one tier
MAX_TIER_RETRY_WAIT_SECONDS = 10.0


class GenerationState(str, Enum):
    TRY_EDGE = "try_edge"
    TRY_DIRECT = "try_direct"
    LOCAL_FALLBACK = "local_fallback"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunables for plan generation, fixed at construction."""

    rest_seconds: int = DEFAULT_REST_SECONDS
    min_suggested_exercises: int = MIN_SUGGESTED_EXERCISES
    suggestion_overshoot_seconds: int = SUGGESTION_OVERSHOOT_SECONDS
    proxy_timeout_seconds: float = 10.0
    direct_timeout_seconds: float = 10.0
    tier_max_attempts: int = 1
    tier_retry_wait_seconds: float = 1.0

    @classmethod
    def from_settings(cls, settings) -> "GeneratorConfig":
        return cls(
            rest_seconds=settings.rest_seconds,
            min_suggested_exercises=settings.min_suggested_exercises,
            suggestion_overshoot_seconds=settings.suggestion_overshoot_seconds,
            proxy_timeout_seconds=settings.proxy_timeout_seconds,
            direct_timeout_seconds=settings.direct_timeout_seconds,
            tier_max_attempts=settings.tier_max_attempts,
            tier_retry_wait_seconds=settings.tier_retry_wait_seconds,
        )


class PlanGenerator:
    """
    Produces workout plans from a catalog and a preference record.

    The AI transports are optional; without them the generator goes
    straight to local packing.
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        config: Optional[GeneratorConfig] = None,
        proxy_client: Optional[SuggestionClient] = None,
        direct_client: Optional[SuggestionClient] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the plan generator.

        Args:
            catalog: Source of exercises
            config: Generation tunables (defaults if omitted)
            proxy_client: Transport for the proxy tier, or None to skip it
            direct_client: Transport for the direct tier, or None to skip it
            rng: Random source for the local shuffle
        """
        self._catalog = catalog
        self._config = config or GeneratorConfig()
        self._rng = rng

        self._proxy: Optional[SuggestionAdapter] = None
        if proxy_client is not None:
            self._proxy = SuggestionAdapter(
                proxy_client,
                timeout=self._config.proxy_timeout_seconds,
                min_count=self._config.min_suggested_exercises,
            )

        self._direct: Optional[SuggestionAdapter] = None
        if direct_client is not None:
            self._direct = SuggestionAdapter(
                direct_client,
                timeout=self._config.direct_timeout_seconds,
                min_count=self._config.min_suggested_exercises,
            )

    async def generate_plan(self, preferences: Preferences) -> List[PlanItem]:
        """
        Generate a plan for ``preferences``.

        Returns:
            Plan items with at least one exercise

        Raises:
            CatalogUnavailable: The catalog produced no exercises
            NoEligibleExercises: Nothing survives filtering, even widened
        """
        result = await self.generate(preferences)
        return result.items

    async def generate(self, preferences: Preferences) -> GenerationResult:
        """Like ``generate_plan`` but also reports the tier that produced the plan."""
        try:
            exercises = await self._catalog.get_exercises()
        except CatalogUnavailable:
            raise
        except Exception as e:
            raise CatalogUnavailable(f"Exercise catalog could not be read: {e}") from e

        return await self.generate_from(exercises, preferences)

    async def generate_from(
        self,
        exercises: Sequence[Exercise],
        preferences: Preferences,
    ) -> GenerationResult:
        """
        Run the fallback chain over an already loaded catalog.

        Args:
            exercises: Full catalog
            preferences: User preferences

        Returns:
            GenerationResult with the plan and the producing tier
        """
        if not exercises:
            logger.error("Exercise catalog is empty")
            raise CatalogUnavailable("Exercise catalog is empty")

        try:
            eligible, widened = self._select_eligible(exercises, preferences)
        except NoEligibleExercises:
            logger.error(
                f"Plan generation {GenerationState.FAILED.value}: no eligible exercises for "
                f"equipment={preferences.equipment}, difficulty={preferences.difficulty.value}"
            )
            raise
        target = preferences.target_seconds

        logger.info(
            f"Generating plan: goal={preferences.goal!r}, "
            f"duration={preferences.duration_minutes}m, "
            f"difficulty={preferences.difficulty.value}, eligible={len(eligible)}"
        )

        failed: List[GenerationTier] = []
        items: List[PlanItem] = []
        tier = GenerationTier.LOCAL
        state = GenerationState.TRY_EDGE

        while state != GenerationState.DONE:
            if state == GenerationState.TRY_EDGE:
                plan = await self._try_tier(self._proxy, eligible, preferences, target)
                if plan:
                    items, tier, state = plan, GenerationTier.PROXY, GenerationState.DONE
                else:
                    if self._proxy is not None:
                        failed.append(GenerationTier.PROXY)
                    state = GenerationState.TRY_DIRECT

            elif state == GenerationState.TRY_DIRECT:
                plan = await self._try_tier(self._direct, eligible, preferences, target)
                if plan:
                    items, tier, state = plan, GenerationTier.DIRECT, GenerationState.DONE
                else:
                    if self._direct is not None:
                        failed.append(GenerationTier.DIRECT)
                    state = GenerationState.LOCAL_FALLBACK

            elif state == GenerationState.LOCAL_FALLBACK:
                items = self.pack_local(eligible, target)
                tier, state = GenerationTier.LOCAL, GenerationState.DONE

        logger.info(
            f"Plan generated by {tier.value} tier: {count_exercises(items)} exercises, "
            f"{sum(i.duration_seconds for i in items)}s of {target}s"
        )
        return GenerationResult(items=items, tier=tier, widened=widened, failed_tiers=failed)

    def pack_local(self, eligible: Sequence[Exercise], target_seconds: int) -> List[PlanItem]:
        """Shuffle the eligible set and pack it against the budget."""
        return pack_plan(
            shuffle(eligible, self._rng),
            target_seconds,
            self._config.rest_seconds,
        )

    def _select_eligible(
        self,
        exercises: Sequence[Exercise],
        preferences: Preferences,
    ) -> Tuple[List[Exercise], bool]:
        eligible = filter_eligible(exercises, preferences)
        if eligible:
            return eligible, False

        logger.warning(
            "No exercises match the requested equipment and difficulty, "
            "widening to bodyweight exercises"
        )
        eligible = filter_bodyweight(exercises, preferences)
        if eligible:
            return eligible, True

        raise NoEligibleExercises("No exercises available for these preferences")

    async def _try_tier(
        self,
        adapter: Optional[SuggestionAdapter],
        eligible: Sequence[Exercise],
        preferences: Preferences,
        target_seconds: int,
    ) -> Optional[List[PlanItem]]:
        """Run one AI tier; None means the tier failed or is not configured."""
        if adapter is None:
            return None

        logger.info(f"Trying {adapter.name} tier")
        try:
            ordered = await self._suggest_with_retries(adapter, eligible, preferences)
            plan = pack_suggested_plan(
                ordered,
                target_seconds,
                self._config.rest_seconds,
                self._config.suggestion_overshoot_seconds,
            )
            exercise_count = count_exercises(plan)
            if exercise_count < self._config.min_suggested_exercises:
                raise SuggestionInsufficient(
                    f"{adapter.name} plan has {exercise_count} exercises after packing",
                    validated_count=exercise_count,
                )
            return plan
        except SuggestionError as e:
            logger.warning(f"{adapter.name} tier failed ({type(e).__name__}): {e}")
        except Exception as e:
            logger.exception(f"{adapter.name} tier failed unexpectedly: {e}")
        return None

    async def _suggest_with_retries(
        self,
        adapter: SuggestionAdapter,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> List[Exercise]:
        """Call the adapter, retrying transport errors up to ``tier_max_attempts``."""
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(SuggestionTransportError),
            stop=stop_after_attempt(self._config.tier_max_attempts),
            wait=wait_exponential(
                multiplier=self._config.tier_retry_wait_seconds,
                max=MAX_TIER_RETRY_WAIT_SECONDS,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await adapter.suggest(eligible, preferences)
        raise SuggestionTransportError(f"{adapter.name} tier made no attempts")
