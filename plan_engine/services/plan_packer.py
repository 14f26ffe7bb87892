"""
Plan packer.

Greedy time-budget packing of an ordered exercise list into exercise and
rest intervals. Plans never begin or end with a rest, and every pair of
consecutive exercises is separated by exactly one rest.
"""

from typing import Iterable, List, Sequence

from plan_engine.core.constants import MAX_PACKING_CYCLES, SUGGESTION_OVERSHOOT_SECONDS
from plan_engine.domain.models import Exercise, PlanItem


def _cycle(exercises: Sequence[Exercise], cycles: int) -> Iterable[Exercise]:
    for _ in range(cycles):
        yield from exercises


def pack_plan(
    ordered: Sequence[Exercise],
    target_seconds: int,
    rest_seconds: int,
    max_cycles: int = MAX_PACKING_CYCLES,
) -> List[PlanItem]:
    """
    Pack exercises until the time budget is met.

    Cycles back to the start of ``ordered`` when it runs out, at most
    ``max_cycles`` full passes; an under-filled plan is accepted after that.

    Args:
        ordered: Exercises in the order they should be used
        target_seconds: Time budget
        rest_seconds: Rest inserted between exercises
        max_cycles: Upper bound on passes over ``ordered``

    Returns:
        Plan items; empty if ``ordered`` is empty
    """
    plan: List[PlanItem] = []
    elapsed = 0

    for exercise in _cycle(ordered, max_cycles):
        plan.append(PlanItem.for_exercise(exercise))
        elapsed += exercise.duration_seconds

        if elapsed >= target_seconds:
            break
        if elapsed + rest_seconds >= target_seconds:
            # A rest here would be the last item
            break

        plan.append(PlanItem.rest(rest_seconds))
        elapsed += rest_seconds

    if plan and not plan[-1].is_exercise:
        # Only reachable when the cycle bound ran out right after a rest
        plan.pop()
    return plan


def pack_suggested_plan(
    ordered: Sequence[Exercise],
    target_seconds: int,
    rest_seconds: int,
    overshoot_seconds: int = SUGGESTION_OVERSHOOT_SECONDS,
) -> List[PlanItem]:
    """
    Pack an AI-ordered exercise list in a single pass.

    The AI's order is kept and nothing is repeated. An exercise that would
    push the total past ``target_seconds + overshoot_seconds`` ends the plan.

    Args:
        ordered: Validated exercises in suggested order
        target_seconds: Time budget
        rest_seconds: Rest inserted between exercises
        overshoot_seconds: Allowed overrun past the target

    Returns:
        Plan items; may hold fewer exercises than suggested
    """
    plan: List[PlanItem] = []
    elapsed = 0
    limit = target_seconds + overshoot_seconds

    for exercise in ordered:
        gap = rest_seconds if plan else 0
        if plan and elapsed + rest_seconds >= target_seconds:
            break
        if elapsed + gap + exercise.duration_seconds > limit:
            break

        if gap:
            plan.append(PlanItem.rest(gap))
        plan.append(PlanItem.for_exercise(exercise))
        elapsed += gap + exercise.duration_seconds

        if elapsed >= target_seconds:
            break

    return plan
