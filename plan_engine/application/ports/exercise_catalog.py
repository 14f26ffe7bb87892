"""
Exercise catalog port (interface).

The catalog is read-only reference data owned outside the engine.
"""

from typing import List, Protocol

from plan_engine.domain.models import Exercise


class ExerciseCatalog(Protocol):
    """Read interface over the full exercise catalog."""

    async def get_exercises(self) -> List[Exercise]:
        """
        Get every active exercise.

        Returns:
            List of exercises, possibly empty

        Raises:
            Exception: Any storage or network error; callers at the boundary
                substitute the default set rather than propagate it.
        """
        ...
