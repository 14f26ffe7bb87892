"""
Local candidate selection: an unbiased Fisher-Yates shuffle.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a uniformly random permutation of ``items``.

    The input is not modified.

    Args:
        items: Items to permute
        rng: Random source (defaults to the module-level generator)

    Returns:
        New list with the same items in random order
    """
    randint = rng.randint if rng is not None else random.randint
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
