"""
Display variants of a single dataset

The "top", "trending" and "most liked" views are reorderings of the
latest token profiles, not separate data sources. Inputs are never
mutated; each helper returns a new list.
"""
import math
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

TRENDING_RATIO = 0.7


def shuffle_items(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a random permutation of items, leaving items untouched"""
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled


def trending_items(
    items: Sequence[T],
    ratio: float = TRENDING_RATIO,
    rng: Optional[random.Random] = None,
) -> List[T]:
    """
    Shuffle items and keep the first ceil(len * ratio) of them

    Args:
        items: Source dataset
        ratio: Share of the dataset to keep, in (0, 1]
        rng: Random source, module level random by default
    """
    if not 0 < ratio <= 1:
        raise ValueError(f"ratio must be in (0, 1], got {ratio}")
    shuffled = shuffle_items(items, rng)
    return shuffled[:math.ceil(len(shuffled) * ratio)]


def most_liked_items(items: Sequence[T]) -> List[T]:
    return list(reversed(items))
