"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for building and reasoning
about session pools without enforcing a single selection policy. Randomness
only enters the core through fisher_yates_shuffle.
"""

from __future__ import annotations

import random
from typing import Hashable, MutableSequence, Optional, Sequence, TypeVar


T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def fisher_yates_shuffle(
    items: MutableSequence[T],
    rng: Optional[random.Random] = None
) -> MutableSequence[T]:
    """
    Uniformly shuffle items in place and return them.

    Walks i from the last index down to 1, swapping with a uniformly chosen
    index in [0, i].
    """
    rand = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rand.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Shuffled copy of items."""
    return list(fisher_yates_shuffle(list(items), rng))


def take(items: Sequence[T], limit: Optional[int]) -> list[T]:
    """First `limit` items (all of them when limit is None)."""
    if limit is None:
        return list(items)
    return list(items[:max(0, limit)])


def fill_in_order(
    pools: dict[K, list[T]],
    order: list[K],
    target_size: int
) -> list[T]:
    """
    Fill a session by walking pools in order until target_size is reached.
    """
    session: list[T] = []
    for name in order:
        for item in pools.get(name, []):
            if len(session) >= target_size:
                return session
            session.append(item)
    return session
