"""
Review Sessions - Due First, New as Fallback

Creates the ordered batch of items for a study session:
1. Due items (next_review_at <= now), shuffled, truncated to the limit
2. If nothing is due: new items (never successfully reviewed), newest first,
   truncated to the smaller new-item limit
3. If neither exists: an empty session ("nothing to review")

Filters narrow the candidate pool first. A category filter keeps the
due/new fallback; a keyword filter switches to the tiered smart pick.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from srs import config
from srs.items import LearningItem, is_due, is_new, now_ms
from srs.session_builders.pool_types import SessionFilters
from srs.session_builders.pool_utils import shuffled, take
from srs.session_builders.topic_builder import filter_by_keywords, smart_pick
from srs.store.base import ItemStore

logger = logging.getLogger(__name__)


def select_due_or_new(
    pool: Iterable[LearningItem],
    limit: int,
    new_limit: int,
    now: int,
    rng: Optional[random.Random] = None
) -> list[LearningItem]:
    """
    Apply the due-first / new-fallback policy to an in-memory pool.
    """
    pool = list(pool)
    due = [item for item in pool if is_due(item, now)]
    if due:
        return take(shuffled(due, rng), limit)

    new = sorted(
        (item for item in pool if is_new(item)),
        key=lambda item: item.created_at,
        reverse=True
    )
    return take(new, min(limit, new_limit))


def assemble_session(
    store: ItemStore,
    owner_id: str,
    limit: Optional[int] = None,
    filters: Optional[SessionFilters] = None,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None,
    new_limit: Optional[int] = None
) -> list[LearningItem]:
    """
    Build the ordered list of items to review.

    Args:
        store: Item store to query
        owner_id: Owner whose items are reviewed
        limit: Maximum session size (default SRS_SESSION_LIMIT)
        filters: Optional category / topic narrowing
        now: Reference time in ms (defaults to the system clock)
        rng: Random source for shuffling (seed it for exact orderings)
        new_limit: Maximum size of the new-item fallback (default SRS_NEW_LIMIT)

    Returns:
        List of LearningItems; empty when there is nothing to review
    """
    if limit is None:
        limit = config.get_session_limit()
    if new_limit is None:
        new_limit = config.get_new_limit()
    if now is None:
        now = now_ms()

    if limit <= 0:
        return []

    filters = filters or SessionFilters()

    if filters.category is None and not filters.is_topic:
        return _assemble_from_store(store, owner_id, limit, new_limit, now, rng)

    if filters.category is not None:
        pool = store.get_items_by_flag(owner_id, filters.category.value)
    else:
        pool = store.get_all_items(owner_id)

    if filters.is_topic:
        pool = filter_by_keywords(pool, filters.keywords, filters.topic)
        logger.debug("Topic pool for %s: %d items", owner_id, len(pool))
        return smart_pick(pool, count=limit, now=now, rng=rng)

    logger.debug("Category pool %s for %s: %d items", filters.category.value, owner_id, len(pool))
    return select_due_or_new(pool, limit, new_limit, now, rng)


def _assemble_from_store(
    store: ItemStore,
    owner_id: str,
    limit: int,
    new_limit: int,
    now: int,
    rng: Optional[random.Random]
) -> list[LearningItem]:
    due = store.get_due_items(owner_id, now)
    if due:
        logger.debug("Session for %s: %d due items", owner_id, len(due))
        return take(shuffled(due, rng), limit)

    new = store.get_new_items(owner_id, limit=min(limit, new_limit))
    logger.debug("Session for %s: nothing due, %d new items", owner_id, len(new))
    return take(new, min(limit, new_limit))
