"""
Topic Sessions - Relevance Filtering and Smart Pick

Narrows an owner's items to those relevant to a topic (keyword substring
match), then picks a fixed count with a fixed tier priority:
1. Due items
2. New items (not due, not in a streak)
3. Scheduled items (not due, in a streak)

Each tier is shuffled independently, so order within a tier is random but
due and new items always come before comfortable ones.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from srs import config
from srs.items import ItemStatus, LearningItem, item_status, now_ms
from srs.session_builders.pool_types import StatusPools
from srs.session_builders.pool_utils import fill_in_order, shuffled
from srs.store.base import ItemStore

logger = logging.getLogger(__name__)

TIER_ORDER = [ItemStatus.DUE, ItemStatus.NEW, ItemStatus.SCHEDULED]


def _searchable_text(item: LearningItem) -> str:
    content = item.content
    return " ".join([
        content.word,
        content.meaning,
        " ".join(content.tags),
        content.example,
    ]).lower()


def matches_keywords(
    item: LearningItem,
    keywords: Iterable[str],
    topic: Optional[str] = None
) -> bool:
    """
    Case-insensitive substring match against word, meaning, tags and example.

    The raw topic string counts as one more keyword when given.
    """
    terms = [kw.strip().lower() for kw in keywords if kw and kw.strip()]
    if topic and topic.strip():
        terms.append(topic.strip().lower())
    if not terms:
        return False

    text = _searchable_text(item)
    return any(term in text for term in terms)


def filter_by_keywords(
    items: Iterable[LearningItem],
    keywords: Iterable[str],
    topic: Optional[str] = None
) -> list[LearningItem]:
    keywords = list(keywords)
    return [item for item in items if matches_keywords(item, keywords, topic)]


def partition_by_status(items: Iterable[LearningItem], now: Optional[int] = None) -> StatusPools:
    """
    Split items into DUE / NEW / SCHEDULED pools.
    """
    if now is None:
        now = now_ms()

    pools = StatusPools()
    for item in items:
        pools.add(item, item_status(item, now))
    return pools


def smart_pick(
    pool: Iterable[LearningItem],
    count: Optional[int] = None,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[LearningItem]:
    """
    Pick `count` items, preferring due, then new, then scheduled.

    Args:
        pool: Candidate items (already relevance-filtered)
        count: Number of items to pick (default SRS_SMART_PICK_COUNT)
        now: Reference time for the due check
        rng: Random source for the per-tier shuffles

    Returns:
        Up to `count` items, tiers concatenated in priority order
    """
    if count is None:
        count = config.get_smart_pick_count()
    if now is None:
        now = now_ms()

    pools = partition_by_status(pool, now)
    tiers = {status: shuffled(items, rng) for status, items in pools.as_dict().items()}

    logger.debug(
        "Smart pick from %d due, %d new, %d scheduled (count=%d)",
        len(pools.due), len(pools.new), len(pools.scheduled), count
    )
    return fill_in_order(tiers, TIER_ORDER, count)


def create_topic_session(
    store: ItemStore,
    owner_id: str,
    keywords: Iterable[str],
    count: Optional[int] = None,
    topic: Optional[str] = None,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[LearningItem]:
    """
    Full-scan the owner's items, keep the topic-relevant ones, smart pick.
    """
    matches = filter_by_keywords(store.get_all_items(owner_id), keywords, topic)
    return smart_pick(matches, count=count, now=now, rng=rng)
