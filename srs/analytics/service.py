"""
Service layer to assemble review statistics.
"""

from __future__ import annotations

from typing import Iterable, Optional

from srs.analytics.metrics import (
    active_only,
    compute_category_progress,
    compute_due_count,
    compute_learning_count,
    compute_mastered_count,
    compute_new_count,
    compute_weak_keys,
    items_frame,
)
from srs.analytics.types import CategoryProgress, ReviewStats
from srs.constants import WEAK_WORDS_LIMIT
from srs.items import LearningItem, now_ms
from srs.store.base import ItemStore


def review_stats(
    items: Iterable[LearningItem],
    now: Optional[int] = None,
    weak_limit: int = WEAK_WORDS_LIMIT
) -> ReviewStats:
    """
    Build dashboard counts for a set of items (passive items are ignored).
    """
    if now is None:
        now = now_ms()

    items = list(items)
    by_key = {(item.owner_id, item.id): item for item in items}
    df = active_only(items_frame(items))

    categories = {
        key: CategoryProgress(total=total, learned=learned)
        for key, (total, learned) in compute_category_progress(df).items()
    }

    return ReviewStats(
        total=len(df),
        due=compute_due_count(df, now),
        new=compute_new_count(df),
        learning=compute_learning_count(df),
        mastered=compute_mastered_count(df),
        weak_words=[by_key[key] for key in compute_weak_keys(df, weak_limit)],
        categories=categories,
    )


def build_owner_stats(store: ItemStore, owner_id: str, now: Optional[int] = None) -> ReviewStats:
    return review_stats(store.get_all_items(owner_id), now=now)
