"""
Category Sessions - Flag-Filtered Study Modes

Labs (idioms, phrasal verbs, pronunciation, ...) study one category of items.
The pool is the owner's flagged items; selection follows the normal
due-first / new-fallback policy.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from srs.items import Category, LearningItem
from srs.session_builders.pool_types import SessionFilters
from srs.session_builders.review_builder import assemble_session
from srs.store.base import ItemStore


def category_pool(store: ItemStore, owner_id: str, category: Category) -> list[LearningItem]:
    """All of the owner's items carrying the category flag."""
    return store.get_items_by_flag(owner_id, category.value)


def create_category_session(
    store: ItemStore,
    owner_id: str,
    category: Category,
    limit: Optional[int] = None,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[LearningItem]:
    return assemble_session(
        store,
        owner_id,
        limit=limit,
        filters=SessionFilters(category=category),
        now=now,
        rng=rng
    )


def lab_queue(items: Iterable[LearningItem]) -> list[LearningItem]:
    """
    Order a lab's item list by due date, most overdue first.
    """
    return sorted(items, key=lambda item: item.next_review_at)
