"""
Shared pytest fixtures.
"""

import random

import pytest

from srs.constants import ONE_DAY_MS
from srs.items import LearningItem, WordContent
from srs.store import InMemoryItemStore

NOW = 1_700_000_000_000


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_item():
    """
    Factory for items with explicit scheduling state.

    Defaults describe a brand-new item created a day before NOW.
    """
    counter = {"n": 0}

    def _make(
        owner_id="u1",
        word=None,
        next_review_at=NOW - ONE_DAY_MS,
        interval_days=0,
        ease_factor=2.5,
        consecutive_correct=0,
        forgot_count=0,
        created_at=None,
        last_review_at=None,
        **content
    ):
        counter["n"] += 1
        n = counter["n"]
        return LearningItem(
            id=f"item-{n}",
            owner_id=owner_id,
            content=WordContent(word=word or f"word{n}", **content),
            next_review_at=next_review_at,
            interval_days=interval_days,
            ease_factor=ease_factor,
            consecutive_correct=consecutive_correct,
            forgot_count=forgot_count,
            created_at=created_at if created_at is not None else NOW - ONE_DAY_MS + n,
            updated_at=created_at if created_at is not None else NOW - ONE_DAY_MS + n,
            last_review_at=last_review_at,
        )

    return _make


@pytest.fixture
def store():
    return InMemoryItemStore()
