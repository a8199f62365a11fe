"""
SRS - Spaced Repetition Scheduling for vocabulary learning

Main API for the vocabulary review core.

This package implements:
- A three-grade scheduler (FORGOT / HARD / EASY) with ease-factor growth
- Session assembly: due items first, new items as fallback
- Category and topic-relevance study modes with tiered smart pick
- An abstract item store with in-memory and SQL backends

Quick start:
    from srs import create_item, schedule, assemble_session, Grade, WordContent
    from srs.store import InMemoryItemStore

    store = InMemoryItemStore()
    store.upsert(create_item(WordContent(word="serendipity"), owner_id="u1"))

    for item in assemble_session(store, "u1"):
        store.upsert(schedule(item, Grade.EASY))
"""

# Data model
from srs.constants import Grade
from srs.items import (
    Category,
    ItemStatus,
    LearningItem,
    WordContent,
    create_item,
    is_due,
    item_status,
    now_ms,
    remaining_time,
    reset_progress,
)

# Core scheduler API (algorithm logic)
from srs.scheduler import schedule

# Session assembly
from srs.session_builders import (
    SessionFilters,
    assemble_session,
    create_category_session,
    create_topic_session,
    smart_pick,
)

# Store contract
from srs.store import ItemStore, merge_items

# Boundary validation and stats
from srs.schemas import ItemRecord, ReviewRequest, parse_grade
from srs.analytics import ReviewStats, review_stats


__all__ = [
    # Data model
    "Grade",
    "Category",
    "ItemStatus",
    "LearningItem",
    "WordContent",
    "create_item",
    "reset_progress",
    "is_due",
    "item_status",
    "now_ms",
    "remaining_time",

    # Core algorithm
    "schedule",

    # Sessions
    "SessionFilters",
    "assemble_session",
    "create_category_session",
    "create_topic_session",
    "smart_pick",

    # Store
    "ItemStore",
    "merge_items",

    # Boundary / stats
    "ItemRecord",
    "ReviewRequest",
    "parse_grade",
    "ReviewStats",
    "review_stats",
]
