"""
Learning Items - Scheduling State and Lifecycle

Defines the unit the scheduler operates on and the operations that create
and reset it.

Key concepts:
- Interval: days until the next review, set on every grading
- Ease factor: multiplier controlling how fast intervals grow (1.3 - 2.5)
- Streak: consecutive non-FORGOT reviews; 0 means "not in a successful streak"
- Status: DUE, NEW or SCHEDULED, derived from the fields above and "now"

Timestamps are integer milliseconds since the epoch.
"""

from __future__ import annotations

import math
import time
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal, NamedTuple, Optional

from pydantic import BaseModel, Field

from srs.constants import DEFAULT_EASE, ONE_DAY_MS


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


# ---- Content ----

class Category(str, Enum):
    """Boolean content flags used by the category-filtered study modes."""
    IDIOM = "is_idiom"
    PHRASAL_VERB = "is_phrasal_verb"
    COLLOCATION = "is_collocation"
    STANDARD_PHRASE = "is_standard_phrase"
    PRONUNCIATION = "needs_pronunciation_focus"


FLAG_NAMES = frozenset(c.value for c in Category)


class WordContent(BaseModel):
    """
    Learner-facing content of an item.

    Never interpreted by the scheduler; the session builders only read the
    text fields for topic matching and the flags for category filtering.
    """
    word: str = Field(..., description="The word or expression being learned")
    ipa: str = ""
    meaning: str = Field(default="", description="Translated meaning")
    example: str = ""
    note: str = ""
    tags: list[str] = Field(default_factory=list)

    is_idiom: bool = False
    is_phrasal_verb: bool = False
    is_collocation: bool = False
    is_standard_phrase: bool = False
    needs_pronunciation_focus: bool = False
    is_passive: bool = False  # Kept in the library but excluded from stats

    def has_flag(self, flag_name: str) -> bool:
        return bool(getattr(self, flag_name, False))


# ---- Scheduling State ----

@dataclass
class LearningItem:
    """
    Scheduling state for a single vocabulary item.

    Mutated only by the scheduler and reset_progress, both of which return
    new instances.
    """
    id: str
    owner_id: str
    content: WordContent

    next_review_at: int  # When the item becomes due
    interval_days: int  # Spacing used to compute the next due time
    ease_factor: float  # Range 1.3 - 2.5
    consecutive_correct: int  # Current success streak
    forgot_count: int  # Lifetime FORGOT grades (diagnostic)

    created_at: int
    updated_at: int
    last_review_at: Optional[int] = None  # None if never reviewed


class ItemStatus(str, Enum):
    """Where an item stands relative to "now"."""
    DUE = "due"  # next_review_at has passed
    NEW = "new"  # Not due and not in a successful streak
    SCHEDULED = "scheduled"  # Not due, in a streak


def is_due(item: LearningItem, now: Optional[int] = None) -> bool:
    if now is None:
        now = now_ms()
    return item.next_review_at <= now


def is_new(item: LearningItem) -> bool:
    """Never successfully reviewed (or most recently forgotten)."""
    return item.consecutive_correct == 0


def item_status(item: LearningItem, now: Optional[int] = None) -> ItemStatus:
    """
    Classify an item as DUE, NEW or SCHEDULED.

    Due takes precedence: a new item whose due time has passed is DUE.
    """
    if is_due(item, now):
        return ItemStatus.DUE
    if is_new(item):
        return ItemStatus.NEW
    return ItemStatus.SCHEDULED


# ---- Lifecycle ----

def create_item(
    content: WordContent,
    owner_id: str = "",
    now: Optional[int] = None,
    item_id: Optional[str] = None
) -> LearningItem:
    """
    Create a new item with creation-time scheduling defaults.

    Text fields are stripped, except the note which keeps user formatting.

    Args:
        content: Word content (copied, not shared)
        owner_id: Owning user
        now: Creation timestamp (defaults to the system clock)
        item_id: Explicit id (defaults to a random uuid)

    Returns:
        New LearningItem, due immediately
    """
    if now is None:
        now = now_ms()

    cleaned = content.model_copy(update={
        "word": content.word.strip(),
        "ipa": content.ipa.strip(),
        "meaning": content.meaning.strip(),
        "example": content.example.strip(),
        "tags": list(content.tags),
    })

    return LearningItem(
        id=item_id or uuid.uuid4().hex,
        owner_id=owner_id,
        content=cleaned,
        next_review_at=now,
        interval_days=0,
        ease_factor=DEFAULT_EASE,
        consecutive_correct=0,
        forgot_count=0,
        created_at=now,
        updated_at=now,
        last_review_at=None
    )


def reset_progress(item: LearningItem, now: Optional[int] = None) -> LearningItem:
    """
    Restore an item to its creation-time scheduling state ("clear progress").

    Keeps id, owner, content and created_at. Returns a new item.
    """
    if now is None:
        now = now_ms()

    return replace(
        item,
        next_review_at=now,
        interval_days=0,
        ease_factor=DEFAULT_EASE,
        consecutive_correct=0,
        forgot_count=0,
        last_review_at=None,
        updated_at=now
    )


# ---- Display Helpers ----

class RemainingTime(NamedTuple):
    label: str
    urgency: Literal["due", "soon", "later"]


def remaining_time(next_review_at: int, now: Optional[int] = None) -> RemainingTime:
    """
    Time until the next review, simplified to "DUE" or whole days ("3d").
    """
    if now is None:
        now = now_ms()

    diff = next_review_at - now
    if diff <= 0:
        return RemainingTime("DUE", "due")

    days = math.ceil(diff / ONE_DAY_MS)
    return RemainingTime(f"{days}d", "soon" if days <= 1 else "later")
