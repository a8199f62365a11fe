"""
Scheduler - Review Grading Logic

Pure scheduling update (no store calls). A simplified SM-2 family algorithm
with three grades.

Main workflow:
1. Load item (caller's responsibility)
2. Apply the grade's interval, streak and ease rules
3. Stamp last_review_at / updated_at
4. Return the updated item; caller persists it

FORGOT is a short "try again soon" delay, not a day interval. HARD grows the
interval slowly and lowers ease. EASY grows the interval by the ease factor
and raises ease.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from srs.constants import (
    EASE_DELTA,
    EASY_FIRST_INTERVAL,
    EASY_MIN_INTERVAL,
    FORGOT_DELAY_MS,
    Grade,
    HARD_FIRST_INTERVAL,
    HARD_GROWTH,
    HARD_MIN_INTERVAL,
    MAX_EASE,
    MIN_EASE,
    ONE_DAY_MS,
)
from srs.items import LearningItem, now_ms


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def clamp_ease(ease: float) -> float:
    return min(MAX_EASE, max(MIN_EASE, ease))


def schedule(
    item: LearningItem,
    grade: Grade,
    now: Optional[int] = None
) -> LearningItem:
    """
    Compute an item's next scheduling state after a review.

    Does not mutate the input.

    Args:
        item: Current item state
        grade: Review outcome
        now: Review timestamp in ms (defaults to the system clock)

    Returns:
        Updated LearningItem
    """
    if not isinstance(grade, Grade):
        raise TypeError(f"grade must be a Grade, got {type(grade).__name__}")

    if now is None:
        now = now_ms()

    if grade is Grade.FORGOT:
        return _apply_forgot(item, now)
    if grade is Grade.HARD:
        interval = _hard_interval(item)
    else:
        interval = _easy_interval(item)

    return replace(
        item,
        interval_days=interval,
        consecutive_correct=item.consecutive_correct + 1,
        ease_factor=clamp_ease(item.ease_factor + EASE_DELTA[grade]),
        next_review_at=now + interval * ONE_DAY_MS,
        last_review_at=now,
        updated_at=now
    )


def _apply_forgot(item: LearningItem, now: int) -> LearningItem:
    return replace(
        item,
        interval_days=0,
        consecutive_correct=0,
        ease_factor=clamp_ease(item.ease_factor + EASE_DELTA[Grade.FORGOT]),
        next_review_at=now + FORGOT_DELAY_MS,
        forgot_count=item.forgot_count + 1,
        last_review_at=now,
        updated_at=now
    )


def _hard_interval(item: LearningItem) -> int:
    if item.consecutive_correct == 0:
        return HARD_FIRST_INTERVAL
    return max(HARD_MIN_INTERVAL, round_half_up(item.interval_days * HARD_GROWTH))


def _easy_interval(item: LearningItem) -> int:
    if item.consecutive_correct == 0:
        return EASY_FIRST_INTERVAL
    # Uses the ease factor from before this review
    return max(EASY_MIN_INTERVAL, round_half_up(item.interval_days * item.ease_factor))
