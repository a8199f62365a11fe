"""
SRS Constants and Parameters

All tunable numbers for the scheduler and session assembly in one place.
"""

from enum import Enum


# ---- Review Grades ----

class Grade(str, Enum):
    """Learner feedback on a single review."""
    FORGOT = "FORGOT"  # Could not recall
    HARD = "HARD"      # Recalled with effort
    EASY = "EASY"      # Recalled fluently


# ---- Time ----

ONE_MINUTE_MS = 60 * 1000
ONE_DAY_MS = 24 * 60 * 60 * 1000

FORGOT_DELAY_MS = 10 * ONE_MINUTE_MS  # "Try again soon", not a day interval


# ---- Ease Factor ----

DEFAULT_EASE = 2.5
MIN_EASE = 1.3
MAX_EASE = 2.5

EASE_DELTA = {
    Grade.FORGOT: -0.20,
    Grade.HARD: -0.15,
    Grade.EASY: +0.10,
}


# ---- Intervals (days) ----

HARD_FIRST_INTERVAL = 1   # First HARD after new/forgotten
HARD_GROWTH = 1.2         # Slow growth within a streak
HARD_MIN_INTERVAL = 1

EASY_FIRST_INTERVAL = 4   # First EASY jumps straight to 4 days
EASY_MIN_INTERVAL = 6     # Floor once in a successful streak

MASTERED_INTERVAL = 21    # Interval above which an item counts as mastered


# ---- Session Sizes ----

SESSION_LIMIT = 25        # Dashboard review session
NEW_LIMIT = 10            # Fallback pool of new items
SMART_PICK_COUNT = 20     # Topic "smart pick"
WEAK_WORDS_LIMIT = 10
