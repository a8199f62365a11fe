"""
Types for review statistics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from srs.items import LearningItem


CategoryKey = Literal["vocab", "idiom", "phrasal", "colloc", "phrase", "pronun"]


@dataclass(frozen=True)
class CategoryProgress:
    total: int
    learned: int


@dataclass(frozen=True)
class ReviewStats:
    """
    Dashboard counts for one owner's active (non-passive) items.
    """
    total: int
    due: int
    new: int
    learning: int
    mastered: int
    weak_words: list[LearningItem] = field(default_factory=list)
    categories: dict[str, CategoryProgress] = field(default_factory=dict)
