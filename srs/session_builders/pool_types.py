"""
Typed pool models shared across session builders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from srs.items import Category, ItemStatus, LearningItem


@dataclass
class SessionFilters:
    """
    Optional narrowing of the candidate pool before selection.

    category restricts to a content flag; keywords (and topic) restrict to
    topic-relevant items.
    """
    category: Optional[Category] = None
    keywords: list[str] = field(default_factory=list)
    topic: Optional[str] = None

    @property
    def is_topic(self) -> bool:
        return bool(self.keywords) or bool(self.topic)


@dataclass
class StatusPools:
    """
    An item pool split by ItemStatus.
    """
    due: list[LearningItem] = field(default_factory=list)
    new: list[LearningItem] = field(default_factory=list)
    scheduled: list[LearningItem] = field(default_factory=list)

    def add(self, item: LearningItem, status: ItemStatus) -> None:
        if status is ItemStatus.DUE:
            self.due.append(item)
        elif status is ItemStatus.NEW:
            self.new.append(item)
        else:
            self.scheduled.append(item)

    def as_dict(self) -> dict[ItemStatus, list[LearningItem]]:
        return {
            ItemStatus.DUE: self.due,
            ItemStatus.NEW: self.new,
            ItemStatus.SCHEDULED: self.scheduled,
        }
