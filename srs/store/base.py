"""
Item store contract and store-level helpers.

The SRS core only talks to persistence through ItemStore. Backends decide how
items are kept; the merge rule (last-write-wins on updated_at) lives here so
every backend applies it the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from srs.items import LearningItem

logger = logging.getLogger(__name__)


class ItemStore(ABC):
    """Query and upsert access to an owner's learning items."""

    @abstractmethod
    def get_due_items(
        self,
        owner_id: str,
        before_time: int,
        limit: Optional[int] = None
    ) -> list[LearningItem]:
        """Items with next_review_at <= before_time."""

    @abstractmethod
    def get_new_items(self, owner_id: str, limit: Optional[int] = None) -> list[LearningItem]:
        """Items with consecutive_correct == 0, newest-created first."""

    @abstractmethod
    def get_items_by_flag(self, owner_id: str, flag_name: str) -> list[LearningItem]:
        """Items whose content flag `flag_name` is set."""

    @abstractmethod
    def get_all_items(self, owner_id: str) -> list[LearningItem]:
        """Every item the owner has."""

    @abstractmethod
    def get_item(self, owner_id: str, item_id: str) -> Optional[LearningItem]:
        """A single item, or None."""

    @abstractmethod
    def upsert(self, item: LearningItem) -> None:
        """Insert or replace an item."""


@dataclass(frozen=True)
class MergeResult:
    merged: int
    skipped: int


def should_overwrite(local: Optional[LearningItem], incoming: LearningItem) -> bool:
    """Last-write-wins: incoming replaces local only if strictly newer."""
    if local is None:
        return True
    return (incoming.updated_at or 0) > (local.updated_at or 0)


def merge_items(store: ItemStore, incoming: Iterable[LearningItem]) -> MergeResult:
    """
    Merge externally supplied items (e.g. a restored backup) into a store.

    Args:
        store: Target store
        incoming: Items to merge; each is keyed by (owner_id, id)

    Returns:
        MergeResult with counts of written and skipped items
    """
    merged = 0
    skipped = 0
    for item in incoming:
        local = store.get_item(item.owner_id, item.id)
        if should_overwrite(local, item):
            store.upsert(item)
            merged += 1
        else:
            skipped += 1

    logger.info("Merged %d items, skipped %d older or equal items", merged, skipped)
    return MergeResult(merged=merged, skipped=skipped)
