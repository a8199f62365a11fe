"""
In-memory item store.

Dict-backed implementation of ItemStore for tests, scripts and embedding the
core without a database. Items are copied on the way in and out, so callers
never hold a reference to stored state.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from srs.errors import UnknownFlagError
from srs.items import FLAG_NAMES, LearningItem
from srs.store.base import ItemStore


def _copy(item: LearningItem) -> LearningItem:
    return replace(item, content=item.content.model_copy(deep=True))


class InMemoryItemStore(ItemStore):

    def __init__(self, items: Optional[Iterable[LearningItem]] = None):
        self._items: dict[tuple[str, str], LearningItem] = {}
        for item in items or []:
            self.upsert(item)

    def __len__(self) -> int:
        return len(self._items)

    def _owned(self, owner_id: str) -> list[LearningItem]:
        return [_copy(item) for item in self._items.values() if item.owner_id == owner_id]

    def get_due_items(
        self,
        owner_id: str,
        before_time: int,
        limit: Optional[int] = None
    ) -> list[LearningItem]:
        due = [item for item in self._owned(owner_id) if item.next_review_at <= before_time]
        due.sort(key=lambda item: item.next_review_at)
        return due if limit is None else due[:limit]

    def get_new_items(self, owner_id: str, limit: Optional[int] = None) -> list[LearningItem]:
        new = [item for item in self._owned(owner_id) if item.consecutive_correct == 0]
        new.sort(key=lambda item: item.created_at, reverse=True)
        return new if limit is None else new[:limit]

    def get_items_by_flag(self, owner_id: str, flag_name: str) -> list[LearningItem]:
        if flag_name not in FLAG_NAMES:
            raise UnknownFlagError(flag_name)
        return [item for item in self._owned(owner_id) if item.content.has_flag(flag_name)]

    def get_all_items(self, owner_id: str) -> list[LearningItem]:
        return self._owned(owner_id)

    def get_item(self, owner_id: str, item_id: str) -> Optional[LearningItem]:
        item = self._items.get((owner_id, item_id))
        return None if item is None else _copy(item)

    def upsert(self, item: LearningItem) -> None:
        self._items[(item.owner_id, item.id)] = _copy(item)
