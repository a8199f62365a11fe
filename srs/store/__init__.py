"""Item store contract and backends."""

from srs.store.base import ItemStore, MergeResult, merge_items, should_overwrite
from srs.store.memory import InMemoryItemStore
from srs.store.database import SqlItemStore

__all__ = [
    "ItemStore",
    "MergeResult",
    "merge_items",
    "should_overwrite",
    "InMemoryItemStore",
    "SqlItemStore",
]
