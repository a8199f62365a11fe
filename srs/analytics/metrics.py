"""
Metric computations for review statistics.

All functions take the frame produced by items_frame().
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from srs.constants import MASTERED_INTERVAL
from srs.items import LearningItem


ITEM_COLUMNS = [
    "owner_id",
    "id",
    "next_review_at",
    "interval_days",
    "consecutive_correct",
    "forgot_count",
    "reviewed",
    "is_idiom",
    "is_phrasal_verb",
    "is_collocation",
    "is_standard_phrase",
    "needs_pronunciation_focus",
    "is_passive",
]

# Category key -> content flag column
CATEGORY_FLAGS = {
    "idiom": "is_idiom",
    "phrasal": "is_phrasal_verb",
    "colloc": "is_collocation",
    "phrase": "is_standard_phrase",
    "pronun": "needs_pronunciation_focus",
}


def items_frame(items: Iterable[LearningItem]) -> pd.DataFrame:
    """
    Flatten items into one row each.
    """
    rows = [
        {
            "owner_id": item.owner_id,
            "id": item.id,
            "next_review_at": item.next_review_at,
            "interval_days": item.interval_days,
            "consecutive_correct": item.consecutive_correct,
            "forgot_count": item.forgot_count,
            "reviewed": item.last_review_at is not None,
            "is_idiom": item.content.is_idiom,
            "is_phrasal_verb": item.content.is_phrasal_verb,
            "is_collocation": item.content.is_collocation,
            "is_standard_phrase": item.content.is_standard_phrase,
            "needs_pronunciation_focus": item.content.needs_pronunciation_focus,
            "is_passive": item.content.is_passive,
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def active_only(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return df
    return df[~df["is_passive"].astype(bool)]


def compute_due_count(df: pd.DataFrame, now: int) -> int:
    """
    Due items that have been reviewed at least once.
    """
    if df.empty:
        return 0
    return int((df["reviewed"].astype(bool) & (df["next_review_at"] <= now)).sum())


def compute_new_count(df: pd.DataFrame) -> int:
    if df.empty:
        return 0
    return int((~df["reviewed"].astype(bool)).sum())


def compute_mastered_count(df: pd.DataFrame) -> int:
    if df.empty:
        return 0
    return int((df["interval_days"] > MASTERED_INTERVAL).sum())


def compute_learning_count(df: pd.DataFrame) -> int:
    """
    Reviewed items not yet mastered.
    """
    if df.empty:
        return 0
    return int((df["reviewed"].astype(bool) & (df["interval_days"] <= MASTERED_INTERVAL)).sum())


def compute_weak_keys(df: pd.DataFrame, limit: int) -> list[tuple[str, str]]:
    """
    (owner_id, id) of forgotten items, most-forgotten first.
    """
    if df.empty:
        return []
    weak = df[df["forgot_count"] > 0].sort_values(
        ["forgot_count", "owner_id", "id"], ascending=[False, True, True]
    ).head(limit)
    return list(zip(weak["owner_id"], weak["id"]))


def compute_category_progress(df: pd.DataFrame) -> dict[str, tuple[int, int]]:
    """
    (total, learned) per category; "vocab" is everything without a
    multi-word category flag.
    """
    progress: dict[str, tuple[int, int]] = {}
    if df.empty:
        for key in ["vocab", *CATEGORY_FLAGS]:
            progress[key] = (0, 0)
        return progress

    reviewed = df["reviewed"].astype(bool)

    multi_word = (
        df["is_idiom"].astype(bool)
        | df["is_phrasal_verb"].astype(bool)
        | df["is_collocation"].astype(bool)
        | df["is_standard_phrase"].astype(bool)
    )
    progress["vocab"] = (int((~multi_word).sum()), int((~multi_word & reviewed).sum()))

    for key, column in CATEGORY_FLAGS.items():
        mask = df[column].astype(bool)
        progress[key] = (int(mask.sum()), int((mask & reviewed).sum()))
    return progress
