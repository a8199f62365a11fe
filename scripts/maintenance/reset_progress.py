"""
Reset learning progress ("clear progress") in the SQL item store.

Restores scheduling fields to their creation-time defaults. Content is kept.
DANGEROUS: review history for the selected items is lost!

Usage:
    python -m scripts.maintenance.reset_progress --user u1
    python -m scripts.maintenance.reset_progress --user u1 --item 3f2a... --yes
"""

from __future__ import annotations

import argparse
from typing import Optional

from srs import config
from srs.items import now_ms, reset_progress
from srs.store import SqlItemStore


def reset_items(
    store: SqlItemStore,
    owner_id: str,
    item_id: Optional[str] = None,
    now: Optional[int] = None
) -> int:
    """
    Reset one item (or all of an owner's items) and save them.

    Returns:
        Number of items reset
    """
    if now is None:
        now = now_ms()

    if item_id:
        item = store.get_item(owner_id, item_id)
        items = [item] if item is not None else []
    else:
        items = store.get_all_items(owner_id)

    store.batch_upsert([reset_progress(item, now) for item in items])
    return len(items)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Reset SRS progress for a user's items")
    parser.add_argument("--user", default=None, help="Owner id (default: DEFAULT_USER_ID)")
    parser.add_argument("--item", default=None, help="Reset a single item id")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--yes", action="store_true", help="Skip confirmation")
    args = parser.parse_args(argv)

    owner_id = args.user or config.get_default_user_id()
    target = f"item {args.item}" if args.item else "ALL items"

    print("=" * 60)
    print("WARNING: Reset Learning Progress")
    print("=" * 60)
    print()
    print(f"This will reset {target} for user '{owner_id}':")
    print("  - Intervals, ease factors and streaks")
    print("  - Forgot counts and last review times")
    print()

    if not args.yes:
        response = input("Are you sure you want to reset? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return

    store = SqlItemStore(args.database_url)
    store.init_db()
    count = reset_items(store, owner_id, args.item)
    print(f"\n✓ Reset {count} item(s).")


if __name__ == "__main__":
    main()
