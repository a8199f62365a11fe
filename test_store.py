"""
Tests for the item store backends and the last-write-wins merge.

Both backends run the same contract tests; the SQL store uses an in-memory
SQLite database.
"""

from dataclasses import replace

import pytest

from srs.constants import Grade, ONE_DAY_MS
from srs.errors import ConfigurationError, UnknownFlagError
from srs.items import Category
from srs.scheduler import schedule
from srs.session_builders import assemble_session
from srs.store import InMemoryItemStore, SqlItemStore, merge_items
from scripts.maintenance.reset_progress import reset_items


def _sql_store():
    store = SqlItemStore("sqlite://")
    store.init_db()
    return store


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    if request.param == "memory":
        return InMemoryItemStore()
    return _sql_store()


class TestStoreContract:

    def test_upsert_and_get_roundtrip(self, any_store, make_item):
        item = make_item(word="resilient", tags=["traits"], is_idiom=True, last_review_at=123)

        any_store.upsert(item)

        assert any_store.get_item("u1", item.id) == item
        assert any_store.get_item("u2", item.id) is None

    def test_upsert_replaces(self, any_store, make_item, now):
        item = make_item()
        any_store.upsert(item)

        graded = schedule(item, Grade.HARD, now=now)
        any_store.upsert(graded)

        assert any_store.get_item("u1", item.id) == graded
        assert len(any_store.get_all_items("u1")) == 1

    def test_reads_are_detached_from_stored_state(self, any_store, make_item, now):
        item = make_item(tags=["travel"])
        any_store.upsert(item)

        fetched = any_store.get_item("u1", item.id)
        fetched.interval_days = 99
        fetched.content.tags.append("edited")
        any_store.get_all_items("u1")[0].consecutive_correct = 7
        any_store.get_due_items("u1", now)[0].forgot_count = 3
        item.ease_factor = 1.3

        stored = any_store.get_item("u1", item.id)
        assert stored.interval_days == 0
        assert stored.consecutive_correct == 0
        assert stored.forgot_count == 0
        assert stored.ease_factor == 2.5
        assert stored.content.tags == ["travel"]

    def test_get_due_items(self, any_store, make_item, now):
        due = make_item(next_review_at=now)
        later = make_item(next_review_at=now + 1)
        foreign = make_item(owner_id="u2", next_review_at=now - 1)
        for item in [due, later, foreign]:
            any_store.upsert(item)

        assert [i.id for i in any_store.get_due_items("u1", now)] == [due.id]

    def test_get_due_items_limit(self, any_store, make_item, now):
        for i in range(5):
            any_store.upsert(make_item(next_review_at=now - i))

        assert len(any_store.get_due_items("u1", now, limit=2)) == 2

    def test_get_new_items_newest_first(self, any_store, make_item, now):
        old = make_item(created_at=now - 300)
        newest = make_item(created_at=now - 100)
        middle = make_item(created_at=now - 200)
        learned = make_item(created_at=now, consecutive_correct=1, interval_days=4)
        for item in [old, newest, middle, learned]:
            any_store.upsert(item)

        assert [i.id for i in any_store.get_new_items("u1")] == [newest.id, middle.id, old.id]
        assert [i.id for i in any_store.get_new_items("u1", limit=1)] == [newest.id]

    def test_get_items_by_flag(self, any_store, make_item):
        phrasal = make_item(is_phrasal_verb=True)
        any_store.upsert(phrasal)
        any_store.upsert(make_item())

        result = any_store.get_items_by_flag("u1", Category.PHRASAL_VERB.value)

        assert [i.id for i in result] == [phrasal.id]

    def test_unknown_flag(self, any_store):
        with pytest.raises(UnknownFlagError):
            any_store.get_items_by_flag("u1", "is_favourite")

    def test_session_over_store(self, any_store, make_item, now, rng):
        for _ in range(3):
            any_store.upsert(make_item(next_review_at=now - ONE_DAY_MS, consecutive_correct=1))
        for _ in range(5):
            any_store.upsert(make_item(next_review_at=now + ONE_DAY_MS))

        assert len(assemble_session(any_store, "u1", 25, now=now, rng=rng)) == 3


class TestMerge:

    def test_inserts_unknown_items(self, any_store, make_item):
        result = merge_items(any_store, [make_item(), make_item()])

        assert (result.merged, result.skipped) == (2, 0)
        assert len(any_store.get_all_items("u1")) == 2

    def test_newer_incoming_wins(self, any_store, make_item, now):
        local = make_item()
        any_store.upsert(local)
        incoming = schedule(local, Grade.EASY, now=now)

        result = merge_items(any_store, [incoming])

        assert result.merged == 1
        assert any_store.get_item("u1", local.id).interval_days == 4

    def test_equal_or_older_incoming_skipped(self, any_store, make_item, now):
        local = schedule(make_item(), Grade.EASY, now=now)
        any_store.upsert(local)
        same_time = replace(local, interval_days=99)
        older = replace(local, interval_days=77, updated_at=now - 1)

        result = merge_items(any_store, [same_time, older])

        assert (result.merged, result.skipped) == (0, 2)
        assert any_store.get_item("u1", local.id).interval_days == 4


class TestSqlStore:

    def test_init_db_is_idempotent(self):
        store = _sql_store()
        store.init_db()

        assert store.get_all_items("u1") == []

    def test_reset_db_drops_items(self, make_item):
        store = _sql_store()
        store.upsert(make_item())

        store.reset_db()

        assert store.get_all_items("u1") == []

    def test_batch_upsert(self, make_item):
        store = _sql_store()
        items = [make_item() for _ in range(4)]

        store.batch_upsert(items)
        store.batch_upsert([])

        assert len(store.get_all_items("u1")) == 4

    def test_database_url_from_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.delenv("TEST_MODE", raising=False)

        store = SqlItemStore()
        store.init_db()

        assert store.get_all_items("u1") == []

    def test_missing_database_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ConfigurationError):
            SqlItemStore()


class TestResetScript:

    def test_reset_all_items(self, make_item, now):
        store = _sql_store()
        items = [schedule(make_item(), Grade.EASY, now=now) for _ in range(3)]
        store.batch_upsert(items + [make_item(owner_id="u2", consecutive_correct=5)])

        count = reset_items(store, "u1", now=now + 1)

        assert count == 3
        for item in store.get_all_items("u1"):
            assert item.interval_days == 0
            assert item.consecutive_correct == 0
            assert item.last_review_at is None
            assert item.updated_at == now + 1
        assert store.get_all_items("u2")[0].consecutive_correct == 5

    def test_reset_single_item(self, make_item, now):
        store = _sql_store()
        first, second = (schedule(make_item(), Grade.HARD, now=now) for _ in range(2))
        store.batch_upsert([first, second])

        assert reset_items(store, "u1", first.id, now=now + 1) == 1
        assert store.get_item("u1", first.id).interval_days == 0
        assert store.get_item("u1", second.id).interval_days == 1

    def test_reset_missing_item(self, now):
        assert reset_items(_sql_store(), "u1", "nope", now=now) == 0
