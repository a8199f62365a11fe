"""
Tests for topic relevance filtering and smart pick.
"""

import random

from srs.constants import ONE_DAY_MS
from srs.items import ItemStatus
from srs.session_builders import (
    SessionFilters,
    assemble_session,
    create_topic_session,
    filter_by_keywords,
    matches_keywords,
    partition_by_status,
    smart_pick,
)


def _tiered_pool(make_item, now, due=2, new=3, scheduled=4):
    due_items = [make_item(next_review_at=now - 1, consecutive_correct=1, interval_days=1)
                 for _ in range(due)]
    new_items = [make_item(next_review_at=now + 1) for _ in range(new)]
    scheduled_items = [make_item(next_review_at=now + ONE_DAY_MS, consecutive_correct=2, interval_days=6)
                       for _ in range(scheduled)]
    return due_items, new_items, scheduled_items


class TestKeywordMatching:

    def test_matches_each_field(self, make_item):
        assert matches_keywords(make_item(word="Airport"), ["airport"])
        assert matches_keywords(make_item(meaning="sân bay"), ["SÂN BAY"])
        assert matches_keywords(make_item(tags=["Travel", "ielts"]), ["travel"])
        assert matches_keywords(make_item(example="We missed the flight."), ["flight"])

    def test_substring_match(self, make_item):
        assert matches_keywords(make_item(word="boarding pass"), ["board"])

    def test_ignores_note_and_ipa(self, make_item):
        item = make_item(word="x", note="travel notes", ipa="/trævəl/")

        assert not matches_keywords(item, ["travel"])

    def test_topic_counts_as_keyword(self, make_item):
        item = make_item(word="customs", tags=["travel"])

        assert matches_keywords(item, [], topic="Travel")
        assert not matches_keywords(item, [], topic=None)

    def test_blank_keywords_match_nothing(self, make_item):
        assert not matches_keywords(make_item(word="anything"), ["", "  "])

    def test_filter_by_keywords(self, make_item):
        hit = make_item(word="luggage")
        miss = make_item(word="photosynthesis")

        assert filter_by_keywords([hit, miss], ["luggage", "passport"]) == [hit]


class TestSmartPick:

    def test_partition_by_status(self, make_item, now):
        due, new, scheduled = _tiered_pool(make_item, now)

        pools = partition_by_status(due + new + scheduled, now)

        assert pools.as_dict() == {
            ItemStatus.DUE: due,
            ItemStatus.NEW: new,
            ItemStatus.SCHEDULED: scheduled,
        }

    def test_tier_priority(self, make_item, now, rng):
        """2 due, 3 new, 4 scheduled; pick 6 -> all due, all new, one scheduled."""
        due, new, scheduled = _tiered_pool(make_item, now)
        pool = scheduled + new + due

        picked = smart_pick(pool, 6, now=now, rng=rng)

        assert len(picked) == 6
        assert set(i.id for i in picked[:2]) == set(i.id for i in due)
        assert set(i.id for i in picked[2:5]) == set(i.id for i in new)
        assert picked[5].id in {i.id for i in scheduled}

    def test_order_within_tier_varies(self, make_item, now):
        due, _, _ = _tiered_pool(make_item, now, due=8, new=0, scheduled=0)

        orders = {
            tuple(i.id for i in smart_pick(due, 8, now=now, rng=random.Random(seed)))
            for seed in range(10)
        }

        assert len(orders) > 1

    def test_count_larger_than_pool(self, make_item, now, rng):
        due, new, scheduled = _tiered_pool(make_item, now, due=1, new=1, scheduled=1)

        assert len(smart_pick(due + new + scheduled, 20, now=now, rng=rng)) == 3

    def test_empty_pool(self, now, rng):
        assert smart_pick([], 20, now=now, rng=rng) == []

    def test_default_count_from_config(self, make_item, now, rng, monkeypatch):
        monkeypatch.setenv("SRS_SMART_PICK_COUNT", "2")
        due, new, scheduled = _tiered_pool(make_item, now)

        assert len(smart_pick(due + new + scheduled, now=now, rng=rng)) == 2


class TestTopicSession:

    def test_create_topic_session(self, store, make_item, now, rng):
        travel_due = make_item(word="passport", next_review_at=now - 1, consecutive_correct=1)
        travel_new = make_item(word="itinerary", tags=["travel"], next_review_at=now + 1)
        unrelated = make_item(word="mitochondria")
        other_owner = make_item(word="passport", owner_id="u2")
        for item in [travel_due, travel_new, unrelated, other_owner]:
            store.upsert(item)

        session = create_topic_session(store, "u1", ["passport", "travel"], count=5, now=now, rng=rng)

        assert session == [travel_due, travel_new]

    def test_assemble_session_with_keywords(self, store, make_item, now, rng):
        for word in ["beach", "coastline", "sand dune", "algebra"]:
            store.upsert(make_item(word=word))

        session = assemble_session(
            store, "u1", 2, filters=SessionFilters(keywords=["beach", "coast", "sand"]), now=now, rng=rng
        )

        assert len(session) == 2
        assert all(item.content.word != "algebra" for item in session)

    def test_no_relevant_items(self, store, make_item, now, rng):
        store.upsert(make_item(word="algebra"))

        assert create_topic_session(store, "u1", ["ocean"], now=now, rng=rng) == []
