"""Tests for identifiers and the shared resource index."""

import mindtree
from mindtree import CENTER_KEY, COUNTER_KEY, LAST_KEY, ROOT_KEY, TOPIC_ID_LEN, ResourceIndex, Topic
from mindtree.ids import SENTINEL_KEYS, new_id


class TestIds:
    def test_new_id_length(self):
        assert len(new_id()) == TOPIC_ID_LEN

    def test_new_ids_are_unique(self):
        assert len({new_id() for _ in range(1000)}) == 1000

    def test_sentinels_never_look_like_content_ids(self):
        assert SENTINEL_KEYS == {ROOT_KEY, CENTER_KEY, LAST_KEY, COUNTER_KEY}
        for key in SENTINEL_KEYS:
            assert len(key) != TOPIC_ID_LEN


class TestResourceIndex:
    def test_sentinel_lookup(self):
        center = mindtree.new_sheet("S", "C")
        index = center.index

        assert index.get(ROOT_KEY) is center.sheet
        assert index.get(CENTER_KEY) is center
        assert index.get(LAST_KEY) is center
        assert index.get(COUNTER_KEY) is None
        assert index.get(center.id) is center

    def test_sheet_root_is_not_a_content_entry(self):
        center = mindtree.new_sheet("S", "C")
        assert center.sheet.id not in center.index
        assert center.cid("S") == LAST_KEY
        assert len(center.index) == 1

    def test_new_id_skips_sentinels_and_duplicates(self):
        ids = iter(["root", "", "a" * 32, "a" * 32, "b" * 32])
        index = ResourceIndex(lambda: next(ids))

        first = index.new_id()
        index.register(Topic(id=first))

        assert first == "a" * 32
        assert index.new_id() == "b" * 32

    def test_every_topic_shares_the_index(self):
        center = mindtree.new_sheet("S", "C")
        center.add("A").add("B")
        center.on_title("A").add("A1")

        for topic in center.walk():
            assert topic.index is center.index
            assert center.index.get(topic.id) is topic

    def test_new_topic_registered_in_every_mode(self):
        center = mindtree.new_sheet("S", "C")
        center.add("A")
        a = center.on_title("A")
        before = len(center.index)

        a.add("sub")
        a.add("before", "before")
        a.add("after", "after")
        wrapped = a.add("parent", "parent")

        assert len(center.index) == before + 4
        assert center.index.get(wrapped.id) is wrapped
        for title in ("sub", "before", "after", "A"):
            assert center.cid(title) in center.index

    def test_items_in_registration_order(self):
        center = mindtree.new_sheet("S", "C")
        center.add("A").add("B")

        assert [t.title for _, t in center.index.items()] == ["C", "A", "B"]

    def test_counter_never_resets(self):
        center = mindtree.new_sheet("S", "C")
        center.add()
        center.remove("Topic 1")
        center.add()

        assert center.children[0].title == "Topic 2"
        assert center.index.counter == 2

    def test_repr(self):
        center = mindtree.new_sheet("S", "C")
        assert repr(center.index) == "ResourceIndex('C', 1 topics)"
