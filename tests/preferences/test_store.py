# tests/preferences/test_store.py
"""Tests for PreferenceStore and failure events."""

import json

import pytest

from toolfinder.preferences import (
    InMemoryStorage,
    PreferenceEventKind,
    PreferenceStore,
)


class FailingStorage:
    """Storage whose reads and/or writes raise."""

    def __init__(self, fail_reads=False, fail_writes=True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.items = {}

    def get_item(self, key):
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.items.get(key)

    def set_item(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        self.items[key] = value

    def remove_item(self, key):
        if self.fail_writes:
            raise OSError("quota exceeded")
        self.items.pop(key, None)


@pytest.fixture
def events():
    return []


class TestPreferenceStore:
    """Tests for normal operation."""

    def test_starts_empty(self, preferences):
        state = preferences.snapshot()
        assert state.recently_used == ()
        assert state.favorites == ()

    def test_recently_used_move_to_front(self, preferences):
        for tool_id in ["a", "b", "a"]:
            preferences.add_recently_used(tool_id)
        assert preferences.recently_used() == ["a", "b"]

    def test_recently_used_cap(self, storage):
        store = PreferenceStore(storage, max_recent=3)
        for tool_id in ["a", "b", "c", "d"]:
            store.add_recently_used(tool_id)
        assert store.recently_used() == ["d", "c", "b"]

    def test_invalid_cap(self, storage):
        with pytest.raises(ValueError, match="max_recent"):
            PreferenceStore(storage, max_recent=0)

    def test_toggle_favorite(self, preferences):
        assert preferences.toggle_favorite("a") is True
        assert preferences.is_favorite("a")
        assert preferences.toggle_favorite("a") is False
        assert not preferences.is_favorite("a")

    def test_favorites_keep_insertion_order(self, preferences):
        for tool_id in ["c", "a", "b"]:
            preferences.toggle_favorite(tool_id)
        assert preferences.favorites() == ["c", "a", "b"]

    def test_persisted_as_json_arrays(self, storage, preferences):
        preferences.add_recently_used("a")
        preferences.toggle_favorite("b")

        assert json.loads(storage.get_item("recentlyUsed")) == ["a"]
        assert json.loads(storage.get_item("favorites")) == ["b"]

    def test_clear(self, storage, preferences):
        preferences.add_recently_used("a")
        preferences.toggle_favorite("a")
        preferences.clear()

        assert preferences.snapshot().recently_used == ()
        assert json.loads(storage.get_item("favorites")) == []

    def test_snapshot_is_a_copy(self, preferences):
        preferences.add_recently_used("a")
        snapshot = preferences.snapshot()
        preferences.add_recently_used("b")
        assert snapshot.recently_used == ("a",)

    def test_snapshot_is_immutable(self, preferences):
        preferences.toggle_favorite("a")
        snapshot = preferences.snapshot()
        with pytest.raises(AttributeError):
            snapshot.favorites.append("b")
        assert preferences.favorites() == ["a"]

    def test_ids_are_case_sensitive(self, preferences):
        """Tool ids are exact identifiers; differently cased ids are distinct."""
        preferences.add_recently_used("json-formatter")
        preferences.add_recently_used("JSON-Formatter")
        preferences.add_recently_used("json-formatter")
        assert preferences.recently_used() == ["json-formatter", "JSON-Formatter"]

    def test_loads_existing_state(self):
        storage = InMemoryStorage(
            {"recentlyUsed": '["x", "y", "x"]', "favorites": '["z"]'}
        )
        store = PreferenceStore(storage)
        assert store.recently_used() == ["x", "y"]
        assert store.favorites() == ["z"]

    def test_loaded_recents_trimmed_to_cap(self):
        storage = InMemoryStorage({"recentlyUsed": json.dumps(list("abcdef"))})
        store = PreferenceStore(storage, max_recent=2)
        assert store.recently_used() == ["a", "b"]


class TestStorageFailures:
    """Storage problems never escape the store."""

    @pytest.mark.parametrize(
        "raw",
        ["not json", '{"a": 1}', "[1, 2]", '"text"'],
    )
    def test_corrupt_data_loads_empty(self, raw, events):
        storage = InMemoryStorage({"recentlyUsed": raw, "favorites": '["ok"]'})
        store = PreferenceStore(storage, on_event=events.append)

        assert store.recently_used() == []
        assert store.favorites() == ["ok"]
        assert [e.kind for e in events] == [PreferenceEventKind.LOAD_FAILED]
        assert events[0].key == "recentlyUsed"

    def test_read_failure(self, events):
        store = PreferenceStore(
            FailingStorage(fail_reads=True), on_event=events.append
        )
        assert store.snapshot().favorites == ()
        assert len(events) == 2
        assert "OSError" in events[0].error

    def test_write_failure_keeps_memory_state(self, events):
        store = PreferenceStore(FailingStorage(), on_event=events.append)

        store.add_recently_used("a")
        assert store.toggle_favorite("b") is True

        assert store.recently_used() == ["a"]
        assert store.favorites() == ["b"]
        assert [e.kind for e in events] == [
            PreferenceEventKind.SAVE_FAILED,
            PreferenceEventKind.SAVE_FAILED,
        ]

    def test_failures_logged_without_listener(self, caplog):
        with caplog.at_level("WARNING", logger="toolfinder"):
            store = PreferenceStore(InMemoryStorage({"favorites": "{{"}))
        assert store.favorites() == []
        assert "Failed to load preference favorites" in caplog.text
