# tests/preferences/test_storage.py
"""Tests for storage backends and recent search history."""

import json
from pathlib import Path

import pytest

from toolfinder.preferences import (
    InMemoryStorage,
    JsonFileStorage,
    PreferenceEventKind,
    PreferenceStore,
    RecentSearches,
)


@pytest.fixture
def file_storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage(config_dir=tmp_path / "prefs")


class TestInMemoryStorage:
    def test_get_set_remove(self):
        storage = InMemoryStorage()
        assert storage.get_item("k") is None
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        assert "k" in storage
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_remove_missing_is_noop(self):
        InMemoryStorage().remove_item("missing")

    def test_initial_copied(self):
        initial = {"k": "v"}
        storage = InMemoryStorage(initial)
        storage.set_item("k", "w")
        assert initial == {"k": "v"}


class TestJsonFileStorage:
    """Tests for the file-backed storage."""

    def test_missing_file_reads_none(self, file_storage):
        assert file_storage.get_item("favorites") is None
        assert not file_storage.path.exists()

    def test_creates_directory_on_write(self, file_storage):
        file_storage.set_item("favorites", '["a"]')

        assert file_storage.path.exists()
        data = json.loads(file_storage.path.read_text(encoding="utf-8"))
        assert data == {"favorites": '["a"]'}

    def test_keys_share_one_file(self, file_storage):
        file_storage.set_item("a", "1")
        file_storage.set_item("b", "2")
        file_storage.remove_item("a")

        assert file_storage.get_item("a") is None
        assert file_storage.get_item("b") == "2"

    def test_default_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TOOLFINDER_PREFERENCES_DIR", str(tmp_path / "env"))
        storage = JsonFileStorage()
        assert storage.path == tmp_path / "env" / "preferences.json"

    def test_default_dir_in_home(self):
        storage = JsonFileStorage()
        assert storage.path == Path.home() / ".toolfinder" / "preferences.json"

    def test_corrupt_file_raises(self, file_storage):
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("[1, 2", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            file_storage.get_item("favorites")

    def test_non_object_file_raises(self, file_storage):
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a JSON object"):
            file_storage.get_item("favorites")

    def test_store_survives_corrupt_file(self, file_storage):
        """The preference store turns file errors into empty state."""
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("garbage", encoding="utf-8")
        events = []

        store = PreferenceStore(file_storage, on_event=events.append)
        assert store.favorites() == []
        assert {e.kind for e in events} == {PreferenceEventKind.LOAD_FAILED}

    def test_write_replaces_corrupt_file(self, file_storage):
        """Saving after a corrupt file starts a fresh document."""
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("{not json", encoding="utf-8")

        store = PreferenceStore(file_storage)
        store.toggle_favorite("json-formatter")

        assert PreferenceStore(file_storage).favorites() == ["json-formatter"]
        backup = file_storage.path.with_suffix(".json.backup")
        assert backup.read_text(encoding="utf-8") == "{not json"

    def test_saves_keep_working_after_corruption(self, file_storage):
        """Clearing and re-adding both persist once the file was replaced."""
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("{not json", encoding="utf-8")
        events = []

        store = PreferenceStore(file_storage, on_event=events.append)
        store.toggle_favorite("a")
        store.clear()
        store.toggle_favorite("b")

        assert PreferenceStore(file_storage).favorites() == ["b"]
        assert PreferenceEventKind.SAVE_FAILED not in {e.kind for e in events}

    def test_remove_replaces_non_object_file(self, file_storage):
        file_storage.config_dir.mkdir(parents=True)
        file_storage.path.write_text("[1, 2]", encoding="utf-8")

        file_storage.remove_item("favorites")
        file_storage.set_item("favorites", '["a"]')
        assert file_storage.get_item("favorites") == '["a"]'

    def test_store_round_trip(self, file_storage):
        PreferenceStore(file_storage).toggle_favorite("json-formatter")
        assert PreferenceStore(file_storage).favorites() == ["json-formatter"]


class TestRecentSearches:
    """Tests for the search history list."""

    @pytest.fixture
    def history(self, storage):
        return RecentSearches(storage)

    def test_add_most_recent_first(self, history):
        history.add("json")
        history.add("hash")
        assert history.get() == ["hash", "json"]

    def test_case_insensitive_dedup(self, history):
        history.add("json")
        history.add("hash")
        assert history.add("JSON") == ["JSON", "hash"]

    def test_blank_ignored(self, history):
        history.add("json")
        assert history.add("   ") == ["json"]
        assert history.add("") == ["json"]

    def test_capped(self, storage):
        history = RecentSearches(storage, max_items=2)
        for query in ["a", "b", "c"]:
            history.add(query)
        assert history.get() == ["c", "b"]

    def test_remove(self, history):
        history.add("json")
        history.add("hash")
        assert history.remove("Json") == ["hash"]

    def test_clear(self, storage, history):
        history.add("json")
        history.clear()
        assert history.get() == []
        assert "recentSearches" not in storage

    def test_shared_storage(self, storage):
        RecentSearches(storage).add("json")
        assert RecentSearches(storage).get() == ["json"]

    def test_corrupt_history(self):
        events = []
        history = RecentSearches(
            InMemoryStorage({"recentSearches": "nope"}), on_event=events.append
        )
        assert history.get() == []
        assert events[0].kind is PreferenceEventKind.LOAD_FAILED

    def test_non_string_entries_dropped(self):
        history = RecentSearches(InMemoryStorage({"recentSearches": '["a", 1]'}))
        assert history.get() == ["a"]

    def test_clear_failure_reported(self):
        class NoRemove(InMemoryStorage):
            def remove_item(self, key):
                raise OSError("read-only")

        events = []
        RecentSearches(NoRemove(), on_event=events.append).clear()
        assert events[0].kind is PreferenceEventKind.CLEAR_FAILED
