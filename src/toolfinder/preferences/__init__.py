"""Persisted personalization state: favorites, recents and search history."""

from toolfinder.preferences.events import (
    EventListener,
    PreferenceEvent,
    PreferenceEventKind,
)
from toolfinder.preferences.recent_searches import RecentSearches
from toolfinder.preferences.storage import (
    InMemoryStorage,
    JsonFileStorage,
    StorageProvider,
)
from toolfinder.preferences.store import PreferenceState, PreferenceStore

__all__ = [
    "EventListener",
    "InMemoryStorage",
    "JsonFileStorage",
    "PreferenceEvent",
    "PreferenceEventKind",
    "PreferenceState",
    "PreferenceStore",
    "RecentSearches",
    "StorageProvider",
]
