# toolfinder/preferences/recent_searches.py
"""History of recent search queries."""

from __future__ import annotations

import json

from toolfinder.config.defaults import DEFAULT_MAX_RECENT_SEARCHES, RECENT_SEARCHES_KEY
from toolfinder.preferences.events import EventListener, PreferenceEventKind, emit
from toolfinder.preferences.storage import StorageProvider


class RecentSearches:
    """Most-recent-first list of queries, deduplicated case-insensitively.

    Unlike ``PreferenceStore`` this reads storage on every call, so several
    instances sharing a backend stay in sync.
    """

    def __init__(
        self,
        storage: StorageProvider,
        *,
        key: str = RECENT_SEARCHES_KEY,
        max_items: int = DEFAULT_MAX_RECENT_SEARCHES,
        on_event: EventListener | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._max_items = max_items
        self._on_event = on_event

    def get(self) -> list[str]:
        """Stored queries, or an empty list if storage is unreadable."""
        try:
            raw = self._storage.get_item(self._key)
            if raw is None:
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [q for q in data if isinstance(q, str)]
        except Exception as exc:
            emit(self._on_event, PreferenceEventKind.LOAD_FAILED, self._key, exc)
            return []

    def add(self, query: str) -> list[str]:
        """Put ``query`` at the front. Blank queries are ignored."""
        if not query or not query.strip():
            return self.get()

        lowered = query.lower()
        others = [q for q in self.get() if q.lower() != lowered]
        return self._store([query, *others][: self._max_items])

    def remove(self, query: str) -> list[str]:
        """Drop every entry equal to ``query`` ignoring case."""
        lowered = query.lower()
        return self._store([q for q in self.get() if q.lower() != lowered])

    def clear(self) -> None:
        try:
            self._storage.remove_item(self._key)
        except Exception as exc:
            emit(self._on_event, PreferenceEventKind.CLEAR_FAILED, self._key, exc)

    def _store(self, queries: list[str]) -> list[str]:
        try:
            self._storage.set_item(self._key, json.dumps(queries))
        except Exception as exc:
            emit(self._on_event, PreferenceEventKind.SAVE_FAILED, self._key, exc)
            return self.get()
        return queries
