# toolfinder/preferences/store.py
"""Recently used and favorite tools, persisted through a StorageProvider."""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel, Field

from toolfinder.config.defaults import (
    DEFAULT_MAX_RECENT,
    FAVORITES_KEY,
    RECENTLY_USED_KEY,
)
from toolfinder.preferences.events import EventListener, PreferenceEventKind, emit
from toolfinder.preferences.storage import InMemoryStorage, StorageProvider

logger = logging.getLogger(__name__)


class PreferenceState(BaseModel):
    """Snapshot of the user's personalization data."""

    recently_used: tuple[str, ...] = Field(
        default=(), description="Tool ids, most recent first"
    )
    favorites: tuple[str, ...] = Field(default=(), description="Favorite tool ids")

    model_config = {"frozen": True}


class PreferenceStore:
    """Owns the recently-used and favorites lists.

    State is loaded once at construction and written back after every
    mutation. Unreadable or malformed data loads as an empty list and failed
    writes leave the in-memory state intact; neither raises.
    """

    def __init__(
        self,
        storage: StorageProvider | None = None,
        *,
        max_recent: int = DEFAULT_MAX_RECENT,
        on_event: EventListener | None = None,
    ) -> None:
        if max_recent <= 0:
            raise ValueError(f"max_recent must be positive, got {max_recent}")
        self._storage: StorageProvider = (
            storage if storage is not None else InMemoryStorage()
        )
        self._max_recent = max_recent
        self._on_event = on_event

        self._recently_used = self._load_ids(RECENTLY_USED_KEY)[:max_recent]
        self._favorites = self._load_ids(FAVORITES_KEY)

    @property
    def max_recent(self) -> int:
        return self._max_recent

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def snapshot(self) -> PreferenceState:
        """Immutable copy of the current state."""
        return PreferenceState(
            recently_used=tuple(self._recently_used),
            favorites=tuple(self._favorites),
        )

    def recently_used(self) -> list[str]:
        return list(self._recently_used)

    def favorites(self) -> list[str]:
        return list(self._favorites)

    def is_favorite(self, tool_id: str) -> bool:
        return tool_id in self._favorites

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_recently_used(self, tool_id: str) -> None:
        """Move ``tool_id`` to the front, dropping the oldest past the cap.

        Tool ids are exact catalog keys, so duplicates are found with a
        case-sensitive comparison. Search history (``RecentSearches``) is
        the case-insensitive list.
        """
        ids = [i for i in self._recently_used if i != tool_id]
        ids.insert(0, tool_id)
        self._recently_used = ids[: self._max_recent]
        self._save(RECENTLY_USED_KEY, self._recently_used)

    def toggle_favorite(self, tool_id: str) -> bool:
        """Add or remove a favorite. Returns True if it is now a favorite."""
        if tool_id in self._favorites:
            self._favorites = [i for i in self._favorites if i != tool_id]
            added = False
        else:
            self._favorites = [*self._favorites, tool_id]
            added = True
        self._save(FAVORITES_KEY, self._favorites)
        return added

    def clear(self) -> None:
        """Forget both lists."""
        self._recently_used = []
        self._favorites = []
        self._save(RECENTLY_USED_KEY, self._recently_used)
        self._save(FAVORITES_KEY, self._favorites)

    # ------------------------------------------------------------------
    # Persistence (private)
    # ------------------------------------------------------------------

    def _load_ids(self, key: str) -> list[str]:
        try:
            raw = self._storage.get_item(key)
            if raw is None:
                return []
            data = json.loads(raw)
            if not isinstance(data, list) or not all(isinstance(i, str) for i in data):
                raise ValueError(f"expected a JSON array of strings, got {raw[:50]!r}")
        except Exception as exc:
            emit(self._on_event, PreferenceEventKind.LOAD_FAILED, key, exc)
            return []
        # Keep first occurrence of any duplicate
        return list(dict.fromkeys(data))

    def _save(self, key: str, ids: list[str]) -> None:
        try:
            self._storage.set_item(key, json.dumps(ids))
        except Exception as exc:
            emit(self._on_event, PreferenceEventKind.SAVE_FAILED, key, exc)
        else:
            logger.debug("Saved %d ids under %s", len(ids), key)
