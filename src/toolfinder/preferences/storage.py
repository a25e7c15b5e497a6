# toolfinder/preferences/storage.py
"""Key/value storage backends for persisted preferences.

The engine never detects its environment; the host picks a backend and
passes it in.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from toolfinder.config.defaults import DEFAULT_PREFERENCES_DIR, DEFAULT_PREFERENCES_FILE
from toolfinder.config.env_vars import EnvVar, get_env

logger = logging.getLogger(__name__)


class StorageProvider(Protocol):
    """String key/value storage, modelled on browser local storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class InMemoryStorage:
    """Dict-backed storage for tests and non-interactive hosts."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items


class JsonFileStorage:
    """All keys stored as one JSON object in a file.

    Read errors propagate from ``get_item``; ``PreferenceStore`` is the
    boundary that turns them into empty state. Writes replace a corrupt
    document instead of failing on it.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize file storage.

        Args:
            config_dir: Directory holding preferences.json. Defaults to
                ``TOOLFINDER_PREFERENCES_DIR`` or ~/.toolfinder
        """
        if config_dir is None:
            env_dir = get_env(EnvVar.PREFERENCES_DIR)
            config_dir = Path(env_dir) if env_dir else DEFAULT_PREFERENCES_DIR
        self.config_dir = config_dir.expanduser()
        self.path = self.config_dir / DEFAULT_PREFERENCES_FILE

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def _read_for_update(self) -> dict[str, str]:
        """Current document, moving an unreadable file aside first.

        The broken file is kept as ``preferences.json.backup`` and writing
        continues from an empty document.
        """
        try:
            return self._read()
        except ValueError as exc:  # includes JSONDecodeError, UnicodeDecodeError
            backup = self.path.with_suffix(".json.backup")
            logger.warning(
                "Corrupt preferences file %s (%s), moved to %s", self.path, exc, backup
            )
            self.path.replace(backup)
            return {}

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_for_update()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read_for_update()
        if key in data:
            del data[key]
            self._write(data)
        logger.debug("Removed preference key %s", key)
