# toolfinder/preferences/events.py
"""Structured events for preference storage failures.

Storage errors never reach the caller of a search operation. They are logged
and, when the host registers a listener, delivered as ``PreferenceEvent``
objects so the host can decide what to show.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class PreferenceEventKind(str, Enum):
    """What went wrong."""

    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"
    CLEAR_FAILED = "clear_failed"


class PreferenceEvent(BaseModel):
    """A storage failure that was absorbed at the preference boundary."""

    kind: PreferenceEventKind
    key: str
    error: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}


EventListener = Callable[[PreferenceEvent], None]


def emit(
    listener: EventListener | None,
    kind: PreferenceEventKind,
    key: str,
    exc: BaseException,
) -> PreferenceEvent:
    """Log a storage failure and hand it to ``listener`` if there is one."""
    event = PreferenceEvent(kind=kind, key=key, error=f"{type(exc).__name__}: {exc}")
    if kind is PreferenceEventKind.LOAD_FAILED:
        logger.warning("Failed to load preference %s: %s", key, exc)
    else:
        logger.error("Preference %s failed for %s: %s", kind.value, key, exc)

    if listener is not None:
        listener(event)
    return event
