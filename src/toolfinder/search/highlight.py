# toolfinder/search/highlight.py
"""Locate query terms inside display text for highlighting."""

from __future__ import annotations

import re

from toolfinder.search.text import normalize

Span = tuple[int, int]


def find_match_spans(text: str, query: str) -> list[Span]:
    """Half-open ``(start, end)`` ranges of ``text`` matching any query word.

    Matching ignores case. Overlapping or touching ranges are merged, and the
    result is sorted by start.
    """
    if not text or not query:
        return []

    lowered = text.lower()
    spans: list[Span] = []
    for word in set(normalize(query).split()):
        for match in re.finditer(re.escape(word), lowered):
            spans.append((match.start(), match.end()))

    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    return merged


def split_highlighted(text: str, spans: list[Span]) -> list[tuple[str, bool]]:
    """Cut ``text`` into ``(segment, is_match)`` pieces along ``spans``.

    Spans must be sorted and non-overlapping, as returned by
    ``find_match_spans``. Joining the segments gives back ``text``.
    """
    segments: list[tuple[str, bool]] = []
    cursor = 0
    for start, end in spans:
        if start > cursor:
            segments.append((text[cursor:start], False))
        if end > start:
            segments.append((text[start:end], True))
        cursor = max(cursor, end)
    if cursor < len(text):
        segments.append((text[cursor:], False))
    return segments
