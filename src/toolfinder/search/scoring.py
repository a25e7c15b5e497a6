# toolfinder/search/scoring.py
"""Shared scoring helpers for search passes and suggestion strategies."""

from __future__ import annotations

from toolfinder.config.defaults import SCORE_TIE_EPSILON
from toolfinder.search.models import SearchResult

Tier = tuple[float, float]


def tier_score(
    query: str,
    text: str,
    exact: Tier,
    prefix: Tier | None,
    contains: Tier,
) -> float | None:
    """Score normalized ``text`` by how it contains normalized ``query``.

    Each tier is a ``(base, boost)`` pair and the result is ``base * boost``.
    Passing ``prefix=None`` skips the prefix tier.
    """
    if text == query:
        return exact[0] * exact[1]
    if prefix is not None and text.startswith(query):
        return prefix[0] * prefix[1]
    if query in text:
        return contains[0] * contains[1]
    return None


def compare_results(a: SearchResult, b: SearchResult) -> int:
    """Higher score first; near-equal scores fall back to name order."""
    if abs(a.relevance_score - b.relevance_score) < SCORE_TIE_EPSILON:
        if a.name < b.name:
            return -1
        if a.name > b.name:
            return 1
        return 0
    return -1 if a.relevance_score > b.relevance_score else 1
