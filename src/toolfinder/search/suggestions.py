# toolfinder/search/suggestions.py
"""Typed suggestions (utility / category / keyword) for incremental typing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Protocol

from toolfinder.config.defaults import (
    DEFAULT_QUOTA_CATEGORIES,
    DEFAULT_QUOTA_KEYWORDS,
    DEFAULT_QUOTA_UTILITIES,
    FUZZY_KEYWORD_WEIGHT,
    KEYWORD_CONTAINS_SCORE,
    KEYWORD_EXACT_SCORE,
    KEYWORD_PREFIX_SCORE,
    QUOTA_TERM_CONTAINS_SCORE,
    QUOTA_TERM_EXACT_SCORE,
    QUOTA_TERM_FUZZY_MIN,
    QUOTA_TERM_FUZZY_WEIGHT,
    QUOTA_TERM_PREFIX_SCORE,
    QUOTA_UTILITY_CONTAINS_SCORE,
    QUOTA_UTILITY_EXACT_SCORE,
    QUOTA_UTILITY_FUZZY_WEIGHT,
    QUOTA_UTILITY_PREFIX_SCORE,
)
from toolfinder.search.fuzzy import Matcher
from toolfinder.search.index import SearchIndex
from toolfinder.search.models import SearchSuggestion, SuggestionType
from toolfinder.search.scoring import Tier, tier_score
from toolfinder.search.text import normalize

if TYPE_CHECKING:
    from toolfinder.search.engine import ToolSearchEngine

logger = logging.getLogger(__name__)

Scored = tuple[SearchSuggestion, float]


class SuggestionStrategy(Protocol):
    """Produces suggestions for a query against an engine's current state."""

    def suggest(
        self, engine: ToolSearchEngine, query: str
    ) -> list[SearchSuggestion]: ...


def filter_suggestions(
    suggestions: Iterable[SearchSuggestion],
) -> list[SearchSuggestion]:
    """Drop repeated ``(type, text)`` pairs and group by type.

    Utilities come first, then categories, then keywords; order within each
    group is preserved.
    """
    seen: set[tuple[SuggestionType, str]] = set()
    unique: list[SearchSuggestion] = []
    for suggestion in suggestions:
        if suggestion.key in seen:
            continue
        seen.add(suggestion.key)
        unique.append(suggestion)

    return [s for kind in SuggestionType for s in unique if s.type == kind]


def category_names(index: SearchIndex) -> list[str]:
    """Display names of categories that have at least one tool."""
    names = []
    for category_id in index.category_index:
        info = index.categories.get(category_id)
        names.append(info.name if info is not None else category_id.title())
    return names


def _score_term(
    query: str,
    text: str,
    matcher: Matcher,
    tiers: tuple[Tier, Tier, Tier],
    fuzzy_weight: float,
    fuzzy_min: float = 0.0,
) -> float | None:
    """Tiered containment score for ``text``, falling back to the matcher."""
    normalized = normalize(text)
    if not normalized:
        return None
    exact, prefix, contains = tiers
    score = tier_score(query, normalized, exact, prefix, contains)
    if score is not None:
        return score
    fuzzy = matcher.match(query, text)
    if fuzzy is not None and fuzzy > fuzzy_min:
        return fuzzy * fuzzy_weight
    return None


class _Collector:
    """Accumulates scored suggestions, ignoring repeated keys."""

    def __init__(self) -> None:
        self.scored: list[Scored] = []
        self._seen: set[tuple[SuggestionType, str]] = set()

    def __len__(self) -> int:
        return len(self.scored)

    def add(self, suggestion: SearchSuggestion, score: float) -> None:
        if suggestion.key in self._seen:
            return
        self._seen.add(suggestion.key)
        self.scored.append((suggestion, score))

    def texts(self, kind: SuggestionType) -> list[str]:
        return [normalize(s.text) for s, _ in self.scored if s.type == kind]


def _covered(keyword: str, utility_texts: list[str]) -> bool:
    """True if ``keyword`` already shows up inside a utility suggestion."""
    normalized = normalize(keyword)
    return len(normalized) > 2 and any(normalized in t for t in utility_texts)


# =============================================================================
# Ranked strategy
# =============================================================================


class RankedSuggestionStrategy:
    """Rank every candidate together by score.

    Utilities come from the full search, keywords and categories are scored
    like the keyword pass. With few hits on a short query, featured tools are
    backfilled at a low score.
    """

    TIERS = (KEYWORD_EXACT_SCORE, KEYWORD_PREFIX_SCORE, KEYWORD_CONTAINS_SCORE)

    def suggest(self, engine: ToolSearchEngine, query: str) -> list[SearchSuggestion]:
        if not query or not query.strip():
            return []
        q = normalize(query)
        if not q:
            return []

        options = engine.options
        index = engine.index
        collector = _Collector()

        for result in engine.search(query, limit=options.max_utility_suggestions):
            collector.add(
                SearchSuggestion(SuggestionType.UTILITY, result.name, result.item),
                result.relevance_score,
            )

        utility_texts = collector.texts(SuggestionType.UTILITY)
        for keyword in index.keywords:
            if _covered(keyword, utility_texts):
                continue
            score = _score_term(
                q, keyword, engine.matcher, self.TIERS, FUZZY_KEYWORD_WEIGHT
            )
            if score is not None:
                collector.add(SearchSuggestion(SuggestionType.KEYWORD, keyword), score)

        for name in category_names(index):
            score = _score_term(
                q, name, engine.matcher, self.TIERS, FUZZY_KEYWORD_WEIGHT
            )
            if score is not None:
                collector.add(SearchSuggestion(SuggestionType.CATEGORY, name), score)

        if (
            len(collector) < options.backfill_below
            and len(q) <= options.backfill_max_query_length
        ):
            for record in index.items:
                if record.featured:
                    collector.add(
                        SearchSuggestion(SuggestionType.UTILITY, record.name, record),
                        options.backfill_score,
                    )

        ranked = sorted(
            collector.scored,
            key=lambda pair: (
                -pair[1],
                pair[0].type.order,
                len(pair[0].text),
                pair[0].text,
            ),
        )
        suggestions = [s for s, _ in ranked[: options.max_suggestions]]
        logger.debug("Suggestions for %r: %d", query, len(suggestions))
        return suggestions


# =============================================================================
# Type-quota strategy
# =============================================================================


class TypeQuotaSuggestionStrategy:
    """Fixed number of slots per suggestion type.

    Utilities are scored by name only (with personalization boosts applied),
    keywords and categories by text. Each type keeps its best candidates up
    to its quota, and the combined list goes through ``filter_suggestions``.
    """

    UTILITY_TIERS = (
        QUOTA_UTILITY_EXACT_SCORE,
        QUOTA_UTILITY_PREFIX_SCORE,
        QUOTA_UTILITY_CONTAINS_SCORE,
    )
    TERM_TIERS = (
        QUOTA_TERM_EXACT_SCORE,
        QUOTA_TERM_PREFIX_SCORE,
        QUOTA_TERM_CONTAINS_SCORE,
    )

    def __init__(
        self,
        utilities: int = DEFAULT_QUOTA_UTILITIES,
        categories: int = DEFAULT_QUOTA_CATEGORIES,
        keywords: int = DEFAULT_QUOTA_KEYWORDS,
    ) -> None:
        if min(utilities, categories, keywords) < 0:
            raise ValueError("Suggestion quotas must not be negative")
        self.quotas = {
            SuggestionType.UTILITY: utilities,
            SuggestionType.CATEGORY: categories,
            SuggestionType.KEYWORD: keywords,
        }

    def suggest(self, engine: ToolSearchEngine, query: str) -> list[SearchSuggestion]:
        if not query or not query.strip():
            return []
        q = normalize(query)
        if not q:
            return []

        index = engine.index
        state = engine.preferences.snapshot()
        collector = _Collector()

        for record in index.items:
            score = _score_term(
                q,
                record.name,
                engine.matcher,
                self.UTILITY_TIERS,
                QUOTA_UTILITY_FUZZY_WEIGHT,
            )
            if score is not None:
                score *= engine.personalization_boost(record, state)
                collector.add(
                    SearchSuggestion(SuggestionType.UTILITY, record.name, record),
                    score,
                )

        utility_texts = collector.texts(SuggestionType.UTILITY)
        for keyword in index.keywords:
            if _covered(keyword, utility_texts):
                continue
            score = _score_term(
                q,
                keyword,
                engine.matcher,
                self.TERM_TIERS,
                QUOTA_TERM_FUZZY_WEIGHT,
                QUOTA_TERM_FUZZY_MIN,
            )
            if score is not None:
                collector.add(SearchSuggestion(SuggestionType.KEYWORD, keyword), score)

        for name in category_names(index):
            score = _score_term(
                q,
                name,
                engine.matcher,
                self.TERM_TIERS,
                QUOTA_TERM_FUZZY_WEIGHT,
                QUOTA_TERM_FUZZY_MIN,
            )
            if score is not None:
                collector.add(SearchSuggestion(SuggestionType.CATEGORY, name), score)

        ranked = sorted(collector.scored, key=lambda pair: -pair[1])
        picked: list[SearchSuggestion] = []
        for kind in SuggestionType:
            of_kind = [s for s, _ in ranked if s.type == kind]
            picked.extend(of_kind[: self.quotas[kind]])

        suggestions = filter_suggestions(picked)[: engine.options.max_suggestions]
        logger.debug("Quota suggestions for %r: %d", query, len(suggestions))
        return suggestions
