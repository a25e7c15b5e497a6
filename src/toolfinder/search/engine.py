# toolfinder/search/engine.py
"""Multi-pass tool search with typo tolerance and personalization.

Each pass proposes ``(tool id, match tag, score)`` candidates. Candidates for
the same tool are merged by keeping the highest score and accumulating tags.
After all passes, featured/recent/favorite boosts are multiplied in and the
results are ranked.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable

from toolfinder.catalog.models import Catalog, ToolRecord
from toolfinder.config.defaults import (
    DESCRIPTION_WORD_SCORE,
    FUZZY_DESCRIPTION_WEIGHT,
    FUZZY_KEYWORD_WEIGHT,
    FUZZY_NAME_WEIGHT,
    ID_CONTAINS_SCORE,
    ID_EXACT_SCORE,
    KEYWORD_CONTAINS_SCORE,
    KEYWORD_EXACT_SCORE,
    KEYWORD_PREFIX_SCORE,
    MULTI_WORD_DESCRIPTION_BASE,
    MULTI_WORD_DESCRIPTION_SCALE,
    MULTI_WORD_FRACTION_THRESHOLD,
    MULTI_WORD_NAME_BASE,
    MULTI_WORD_NAME_SCALE,
    NAME_CONTAINS_SCORE,
    NAME_EXACT_SCORE,
    NAME_PREFIX_SCORE,
    NAME_WORD_SCORE,
    NGRAM_SCORE,
)
from toolfinder.preferences.store import PreferenceState, PreferenceStore
from toolfinder.search.fuzzy import FuzzyMatcher, Matcher
from toolfinder.search.index import SearchIndex, build_index
from toolfinder.search.models import (
    MatchField,
    SearchOptions,
    SearchResult,
    SearchSuggestion,
)
from toolfinder.search.scoring import compare_results, tier_score
from toolfinder.search.suggestions import RankedSuggestionStrategy, SuggestionStrategy
from toolfinder.search.text import ngrams, normalize, tokenize

logger = logging.getLogger(__name__)


class OptionsUpdateError(RuntimeError):
    """Raised when options are changed on a live engine."""


class ToolSearchEngine:
    """Search engine over one tool catalog.

    The engine is constructed explicitly by whatever composes the
    application; there is no shared module-level instance.

    Args:
        catalog: Tools to index (a ``Catalog`` or any iterable of records)
        preferences: Store for recents/favorites; in-memory if omitted
        options: Tuning options; ``SearchOptions()`` if omitted
        matcher: Fuzzy matcher strategy
        suggestion_strategy: Strategy producing ``get_suggestions`` output
    """

    def __init__(
        self,
        catalog: Catalog | Iterable[ToolRecord] | None = None,
        *,
        preferences: PreferenceStore | None = None,
        options: SearchOptions | None = None,
        matcher: Matcher | None = None,
        suggestion_strategy: SuggestionStrategy | None = None,
    ) -> None:
        self._options = options or SearchOptions()
        self._matcher: Matcher = matcher or FuzzyMatcher()
        self._suggestion_strategy: SuggestionStrategy = (
            suggestion_strategy or RankedSuggestionStrategy()
        )
        self._preferences = preferences or PreferenceStore()
        self._index = build_index(catalog if catalog is not None else [])

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def index(self) -> SearchIndex:
        return self._index

    @property
    def options(self) -> SearchOptions:
        return self._options

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    @property
    def preferences(self) -> PreferenceStore:
        return self._preferences

    @property
    def catalog_size(self) -> int:
        return len(self._index)

    def get_item(self, tool_id: str) -> ToolRecord | None:
        """Look up a tool in the current catalog."""
        return self._index.by_id.get(tool_id)

    # =========================================================================
    # Catalog / options
    # =========================================================================

    def update_catalog(self, catalog: Catalog | Iterable[ToolRecord]) -> None:
        """Rebuild every index from ``catalog``.

        The new index is built completely before it replaces the old one.
        Recents and favorites are kept.
        """
        new_index = build_index(catalog)
        self._index = new_index
        logger.info("Search catalog updated: %d tools", len(new_index))

    def update_options(self, options: SearchOptions) -> None:
        """Always raises.

        The engine keeps only derived indices, not the catalog it was built
        from, so it cannot re-derive itself under new options. Construct a
        new engine instead.
        """
        raise OptionsUpdateError(
            "Search options cannot be changed on an existing engine; "
            "create a new ToolSearchEngine with the desired options"
        )

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, query: str, limit: int | None = None) -> list[SearchResult]:
        """Rank catalog tools against ``query``.

        Args:
            query: Free text; empty or whitespace-only returns []
            limit: Optional maximum number of results

        Returns:
            Results sorted by descending relevance, ties by name
        """
        if not query or not query.strip():
            return []

        q = normalize(query)
        if not q:
            return []

        index = self._index
        words = tokenize(q)
        results: dict[str, SearchResult] = {}

        self._match_ids(q, index, results)
        self._match_names(q, index, results)
        self._match_keywords(q, index, results)
        if len(words) >= 2:
            self._match_multi_word(words, index, results)
        self._match_index_words(words, index, results)
        if len(q) >= 3:
            self._match_ngrams(q, index, results)
        self._match_fuzzy(q, index, results)

        self._apply_boosts(results.values(), self._preferences.snapshot())

        ranked = sorted(results.values(), key=cmp_to_key(compare_results))
        logger.debug("Search %r -> %d results", query, len(ranked))
        if limit is not None:
            return ranked[:limit]
        return ranked

    @staticmethod
    def _add(
        results: dict[str, SearchResult],
        index: SearchIndex,
        tool_id: str,
        tag: MatchField,
        score: float,
    ) -> None:
        existing = results.get(tool_id)
        if existing is None:
            results[tool_id] = SearchResult(
                item=index.by_id[tool_id],
                relevance_score=score,
                matched_fields=[tag.value],
            )
        else:
            existing.add_match(tag.value, score)

    def _match_ids(
        self, q: str, index: SearchIndex, results: dict[str, SearchResult]
    ) -> None:
        for tool_id in index.by_id:
            score = tier_score(
                q, normalize(tool_id), ID_EXACT_SCORE, None, ID_CONTAINS_SCORE
            )
            if score is not None:
                self._add(results, index, tool_id, MatchField.ID, score)

    def _match_names(
        self, q: str, index: SearchIndex, results: dict[str, SearchResult]
    ) -> None:
        for tool_id, record in index.by_id.items():
            score = tier_score(
                q,
                normalize(record.name),
                NAME_EXACT_SCORE,
                NAME_PREFIX_SCORE,
                NAME_CONTAINS_SCORE,
            )
            if score is not None:
                self._add(results, index, tool_id, MatchField.NAME, score)

    def _match_keywords(
        self, q: str, index: SearchIndex, results: dict[str, SearchResult]
    ) -> None:
        for keyword, tool_ids in index.keyword_index.items():
            score = tier_score(
                q,
                keyword,
                KEYWORD_EXACT_SCORE,
                KEYWORD_PREFIX_SCORE,
                KEYWORD_CONTAINS_SCORE,
            )
            if score is None:
                continue
            for tool_id in tool_ids:
                self._add(results, index, tool_id, MatchField.KEYWORD, score)

    def _match_multi_word(
        self,
        words: list[str],
        index: SearchIndex,
        results: dict[str, SearchResult],
    ) -> None:
        """Most of the query words appear in the name (or description)."""
        for tool_id, record in index.by_id.items():
            name = normalize(record.name)
            name_fraction = sum(1 for w in words if w in name) / len(words)
            if name_fraction >= MULTI_WORD_FRACTION_THRESHOLD:
                score = MULTI_WORD_NAME_BASE + MULTI_WORD_NAME_SCALE * name_fraction
                self._add(results, index, tool_id, MatchField.NAME, score)
                continue

            description = normalize(record.description)
            desc_fraction = sum(1 for w in words if w in description) / len(words)
            if desc_fraction >= MULTI_WORD_FRACTION_THRESHOLD:
                score = (
                    MULTI_WORD_DESCRIPTION_BASE
                    + MULTI_WORD_DESCRIPTION_SCALE * desc_fraction
                )
                self._add(results, index, tool_id, MatchField.DESCRIPTION, score)

    def _match_index_words(
        self,
        words: list[str],
        index: SearchIndex,
        results: dict[str, SearchResult],
    ) -> None:
        for word in words:
            for tool_id in index.name_words.get(word, ()):
                self._add(results, index, tool_id, MatchField.NAME, NAME_WORD_SCORE)
            for tool_id in index.description_words.get(word, ()):
                self._add(
                    results,
                    index,
                    tool_id,
                    MatchField.DESCRIPTION,
                    DESCRIPTION_WORD_SCORE,
                )

    def _match_ngrams(
        self, q: str, index: SearchIndex, results: dict[str, SearchResult]
    ) -> None:
        for gram in set(ngrams(q)):
            for tool_id in index.ngram_index.get(gram, ()):
                self._add(results, index, tool_id, MatchField.NGRAM, NGRAM_SCORE)

    def _match_fuzzy(
        self, q: str, index: SearchIndex, results: dict[str, SearchResult]
    ) -> None:
        """Fuzzy pass for tools the index passes missed or scored weakly."""
        threshold = self._options.fuzzy_threshold
        for tool_id, record in index.by_id.items():
            existing = results.get(tool_id)
            if existing is not None and existing.relevance_score >= threshold:
                continue

            name_score = self._matcher.match(q, record.name)
            if name_score is not None:
                self._add(
                    results,
                    index,
                    tool_id,
                    MatchField.NAME_FUZZY,
                    name_score * FUZZY_NAME_WEIGHT,
                )

            desc_score = self._matcher.match(q, record.description)
            if desc_score is not None:
                self._add(
                    results,
                    index,
                    tool_id,
                    MatchField.DESCRIPTION_FUZZY,
                    desc_score * FUZZY_DESCRIPTION_WEIGHT,
                )

            keyword_scores = [
                s
                for s in (self._matcher.match(q, k) for k in record.keywords)
                if s is not None
            ]
            if keyword_scores:
                self._add(
                    results,
                    index,
                    tool_id,
                    MatchField.KEYWORD_FUZZY,
                    max(keyword_scores) * FUZZY_KEYWORD_WEIGHT,
                )

    # =========================================================================
    # Personalization
    # =========================================================================

    def personalization_boost(
        self, record: ToolRecord, state: PreferenceState | None = None
    ) -> float:
        """Combined featured/recency/favorite multiplier for ``record``."""
        if state is None:
            state = self._preferences.snapshot()
        boosts = self._options.boosts

        boost = 1.0
        if record.featured:
            boost *= boosts.featured
        if record.id in state.recently_used:
            boost *= boosts.recency_boost(state.recently_used.index(record.id))
        if record.id in state.favorites:
            boost *= boosts.favorite
        return boost

    def _apply_boosts(
        self, results: Iterable[SearchResult], state: PreferenceState
    ) -> None:
        for result in results:
            result.relevance_score *= self.personalization_boost(result.item, state)

    # =========================================================================
    # Suggestions
    # =========================================================================

    def get_suggestions(self, query: str) -> list[SearchSuggestion]:
        """Typed suggestions for incremental typing."""
        return self._suggestion_strategy.suggest(self, query)

    # =========================================================================
    # Preferences
    # =========================================================================

    def add_to_recently_used(self, tool_id: str) -> None:
        self._preferences.add_recently_used(tool_id)

    def toggle_favorite(self, tool_id: str) -> bool:
        """Flip favorite status. Returns True if ``tool_id`` is now a favorite."""
        return self._preferences.toggle_favorite(tool_id)

    def clear_history(self) -> None:
        """Forget recents and favorites."""
        self._preferences.clear()

    def get_recently_used(self) -> list[str]:
        return self._preferences.recently_used()

    def get_favorites(self) -> list[str]:
        return self._preferences.favorites()

    def get_recently_used_utilities(self) -> list[ToolRecord]:
        """Recently used tools still present in the catalog."""
        return self._resolve(self._preferences.recently_used())

    def get_favorite_utilities(self) -> list[ToolRecord]:
        """Favorite tools still present in the catalog."""
        return self._resolve(self._preferences.favorites())

    def _resolve(self, tool_ids: list[str]) -> list[ToolRecord]:
        by_id = self._index.by_id
        return [by_id[i] for i in tool_ids if i in by_id]
