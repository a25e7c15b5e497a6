# toolfinder/search/fuzzy.py
"""
Typo-tolerant matching of a query against a single target string.

Branches are tried in order and the first one that applies decides the score:

1. Containment: whole-word 1.0, partial 0.9
2. Multi-word queries: fraction of query words found in the target
3. Very short queries (<= 2 chars) stop here
4. Damerau-Levenshtein distance against the whole target, then its words
5. Greedy character-subsequence fallback

``None`` means "do not consider"; a float is a real (possibly weak) match.
"""

from __future__ import annotations

import re
from typing import Protocol

from toolfinder.search.text import normalize


class Matcher(Protocol):
    """Anything the engine can use to fuzzy-match a query against text."""

    def match(self, query: str, target: str) -> float | None: ...


def damerau_levenshtein(s1: str, s2: str) -> int:
    """Edit distance counting insertions, deletions, substitutions and
    adjacent transpositions at cost 1 each (optimal string alignment).

    Strings whose lengths differ by more than half the shorter length are
    reported as maximally distant without building the matrix.
    """
    if s1 == s2:
        return 0
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    shorter = min(len(s1), len(s2))
    if abs(len(s1) - len(s2)) > shorter / 2:
        return max(len(s1), len(s2))

    before_previous: list[int] = []
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i] + [0] * len(s2)
        for j, c2 in enumerate(s2, start=1):
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (c1 != c2),  # substitution
            )
            if i > 1 and j > 1 and c1 == s2[j - 2] and s1[i - 2] == c2:
                current[j] = min(current[j], before_previous[j - 2] + 1)
        before_previous, previous = previous, current

    return previous[-1]


class FuzzyMatcher:
    """Layered heuristic matcher used by the search engine."""

    # Containment
    WHOLE_WORD_SCORE = 1.0
    SUBSTRING_SCORE = 0.9

    # Multi-word queries
    MULTI_WORD_RATIO_WEIGHT = 0.7
    MULTI_WORD_EXACT_BONUS = 0.05
    MULTI_WORD_CAP = 0.95

    # Edit distance
    SHORT_QUERY_LENGTH = 2
    MIN_WORD_LENGTH = 4
    WHOLE_TARGET_WEIGHT = 0.6
    WORD_WEIGHT = 0.55

    # Subsequence fallback
    SEQUENCE_RUN_WEIGHT = 0.2
    SEQUENCE_LENGTH_PENALTY = 0.1
    SEQUENCE_MIN_SCORE = 0.5

    def match(self, query: str, target: str) -> float | None:
        """Score ``query`` against ``target``.

        Args:
            query: Raw search text
            target: Raw text to match against (name, description, keyword)

        Returns:
            Score in (0, 1], or None when the target should be ignored
        """
        q = normalize(query)
        t = normalize(target)
        if not q or not t:
            return None

        if q in t:
            if f" {q} " in f" {t} ":
                return self.WHOLE_WORD_SCORE
            return self.SUBSTRING_SCORE

        words = [w for w in q.split() if len(w) > 1]
        if len(words) >= 2:
            score = self._match_words(words, t)
            if score is not None:
                return score

        # Short queries only ever match by containment
        if len(q) <= self.SHORT_QUERY_LENGTH:
            return None

        score = self._match_edit_distance(q, t)
        if score is not None:
            return score

        return self._match_sequence(q, t)

    def _match_words(self, words: list[str], target: str) -> float | None:
        matched = 0
        exact = 0
        for word in words:
            if re.search(rf"\b{re.escape(word)}\b", target):
                matched += 1
                exact += 1
            elif word in target:
                matched += 1

        if not matched:
            return None
        score = (
            self.MULTI_WORD_RATIO_WEIGHT * (matched / len(words))
            + self.MULTI_WORD_EXACT_BONUS * exact
        )
        return min(self.MULTI_WORD_CAP, score)

    def _match_edit_distance(self, query: str, target: str) -> float | None:
        budget = len(query) // 3
        denominator = len(query) + 1

        distance = damerau_levenshtein(query, target)
        if distance <= budget:
            return self.WHOLE_TARGET_WEIGHT * (1 - distance / denominator)

        word_distances = [
            damerau_levenshtein(query, word)
            for word in target.split()
            if len(word) >= self.MIN_WORD_LENGTH
        ]
        if word_distances and min(word_distances) <= budget:
            return self.WORD_WEIGHT * (1 - min(word_distances) / denominator)
        return None

    def _match_sequence(self, query: str, target: str) -> float | None:
        """Greedy in-order character match with a bonus for consecutive runs."""
        matched = 0
        last_index = -1
        run = 0
        longest_run = 0

        for char in query:
            index = target.find(char, last_index + 1)
            if index == -1:
                continue
            run = run + 1 if matched and index == last_index + 1 else 1
            longest_run = max(longest_run, run)
            last_index = index
            matched += 1

        score = (
            matched / len(query)
            + self.SEQUENCE_RUN_WEIGHT * (longest_run / len(query))
            - min(
                self.SEQUENCE_LENGTH_PENALTY,
                self.SEQUENCE_LENGTH_PENALTY * len(query) / len(target),
            )
        )
        if score > self.SEQUENCE_MIN_SCORE:
            return min(1.0, score)
        return None
