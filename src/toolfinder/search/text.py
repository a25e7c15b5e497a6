# toolfinder/search/text.py
"""Text normalization shared by indexing, matching and ranking.

Every comparison in the engine goes through ``normalize`` so that the index
and the query are always tokenized the same way.
"""

from __future__ import annotations

import re

from toolfinder.config.defaults import (
    DEFAULT_MIN_TOKEN_LENGTH,
    DEFAULT_NGRAM_MAX_SIZE,
    DEFAULT_NGRAM_MIN_SIZE,
)

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Words too common to say anything about a tool
STOPWORDS: frozenset[str] = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "from",
        "are",
        "not",
        "have",
        "has",
        "was",
        "were",
        "but",
        "you",
        "your",
        "its",
        "into",
        "other",
    }
)


def normalize(text: str) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace.

    Examples:
        "JSON Formatter" -> "json formatter"
        "Base64 Encoder/Decoder" -> "base64 encoder decoder"
        "  json-formatter  " -> "json formatter"
    """
    if not text:
        return ""
    text = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Split text into significant words.

    Tokens shorter than three characters and stopwords are dropped.
    Order is preserved and duplicates are kept.
    """
    return [
        token
        for token in normalize(text).split()
        if len(token) >= DEFAULT_MIN_TOKEN_LENGTH and token not in STOPWORDS
    ]


def ngrams(
    text: str,
    min_size: int = DEFAULT_NGRAM_MIN_SIZE,
    max_size: int = DEFAULT_NGRAM_MAX_SIZE,
) -> list[str]:
    """Every contiguous substring of the normalized text per window size.

    Returns an empty list when the normalized text is shorter than
    ``min_size``. Duplicates are not removed.
    """
    normalized = normalize(text)
    if len(normalized) < min_size:
        return []

    grams: list[str] = []
    for size in range(min_size, max_size + 1):
        for start in range(len(normalized) - size + 1):
            grams.append(normalized[start : start + size])
    return grams
