# toolfinder/search/index.py
"""Inverted indices over the tool catalog."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from toolfinder.catalog.models import Catalog, CategoryInfo, ToolRecord
from toolfinder.search.text import ngrams, normalize, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchIndex:
    """Read-only lookup tables built from one catalog.

    A new catalog always produces a new ``SearchIndex``; nothing mutates an
    index after ``build_index`` returns it.
    """

    by_id: Mapping[str, ToolRecord] = field(default_factory=dict)
    name_words: Mapping[str, frozenset[str]] = field(default_factory=dict)
    description_words: Mapping[str, frozenset[str]] = field(default_factory=dict)
    keyword_index: Mapping[str, frozenset[str]] = field(default_factory=dict)
    category_index: Mapping[str, frozenset[str]] = field(default_factory=dict)
    ngram_index: Mapping[str, frozenset[str]] = field(default_factory=dict)
    keywords: tuple[str, ...] = ()
    categories: Mapping[str, CategoryInfo] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.by_id)

    @property
    def items(self) -> list[ToolRecord]:
        """All records in catalog order."""
        return list(self.by_id.values())


def _freeze(table: dict[str, set[str]]) -> dict[str, frozenset[str]]:
    return {key: frozenset(ids) for key, ids in table.items()}


def build_index(catalog: Catalog | Iterable[ToolRecord]) -> SearchIndex:
    """Build every index for ``catalog`` in one pass.

    Accepts either a ``Catalog`` (category display names are kept for
    suggestions) or a plain iterable of records.
    """
    if isinstance(catalog, Catalog):
        records: Iterable[ToolRecord] = catalog.tools
        categories = {info.id.value: info for info in catalog.categories}
    else:
        records = catalog
        categories = {}

    by_id: dict[str, ToolRecord] = {}
    name_words: dict[str, set[str]] = defaultdict(set)
    description_words: dict[str, set[str]] = defaultdict(set)
    keyword_index: dict[str, set[str]] = defaultdict(set)
    category_index: dict[str, set[str]] = defaultdict(set)
    ngram_index: dict[str, set[str]] = defaultdict(set)
    vocabulary: dict[str, None] = {}

    for record in records:
        if record.id in by_id:
            logger.warning("Duplicate tool id %r, later record wins", record.id)
            _drop_id(
                record.id,
                name_words,
                description_words,
                keyword_index,
                category_index,
                ngram_index,
            )
        by_id[record.id] = record
        category_index[record.category.value].add(record.id)

        grams = set(ngrams(record.name))
        for keyword in record.keywords:
            vocabulary.setdefault(keyword, None)
            normalized = normalize(keyword)
            if not normalized:
                continue
            keyword_index[normalized].add(record.id)
            if " " in normalized:
                for word in tokenize(normalized):
                    keyword_index[word].add(record.id)
            grams.update(ngrams(keyword))

        for word in tokenize(record.name):
            name_words[word].add(record.id)
        for word in tokenize(record.description):
            description_words[word].add(record.id)
        for gram in grams:
            ngram_index[gram].add(record.id)

    index = SearchIndex(
        by_id=by_id,
        name_words=_freeze(name_words),
        description_words=_freeze(description_words),
        keyword_index=_freeze(keyword_index),
        category_index=_freeze(category_index),
        ngram_index=_freeze(ngram_index),
        keywords=tuple(vocabulary),
        categories=categories,
    )
    logger.debug(
        "Built search index: %d tools, %d keywords, %d n-grams",
        len(by_id),
        len(keyword_index),
        len(ngram_index),
    )
    return index


def _drop_id(tool_id: str, *tables: dict[str, set[str]]) -> None:
    """Remove every posting for ``tool_id`` before its record is replaced."""
    for table in tables:
        for key in list(table):
            table[key].discard(tool_id)
            if not table[key]:
                del table[key]
