# toolfinder/search/models.py
"""Result types and tunable options for the search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from toolfinder.catalog.models import ToolRecord
from toolfinder.config.defaults import (
    DEFAULT_BACKFILL_BELOW,
    DEFAULT_BACKFILL_MAX_QUERY_LENGTH,
    DEFAULT_BACKFILL_SCORE,
    DEFAULT_FAVORITE_BOOST,
    DEFAULT_FEATURED_BOOST,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_RECENT,
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MAX_UTILITY_SUGGESTIONS,
    DEFAULT_RECENCY_BOOST,
)
from toolfinder.config.env_vars import EnvVar, get_env_float, get_env_int


class SuggestionType(str, Enum):
    """Kinds of suggestion, in display priority order."""

    UTILITY = "utility"
    CATEGORY = "category"
    KEYWORD = "keyword"

    @property
    def order(self) -> int:
        """Sort rank: utilities first, keywords last."""
        return list(SuggestionType).index(self)


class MatchField(str, Enum):
    """Tags recorded in ``SearchResult.matched_fields``."""

    ID = "id"
    NAME = "name"
    KEYWORD = "keyword"
    DESCRIPTION = "description"
    NGRAM = "ngram"
    NAME_FUZZY = "name_fuzzy"
    DESCRIPTION_FUZZY = "description_fuzzy"
    KEYWORD_FUZZY = "keyword_fuzzy"


@dataclass
class SearchResult:
    """A ranked tool with the reasons it matched."""

    item: ToolRecord
    relevance_score: float
    matched_fields: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def name(self) -> str:
        return self.item.name

    def add_match(self, tag: str, score: float) -> None:
        """Keep the best score seen and record ``tag`` once."""
        if score > self.relevance_score:
            self.relevance_score = score
        if tag not in self.matched_fields:
            self.matched_fields.append(tag)


@dataclass(frozen=True)
class SearchSuggestion:
    """A lightweight hint shown while the user types."""

    type: SuggestionType
    text: str
    item: ToolRecord | None = None

    @property
    def key(self) -> tuple[SuggestionType, str]:
        """Uniqueness key."""
        return (self.type, self.text)


class BoostConfig(BaseModel):
    """Multiplicative personalization boosts.

    The defaults are empirical; hosts may tune them.
    """

    featured: float = Field(default=DEFAULT_FEATURED_BOOST, ge=1.0)
    favorite: float = Field(default=DEFAULT_FAVORITE_BOOST, ge=1.0)
    recency: float = Field(
        default=DEFAULT_RECENCY_BOOST,
        ge=0.0,
        description="Extra weight for the most recently used tool",
    )
    recency_window: int = Field(default=DEFAULT_MAX_RECENT, gt=0)

    model_config = {"frozen": True}

    def recency_boost(self, position: int) -> float:
        """Boost for a tool at ``position`` in the recently-used list.

        Position 0 (most recent) gets the full ``1 + recency``; older
        positions decay linearly but never drop below 1.
        """
        window = self.recency_window
        steps = window - min(position, window - 1)
        return 1 + self.recency * steps / window


class SearchOptions(BaseModel):
    """Engine options. Immutable after creation."""

    fuzzy_threshold: float = Field(
        default=DEFAULT_FUZZY_THRESHOLD,
        ge=0.0,
        description="Items scoring below this get a fuzzy fallback pass",
    )
    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, gt=0)
    max_utility_suggestions: int = Field(default=DEFAULT_MAX_UTILITY_SUGGESTIONS, gt=0)
    backfill_below: int = Field(
        default=DEFAULT_BACKFILL_BELOW,
        ge=0,
        description="Backfill featured tools when fewer suggestions than this",
    )
    backfill_max_query_length: int = Field(
        default=DEFAULT_BACKFILL_MAX_QUERY_LENGTH, ge=0
    )
    backfill_score: float = Field(default=DEFAULT_BACKFILL_SCORE, ge=0.0)
    boosts: BoostConfig = Field(default_factory=BoostConfig)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "SearchOptions":
        """Defaults overlaid with any TOOLFINDER_* environment overrides."""
        overrides: dict[str, float | int] = {}
        max_suggestions = get_env_int(EnvVar.MAX_SUGGESTIONS)
        if max_suggestions is not None:
            overrides["max_suggestions"] = max_suggestions
        fuzzy_threshold = get_env_float(EnvVar.FUZZY_THRESHOLD)
        if fuzzy_threshold is not None:
            overrides["fuzzy_threshold"] = fuzzy_threshold
        return cls(**overrides)
