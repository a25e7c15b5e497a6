# toolfinder/search/__init__.py
"""Search engine, indices, fuzzy matching and suggestions."""

from toolfinder.search.engine import OptionsUpdateError, ToolSearchEngine
from toolfinder.search.fuzzy import FuzzyMatcher, Matcher, damerau_levenshtein
from toolfinder.search.highlight import find_match_spans, split_highlighted
from toolfinder.search.index import SearchIndex, build_index
from toolfinder.search.models import (
    BoostConfig,
    MatchField,
    SearchOptions,
    SearchResult,
    SearchSuggestion,
    SuggestionType,
)
from toolfinder.search.suggestions import (
    RankedSuggestionStrategy,
    SuggestionStrategy,
    TypeQuotaSuggestionStrategy,
    filter_suggestions,
)
from toolfinder.search.text import ngrams, normalize, tokenize

__all__ = [
    # Engine
    "OptionsUpdateError",
    "ToolSearchEngine",
    # Matching
    "FuzzyMatcher",
    "Matcher",
    "damerau_levenshtein",
    # Index and text
    "SearchIndex",
    "build_index",
    "ngrams",
    "normalize",
    "tokenize",
    # Models
    "BoostConfig",
    "MatchField",
    "SearchOptions",
    "SearchResult",
    "SearchSuggestion",
    "SuggestionType",
    # Suggestions
    "RankedSuggestionStrategy",
    "SuggestionStrategy",
    "TypeQuotaSuggestionStrategy",
    "filter_suggestions",
    # Highlighting
    "find_match_spans",
    "split_highlighted",
]
