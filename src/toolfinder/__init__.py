# toolfinder/__init__.py
"""Tool catalog search with fuzzy matching, suggestions and personalization."""

from toolfinder.catalog import (
    Catalog,
    CategoryInfo,
    CategoryType,
    ToolRecord,
    default_catalog,
)
from toolfinder.preferences import (
    InMemoryStorage,
    JsonFileStorage,
    PreferenceEvent,
    PreferenceEventKind,
    PreferenceStore,
    RecentSearches,
    StorageProvider,
)
from toolfinder.search import (
    OptionsUpdateError,
    SearchOptions,
    SearchResult,
    SearchSuggestion,
    SuggestionType,
    ToolSearchEngine,
)

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CategoryInfo",
    "CategoryType",
    "InMemoryStorage",
    "JsonFileStorage",
    "OptionsUpdateError",
    "PreferenceEvent",
    "PreferenceEventKind",
    "PreferenceStore",
    "RecentSearches",
    "SearchOptions",
    "SearchResult",
    "SearchSuggestion",
    "StorageProvider",
    "SuggestionType",
    "ToolRecord",
    "ToolSearchEngine",
    "default_catalog",
]
