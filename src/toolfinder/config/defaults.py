"""Default configuration values - no more magic numbers!

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations

from pathlib import Path


# ================================================================
# Text Processing Defaults
# ================================================================

DEFAULT_MIN_TOKEN_LENGTH = 3
"""Tokens shorter than this are dropped by tokenize()."""

DEFAULT_NGRAM_MIN_SIZE = 3
"""Smallest n-gram window used for partial matching."""

DEFAULT_NGRAM_MAX_SIZE = 4
"""Largest n-gram window used for partial matching."""


# ================================================================
# Search Pass Scores
# ================================================================

# Exact id pass: (base score, boost)
ID_EXACT_SCORE = (1.0, 1.3)
ID_CONTAINS_SCORE = (0.95, 1.2)

# Name pass
NAME_EXACT_SCORE = (1.0, 1.25)
NAME_PREFIX_SCORE = (0.95, 1.2)
NAME_CONTAINS_SCORE = (0.9, 1.15)

# Keyword pass
KEYWORD_EXACT_SCORE = (1.0, 1.1)
KEYWORD_PREFIX_SCORE = (0.9, 1.05)
KEYWORD_CONTAINS_SCORE = (0.85, 1.0)

# Multi-word pass
MULTI_WORD_FRACTION_THRESHOLD = 0.7
MULTI_WORD_NAME_BASE = 0.7
MULTI_WORD_NAME_SCALE = 0.2
MULTI_WORD_DESCRIPTION_BASE = 0.6
MULTI_WORD_DESCRIPTION_SCALE = 0.15

# Per-word index lookups
NAME_WORD_SCORE = 0.8
DESCRIPTION_WORD_SCORE = 0.7

# N-gram pass
NGRAM_SCORE = 0.65

# Fuzzy fallback
DEFAULT_FUZZY_THRESHOLD = 0.7
"""Items scoring below this after the index passes get a fuzzy pass."""

FUZZY_NAME_WEIGHT = 0.9
FUZZY_DESCRIPTION_WEIGHT = 0.75
FUZZY_KEYWORD_WEIGHT = 0.85

SCORE_TIE_EPSILON = 0.001
"""Scores closer than this are treated as equal and ordered by name."""


# ================================================================
# Personalization Boosts
# ================================================================

DEFAULT_FEATURED_BOOST = 1.05
DEFAULT_FAVORITE_BOOST = 1.04
DEFAULT_RECENCY_BOOST = 0.03
"""Extra weight for the most recently used item; decays with position."""


# ================================================================
# Suggestion Defaults
# ================================================================

DEFAULT_MAX_SUGGESTIONS = 10
DEFAULT_MAX_UTILITY_SUGGESTIONS = 7
DEFAULT_BACKFILL_BELOW = 8
"""Backfill featured items when fewer suggestions than this were found."""

DEFAULT_BACKFILL_MAX_QUERY_LENGTH = 4
DEFAULT_BACKFILL_SCORE = 0.1

# Quotas for the type-quota suggestion strategy
DEFAULT_QUOTA_UTILITIES = 5
DEFAULT_QUOTA_CATEGORIES = 2
DEFAULT_QUOTA_KEYWORDS = 3

# Tiers for the type-quota suggestion strategy, as (base, boost) pairs
QUOTA_UTILITY_EXACT_SCORE = (1.0, 1.0)
QUOTA_UTILITY_PREFIX_SCORE = (0.9, 1.0)
QUOTA_UTILITY_CONTAINS_SCORE = (0.8, 1.0)
QUOTA_UTILITY_FUZZY_WEIGHT = 0.7
QUOTA_TERM_EXACT_SCORE = (0.95, 1.0)
QUOTA_TERM_PREFIX_SCORE = (0.85, 1.0)
QUOTA_TERM_CONTAINS_SCORE = (0.75, 1.0)
QUOTA_TERM_FUZZY_WEIGHT = 0.65
QUOTA_TERM_FUZZY_MIN = 0.7
"""Keyword/category fuzzy matches at or below this are discarded."""


# ================================================================
# Preference Defaults
# ================================================================

DEFAULT_MAX_RECENT = 10
"""Maximum number of recently used tool ids kept."""

DEFAULT_MAX_RECENT_SEARCHES = 5
"""Maximum number of recent search queries kept."""

RECENTLY_USED_KEY = "recentlyUsed"
FAVORITES_KEY = "favorites"
RECENT_SEARCHES_KEY = "recentSearches"

DEFAULT_PREFERENCES_DIR = Path("~/.toolfinder")
DEFAULT_PREFERENCES_FILE = "preferences.json"


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 3
