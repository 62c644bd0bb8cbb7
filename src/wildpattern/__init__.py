"""wildpattern - Bounded-time wildcard pattern matching."""

from __future__ import annotations

# Matching
from wildpattern.optimized import MatchStats, match, match_stats
from wildpattern.reference import match as match_regex
from wildpattern.reference import to_regex
from wildpattern.matcher import STRATEGIES, PatternMatcher

# Options and config
from wildpattern.options import MatchOptions
from wildpattern.config import Config

# Errors
from wildpattern.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidWildcardError,
    UnknownStrategyError,
    WildpatternError,
)

__version__ = "0.1.0"

__all__ = [
    # Matching
    "match",
    "match_stats",
    "match_regex",
    "to_regex",
    "MatchStats",
    "PatternMatcher",
    "STRATEGIES",
    # Options and config
    "MatchOptions",
    "Config",
    # Errors
    "ErrorCodes",
    "WildpatternError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidWildcardError",
    "UnknownStrategyError",
]
