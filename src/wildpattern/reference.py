"""Regex-based wildcard matching, kept as an oracle for the optimized matcher.

Translating the pattern hands the work to :mod:`re`, which backtracks. On
patterns with many multiple wildcards this can take exponential time; use
:func:`wildpattern.optimized.match` for untrusted input.
"""

from __future__ import annotations

import re

from wildpattern.options import (
    DEFAULT_MULTIPLE_WILDCARD,
    DEFAULT_SINGLE_WILDCARD,
    validate_wildcards,
)

__all__ = ["match", "to_regex"]


def to_regex(
    pattern: str,
    single_wildcard: str = DEFAULT_SINGLE_WILDCARD,
    multiple_wildcard: str = DEFAULT_MULTIPLE_WILDCARD,
) -> str:
    """Translate a wildcard pattern into an unanchored regular expression."""
    validate_wildcards(single_wildcard, multiple_wildcard)
    parts: list[str] = []
    for char in pattern:
        if char == multiple_wildcard:
            parts.append(".*")
        elif char == single_wildcard:
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def match(
    text: str,
    pattern: str,
    single_wildcard: str = DEFAULT_SINGLE_WILDCARD,
    multiple_wildcard: str = DEFAULT_MULTIPLE_WILDCARD,
    *,
    case_sensitive: bool = True,
) -> bool:
    """Return True if ``text`` matches ``pattern`` in full."""
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    regex = to_regex(pattern, single_wildcard, multiple_wildcard)
    return re.fullmatch(regex, text, flags) is not None
