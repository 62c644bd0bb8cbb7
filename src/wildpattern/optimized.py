"""Backtracking-free wildcard matching.

The matcher simulates a backtracking automaton with an explicit work stack.
A state is a pair ``(text_pos, pattern_pos)``; only states sitting on a
multiple wildcard (or at the end of the pattern) are ever pushed, and each of
them at most once. Total work is therefore bounded by the size of the state
space, ``(len(text) + 1) * (len(pattern) + 1)``, no matter how many multiple
wildcards the pattern holds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from wildpattern.options import (
    DEFAULT_MULTIPLE_WILDCARD,
    DEFAULT_SINGLE_WILDCARD,
    validate_wildcards,
)

__all__ = ["MatchStats", "match", "match_stats"]

_logger = logging.getLogger(__name__)

_CharEquals = Callable[[str, str], bool]


@dataclass(frozen=True)
class MatchStats:
    """Outcome of a single search.

    Attributes:
        matched: Whether the text matches the pattern.
        states_visited: Number of distinct states scheduled for exploration.
        states_pushed: Number of pushes onto the work stack. Equal to
            states_visited, since no state is scheduled twice.
        max_stack_depth: Largest number of states pending at once.
    """

    matched: bool
    states_visited: int
    states_pushed: int
    max_stack_depth: int


def _equals(a: str, b: str) -> bool:
    return a == b


def _equals_ignore_case(a: str, b: str) -> bool:
    # Some pairs share only an uppercase form, e.g. final sigma and sigma.
    return a == b or a.lower() == b.lower() or a.upper() == b.upper()


def _advance(
    text: str,
    pattern: str,
    text_pos: int,
    pattern_pos: int,
    single_wildcard: str,
    multiple_wildcard: str,
    equals: _CharEquals,
) -> tuple[int, int]:
    """Consume literals and single wildcards up to the next multiple wildcard."""
    text_len = len(text)
    pattern_len = len(pattern)
    while text_pos < text_len and pattern_pos < pattern_len:
        token = pattern[pattern_pos]
        if token == multiple_wildcard:
            break
        if token != single_wildcard and not equals(text[text_pos], token):
            break
        text_pos += 1
        pattern_pos += 1
    return text_pos, pattern_pos


def match_stats(
    text: str,
    pattern: str,
    single_wildcard: str = DEFAULT_SINGLE_WILDCARD,
    multiple_wildcard: str = DEFAULT_MULTIPLE_WILDCARD,
    *,
    case_sensitive: bool = True,
) -> MatchStats:
    """Match ``text`` against ``pattern`` and report how much work it took.

    Args:
        text: The string to test.
        pattern: Pattern built from literals and the two wildcard characters.
            Wildcard characters are never treated as literals.
        single_wildcard: Character matching exactly one input character.
        multiple_wildcard: Character matching any run of input characters,
            including an empty one.
        case_sensitive: When False, literals compare equal if their
            lowercase or uppercase forms do.

    Returns:
        A MatchStats record for the search.

    Raises:
        InvalidWildcardError: If the wildcard characters are not two distinct
            single characters.
    """
    validate_wildcards(single_wildcard, multiple_wildcard)
    equals = _equals if case_sensitive else _equals_ignore_case
    text_len = len(text)
    pattern_len = len(pattern)

    # Literal prefix up to the first multiple wildcard needs no stack.
    text_pos, pattern_pos = _advance(
        text, pattern, 0, 0, single_wildcard, multiple_wildcard, equals
    )
    if pattern_pos < pattern_len and pattern[pattern_pos] != multiple_wildcard:
        stats = MatchStats(
            matched=False, states_visited=0, states_pushed=0, max_stack_depth=0
        )
        _log_outcome(pattern, text_len, stats)
        return stats

    visited: set[tuple[int, int]] = {(text_pos, pattern_pos)}
    stack: list[tuple[int, int]] = [(text_pos, pattern_pos)]
    pushes = 1
    max_depth = 1
    matched = False

    while stack:
        text_pos, pattern_pos = stack.pop()
        if text_pos == text_len and pattern_pos == pattern_len:
            matched = True
            break
        if pattern_pos == pattern_len:
            # Pattern exhausted with input left over.
            continue

        # pattern_pos is on a multiple wildcard: try every length it may consume.
        after_wildcard = pattern_pos + 1
        for start in range(text_pos, text_len + 1):
            if after_wildcard == pattern_len:
                cur_text, cur_pattern = text_len, pattern_len
            else:
                cur_text, cur_pattern = _advance(
                    text,
                    pattern,
                    start,
                    after_wildcard,
                    single_wildcard,
                    multiple_wildcard,
                    equals,
                )

            if cur_pattern == pattern_len:
                if cur_text != text_len:
                    continue
            elif pattern[cur_pattern] != multiple_wildcard:
                continue

            state = (cur_text, cur_pattern)
            if state in visited:
                continue
            visited.add(state)
            stack.append(state)
            pushes += 1
            if len(stack) > max_depth:
                max_depth = len(stack)

    stats = MatchStats(
        matched=matched,
        states_visited=len(visited),
        states_pushed=pushes,
        max_stack_depth=max_depth,
    )
    _log_outcome(pattern, text_len, stats)
    return stats


def match(
    text: str,
    pattern: str,
    single_wildcard: str = DEFAULT_SINGLE_WILDCARD,
    multiple_wildcard: str = DEFAULT_MULTIPLE_WILDCARD,
    *,
    case_sensitive: bool = True,
) -> bool:
    """Return True if ``text`` matches ``pattern`` in full.

    See :func:`match_stats` for the meaning of the arguments.
    """
    return match_stats(
        text,
        pattern,
        single_wildcard,
        multiple_wildcard,
        case_sensitive=case_sensitive,
    ).matched


def _log_outcome(pattern: str, text_len: int, stats: MatchStats) -> None:
    _logger.debug(
        "Wildcard match: pattern=%r text_len=%d matched=%s states=%d pushes=%d max_stack=%d",
        pattern,
        text_len,
        stats.matched,
        stats.states_visited,
        stats.states_pushed,
        stats.max_stack_depth,
    )
