"""Shared test fixtures for the wildpattern test suite."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from wildpattern.matcher import PatternMatcher


@pytest.fixture
def optimized_matcher() -> PatternMatcher:
    """A matcher using the bounded-time strategy with default options."""
    return PatternMatcher()


@pytest.fixture
def regex_matcher() -> PatternMatcher:
    """A matcher using the regex reference strategy with default options."""
    return PatternMatcher(strategy="regex")


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., str]:
    """Factory writing YAML text to a temporary file and returning its path."""

    def factory(content: str, name: str = "wildpattern.yaml") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return str(path)

    return factory
