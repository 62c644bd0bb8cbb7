"""Tests for MatchOptions and wildcard validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wildpattern.errors import InvalidWildcardError
from wildpattern.options import MatchOptions, validate_wildcards


class TestValidateWildcards:
    """Wildcard pair checks shared by every strategy."""

    @pytest.mark.parametrize("single,multiple", [("?", "*"), ("_", "%"), ("a", "b")])
    def test_accepts_distinct_single_characters(self, single: str, multiple: str) -> None:
        """Any two distinct single characters are valid wildcards."""
        validate_wildcards(single, multiple)

    def test_rejects_identical_wildcards(self) -> None:
        """The same character cannot serve as both wildcards."""
        with pytest.raises(InvalidWildcardError) as exc_info:
            validate_wildcards("*", "*")
        assert exc_info.value.single_wildcard == "*"
        assert exc_info.value.multiple_wildcard == "*"
        assert "must differ" in str(exc_info.value)

    @pytest.mark.parametrize("single,multiple", [("", "*"), ("?", ""), ("??", "*"), ("?", "**")])
    def test_rejects_non_single_characters(self, single: str, multiple: str) -> None:
        """Empty or multi-character wildcards are rejected."""
        with pytest.raises(InvalidWildcardError, match="exactly one character"):
            validate_wildcards(single, multiple)


class TestMatchOptions:
    """The immutable options model."""

    def test_defaults(self) -> None:
        """Defaults are '?', '*' and case-sensitive."""
        options = MatchOptions()
        assert options.single_wildcard == "?"
        assert options.multiple_wildcard == "*"
        assert options.case_sensitive is True

    def test_invalid_wildcards_rejected(self) -> None:
        """The model runs the same wildcard validation."""
        with pytest.raises(InvalidWildcardError):
            MatchOptions(single_wildcard="*")

    def test_frozen(self) -> None:
        """Options cannot be changed after construction."""
        options = MatchOptions()
        with pytest.raises(ValidationError):
            options.case_sensitive = False  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            MatchOptions(escape_char="\\")  # type: ignore[call-arg]

    def test_equal_options_are_equal_and_hashable(self) -> None:
        """Equal options compare and hash equal."""
        a = MatchOptions(single_wildcard="_", multiple_wildcard="%")
        b = MatchOptions(single_wildcard="_", multiple_wildcard="%")
        assert a == b
        assert hash(a) == hash(b)

    def test_model_validate_from_mapping(self) -> None:
        """Options can be built from a plain mapping."""
        options = MatchOptions.model_validate({"case_sensitive": False})
        assert options.case_sensitive is False
