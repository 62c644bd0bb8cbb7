"""Wildcard configuration shared by every matching strategy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from wildpattern.errors import InvalidWildcardError

__all__ = [
    "DEFAULT_MULTIPLE_WILDCARD",
    "DEFAULT_SINGLE_WILDCARD",
    "MatchOptions",
    "validate_wildcards",
]

DEFAULT_SINGLE_WILDCARD = "?"
DEFAULT_MULTIPLE_WILDCARD = "*"


def validate_wildcards(single_wildcard: str, multiple_wildcard: str) -> None:
    """Reject wildcard pairs the matchers cannot interpret unambiguously.

    Raises:
        InvalidWildcardError: If either wildcard is not exactly one character,
            or both are the same character.
    """
    if len(single_wildcard) != 1 or len(multiple_wildcard) != 1:
        raise InvalidWildcardError(
            single_wildcard,
            multiple_wildcard,
            "each wildcard must be exactly one character",
        )
    if single_wildcard == multiple_wildcard:
        raise InvalidWildcardError(
            single_wildcard,
            multiple_wildcard,
            "single and multiple wildcards must differ",
        )


class MatchOptions(BaseModel):
    """Immutable matching configuration.

    Attributes:
        single_wildcard: Pattern character matching exactly one input character.
        multiple_wildcard: Pattern character matching zero or more input characters.
        case_sensitive: Whether literal characters must match case exactly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    single_wildcard: str = DEFAULT_SINGLE_WILDCARD
    multiple_wildcard: str = DEFAULT_MULTIPLE_WILDCARD
    case_sensitive: bool = True

    @model_validator(mode="after")
    def _check_wildcards(self) -> MatchOptions:
        validate_wildcards(self.single_wildcard, self.multiple_wildcard)
        return self
