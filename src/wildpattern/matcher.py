"""PatternMatcher: one contract over interchangeable matching strategies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wildpattern import optimized, reference
from wildpattern.config import Config
from wildpattern.errors import ConfigError, InvalidWildcardError, UnknownStrategyError
from wildpattern.options import MatchOptions

__all__ = ["PatternMatcher", "STRATEGIES"]

_logger = logging.getLogger(__name__)

_MatchFunc = Callable[..., bool]

STRATEGIES: Mapping[str, _MatchFunc] = MappingProxyType(
    {
        "optimized": optimized.match,
        "regex": reference.match,
    }
)

_CONFIG_SECTION = "matcher"
_OPTION_KEYS = ("single_wildcard", "multiple_wildcard", "case_sensitive")


class PatternMatcher:
    """Matches text against wildcard patterns with a fixed strategy and options.

    ``"optimized"`` is the bounded-time search; ``"regex"`` is the reference
    translation to :mod:`re`. Both honor the same MatchOptions, so swapping
    strategies does not change a result. The one known exception is
    case-insensitive matching of characters whose case mapping is longer than
    one character, such as ``"İ"``.

    Thread safety:
        Immutable after construction; instances may be shared freely.
    """

    def __init__(
        self, options: MatchOptions | None = None, strategy: str = "optimized"
    ) -> None:
        """Initialize the matcher.

        Args:
            options: Wildcard characters and case handling. Defaults to
                ``?``, ``*`` and case-sensitive matching.
            strategy: Name of the matching strategy.

        Raises:
            UnknownStrategyError: If ``strategy`` is not a known name.
        """
        if strategy not in STRATEGIES:
            raise UnknownStrategyError(strategy, sorted(STRATEGIES))
        self._options = options if options is not None else MatchOptions()
        self._strategy = strategy
        self._match_func = STRATEGIES[strategy]

    @classmethod
    def from_config(cls, config: Config) -> PatternMatcher:
        """Build a matcher from the ``matcher`` section of a Config.

        Missing keys fall back to the MatchOptions defaults and the
        ``"optimized"`` strategy.

        Raises:
            ConfigError: If the section is malformed or holds invalid values.
        """
        section = config.get(_CONFIG_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(
                f"'{_CONFIG_SECTION}' must be a mapping, got {type(section).__name__}"
            )

        raw_options = {key: section[key] for key in _OPTION_KEYS if key in section}
        try:
            options = MatchOptions.model_validate(raw_options)
        except PydanticValidationError as e:
            raise ConfigError(
                f"Invalid '{_CONFIG_SECTION}' configuration",
                details={"errors": _pydantic_error_to_details(e)},
                cause=e,
            ) from e
        except InvalidWildcardError as e:
            raise ConfigError(
                f"Invalid '{_CONFIG_SECTION}' configuration: {e.message}",
                details=dict(e.details),
                cause=e,
            ) from e

        strategy = section.get("strategy", "optimized")
        if strategy not in STRATEGIES:
            raise ConfigError(
                f"Unknown '{_CONFIG_SECTION}.strategy' value: {strategy!r}",
                details={"strategy": strategy, "available": sorted(STRATEGIES)},
            )

        _logger.debug(
            "PatternMatcher configured: strategy=%s options=%s", strategy, options
        )
        return cls(options=options, strategy=strategy)

    @property
    def options(self) -> MatchOptions:
        """The options every call is made with."""
        return self._options

    @property
    def strategy(self) -> str:
        """Name of the strategy in use."""
        return self._strategy

    def match(self, text: str, pattern: str) -> bool:
        """Return True if ``text`` matches ``pattern`` in full."""
        return self._match_func(
            text,
            pattern,
            self._options.single_wildcard,
            self._options.multiple_wildcard,
            case_sensitive=self._options.case_sensitive,
        )

    def filter(self, texts: Iterable[str], pattern: str) -> list[str]:
        """Return the texts that match ``pattern``, preserving order."""
        return [text for text in texts if self.match(text, pattern)]

    def __repr__(self) -> str:
        return f"PatternMatcher(strategy={self._strategy!r}, options={self._options!r})"


def _pydantic_error_to_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into field/message/type records."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        loc = err.get("loc", ())
        details.append(
            {
                "field": ".".join(str(segment) for segment in loc) if loc else "",
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
                "input": err.get("input"),
            }
        )
    return details
