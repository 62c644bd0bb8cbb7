"""Error hierarchy for the wildpattern library."""

from __future__ import annotations

from typing import Any

__all__ = [
    "WildpatternError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidWildcardError",
    "UnknownStrategyError",
    "ErrorCodes",
]


class WildpatternError(Exception):
    """Base error for all wildpattern errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(WildpatternError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(WildpatternError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidWildcardError(WildpatternError):
    """Raised when the wildcard characters are not two distinct single characters."""

    def __init__(
        self, single_wildcard: str, multiple_wildcard: str, reason: str, **kwargs: Any
    ) -> None:
        super().__init__(
            code="INVALID_WILDCARD",
            message=(
                f"Invalid wildcards single={single_wildcard!r} "
                f"multiple={multiple_wildcard!r}: {reason}"
            ),
            details={
                "single_wildcard": single_wildcard,
                "multiple_wildcard": multiple_wildcard,
                "reason": reason,
            },
            **kwargs,
        )

    @property
    def single_wildcard(self) -> str:
        """The rejected single-character wildcard."""
        return self.details["single_wildcard"]

    @property
    def multiple_wildcard(self) -> str:
        """The rejected multi-character wildcard."""
        return self.details["multiple_wildcard"]


class UnknownStrategyError(WildpatternError):
    """Raised when a matcher is asked for a strategy it does not provide."""

    def __init__(self, strategy: str, available: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="UNKNOWN_STRATEGY",
            message=(
                f"Unknown matching strategy '{strategy}', "
                f"expected one of: {', '.join(available)}"
            ),
            details={"strategy": strategy, "available": available},
            **kwargs,
        )

    @property
    def strategy(self) -> str:
        """The strategy name that was requested."""
        return self.details["strategy"]


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_WILDCARD:
            fall_back_to_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_WILDCARD = "INVALID_WILDCARD"
    UNKNOWN_STRATEGY = "UNKNOWN_STRATEGY"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
