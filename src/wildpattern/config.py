"""Configuration loading and dot-path access."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from wildpattern.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

_logger = logging.getLogger(__name__)


class Config:
    """Configuration accessor with dot-path key support.

    Instances are read-only views over a nested mapping; callers pass them
    explicitly to whatever needs them.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._yaml_path: str | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config wrapping the parsed mapping. An empty file yields an
            empty configuration.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or its top level is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}",
                details={"config_path": yaml_path},
            )

        _logger.debug("Loaded configuration from %s", yaml_path)
        config = cls(data)
        config._yaml_path = yaml_path
        return config

    @property
    def path(self) -> str | None:
        """The file this configuration was loaded from, if any."""
        return self._yaml_path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
