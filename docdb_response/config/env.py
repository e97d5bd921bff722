"""
Environment configuration management module.

This module provides the Env container that loads, validates, and serves
the quota parsing settings used by every ResourceResponse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .schema import ConfigSchema, _parse_bool
from .loader import ConfigLoader
from ..constants import DEFAULT_QUOTA_DELIMITERS

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """
    Immutable configuration container.

    Every field has a default, so ``Env()`` is a valid configuration and
    responses can be created without loading anything first.
    """

    QUOTA_STRICT_PARSING: bool = False
    QUOTA_DELIMITERS: str = DEFAULT_QUOTA_DELIMITERS
    QUOTA_LOG_SNAPSHOTS: bool = False

    @staticmethod
    def load(cli_overrides: Optional[Mapping[str, str]] = None) -> "Env":
        """
        Load configuration from all sources and install it globally.

        Args:
            cli_overrides: Optional mapping of env var name to value

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If a value is invalid
        """
        try:
            config = ConfigLoader.load(schema=ConfigSchema, cli_overrides=cli_overrides)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        return Env.install(Env.from_schema(config))

    @staticmethod
    def from_schema(config: ConfigSchema) -> "Env":
        """Build an Env from a validated schema instance."""
        return Env(
            QUOTA_STRICT_PARSING=config.quota_strict_parsing,
            QUOTA_DELIMITERS=config.quota_delimiters,
            QUOTA_LOG_SNAPSHOTS=config.quota_log_snapshots,
        )

    @staticmethod
    def install(env: "Env") -> "Env":
        """Make ``env`` the instance returned by Env.current()."""
        global _ENV
        _ENV = env
        logger.debug("Environment configuration installed")
        return env

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @staticmethod
    def current_or_default() -> "Env":
        """Return the loaded Env, or the defaults when nothing was loaded."""
        return _ENV if _ENV is not None else Env()

    def to_dict(self) -> dict:
        """Convert environment to dictionary representation."""
        return {
            "QUOTA_STRICT_PARSING": self.QUOTA_STRICT_PARSING,
            "QUOTA_DELIMITERS": self.QUOTA_DELIMITERS,
            "QUOTA_LOG_SNAPSHOTS": self.QUOTA_LOG_SNAPSHOTS,
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Raises:
            ConfigError: If a value cannot be interpreted
        """
        try:
            strict = _parse_bool(mapping.get("QUOTA_STRICT_PARSING", "false"))
            log_snapshots = _parse_bool(mapping.get("QUOTA_LOG_SNAPSHOTS", "false"))
        except ValueError as e:
            raise ConfigError(str(e)) from e

        delimiters = mapping.get("QUOTA_DELIMITERS", DEFAULT_QUOTA_DELIMITERS)
        if not delimiters:
            raise ConfigError("QUOTA_DELIMITERS must not be empty")

        return cls(
            QUOTA_STRICT_PARSING=strict,
            QUOTA_DELIMITERS=delimiters,
            QUOTA_LOG_SNAPSHOTS=log_snapshots,
        )
