"""
Configuration management for the document response package.

This module provides centralized configuration handling with support for
environment variables, .env.local files, and CLI overrides, validated
through a Pydantic schema.
"""

from .env import Env, ConfigError
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Env", "ConfigError", "ConfigSchema", "ConfigLoader"]
