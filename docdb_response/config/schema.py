"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for how responses parse their quota headers.
"""

from typing import Any
from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_QUOTA_DELIMITERS


def _parse_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        v_lower = v.strip().lower()
        if v_lower in ('1', 'true', 'yes', 'on'):
            return True
        elif v_lower in ('0', 'false', 'no', 'off'):
            return False
        else:
            raise ValueError(f"Invalid boolean value: {v}")
    return bool(v)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables, a .env.local file
    or CLI arguments.
    """

    quota_strict_parsing: bool = Field(
        False,
        description="Raise on malformed or misaligned quota headers instead of skipping them",
        json_schema_extra={
            "env_var": "QUOTA_STRICT_PARSING",
            "cli_arg": "quota_strict",
            "cli_choices": ["true", "false"],
        }
    )

    quota_delimiters: str = Field(
        DEFAULT_QUOTA_DELIMITERS,
        min_length=1,
        description="Characters separating quota names and values in the quota headers",
        json_schema_extra={
            "env_var": "QUOTA_DELIMITERS",
            "cli_arg": "quota_delimiters",
            # Whitespace is a valid delimiter
            "strip": False,
        }
    )

    quota_log_snapshots: bool = Field(
        False,
        description="Log a structured quota snapshot whenever quota headers are parsed",
        json_schema_extra={
            "env_var": "QUOTA_LOG_SNAPSHOTS",
            "cli_arg": "quota_log_snapshots",
            "cli_choices": ["true", "false"],
        }
    )

    @field_validator('quota_strict_parsing', 'quota_log_snapshots', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        return _parse_bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
