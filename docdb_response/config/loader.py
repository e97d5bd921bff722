"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DOTENV_FILE = ".env.local"


def _extra(field_info) -> Dict[str, Any]:
    return field_info.json_schema_extra or {}


def _clean(value: Any, strip: bool) -> Any:
    """Normalize a raw string value; an empty string clears the field."""
    if not isinstance(value, str):
        return value
    cleaned = value.strip() if strip else value
    return cleaned if cleaned else None


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments
        5. Explicit overrides keyed by environment variable name

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Mapping of env var name to value

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        _load_from_dotenv_file()

        for field_name, field_info in schema.model_fields.items():
            extra = _extra(field_info)
            env_var = extra.get("env_var")
            if env_var:
                env_value = _clean(os.getenv(env_var), extra.get("strip", True))
                # Empty environment values fall back to the schema default
                if env_value is not None:
                    config_dict[field_name] = env_value

        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                extra = _extra(field_info)
                cli_arg = extra.get("cli_arg")
                if cli_arg and getattr(cli_args, cli_arg, None) is not None:
                    config_dict[field_name] = _clean(getattr(cli_args, cli_arg), extra.get("strip", True))

        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                extra = _extra(field_info)
                env_var = extra.get("env_var")
                if env_var in cli_overrides and cli_overrides[env_var] is not None:
                    config_dict[field_name] = _clean(cli_overrides[env_var], extra.get("strip", True))

        # Cleared values take the schema default
        config_dict = {k: v for k, v in config_dict.items() if v is not None}

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = _extra(field_info).get("env_var") if field_info else str(field).upper()
                errors.append(f"{env_var}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Inspect quota and usage headers of a captured service response",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            prog="docdb-quota",
            description=description,
            epilog="""
Examples:
  docdb-quota --response-file response.json
  docdb-quota --response-file response.json --json
  docdb-quota --response-file response.json --quota-strict true
            """,
        )

        # CLI-only arguments that don't map to config
        parser.add_argument(
            "--response-file",
            required=True,
            help="JSON file holding a captured response: status_code, headers and body",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the quota snapshot as JSON instead of a table",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        for field_name, field_info in schema.model_fields.items():
            extra = _extra(field_info)
            cli_arg = extra.get("cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {extra.get('env_var', field_name.upper())} env var",
                "default": None,  # Schema defaults are applied by the loader
                "dest": cli_arg,
            }

            field_type = field_info.annotation
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float
            elif field_type == bool:
                choices = extra.get("cli_choices")
                if choices:
                    kwargs["choices"] = choices
                else:
                    kwargs["action"] = "store_true"

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file() -> None:
    """Load values from the .env.local file if it exists."""
    if os.path.exists(DOTENV_FILE):
        load_dotenv(DOTENV_FILE, override=False)
        logger.debug(f"Loaded configuration from {DOTENV_FILE} file")
    else:
        logger.debug(f"{DOTENV_FILE} file not found, skipping")
