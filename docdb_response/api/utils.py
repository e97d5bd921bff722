"""
API utilities module.

Tolerant parsers for single-valued telemetry headers. Telemetry headers are
best effort, so a missing or malformed value yields the caller's default.
"""

import logging
from typing import Mapping

logger = logging.getLogger(__name__)


def get_header_str(headers: Mapping[str, str], key: str) -> str:
    """Return the header value, or an empty string when absent."""
    value = headers.get(key)
    return value if value is not None else ""


def parse_header_float(headers: Mapping[str, str], key: str, default: float) -> float:
    """Parse float value from header with graceful fallback."""
    value = headers.get(key)
    if not value:
        return default

    try:
        return float(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid number in header {key}: {value}")
        return default


def parse_header_int(headers: Mapping[str, str], key: str, default: int) -> int:
    """Parse integer value from header with graceful fallback."""
    value = headers.get(key)
    if not value:
        return default

    try:
        return int(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid integer in header {key}: {value}")
        return default

