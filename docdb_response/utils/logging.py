"""
Logging utilities for the document response package.

This module provides centralized logging configuration and structured
quota log records that are easy to parse by automated tools.
"""

import json
import logging
import time
from typing import Optional

from ..constants import QUOTA_WARNING_PERCENTAGE


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    logging.getLogger("httpx").setLevel(logging.WARNING)  # Reduce HTTP client noise


def log_quota_snapshot(
    quota_snapshot,
    activity_id: str = "",
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record of every quota/usage pair of one response.

    Logged at WARNING when any quota is at or above 95% usage, INFO otherwise.

    Args:
        quota_snapshot: QuotaSnapshot parsed from the response headers
        activity_id: Activity id of the request that produced the response
        timestamp: Record timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    highest = quota_snapshot.highest_usage()
    near_limit = highest.usage_percentage() >= QUOTA_WARNING_PERCENTAGE

    quota_record = {
        "event_type": "quota_snapshot",
        "timestamp": timestamp,
        "activity_id": activity_id,
        "near_limit": near_limit,
        "highest_usage_kind": highest.kind.name,
        "highest_usage_percentage": round(highest.usage_percentage(), 2),
        "quotas": {
            usage.kind.keyword: {"quota": usage.quota, "usage": usage.usage}
            for usage in quota_snapshot.usages.values()
            if usage.quota or usage.usage
        },
    }

    if near_limit:
        logger.warning(f"QUOTA_NEAR_LIMIT: {json.dumps(quota_record, ensure_ascii=False)}")
    else:
        logger.info(f"QUOTA_SNAPSHOT: {json.dumps(quota_record, ensure_ascii=False)}")
