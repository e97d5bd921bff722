"""
Utilities module for the document response package.

This module provides shared logging utilities.
"""

from .logging import setup_logging, log_quota_snapshot

__all__ = [
    "setup_logging",
    "log_quota_snapshot",
]
