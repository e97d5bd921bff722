#!/usr/bin/env python3
"""
Quota Header API Package

This package demultiplexes the compound quota and usage headers a
service response carries into per-quota values.
"""

from .parsing import (
    tokenize_quota_header,
    parse_quota_headers,
)

__all__ = [
    "tokenize_quota_header",
    "parse_quota_headers",
]
