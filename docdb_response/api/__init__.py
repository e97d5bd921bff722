#!/usr/bin/env python3
"""
API package for the document response package.

This package provides the service response adapter, the quota-aware
ResourceResponse wrapper and the header parsing utilities behind it.
"""

from .service_response import (
    DocumentServiceResponse,
)

from .response import (
    ResourceResponse,
)

from .utils import (
    get_header_str,
    parse_header_float,
    parse_header_int,
)

from .quota import (
    tokenize_quota_header,
    parse_quota_headers,
)

__all__ = [
    # Responses
    "DocumentServiceResponse",
    "ResourceResponse",
    # Utilities
    "get_header_str",
    "parse_header_float",
    "parse_header_int",
    # Quota headers
    "tokenize_quota_header",
    "parse_quota_headers",
]
