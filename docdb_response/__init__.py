#!/usr/bin/env python3
"""
Document Service Response Package

A Python package modelling the response to a single request made against a
document-oriented cloud data service: the deserialized resource, the status
code, the response headers and the resource quotas and usages the service
reports through its compound quota headers.
"""

__version__ = "1.0.0"
__author__ = "docdb-response maintainers"
__description__ = (
    "Quota-aware resource responses for a document database service"
)
__license__ = "MIT"
__status__ = "Production"

from .models import (
    ResourceLike,
    Resource,
    Database,
    DocumentCollection,
    Document,
    User,
    Permission,
    StoredProcedure,
    Trigger,
    UserDefinedFunction,
    QuotaKind,
    QuotaUsage,
    QuotaSnapshot,
)

from .exceptions import (
    DocumentResponseError,
    ResourceDeserializationError,
    QuotaHeaderError,
)

from .api import (
    DocumentServiceResponse,
    ResourceResponse,
    parse_quota_headers,
)

from .config import Env, ConfigError

from .utils import setup_logging

__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Resources
    "ResourceLike",
    "Resource",
    "Database",
    "DocumentCollection",
    "Document",
    "User",
    "Permission",
    "StoredProcedure",
    "Trigger",
    "UserDefinedFunction",
    # Quotas
    "QuotaKind",
    "QuotaUsage",
    "QuotaSnapshot",
    "parse_quota_headers",
    # Responses
    "DocumentServiceResponse",
    "ResourceResponse",
    # Errors
    "DocumentResponseError",
    "ResourceDeserializationError",
    "QuotaHeaderError",
    # Configuration
    "Env",
    "ConfigError",
    # Utilities
    "setup_logging",
]
