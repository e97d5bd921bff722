#!/usr/bin/env python3
"""
Data Models Module

This module contains the resource types and quota data structures used
throughout the document response package.
"""

from .resource import (
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
)
from .quota import QuotaKind, ParsedQuotas, QuotaUsage, QuotaSnapshot

__all__ = [
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
    "QuotaKind",
    "ParsedQuotas",
    "QuotaUsage",
    "QuotaSnapshot",
]
