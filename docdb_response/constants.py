#!/usr/bin/env python3
"""
Application Constants

This module contains the response header names, quota keywords and exit
codes used throughout the document response package.
"""

# Response headers read by ResourceResponse
HEADER_ACTIVITY_ID = "x-ms-activity-id"
HEADER_SESSION_TOKEN = "x-ms-session-token"
HEADER_MAX_RESOURCE_QUOTA = "x-ms-resource-quota"
HEADER_CURRENT_RESOURCE_QUOTA_USAGE = "x-ms-resource-usage"
HEADER_REQUEST_CHARGE = "x-ms-request-charge"
HEADER_INDEX_TRANSFORMATION_PROGRESS = "x-ms-documentdb-collection-index-transformation-progress"
HEADER_LAZY_INDEXING_PROGRESS = "x-ms-documentdb-collection-lazy-indexing-progress"

# Quota keywords as reported by the service (matched case-insensitively)
QUOTA_DATABASE = "databases"
QUOTA_COLLECTION = "collections"
QUOTA_USER = "users"
QUOTA_PERMISSION = "permissions"
QUOTA_COLLECTION_SIZE = "collectionSize"
QUOTA_DOCUMENTS_SIZE = "documentsSize"
QUOTA_STORED_PROCEDURE = "storedProcedures"
QUOTA_TRIGGER = "triggers"
QUOTA_USER_DEFINED_FUNCTION = "functions"

# Characters separating names and values in the compound quota headers
DEFAULT_QUOTA_DELIMITERS = "=|;, \t"

# Defaults returned when a header is absent
DEFAULT_QUOTA_VALUE = 0
DEFAULT_REQUEST_CHARGE = 0.0
DEFAULT_PROGRESS = -1

# Usage percentage at which a quota snapshot is logged as a warning
QUOTA_WARNING_PERCENTAGE = 95.0

# Exit codes for the docdb-quota command
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_QUOTA_HEADER_ERROR = 4
