"""
Exceptions raised by the document response package.

Accessors on ResourceResponse do not raise for missing or malformed
telemetry headers; these exceptions cover the remaining hard failures.
"""


class DocumentResponseError(Exception):
    """Base class for errors raised while reading a service response."""


class ResourceDeserializationError(DocumentResponseError, ValueError):
    """Raised when the response body cannot be turned into a resource."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class QuotaHeaderError(DocumentResponseError, ValueError):
    """Raised in strict mode when the quota headers break their contract."""

    def __init__(self, message: str, max_quota_header: str = "", usage_header: str = ""):
        super().__init__(message)
        self.max_quota_header = max_quota_header
        self.usage_header = usage_header
