"""
Resource response module.

ResourceResponse wraps one completed service response: the deserialized
resource, the status code and the response headers, with typed accessors
for the quota and usage values the service reports in its headers.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, Type, TypeVar

import httpx

from .. import constants
from ..config import Env
from ..models.quota import ParsedQuotas, QuotaKind, QuotaSnapshot, QuotaUsage
from ..models.resource import ResourceLike
from ..utils.logging import log_quota_snapshot
from .quota import parse_quota_headers
from .service_response import DocumentServiceResponse
from .utils import get_header_str, parse_header_float, parse_header_int

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResourceLike)


def _header_view(headers: httpx.Headers) -> Mapping[str, str]:
    """Read-only copy of the headers under the names they were sent with."""
    view: Dict[str, str] = {}
    for raw_key, raw_value in headers.raw:
        key = raw_key.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        # Repeated headers are joined the way httpx joins them
        view[key] = f"{view[key]}, {value}" if key in view else value
    return MappingProxyType(view)


class ResourceResponse(Generic[T]):
    """
    The service response to a single request.

    The underlying DocumentServiceResponse is consumed and closed during
    construction; nothing is retained from it but the resource, the status
    code and a copy of the headers. Quota headers are parsed on the first
    quota read and cached for the lifetime of the response.

    Args:
        response: The completed service response
        cls: Resource type to deserialize the body into
        env: Parsing settings; defaults to the loaded Env, if any
    """

    def __init__(self, response: DocumentServiceResponse, cls: Type[T], env: Optional[Env] = None):
        self._env = env if env is not None else Env.current_or_default()
        try:
            self._resource: Optional[T] = response.get_resource(cls)
        finally:
            response.close()

        self._status_code = response.status_code
        self._headers = httpx.Headers(response.headers, encoding=response.headers.encoding)
        self._headers_view: Mapping[str, str] = _header_view(self._headers)

        self._parsed: Optional[ParsedQuotas] = None
        self._parse_lock = threading.Lock()

    def _quotas(self) -> ParsedQuotas:
        parsed = self._parsed
        if parsed is None:
            with self._parse_lock:
                if self._parsed is None:
                    self._parsed = parse_quota_headers(
                        self.get_max_resource_quota(),
                        self.get_current_resource_quota_usage(),
                        delimiters=self._env.QUOTA_DELIMITERS,
                        strict=self._env.QUOTA_STRICT_PARSING,
                    )
                    if self._env.QUOTA_LOG_SNAPSHOTS and not self._parsed.is_empty():
                        log_quota_snapshot(
                            QuotaSnapshot.from_parsed(self._parsed),
                            activity_id=self.get_activity_id(),
                            logger=logger,
                        )
                parsed = self._parsed
        return parsed

    def _get_max_quota(self, kind: QuotaKind) -> int:
        return self._quotas().quota(kind)

    def _get_current_usage(self, kind: QuotaKind) -> int:
        return self._quotas().usage(kind)

    def get_database_quota(self) -> int:
        """Maximum number of databases."""
        return self._get_max_quota(QuotaKind.DATABASE)

    def get_database_usage(self) -> int:
        """Current number of databases."""
        return self._get_current_usage(QuotaKind.DATABASE)

    def get_collection_quota(self) -> int:
        """Maximum number of collections."""
        return self._get_max_quota(QuotaKind.COLLECTION)

    def get_collection_usage(self) -> int:
        """Current number of collections."""
        return self._get_current_usage(QuotaKind.COLLECTION)

    def get_user_quota(self) -> int:
        """Maximum number of users."""
        return self._get_max_quota(QuotaKind.USER)

    def get_user_usage(self) -> int:
        """Current number of users."""
        return self._get_current_usage(QuotaKind.USER)

    def get_permission_quota(self) -> int:
        """Maximum number of permissions."""
        return self._get_max_quota(QuotaKind.PERMISSION)

    def get_permission_usage(self) -> int:
        """Current number of permissions."""
        return self._get_current_usage(QuotaKind.PERMISSION)

    def get_collection_size_quota(self) -> int:
        """Maximum collection size."""
        return self._get_max_quota(QuotaKind.COLLECTION_SIZE)

    def get_collection_size_usage(self) -> int:
        """Current collection size."""
        return self._get_current_usage(QuotaKind.COLLECTION_SIZE)

    def get_document_quota(self) -> int:
        """Maximum size of all documents."""
        return self._get_max_quota(QuotaKind.DOCUMENTS_SIZE)

    def get_document_usage(self) -> int:
        """Current size of all documents."""
        return self._get_current_usage(QuotaKind.DOCUMENTS_SIZE)

    def get_stored_procedures_quota(self) -> int:
        """Maximum number of stored procedures."""
        return self._get_max_quota(QuotaKind.STORED_PROCEDURE)

    def get_stored_procedures_usage(self) -> int:
        """Current number of stored procedures."""
        return self._get_current_usage(QuotaKind.STORED_PROCEDURE)

    def get_triggers_quota(self) -> int:
        """Maximum number of triggers."""
        return self._get_max_quota(QuotaKind.TRIGGER)

    def get_triggers_usage(self) -> int:
        """Current number of triggers."""
        return self._get_current_usage(QuotaKind.TRIGGER)

    def get_user_defined_functions_quota(self) -> int:
        """Maximum number of user-defined functions."""
        return self._get_max_quota(QuotaKind.USER_DEFINED_FUNCTION)

    def get_user_defined_functions_usage(self) -> int:
        """Current number of user-defined functions."""
        return self._get_current_usage(QuotaKind.USER_DEFINED_FUNCTION)

    def get_quota_usage(self, kind: QuotaKind) -> QuotaUsage:
        """Quota and usage of one kind as a pair."""
        parsed = self._quotas()
        return QuotaUsage(kind=kind, quota=parsed.quota(kind), usage=parsed.usage(kind))

    def get_quota_snapshot(self) -> QuotaSnapshot:
        """All nine quota/usage pairs reported by this response."""
        return QuotaSnapshot.from_parsed(self._quotas())

    def get_activity_id(self) -> str:
        """Activity id of the request, used to trace it on the service side."""
        return get_header_str(self._headers, constants.HEADER_ACTIVITY_ID)

    def get_session_token(self) -> str:
        """Token used for managing the client's consistency requirements."""
        return get_header_str(self._headers, constants.HEADER_SESSION_TOKEN)

    def get_status_code(self) -> int:
        """HTTP status code of the response."""
        return self._status_code

    def get_max_resource_quota(self) -> str:
        """
        Raw maximum quota header.

        Limits are in kilobytes for size quotas and counts for the others.
        """
        return get_header_str(self._headers, constants.HEADER_MAX_RESOURCE_QUOTA)

    def get_current_resource_quota_usage(self) -> str:
        """Raw current usage header, in the same units as the quota header."""
        return get_header_str(self._headers, constants.HEADER_CURRENT_RESOURCE_QUOTA_USAGE)

    def get_resource(self) -> Optional[T]:
        """The deserialized resource; None when the operation returned no body."""
        return self._resource

    def get_request_charge(self) -> float:
        """Request units consumed by the operation."""
        return parse_header_float(self._headers, constants.HEADER_REQUEST_CHARGE, constants.DEFAULT_REQUEST_CHARGE)

    def get_response_headers(self) -> Mapping[str, str]:
        """Read-only view of the response headers."""
        return self._headers_view

    def get_index_transformation_progress(self) -> int:
        """Progress of an index transformation, or -1 when none is underway."""
        return parse_header_int(
            self._headers, constants.HEADER_INDEX_TRANSFORMATION_PROGRESS, constants.DEFAULT_PROGRESS
        )

    def get_lazy_indexing_progress(self) -> int:
        """Progress of lazy indexing, or -1 when not reported."""
        return parse_header_int(self._headers, constants.HEADER_LAZY_INDEXING_PROGRESS, constants.DEFAULT_PROGRESS)

    def __repr__(self) -> str:
        return f"ResourceResponse(status_code={self._status_code}, resource={self._resource!r})"
