#!/usr/bin/env python3
"""
Resource Models

This module contains the resource types returned in service response
bodies. Every resource is backed by the JSON object the service sent and
exposes the system properties shared by all resources.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ResourceLike(Protocol):
    """Anything carrying a resource identifier and an entity tag."""

    @property
    def id(self) -> Optional[str]: ...

    @property
    def etag(self) -> Optional[str]: ...


class Resource:
    """
    Base resource deserialized from a service response body.

    Attributes:
        id: User-assigned identifier
        resource_id: Service-assigned identifier (``_rid``)
        self_link: Addressable link of the resource (``_self``)
        etag: Entity tag used for optimistic concurrency (``_etag``)
        timestamp: Last modification time (``_ts``, epoch seconds)
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    @property
    def id(self) -> Optional[str]:
        return self._data.get("id")

    @property
    def resource_id(self) -> Optional[str]:
        return self._data.get("_rid")

    @property
    def self_link(self) -> Optional[str]:
        return self._data.get("_self")

    @property
    def etag(self) -> Optional[str]:
        return self._data.get("_etag")

    @property
    def timestamp(self) -> Optional[datetime]:
        ts = self._data.get("_ts")
        if ts is None:
            return None
        return datetime.fromtimestamp(int(ts), tz=timezone.utc)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a property of the underlying JSON object."""
        return self._data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return dict(self._data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        """Create instance from dictionary."""
        return cls(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __hash__(self) -> int:
        # Equal resources share type, id and _rid
        return hash((type(self), self.id, self.resource_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, etag={self.etag!r})"


class Database(Resource):
    """A database account's top-level container."""


class DocumentCollection(Resource):
    """A collection of documents inside a database."""

    @property
    def indexing_policy(self) -> Dict[str, Any]:
        return self._data.get("indexingPolicy", {})


class Document(Resource):
    """A JSON document stored in a collection."""


class User(Resource):
    """A database user."""


class Permission(Resource):
    """An access grant for a user on a resource."""

    @property
    def resource_link(self) -> Optional[str]:
        return self._data.get("resource")

    @property
    def permission_mode(self) -> Optional[str]:
        return self._data.get("permissionMode")


class _ScriptResource(Resource):
    """Resource whose payload is server-side script source."""

    @property
    def body(self) -> Optional[str]:
        return self._data.get("body")


class StoredProcedure(_ScriptResource):
    """A stored procedure registered on a collection."""


class Trigger(_ScriptResource):
    """A pre- or post-operation trigger registered on a collection."""

    @property
    def trigger_type(self) -> Optional[str]:
        return self._data.get("triggerType")

    @property
    def trigger_operation(self) -> Optional[str]:
        return self._data.get("triggerOperation")


class UserDefinedFunction(_ScriptResource):
    """A user-defined function usable in queries."""
