#!/usr/bin/env python3
"""
Quota Models

This module contains the data structures for the resource quotas and
usages a service response reports through its quota headers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional, Tuple

from .. import constants


class QuotaKind(Enum):
    """
    The closed set of quota kinds reported by the service.

    Each member carries the keywords recognised for it in the quota headers.
    The first keyword is the one the service emits.
    """

    DATABASE = (constants.QUOTA_DATABASE, "database")
    COLLECTION = (constants.QUOTA_COLLECTION, "collection")
    USER = (constants.QUOTA_USER, "user")
    PERMISSION = (constants.QUOTA_PERMISSION, "permission")
    COLLECTION_SIZE = (constants.QUOTA_COLLECTION_SIZE, "collection-size")
    DOCUMENTS_SIZE = (constants.QUOTA_DOCUMENTS_SIZE, "documents-size")
    STORED_PROCEDURE = (constants.QUOTA_STORED_PROCEDURE, "stored-procedure")
    TRIGGER = (constants.QUOTA_TRIGGER, "trigger")
    USER_DEFINED_FUNCTION = (constants.QUOTA_USER_DEFINED_FUNCTION, "user-defined-function")

    @property
    def keywords(self) -> Tuple[str, ...]:
        return self.value

    @property
    def keyword(self) -> str:
        """Keyword used by the service for this quota."""
        return self.value[0]

    @classmethod
    def from_keyword(cls, token: str) -> Optional["QuotaKind"]:
        """Return the quota kind named by ``token`` (case-insensitive), or None."""
        return _KEYWORD_LOOKUP.get(token.lower())


_KEYWORD_LOOKUP: Dict[str, QuotaKind] = {
    keyword.lower(): kind for kind in QuotaKind for keyword in kind.keywords
}


@dataclass(frozen=True)
class ParsedQuotas:
    """
    Demultiplexed quota headers of one response.

    An instance exists only once parsing has happened, so an empty
    instance means "parsed, nothing reported" rather than "not parsed".

    Attributes:
        quotas: Maximum allowance per quota kind
        usages: Current consumption per quota kind
    """
    quotas: Dict[QuotaKind, int] = field(default_factory=dict)
    usages: Dict[QuotaKind, int] = field(default_factory=dict)

    def quota(self, kind: QuotaKind) -> int:
        return self.quotas.get(kind, constants.DEFAULT_QUOTA_VALUE)

    def usage(self, kind: QuotaKind) -> int:
        return self.usages.get(kind, constants.DEFAULT_QUOTA_VALUE)

    def is_empty(self) -> bool:
        return not self.quotas and not self.usages


@dataclass
class QuotaUsage:
    """
    Maximum allowance and current consumption of one quota kind.

    Sizes are in kilobytes for size quotas and counts for the others.

    Attributes:
        kind: Which quota this pair describes
        quota: Maximum allowed value (0 when not reported)
        usage: Current value (0 when not reported)
    """
    kind: QuotaKind
    quota: int = 0
    usage: int = 0

    def remaining(self) -> int:
        """Allowance left before the quota is reached."""
        return max(0, self.quota - self.usage)

    def usage_percentage(self) -> float:
        """Calculate percentage of the quota in use."""
        if self.quota <= 0:
            return 0.0
        return (self.usage / self.quota) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"kind": self.kind.name, "quota": self.quota, "usage": self.usage}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuotaUsage":
        """Create instance from dictionary."""
        return cls(kind=QuotaKind[data["kind"]], quota=int(data["quota"]), usage=int(data["usage"]))


@dataclass
class QuotaSnapshot:
    """
    All quota/usage pairs reported by a response at one point in time.

    Attributes:
        usages: One QuotaUsage per quota kind
        timestamp: When this snapshot was taken
    """
    usages: Dict[QuotaKind, QuotaUsage]
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_parsed(cls, parsed: ParsedQuotas) -> "QuotaSnapshot":
        return cls(usages={
            kind: QuotaUsage(kind=kind, quota=parsed.quota(kind), usage=parsed.usage(kind))
            for kind in QuotaKind
        })

    def get(self, kind: QuotaKind) -> QuotaUsage:
        return self.usages.get(kind, QuotaUsage(kind=kind))

    def highest_usage(self) -> QuotaUsage:
        """The pair closest to its limit."""
        return max((self.get(kind) for kind in QuotaKind), key=lambda u: u.usage_percentage())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "quotas": [self.get(kind).to_dict() for kind in QuotaKind],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuotaSnapshot":
        """Create instance from dictionary."""
        usages = [QuotaUsage.from_dict(item) for item in data["quotas"]]
        return cls(
            usages={usage.kind: usage for usage in usages},
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )
