"""Cache entry entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CacheStatus(Enum):
    """Status of a SHARED cache entry."""

    PROCESSING = "processing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class CacheEntry:
    """Immutable SHARED-mode marker stored under a cache key.

    A processing marker tells other callers that a resolution is in flight.
    A completed marker carries the resolved value.
    """

    status: CacheStatus
    value: Any = None

    @property
    def is_processing(self) -> bool:
        return self.status is CacheStatus.PROCESSING

    @property
    def is_completed(self) -> bool:
        return self.status is CacheStatus.COMPLETED

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready representation of this marker."""
        if self.is_processing:
            return {"status": self.status.value}
        return {"status": self.status.value, "value": self.value}

    @classmethod
    def processing(cls) -> "CacheEntry":
        return cls(status=CacheStatus.PROCESSING)

    @classmethod
    def completed(cls, value: Any) -> "CacheEntry":
        return cls(status=CacheStatus.COMPLETED, value=value)

    @classmethod
    def from_payload(cls, payload: Any) -> "CacheEntry | None":
        """Rebuild a marker from a deserialized payload.

        Args:
            payload: The value read back from the store.

        Returns:
            The marker, or None if the payload is not a known marker.
        """
        if not isinstance(payload, dict):
            return None

        status = payload.get("status")
        if status == CacheStatus.PROCESSING.value:
            return cls.processing()
        if status == CacheStatus.COMPLETED.value:
            return cls.completed(payload.get("value"))
        return None
