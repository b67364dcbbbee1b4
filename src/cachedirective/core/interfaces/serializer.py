"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for encoding store payloads.

    Both SHARED markers and raw SCOPED values pass through the
    serializer on their way into and out of the backend.
    """

    def serialize(self, value: Any) -> bytes:
        """Encode a payload for storage.

        Raises:
            SerializationError: If the value cannot be encoded.
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Decode a payload read from the store.

        Raises:
            SerializationError: If the data is not a valid payload.
        """
        ...
