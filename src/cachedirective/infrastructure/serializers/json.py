"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any


class SerializationError(Exception):
    """Raised when a store payload cannot be encoded or decoded."""


class JsonSerializer:
    """JSON serializer for store payloads.

    Resolved values are written as JSON text, so whatever a resolver
    returns comes back from the cache as plain dicts, lists and scalars.
    Objects without a JSON form are encoded from their ``__dict__``.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Serialize value to JSON bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            return json.dumps(value, default=self._default_encoder).encode(
                self._encoding
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes | str) -> Any:
        """Deserialize JSON bytes (or text) to a value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            if isinstance(data, bytes):
                data = data.decode(self._encoding)
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, (set, frozenset, tuple)):
            return list(obj)
        if hasattr(obj, "__dict__"):
            return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
