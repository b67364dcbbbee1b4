"""Serializer implementations."""

from cachedirective.infrastructure.serializers.json import (
    JsonSerializer,
    SerializationError,
)

__all__ = ["JsonSerializer", "SerializationError"]
