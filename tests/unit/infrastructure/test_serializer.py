"""Tests for JsonSerializer."""

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from cachedirective.infrastructure.serializers.json import (
    JsonSerializer,
    SerializationError,
)


@dataclass
class Book:
    title: str
    year: int


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        return JsonSerializer()

    def test_serialize_marker(self, serializer: JsonSerializer) -> None:
        result = serializer.serialize({"status": "completed", "value": [1, 2]})

        assert isinstance(result, bytes)
        assert serializer.deserialize(result) == {"status": "completed", "value": [1, 2]}

    def test_deserialize_text(self, serializer: JsonSerializer) -> None:
        """Test that stores returning str are accepted."""
        assert serializer.deserialize('{"status": "processing"}') == {
            "status": "processing"
        }

    def test_serialize_scalars(self, serializer: JsonSerializer) -> None:
        assert serializer.serialize(None) == b"null"
        assert serializer.serialize(0) == b"0"
        assert serializer.serialize("") == b'""'

    def test_serialize_datetime(self, serializer: JsonSerializer) -> None:
        data = {"at": datetime(2024, 1, 15, 10, 30), "on": date(2024, 1, 15)}

        assert serializer.deserialize(serializer.serialize(data)) == {
            "at": "2024-01-15T10:30:00",
            "on": "2024-01-15",
        }

    def test_serialize_object(self, serializer: JsonSerializer) -> None:
        """Test that resolver objects are stored as their attributes."""
        result = serializer.deserialize(serializer.serialize([Book("Dune", 1965)]))

        assert result == [{"title": "Dune", "year": 1965}]

    def test_serialize_unsupported(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.serialize(object())

    def test_deserialize_invalid(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(b"not json")

    def test_deserialize_invalid_encoding(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(b"\xff\xfe")
