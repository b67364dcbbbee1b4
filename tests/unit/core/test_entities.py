"""Tests for core entities."""

from datetime import timedelta

import pytest

from cachedirective.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheStatus,
    CacheType,
    FieldCacheConfig,
)


class TestFieldCacheConfig:
    """Tests for FieldCacheConfig entity."""

    def test_defaults(self) -> None:
        """Test documented defaults."""
        config = FieldCacheConfig()

        assert config.ttl == 900
        assert config.cache_key == ("parent", "args", "vars")
        assert config.type is CacheType.SHARED
        assert config.polling_timeout == 30
        assert config.ping_interval == 1000

    def test_durations(self) -> None:
        """Test derived durations."""
        config = FieldCacheConfig(ttl=300, polling_timeout=10, ping_interval=250)

        assert config.ttl_delta == timedelta(seconds=300)
        assert config.polling_timeout_delta == timedelta(seconds=10)
        assert config.ping_interval_seconds == 0.25

    def test_max_polls(self) -> None:
        """Test the poll budget covers one marker lifetime."""
        assert FieldCacheConfig().max_polls == 30
        assert FieldCacheConfig(polling_timeout=1, ping_interval=300).max_polls == 4
        assert FieldCacheConfig(polling_timeout=1, ping_interval=5000).max_polls == 1

    def test_is_immutable(self) -> None:
        """Test that field configuration cannot be mutated."""
        config = FieldCacheConfig()

        with pytest.raises(AttributeError):
            config.ttl = 10  # type: ignore[misc]

    def test_is_shared(self) -> None:
        assert FieldCacheConfig().is_shared is True
        assert FieldCacheConfig(type=CacheType.SCOPED).is_shared is False


class TestCacheConfig:
    """Tests for CacheConfig entity."""

    def test_defaults(self) -> None:
        config = CacheConfig()

        assert config.enabled is True
        assert config.key_prefix == "ch-"
        assert config.directive_name == "cache"
        assert config.atomic_claims is False

    def test_default_cache_key_normalized(self) -> None:
        """Test that a single token or a list becomes a tuple."""
        assert CacheConfig(default_cache_key="parent.id").default_cache_key == (
            "parent.id",
        )
        assert CacheConfig(
            default_cache_key=["args", "vars"]  # type: ignore[arg-type]
        ).default_cache_key == ("args", "vars")


class TestCacheEntry:
    """Tests for CacheEntry markers."""

    def test_processing_payload(self) -> None:
        entry = CacheEntry.processing()

        assert entry.is_processing
        assert entry.to_payload() == {"status": "processing"}

    def test_completed_payload(self) -> None:
        entry = CacheEntry.completed({"id": "1"})

        assert entry.is_completed
        assert entry.to_payload() == {"status": "completed", "value": {"id": "1"}}

    def test_from_payload(self) -> None:
        processing = CacheEntry.from_payload({"status": "processing"})
        completed = CacheEntry.from_payload({"status": "completed", "value": 0})

        assert processing is not None and processing.status is CacheStatus.PROCESSING
        assert completed is not None and completed.value == 0

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [1, 2, 3],
            "completed",
            {"status": "unknown"},
            {"value": 42},
        ],
    )
    def test_from_payload_unknown(self, payload: object) -> None:
        """Test that anything but a known marker is not an entry."""
        assert CacheEntry.from_payload(payload) is None
