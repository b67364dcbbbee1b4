"""Pytest configuration for cachedirective tests."""

import asyncio
from datetime import timedelta

import pytest

from cachedirective import CacheCoordinator, InMemoryCacheBackend


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        """Drop-in for asyncio.sleep that moves the clock instead."""
        self.advance(seconds)


class YieldingBackend(InMemoryCacheBackend):
    """In-memory backend that yields to the event loop on every call.

    Makes store access suspend the way a network round-trip would, so
    concurrent callers interleave between their read and their write.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.calls: list[tuple[str, str]] = []

    async def get(self, key: str) -> bytes | None:
        self.calls.append(("get", key))
        await asyncio.sleep(0)
        return await super().get(key)

    async def set(self, key: str, value: bytes, ttl: timedelta | None = None) -> None:
        self.calls.append(("set", key))
        await asyncio.sleep(0)
        await super().set(key, value, ttl)

    async def add(self, key: str, value: bytes, ttl: timedelta | None = None) -> bool:
        self.calls.append(("add", key))
        await asyncio.sleep(0)
        return await super().add(key, value, ttl)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend(clock: FakeClock) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(maxsize=100, timer=clock)


@pytest.fixture
def coordinator(backend: InMemoryCacheBackend, clock: FakeClock) -> CacheCoordinator:
    return CacheCoordinator(backend=backend, sleep=clock.sleep)


@pytest.fixture
def yielding_backend() -> YieldingBackend:
    return YieldingBackend(maxsize=100)
