"""Tests for FieldCacheInterceptor."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from graphql import build_schema, default_field_resolver

from cachedirective import (
    CACHE_DIRECTIVE,
    CacheConfig,
    CacheCoordinator,
    FieldCacheInterceptor,
    InMemoryCacheBackend,
)

TYPE_DEFS = CACHE_DIRECTIVE + """
type Query {
    library(id: ID!): Library
}

type Library {
    id: ID!
    name: String
    books(genre: String): [String!]! @cache(cacheKey: ["parent.id", "args"], ttl: 300)
}
"""


def make_info(variables: dict | None = None) -> MagicMock:
    info = MagicMock()
    info.variable_values = variables or {}
    info.parent_type.name = "Library"
    info.field_name = "books"
    return info


@pytest.fixture
def schema():
    return build_schema(TYPE_DEFS)


class TestFieldCacheInterceptor:
    """Tests for FieldCacheInterceptor."""

    def test_uncached_field_keeps_resolver(self, schema) -> None:
        field = schema.get_type("Library").fields["name"]
        original = MagicMock()
        field.resolve = original

        interceptor = FieldCacheInterceptor(CacheCoordinator(InMemoryCacheBackend()))

        assert interceptor.wrap(field) is original

    def test_uncached_field_without_resolver(self, schema) -> None:
        field = schema.get_type("Library").fields["name"]
        interceptor = FieldCacheInterceptor(CacheCoordinator(InMemoryCacheBackend()))

        assert interceptor.wrap(field) is default_field_resolver

    @pytest.mark.asyncio
    async def test_cached_field_resolves_once(self, schema) -> None:
        field = schema.get_type("Library").fields["books"]
        calls = []

        def resolve_books(parent, info, **args):
            calls.append((parent, args))
            return ["Dune"]

        field.resolve = resolve_books
        interceptor = FieldCacheInterceptor(CacheCoordinator(InMemoryCacheBackend()))
        resolve = interceptor.wrap(field)

        first = await resolve({"id": "1"}, make_info(), genre="sci-fi")
        second = await resolve({"id": "1"}, make_info(), genre="sci-fi")

        assert first == second == ["Dune"]
        assert calls == [({"id": "1"}, {"genre": "sci-fi"})]

    @pytest.mark.asyncio
    async def test_key_follows_directive(self, schema) -> None:
        field = schema.get_type("Library").fields["books"]
        resolver = AsyncMock(return_value=["Dune"])
        field.resolve = resolver
        resolve = FieldCacheInterceptor(
            CacheCoordinator(InMemoryCacheBackend())
        ).wrap(field)

        await resolve({"id": "1"}, make_info({"v": 1}), genre="sci-fi")
        # vars are not part of the cache key
        await resolve({"id": "1"}, make_info({"v": 2}), genre="sci-fi")
        await resolve({"id": "2"}, make_info(), genre="sci-fi")
        await resolve({"id": "1"}, make_info(), genre="drama")

        assert resolver.await_count == 3

    @pytest.mark.asyncio
    async def test_disabled_cache_passes_through(self, schema) -> None:
        field = schema.get_type("Library").fields["books"]
        field.resolve = AsyncMock(return_value=["Dune"])
        backend = AsyncMock()
        interceptor = FieldCacheInterceptor(
            CacheCoordinator(backend, config=CacheConfig(enabled=False))
        )
        resolve = interceptor.wrap(field)

        assert await resolve({"id": "1"}, make_info()) == ["Dune"]
        assert await resolve({"id": "1"}, make_info()) == ["Dune"]
        assert field.resolve.await_count == 2
        backend.get.assert_not_called()
        backend.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolver_error_propagates(self, schema) -> None:
        field = schema.get_type("Library").fields["books"]
        field.resolve = AsyncMock(side_effect=LookupError("no such library"))
        resolve = FieldCacheInterceptor(
            CacheCoordinator(InMemoryCacheBackend())
        ).wrap(field)

        with pytest.raises(LookupError, match="no such library"):
            await resolve({"id": "1"}, make_info())

    def test_apply_wraps_only_cached_fields(self, schema) -> None:
        library = schema.get_type("Library")
        name_resolver = library.fields["name"].resolve

        FieldCacheInterceptor(CacheCoordinator(InMemoryCacheBackend())).apply(schema)

        assert library.fields["name"].resolve is name_resolver
        assert library.fields["books"].resolve is not None
        assert schema.query_type.fields["library"].resolve is None
