"""cachedirective - field-level caching for GraphQL resolvers.

Adds a ``@cache`` schema directive that caches the result of individual
fields in a key-value store, deduplicating concurrent resolutions of the
same key across processes.

Example with Ariadne:
    from ariadne import ObjectType, QueryType
    from cachedirective.adapters.ariadne import make_cached_schema
    from cachedirective_redis import RedisCacheBackend

    type_defs = '''
        type Query {
            library(id: ID!): Library
        }

        type Library {
            id: ID!
            books: [Book!]! @cache(cacheKey: "parent.id", ttl: 300)
        }

        type Book {
            title: String!
        }
    '''

    query = QueryType()
    library = ObjectType("Library")

    @query.field("library")
    def resolve_library(_, info, id):
        return {"id": id}

    @library.field("books")
    async def resolve_books(obj, info):
        return await load_books(obj["id"])

    schema = make_cached_schema(
        type_defs,
        query,
        library,
        backend=RedisCacheBackend("redis://localhost:6379"),
    )

Directive arguments:
    ttl: Lifetime of the cached result in seconds (default 900).
    cacheKey: Key tokens (default ["parent", "args", "vars"]).
    type: SHARED (concurrent callers wait for one resolution, default) or
        SCOPED (no coordination).
    pollingTimeout: Lifetime of the processing marker in seconds (default 30).
    pingInterval: Polling delay in milliseconds (default 1000).
"""

from cachedirective.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheStatus,
    CacheType,
    FieldCacheConfig,
)
from cachedirective.core.interfaces import (
    IAtomicCacheBackend,
    ICacheBackend,
    IKeyCompiler,
    ISerializer,
)
from cachedirective.core.services import (
    CACHE_DIRECTIVE,
    CacheCoordinator,
    DirectiveArgumentReader,
    DirectiveParser,
    FieldCacheInterceptor,
    apply_cache_directive,
    get_cache_directive_sdl,
)
from cachedirective.infrastructure import (
    CacheKeyCompiler,
    InMemoryCacheBackend,
    JsonSerializer,
    SerializationError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheStatus",
    "CacheType",
    "FieldCacheConfig",
    # Directive parsing
    "CACHE_DIRECTIVE",
    "DirectiveArgumentReader",
    "DirectiveParser",
    "get_cache_directive_sdl",
    # Core interfaces
    "ICacheBackend",
    "IAtomicCacheBackend",
    "IKeyCompiler",
    "ISerializer",
    # Core services
    "CacheCoordinator",
    "FieldCacheInterceptor",
    "apply_cache_directive",
    # Infrastructure implementations
    "CacheKeyCompiler",
    "InMemoryCacheBackend",
    "JsonSerializer",
    "SerializationError",
]
