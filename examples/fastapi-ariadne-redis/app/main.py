"""FastAPI + Ariadne + cachedirective example."""

import logging
import os
from contextlib import asynccontextmanager

from ariadne.asgi import GraphQL
from fastapi import FastAPI

from app.resolvers import resolvers
from app.schema import TYPE_DEFS

from cachedirective import CacheConfig, CacheCoordinator
from cachedirective.adapters.ariadne import make_cached_schema
from cachedirective_redis import RedisCacheBackend

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

cache_backend = RedisCacheBackend(
    redis_url=REDIS_URL,
    key_prefix="cachedirective:example",
)

coordinator = CacheCoordinator(
    backend=cache_backend,
    config=CacheConfig(atomic_claims=True),
)

schema = make_cached_schema(TYPE_DEFS, *resolvers, coordinator=coordinator)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.info("Connecting to Redis at %s", REDIS_URL)
    yield
    logging.info("Closing Redis connection")
    await cache_backend.close()


app = FastAPI(
    title="cachedirective Example API",
    description="GraphQL API with field-level @cache directives",
    version="1.0.0",
    lifespan=lifespan,
)

app.mount("/graphql", GraphQL(schema, debug=DEBUG))


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get("/cache/stats")
async def cache_stats():
    return {"stats": coordinator.stats}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
