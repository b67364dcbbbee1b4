#!/usr/bin/env python3
"""Script to verify field caching against a running example server."""

import asyncio
import time

import httpx

GRAPHQL_URL = "http://localhost:8000/graphql"

BOOKS_QUERY = '{ library(id: "1") { books { title } } }'
STATS_QUERY = "{ catalogStats { booksCalls openingHoursCalls } }"


async def graphql_query(client: httpx.AsyncClient, query: str) -> dict:
    response = await client.post(GRAPHQL_URL, json={"query": query})
    return response.json()


async def books_calls(client: httpx.AsyncClient) -> int:
    result = await graphql_query(client, STATS_QUERY)
    return result["data"]["catalogStats"]["booksCalls"]


async def main() -> None:
    async with httpx.AsyncClient(timeout=60) as client:
        before = await books_calls(client)

        # Five concurrent requests should trigger a single catalog load
        started = time.monotonic()
        await asyncio.gather(*(graphql_query(client, BOOKS_QUERY) for _ in range(5)))
        elapsed = time.monotonic() - started

        after = await books_calls(client)
        print(f"5 concurrent requests took {elapsed:.1f}s, catalog loads: {after - before}")

        started = time.monotonic()
        await graphql_query(client, BOOKS_QUERY)
        print(f"Cached request took {time.monotonic() - started:.3f}s")

        if after - before <= 1:
            print("SUCCESS: concurrent requests shared one resolution")
        else:
            print("FAILURE: the catalog was loaded more than once")


if __name__ == "__main__":
    asyncio.run(main())
