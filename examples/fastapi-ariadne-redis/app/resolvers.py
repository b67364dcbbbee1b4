"""GraphQL resolvers for the library example."""

import asyncio

from ariadne import ObjectType, QueryType

BOOKS = [
    {"id": "1", "title": "The Left Hand of Darkness", "author": "Ursula K. Le Guin"},
    {"id": "2", "title": "Kindred", "author": "Octavia E. Butler"},
    {"id": "3", "title": "Solaris", "author": "Stanisław Lem"},
]

SLOW_CATALOG_SECONDS = 3

call_count = {"books": 0, "opening_hours": 0}

query = QueryType()
library = ObjectType("Library")


@query.field("library")
def resolve_library(_, info, id: str):
    return {"id": id}


@query.field("catalogStats")
def resolve_catalog_stats(_, info):
    return {
        "booksCalls": call_count["books"],
        "openingHoursCalls": call_count["opening_hours"],
    }


@library.field("books")
async def resolve_books(obj, info):
    """Simulate a slow catalog lookup."""
    call_count["books"] += 1
    await asyncio.sleep(SLOW_CATALOG_SECONDS)
    return BOOKS


@library.field("openingHours")
def resolve_opening_hours(obj, info, day: str):
    call_count["opening_hours"] += 1
    if day.lower() in ("saturday", "sunday"):
        return "10:00-14:00"
    return "09:00-18:00"


resolvers = [query, library]
