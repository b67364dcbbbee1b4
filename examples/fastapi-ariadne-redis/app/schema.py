"""GraphQL schema definitions with @cache directives."""

TYPE_DEFS = """
type Query {
    library(id: ID!): Library
    \"\"\"Catalog call statistics. Never cached (for debugging).\"\"\"
    catalogStats: CatalogStats!
}

type Library {
    id: ID!

    \"\"\"
    Books of the library.
    Loading takes seconds, so concurrent requests wait for a single load
    (SHARED). Keyed by the library id only.
    \"\"\"
    books: [Book!]! @cache(cacheKey: "parent.id", ttl: 300, pollingTimeout: 30, pingInterval: 200)

    \"\"\"
    Opening hours for a given day.
    Cheap to compute, cached per library and day without coordination.
    \"\"\"
    openingHours(day: String!): String! @cache(cacheKey: ["parent.id", "args.day"], type: SCOPED, ttl: 3600)
}

type Book {
    id: ID!
    title: String!
    author: String!
}

type CatalogStats {
    booksCalls: Int!
    openingHoursCalls: Int!
}
"""
