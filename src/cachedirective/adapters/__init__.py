"""Framework adapters for cachedirective."""
