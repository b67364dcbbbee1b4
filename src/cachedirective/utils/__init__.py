"""Utility helpers for cachedirective."""
