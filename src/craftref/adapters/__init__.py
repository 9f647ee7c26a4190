"""Adapters that satisfy the core ports (HTTP, SQLite, Gemini, formatting)."""
