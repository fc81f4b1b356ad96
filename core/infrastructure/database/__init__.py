"""Async database engine lifecycle."""
