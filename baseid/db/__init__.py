"""Database helpers (engine/session export)."""

from .session import metadata, clear_engine_cache, get_engine, get_session

__all__ = ["metadata", "clear_engine_cache", "get_engine", "get_session"]
