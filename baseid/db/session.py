"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session

from baseid.core.config import get_settings

metadata = MetaData()


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if not parsed.drivername.startswith("sqlite"):
        return
    database = parsed.database or ""
    if database and database != ":memory:":
        Path(database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def _resolve_url(database_url: str | None) -> str:
    url = (database_url if database_url is not None else get_settings().database_url) or ""
    url = url.strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return url


@lru_cache
def _engine_for(url: str):
    _ensure_sqlite_dir(url)
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def _sessionmaker_for(url: str):
    return sessionmaker(bind=_engine_for(url), autoflush=False, autocommit=False, future=True)


def get_engine(database_url: str | None = None):
    """Engine for ``database_url``, or for the configured DATABASE_URL when omitted."""
    return _engine_for(_resolve_url(database_url))


def clear_engine_cache() -> None:
    _sessionmaker_for.cache_clear()
    _engine_for.cache_clear()


@contextmanager
def get_session(database_url: str | None = None) -> Session:
    session: Session = _sessionmaker_for(_resolve_url(database_url))()
    try:
        yield session
    finally:
        session.close()
