"""Create the DID schema (idempotent)."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import metadata, get_engine
from . import models  # noqa: F401  # ensure tables are registered on metadata

logger = logging.getLogger(__name__)


def init_store(database_url: str | None = None) -> None:
    engine = get_engine(database_url)
    metadata.create_all(bind=engine)
    logger.info("Connected to the Base ID database (%s)", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    try:
        init_store()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
