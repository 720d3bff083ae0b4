"""Data access for DID records backed by SQLAlchemy."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError

from baseid.db.models import did_table
from baseid.db.session import get_session


class StoreError(Exception):
    """Raised when the underlying database call fails."""


@dataclass(frozen=True)
class DidRecord:
    id: str
    document: str
    signature: str


def normalize_id(value: str | None) -> str:
    return (value or "").lower()


class DidRepository:
    """Lookup/insert helpers for the ``did`` table."""

    def __init__(self, database_url: str | None = None) -> None:
        # None follows DATABASE_URL from the environment
        self.database_url = database_url

    def lookup(self, did_id: str) -> Optional[DidRecord]:
        key = normalize_id(did_id)
        # No ORDER BY: the first stored row wins when an id was written twice.
        stmt = (
            select(did_table.c.id, did_table.c.document, did_table.c.signature)
            .where(did_table.c.id == key)
            .limit(1)
        )
        try:
            with get_session(self.database_url) as session:
                row = session.execute(stmt).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"lookup failed for {key!r}") from exc
        if row is None:
            return None
        return DidRecord(id=row.id, document=row.document, signature=row.signature)

    def insert(self, did_id: str, document: str, signature: str) -> None:
        key = normalize_id(did_id)
        stmt = insert(did_table).values(id=key, document=document, signature=signature)
        try:
            with get_session(self.database_url) as session:
                session.execute(stmt)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"insert failed for {key!r}") from exc

    def count(self, did_id: str) -> int:
        key = normalize_id(did_id)
        stmt = select(func.count()).select_from(did_table).where(did_table.c.id == key)
        try:
            with get_session(self.database_url) as session:
                return int(session.execute(stmt).scalar_one())
        except SQLAlchemyError as exc:
            raise StoreError(f"count failed for {key!r}") from exc
