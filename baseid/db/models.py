"""Table definitions for the DID store."""
from __future__ import annotations

from sqlalchemy import Column, Table, Text

from .session import metadata

# No primary key and no unique constraint on id: duplicate writes append rows.
did_table = Table(
    "did",
    metadata,
    Column("id", Text),
    Column("document", Text),
    Column("signature", Text),
)
