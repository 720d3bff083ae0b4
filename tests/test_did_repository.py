"""
Smoke tests for the DidRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from baseid.db import session as db_session
from baseid.db.create_tables import init_store
from baseid.repositories.did_repository import DidRecord, DidRepository, StoreError


def test_insert_then_lookup_round_trip(temp_db):
    repo = DidRepository()
    repo.insert("abc", "doc", "sig")
    record = repo.lookup("abc")
    assert record == DidRecord(id="abc", document="doc", signature="sig")


def test_lookup_is_case_insensitive(temp_db):
    repo = DidRepository()
    assert repo.lookup("Abc") == repo.lookup("abc") is None
    repo.insert("ABC", "doc", "sig")
    assert repo.lookup("Abc") == repo.lookup("abc")
    assert repo.lookup("aBC").id == "abc"


def test_missing_id_returns_none(temp_db):
    assert DidRepository().lookup("nobody") is None


def test_duplicate_ids_append_and_first_row_wins(temp_db):
    repo = DidRepository()
    repo.insert("dup", "first", "sig1")
    repo.insert("DUP", "second", "sig2")
    assert repo.count("dup") == 2
    record = repo.lookup("dup")
    assert record is not None
    assert record.document == "first"
    assert record.signature == "sig1"


def test_missing_table_raises_store_error(temp_db):
    repo = DidRepository()
    db_session.metadata.drop_all(bind=db_session.get_engine())
    with pytest.raises(StoreError):
        repo.lookup("abc")
    with pytest.raises(StoreError):
        repo.insert("abc", "doc", "sig")


def test_sqlite_parent_directory_is_created(temp_db):
    assert temp_db.parent.is_dir()


def test_repository_bound_to_explicit_url(temp_db, tmp_path):
    other_url = f"sqlite:///{tmp_path / 'explicit.db'}"
    init_store(other_url)
    try:
        DidRepository(other_url).insert("Abc", "doc", "sig")
        assert DidRepository(other_url).lookup("abc") == DidRecord(id="abc", document="doc", signature="sig")
        assert DidRepository().lookup("abc") is None
    finally:
        db_session.get_engine(other_url).dispose()
