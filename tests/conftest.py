from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the baseid package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from baseid.core import config as core_config  # noqa: E402
from baseid.db import session as db_session  # noqa: E402
from baseid.db.create_tables import init_store  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.clear_engine_cache()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset cached settings/engine."""
    db_file = tmp_path / "nested" / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    db_session.metadata.drop_all(bind=engine)
    init_store()

    yield db_file

    try:
        db_session.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()
