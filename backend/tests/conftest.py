from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
# Keep the import-time default engine off the filesystem.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest

from event_signups.core.config import Settings
from event_signups.db import build_db_components, init_db
from event_signups.domain import EventDetails
from event_signups.repositories import EventRepository


@pytest.fixture
def test_settings(tmp_path, monkeypatch) -> Settings:
    settings = Settings(database_url=f"sqlite:///{tmp_path/'event_signups.db'}")
    monkeypatch.setattr("event_signups.core.config.get_settings", lambda: settings)
    monkeypatch.setattr("event_signups.core.config.settings", settings)
    return settings


@pytest.fixture
def db_components(test_settings):
    engine, session_factory = build_db_components(test_settings.resolved_database_url)
    init_db(engine)
    yield engine, session_factory
    engine.dispose()


@pytest.fixture
def db_engine(db_components):
    return db_components[0]


@pytest.fixture
def session_factory(db_components):
    return db_components[1]


@pytest.fixture
def session(session_factory):
    db_session = session_factory()
    try:
        yield db_session
    finally:
        db_session.close()


@pytest.fixture
def make_event(session):
    """Create and flush an event row, returning its id."""

    def _make_event(title: str = "Spring gala", **overrides) -> int:
        details = EventDetails(
            title=title,
            start_time=overrides.pop("start_time", datetime(2024, 5, 1, 18, 0)),
            end_time=overrides.pop("end_time", datetime(2024, 5, 1, 23, 0)),
            **overrides,
        )
        return EventRepository(session).create_event(details).id

    return _make_event
