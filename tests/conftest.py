"""Shared fixtures for the activity service test-suite."""

from __future__ import annotations

import os
import pathlib

TEST_DB_PATH = pathlib.Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "Asia/Kolkata"
os.environ.setdefault("ORDER_UPDATE_THRESHOLD_MINUTES", "60")
os.environ.setdefault("RECENT_ACTIVITY_LIMIT", "4")

import pytest


@pytest.fixture(scope="session", autouse=True)
def _remove_test_database():
    yield
    from app.infrastructure import database

    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    from app.infrastructure import database

    database.initialize_database()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
