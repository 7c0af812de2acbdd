"""Fixtures for exercising the HTTP API against the configured database."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.infrastructure import database


@pytest.fixture()
def db_session():
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
