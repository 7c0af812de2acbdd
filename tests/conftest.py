"""Shared fixtures for the notification service tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"notifications-test-{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("APP_TIMEZONE", "Asia/Jakarta")

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.config import Settings  # noqa: E402
from app.infrastructure.database import initialize_database  # noqa: E402
from app.infrastructure.notifications import InlineTaskScheduler  # noqa: E402

from tests.factories import FakePushGateway, RecordingScheduler  # noqa: E402


@pytest.fixture()
def engine():
    """In-memory database shared by every session of a single test."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def push_gateway() -> FakePushGateway:
    return FakePushGateway()


@pytest.fixture()
def inline_scheduler() -> InlineTaskScheduler:
    return InlineTaskScheduler()


@pytest.fixture()
def recording_scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture()
def settings() -> Settings:
    return Settings(database_url="sqlite://", push_enabled=True, push_channel_id="default")


def pytest_sessionfinish(session, exitstatus):  # noqa: ARG001
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
