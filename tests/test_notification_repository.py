"""Tests for notification persistence and inbox queries."""

from __future__ import annotations

import logging

from app.infrastructure.database import Base
from app.infrastructure.models import NotificationModel
from app.infrastructure.repositories import NotificationRepository

from tests.factories import add_user


def _rows(session):
    return session.query(NotificationModel).order_by(NotificationModel.id).all()


def test_record_bulk_inserts_one_row_per_distinct_user(session):
    repository = NotificationRepository(session)

    recorded = repository.record_bulk(
        ["u1", "u2", "u1", "", "u3"],
        type="new_report",
        title="Laporan Baru di Sekitar Anda",
        message="Ada laporan Banjir baru.",
        ref_type="report",
        ref_id="r-1",
    )

    assert recorded is True
    rows = _rows(session)
    assert [row.user_id for row in rows] == ["u1", "u2", "u3"]
    assert all(row.ref_type == "report" and row.ref_id == "r-1" for row in rows)
    assert all(row.is_read is False for row in rows)
    assert len({row.created_at for row in rows}) == 1


def test_record_bulk_with_no_users_writes_nothing(session):
    assert NotificationRepository(session).record_bulk([], type="info", title="t", message="m")
    assert _rows(session) == []


def test_partial_reference_is_stored_as_none(session):
    NotificationRepository(session).record(
        "u1", type="info", title="Info", message="m", ref_type="report", ref_id=None
    )

    row = _rows(session)[0]
    assert row.ref_type is None
    assert row.ref_id is None


def test_record_failure_is_logged_and_reported(session, engine, caplog):
    NotificationModel.__table__.drop(bind=engine)

    with caplog.at_level(logging.ERROR):
        recorded = NotificationRepository(session).record(
            "u1", type="info", title="Info", message="m"
        )

    assert recorded is False
    assert "Failed to record 1 notification(s)" in caplog.text
    Base.metadata.create_all(bind=engine)


def test_inbox_queries_are_scoped_to_owner(session):
    add_user(session, "u1")
    add_user(session, "u2")
    repository = NotificationRepository(session)
    for title in ("first", "second", "third"):
        repository.record("u1", type="info", title=title, message="m")
    repository.record("u2", type="info", title="other", message="m")

    notifications = repository.list_for_user("u1", limit=2)

    assert [n.title for n in notifications] == ["third", "second"]
    assert notifications[0].created_at.tzinfo is not None
    assert repository.count_unread("u1") == 3
    assert repository.count_unread("u2") == 1


def test_mark_as_read_only_touches_owned_rows(session):
    repository = NotificationRepository(session)
    repository.record("u1", type="info", title="mine", message="m")
    notification_id = _rows(session)[0].id

    assert repository.mark_as_read(notification_id, user_id="u2") is False
    assert repository.count_unread("u1") == 1

    assert repository.mark_as_read(notification_id, user_id="u1") is True
    assert repository.count_unread("u1") == 0


def test_mark_all_as_read_returns_updated_count(session):
    repository = NotificationRepository(session)
    repository.record_bulk(["u1"], type="info", title="a", message="m")
    repository.record_bulk(["u1"], type="info", title="b", message="m")
    repository.record_bulk(["u2"], type="info", title="c", message="m")

    assert repository.mark_all_as_read("u1") == 2
    assert repository.mark_all_as_read("u1") == 0
    assert repository.count_unread("u2") == 1
