"""Use cases backing the notification inbox endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

MAX_INBOX_LIMIT = 100


@dataclass(frozen=True)
class Inbox:
    notifications: Sequence[Notification]
    unread_count: int


def list_inbox(session: Session, *, user_id: str, limit: int = 20) -> Inbox:
    """Return the newest notifications for ``user_id`` with the unread total."""

    if limit < 1:
        raise ValueError("Limit minimal 1.")
    limit = min(limit, MAX_INBOX_LIMIT)

    repository = NotificationRepository(session)
    return Inbox(
        notifications=repository.list_for_user(user_id, limit=limit),
        unread_count=repository.count_unread(user_id),
    )


def mark_notification_read(session: Session, *, user_id: str, notification_id: int) -> bool:
    return NotificationRepository(session).mark_as_read(notification_id, user_id=user_id)


def mark_all_notifications_read(session: Session, *, user_id: str) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


__all__ = [
    "Inbox",
    "MAX_INBOX_LIMIT",
    "list_inbox",
    "mark_all_notifications_read",
    "mark_notification_read",
]
