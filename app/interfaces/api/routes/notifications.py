"""Endpoints for reading and acknowledging notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    list_inbox,
    mark_all_notifications_read,
    mark_notification_read,
)
from app.application.use_cases.notifications.inbox import MAX_INBOX_LIMIT
from app.domain.entities import Notification, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import (
    MessageResponse,
    NotificationInboxRead,
    NotificationRead,
    NotificationReadAllResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=NotificationInboxRead)
def list_notifications(
    limit: int = Query(20, ge=1, le=MAX_INBOX_LIMIT),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationInboxRead:
    """Return the newest notifications and the unread count for the caller."""

    try:
        inbox = list_inbox(db, user_id=current_user.id, limit=limit)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load notifications for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Gagal mengambil notifikasi.",
        ) from exc

    return NotificationInboxRead(
        notifications=[_notification_to_schema(n) for n in inbox.notifications],
        unread_count=inbox.unread_count,
    )


@router.patch("/read-all", response_model=NotificationReadAllResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationReadAllResponse:
    try:
        updated = mark_all_notifications_read(db, user_id=current_user.id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to mark notifications read for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Gagal memperbarui notifikasi.",
        ) from exc
    return NotificationReadAllResponse(updated=updated)


@router.patch("/{notification_id}/read", response_model=MessageResponse)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Mark one of the caller's notifications as read.

    Notifications owned by someone else are left untouched and reported as
    missing.
    """

    try:
        updated = mark_notification_read(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to mark notification %s read", notification_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Gagal memperbarui notifikasi.",
        ) from exc

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notifikasi tidak ditemukan.",
        )
    return MessageResponse(message="Notifikasi ditandai sudah dibaca.")
