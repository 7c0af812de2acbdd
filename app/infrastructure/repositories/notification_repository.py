"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import now_for_storage, to_local

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Store notification rows and serve the inbox queries.

    ``record`` and ``record_bulk`` are best-effort: a failed insert is rolled
    back and logged, and the caller only sees ``False``.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def record(
        self,
        user_id: str,
        *,
        type: str,
        title: str,
        message: str,
        ref_type: str | None = None,
        ref_id: str | None = None,
    ) -> bool:
        """Insert one notification for ``user_id``."""

        return self.record_bulk(
            [user_id],
            type=type,
            title=title,
            message=message,
            ref_type=ref_type,
            ref_id=ref_id,
        )

    def record_bulk(
        self,
        user_ids: Iterable[str],
        *,
        type: str,
        title: str,
        message: str,
        ref_type: str | None = None,
        ref_id: str | None = None,
    ) -> bool:
        """Insert one notification per distinct user in a single batch."""

        unique_ids = list(dict.fromkeys(user_id for user_id in user_ids if user_id))
        if not unique_ids:
            return True

        if ref_type is None or not ref_id:
            ref_type, ref_id = None, None
        created_at = now_for_storage()
        rows = [
            {
                "user_id": user_id,
                "type": type,
                "title": title,
                "message": message,
                "ref_type": ref_type,
                "ref_id": ref_id,
                "is_read": False,
                "created_at": created_at,
            }
            for user_id in unique_ids
        ]

        try:
            self.session.execute(NotificationModel.__table__.insert(), rows)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception(
                "Failed to record %s notification(s) of type %s", len(rows), type
            )
            return False

        logger.info("Recorded %s notification(s) of type %s", len(rows), type)
        return True

    def list_for_user(self, user_id: str, *, limit: int | None = 20) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: str) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .scalar()
            or 0
        )

    def mark_as_read(self, notification_id: int, *, user_id: str) -> bool:
        """Flag one of ``user_id``'s notifications as read.

        Returns ``False`` when no such notification belongs to the user.
        """

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return bool(updated)

    def mark_all_as_read(self, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return int(updated or 0)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            title=model.title,
            message=model.message,
            ref_type=model.ref_type,
            ref_id=model.ref_id,
            is_read=bool(model.is_read),
            created_at=to_local(model.created_at),
        )


__all__ = ["NotificationRepository"]
