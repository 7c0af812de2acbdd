"""Entry points used by event producers to fan out notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.domain.entities import NotificationContent
from app.infrastructure.notifications import PushDispatcher, TaskScheduler
from app.infrastructure.push import PushGateway
from app.infrastructure.repositories import (
    DeviceTokenRepository,
    NotificationRepository,
    UserRepository,
)

from .recipients import RecipientResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AreaAudience:
    """Recipients to resolve from a report's location at fan-out time."""

    origin_lat: float | None
    origin_lng: float | None
    category: str | None
    district: str | None
    author_id: str | None
    include_government: bool = True


def _unique_recipients(recipient_ids: Iterable[str | None], exclude: str | None) -> list[str]:
    return [
        recipient
        for recipient in dict.fromkeys(recipient_ids)
        if recipient and recipient != exclude
    ]


class NotificationOrchestrator:
    """Persist notifications and push them without holding up the request.

    Every public method only validates input and submits work to the
    scheduler; recipient resolution, inserts, and push delivery all happen in
    the detached task, each in a fresh database session. Nothing here raises
    to the caller.
    """

    def __init__(
        self,
        *,
        session_factory: Callable[[], Session],
        scheduler: TaskScheduler,
        push_gateway: PushGateway,
        settings: Settings | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._scheduler = scheduler
        self._push_gateway = push_gateway
        self._settings = settings or get_settings()

    def notify_one(
        self,
        recipient_id: str | None,
        *,
        type: str,
        title: str,
        message: str,
        ref_type: str | None = None,
        ref_id: str | None = None,
        actor_id: str | None = None,
    ) -> bool:
        """Notify a single user, unless that user is the one acting."""

        if not recipient_id or recipient_id == actor_id:
            return False
        return self.notify_many(
            [recipient_id],
            type=type,
            title=title,
            message=message,
            ref_type=ref_type,
            ref_id=ref_id,
        )

    def notify_many(
        self,
        recipient_ids: Iterable[str | None],
        *,
        type: str,
        title: str,
        message: str,
        ref_type: str | None = None,
        ref_id: str | None = None,
        exclude_user_id: str | None = None,
    ) -> bool:
        """Notify every distinct user in ``recipient_ids``.

        Returns ``False`` without scheduling anything when no recipient is
        left after de-duplication.
        """

        recipients = _unique_recipients(recipient_ids, exclude_user_id)
        if not recipients:
            return False
        content = self._build_content(type, title, message, ref_type, ref_id)
        if content is None:
            return False
        self._scheduler.submit(self._deliver, recipients, content)
        return True

    def notify_area(
        self,
        audience: AreaAudience,
        *,
        type: str,
        title: str,
        message: str,
        ref_type: str | None = None,
        ref_id: str | None = None,
    ) -> bool:
        """Notify users near a location, resolved inside the detached task."""

        content = self._build_content(type, title, message, ref_type, ref_id)
        if content is None:
            return False
        self._scheduler.submit(self._deliver_to_area, audience, content)
        return True

    def _deliver_to_area(self, audience: AreaAudience, content: NotificationContent) -> None:
        session = self._session_factory()
        try:
            resolver = RecipientResolver(
                UserRepository(session),
                default_radius_km=self._settings.default_radius_km,
                government_role_alias=self._settings.government_role_alias,
            )
            recipients = resolver.resolve_radius_recipients(
                audience.origin_lat,
                audience.origin_lng,
                audience.category,
                audience.district,
                audience.author_id,
            )
            if audience.include_government:
                recipients |= resolver.resolve_government_recipients()
        finally:
            session.close()

        recipients.discard(audience.author_id)
        if not recipients:
            logger.info("No recipients near %s %s", content.ref_type or "event", content.ref_id)
            return
        self._deliver(sorted(recipients), content)

    def _deliver(self, recipients: list[str], content: NotificationContent) -> None:
        try:
            self._record(recipients, content)
        except Exception:
            logger.exception("Failed to record %s notification(s)", content.type)

        # Push is attempted even when the insert failed.
        self._push(recipients, content)

    def _record(self, recipients: list[str], content: NotificationContent) -> bool:
        session = self._session_factory()
        try:
            return NotificationRepository(session).record_bulk(
                recipients,
                type=content.type,
                title=content.title,
                message=content.message,
                ref_type=content.ref_type,
                ref_id=content.ref_id,
            )
        finally:
            session.close()

    def _push(self, recipients: list[str], content: NotificationContent) -> None:
        session = self._session_factory()
        try:
            dispatcher = PushDispatcher(
                DeviceTokenRepository(session),
                self._push_gateway,
                channel_id=self._settings.push_channel_id,
                enabled=self._settings.push_enabled,
            )
            dispatcher.dispatch(recipients, content.title, content.message, content.push_payload())
        finally:
            session.close()

    @staticmethod
    def _build_content(
        type: str,
        title: str,
        message: str,
        ref_type: str | None,
        ref_id: str | None,
    ) -> NotificationContent | None:
        try:
            return NotificationContent(
                type=type,
                title=title,
                message=message,
                ref_type=ref_type,
                ref_id=ref_id,
            )
        except ValueError:
            logger.exception("Discarding malformed notification %r", title)
            return None


__all__ = ["AreaAudience", "NotificationOrchestrator"]
