"""Persistence layer for push device tokens."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken, normalize_platform
from app.infrastructure.models import DeviceTokenModel
from app.utils import now_for_storage, to_local

logger = logging.getLogger(__name__)


class DeviceTokenRepository:
    """Registry mapping each push token to the user that currently owns it.

    Rows are keyed by token: registering a token that belongs to someone else
    moves it to the new user. Tokens are deactivated, never deleted.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def upsert_token(self, user_id: str, token: str, platform: str | None) -> DeviceToken:
        """Bind ``token`` to ``user_id`` and mark it active."""

        platform = normalize_platform(platform)
        now = self._now()

        model = self._get_model(token)
        if model is None:
            model = DeviceTokenModel(token=token, created_at=now)
            self.session.add(model)
        self._assign(model, user_id=user_id, platform=platform, now=now)

        try:
            self.session.commit()
        except IntegrityError:
            # Another registration inserted the same token first; last write wins.
            self.session.rollback()
            model = self._get_model(token)
            if model is None:
                raise
            self._assign(model, user_id=user_id, platform=platform, now=now)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

        self.session.refresh(model)
        return self._to_entity(model)

    def deactivate(self, token: str) -> bool:
        """Mark ``token`` inactive. Unknown or inactive tokens are fine."""

        return self.deactivate_many([token])

    def deactivate_many(self, tokens: Iterable[str]) -> bool:
        unique = list(dict.fromkeys(token for token in tokens if token))
        if not unique:
            return True

        try:
            self.session.query(DeviceTokenModel).filter(
                DeviceTokenModel.token.in_(unique)
            ).update(
                {
                    DeviceTokenModel.active: False,
                    DeviceTokenModel.updated_at: self._now(),
                },
                synchronize_session=False,
            )
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to deactivate %s device token(s)", len(unique))
            return False
        return True

    def active_tokens_for(self, user_ids: Iterable[str]) -> list[str]:
        """Return the active tokens owned by any of ``user_ids``."""

        unique_ids = {user_id for user_id in user_ids if user_id}
        if not unique_ids:
            return []

        query = (
            self.session.query(DeviceTokenModel.token)
            .filter(DeviceTokenModel.user_id.in_(unique_ids))
            .filter(DeviceTokenModel.active.is_(True))
            .order_by(DeviceTokenModel.id)
        )
        return [token for (token,) in query.all()]

    def _get_model(self, token: str) -> DeviceTokenModel | None:
        return self.session.query(DeviceTokenModel).filter_by(token=token).first()

    @staticmethod
    def _assign(model: DeviceTokenModel, *, user_id: str, platform: str, now) -> None:
        model.user_id = user_id
        model.platform = platform
        model.active = True
        model.updated_at = now

    @staticmethod
    def _now():
        return now_for_storage()

    @staticmethod
    def _to_entity(model: DeviceTokenModel) -> DeviceToken:
        return DeviceToken(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            platform=model.platform,
            active=bool(model.active),
            created_at=to_local(model.created_at),
            updated_at=to_local(model.updated_at),
        )


__all__ = ["DeviceTokenRepository"]
