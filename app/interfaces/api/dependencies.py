"""FastAPI dependency utilities."""

from functools import lru_cache

from fastapi import BackgroundTasks, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import NotificationOrchestrator
from app.config import get_settings
from app.domain.entities import User
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import BackgroundTaskScheduler
from app.infrastructure.push import ExpoPushGateway, PushGateway
from app.infrastructure.repositories import UserRepository


def get_current_user(
    x_user_id: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Return the user whose identity the upstream auth layer asserted.

    Tokens are verified before requests reach this service, which only
    receives the resulting user id in the ``X-User-Id`` header.
    """

    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User tidak terautentikasi.",
        )

    user = UserRepository(db).get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User tidak ditemukan.",
        )
    return user


@lru_cache
def get_push_gateway() -> PushGateway:
    """Return the process-wide Expo gateway, reusing its HTTP session."""

    return ExpoPushGateway.from_settings(get_settings())


def get_notification_orchestrator(
    background_tasks: BackgroundTasks,
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> NotificationOrchestrator:
    """Orchestrator whose fan-out runs after the response has been sent.

    Intended for report, vote and comment handlers, which hand it to the
    producers in :mod:`app.application.use_cases.notifications.events`.
    """

    return NotificationOrchestrator(
        session_factory=SessionLocal,
        scheduler=BackgroundTaskScheduler(background_tasks),
        push_gateway=push_gateway,
        settings=get_settings(),
    )
