"""Use case for registering a push token for the current user."""

from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken
from app.infrastructure.repositories import DeviceTokenRepository

MAX_TOKEN_LENGTH = 255


def register_device_token(
    session: Session,
    *,
    user_id: str,
    token: str,
    platform: str | None = None,
) -> DeviceToken:
    """Bind ``token`` to ``user_id``, taking it over from any previous owner."""

    token = (token or "").strip()
    if not token:
        raise ValueError("Token wajib diisi.")
    if len(token) > MAX_TOKEN_LENGTH:
        raise ValueError("Token terlalu panjang.")

    return DeviceTokenRepository(session).upsert_token(user_id, token, platform)
