"""Use case for deactivating a push token, typically on logout."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import DeviceTokenRepository


def deactivate_device_token(session: Session, *, token: str) -> bool:
    """Stop pushing to ``token``. Unknown tokens are not an error."""

    token = (token or "").strip()
    if not token:
        raise ValueError("Token wajib diisi.")
    return DeviceTokenRepository(session).deactivate(token)
