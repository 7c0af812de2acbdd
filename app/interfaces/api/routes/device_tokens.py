"""Endpoints for registering and revoking push device tokens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.device_tokens import (
    deactivate_device_token,
    register_device_token,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import (
    DeviceTokenDeactivate,
    DeviceTokenRead,
    DeviceTokenRegister,
    MessageResponse,
)

router = APIRouter(prefix="/device-tokens", tags=["device-tokens"])
logger = logging.getLogger(__name__)


@router.post("/", response_model=DeviceTokenRead)
def register_token(
    payload: DeviceTokenRegister,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DeviceTokenRead:
    """Register the caller's device, taking over the token if another user had it."""

    try:
        device_token = register_device_token(
            db,
            user_id=current_user.id,
            token=payload.token,
            platform=payload.platform,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.exception("Failed to register device token for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Gagal menyimpan token perangkat.",
        ) from exc

    return DeviceTokenRead.model_validate(device_token)


@router.delete("/", response_model=MessageResponse)
def deactivate_token(
    payload: DeviceTokenDeactivate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Deactivate a token on logout. Unknown tokens still succeed."""

    try:
        deactivated = deactivate_device_token(db, token=payload.token)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if not deactivated:
        logger.warning("Device token for user %s could not be deactivated", current_user.id)
    return MessageResponse(message="Token perangkat dinonaktifkan.")
