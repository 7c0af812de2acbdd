"""Schemas for push device token registration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeviceTokenRegister(BaseModel):
    """Payload sent by the mobile app after obtaining a push token."""

    token: str = Field(..., min_length=1, max_length=255)
    platform: str | None = Field(
        default=None,
        description="android, ios or web; anything else is stored as android",
    )


class DeviceTokenDeactivate(BaseModel):
    token: str = Field(..., min_length=1, max_length=255)


class DeviceTokenRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    token: str
    platform: str
    active: bool


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "DeviceTokenDeactivate",
    "DeviceTokenRead",
    "DeviceTokenRegister",
    "MessageResponse",
]
