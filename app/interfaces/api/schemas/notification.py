"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    type: Literal[
        "status_update",
        "vote",
        "verify",
        "comment",
        "new_report",
        "new_action",
        "info",
    ]
    title: str
    message: str
    ref_type: Literal["report", "action"] | None = None
    ref_id: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


class NotificationInboxRead(BaseModel):
    """Latest notifications plus the number still unread."""

    notifications: list[NotificationRead]
    unread_count: int


class NotificationReadAllResponse(BaseModel):
    updated: int


__all__ = ["NotificationInboxRead", "NotificationRead", "NotificationReadAllResponse"]
