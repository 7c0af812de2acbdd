"""Client for the Expo push notification service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Final, Protocol, Sequence

import requests
from exponent_server_sdk import PushClient, PushMessage, PushTicket

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

TICKET_STATUS_OK: Final[str] = "ok"
TICKET_STATUS_ERROR: Final[str] = "error"
DEVICE_NOT_REGISTERED: Final[str] = "DeviceNotRegistered"


@dataclass(frozen=True)
class OutboundPush:
    """One message addressed to one device token."""

    to: str
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    sound: str = "default"
    priority: str = "high"
    channel_id: str = "default"


@dataclass(frozen=True)
class DeliveryTicket:
    """Per-message result reported by the gateway after a send attempt."""

    status: str
    error_code: str | None = None
    message: str | None = None

    @property
    def is_device_not_registered(self) -> bool:
        return self.status == TICKET_STATUS_ERROR and self.error_code == DEVICE_NOT_REGISTERED


class PushGateway(Protocol):
    """Operations the dispatcher needs from a push provider."""

    def is_valid_token(self, token: str) -> bool: ...

    def chunk(self, messages: Sequence[OutboundPush]) -> list[list[OutboundPush]]: ...

    def send(self, messages: Sequence[OutboundPush]) -> list[DeliveryTicket]: ...


class ExpoPushGateway:
    """Send :class:`OutboundPush` batches through ``exponent_server_sdk``."""

    def __init__(
        self,
        *,
        access_token: str | None = None,
        chunk_size: int = 100,
        client: PushClient | None = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._client = client or PushClient(session=_build_session(access_token))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ExpoPushGateway":
        settings = settings or get_settings()
        return cls(
            access_token=settings.expo_access_token,
            chunk_size=settings.push_chunk_size,
        )

    def is_valid_token(self, token: str) -> bool:
        return PushClient.is_exponent_push_token(token)

    def chunk(self, messages: Sequence[OutboundPush]) -> list[list[OutboundPush]]:
        items = list(messages)
        return [
            items[start : start + self._chunk_size]
            for start in range(0, len(items), self._chunk_size)
        ]

    def send(self, messages: Sequence[OutboundPush]) -> list[DeliveryTicket]:
        """Submit one chunk and return its tickets in message order.

        Transport and server errors (``PushServerError``,
        ``requests.RequestException``) are raised to the caller.
        """

        if not messages:
            return []
        tickets = self._client.publish_multiple([_to_expo_message(m) for m in messages])
        return [_to_delivery_ticket(ticket) for ticket in tickets]


def _build_session(access_token: str | None) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "accept": "application/json",
            "accept-encoding": "gzip, deflate",
            "content-type": "application/json",
        }
    )
    if access_token:
        session.headers["Authorization"] = f"Bearer {access_token}"
    return session


def _to_expo_message(message: OutboundPush) -> PushMessage:
    return PushMessage(
        to=message.to,
        title=message.title,
        body=message.body,
        data=message.data,
        sound=message.sound,
        priority=message.priority,
        channel_id=message.channel_id,
    )


def _to_delivery_ticket(ticket: PushTicket) -> DeliveryTicket:
    details = ticket.details if isinstance(ticket.details, dict) else {}
    error_code = details.get("error")
    if ticket.status != TICKET_STATUS_OK and error_code is None:
        logger.debug("Push ticket error without details: %s", ticket.message)
    return DeliveryTicket(
        status=ticket.status,
        error_code=error_code,
        message=ticket.message,
    )


__all__ = [
    "DEVICE_NOT_REGISTERED",
    "DeliveryTicket",
    "ExpoPushGateway",
    "OutboundPush",
    "PushGateway",
    "TICKET_STATUS_ERROR",
    "TICKET_STATUS_OK",
]
