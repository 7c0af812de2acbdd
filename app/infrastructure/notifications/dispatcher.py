"""Best-effort delivery of push notifications to registered devices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from app.infrastructure.push import (
    TICKET_STATUS_OK,
    DeliveryTicket,
    OutboundPush,
    PushGateway,
)
from app.infrastructure.repositories import DeviceTokenRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchSummary:
    """Counts reported after a dispatch, mostly for logs and tests."""

    attempted: int = 0
    delivered: int = 0
    deactivated: int = 0


class PushDispatcher:
    """Send one push per active device of a set of users.

    ``dispatch`` never raises: token lookup, every chunk submission, and the
    token cleanup are each guarded so one failure cannot stop the others.
    """

    def __init__(
        self,
        tokens: DeviceTokenRepository,
        gateway: PushGateway,
        *,
        channel_id: str = "default",
        enabled: bool = True,
    ) -> None:
        self._tokens = tokens
        self._gateway = gateway
        self._channel_id = channel_id
        self._enabled = enabled

    def dispatch(
        self,
        recipient_ids: Iterable[str],
        title: str,
        body: str,
        payload: dict[str, Any] | None = None,
    ) -> DispatchSummary:
        recipients = {recipient for recipient in recipient_ids if recipient}
        if not recipients:
            return DispatchSummary()
        if not self._enabled:
            logger.info("Push delivery disabled; skipping %s recipient(s)", len(recipients))
            return DispatchSummary()

        try:
            tokens = self._tokens.active_tokens_for(recipients)
        except Exception:
            logger.exception("Failed to load device tokens for %s recipient(s)", len(recipients))
            return DispatchSummary()

        valid_tokens = [token for token in tokens if self._is_valid(token)]
        if len(valid_tokens) < len(tokens):
            logger.info("Skipping %s malformed push token(s)", len(tokens) - len(valid_tokens))
        if not valid_tokens:
            return DispatchSummary()

        messages = [
            OutboundPush(
                to=token,
                title=title,
                body=body,
                data=dict(payload or {}),
                channel_id=self._channel_id,
            )
            for token in valid_tokens
        ]

        tickets = self._send_in_chunks(messages)
        stale = [
            message.to
            for message, ticket in zip(messages, tickets)
            if ticket is not None and ticket.is_device_not_registered
        ]
        delivered = sum(
            1 for ticket in tickets if ticket is not None and ticket.status == TICKET_STATUS_OK
        )

        if stale and not self._deactivate(stale):
            stale = []

        logger.info(
            "Push sent to %s device(s), %s delivered, %s cleaned up",
            len(valid_tokens),
            delivered,
            len(stale),
        )
        return DispatchSummary(
            attempted=len(valid_tokens), delivered=delivered, deactivated=len(stale)
        )

    def _deactivate(self, tokens: list[str]) -> bool:
        try:
            deactivated = self._tokens.deactivate_many(tokens)
        except Exception:
            logger.exception("Failed to deactivate %s unregistered token(s)", len(tokens))
            return False
        if deactivated:
            logger.info("Deactivated %s unregistered device token(s)", len(tokens))
        return deactivated

    def _is_valid(self, token: str) -> bool:
        try:
            return bool(self._gateway.is_valid_token(token))
        except Exception:
            logger.exception("Push token validation failed")
            return False

    def _send_in_chunks(self, messages: list[OutboundPush]) -> list[DeliveryTicket | None]:
        """Submit every chunk and return one slot per message, in order.

        A chunk that fails to submit, or that returns the wrong number of
        tickets, leaves ``None`` in its slots so later tickets still line up
        with their tokens.
        """

        try:
            chunks = self._gateway.chunk(messages)
        except Exception:
            logger.exception("Failed to split %s push message(s) into chunks", len(messages))
            return [None] * len(messages)

        results: list[DeliveryTicket | None] = []
        for chunk in chunks:
            try:
                tickets = list(self._gateway.send(chunk))
            except Exception:
                logger.exception("Push chunk of %s message(s) failed", len(chunk))
                results.extend([None] * len(chunk))
                continue

            if len(tickets) != len(chunk):
                logger.error(
                    "Push gateway returned %s ticket(s) for %s message(s)",
                    len(tickets),
                    len(chunk),
                )
                results.extend([None] * len(chunk))
                continue
            results.extend(tickets)
        return results


__all__ = ["DispatchSummary", "PushDispatcher"]
