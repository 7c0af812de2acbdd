"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

NOTIFICATION_TYPE_STATUS_UPDATE: Final[str] = "status_update"
NOTIFICATION_TYPE_VOTE: Final[str] = "vote"
NOTIFICATION_TYPE_VERIFY: Final[str] = "verify"
NOTIFICATION_TYPE_COMMENT: Final[str] = "comment"
NOTIFICATION_TYPE_NEW_REPORT: Final[str] = "new_report"
NOTIFICATION_TYPE_NEW_ACTION: Final[str] = "new_action"
NOTIFICATION_TYPE_INFO: Final[str] = "info"

NOTIFICATION_TYPES: Final[frozenset[str]] = frozenset(
    {
        NOTIFICATION_TYPE_STATUS_UPDATE,
        NOTIFICATION_TYPE_VOTE,
        NOTIFICATION_TYPE_VERIFY,
        NOTIFICATION_TYPE_COMMENT,
        NOTIFICATION_TYPE_NEW_REPORT,
        NOTIFICATION_TYPE_NEW_ACTION,
        NOTIFICATION_TYPE_INFO,
    }
)

REF_TYPE_REPORT: Final[str] = "report"
REF_TYPE_ACTION: Final[str] = "action"
REF_TYPES: Final[frozenset[str]] = frozenset({REF_TYPE_REPORT, REF_TYPE_ACTION})


@dataclass
class Notification:
    """Alert about one event delivered to one user."""

    id: int | None
    user_id: str
    type: str
    title: str
    message: str
    ref_type: str | None = None
    ref_id: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class NotificationContent:
    """What a fan-out writes for every recipient of a single event."""

    type: str
    title: str
    message: str
    ref_type: str | None = None
    ref_id: str | None = None

    def __post_init__(self) -> None:
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {self.type!r}")
        if self.ref_type is not None and self.ref_type not in REF_TYPES:
            raise ValueError(f"Unknown reference type: {self.ref_type!r}")
        # Reference kind and id travel together or not at all.
        if self.ref_type is None or not self.ref_id:
            object.__setattr__(self, "ref_type", None)
            object.__setattr__(self, "ref_id", None)

    def push_payload(self) -> dict[str, str | None]:
        """Data map sent with push messages so clients can deep-link."""

        return {"refType": self.ref_type, "refId": self.ref_id}


__all__ = [
    "Notification",
    "NotificationContent",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_STATUS_UPDATE",
    "NOTIFICATION_TYPE_VOTE",
    "NOTIFICATION_TYPE_VERIFY",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_NEW_REPORT",
    "NOTIFICATION_TYPE_NEW_ACTION",
    "NOTIFICATION_TYPE_INFO",
    "REF_TYPES",
    "REF_TYPE_REPORT",
    "REF_TYPE_ACTION",
]
