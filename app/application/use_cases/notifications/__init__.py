"""Public helpers for emitting and reading notifications."""

from .events import (
    notify_comment_added,
    notify_report_created,
    notify_report_status_changed,
    notify_report_verified,
    notify_report_voted,
)
from .inbox import (
    Inbox,
    list_inbox,
    mark_all_notifications_read,
    mark_notification_read,
)
from .orchestrator import AreaAudience, NotificationOrchestrator
from .recipients import (
    CATEGORY_RADIUS_KM,
    DEFAULT_RADIUS_KM,
    RecipientResolver,
    radius_for_category,
)

__all__ = [
    "AreaAudience",
    "CATEGORY_RADIUS_KM",
    "DEFAULT_RADIUS_KM",
    "Inbox",
    "NotificationOrchestrator",
    "RecipientResolver",
    "list_inbox",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_comment_added",
    "notify_report_created",
    "notify_report_status_changed",
    "notify_report_verified",
    "notify_report_voted",
    "radius_for_category",
]
