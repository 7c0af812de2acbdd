"""Domain entities exposed by the application."""

from .device_token import (
    DEFAULT_PLATFORM,
    PLATFORMS,
    DeviceToken,
    normalize_platform,
)
from .notification import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_NEW_ACTION,
    NOTIFICATION_TYPE_NEW_REPORT,
    NOTIFICATION_TYPE_STATUS_UPDATE,
    NOTIFICATION_TYPE_VERIFY,
    NOTIFICATION_TYPE_VOTE,
    NOTIFICATION_TYPES,
    REF_TYPE_ACTION,
    REF_TYPE_REPORT,
    REF_TYPES,
    Notification,
    NotificationContent,
)
from .report import Action, Report
from .role import Role
from .user import User

__all__ = [
    "Action",
    "DEFAULT_PLATFORM",
    "DeviceToken",
    "Notification",
    "NotificationContent",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_NEW_ACTION",
    "NOTIFICATION_TYPE_NEW_REPORT",
    "NOTIFICATION_TYPE_STATUS_UPDATE",
    "NOTIFICATION_TYPE_VERIFY",
    "NOTIFICATION_TYPE_VOTE",
    "PLATFORMS",
    "REF_TYPES",
    "REF_TYPE_ACTION",
    "REF_TYPE_REPORT",
    "Report",
    "Role",
    "User",
    "normalize_platform",
]
