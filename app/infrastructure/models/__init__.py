"""ORM models used by the application infrastructure."""

from .device_token import DeviceTokenModel
from .notification import NotificationModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "DeviceTokenModel",
    "NotificationModel",
    "RoleModel",
    "UserModel",
]
