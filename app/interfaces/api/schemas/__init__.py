from .device_token import (
    DeviceTokenDeactivate,
    DeviceTokenRead,
    DeviceTokenRegister,
    MessageResponse,
)
from .notification import (
    NotificationInboxRead,
    NotificationRead,
    NotificationReadAllResponse,
)

__all__ = [
    "DeviceTokenDeactivate",
    "DeviceTokenRead",
    "DeviceTokenRegister",
    "MessageResponse",
    "NotificationInboxRead",
    "NotificationRead",
    "NotificationReadAllResponse",
]
