"""Aggregate application use cases."""

from .device_tokens import deactivate_device_token, register_device_token
from .notifications import NotificationOrchestrator, list_inbox

__all__ = [
    "NotificationOrchestrator",
    "deactivate_device_token",
    "list_inbox",
    "register_device_token",
]
