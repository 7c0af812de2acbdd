"""Use cases for managing push device tokens."""

from .deactivate_device_token import deactivate_device_token
from .register_device_token import register_device_token

__all__ = ["deactivate_device_token", "register_device_token"]
