"""Shared helpers used across the application layers."""

from .datetime import (
    get_app_timezone,
    now_for_storage,
    now_local,
    resolve_timezone,
    to_local,
)

__all__ = [
    "get_app_timezone",
    "now_for_storage",
    "now_local",
    "resolve_timezone",
    "to_local",
]
