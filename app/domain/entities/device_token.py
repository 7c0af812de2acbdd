"""Domain entity representing a push-capable device registration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

PLATFORM_ANDROID: Final[str] = "android"
PLATFORM_IOS: Final[str] = "ios"
PLATFORM_WEB: Final[str] = "web"
PLATFORMS: Final[frozenset[str]] = frozenset({PLATFORM_ANDROID, PLATFORM_IOS, PLATFORM_WEB})
DEFAULT_PLATFORM: Final[str] = PLATFORM_ANDROID


def normalize_platform(platform: str | None) -> str:
    """Return ``platform`` when recognised, otherwise the default platform."""

    candidate = (platform or "").strip().lower()
    return candidate if candidate in PLATFORMS else DEFAULT_PLATFORM


@dataclass
class DeviceToken:
    """Current owner of an opaque push token."""

    id: int | None
    user_id: str
    token: str
    platform: str
    active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "DeviceToken",
    "DEFAULT_PLATFORM",
    "PLATFORMS",
    "PLATFORM_ANDROID",
    "PLATFORM_IOS",
    "PLATFORM_WEB",
    "normalize_platform",
]
