"""Domain entity representing a user profile as seen by notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Identity record with the optional location used for alerting."""

    id: str
    role: Role
    name: str
    latitude: float | None = None
    longitude: float | None = None
    district: str | None = None
    created_at: datetime | None = None

    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


__all__ = ["User"]
