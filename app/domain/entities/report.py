"""Snapshots of the reports and actions that notifications point at."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Report:
    """Hazard or incident report submitted by a citizen."""

    id: str
    user_id: str
    title: str
    category: str
    latitude: float | None = None
    longitude: float | None = None
    district: str | None = None


@dataclass(frozen=True)
class Action:
    """Positive action event published by a citizen."""

    id: str
    user_id: str
    title: str


__all__ = ["Action", "Report"]
