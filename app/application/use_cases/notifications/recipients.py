"""Decide which users should hear about a new report."""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Final, Mapping

from app.domain.geo import distance_km
from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

# Wide radius for hazards that spread, narrow for local nuisances.
CATEGORY_RADIUS_KM: Final[Mapping[str, float]] = MappingProxyType(
    {
        "Banjir": 5.0,
        "Longsor": 5.0,
        "Bencana Alam": 5.0,
        "Kebakaran": 1.0,
        "Jalan Rusak": 1.0,
        "Infrastruktur": 1.0,
        "Pohon": 1.0,
        "Sampah": 0.5,
    }
)
DEFAULT_RADIUS_KM: Final[float] = 2.0


def radius_for_category(category: str | None, default: float = DEFAULT_RADIUS_KM) -> float:
    """Return the alert radius in kilometres for a report ``category``.

    Categories match the table keys exactly; anything else gets ``default``.
    """

    if not category:
        return default
    return CATEGORY_RADIUS_KM.get(category, default)


def _same_zone(left: str | None, right: str | None) -> bool:
    if not left or not right:
        return False
    return left.strip().casefold() == right.strip().casefold()


def _is_coordinate(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


class RecipientResolver:
    """Resolve broadcast audiences from stored user locations."""

    def __init__(
        self,
        users: UserRepository,
        *,
        default_radius_km: float = DEFAULT_RADIUS_KM,
        government_role_alias: str = "pemerintah",
    ) -> None:
        self._users = users
        self._default_radius_km = default_radius_km
        self._government_role_alias = government_role_alias

    def resolve_radius_recipients(
        self,
        origin_lat: float | None,
        origin_lng: float | None,
        category: str | None,
        fallback_zone: str | None,
        exclude_user_id: str | None = None,
    ) -> set[str]:
        """Return users near the origin or, lacking coordinates, in the same district.

        A user with coordinates is judged only by distance (inclusive of the
        radius). Users without coordinates are matched on ``fallback_zone``,
        case-insensitively. Any failure to read users yields an empty set.
        """

        radius_km = radius_for_category(category, self._default_radius_km)
        has_origin = _is_coordinate(origin_lat) and _is_coordinate(origin_lng)

        try:
            candidates = self._users.list_with_location()
        except Exception:
            logger.exception("Failed to load users for radius notification")
            return set()

        recipients: set[str] = set()
        for user in candidates:
            if exclude_user_id and user.id == exclude_user_id:
                continue

            if user.has_coordinates():
                if has_origin:
                    distance = distance_km(
                        origin_lat, origin_lng, user.latitude, user.longitude
                    )
                    if distance <= radius_km:
                        recipients.add(user.id)
                continue

            if _same_zone(user.district, fallback_zone):
                recipients.add(user.id)

        logger.debug(
            "Resolved %s recipient(s) within %.1f km for category %r",
            len(recipients),
            radius_km,
            category,
        )
        return recipients

    def resolve_government_recipients(self) -> set[str]:
        """Return every user holding the government role."""

        try:
            return set(self._users.list_ids_by_role_alias(self._government_role_alias))
        except Exception:
            logger.exception("Failed to load government recipients")
            return set()


__all__ = [
    "CATEGORY_RADIUS_KM",
    "DEFAULT_RADIUS_KM",
    "RecipientResolver",
    "radius_for_category",
]
