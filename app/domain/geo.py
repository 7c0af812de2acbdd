"""Great-circle distance between two coordinates."""

from __future__ import annotations

import math
from typing import Final

EARTH_RADIUS_KM: Final[float] = 6371.0


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Return the haversine distance in kilometres between two points.

    Coordinates are expressed in degrees. Inputs are not validated: a NaN or
    infinite coordinate yields NaN and an out-of-range one yields a
    meaningless distance, never an exception, so callers should check
    coordinates first.
    """

    if not all(math.isfinite(value) for value in (lat1, lng1, lat2, lng2)):
        return math.nan

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push antipodal points just past 1.
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


__all__ = ["EARTH_RADIUS_KM", "distance_km"]
