"""
Distance calculation using the Haversine formula.

Assumption
----------
Delivery is priced on great-circle (Haversine) distance rather than a real
road route, so a quote needs nothing but the two coordinates.  Coordinates
outside the usual latitude/longitude bounds still produce a number; range
validation belongs to the caller.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from .entities import GeoPoint, InvalidCoordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # rounding can push ``a`` a hair past 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, a)))


def _check_point(point: GeoPoint) -> None:
    for name in ("lat", "lng"):
        value = getattr(point, name)
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise InvalidCoordinate(f"{name} must be a finite number, got {value!r}")


def distance_km(origin: GeoPoint, destination: Optional[GeoPoint]) -> float:
    """Distance between *origin* and *destination*; ``0.0`` without a destination."""
    _check_point(origin)
    if destination is None:
        return 0.0
    _check_point(destination)
    if origin == destination:
        return 0.0
    return haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)
