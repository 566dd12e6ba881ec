"""Great-circle distance and the coordinate validity guard."""

from __future__ import annotations

import math
from typing import Optional

from ..domain.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Calculate the distance in km between two coordinates.

    Uses the Haversine formula for accurate distance on Earth's surface.
    """
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def valid_coordinate(
    lat: Optional[float], lng: Optional[float]
) -> Optional[Coordinate]:
    """Return a Coordinate for usable input, or None when it must count as absent.

    (0, 0) is the null-island sentinel collaborators use for missing data.
    Missing, non-finite and out-of-range values are absent as well.
    """
    if lat is None or lng is None:
        return None
    try:
        lat = float(lat)
        lng = float(lng)
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    if lat == 0 and lng == 0:
        return None
    if not -90 <= lat <= 90 or not -180 <= lng <= 180:
        return None
    return Coordinate(lat=lat, lng=lng)


def as_valid(coordinate: Optional[Coordinate]) -> Optional[Coordinate]:
    """Route an optional collaborator coordinate through the validity guard."""
    if coordinate is None:
        return None
    return valid_coordinate(coordinate.lat, coordinate.lng)
