"""Geographic primitives and the per-destination radius policy."""

from .distance import EARTH_RADIUS_KM, as_valid, distance_km, valid_coordinate
from .radius import RADIUS_OVERRIDES, RadiusOverride, find_override, is_regional, radius_for

__all__ = [
    "EARTH_RADIUS_KM",
    "distance_km",
    "valid_coordinate",
    "as_valid",
    "RadiusOverride",
    "RADIUS_OVERRIDES",
    "find_override",
    "is_regional",
    "radius_for",
]
