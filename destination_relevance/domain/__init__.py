"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import DestinationRelevanceError, RenderingError
from .models import (
    Anchor,
    Coordinate,
    Destination,
    FilterResult,
    Focus,
    Itinerary,
    ItineraryDay,
    Place,
    PlaceQuery,
    ScoringContext,
)

__all__ = [
    # Models
    "Coordinate",
    "Destination",
    "ItineraryDay",
    "Itinerary",
    "Place",
    "Anchor",
    "Focus",
    "ScoringContext",
    "PlaceQuery",
    "FilterResult",
    # Errors
    "DestinationRelevanceError",
    "RenderingError",
]
