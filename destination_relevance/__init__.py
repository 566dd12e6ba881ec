"""Destination relevance engine.

Decides which of a traveler's saved places belong to the part of an
itinerary currently in focus, combining adaptive-radius proximity to
weighted anchors with alias-aware text matching.

    resolver = AnchorResolver()
    context = resolver.resolve(itinerary, Focus.for_day(2))
    score = destination_score(place, context)

    result = PicksFilterService().filter(places, itinerary, PlaceQuery(focus=Focus.for_day(2)))
"""

from .domain import (
    Anchor,
    Coordinate,
    Destination,
    DestinationRelevanceError,
    FilterResult,
    Focus,
    Itinerary,
    ItineraryDay,
    Place,
    PlaceQuery,
    RenderingError,
    ScoringContext,
)
from .geo import distance_km, radius_for, valid_coordinate
from .services import (
    AnchorResolver,
    DestinationScorer,
    PicksFilterService,
    destination_score,
    matches_destination,
)
from .text import resolve_aliases, split_compound_destination, token_match_score

__all__ = [
    "Anchor",
    "Coordinate",
    "Destination",
    "FilterResult",
    "Focus",
    "Itinerary",
    "ItineraryDay",
    "Place",
    "PlaceQuery",
    "ScoringContext",
    "DestinationRelevanceError",
    "RenderingError",
    "distance_km",
    "valid_coordinate",
    "radius_for",
    "resolve_aliases",
    "split_compound_destination",
    "token_match_score",
    "AnchorResolver",
    "DestinationScorer",
    "PicksFilterService",
    "destination_score",
    "matches_destination",
]
