"""Per-place destination relevance scoring.

Evidence is consulted in a fixed order: identity, then geography, then
text. A place with a usable coordinate is judged by geography alone;
text matching only speaks for places that have no coordinate at all.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from ..config import ScoringConfig, get_config
from ..domain.models import Anchor, Coordinate, Place, ScoringContext
from ..geo.distance import as_valid, distance_km
from ..text.matching import token_match_score


@dataclass
class DestinationScorer:
    """Scores a place against a resolved ScoringContext, in [0, 1].

    Attributes:
        config: Taper falloff, adjacent-day weight and text-match scores
    """

    config: ScoringConfig = field(default_factory=lambda: get_config().scoring)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def score(self, place: Place, context: ScoringContext) -> float:
        """Return the destination relevance of a place.

        Args:
            place: The place to score.
            context: Anchors and names resolved for the current focus.

        Returns:
            1.0 for an identity match, the weighted proximity score for a
            place with a coordinate, otherwise the text-match score.
        """
        if place.external_id and place.external_id in context.destination_external_ids:
            return 1.0

        coordinate = as_valid(place.coordinate)
        if coordinate is not None and context.anchors:
            geo = self.geo_score(coordinate, context.anchors)
            if geo > 0:
                return geo
            # Coordinates say "not here": the location text is not consulted.
            self._logger.debug(
                "Place outside every anchor",
                extra={"place_id": place.id, "location": place.location_text},
            )
            return 0.0

        return self.text_score(place.location_text, context)

    def matches(self, place: Place, context: ScoringContext) -> bool:
        return self.score(place, context) > 0

    def geo_score(self, coordinate: Coordinate, anchors: Sequence[Anchor]) -> float:
        """Best weighted proximity score over all anchors."""
        best = 0.0
        for anchor in anchors:
            proximity = self.proximity(distance_km(anchor.coordinate, coordinate), anchor)
            best = max(best, proximity * anchor.weight)
        return best

    def proximity(self, distance: float, anchor: Anchor) -> float:
        """Unweighted score for a distance: flat inside the core, linear taper to the outer edge."""
        if distance <= anchor.core_radius_km:
            return 1.0
        if distance <= anchor.outer_radius_km and anchor.outer_radius_km > anchor.core_radius_km:
            span = anchor.outer_radius_km - anchor.core_radius_km
            return 1.0 - self.config.taper_falloff * (distance - anchor.core_radius_km) / span
        return 0.0

    def text_score(self, location: str, context: ScoringContext) -> float:
        """Text-only score for a place without a usable coordinate."""
        if context.focus.is_whole_trip:
            if not context.trip_destinations:
                return 1.0
            return max(
                token_match_score(location, name, self.config)
                for name in context.trip_destinations
            )

        if context.primary_destination is None and not context.adjacent_destinations:
            return 1.0

        if context.primary_destination is not None:
            primary = token_match_score(location, context.primary_destination, self.config)
            if primary > 0:
                return primary

        adjacent = max(
            (token_match_score(location, name, self.config) for name in context.adjacent_destinations),
            default=0.0,
        )
        return adjacent * self.config.adjacent_day_weight


def destination_score(
    place: Place, context: ScoringContext, config: Optional[ScoringConfig] = None
) -> float:
    """Score one place against a resolved context."""
    return DestinationScorer(config=config or get_config().scoring).score(place, context)


def matches_destination(
    place: Place, context: ScoringContext, config: Optional[ScoringConfig] = None
) -> bool:
    """Check whether a place belongs to the focused destination(s)."""
    return destination_score(place, context, config) > 0
