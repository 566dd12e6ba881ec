"""Filter pipeline producing the candidate list for the current focus.

Order of operations:
1. Keep favourited places and drop those already scheduled (both optional)
2. Destination relevance, skipped entirely while a search is active
3. Category, then source, then free-text search
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import FilterResult, Focus, Itinerary, Place, PlaceQuery, ScoringContext
from .anchor_resolver import AnchorResolver
from .scorer import DestinationScorer

ALL = "all"


def _is_unfiltered(value: Optional[str]) -> bool:
    return value is None or not value.strip() or value.strip().casefold() == ALL


def _matches_search(place: Place, query: str) -> bool:
    needle = query.casefold()
    return any(
        needle in (text or "").casefold()
        for text in (place.name, place.location_text, place.note)
    )


@dataclass
class PicksFilterService:
    """Filters and ranks a place pool for a focus and UI filters.

    Attributes:
        resolver: Resolves anchors once per call
        scorer: Scores each place against the resolved context
    """

    resolver: AnchorResolver = field(default_factory=AnchorResolver)
    scorer: DestinationScorer = field(default_factory=DestinationScorer)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve_context(self, itinerary: Itinerary, focus: Optional[Focus] = None) -> ScoringContext:
        """Expose the resolved anchor set, e.g. to explain a match."""
        return self.resolver.resolve(itinerary, focus)

    def filter(
        self,
        places: Iterable[Place],
        itinerary: Itinerary,
        query: Optional[PlaceQuery] = None,
    ) -> FilterResult:
        """Run the pipeline over a place pool.

        Args:
            places: The user's place library, never mutated.
            itinerary: The trip providing destinations and lodging.
            query: Focus and filter values; defaults to the whole trip.

        Returns:
            FilterResult with the intermediate and final lists.
        """
        query = query or PlaceQuery()
        context = self.resolver.resolve(itinerary, query.focus)

        pool = tuple(places)
        if query.favorites_only:
            pool = tuple(place for place in pool if place.is_favorited)
        if query.exclude_placed:
            placed = itinerary.placed_place_ids
            pool = tuple(place for place in pool if place.id not in placed)

        scores: dict[str, float] = {}
        if query.search_text:
            # Searching is global: users looking for a name expect it whatever the focus.
            destination_picks = pool
        elif context.has_destinations:
            ranked = []
            for position, place in enumerate(pool):
                score = self.scorer.score(place, context)
                scores[place.id] = score
                if score > 0:
                    ranked.append((-score, position, place))
            ranked.sort(key=lambda item: (item[0], item[1]))
            destination_picks = tuple(place for _, _, place in ranked)
        else:
            destination_picks = pool

        picks = destination_picks
        if not _is_unfiltered(query.category):
            picks = tuple(p for p in picks if p.category == query.category)
        if not _is_unfiltered(query.source):
            picks = tuple(p for p in picks if p.source == query.source)
        if query.search_text:
            picks = tuple(p for p in picks if _matches_search(p, query.search_text))

        self._logger.debug(
            "Picks filtered",
            extra={
                "focus_day": query.focus.day,
                "pool": len(pool),
                "destination_picks": len(destination_picks),
                "filtered_picks": len(picks),
                "search_bypass": bool(query.search_text),
            },
        )

        return FilterResult(
            context=context,
            unplaced_picks=pool,
            destination_picks=destination_picks,
            filtered_picks=picks,
            scores=scores,
        )
