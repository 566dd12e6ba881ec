"""Anchor resolution for the current Focus.

Turns an itinerary and a focus into a ScoringContext: the weighted
anchors plus the destination names and identities the scorer needs.
Resolve once per focus and reuse the context across the whole pool.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from ..config import RadiusConfig, ScoringConfig, get_config
from ..domain.models import (
    Anchor,
    Coordinate,
    Destination,
    Focus,
    Itinerary,
    ItineraryDay,
    ScoringContext,
)
from ..geo.distance import as_valid, distance_km
from ..geo.radius import radius_for


def _clean(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    return name or None


def _same_name(a: Optional[str], b: Optional[str]) -> bool:
    a, b = _clean(a), _clean(b)
    return a is not None and b is not None and a.casefold() == b.casefold()


def _unique(names: Iterable[Optional[str]]) -> tuple[str, ...]:
    seen: dict[str, str] = {}
    for name in names:
        cleaned = _clean(name)
        if cleaned is not None:
            seen.setdefault(cleaned.casefold(), cleaned)
    return tuple(seen.values())


def location_name(location: Optional[str]) -> Optional[str]:
    """First comma segment of a free-text trip location ("Paris, France" -> "Paris")."""
    if not location:
        return None
    return _clean(location.split(",")[0])


def trip_destination_names(itinerary: Itinerary) -> tuple[str, ...]:
    """Destination names of the whole trip.

    Day-level names win; then the flat name list, then the names of the
    resolved destinations, and the trip location as a last resort.
    """
    for names in (
        _unique(day.destination for day in itinerary.days),
        _unique(itinerary.destination_names),
        _unique(d.name for d in itinerary.destinations),
    ):
        if names:
            return names
    fallback = location_name(itinerary.location)
    return (fallback,) if fallback else ()


@dataclass
class AnchorResolver:
    """Builds weighted anchors for the whole trip or for a single day.

    Attributes:
        radius_config: Default radii and taper ratio
        scoring_config: Adjacent-day weight and lodging dedup distance
    """

    radius_config: RadiusConfig = field(default_factory=lambda: get_config().radius)
    scoring_config: ScoringConfig = field(default_factory=lambda: get_config().scoring)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, itinerary: Itinerary, focus: Optional[Focus] = None) -> ScoringContext:
        """Resolve the scoring context for a focus.

        Args:
            itinerary: The trip, read-only.
            focus: Whole trip (default) or a specific day.

        Returns:
            ScoringContext with anchors ordered primary first.
        """
        focus = focus or Focus.whole_trip()
        if focus.is_whole_trip:
            context = self._resolve_trip(itinerary, focus)
        else:
            context = self._resolve_day(itinerary, focus)

        self._logger.debug(
            "Anchors resolved",
            extra={
                "focus_day": focus.day,
                "anchors": len(context.anchors),
                "primary": context.primary_destination,
                "adjacent": list(context.adjacent_destinations),
            },
        )
        return context

    def anchors_for(self, itinerary: Itinerary, focus: Optional[Focus] = None) -> tuple[Anchor, ...]:
        """Return only the anchors, for debugging or map display."""
        return self.resolve(itinerary, focus).anchors

    def _anchor(
        self,
        coordinate: Coordinate,
        destination: Destination,
        weight: float,
        source: str,
    ) -> Anchor:
        core, outer = radius_for(destination, self.radius_config)
        return Anchor(
            coordinate=coordinate,
            core_radius_km=core,
            outer_radius_km=outer,
            weight=weight,
            label=destination.name,
            source=source,
        )

    def _resolve_trip(self, itinerary: Itinerary, focus: Focus) -> ScoringContext:
        anchors: list[Anchor] = []

        for destination in itinerary.destinations:
            coordinate = as_valid(destination.coordinate)
            if coordinate is not None:
                anchors.append(self._anchor(coordinate, destination, 1.0, "geocode"))

        # A lodging next to an existing anchor would only duplicate it.
        for day in itinerary.days:
            lodging = as_valid(day.lodging)
            if lodging is None:
                continue
            if any(
                distance_km(anchor.coordinate, lodging) < self.scoring_config.lodging_dedup_km
                for anchor in anchors
            ):
                continue
            destination = itinerary.destination_named(day.destination) or Destination(
                name=_clean(day.destination) or ""
            )
            anchors.append(self._anchor(lodging, destination, 1.0, "lodging"))

        return ScoringContext(
            focus=focus,
            anchors=tuple(anchors),
            trip_destinations=trip_destination_names(itinerary),
            destination_external_ids=frozenset(
                d.external_id for d in itinerary.destinations if d.external_id
            ),
        )

    def _resolve_day(self, itinerary: Itinerary, focus: Focus) -> ScoringContext:
        assert focus.day is not None
        trip_names = trip_destination_names(itinerary)

        day = itinerary.day(focus.day)
        if day is None:
            self._logger.debug("Focused day not in itinerary", extra={"focus_day": focus.day})
            return ScoringContext(focus=focus, trip_destinations=trip_names)

        primary = _clean(day.destination) or location_name(itinerary.location)
        anchors: list[Anchor] = []

        anchor = self._locate(itinerary, primary, day.day_number, 1.0)
        if anchor is None and _clean(day.destination) is None:
            lodging = as_valid(day.lodging)
            if lodging is not None:
                anchor = self._anchor(lodging, Destination(name=primary or ""), 1.0, "lodging")
        if anchor is not None:
            anchors.append(anchor)

        adjacent: list[str] = []
        neighbours = (
            self._neighbour(itinerary, day, primary, step=-1),
            self._neighbour(itinerary, day, primary, step=1),
        )
        for neighbour in neighbours:
            if neighbour is None:
                continue
            name = _clean(neighbour.destination)
            assert name is not None
            if not any(_same_name(name, seen) for seen in adjacent):
                adjacent.append(name)
            # Same-name neighbours may still resolve to different lodgings.
            anchor = self._locate(
                itinerary, name, neighbour.day_number, self.scoring_config.adjacent_day_weight
            )
            if anchor is not None and anchor not in anchors:
                anchors.append(anchor)

        in_scope = (itinerary.destination_named(name) for name in (primary, *adjacent))
        return ScoringContext(
            focus=focus,
            anchors=tuple(anchors),
            trip_destinations=trip_names,
            primary_destination=primary,
            adjacent_destinations=tuple(adjacent),
            destination_external_ids=frozenset(
                d.external_id for d in in_scope if d is not None and d.external_id
            ),
        )

    def _locate(
        self,
        itinerary: Itinerary,
        name: Optional[str],
        day_number: int,
        weight: float,
    ) -> Optional[Anchor]:
        """Anchor a destination name: its geocode, else the nearest same-name lodging."""
        if name is None:
            return None

        destination = itinerary.destination_named(name)
        if destination is not None:
            coordinate = as_valid(destination.coordinate)
            if coordinate is not None:
                return self._anchor(coordinate, destination, weight, "geocode")

        lodgings = [
            (abs(day.day_number - day_number), day.day_number, lodging)
            for day in itinerary.days
            if _same_name(day.destination, name)
            for lodging in (as_valid(day.lodging),)
            if lodging is not None
        ]
        if not lodgings:
            return None

        _, _, nearest = min(lodgings, key=lambda item: (item[0], item[1]))
        return self._anchor(nearest, destination or Destination(name=name), weight, "lodging")

    @staticmethod
    def _neighbour(
        itinerary: Itinerary,
        day: ItineraryDay,
        primary: Optional[str],
        step: int,
    ) -> Optional[ItineraryDay]:
        """Nearest day before (step=-1) or after (step=1) with a different destination."""
        if step < 0:
            candidates = sorted(
                (d for d in itinerary.days if d.day_number < day.day_number),
                key=lambda d: d.day_number,
                reverse=True,
            )
        else:
            candidates = sorted(
                (d for d in itinerary.days if d.day_number > day.day_number),
                key=lambda d: d.day_number,
            )

        for candidate in candidates:
            if _clean(candidate.destination) is None:
                continue
            if not _same_name(candidate.destination, primary):
                return candidate
        return None
