"""Immutable domain models for the destination relevance engine.

All models are frozen dataclasses with slots. Itineraries and places are
owned by external collaborators and only read here; anchors, focus and
scoring contexts are built fresh for every query and then discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair as delivered by a collaborator.

    No validation happens here: collaborator data may carry the (0, 0)
    "missing" sentinel or out-of-range values. Route every coordinate
    through ``geo.distance.as_valid`` before using it.
    """

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Destination:
    """A named trip destination.

    Attributes:
        name: Display name, possibly compound ("Noto / Syracuse")
        coordinate: Geocoded center, if resolved
        formatted_address: Canonical address used for urban/regional classification
        external_id: Identity key (e.g. a Google place id) of the destination itself
    """

    name: str
    coordinate: Optional[Coordinate] = None
    formatted_address: Optional[str] = None
    external_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ItineraryDay:
    """One day of the itinerary.

    Attributes:
        day_number: Day index within the trip
        destination: Destination name for this day, if any
        lodging: Coordinates of the night's lodging, if known
        placed_place_ids: Ids of places already scheduled into this day
    """

    day_number: int
    destination: Optional[str] = None
    lodging: Optional[Coordinate] = None
    placed_place_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Itinerary:
    """A trip as seen by the engine.

    Attributes:
        days: Ordered itinerary days
        destinations: Destinations with resolved geocodes
        destination_names: Flat name list used when days name no destination
        location: Free-text trip location ("Paris, France"), last-resort name
    """

    days: tuple[ItineraryDay, ...] = field(default_factory=tuple)
    destinations: tuple[Destination, ...] = field(default_factory=tuple)
    destination_names: tuple[str, ...] = field(default_factory=tuple)
    location: Optional[str] = None

    def day(self, day_number: int) -> Optional[ItineraryDay]:
        """Return the day with the given number, if present."""
        for day in self.days:
            if day.day_number == day_number:
                return day
        return None

    def destination_named(self, name: Optional[str]) -> Optional[Destination]:
        """Find a resolved destination by case-insensitive name."""
        if not name:
            return None
        wanted = name.strip().casefold()
        for destination in self.destinations:
            if destination.name.strip().casefold() == wanted:
                return destination
        return None

    @property
    def placed_place_ids(self) -> frozenset[str]:
        """Ids of every place already scheduled on some day."""
        return frozenset(pid for day in self.days for pid in day.placed_place_ids)


@dataclass(frozen=True, slots=True)
class Place:
    """A saved place from the user's library.

    Attributes:
        id: Library identifier
        name: Display name
        location_text: Free-text location ("Nørrebro, Copenhagen")
        coordinate: Coordinates, if enriched
        external_id: External identity key used for exact matching
        category: Place type (restaurant, bar, museum, ...)
        source: Where the place came from (email, friend, maps, ...)
        note: Free-text taste note
        is_favorited: Whether the user starred the place
    """

    id: str
    name: str
    location_text: str = ""
    coordinate: Optional[Coordinate] = None
    external_id: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    note: Optional[str] = None
    is_favorited: bool = True


@dataclass(frozen=True, slots=True)
class Anchor:
    """A weighted geographic anchor for proximity scoring.

    Attributes:
        coordinate: Anchor center (always valid)
        core_radius_km: Full-score radius
        outer_radius_km: Radius at which the score tapers off to zero
        weight: Relative weight in (0, 1]
        label: Destination name the anchor stands for
        source: ``"geocode"`` or ``"lodging"``
    """

    coordinate: Coordinate
    core_radius_km: float
    outer_radius_km: float
    weight: float = 1.0
    label: str = ""
    source: str = "geocode"


@dataclass(frozen=True, slots=True)
class Focus:
    """Which part of the itinerary the user is looking at.

    ``day`` is None for the whole trip.
    """

    day: Optional[int] = None

    @classmethod
    def whole_trip(cls) -> Focus:
        return cls(day=None)

    @classmethod
    def for_day(cls, day_number: int) -> Focus:
        return cls(day=day_number)

    @property
    def is_whole_trip(self) -> bool:
        return self.day is None


@dataclass(frozen=True, slots=True)
class ScoringContext:
    """Everything the scorer needs for one Focus, resolved once per query.

    Attributes:
        focus: The focus this context was resolved for
        anchors: Weighted anchors, primary first
        trip_destinations: Every destination name of the trip
        primary_destination: The focused day's destination name
        adjacent_destinations: Neighbouring days' destination names
        destination_external_ids: External ids of the destinations in scope
    """

    focus: Focus
    anchors: tuple[Anchor, ...] = field(default_factory=tuple)
    trip_destinations: tuple[str, ...] = field(default_factory=tuple)
    primary_destination: Optional[str] = None
    adjacent_destinations: tuple[str, ...] = field(default_factory=tuple)
    destination_external_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_destinations(self) -> bool:
        """Check if any geographic or named destination constrains the query."""
        return bool(
            self.anchors
            or self.trip_destinations
            or self.primary_destination
            or self.adjacent_destinations
        )


@dataclass(frozen=True, slots=True)
class PlaceQuery:
    """Filter values selected in the UI.

    Category and source filters of None, "" or "all" mean no filtering.
    """

    focus: Focus = field(default_factory=Focus)
    category: Optional[str] = None
    source: Optional[str] = None
    search: str = ""
    exclude_placed: bool = True
    favorites_only: bool = True

    @property
    def search_text(self) -> str:
        return (self.search or "").strip()


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Output of the filter pipeline.

    Attributes:
        context: The scoring context used for destination filtering
        unplaced_picks: Favourited pool after removing already-scheduled places
        destination_picks: Places matching the focus, best score first
        filtered_picks: Destination picks after category/source/search filters
        scores: Destination score per place id (empty when bypassed)
    """

    context: ScoringContext
    unplaced_picks: tuple[Place, ...] = field(default_factory=tuple)
    destination_picks: tuple[Place, ...] = field(default_factory=tuple)
    filtered_picks: tuple[Place, ...] = field(default_factory=tuple)
    scores: dict[str, float] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return len(self.filtered_picks) == 0
