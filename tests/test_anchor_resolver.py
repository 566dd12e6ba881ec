"""Tests for anchor resolution under whole-trip and single-day focus."""

import pytest

from destination_relevance.config import RadiusConfig, ScoringConfig
from destination_relevance.domain.models import (
    Coordinate,
    Destination,
    Focus,
    Itinerary,
    ItineraryDay,
)
from destination_relevance.services.anchor_resolver import AnchorResolver, trip_destination_names

PARIS = Coordinate(48.8566, 2.3522)
PARIS_HOTEL = Coordinate(48.8600, 2.3400)  # ~1 km from the Paris geocode
LYON = Coordinate(45.7640, 4.8357)
NICE_HOTEL = Coordinate(43.6950, 7.2650)
ROME_HOTEL_A = Coordinate(41.9000, 12.4800)
ROME_HOTEL_B = Coordinate(41.8800, 12.5100)


@pytest.fixture
def resolver():
    return AnchorResolver(radius_config=RadiusConfig(), scoring_config=ScoringConfig())


@pytest.fixture
def itinerary():
    """Paris (days 1-2), Lyon (days 3-4), Nice (day 5, lodging only)."""
    return Itinerary(
        days=(
            ItineraryDay(1, "Paris", lodging=PARIS_HOTEL),
            ItineraryDay(2, "Paris"),
            ItineraryDay(3, "Lyon"),
            ItineraryDay(4, "Lyon"),
            ItineraryDay(5, "Nice", lodging=NICE_HOTEL),
        ),
        destinations=(
            Destination("Paris", PARIS, external_id="paris-id"),
            Destination("Lyon", LYON, external_id="lyon-id"),
            Destination("Nice"),
        ),
    )


def test_whole_trip_anchors(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.whole_trip())

    assert [a.label for a in context.anchors] == ["Paris", "Lyon", "Nice"]
    assert [a.source for a in context.anchors] == ["geocode", "geocode", "lodging"]
    assert all(a.weight == 1.0 for a in context.anchors)
    assert context.trip_destinations == ("Paris", "Lyon", "Nice")
    assert context.destination_external_ids == frozenset({"paris-id", "lyon-id"})
    assert context.primary_destination is None


def test_lodging_next_to_a_geocode_is_deduplicated(resolver, itinerary):
    anchors = resolver.anchors_for(itinerary)
    assert PARIS_HOTEL not in [a.coordinate for a in anchors]


def test_anchor_radius_comes_from_radius_policy(resolver, itinerary):
    paris = resolver.anchors_for(itinerary)[0]
    assert paris.core_radius_km == 18
    assert paris.outer_radius_km == pytest.approx(28.8)


def test_day_focus_adds_adjacent_days_at_reduced_weight(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.for_day(3))

    assert context.primary_destination == "Lyon"
    assert context.adjacent_destinations == ("Paris", "Nice")
    assert [(a.label, a.weight) for a in context.anchors] == [
        ("Lyon", 1.0),
        ("Paris", 0.55),
        ("Nice", 0.55),
    ]
    assert context.anchors[2].coordinate == NICE_HOTEL


def test_adjacent_day_skips_days_with_the_same_destination(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.for_day(2))

    assert context.primary_destination == "Paris"
    assert context.adjacent_destinations == ("Lyon",)
    assert [a.label for a in context.anchors] == ["Paris", "Lyon"]


def test_first_day_has_only_a_next_neighbour(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.for_day(1))
    assert context.adjacent_destinations == ("Lyon",)


def test_day_focus_scopes_external_ids(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.for_day(5))
    assert context.adjacent_destinations == ("Lyon",)
    assert context.destination_external_ids == frozenset({"lyon-id"})


def test_missing_geocode_falls_back_to_nearest_lodging(resolver):
    itinerary = Itinerary(
        days=(
            ItineraryDay(1, "Rome", lodging=ROME_HOTEL_A),
            ItineraryDay(2, "Rome"),
            ItineraryDay(3, "Rome", lodging=ROME_HOTEL_B),
        ),
        destinations=(Destination("Rome", Coordinate(0, 0)),),
    )

    day2 = resolver.resolve(itinerary, Focus.for_day(2)).anchors
    day3 = resolver.resolve(itinerary, Focus.for_day(3)).anchors

    # Days 1 and 3 are equally near day 2; the earlier one wins the tie.
    assert [a.coordinate for a in day2] == [ROME_HOTEL_A]
    assert [a.coordinate for a in day3] == [ROME_HOTEL_B]
    assert day2[0].source == "lodging"


def test_no_coordinates_yields_no_anchors(resolver):
    itinerary = Itinerary(days=(ItineraryDay(1, "Kyoto"), ItineraryDay(2, "Osaka")))

    context = resolver.resolve(itinerary, Focus.for_day(1))

    assert context.anchors == ()
    assert context.primary_destination == "Kyoto"
    assert context.adjacent_destinations == ("Osaka",)
    assert context.has_destinations


def test_unknown_day_yields_empty_context(resolver, itinerary):
    context = resolver.resolve(itinerary, Focus.for_day(42))

    assert context.anchors == ()
    assert context.primary_destination is None
    assert context.trip_destinations == ("Paris", "Lyon", "Nice")


def test_day_without_destination_uses_trip_location_and_own_lodging(resolver):
    hotel = Coordinate(35.0116, 135.7681)
    itinerary = Itinerary(days=(ItineraryDay(1, lodging=hotel),), location="Kyoto, Japan")

    context = resolver.resolve(itinerary, Focus.for_day(1))

    assert context.primary_destination == "Kyoto"
    assert [(a.label, a.coordinate) for a in context.anchors] == [("Kyoto", hotel)]


def test_invalid_lodging_is_ignored(resolver):
    itinerary = Itinerary(days=(ItineraryDay(1, "Paris", lodging=Coordinate(120, 0)),))
    assert resolver.anchors_for(itinerary) == ()
    assert resolver.anchors_for(itinerary, Focus.for_day(1)) == ()


def test_trip_destination_names_fallbacks():
    assert trip_destination_names(
        Itinerary(days=(ItineraryDay(1, "Paris"), ItineraryDay(2, "paris "), ItineraryDay(3, "Lyon")))
    ) == ("Paris", "Lyon")
    assert trip_destination_names(
        Itinerary(days=(ItineraryDay(1),), destination_names=("Tokyo", "Kyoto"))
    ) == ("Tokyo", "Kyoto")
    assert trip_destination_names(Itinerary(location="Lisbon, Portugal")) == ("Lisbon",)
    assert trip_destination_names(Itinerary()) == ()


def test_destination_names_used_when_days_name_none():
    itinerary = Itinerary(
        days=(ItineraryDay(1), ItineraryDay(2)),
        destinations=(Destination("Paris", PARIS), Destination("Lyon", LYON)),
        location="France",
    )

    assert trip_destination_names(itinerary) == ("Paris", "Lyon")
    context = AnchorResolver().resolve(itinerary, Focus.whole_trip())
    assert context.trip_destinations == ("Paris", "Lyon")


def test_same_name_neighbours_each_get_their_own_lodging(resolver):
    """Rome -> Florence -> Rome, with a different hotel on each Rome day."""
    hotel_a = Coordinate(41.90, 12.48)
    hotel_b = Coordinate(41.80, 12.25)
    itinerary = Itinerary(
        days=(
            ItineraryDay(1, "Rome", lodging=hotel_a),
            ItineraryDay(2, "Florence"),
            ItineraryDay(3, "Rome", lodging=hotel_b),
        ),
    )

    context = resolver.resolve(itinerary, Focus.for_day(2))

    assert context.adjacent_destinations == ("Rome",)
    assert [(a.coordinate, a.weight) for a in context.anchors] == [
        (hotel_a, 0.55),
        (hotel_b, 0.55),
    ]


def test_same_name_neighbours_share_one_geocode_anchor(resolver):
    itinerary = Itinerary(
        days=(ItineraryDay(1, "Paris"), ItineraryDay(2, "Lyon"), ItineraryDay(3, "Paris")),
        destinations=(Destination("Paris", PARIS), Destination("Lyon", LYON)),
    )

    context = resolver.resolve(itinerary, Focus.for_day(2))

    assert [(a.label, a.weight) for a in context.anchors] == [("Lyon", 1.0), ("Paris", 0.55)]
