"""Tests for per-destination radius selection."""

import pytest
from pydantic import ValidationError

from destination_relevance.config import RadiusConfig
from destination_relevance.domain.models import Destination
from destination_relevance.geo.radius import (
    RADIUS_OVERRIDES,
    find_override,
    is_regional,
    radius_for,
)

DEFAULTS = RadiusConfig(urban_core_km=18, regional_core_km=55, taper_ratio=1.6)


def core(destination):
    return radius_for(destination, DEFAULTS)[0]


def test_urban_default():
    assert radius_for(Destination("Paris"), DEFAULTS) == pytest.approx((18, 28.8))


def test_known_region_gets_regional_default():
    assert core(Destination("Cotswolds")) == 55


@pytest.mark.parametrize("name", ["Lake Como", "Lake District", "Isle of Skye", "Big Sur Coast", "Yorkshire"])
def test_region_words_make_destination_regional(name):
    assert is_regional(Destination(name))
    assert core(Destination(name)) == 55


def test_override_beats_regional_heuristic():
    """A compact region must not inherit the 55 km regional default."""
    assert core(Destination("Cinque Terre, Liguria, Italy")) == 20


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Amalfi Coast", 30),
        ("Capri", 15),
        ("Reykjavík", 40),
        ("Los Angeles", 28),
        ("Copenhagen", 25),
        ("København", 25),
        ("Berlin", 25),
        ("Kruger National Park", 150),
        ("Sabi Sand", 150),
        ("Scottish Highlands", 120),
        ("Serengeti", 100),
        ("Rajasthan", 200),
        ("Sicily", 130),
    ],
)
def test_named_overrides(name, expected):
    assert core(Destination(name)) == expected


def test_override_uses_taper_ratio_unless_outer_given():
    assert radius_for(Destination("Copenhagen"), DEFAULTS) == pytest.approx((25, 40))
    assert radius_for(Destination("Capri"), DEFAULTS) == (15, 20)


def test_first_matching_override_wins():
    """Both Amalfi and Capri match; Amalfi comes first in the table."""
    assert core(Destination("Amalfi & Capri")) == 30
    patterns = [o.pattern.pattern for o in RADIUS_OVERRIDES]
    assert patterns.index(r"\bamalfi\b") < patterns.index(r"\bcapri\b")


def test_override_matches_formatted_address():
    destination = Destination("Positano", formatted_address="Positano, Amalfi Coast, Italy")
    assert find_override(destination) is not None
    assert core(destination) == 30


def test_address_naming_a_larger_area_is_regional():
    """Montmartre geocoded to 'Paris, France' is a sub-area of something larger."""
    destination = Destination("Montmartre", formatted_address="Paris, France")
    assert is_regional(destination)
    assert core(destination) == 55


def test_address_naming_the_destination_itself_stays_urban():
    destination = Destination("Ortigia", formatted_address="Ortigia, Syracuse, Italy")
    assert not is_regional(destination)
    assert core(destination) == 18


def test_config_changes_defaults_but_not_overrides():
    config = RadiusConfig(urban_core_km=10, regional_core_km=40, taper_ratio=2.0)
    assert radius_for(Destination("Paris"), config) == (10, 20)
    assert radius_for(Destination("Tuscany"), config) == (40, 80)
    assert radius_for(Destination("Cinque Terre"), config) == (20, 40)


def test_taper_ratio_must_widen_the_radius():
    with pytest.raises(ValidationError):
        RadiusConfig(taper_ratio=1.0)
