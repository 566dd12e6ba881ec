"""Tests for the Folium anchor map renderer."""

from unittest.mock import MagicMock

import pytest

from destination_relevance.adapters.rendering import FoliumAnchorMapRenderer
from destination_relevance.config import MapConfig, RadiusConfig, ScoringConfig
from destination_relevance.domain.errors import RenderingError
from destination_relevance.domain.models import (
    Coordinate,
    Destination,
    Focus,
    Itinerary,
    ItineraryDay,
    Place,
    ScoringContext,
)
from destination_relevance.services.anchor_resolver import AnchorResolver
from destination_relevance.services.scorer import DestinationScorer

COPENHAGEN = Coordinate(55.6761, 12.5683)


@pytest.fixture
def context():
    itinerary = Itinerary(
        days=(ItineraryDay(1, "Copenhagen"),),
        destinations=(Destination("Copenhagen", COPENHAGEN),),
    )
    resolver = AnchorResolver(radius_config=RadiusConfig(), scoring_config=ScoringConfig())
    return resolver.resolve(itinerary, Focus.for_day(1))


@pytest.fixture
def places():
    return [
        Place("barr", "Barr", "Nørrebro, Copenhagen", Coordinate(55.686, 12.565)),
        Place("nocoord", "Mystery Bar", "Copenhagen"),
    ]


def test_render_writes_html_map(tmp_path, context, places):
    renderer = FoliumAnchorMapRenderer(config=MapConfig(), scorer=DestinationScorer(config=ScoringConfig()))
    output = tmp_path / "maps" / "anchors.html"

    result = renderer.render(context, places, output)

    assert result == output
    assert output.exists()
    html = output.read_text(encoding="utf-8")
    assert "Copenhagen" in html
    assert "Barr" in html
    assert "Mystery Bar" not in html


def test_render_uses_precomputed_scores(tmp_path, context, places):
    scorer = MagicMock()
    renderer = FoliumAnchorMapRenderer(config=MapConfig(), scorer=scorer)

    renderer.render(context, places, tmp_path / "map.html", scores={"barr": 1.0})

    scorer.score.assert_not_called()


def test_render_without_anchors_or_places_raises(tmp_path):
    renderer = FoliumAnchorMapRenderer(config=MapConfig())
    empty = ScoringContext(focus=Focus.whole_trip())

    with pytest.raises(RenderingError) as exc_info:
        renderer.render(empty, [Place("x", "No coords")], tmp_path / "map.html")

    assert exc_info.value.renderer_type == "folium"
    assert not (tmp_path / "map.html").exists()


def test_render_places_without_anchors(tmp_path, places):
    renderer = FoliumAnchorMapRenderer(config=MapConfig(), scorer=DestinationScorer(config=ScoringConfig()))
    empty = ScoringContext(focus=Focus.whole_trip())

    output = renderer.render(empty, places, tmp_path / "places.html")

    assert output.exists()
