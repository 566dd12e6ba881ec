"""Folium anchor map renderer adapter.

Draws each anchor's core radius (solid) and outer taper radius (dashed),
and every place with a usable coordinate coloured by its score, so a
surprising match or miss can be inspected on a map.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...config import MapConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Coordinate, Place, ScoringContext
from ...geo.distance import as_valid
from ...services.scorer import DestinationScorer


def _score_color(score: float) -> str:
    if score >= 1.0:
        return "green"
    if score > 0:
        return "orange"
    return "gray"


@dataclass
class FoliumAnchorMapRenderer:
    """Folium-based interactive anchor map renderer.

    This adapter implements AnchorMapRendererPort using Folium for
    generating interactive HTML maps.

    Attributes:
        config: Map zoom and tiles
        scorer: Used when no precomputed scores are passed
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    scorer: DestinationScorer = field(default_factory=DestinationScorer)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        context: ScoringContext,
        places: Sequence[Place],
        output_path: Path,
        scores: Optional[Mapping[str, float]] = None,
    ) -> Path:
        """Render anchors and places on a map and save to file.

        Raises:
            RenderingError: If there is nothing to draw or rendering fails.
        """
        plotted: list[tuple[Place, Coordinate]] = []
        for place in places:
            coordinate = as_valid(place.coordinate)
            if coordinate is not None:
                plotted.append((place, coordinate))

        if not context.anchors and not plotted:
            raise RenderingError(
                "Nothing to render: no anchors and no places with coordinates",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering anchor map",
            extra={
                "anchors": len(context.anchors),
                "places": len(plotted),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            centers = [a.coordinate for a in context.anchors] or [c for _, c in plotted]
            center_lat = sum(c.lat for c in centers) / len(centers)
            center_lng = sum(c.lng for c in centers) / len(centers)

            m = folium.Map(
                location=[center_lat, center_lng],
                zoom_start=self.config.zoom_start,
                tiles=self.config.tiles,
            )

            for anchor in context.anchors:
                location = [anchor.coordinate.lat, anchor.coordinate.lng]
                color = "blue" if anchor.weight >= 1.0 else "purple"
                folium.Circle(
                    location=location,
                    radius=anchor.core_radius_km * 1000,
                    color=color,
                    fill=True,
                    fill_opacity=0.1,
                    tooltip=f"{anchor.label} core {anchor.core_radius_km:g} km",
                ).add_to(m)
                folium.Circle(
                    location=location,
                    radius=anchor.outer_radius_km * 1000,
                    color=color,
                    dash_array="6, 8",
                    fill=False,
                ).add_to(m)
                folium.Marker(
                    location=location,
                    popup=f"{anchor.label} ({anchor.source}, weight {anchor.weight:g})",
                    icon=folium.Icon(color=color),
                ).add_to(m)

            for place, coordinate in plotted:
                if scores is not None and place.id in scores:
                    score = scores[place.id]
                else:
                    score = self.scorer.score(place, context)
                color = _score_color(score)
                folium.CircleMarker(
                    location=[coordinate.lat, coordinate.lng],
                    radius=6,
                    color=color,
                    fill=True,
                    fill_color=color,
                    tooltip=f"{place.name} ({score:.2f})",
                ).add_to(m)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
