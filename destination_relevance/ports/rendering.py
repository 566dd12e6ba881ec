"""Rendering port - Abstraction for anchor map generation.

This protocol defines the contract for visualizing why places matched,
allowing different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Place, ScoringContext


class AnchorMapRendererPort(Protocol):
    """Port for anchor map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        context: ScoringContext,
        places: Sequence[Place],
        output_path: Path,
        scores: Optional[Mapping[str, float]] = None,
    ) -> Path:
        """Render anchors and places on a map and save to file.

        Args:
            context: Resolved anchors for the focus being explained.
            places: Places to plot; those without a valid coordinate are skipped.
            output_path: Where to save the rendered map.
            scores: Precomputed scores by place id; computed when omitted.

        Returns:
            Path to the generated map file.
        """
        ...
