"""Rendering adapters - Implementations of AnchorMapRendererPort.

Available implementations:
- FoliumAnchorMapRenderer: Folium-based interactive anchor map
"""

from .folium_adapter import FoliumAnchorMapRenderer

__all__ = ["FoliumAnchorMapRenderer"]
