"""Ports layer - Abstract interfaces (Protocols) for outbound adapters."""

from .rendering import AnchorMapRendererPort

__all__ = ["AnchorMapRendererPort"]
