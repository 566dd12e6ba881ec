"""Typed domain errors for the destination relevance engine.

The scoring core degrades instead of failing, so errors only surface at
the adapter edges. All errors inherit from DestinationRelevanceError and
can optionally wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DestinationRelevanceError(Exception):
    """Base error for the destination relevance domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class RenderingError(DestinationRelevanceError):
    """Anchor map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
