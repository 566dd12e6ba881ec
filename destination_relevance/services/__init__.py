"""Services layer - Anchor resolution, scoring and filtering.

Available services:
- AnchorResolver: Builds the ScoringContext for a focus
- DestinationScorer: Scores places against a ScoringContext
- PicksFilterService: Destination, category, source and search filtering
"""

from .anchor_resolver import AnchorResolver, trip_destination_names
from .picks_filter import PicksFilterService
from .scorer import DestinationScorer, destination_score, matches_destination

__all__ = [
    "AnchorResolver",
    "DestinationScorer",
    "PicksFilterService",
    "destination_score",
    "matches_destination",
    "trip_destination_names",
]
