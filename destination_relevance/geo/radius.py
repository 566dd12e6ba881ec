"""Per-destination anchor radius selection.

A destination gets a core radius (full score) and an outer radius (score
tapers to the falloff floor, then drops to zero). Named overrides are
checked first, in table order; only destinations without an override go
through the urban/regional classification.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..config import RadiusConfig, get_config
from ..domain.models import Destination
from ..text.tokenizer import normalize_text, tokenize


@dataclass(frozen=True, slots=True)
class RadiusOverride:
    """A named destination whose core radius is fixed by hand.

    Attributes:
        pattern: Matched against the normalized name, then the normalized address
        core_km: Core radius replacing the computed one
        outer_km: Explicit outer radius; None means ``core_km * taper_ratio``
    """

    pattern: re.Pattern[str]
    core_km: float
    outer_km: Optional[float] = None

    def matches(self, *texts: str) -> bool:
        return any(text and self.pattern.search(text) for text in texts)


def _override(pattern: str, core_km: float, outer_km: Optional[float] = None) -> RadiusOverride:
    return RadiusOverride(re.compile(pattern), core_km, outer_km)


# Ordered: first match wins.
RADIUS_OVERRIDES: tuple[RadiusOverride, ...] = (
    # Compact regions, smaller than the regional default
    _override(r"\bcinque terre\b", 20),
    _override(r"\bamalfi\b", 30),
    _override(r"\bcapri\b", 15, outer_km=20),
    # Urban areas wider than the urban default
    _override(r"\breykjavik\b", 40),
    _override(r"\blos angeles\b", 28),
    _override(r"\b(?:copenhagen|københavn|kobenhavn)\b", 25),
    _override(r"\bberlin\b", 25),
    # Oversized regions
    _override(r"\b(?:kruger|sabi sand|limpopo)\b", 150),
    _override(r"\bscottish highlands\b", 120),
    _override(r"\bserengeti\b", 100),
    _override(r"\brajasthan\b", 200),
    _override(r"\b(?:sicily|sicilia)\b", 130),
    _override(r"\bpatagonia\b", 200),
    _override(r"\b(?:masai|maasai) mara\b", 80),
    _override(r"\bokavango\b", 120),
    _override(r"\btasmania\b", 150),
)

_REGION_WORDS = re.compile(
    r"\b(?:coast|coastline|valley|region|island|islands|isle|lake|lakes|"
    r"highlands|safari|reserve|peninsula|prefecture|district|national park|"
    r"riviera|archipelago|countryside|wine country|alps|mountains)\b"
    r"|shire\b"
)

# Multi-town regions whose names carry no region word.
KNOWN_REGIONS: tuple[str, ...] = (
    "tuscany", "toscana", "provence", "amalfi", "patagonia", "serengeti",
    "cotswolds", "dordogne", "umbria", "piedmont", "piemonte", "puglia",
    "apulia", "sicily", "sardinia", "corsica", "andalusia", "andalucia",
    "algarve", "douro", "bavaria", "black forest", "loire", "burgundy",
    "champagne", "normandy", "brittany", "alsace", "cornwall", "napa",
    "sonoma", "big sur", "hamptons", "cape cod", "florida keys", "maui",
    "kauai", "bali", "lombok", "kruger", "okavango", "masai mara",
    "maasai mara", "ngorongoro", "atacama", "torres del paine", "yucatan",
    "costa brava", "costa del sol", "cappadocia", "peloponnese", "cyclades",
    "dolomites", "chianti", "langhe", "mallorca", "ibiza", "menorca",
    "madeira", "azores", "hokkaido", "okinawa", "rajasthan", "kerala",
    "goa", "tasmania", "barossa", "marlborough", "fiordland", "scottish highlands",
)

_KNOWN_REGIONS = re.compile(
    r"\b(?:" + "|".join(re.escape(name) for name in KNOWN_REGIONS) + r")\b"
)


def find_override(destination: Destination) -> Optional[RadiusOverride]:
    """Return the first override matching the destination's name or address."""
    name = normalize_text(destination.name)
    address = normalize_text(destination.formatted_address or "")
    for override in RADIUS_OVERRIDES:
        if override.matches(name, address):
            return override
    return None


def _address_names_larger_area(destination: Destination) -> bool:
    """True when the address's leading segment is not the destination itself.

    "Montmartre" geocoded to "Paris, France" means the destination is a
    sub-area of something larger.
    """
    if not destination.formatted_address:
        return False
    leading = normalize_text(destination.formatted_address.split(",")[0])
    own = normalize_text(destination.name.split(",")[0])
    if not leading or not own:
        return False
    if leading in own or own in leading:
        return False
    return not set(tokenize(leading)) & set(tokenize(own))


def is_regional(destination: Destination) -> bool:
    """Classify a destination as regional (multi-town) rather than urban."""
    name = normalize_text(destination.name)
    address = normalize_text(destination.formatted_address or "")
    for text in (name, address):
        if text and (_REGION_WORDS.search(text) or _KNOWN_REGIONS.search(text)):
            return True
    return _address_names_larger_area(destination)


def radius_for(
    destination: Destination, config: Optional[RadiusConfig] = None
) -> tuple[float, float]:
    """Return ``(core_radius_km, outer_radius_km)`` for a destination."""
    config = config or get_config().radius

    override = find_override(destination)
    if override is not None:
        outer = override.outer_km
        if outer is None:
            outer = override.core_km * config.taper_ratio
        return override.core_km, outer

    core = config.regional_core_km if is_regional(destination) else config.urban_core_km
    return core, core * config.taper_ratio
