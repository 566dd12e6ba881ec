"""Static alias tables mapping naming variants to canonical city names.

Keys and targets are run through the tokenizer once at import time, so a
key like "Le Marais" is stored as "marais" and lookups work directly on
token sequences. Ambiguous neighbourhood names map to every candidate
city; the scorer keeps whichever candidate scores best.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .tokenizer import normalize_text, tokenize

ALIAS_TABLE: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        # Abbreviations
        "nyc": ("new york",),
        "ny": ("new york",),
        "sf": ("san francisco",),
        "dc": ("washington",),
        "bcn": ("barcelona",),
        "cph": ("copenhagen",),
        "hk": ("hong kong",),
        "kl": ("kuala lumpur",),
        "cdmx": ("mexico city",),
        # Local-language names
        "københavn": ("copenhagen",),
        "kobenhavn": ("copenhagen",),
        "roma": ("rome",),
        "firenze": ("florence",),
        "venezia": ("venice",),
        "napoli": ("naples",),
        "milano": ("milan",),
        "torino": ("turin",),
        "genova": ("genoa",),
        "siracusa": ("syracuse",),
        "lisboa": ("lisbon",),
        "münchen": ("munich",),
        "köln": ("cologne",),
        "wien": ("vienna",),
        "praha": ("prague",),
        "warszawa": ("warsaw",),
        "sevilla": ("seville",),
        "bruxelles": ("brussels",),
        "brussel": ("brussels",),
        "den haag": ("the hague",),
        "haag": ("the hague",),
        "göteborg": ("gothenburg",),
        "athina": ("athens",),
        "kiev": ("kyiv",),
        "bombay": ("mumbai",),
        "peking": ("beijing",),
        "saigon": ("ho chi minh",),
        # New York
        "brooklyn": ("new york",),
        "manhattan": ("new york",),
        "harlem": ("new york",),
        "bronx": ("new york",),
        "tribeca": ("new york",),
        "greenwich village": ("new york",),
        "east village": ("new york",),
        "lower east side": ("new york",),
        # London
        "shoreditch": ("london",),
        "hackney": ("london",),
        "camden": ("london",),
        "mayfair": ("london",),
        "notting hill": ("london",),
        "kensington": ("london",),
        "brixton": ("london",),
        "marylebone": ("london",),
        "peckham": ("london",),
        # Paris
        "montmartre": ("paris",),
        "le marais": ("paris",),
        "saint germain": ("paris",),
        "belleville": ("paris",),
        "pigalle": ("paris",),
        # Tokyo wards and neighbourhoods ("-ku" forms are retried without the suffix)
        "shibuya": ("tokyo",),
        "shinjuku": ("tokyo",),
        "ginza": ("tokyo",),
        "harajuku": ("tokyo",),
        "asakusa": ("tokyo",),
        "roppongi": ("tokyo",),
        "minato": ("tokyo",),
        "meguro": ("tokyo",),
        "setagaya": ("tokyo",),
        "shimokitazawa": ("tokyo",),
        "daikanyama": ("tokyo",),
        "nakameguro": ("tokyo",),
        # Kyoto
        "gion": ("kyoto",),
        "arashiyama": ("kyoto",),
        "higashiyama": ("kyoto",),
        # Copenhagen
        "nørrebro": ("copenhagen",),
        "vesterbro": ("copenhagen",),
        "østerbro": ("copenhagen",),
        "frederiksberg": ("copenhagen",),
        "christianshavn": ("copenhagen",),
        "nyhavn": ("copenhagen",),
        # Berlin
        "kreuzberg": ("berlin",),
        "mitte": ("berlin",),
        "neukölln": ("berlin",),
        "prenzlauer berg": ("berlin",),
        "friedrichshain": ("berlin",),
        "charlottenburg": ("berlin",),
        # Barcelona / Lisbon / Rome
        "gràcia": ("barcelona",),
        "eixample": ("barcelona",),
        "el born": ("barcelona",),
        "alfama": ("lisbon",),
        "chiado": ("lisbon",),
        "bairro alto": ("lisbon",),
        "trastevere": ("rome",),
        "testaccio": ("rome",),
        # Mexico City / Sicily
        "roma norte": ("mexico city",),
        "condesa": ("mexico city",),
        "ortigia": ("syracuse",),
        # Ambiguous across cities
        "soho": ("london", "new york", "hong kong"),
        "chelsea": ("london", "new york"),
        "richmond": ("london", "melbourne"),
        "greenwich": ("london", "new york"),
    }
)

# Bare country names, dropped from compound destinations ("Paris, France").
COUNTRY_NAMES: frozenset[str] = frozenset(
    " ".join(tokenize(name))
    for name in (
        "France", "Italy", "Italia", "Spain", "España", "Portugal", "Germany",
        "Deutschland", "Denmark", "Danmark", "Sweden", "Norway", "Iceland",
        "Netherlands", "Belgium", "Switzerland", "Austria", "Greece", "Croatia",
        "Japan", "China", "India", "Thailand", "Vietnam", "Indonesia", "Mexico",
        "USA", "United States", "US", "UK", "United Kingdom", "England",
        "Scotland", "Ireland", "Canada", "Australia", "New Zealand",
        "South Africa", "Kenya", "Tanzania", "Morocco", "Egypt", "Peru", "Chile",
        "Argentina", "Brazil", "Colombia", "Turkey", "Türkiye",
    )
)


def _compile(table: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    compiled: dict[str, tuple[str, ...]] = {}
    for raw_key, raw_targets in table.items():
        key = " ".join(tokenize(raw_key))
        targets = tuple(t for t in (" ".join(tokenize(raw)) for raw in raw_targets) if t)
        if not key or not targets:
            continue
        merged = compiled.get(key, ()) + targets
        compiled[key] = tuple(dict.fromkeys(merged))
    return MappingProxyType(compiled)


_ALIASES = _compile(ALIAS_TABLE)


def alias_targets(key: str) -> tuple[str, ...]:
    """Canonical names for a token or token phrase, empty when unknown.

    A Japanese ward written with its suffix ("shibuyaku") is retried
    without the trailing "ku".
    """
    targets = _ALIASES.get(key)
    if targets is None and " " not in key and key.endswith("ku") and len(key) > 4:
        targets = _ALIASES.get(key[:-2])
    return targets or ()


def resolve_aliases(tokens: Sequence[str]) -> frozenset[str]:
    """Expand tokens with every canonical name they may stand for.

    Single tokens, then consecutive pairs, then triples are looked up. A
    multi-word target contributes both the phrase and its words, so
    "nyc" yields "new york", "new" and "york".
    """
    normalized = [t for t in (normalize_text(token) for token in tokens) if t]
    resolved = set(normalized)
    for size in (1, 2, 3):
        for start in range(len(normalized) - size + 1):
            key = " ".join(normalized[start : start + size])
            for target in alias_targets(key):
                resolved.add(target)
                resolved.update(target.split())
    return frozenset(resolved)


def is_country_name(text: str) -> bool:
    return " ".join(tokenize(text)) in COUNTRY_NAMES
