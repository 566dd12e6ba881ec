"""Text normalization for free-text locations and destination names.

Locations arrive in every shape ("Just outside Florence", "Nørrebro,
København", "Greater London area"), so both sides of a comparison are
reduced to the same token vocabulary before any matching happens.
"""

from __future__ import annotations

import re
import unicodedata

# Articles and prepositions in several languages, generic administrative
# words, and the vague-qualifier words themselves.
STOP_WORDS: frozenset[str] = frozenset(
    {
        # English
        "the", "an", "of", "in", "at", "on", "and", "to", "by", "for",
        # French
        "le", "la", "les", "de", "du", "des", "et", "en", "sur", "au", "aux",
        # Italian
        "il", "lo", "gli", "di", "del", "della", "delle", "dei", "da", "dal", "nel", "sul",
        # Spanish / Portuguese
        "el", "los", "las", "do", "dos", "das", "em",
        # German / Dutch
        "der", "die", "das", "den", "dem", "am", "im", "von", "zu", "bei", "und", "het", "van",
        # Administrative
        "city", "region", "district", "province", "county", "borough", "town",
        "village", "municipality", "ku",
        # Vague qualifiers
        "near", "nearby", "outside", "around", "close", "just", "about",
        "area", "vicinity", "outskirts", "greater",
    }
)

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "`": "'", "´": "'", "ʼ": "'"})

_DISTANCE_UNITS = r"(?:hours?|hrs?|minutes?|mins?|km|kilometers?|kilometres?|miles?|mi)"

_LEADING_QUALIFIER = re.compile(
    r"^\s*(?:"
    r"(?:about|around|roughly|approx\.?|approximately)?\s*"
    r"(?:\d+(?:[.,]\d+)?\s*|(?:an?|one)\s+)" + _DISTANCE_UNITS
    + r"\s+(?:drive\s+)?(?:from|outside(?:\s+of)?)"
    r"|just\s+outside(?:\s+of)?"
    r"|(?:on\s+)?the\s+outskirts\s+of"
    r"|outside(?:\s+of)?"
    r"|close\s+to"
    r"|near(?:by)?"
    r"|around"
    r")\s+",
    re.IGNORECASE,
)
_GREATER = re.compile(r"^\s*greater\s+", re.IGNORECASE)
_TRAILING_QUALIFIER = re.compile(r"\s+(?:area|region|vicinity|outskirts)\s*$", re.IGNORECASE)


def normalize_text(text: str) -> str:
    """Lowercase, strip accents and punctuation, collapse whitespace.

    Letters without a decomposition (ø, æ, ß) are kept as they are.
    """
    if not text:
        return ""
    normalized = unicodedata.normalize("NFD", text.translate(_APOSTROPHES))
    normalized = "".join(ch for ch in normalized if unicodedata.category(ch) != "Mn")
    normalized = normalized.lower().replace("'", "")
    normalized = re.sub(r"[\W_]+", " ", normalized)
    return " ".join(normalized.split())


def _strip_segment(segment: str) -> str:
    segment = _LEADING_QUALIFIER.sub("", segment, count=1)
    segment = _GREATER.sub("", segment, count=1)
    segment = _TRAILING_QUALIFIER.sub("", segment, count=1)
    return segment.strip()


def strip_vague_qualifiers(text: str) -> str:
    """Remove proximity phrasing around the actual place name.

    "About 2 hours from Florence" -> "Florence",
    "Outside Copenhagen, Denmark" -> "Copenhagen, Denmark",
    "Greater London area" -> "London".
    """
    if not text:
        return ""
    segments = (_strip_segment(segment) for segment in text.split(","))
    return ", ".join(segment for segment in segments if segment)


def tokenize(text: str) -> list[str]:
    """Split text into comparable tokens.

    Single characters and stop words are dropped; order is preserved so
    consecutive tokens can be looked up as multi-word aliases.
    """
    return [
        token
        for token in normalize_text(text).split()
        if len(token) > 1 and token not in STOP_WORDS
    ]
