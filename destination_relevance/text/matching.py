"""Compound-destination splitting and token-based location matching."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Optional

from ..config import ScoringConfig, get_config
from .aliases import alias_targets, is_country_name, resolve_aliases
from .tokenizer import strip_vague_qualifiers, tokenize

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_COMPOUND_SEPARATORS = re.compile(r"[/&,]")


def split_compound_destination(name: str) -> list[str]:
    """Split "Noto / Syracuse" or "Lake Como, Bellagio & Tremezzo" into parts.

    Parenthetical qualifiers are removed ("Paris (Left Bank)" -> "Paris").
    Bare country names are dropped when another part remains.
    """
    if not name:
        return []
    without_qualifiers = _PARENTHETICAL.sub(" ", name).replace("(", " ").replace(")", " ")
    parts = [
        " ".join(part.split())
        for part in _COMPOUND_SEPARATORS.split(without_qualifiers)
    ]
    parts = [part for part in parts if part]
    places = [part for part in parts if not is_country_name(part)]
    return places or parts


def _present(form: str, place_tokens: frozenset[str]) -> bool:
    if form in place_tokens:
        return True
    words = form.split()
    return len(words) > 1 and all(word in place_tokens for word in words)


def _contained(form: str, place_tokens: Iterable[str], min_length: int) -> bool:
    # Single words only; phrases are matched word by word in _present.
    if " " in form:
        return False
    for token in place_tokens:
        if " " in token:
            continue
        shorter = token if len(token) <= len(form) else form
        if len(shorter) >= min_length and (form in token or token in form):
            return True
    return False


def token_match_score(
    place_location: str,
    destination_name: str,
    config: Optional[ScoringConfig] = None,
) -> float:
    """Score how well a free-text location names a destination.

    Every token of some sub-destination has to be found among the place's
    alias-resolved tokens. Returns the exact-token score when all tokens
    matched exactly, the substring score when at least one needed
    substring containment, and 0 when no sub-destination fully matched.
    """
    config = config or get_config().scoring

    if not place_location or not destination_name:
        return 0.0

    place_tokens = resolve_aliases(tokenize(strip_vague_qualifiers(place_location)))
    if not place_tokens:
        return 0.0

    best = 0.0
    for sub_destination in split_compound_destination(destination_name):
        tokens = tokenize(strip_vague_qualifiers(sub_destination))
        if not tokens:
            continue

        exact = True
        for token in tokens:
            forms = (token, *alias_targets(token))
            if any(_present(form, place_tokens) for form in forms):
                continue
            if any(_contained(form, place_tokens, config.min_substring_length) for form in forms):
                exact = False
                continue
            break
        else:
            score = config.exact_token_score if exact else config.substring_token_score
            best = max(best, score)

    return best
