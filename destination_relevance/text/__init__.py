"""Text normalization, alias resolution and location matching."""

from .aliases import ALIAS_TABLE, COUNTRY_NAMES, alias_targets, is_country_name, resolve_aliases
from .matching import split_compound_destination, token_match_score
from .tokenizer import STOP_WORDS, normalize_text, strip_vague_qualifiers, tokenize

__all__ = [
    "STOP_WORDS",
    "normalize_text",
    "strip_vague_qualifiers",
    "tokenize",
    "ALIAS_TABLE",
    "COUNTRY_NAMES",
    "alias_targets",
    "resolve_aliases",
    "is_country_name",
    "split_compound_destination",
    "token_match_score",
]
