from deckkit.parsers.lflist import (
    LFLIST_HASH_SEED,
    lflist_hash_contribution,
    parse_lflist,
    parse_lflist_entry,
)
from deckkit.parsers.ydk import format_deck_array, format_ydk, parse_ydk

__all__ = [
    "LFLIST_HASH_SEED",
    "format_deck_array",
    "format_ydk",
    "lflist_hash_contribution",
    "parse_lflist",
    "parse_lflist_entry",
    "parse_ydk",
]
