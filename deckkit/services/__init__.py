"""
deckkit services.

Banlist registry, card lookup, deck codecs and deck validation.
"""

from deckkit.services.card_database import (
    CardDatabase,
    InMemoryCardDatabase,
    load_card_database,
    type_count,
)
from deckkit.services.deck_code import (
    DECK_CODE_HEADER_SIZE,
    decode_deck,
    deck_code_size,
    encode_deck,
    load_deck_from_code,
    save_deck_to_code,
)
from deckkit.services.deck_codec import DeckCodec
from deckkit.services.deck_validator import (
    RULE_ALL,
    RULE_CUSTOM,
    RULE_OCG,
    RULE_OCGTCG,
    RULE_SC,
    RULE_TCG,
    DeckValidator,
    check_availability,
    check_deck,
    rule_availability,
)
from deckkit.services.lflist_registry import UNKNOWN_LIST_NAME, LFListRegistry
from deckkit.services.line_sources import iter_archive_lines, iter_file_lines, iter_text_lines

__all__ = [
    "CardDatabase",
    "DECK_CODE_HEADER_SIZE",
    "DeckCodec",
    "DeckValidator",
    "InMemoryCardDatabase",
    "LFListRegistry",
    "RULE_ALL",
    "RULE_CUSTOM",
    "RULE_OCG",
    "RULE_OCGTCG",
    "RULE_SC",
    "RULE_TCG",
    "UNKNOWN_LIST_NAME",
    "check_availability",
    "check_deck",
    "decode_deck",
    "deck_code_size",
    "encode_deck",
    "iter_archive_lines",
    "iter_file_lines",
    "iter_text_lines",
    "load_card_database",
    "load_deck_from_code",
    "rule_availability",
    "save_deck_to_code",
    "type_count",
]
