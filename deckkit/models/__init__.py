from deckkit.models.card import (
    AVAIL_CUSTOM,
    AVAIL_OCG,
    AVAIL_OCGTCG,
    AVAIL_SC,
    AVAIL_TCG,
    TYPE_FUSION,
    TYPE_LINK,
    TYPE_MONSTER,
    TYPE_SPELL,
    TYPE_SYNCHRO,
    TYPE_TOKEN,
    TYPE_TRAP,
    TYPE_XYZ,
    TYPES_EXTRA_DECK,
    UINT32_MAX,
    CardData,
)
from deckkit.models.deck import Deck, DeckArray
from deckkit.models.errors import DeckCodeError, DeckError, DeckStatus
from deckkit.models.lflist import DEFAULT_CARD_LIMIT, NO_LIMIT_NAME, LFList

__all__ = [
    "AVAIL_CUSTOM",
    "AVAIL_OCG",
    "AVAIL_OCGTCG",
    "AVAIL_SC",
    "AVAIL_TCG",
    "CardData",
    "DEFAULT_CARD_LIMIT",
    "Deck",
    "DeckArray",
    "DeckCodeError",
    "DeckError",
    "DeckStatus",
    "LFList",
    "NO_LIMIT_NAME",
    "TYPES_EXTRA_DECK",
    "TYPE_FUSION",
    "TYPE_LINK",
    "TYPE_MONSTER",
    "TYPE_SPELL",
    "TYPE_SYNCHRO",
    "TYPE_TOKEN",
    "TYPE_TRAP",
    "TYPE_XYZ",
    "UINT32_MAX",
]
