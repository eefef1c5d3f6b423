"""
Compact binary deck code.

Layout (little-endian):
    u32 main_count
    u32 extra_count
    u32 side_count
    u32 identifiers: main, then extra, then side

The three counts make the code self-describing, so decoding reproduces the
zones exactly without consulting the card database.

``save_deck_to_code`` and ``load_deck_from_code`` report failure through
their return value and never leave partial output behind.
``encode_deck``/``decode_deck`` wrap them for callers that prefer exceptions.
"""

import logging
import struct

from deckkit.config import DeckLimits
from deckkit.models.card import UINT32_MAX
from deckkit.models.deck import Deck
from deckkit.models.errors import DeckCodeError

logger = logging.getLogger(__name__)

_HEADER = struct.Struct("<3I")
_CODE = struct.Struct("<I")

DECK_CODE_HEADER_SIZE = _HEADER.size


def deck_code_size(deck: Deck) -> int:
    """Number of bytes ``save_deck_to_code`` writes for this deck."""
    return DECK_CODE_HEADER_SIZE + _CODE.size * deck.total_cards()


def _within_limits(main: int, extra: int, side: int, limits: DeckLimits) -> bool:
    return main <= limits.deck_max and extra <= limits.extra_max and side <= limits.side_max


def save_deck_to_code(deck: Deck, buffer: bytearray | memoryview, limits: DeckLimits) -> int:
    """
    Encode ``deck`` into the start of ``buffer``.

    Args:
        deck: Deck to encode
        buffer: Writable buffer of bounded capacity
        limits: Zone size limits the deck must respect

    Returns:
        Bytes written, or 0 if the deck exceeds the limits, holds an
        identifier outside 32 bits, or does not fit the buffer. Nothing is
        written on failure.
    """
    if not _within_limits(len(deck.main), len(deck.extra), len(deck.side), limits):
        logger.debug("Deck exceeds configured limits, not encoding")
        return 0

    size = deck_code_size(deck)
    if size > len(buffer):
        logger.debug("Deck code needs %d bytes, buffer holds %d", size, len(buffer))
        return 0

    codes = list(deck.iter_all())
    if any(not 0 <= code <= UINT32_MAX for code in codes):
        return 0

    _HEADER.pack_into(buffer, 0, len(deck.main), len(deck.extra), len(deck.side))
    struct.pack_into(f"<{len(codes)}I", buffer, DECK_CODE_HEADER_SIZE, *codes)
    return size


def load_deck_from_code(
    deck: Deck,
    buffer: bytes | bytearray | memoryview,
    limits: DeckLimits,
    length: int | None = None,
) -> bool:
    """
    Decode a deck code into ``deck``.

    Args:
        deck: Output deck, replaced only on success
        buffer: Encoded bytes
        limits: Zone size limits the decoded deck must respect
        length: Number of valid bytes in ``buffer`` (default: all of it)

    Returns:
        True on success. False for a length beyond the buffer, a short
        header, counts above the limits, or a payload shorter than declared.
    """
    if length is None:
        length = len(buffer)
    if length < 0 or length > len(buffer):
        return False
    if length < DECK_CODE_HEADER_SIZE:
        return False

    main_count, extra_count, side_count = _HEADER.unpack_from(buffer, 0)
    if not _within_limits(main_count, extra_count, side_count, limits):
        logger.debug(
            "Deck code declares %d/%d/%d cards, over limits", main_count, extra_count, side_count
        )
        return False

    total = main_count + extra_count + side_count
    if DECK_CODE_HEADER_SIZE + _CODE.size * total > length:
        logger.debug("Deck code truncated: %d bytes for %d cards", length, total)
        return False

    codes = struct.unpack_from(f"<{total}I", buffer, DECK_CODE_HEADER_SIZE)
    deck.main = list(codes[:main_count])
    deck.extra = list(codes[main_count : main_count + extra_count])
    deck.side = list(codes[main_count + extra_count :])
    deck.is_packlist = False
    return True


def encode_deck(deck: Deck, limits: DeckLimits) -> bytes:
    """
    Encode a deck to a new bytes object.

    Raises:
        DeckCodeError: If the deck exceeds the limits or has an invalid identifier
    """
    buffer = bytearray(deck_code_size(deck))
    if save_deck_to_code(deck, buffer, limits) == 0:
        raise DeckCodeError("Deck cannot be encoded", f"{deck.total_cards()} cards")
    return bytes(buffer)


def decode_deck(data: bytes, limits: DeckLimits) -> Deck:
    """
    Decode a deck code into a new Deck.

    Raises:
        DeckCodeError: If the code is truncated or exceeds the limits
    """
    deck = Deck()
    if not load_deck_from_code(deck, data, limits):
        raise DeckCodeError("Malformed deck code", f"{len(data)} bytes")
    return deck
