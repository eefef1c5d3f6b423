"""
Flat-buffer deck codec.

A flat buffer carries ``mainc`` main+extra identifiers followed by ``sidec``
side identifiers. Main and extra are not separated in the buffer; the card
database decides which zone each identifier belongs to.
"""

import logging
from collections import Counter
from collections.abc import Sequence

from deckkit.config import DeckLimits
from deckkit.models.deck import Deck, DeckArray
from deckkit.models.errors import DeckError, DeckStatus
from deckkit.services.card_database import CardDatabase

logger = logging.getLogger(__name__)


class DeckCodec:
    """
    Translates flat identifier buffers to and from Deck objects.

    Usage:
        codec = DeckCodec(card_db, DeckLimits.default())
        status = codec.load_deck(deck, dbuf, mainc, sidec)
    """

    def __init__(self, card_db: CardDatabase, limits: DeckLimits) -> None:
        self.card_db = card_db
        self.limits = limits

    def _check_counts(self, dbuf: Sequence[int], mainc: int, sidec: int) -> DeckStatus | None:
        if mainc < 0 or mainc > self.limits.mainc_max:
            return DeckStatus.failure(DeckError.MAINCOUNT, max(mainc, 0))
        if sidec < 0 or sidec > self.limits.sidec_max:
            return DeckStatus.failure(DeckError.SIDECOUNT, max(sidec, 0))
        if len(dbuf) < mainc + sidec:
            logger.debug("Deck buffer holds %d entries, %d declared", len(dbuf), mainc + sidec)
            return DeckStatus.failure(DeckError.MAINCOUNT, mainc)
        return None

    def _is_loadable(self, code: int) -> bool:
        card = self.card_db.get_card(code)
        return card is not None and not card.is_token

    def _decode_side(self, dbuf: Sequence[int], mainc: int, sidec: int) -> tuple[list[int], int]:
        side: list[int] = []
        unknown = 0
        for code in dbuf[mainc : mainc + sidec]:
            if not self._is_loadable(code):
                unknown = code
                continue
            side.append(code)
        return side, unknown

    def _decode(self, dbuf: Sequence[int], mainc: int, sidec: int) -> tuple[Deck, int]:
        deck = Deck()
        unknown = 0
        for code in dbuf[:mainc]:
            card = self.card_db.get_card(code)
            if card is None or card.is_token:
                unknown = code
                continue
            if card.is_extra_deck:
                deck.extra.append(code)
            else:
                deck.main.append(code)

        deck.side, side_unknown = self._decode_side(dbuf, mainc, sidec)
        return deck, side_unknown or unknown

    def _check_zone_sizes(self, deck: Deck) -> DeckStatus | None:
        if len(deck.main) > self.limits.deck_max:
            return DeckStatus.failure(DeckError.MAINCOUNT, len(deck.main))
        if len(deck.extra) > self.limits.extra_max:
            return DeckStatus.failure(DeckError.EXTRACOUNT, len(deck.extra))
        if len(deck.side) > self.limits.side_max:
            return DeckStatus.failure(DeckError.SIDECOUNT, len(deck.side))
        return None

    def load_deck(
        self,
        deck: Deck,
        dbuf: Sequence[int],
        mainc: int,
        sidec: int,
        is_packlist: bool = False,
    ) -> DeckStatus:
        """
        Decode a flat buffer into ``deck``.

        Args:
            deck: Output deck, replaced in place on success
            dbuf: Identifier buffer (main+extra pool, then side pool)
            mainc: Number of main+extra entries
            sidec: Number of side entries
            is_packlist: Recorded on the deck for the caller

        Returns:
            Success, UNKNOWNCARD with the last dropped identifier (the rest
            of the deck is still loaded), or a *COUNT failure that leaves
            ``deck`` untouched.
        """
        failure = self._check_counts(dbuf, mainc, sidec)
        if failure is not None:
            return failure

        decoded, unknown = self._decode(dbuf, mainc, sidec)
        failure = self._check_zone_sizes(decoded)
        if failure is not None:
            logger.debug("Rejected deck buffer: %s %d", failure.error.name, failure.code)
            return failure

        decoded.is_packlist = is_packlist
        deck.replace_with(decoded)

        if unknown:
            logger.warning("Dropped unknown or token card %d while loading deck", unknown)
            return DeckStatus.failure(DeckError.UNKNOWNCARD, unknown)
        return DeckStatus.success()

    def load_side(self, deck: Deck, dbuf: Sequence[int], mainc: int, sidec: int) -> DeckStatus:
        """
        Replace only the side deck with the ``sidec`` entries after ``mainc``.

        ``deck.main`` and ``deck.extra`` are left as they are.
        """
        failure = self._check_counts(dbuf, mainc, sidec)
        if failure is not None:
            return failure

        side, unknown = self._decode_side(dbuf, mainc, sidec)
        if len(side) > self.limits.side_max:
            return DeckStatus.failure(DeckError.SIDECOUNT, len(side))

        deck.side = side
        if unknown:
            logger.warning("Dropped unknown or token card %d while loading side deck", unknown)
            return DeckStatus.failure(DeckError.UNKNOWNCARD, unknown)
        return DeckStatus.success()

    def swap_side(self, deck: Deck, dbuf: Sequence[int], mainc: int, sidec: int) -> bool:
        """
        Adopt a side-decked version of ``deck``.

        The new deck must keep every zone size and exactly the same cards;
        only their distribution between zones may change.

        Returns:
            True if the new deck was adopted.
        """
        if self._check_counts(dbuf, mainc, sidec) is not None:
            return False

        swapped, unknown = self._decode(dbuf, mainc, sidec)
        if unknown:
            return False
        if (
            len(swapped.main) != len(deck.main)
            or len(swapped.extra) != len(deck.extra)
            or len(swapped.side) != len(deck.side)
        ):
            return False
        if Counter(swapped.iter_all()) != Counter(deck.iter_all()):
            return False

        swapped.is_packlist = deck.is_packlist
        deck.replace_with(swapped)
        return True

    def to_buffer(self, deck: Deck) -> tuple[list[int], int, int]:
        """Flatten a deck to (dbuf, mainc, sidec)."""
        dbuf = [*deck.main, *deck.extra, *deck.side]
        return dbuf, len(deck.main) + len(deck.extra), len(deck.side)

    def load_deck_array(self, deck: Deck, array: DeckArray, is_packlist: bool = False) -> DeckStatus:
        dbuf = [*array.main, *array.extra, *array.side]
        return self.load_deck(
            deck, dbuf, len(array.main) + len(array.extra), len(array.side), is_packlist
        )

    @staticmethod
    def to_deck_array(deck: Deck) -> DeckArray:
        return DeckArray(main=list(deck.main), extra=list(deck.extra), side=list(deck.side))
