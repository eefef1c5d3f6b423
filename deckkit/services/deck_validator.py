"""
Deck validation against a banlist and rule variant.

Copies are tallied deck-wide: main, extra and side share one count per card.
Zones are walked main, then extra, then side, and the first card whose
running tally exceeds its cap is reported, so the result is deterministic
for a given deck order.
"""

import logging
from collections import Counter
from collections.abc import Mapping

from deckkit.config import DeckLimits
from deckkit.models.card import (
    AVAIL_CUSTOM,
    AVAIL_OCG,
    AVAIL_OCGTCG,
    AVAIL_SC,
    AVAIL_TCG,
    TYPE_TOKEN,
    TYPES_EXTRA_DECK,
    CardData,
)
from deckkit.models.deck import Deck
from deckkit.models.errors import DeckError, DeckStatus
from deckkit.models.lflist import DEFAULT_CARD_LIMIT, LFList
from deckkit.services.card_database import CardDatabase
from deckkit.services.lflist_registry import LFListRegistry

logger = logging.getLogger(__name__)

RULE_OCG = 0
RULE_TCG = 1
RULE_SC = 2
RULE_CUSTOM = 3
RULE_OCGTCG = 4
RULE_ALL = 5

# Availability a card needs under each rule variant (0: anything goes)
RULE_AVAILABILITY: tuple[int, ...] = (AVAIL_OCG, AVAIL_TCG, AVAIL_SC, AVAIL_CUSTOM, AVAIL_OCGTCG, 0)


def rule_availability(rule: int) -> int:
    if 0 <= rule < len(RULE_AVAILABILITY):
        return RULE_AVAILABILITY[rule]
    return 0


def check_availability(ot: int, avail: int) -> DeckError | None:
    """Classify a card's availability bits against what the rule requires."""
    if ot & avail == avail:
        return None
    if ot & AVAIL_OCG and avail != AVAIL_OCG:
        return DeckError.OCGONLY
    if ot & AVAIL_TCG and avail != AVAIL_TCG:
        return DeckError.TCGONLY
    return DeckError.NOTAVAIL


class DeckValidator:
    """
    Checks decks against the registry's restriction lists.

    Args:
        registry: Restriction lists, resolved by hash per call
        limits: Zone size limits
        card_db: Optional card database. With it, unknown cards, region
            availability, zone placement and aliases are checked too.
        variant_lists: Optional restriction list per rule variant, consulted
            before the primary list
    """

    def __init__(
        self,
        registry: LFListRegistry,
        limits: DeckLimits,
        card_db: CardDatabase | None = None,
        variant_lists: Mapping[int, LFList] | None = None,
    ) -> None:
        self.registry = registry
        self.limits = limits
        self.card_db = card_db
        self.variant_lists = dict(variant_lists or {})

    def card_limit(self, code: int, lflist: LFList | None, rule: int) -> int:
        """Resolved copy cap for a card under a list and rule variant."""
        variant = self.variant_lists.get(rule)
        if variant is not None and code in variant:
            return variant.content[code]
        if lflist is not None and code in lflist:
            return lflist.content[code]
        return DEFAULT_CARD_LIMIT

    def _check_sizes(self, deck: Deck) -> DeckStatus | None:
        main_size = len(deck.main)
        if main_size < self.limits.deck_min or main_size > self.limits.deck_max:
            return DeckStatus.failure(DeckError.MAINCOUNT, main_size)
        if len(deck.extra) > self.limits.extra_max:
            return DeckStatus.failure(DeckError.EXTRACOUNT, len(deck.extra))
        if len(deck.side) > self.limits.side_max:
            return DeckStatus.failure(DeckError.SIDECOUNT, len(deck.side))
        return None

    def _check_card(self, code: int, zone: str, avail: int) -> tuple[DeckStatus | None, int]:
        """Card database checks; returns (failure, tally key)."""
        if self.card_db is None:
            return None, code

        card: CardData | None = self.card_db.get_card(code)
        if card is None:
            return DeckStatus.failure(DeckError.UNKNOWNCARD, code), code

        availability_error = check_availability(card.ot, avail)
        if availability_error is not None:
            return DeckStatus.failure(availability_error, code), code

        if zone == "main" and card.type & (TYPES_EXTRA_DECK | TYPE_TOKEN):
            return DeckStatus.failure(DeckError.EXTRACOUNT), code
        if zone == "extra" and (not card.type & TYPES_EXTRA_DECK or card.type & TYPE_TOKEN):
            return DeckStatus.failure(DeckError.EXTRACOUNT), code
        if zone == "side" and card.type & TYPE_TOKEN:
            return DeckStatus.failure(DeckError.SIDECOUNT), code

        return None, card.limit_code

    def check_deck(self, deck: Deck, lfhash: int, rule: int = RULE_OCG) -> DeckStatus:
        """
        Validate a deck.

        Args:
            deck: Deck to check
            lfhash: Hash of the restriction list to apply; an unknown hash
                (or 0) applies only the default per-card limit
            rule: Rule variant selector (RULE_* constants)

        Returns:
            DeckStatus.success() or the first violation found.
        """
        failure = self._check_sizes(deck)
        if failure is not None:
            return failure

        lflist = self.registry.get(lfhash)
        if lflist is None and lfhash != 0:
            logger.debug("Banlist 0x%08x not found, applying default limits", lfhash)

        avail = rule_availability(rule)
        tally: Counter[int] = Counter()

        for zone, codes in (("main", deck.main), ("extra", deck.extra), ("side", deck.side)):
            for code in codes:
                failure, key = self._check_card(code, zone, avail)
                if failure is not None:
                    return failure

                tally[key] += 1
                copies = tally[key]
                if copies > DEFAULT_CARD_LIMIT:
                    return DeckStatus.failure(DeckError.CARDCOUNT, code)
                if copies > self.card_limit(key, lflist, rule):
                    return DeckStatus.failure(DeckError.LFLIST, code)

        return DeckStatus.success()


def check_deck(
    deck: Deck,
    lfhash: int,
    rule: int,
    registry: LFListRegistry,
    limits: DeckLimits,
    card_db: CardDatabase | None = None,
    variant_lists: Mapping[int, LFList] | None = None,
) -> DeckStatus:
    """One-shot validation without keeping a DeckValidator around."""
    return DeckValidator(registry, limits, card_db, variant_lists).check_deck(deck, lfhash, rule)
