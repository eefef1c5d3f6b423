"""
Card database service.

Answers "what kind of card is this identifier" for the deck codecs and the
validator. Card data itself lives outside this package; any object with a
``get_card`` method can stand in for the database.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from deckkit.models.card import CardData


class CardDatabase(Protocol):
    """Lookup interface the codecs and validator depend on."""

    def get_card(self, code: int) -> CardData | None: ...


class InMemoryCardDatabase:
    """Card database backed by a dict keyed by identifier."""

    def __init__(self, cards: Iterable[CardData] = ()) -> None:
        self._cards: dict[int, CardData] = {}
        for card in cards:
            self.add(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, code: int) -> bool:
        return code in self._cards

    def add(self, card: CardData) -> None:
        self._cards[card.code] = card

    def get_card(self, code: int) -> CardData | None:
        return self._cards.get(code)

    def is_extra_deck(self, code: int) -> bool:
        """True for known extra-deck cards; unknown identifiers are not."""
        card = self._cards.get(code)
        return card is not None and card.is_extra_deck


def load_card_database(path: Path) -> InMemoryCardDatabase:
    """
    Load card data from a JSON file.

    The file holds an array of records such as
    ``{"code": 89631139, "alias": 0, "type": 17, "ot": 3}``.

    Args:
        path: Path to the JSON file

    Returns:
        InMemoryCardDatabase with every record.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If a record is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Card database not found at {path}.")

    with open(path, encoding="utf-8") as f:
        records = json.load(f)

    return InMemoryCardDatabase(CardData.model_validate(record) for record in records)


def type_count(codes: Iterable[int], card_db: CardDatabase, ctype: int) -> int:
    """
    Count cards whose type intersects ``ctype``.

    Identifiers unknown to the database are not counted.
    """
    total = 0
    for code in codes:
        card = card_db.get_card(code)
        if card is not None and card.type & ctype:
            total += 1
    return total
