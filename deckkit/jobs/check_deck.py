"""
Check a .ydk deck against banlist files.

Usage:
    python -m deckkit.jobs.check_deck deck.ydk --lflist lflist.conf --cards cards.json
"""

import argparse
import logging
from pathlib import Path

from deckkit.config import DeckLimits
from deckkit.models.card import CardData
from deckkit.models.deck import Deck
from deckkit.models.errors import DeckStatus
from deckkit.parsers.ydk import parse_ydk
from deckkit.services.card_database import InMemoryCardDatabase, load_card_database
from deckkit.services.deck_codec import DeckCodec
from deckkit.services.deck_validator import RULE_OCG, DeckValidator
from deckkit.services.lflist_registry import LFListRegistry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a deck against a banlist.")
    parser.add_argument("deck", type=Path, help="Path to a .ydk deck file")
    parser.add_argument(
        "--lflist",
        type=Path,
        action="append",
        default=[],
        help="Banlist file; repeat to load several (earlier files take priority)",
    )
    parser.add_argument("--cards", type=Path, help="Card database JSON file")
    selector = parser.add_mutually_exclusive_group()
    selector.add_argument("--hash", type=lambda value: int(value, 16), help="Banlist hash (hex)")
    selector.add_argument("--list", dest="list_name", help="Banlist name")
    parser.add_argument("--rule", type=int, default=RULE_OCG, help="Rule variant (default: 0)")
    return parser


def build_registry(paths: list[Path]) -> LFListRegistry:
    registry = LFListRegistry()
    for path in paths:
        registry.load_file(path)
    registry.add_no_limit()
    return registry


def run_check(args: argparse.Namespace, limits: DeckLimits) -> DeckStatus:
    """Load everything the arguments name and validate the deck."""
    registry = build_registry(args.lflist)

    if args.list_name is not None:
        lflist = registry.find_by_name(args.list_name)
        if lflist is None:
            raise SystemExit(f"Unknown banlist: {args.list_name}")
        lfhash = lflist.hash
    elif args.hash is not None:
        lfhash = args.hash
    else:
        lfhash = registry.lists[0].hash

    dbuf, mainc, sidec = parse_ydk(args.deck.read_text(encoding="utf-8"), limits)

    if args.cards is not None:
        card_db = load_card_database(args.cards)
    else:
        # Without card data every card is a plain main-deck card
        logger.warning("No card database given; extra deck cards stay in the main deck")
        card_db = InMemoryCardDatabase(CardData(code=code) for code in dbuf)

    deck = Deck()
    status = DeckCodec(card_db, limits).load_deck(deck, dbuf, mainc, sidec)
    if not status.ok:
        return status

    validator = DeckValidator(registry, limits, card_db if args.cards is not None else None)
    logger.info("Checking %s against %s", args.deck.name, registry.get_name(lfhash))
    return validator.check_deck(deck, lfhash, args.rule)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)
    status = run_check(args, DeckLimits.default())

    if status.ok:
        print("OK")
        return 0
    print(f"{status.error.name} {status.code}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
