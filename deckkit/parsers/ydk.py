"""
Parser for .ydk deck text.

Format:
    #created by ...
    #main
    89631139
    #extra
    44508094
    !side
    14558127

Only two pools are distinguishable in the text: everything before the
``!side`` line is main+extra (the codec splits it by card type), everything
after is side. Lines that do not start with a digit are ignored.
"""

from deckkit.config import DeckLimits
from deckkit.models.deck import Deck, DeckArray
from deckkit.parsers.lflist import scan_unsigned

YDK_HEADER = "#created by deckkit"


def parse_ydk(text: str, limits: DeckLimits) -> tuple[list[int], int, int]:
    """
    Parse deck text into a flat identifier buffer.

    Args:
        text: Raw .ydk contents
        limits: Reading stops after ``limits.pack_max`` identifiers

    Returns:
        (dbuf, mainc, sidec) ready for DeckCodec.load_deck
    """
    main_pool: list[int] = []
    side_pool: list[int] = []
    is_side = False

    for line in text.split("\n"):
        if len(main_pool) + len(side_pool) >= limits.pack_max:
            break
        if line.startswith("!"):
            is_side = True
            continue
        if not line or not "0" <= line[0] <= "9":
            continue

        code, _ = scan_unsigned(line)
        if code is None:
            continue

        if is_side:
            side_pool.append(code)
        else:
            main_pool.append(code)

    return main_pool + side_pool, len(main_pool), len(side_pool)


def _format_zones(main: list[int], extra: list[int], side: list[int]) -> str:
    lines = [YDK_HEADER, "#main"]
    lines.extend(str(code) for code in main)
    lines.append("#extra")
    lines.extend(str(code) for code in extra)
    lines.append("!side")
    lines.extend(str(code) for code in side)
    return "\n".join(lines) + "\n"


def format_ydk(deck: Deck) -> str:
    """Render a deck as .ydk text."""
    return _format_zones(deck.main, deck.extra, deck.side)


def format_deck_array(array: DeckArray) -> str:
    """Render raw storage-boundary identifiers as .ydk text."""
    return _format_zones(array.main, array.extra, array.side)
