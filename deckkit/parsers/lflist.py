"""
Parser for banlist (lflist.conf) text.

Format:
    # comment
    !2024.01 TCG
    <code> <count>

Example:
    !2024.01 TCG
    #forbidden
    14558127 0
    #limited
    23434538 1

A ``!`` line opens a new list; each following data line caps a card
identifier at 0, 1 or 2 copies. Malformed lines are skipped silently so a
hand-edited file with stray lines still loads.

Every list carries a hash computed from its entries. The hash identifies
the banlist version on the network, so the fold below must stay bit-exact.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from deckkit.models.card import UINT32_MAX
from deckkit.models.lflist import LFList

logger = logging.getLogger(__name__)

LFLIST_HASH_SEED = 0x7DFCEE6A

# Widest value a C long can carry; strtoul/strtol report overflow past it
_LONG_RANGE = 1 << 64

# Optional C whitespace, optional sign, base-10 digits
_C_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & UINT32_MAX


def lflist_hash_contribution(code: int, count: int) -> int:
    """Hash term XORed into a list's running hash for one accepted entry."""
    return _rotl32(code, 18) ^ _rotl32(code, 27 + count)


def scan_unsigned(text: str, pos: int = 0) -> tuple[int | None, int]:
    """
    Read a base-10 unsigned integer the way C ``strtoul`` does.

    Returns:
        (value, end) where value is None when no digits were found or the
        result does not fit 32 bits. A leading minus wraps like the C
        library, so only "-0" survives.
    """
    match = _C_INTEGER.match(text, pos)
    if match is None:
        return None, pos
    sign, digits = match.groups()
    value = int(digits)
    if value >= _LONG_RANGE:
        return None, match.end()
    if sign == "-" and value:
        value = _LONG_RANGE - value
    if value > UINT32_MAX:
        return None, match.end()
    return value, match.end()


def scan_signed(text: str, pos: int = 0) -> tuple[int | None, int]:
    """Read a base-10 signed integer the way C ``strtol`` does."""
    match = _C_INTEGER.match(text, pos)
    if match is None:
        return None, pos
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    if not -(_LONG_RANGE >> 1) <= value < (_LONG_RANGE >> 1):
        return None, match.end()
    return value, match.end()


def _as_text(line: str | bytes) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


def parse_lflist_entry(line: str) -> tuple[int, int] | None:
    """
    Parse a ``<code> <count>`` data line.

    Returns:
        (code, count), or None when the line must be skipped.
    """
    code, pos = scan_unsigned(line)
    if code is None:
        return None
    if pos >= len(line) or line[pos] != " ":
        return None

    count, _ = scan_signed(line, pos)
    if count is None or not 0 <= count <= 2:
        return None

    return code, count


@dataclass
class _ListBuilder:
    name: str
    hash: int = LFLIST_HASH_SEED
    content: dict[int, int] = field(default_factory=dict)

    def add(self, code: int, count: int) -> None:
        # Earlier contributions of the same code are never undone
        self.content[code] = count
        self.hash ^= lflist_hash_contribution(code, count)

    def build(self) -> LFList:
        return LFList(hash=self.hash, name=self.name, content=self.content)


def parse_lflist(lines: Iterable[str | bytes]) -> list[LFList]:
    """
    Parse banlist lines into restriction lists.

    Args:
        lines: Any line source; bytes lines are decoded as UTF-8.

    Returns:
        The lists in the order their ``!`` lines appeared. Empty if the
        input opens no list.
    """
    builders: list[_ListBuilder] = []
    current: _ListBuilder | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = _as_text(raw)

        if line.startswith("#"):
            continue

        if line.startswith("!"):
            name = re.split(r"[\r\n]", line[1:], maxsplit=1)[0]
            current = _ListBuilder(name=name)
            builders.append(current)
            continue

        if current is None:
            continue

        entry = parse_lflist_entry(line)
        if entry is None:
            logger.debug("Skipping malformed banlist line %d: %r", line_number, line)
            continue

        current.add(*entry)

    lists = [builder.build() for builder in builders]
    for lflist in lists:
        logger.debug(
            "Parsed banlist %r: hash=0x%08x, %d entries", lflist.name, lflist.hash, len(lflist)
        )
    return lists
