"""
Banlist registry.

An ordered collection of parsed restriction lists. Earlier lists win when
two share a hash, so locally supplied overrides are loaded with
``insert=True`` and shipped defaults are appended.

The registry performs no locking: load during startup (or an explicit
reload) and keep validation calls out while a load is running.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from deckkit.models.lflist import LFList
from deckkit.parsers.lflist import parse_lflist
from deckkit.services.line_sources import iter_file_lines, iter_text_lines

logger = logging.getLogger(__name__)

UNKNOWN_LIST_NAME = "???"


class LFListRegistry:
    """Ordered restriction lists with lookup by hash."""

    def __init__(self, lists: Iterable[LFList] | None = None) -> None:
        self._lists: list[LFList] = list(lists or [])

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[LFList]:
        return iter(self._lists)

    def __contains__(self, lfhash: int) -> bool:
        return self.get(lfhash) is not None

    @property
    def lists(self) -> tuple[LFList, ...]:
        return tuple(self._lists)

    def load(self, lines: Iterable[str | bytes], insert: bool = False) -> list[LFList]:
        """
        Parse banlist lines and merge the result.

        Args:
            lines: Any line source
            insert: Put the new lists in front (higher priority) instead of
                at the back

        Returns:
            The newly added lists, in file order
        """
        loaded = parse_lflist(lines)
        if insert:
            self._lists[0:0] = loaded
        else:
            self._lists.extend(loaded)

        logger.info(
            "Loaded %d banlist(s) at the %s: %s",
            len(loaded),
            "front" if insert else "back",
            ", ".join(lflist.name for lflist in loaded) or "-",
        )
        return loaded

    def load_text(self, text: str, insert: bool = False) -> list[LFList]:
        return self.load(iter_text_lines(text), insert=insert)

    def load_file(self, path: Path | str, insert: bool = False) -> list[LFList]:
        """
        Load a banlist file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return self.load(iter_file_lines(path), insert=insert)

    def add_no_limit(self) -> LFList:
        """Append the N/A list (hash 0) unless one is already present."""
        for lflist in self._lists:
            if lflist.hash == 0:
                return lflist
        no_limit = LFList.no_limit()
        self._lists.append(no_limit)
        return no_limit

    def get(self, lfhash: int) -> LFList | None:
        """First list whose hash matches, or None."""
        for lflist in self._lists:
            if lflist.hash == lfhash:
                return lflist
        return None

    def get_name(self, lfhash: int) -> str:
        lflist = self.get(lfhash)
        if lflist is None:
            return UNKNOWN_LIST_NAME
        return lflist.name

    def find_by_name(self, name: str) -> LFList | None:
        for lflist in self._lists:
            if lflist.name == name:
                return lflist
        return None
