from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Deck:
    """
    A deck split into its three zones.

    Order inside each zone is kept for display and save round-trips; the
    validator does not depend on it beyond choosing which violation to report.
    The deck itself enforces no size limits - callers check before trusting it.

    Attributes:
        main: Main deck card identifiers
        extra: Extra deck card identifiers
        side: Side deck card identifiers
        is_packlist: Set when loaded from a pack list (a drawable pool)
    """

    main: list[int] = field(default_factory=list)
    extra: list[int] = field(default_factory=list)
    side: list[int] = field(default_factory=list)
    is_packlist: bool = False

    def clear(self) -> None:
        self.main.clear()
        self.extra.clear()
        self.side.clear()
        self.is_packlist = False

    def copy(self) -> "Deck":
        """Full value copy; the new deck shares no lists with this one."""
        return Deck(
            main=list(self.main),
            extra=list(self.extra),
            side=list(self.side),
            is_packlist=self.is_packlist,
        )

    def replace_with(self, other: "Deck") -> None:
        """Adopt the contents of another deck in place."""
        self.main = list(other.main)
        self.extra = list(other.extra)
        self.side = list(other.side)
        self.is_packlist = other.is_packlist

    def iter_all(self) -> Iterator[int]:
        """Yield every identifier in zone-then-position order."""
        yield from self.main
        yield from self.extra
        yield from self.side

    def total_cards(self) -> int:
        return len(self.main) + len(self.extra) + len(self.side)


@dataclass
class DeckArray:
    """Raw identifiers at the storage boundary, before codec translation."""

    main: list[int] = field(default_factory=list)
    extra: list[int] = field(default_factory=list)
    side: list[int] = field(default_factory=list)
