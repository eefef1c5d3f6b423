from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# A card without an explicit entry may still appear at most this many times
DEFAULT_CARD_LIMIT = 3

NO_LIMIT_NAME = "N/A"


@dataclass(frozen=True, slots=True)
class LFList:
    """
    A named restriction list ("banlist").

    Created only by the banlist parser (or as the N/A placeholder) and never
    modified afterwards.

    Attributes:
        hash: Content fingerprint, used as the lookup key
        name: Display name
        content: Card identifier -> copy limit in [0, 2]
    """

    hash: int
    name: str
    content: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", MappingProxyType(dict(self.content)))

    def __contains__(self, code: int) -> bool:
        return code in self.content

    def __len__(self) -> int:
        return len(self.content)

    def limit_for(self, code: int) -> int:
        """Copy limit for a card, falling back to the unrestricted default."""
        return self.content.get(code, DEFAULT_CARD_LIMIT)

    @classmethod
    def no_limit(cls) -> "LFList":
        """The placeholder selected when no banlist applies (hash 0)."""
        return cls(hash=0, name=NO_LIMIT_NAME)
