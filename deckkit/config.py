from dataclasses import dataclass, field
from functools import lru_cache

from pydantic import ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeckSettings(BaseSettings):
    """Deck size limits loaded from environment (YGOPRO_MAX_DECK, ...)."""

    model_config = SettingsConfigDict(env_prefix="YGOPRO_", env_file=".env", extra="ignore")

    max_deck: int = 4096
    min_deck: int = 10
    max_extra: int = 4096
    max_side: int = 4096
    pack_max_size: int = 1000

    @field_validator(
        "max_deck", "min_deck", "max_extra", "max_side", "pack_max_size", mode="before"
    )
    @classmethod
    def _default_when_unparsable(cls, value: object, info: ValidationInfo) -> object:
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return cls.model_fields[info.field_name].default
        return value

    @field_validator("max_deck", "min_deck", "max_extra", "max_side", "pack_max_size")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(value, 0)

    @model_validator(mode="after")
    def _clamp_min_to_max(self) -> "DeckSettings":
        if self.min_deck > self.max_deck:
            self.min_deck = self.max_deck
        return self


@lru_cache(maxsize=1)
def get_settings() -> DeckSettings:
    """Read settings once; later calls reuse the same snapshot."""
    return DeckSettings()


@dataclass(frozen=True, slots=True)
class DeckLimits:
    """
    Immutable size limits handed to codecs and the validator.

    Attributes:
        deck_min: Minimum main deck size accepted by the validator
        deck_max: Maximum main deck size
        extra_max: Maximum extra deck size (may be 0)
        side_max: Maximum side deck size (may be 0)
        pack_max: Maximum number of identifiers read from a deck text stream
        mainc_max: Largest main+extra count a flat buffer may declare
        sidec_max: Largest side count a flat buffer may declare
    """

    deck_min: int = 10
    deck_max: int = 4096
    extra_max: int = 4096
    side_max: int = 4096
    pack_max: int = 1000
    mainc_max: int = field(init=False)
    sidec_max: int = field(init=False)

    def __post_init__(self) -> None:
        # frozen: assign through object.__setattr__
        deck_max = max(self.deck_max, 0)
        object.__setattr__(self, "deck_max", deck_max)
        object.__setattr__(self, "deck_min", min(max(self.deck_min, 0), deck_max))
        object.__setattr__(self, "extra_max", max(self.extra_max, 0))
        object.__setattr__(self, "side_max", max(self.side_max, 0))
        object.__setattr__(self, "pack_max", max(self.pack_max, 0))

        buffer_max = (self.deck_max + self.extra_max + self.side_max) * 2
        object.__setattr__(self, "mainc_max", buffer_max)
        object.__setattr__(self, "sidec_max", buffer_max)

    @classmethod
    def from_settings(cls, settings: DeckSettings) -> "DeckLimits":
        return cls(
            deck_min=settings.min_deck,
            deck_max=settings.max_deck,
            extra_max=settings.max_extra,
            side_max=settings.max_side,
            pack_max=settings.pack_max_size,
        )

    @classmethod
    def default(cls) -> "DeckLimits":
        """Limits from the cached process settings."""
        return cls.from_settings(get_settings())
