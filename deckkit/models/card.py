"""
Card metadata needed by the deck codecs and validator.

Only the fields that decide deck placement and availability are modelled;
everything else in the card database is opaque to this package.
"""

from pydantic import BaseModel, Field

UINT32_MAX = 0xFFFFFFFF

# Card type bits
TYPE_MONSTER = 0x1
TYPE_SPELL = 0x2
TYPE_TRAP = 0x4
TYPE_FUSION = 0x40
TYPE_SYNCHRO = 0x2000
TYPE_TOKEN = 0x4000
TYPE_XYZ = 0x800000
TYPE_LINK = 0x4000000

TYPES_EXTRA_DECK = TYPE_FUSION | TYPE_SYNCHRO | TYPE_XYZ | TYPE_LINK

# Availability (region) bits
AVAIL_OCG = 0x1
AVAIL_TCG = 0x2
AVAIL_CUSTOM = 0x4
AVAIL_SC = 0x8
AVAIL_OCGTCG = AVAIL_OCG | AVAIL_TCG


class CardData(BaseModel):
    """
    A single card database record.

    Attributes:
        code: Card identifier
        alias: Identifier this card is counted as (0 when none)
        type: Type bitmask (TYPE_* constants)
        ot: Availability bitmask (AVAIL_* constants)
    """

    code: int = Field(..., ge=0, le=UINT32_MAX)
    alias: int = Field(default=0, ge=0, le=UINT32_MAX)
    type: int = Field(default=TYPE_MONSTER, ge=0)
    ot: int = Field(default=AVAIL_OCGTCG, ge=0)

    @property
    def is_extra_deck(self) -> bool:
        return bool(self.type & TYPES_EXTRA_DECK)

    @property
    def is_token(self) -> bool:
        return bool(self.type & TYPE_TOKEN)

    @property
    def limit_code(self) -> int:
        """Identifier used when tallying copies against a banlist."""
        return self.alias or self.code
