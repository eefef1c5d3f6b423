"""
Deck status values.

Core deck operations report failures as values rather than exceptions: the
caller (a UI or server session) decides whether to reject a deck, show a
message or drop a connection.

The packed form ``error << 28 | code`` is what travels over the network, so
the numeric error values must not change.
"""

from dataclasses import dataclass
from enum import IntEnum

ERROR_SHIFT = 28
PAYLOAD_MASK = (1 << ERROR_SHIFT) - 1


class DeckError(IntEnum):
    """Why a deck was rejected."""

    LFLIST = 0x1
    OCGONLY = 0x2
    TCGONLY = 0x3
    UNKNOWNCARD = 0x4
    CARDCOUNT = 0x5
    MAINCOUNT = 0x6
    EXTRACOUNT = 0x7
    SIDECOUNT = 0x8
    NOTAVAIL = 0x9


@dataclass(frozen=True, slots=True)
class DeckStatus:
    """
    Outcome of a deck load or check.

    Attributes:
        error: Failure classification, None on success
        code: Offending card identifier, or the offending zone size for
            the *COUNT errors. 0 on success.
    """

    error: DeckError | None = None
    code: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def packed(self) -> int:
        """
        Single-integer network form; 0 means success.

        Only the low 28 bits of ``code`` fit next to the error, so identifiers
        of 2**28 and above do not survive ``unpack``.
        """
        if self.error is None:
            return 0
        return (int(self.error) << ERROR_SHIFT) | (self.code & PAYLOAD_MASK)

    @classmethod
    def success(cls) -> "DeckStatus":
        return cls()

    @classmethod
    def failure(cls, error: DeckError, code: int = 0) -> "DeckStatus":
        return cls(error=error, code=code)

    @classmethod
    def unpack(cls, packed: int) -> "DeckStatus":
        """Inverse of ``packed``. Unknown error values raise ValueError."""
        if packed == 0:
            return cls()
        return cls(error=DeckError(packed >> ERROR_SHIFT), code=packed & PAYLOAD_MASK)


class DeckCodeError(ValueError):
    """
    Raised by the exception-style deck code helpers.

    The status-returning functions never raise this.
    """

    def __init__(self, reason: str, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = reason if detail is None else f"{reason}: {detail}"
        super().__init__(message)
