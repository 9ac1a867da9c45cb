"""
Call data models for bridge auctions.

This module defines the immutable Call value and its strain. Calls are
hashable and compared structurally; the "higher contract" ordering is only
defined between two contract calls. Comparing Pass, Double or Redouble with
the ordering operators raises TypeError instead of picking an arbitrary
sentinel order.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..errors import InvalidCallError

MIN_LEVEL = 1
MAX_LEVEL = 7


class Strain(IntEnum):
    """Contract strain, ordered from clubs up to no-trump."""
    NONE = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4
    NOTRUMP = 5

    @property
    def short(self) -> str:
        """Abbreviation used in notation and macro placeholders."""
        return _STRAIN_SHORT[self]

    @property
    def symbol(self) -> str:
        """Suit symbol for display, "NT" for no-trump."""
        return _STRAIN_SYMBOL[self]

    def next(self) -> "Strain":
        """Next strain in bidding order, wrapping no-trump back to clubs."""
        if self is Strain.NONE:
            return Strain.NONE
        if self is Strain.NOTRUMP:
            return Strain.CLUBS
        return Strain(self + 1)


_STRAIN_SHORT = {
    Strain.NONE: "",
    Strain.CLUBS: "C",
    Strain.DIAMONDS: "D",
    Strain.HEARTS: "H",
    Strain.SPADES: "S",
    Strain.NOTRUMP: "NT",
}

_STRAIN_SYMBOL = {
    Strain.NONE: "",
    Strain.CLUBS: "♣",
    Strain.DIAMONDS: "♦",
    Strain.HEARTS: "♥",
    Strain.SPADES: "♠",
    Strain.NOTRUMP: "NT",
}


@dataclass(frozen=True)
class Call:
    """A single call: Pass (0), Double (-1), Redouble (-2) or a contract bid."""

    level: int = 0
    strain: Strain = Strain.NONE

    def __post_init__(self):
        if self.strain is Strain.NONE:
            if self.level not in (0, -1, -2):
                raise InvalidCallError(
                    f"Level {self.level} needs a strain",
                    level=self.level,
                )
        elif not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise InvalidCallError(
                f"Contract level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {self.level}",
                level=self.level,
                strain=self.strain.short,
            )

    @property
    def is_pass(self) -> bool:
        return self.level == 0 and self.strain is Strain.NONE

    @property
    def is_double(self) -> bool:
        return self.level == -1 and self.strain is Strain.NONE

    @property
    def is_redouble(self) -> bool:
        return self.level == -2 and self.strain is Strain.NONE

    @property
    def is_contract(self) -> bool:
        return self.strain is not Strain.NONE

    def next_step(self) -> Optional["Call"]:
        """
        Next ascending contract call in relay order.

        Strains cycle C, D, H, S, NT and no-trump rolls over to clubs one
        level up. Returns None past 7NT.

        Raises:
            InvalidCallError: If called on Pass, Double or Redouble
        """
        if not self.is_contract:
            raise InvalidCallError(f"{self} has no next step", level=self.level)

        level = self.level + 1 if self.strain is Strain.NOTRUMP else self.level
        if level > MAX_LEVEL:
            return None
        return Call(level, self.strain.next())

    def _contract_key(self, other: object) -> Optional[tuple[tuple[int, int], tuple[int, int]]]:
        if not isinstance(other, Call):
            return None
        if not (self.is_contract and other.is_contract):
            raise TypeError(
                f"Ordering is only defined between contract calls, got {self} and {other}"
            )
        return (self.level, self.strain), (other.level, other.strain)

    def __lt__(self, other: object) -> bool:
        keys = self._contract_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other: object) -> bool:
        keys = self._contract_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other: object) -> bool:
        keys = self._contract_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other: object) -> bool:
        keys = self._contract_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] >= keys[1]

    def __str__(self) -> str:
        if self.is_double:
            return "X"
        if self.is_redouble:
            return "XX"
        if self.is_pass:
            return "P"
        return f"{self.level}{self.strain.short}"


PASS = Call(0, Strain.NONE)
DOUBLE = Call(-1, Strain.NONE)
REDOUBLE = Call(-2, Strain.NONE)

CONTRACT_STRAINS = (
    Strain.CLUBS, Strain.DIAMONDS, Strain.HEARTS, Strain.SPADES, Strain.NOTRUMP
)

CONTRACT_CALLS = tuple(
    Call(level, strain)
    for level in range(MIN_LEVEL, MAX_LEVEL + 1)
    for strain in CONTRACT_STRAINS
)

ALL_CALLS = (PASS, DOUBLE, REDOUBLE) + CONTRACT_CALLS
