"""
dnapack - Base Type

The four DNA nucleotides and a per-base tally.

Each base has three independent properties:
    - its single-letter symbol (the enum value),
    - its 2-bit numeric code, used by the packing codec,
    - its Watson-Crick complement.

The numeric codes are pinned by an explicit table below rather than derived
from declaration order:

    A = 0, C = 1, G = 2, T = 3
"""

from typing import Dict, Optional
from dataclasses import dataclass
from enum import Enum


class Base(Enum):
    """A single DNA nucleotide."""
    A = "A"
    C = "C"
    G = "G"
    T = "T"

    @property
    def code(self) -> int:
        """Return the 2-bit numeric code of this base."""
        return _BASE_TO_CODE[self]

    def complement(self) -> 'Base':
        """
        Return the paired base (A <-> T, C <-> G).

        Applying it twice gives back the original base.
        """
        return _COMPLEMENTS[self]

    @classmethod
    def from_numeric_code(cls, code: int) -> Optional['Base']:
        """
        Map a 2-bit code back to its base.

        Returns None for anything outside 0..3; callers decide whether that
        is recoverable.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        return _CODE_TO_BASE.get(code)

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional['Base']:
        """Map an uppercase letter to its base, or None for any other character."""
        return _SYMBOL_TO_BASE.get(symbol)

    def __str__(self) -> str:
        return self.value


_BASE_TO_CODE: Dict[Base, int] = {
    Base.A: 0,
    Base.C: 1,
    Base.G: 2,
    Base.T: 3,
}
_CODE_TO_BASE: Dict[int, Base] = {code: base for base, code in _BASE_TO_CODE.items()}

_COMPLEMENTS: Dict[Base, Base] = {
    Base.A: Base.T,
    Base.T: Base.A,
    Base.C: Base.G,
    Base.G: Base.C,
}

_SYMBOL_TO_BASE: Dict[str, Base] = {base.value: base for base in Base}


@dataclass(frozen=True)
class BaseCount:
    """
    Occurrences of each base in a sequence.

    The four counters always sum to the length of the sequence they were
    computed from.
    """
    A: int = 0
    C: int = 0
    G: int = 0
    T: int = 0

    def total(self) -> int:
        return self.A + self.C + self.G + self.T

    def as_dict(self) -> Dict[str, int]:
        return {"A": self.A, "C": self.C, "G": self.G, "T": self.T}

    def __getitem__(self, base: Base) -> int:
        return getattr(self, base.value)

    def __str__(self) -> str:
        return f"A={self.A} C={self.C} G={self.G} T={self.T}"
