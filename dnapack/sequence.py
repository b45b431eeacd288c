"""
dnapack - Sequence Type

Immutable DNA sequences and the 2-bit packing codec.

Parsing is permissive: only the uppercase letters A, C, G and T become
bases, and every other character (lowercase, digits, whitespace, newlines)
is skipped without error. Multi-line text can therefore be passed in as-is.

Packed words hold up to 32 bases in a 64-bit unsigned integer, two bits per
base, first base in the most significant field:

    "ATCTAGT" -> 00 11 01 11 00 10 11 00 ... 00 -> 0x372C000000000000
"""

from typing import Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass
from collections import Counter

from .base import Base, BaseCount


WORD_BITS = 64
BITS_PER_BASE = 2
MAX_PACKED_BASES = WORD_BITS // BITS_PER_BASE
WORD_MASK = (1 << WORD_BITS) - 1
_FIELD_MASK = (1 << BITS_PER_BASE) - 1


class SequenceError(Exception):
    """Base class for dnapack errors."""
    pass


class InvalidCodeError(SequenceError):
    """Raised when a packed field has no corresponding base."""
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"No base for numeric code {code}")


class InvalidBaseError(SequenceError):
    """Raised when a sequence is built from something other than Base values."""
    def __init__(self, position: int, found: object):
        self.position = position
        self.found = found
        super().__init__(f"Invalid base {found!r} at position {position}")


class SequenceLoadError(SequenceError):
    """Raised when sequence text cannot be read from storage."""
    def __init__(self, path: str, reason: Exception):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load sequence from '{path}': {reason}")


def _field_shift(index: int) -> int:
    """Bit offset of the index-th 2-bit field, counted from the top of the word."""
    return WORD_BITS - BITS_PER_BASE * (index + 1)


@dataclass(frozen=True)
class Sequence:
    """
    An ordered run of bases.

    Attributes:
        bases: The bases, in order. Any iterable of Base is accepted and
            stored as a tuple.

    Raises:
        InvalidBaseError: An element of `bases` is not a Base.

    Equality and hashing are structural. Every operation returns a new
    value; nothing mutates a Sequence after construction.
    """
    bases: Tuple[Base, ...] = ()

    def __post_init__(self):
        if not isinstance(self.bases, tuple):
            object.__setattr__(self, 'bases', tuple(self.bases))

        for i, base in enumerate(self.bases):
            if not isinstance(base, Base):
                raise InvalidBaseError(i, base)

    @classmethod
    def from_symbols(cls, text: str) -> 'Sequence':
        """
        Build a sequence from a symbol string.

        Characters other than 'A', 'C', 'G' and 'T' are dropped, so
        from_symbols("AC gt\\nG") is the same sequence as from_symbols("ACG").
        """
        bases: List[Base] = []
        for symbol in text:
            base = Base.from_symbol(symbol)
            if base is not None:
                bases.append(base)
        return cls(tuple(bases))

    @classmethod
    def from_text_content(cls, content: str) -> 'Sequence':
        """
        Build a sequence from already-decoded file content.

        Reading the file is up to the caller (see dnapack.loader); line breaks
        are discarded like any other non-base character.
        """
        return cls.from_symbols(content)

    @classmethod
    def unpack_from_code(cls, word: int, length: int) -> 'Sequence':
        """
        Decode `length` bases from a packed 64-bit word.

        Fields are read most significant first. Lengths above 32 are
        truncated to 32 and negative lengths read nothing. Only the low 64
        bits of `word` are used.

        Every 2-bit field maps to a base, so InvalidCodeError is only raised
        if the code table itself is broken.
        """
        word &= WORD_MASK
        length = max(0, min(length, MAX_PACKED_BASES))

        bases: List[Base] = []
        for i in range(length):
            code = (word >> _field_shift(i)) & _FIELD_MASK
            base = Base.from_numeric_code(code)
            if base is None:
                raise InvalidCodeError(code)
            bases.append(base)

        return cls(tuple(bases))

    def pack_subrange_to_code(self, start: int, length: int) -> Optional[int]:
        """
        Pack `length` bases starting at `start` into a 64-bit word.

        Returns None if more than 32 bases are requested or the range runs
        past the end of the sequence. A zero length packs to 0, and fields
        below the packed region are left zero.
        """
        if start < 0 or length < 0:
            return None
        if length > MAX_PACKED_BASES or start + length > len(self.bases):
            return None

        word = 0
        for i in range(length):
            word |= self.bases[start + i].code << _field_shift(i)

        return word

    def composition(self) -> BaseCount:
        """Count occurrences of each base."""
        counts = Counter(self.bases)
        return BaseCount(
            A=counts[Base.A],
            C=counts[Base.C],
            G=counts[Base.G],
            T=counts[Base.T],
        )

    def reverse_complement(self) -> 'Sequence':
        """
        Return the reverse complement.

        Position i of the result is the complement of position
        len(self) - 1 - i of this sequence.
        """
        return Sequence(tuple(base.complement() for base in reversed(self.bases)))

    def gc_content(self) -> float:
        """Proportion of G and C bases; 0.0 for an empty sequence."""
        if len(self.bases) == 0:
            return 0.0
        counts = self.composition()
        return (counts.G + counts.C) / len(self.bases)

    def __len__(self) -> int:
        return len(self.bases)

    def __iter__(self) -> Iterator[Base]:
        return iter(self.bases)

    def __getitem__(self, index: Union[int, slice]) -> Union[Base, 'Sequence']:
        if isinstance(index, slice):
            return Sequence(self.bases[index])
        return self.bases[index]

    def __str__(self) -> str:
        return ''.join(str(base) for base in self.bases)

    def __repr__(self) -> str:
        return f"Sequence({str(self)!r})"
