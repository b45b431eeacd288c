"""
dnapack - DNA Sequences, 2-bit Packing and K-mer Search

A small toolkit for four-letter DNA sequences.

Modules:
    - base: the Base enum and per-base counts
    - sequence: immutable sequences and the 64-bit packing codec
    - kmer: exact k-mer search over linear and circular strands
    - loader: loading sequence text from files
    - cli: the `dnapack` command
"""

from .base import Base, BaseCount
from .sequence import (
    Sequence,
    SequenceError,
    InvalidBaseError,
    InvalidCodeError,
    SequenceLoadError,
    MAX_PACKED_BASES,
)
from .kmer import find_occurrences, kmer_positions
from .loader import read_sequence_text, load_sequence

__version__ = "0.1.0"
__all__ = [
    "Base",
    "BaseCount",
    "Sequence",
    "SequenceError",
    "InvalidBaseError",
    "InvalidCodeError",
    "SequenceLoadError",
    "MAX_PACKED_BASES",
    "find_occurrences",
    "kmer_positions",
    "read_sequence_text",
    "load_sequence",
]
