"""
dnapack - K-mer Search

Exact k-mer lookup over linear and circular strands.

In linear mode a match must lie entirely inside the sequence. In circular
mode the end of the sequence joins back to its start, so a match may
straddle the boundary:

    haystack  TACGATCTAGTCTAGGATC   (circular)
    pattern   TCTA
    offsets   5, 10, 17             (17 reads T C | T A)

The scan is a plain O(n * k) sliding comparison, which is fine for short
k-mers against moderately sized sequences.
"""

import logging
from typing import List

from .sequence import Sequence

_LOGGER = logging.getLogger(__name__)


def find_occurrences(haystack: Sequence, pattern: Sequence, circular: bool = False) -> List[int]:
    """
    Find every offset where `pattern` occurs in `haystack`.

    Args:
        haystack: The sequence to search.
        pattern: The k-mer to look for.
        circular: Treat `haystack` as a circular strand.

    Returns:
        Matching start offsets in increasing order. An empty pattern matches
        at every offset of the chosen mode; a pattern longer than a linear
        haystack matches nowhere.
    """
    n = len(haystack)
    k = len(pattern)

    if circular:
        end = n
    else:
        end = max(n - k + 1, 0)

    offsets = []
    for i in range(end):
        if all(haystack[(i + j) % n] == pattern[j] for j in range(k)):
            offsets.append(i)

    _LOGGER.debug(
        "Found %d occurrence(s) of %d-mer in %d bases (%s)",
        len(offsets), k, n, "circular" if circular else "linear",
    )
    return offsets


def kmer_positions(sequence: Sequence, kmer: str, circular: bool = False) -> List[int]:
    """
    Find a k-mer given as a symbol string.

    The k-mer is parsed with the same permissive rules as
    Sequence.from_symbols before searching.
    """
    return find_occurrences(sequence, Sequence.from_symbols(kmer), circular=circular)
