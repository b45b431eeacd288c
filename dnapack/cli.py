"""
dnapack - Command Line

Load a sequence file, summarise it and look up a k-mer.

Usage:
    dnapack genome.txt
    dnapack genome.txt TCTA --circular
    dnapack genome.txt --pack 4 7 --revcomp
"""

import sys
import logging
import argparse
from typing import List, Optional

from .loader import load_sequence
from .kmer import find_occurrences
from .sequence import Sequence, SequenceLoadError

DEFAULT_PATTERN = "GCAT"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dnapack',
        description='Summarise a DNA sequence file and find k-mer occurrences',
    )
    parser.add_argument('path', help='File containing the sequence')
    parser.add_argument('pattern', nargs='?', default=DEFAULT_PATTERN,
                        help=f'K-mer to search for (default: {DEFAULT_PATTERN})')
    parser.add_argument('--circular', action='store_true',
                        help='Treat the sequence as a circular strand')
    parser.add_argument('--revcomp', action='store_true',
                        help='Print the reverse complement')
    parser.add_argument('--pack', nargs=2, type=int, metavar=('START', 'LENGTH'),
                        help='Print LENGTH bases from START as a packed 64-bit word')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        sequence = load_sequence(args.path)
    except SequenceLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(sequence)
    print(f"Length: {len(sequence)}")
    print(f"Composition: {sequence.composition()}")
    print(f"GC content: {sequence.gc_content() * 100:.1f}%")

    if args.revcomp:
        print(f"Reverse complement: {sequence.reverse_complement()}")

    if args.pack is not None:
        start, length = args.pack
        word = sequence.pack_subrange_to_code(start, length)
        if word is None:
            print(f"Packed [{start}, {start + length}): out of range")
        else:
            print(f"Packed [{start}, {start + length}): 0x{word:016X}")

    pattern = Sequence.from_symbols(args.pattern)
    offsets = find_occurrences(sequence, pattern, circular=args.circular)
    mode = "circular" if args.circular else "linear"
    print(f"Pattern: {pattern} ({mode})")
    print(f"Offsets: {offsets}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
