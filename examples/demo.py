#!/usr/bin/env python3
"""
dnapack Demo

Walks through the public API: parsing, composition, reverse complement,
2-bit packing and k-mer search on linear and circular strands.

Usage:
    python demo.py
"""

import sys
sys.path.insert(0, '..')

from dnapack import Base, Sequence, find_occurrences


def main():
    """Main entry point."""
    print("dnapack Demo")
    print("============\n")

    example_parsing()
    example_composition()
    example_packing()
    example_kmer_search()

    print("All examples completed successfully!")
    return 0


def example_parsing():
    """Example 1: Parsing"""
    print("Example 1: Parsing")
    print("------------------")

    raw = "TACGATCTAG\ntctag  TCTAGGATC\n"
    seq = Sequence.from_symbols(raw)

    # Lowercase letters and whitespace are skipped
    print(f"Input: {raw!r}")
    print(f"Parsed: {seq} ({len(seq)} bases)")
    print(f"First base: {seq[0]}, complement {seq[0].complement()}")
    print()


def example_composition():
    """Example 2: Composition and Reverse Complement"""
    print("Example 2: Composition and Reverse Complement")
    print("---------------------------------------------")

    seq = Sequence.from_symbols("TACGATCTAGTCTAGGATC")
    counts = seq.composition()

    print(f"Sequence: {seq}")
    print(f"Composition: {counts}")
    for base in Base:
        print(f"  {base}: {counts[base] / len(seq) * 100:.1f}%")
    print(f"GC content: {seq.gc_content() * 100:.1f}%")
    print(f"Reverse complement: {seq.reverse_complement()}")
    print()


def example_packing():
    """Example 3: 2-bit Packing"""
    print("Example 3: 2-bit Packing")
    print("------------------------")

    seq = Sequence.from_symbols("TACGATCTAGT")

    word = seq.pack_subrange_to_code(4, 7)
    print(f"Bases 4..10 of {seq}: {seq[4:11]}")
    print(f"Packed: 0x{word:016X}")
    print(f"Unpacked: {Sequence.unpack_from_code(word, 7)}")

    # Ranges that don't fit are reported as None
    print(f"Packing 8 bases from 4: {seq.pack_subrange_to_code(4, 8)}")
    print()


def example_kmer_search():
    """Example 4: K-mer Search"""
    print("Example 4: K-mer Search")
    print("-----------------------")

    seq = Sequence.from_symbols("TACGATCTAGTCTAGGATC")
    kmer = Sequence.from_symbols("TCTA")

    print(f"Searching {seq} for {kmer}")
    print(f"  Linear:   {find_occurrences(seq, kmer)}")
    print(f"  Circular: {find_occurrences(seq, kmer, circular=True)}")
    print()


if __name__ == '__main__':
    sys.exit(main())
