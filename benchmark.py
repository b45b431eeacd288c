#!/usr/bin/env python3
"""
dnapack Benchmark Script

Times k-mer search, packing and reverse complement on sequences of
increasing size.

Usage:
    python benchmark.py
    python benchmark.py --numpy  # Include NumPy packing comparison
"""

import time
import random
import argparse
import sys
from typing import Callable

# Add parent directory to path
sys.path.insert(0, '.')

from dnapack.sequence import Sequence, MAX_PACKED_BASES
from dnapack.kmer import find_occurrences


SIZES = [1000, 5000, 10000, 20000, 50000]


def time_function(func: Callable, *args, iterations: int = 1, **kwargs) -> float:
    """Time a function over multiple iterations."""
    start = time.perf_counter()
    for _ in range(iterations):
        func(*args, **kwargs)
    end = time.perf_counter()
    return (end - start) * 1000  # Return milliseconds


def random_sequence(size: int, seed: int = 42) -> Sequence:
    """Generate a reproducible random sequence."""
    rng = random.Random(seed)
    return Sequence.from_symbols(''.join(rng.choice('ACGT') for _ in range(size)))


def benchmark_kmer_search():
    """Benchmark linear and circular k-mer search."""
    print("\n=== K-mer Search Benchmark ===")

    kmer = Sequence.from_symbols("GATTACA")

    for size in SIZES:
        seq = random_sequence(size)
        iterations = 10

        linear = time_function(find_occurrences, seq, kmer, iterations=iterations)
        circular = time_function(find_occurrences, seq, kmer, circular=True, iterations=iterations)
        hits = len(find_occurrences(seq, kmer))

        print(f"  {size:,} bp, k={len(kmer)}: linear {linear/iterations:.3f}ms, "
              f"circular {circular/iterations:.3f}ms ({hits} hits)")


def pack_all_windows(seq: Sequence, k: int) -> list:
    """Pack every k-length window of a sequence."""
    return [seq.pack_subrange_to_code(i, k) for i in range(len(seq) - k + 1)]


def benchmark_packing():
    """Benchmark packing every 32-mer window."""
    print("\n=== Packing Benchmark (k=32) ===")

    for size in SIZES:
        seq = random_sequence(size)
        elapsed = time_function(pack_all_windows, seq, MAX_PACKED_BASES)
        windows = len(seq) - MAX_PACKED_BASES + 1
        print(f"  {size:,} bp: {elapsed:.2f}ms ({windows:,} words)")


def benchmark_reverse_complement():
    """Benchmark reverse complement."""
    print("\n=== Reverse Complement Benchmark ===")

    for size in SIZES:
        seq = random_sequence(size)
        iterations = 100
        elapsed = time_function(seq.reverse_complement, iterations=iterations)
        print(f"  {size:,} bp x {iterations} iterations: {elapsed:.2f}ms ({elapsed/iterations:.4f}ms/call)")


def benchmark_with_numpy():
    """Compare pure Python packing against a vectorised NumPy version."""
    print("\n=== NumPy Comparison ===")

    try:
        import numpy as np

        k = MAX_PACKED_BASES

        def numpy_pack_all_windows(seq: Sequence) -> 'np.ndarray':
            codes = np.array([base.code for base in seq], dtype=np.uint64)
            count = len(codes) - k + 1
            words = np.zeros(count, dtype=np.uint64)
            for i in range(k):
                words |= codes[i:i + count] << np.uint64(62 - 2 * i)
            return words

        for size in SIZES:
            seq = random_sequence(size)

            pure = time_function(pack_all_windows, seq, k)
            vectorised = time_function(numpy_pack_all_windows, seq)

            expected = pack_all_windows(seq, k)
            words = numpy_pack_all_windows(seq)
            assert [int(w) for w in words] == expected

            print(f"  {size:,} bp: pure {pure:.2f}ms, NumPy {vectorised:.2f}ms "
                  f"(speedup {pure/vectorised:.1f}x)")

    except ImportError:
        print("  NumPy not available - skipping NumPy comparison")
        print("  Install with: pip install numpy")


def run_all_benchmarks(include_numpy: bool = False):
    """Run all benchmarks."""
    print("=" * 60)
    print("dnapack Benchmark Suite")
    print("=" * 60)

    benchmark_kmer_search()
    benchmark_packing()
    benchmark_reverse_complement()

    if include_numpy:
        benchmark_with_numpy()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='dnapack Benchmarks')
    parser.add_argument('--numpy', action='store_true',
                        help='Include NumPy comparison benchmarks')
    args = parser.parse_args()

    run_all_benchmarks(include_numpy=args.numpy)
    return 0


if __name__ == '__main__':
    sys.exit(main())
