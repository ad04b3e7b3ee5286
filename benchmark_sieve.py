#!/usr/bin/env python3
"""
Benchmark the incremental sieve against the array sieve.

Compares:
1. Array sieve: NumPy Sieve of Eratosthenes up to N (O(N) memory)
2. Incremental: dict-backed lazy sieve bounded at N (O(pi(N)) memory)

Run at N=10^6 or 10^7 for quick comparison.
"""

import argparse
import sys
import time
import numpy as np

from incremental_sieve.sieve import bounded, max_safe_candidate, resolve_index_type
from incremental_sieve.primes import prime_flags_upto


def benchmark(N: int, index_type: type = int) -> bool:
    """Run benchmark comparing both sieves. Returns True if results agree."""
    print("=" * 60)
    print(f"Sieve Benchmark: N = {N:,} ({index_type.__name__})")
    print("=" * 60)

    limit = max_safe_candidate(index_type)
    if limit is not None and N > limit:
        print(f"ERROR: N exceeds safe range {limit:,} for {index_type.__name__}")
        return False

    print("Array sieve...", end=" ", flush=True)
    t0 = time.time()
    flags = prime_flags_upto(N)
    reference = np.nonzero(flags)[0]
    t_array = time.time() - t0
    print(f"{t_array:.2f}s, {flags.nbytes / 1e6:.1f}MB")

    print("Incremental sieve...", end=" ", flush=True)
    sieve = bounded(N, index_type)
    t0 = time.time()
    primes = np.fromiter((int(p) for p in sieve), dtype=np.int64)
    t_inc = time.time() - t0
    print(f"{t_inc:.2f}s, {sieve.size():,} map entries")

    match = np.array_equal(primes, reference)
    print()
    print(f"Primes found: {len(primes):,}")
    print(f"Speed ratio (incremental / array): {t_inc / max(t_array, 1e-9):.1f}x")
    print(f"Results match: {match}")

    return match


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark incremental vs array sieve')
    parser.add_argument('--N', type=float, default=1e6, help='Upper bound (default: 1e6)')
    parser.add_argument('--type', type=str, default='int', help='Index type (default: int)')
    args = parser.parse_args()

    if not benchmark(int(args.N), resolve_index_type(args.type)):
        sys.exit(1)
