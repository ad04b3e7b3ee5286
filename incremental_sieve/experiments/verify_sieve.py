#!/usr/bin/env python3
"""
Verify the incremental sieve produces identical results to the array sieve.

Compares:
1. First K primes from the unbounded sieve
2. All primes <= B from the bounded sieve (including both sides of B)
3. Composite map size after each emission
4. The same checks for every configured index type

Run at small K first, then scale up.
"""

import sys
import time
from itertools import islice
from typing import Iterable, List

import numpy as np

from ..sieve import bounded, infinite, max_safe_candidate, resolve_index_type
from ..primes import first_primes, primes_upto
from ..metrics import size_trace, size_is_monotone, is_strictly_increasing


def verify_first_primes(count: int, index_type: type = int, verbose: bool = True) -> bool:
    """Verify the first `count` primes of the unbounded sieve."""
    if verbose:
        print(f"\n=== Verifying first {count:,} primes ({index_type.__name__}) ===")

    expected = first_primes(count)

    limit = max_safe_candidate(index_type)
    if limit is not None and len(expected) and expected[-1] > limit:
        if verbose:
            print(f"  - skipped: {int(expected[-1]):,} exceeds safe range "
                  f"{limit:,} for {index_type.__name__}")
        return True

    t0 = time.time()
    got = list(islice(infinite(index_type), count))
    t_inc = time.time() - t0

    errors = 0
    if len(got) != len(expected):
        errors += 1
        print(f"  MISMATCH length: incremental={len(got)}, reference={len(expected)}")
    for i, (a, b) in enumerate(zip(got, expected)):
        if a != b:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at index {i}: incremental={a}, reference={b}")

    if got and not all(type(p) is index_type for p in got):
        errors += 1
        print(f"  WRONG TYPE: expected {index_type.__name__}, got {type(got[0]).__name__}")

    if verbose:
        print(f"  Incremental sieve: {t_inc:.2f}s")
        if errors == 0:
            print(f"  ✓ All {count:,} primes match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_bounded(bounds: Iterable[int], index_type: type = int, verbose: bool = True) -> bool:
    """
    Verify bounded sieves against primes_upto for each bound.

    Each bound B is checked together with B-1 and B+1 so that a prime
    sitting exactly on the boundary is covered.
    """
    limit = max_safe_candidate(index_type)
    all_ok = True
    for B in bounds:
        for bound in sorted({max(B - 1, 0), B, B + 1}):
            if limit is not None and bound > limit:
                if verbose:
                    print(f"  - bounded({bound:,}) skipped: exceeds safe range "
                          f"{limit:,} for {index_type.__name__}")
                continue
            sieve = bounded(index_type(bound))
            got = np.array([int(p) for p in sieve], dtype=np.int64)
            expected = primes_upto(bound)

            ok = np.array_equal(got, expected) and next(sieve, None) is None
            if verbose:
                status = "✓" if ok else "✗"
                print(f"  bounded({bound:,}) [{index_type.__name__}]: "
                      f"{len(got):,} primes {status}")
            all_ok = all_ok and ok

    return all_ok


def verify_size_trace(count: int, index_type: type = int, verbose: bool = True) -> bool:
    """Verify map size equals the number of primes emitted and never shrinks."""
    limit = max_safe_candidate(index_type)
    if limit is not None:
        # Only trace primes whose square fits
        count = int(np.count_nonzero(first_primes(count) <= limit))
    trace = size_trace(infinite(index_type), count)

    ok = (
        size_is_monotone(trace)
        and is_strictly_increasing(trace['prime'])
        and bool((trace['size'] == trace['index']).all())
    )

    if verbose:
        status = "✓" if ok else "✗"
        final = int(trace['size'].iloc[-1]) if len(trace) else 0
        print(f"  size trace [{index_type.__name__}]: {len(trace):,} primes, "
              f"final size {final:,} {status}")

    return ok


def verify_index_types(count: int, bounds: Iterable[int], names: List[str],
                       verbose: bool = True) -> bool:
    """Run every verification for each named index type."""
    bounds = list(bounds)
    all_ok = True
    for name in names:
        index_type = resolve_index_type(name)
        ok = verify_first_primes(count, index_type, verbose)
        ok = verify_bounded(bounds, index_type, verbose) and ok
        ok = verify_size_trace(count, index_type, verbose) and ok
        all_ok = all_ok and ok
    return all_ok


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify incremental sieve correctness')
    parser.add_argument('--count', type=float, default=1e4,
                        help='Number of primes from the unbounded sieve (default: 1e4)')
    parser.add_argument('--bound', type=int, action='append',
                        help='Bound for the bounded sieve (repeatable, default: 100)')
    parser.add_argument('--types', nargs='+', default=['int', 'uint32', 'uint64'],
                        help='Index types to check (default: int uint32 uint64)')
    args = parser.parse_args()

    count = int(args.count)
    bounds = args.bound or [100]

    print(f"Incremental Sieve Verification")
    print(f"count = {count:,}, bounds = {bounds}")
    print("=" * 50)

    ok = verify_index_types(count, bounds, args.types)

    print("\n" + "=" * 50)
    if ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)
