"""
Tests for the reference prime tables.

The incremental sieve is checked against these, so they are pinned
against known values here.
"""

import numpy as np
import pytest

from incremental_sieve.primes import (
    prime_flags_upto,
    primes_upto,
    nth_prime_upper_bound,
    first_primes,
)


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestPrimeFlags:
    """prime_flags_upto marks exactly the primes."""

    def test_matches_known_primes(self):
        N = 100
        flags = prime_flags_upto(N)

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_upto: {p} should be prime"

        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_upto: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_length_is_N_plus_one(self):
        assert len(prime_flags_upto(50)) == 51
        assert prime_flags_upto(50).dtype == bool

    @pytest.mark.parametrize("N", [0, 1])
    def test_tiny_bounds(self, N):
        flags = prime_flags_upto(N)
        assert len(flags) == N + 1
        assert not flags.any()

    def test_negative_bound(self):
        assert len(prime_flags_upto(-3)) == 0


class TestPrimesUpto:
    """primes_upto is inclusive of N."""

    def test_count_to_100(self):
        assert len(primes_upto(100)) == 25

    def test_inclusive(self):
        assert primes_upto(47)[-1] == 47
        assert primes_upto(46)[-1] == 43

    def test_small_primes(self):
        assert list(primes_upto(47)) == SMALL_PRIMES

    def test_empty(self):
        assert len(primes_upto(1)) == 0


class TestFirstPrimes:
    """first_primes(k) returns exactly k primes."""

    @pytest.mark.parametrize("k", [0, 1, 2, 5, 6, 15, 100, 10000])
    def test_length(self, k):
        assert len(first_primes(k)) == k

    def test_values(self):
        assert list(first_primes(15)) == SMALL_PRIMES

    def test_known_nth_primes(self):
        assert first_primes(100)[-1] == 541
        assert first_primes(1000)[-1] == 7919
        assert first_primes(10000)[-1] == 104729

    def test_negative(self):
        with pytest.raises(ValueError):
            first_primes(-1)

    def test_upper_bound_holds(self):
        """The k-th prime never exceeds the bound used to find it."""
        primes = first_primes(2000)
        for k in [1, 5, 6, 7, 100, 1000, 2000]:
            assert primes[k - 1] <= nth_prime_upper_bound(k)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
