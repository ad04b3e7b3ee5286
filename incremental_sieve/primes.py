"""
Reference prime tables.

Responsibility: ground truth for checking the incremental sieve. Eager
array sieves only, nothing lazy here.
"""

import math
import numpy as np

# nth_prime_upper_bound below k = 6
_SMALL_NTH_PRIME = [0, 2, 3, 5, 7, 11]


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (empty if N < 0).
    """
    if N < 0:
        return np.zeros(0, dtype=bool)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, math.isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


def nth_prime_upper_bound(k: int) -> int:
    """
    Upper bound on the k-th prime.

    Rosser-Schoenfeld: p_k < k (ln k + ln ln k) for k >= 6.
    """
    if k < 6:
        return _SMALL_NTH_PRIME[max(k, 0)]
    return int(k * (math.log(k) + math.log(math.log(k)))) + 1


def first_primes(k: int) -> np.ndarray:
    """
    Return the first k primes.

    Parameters
    ----------
    k : int
        Number of primes (k >= 0).

    Returns
    -------
    np.ndarray
        Array of length k.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return primes_upto(nth_prime_upper_bound(k))[:k]
