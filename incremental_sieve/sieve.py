"""
Incremental Sieve of Eratosthenes.

Responsibility: lazy prime generation only. No oracle, no reporting.

Instead of marking an array of size N up front, keep a dict that maps each
composite we will reach later to the prime that witnesses it. Memory after
the k-th prime is one entry per prime found, independent of any bound.

    composite[n] = p   means   n is the next pending multiple of prime p

When the cursor hits a key, the witness p is moved to its next free
multiple (skipping keys already claimed by another prime). When the cursor
hits a non-key, it is prime and p^2 becomes its first pending multiple.

Index types:
- int: arbitrary precision, never overflows
- NumPy integer scalars (np.uint32, np.uint64, np.int64, ...): arithmetic
  stays in that dtype and wraps on overflow (NumPy warns). Requesting primes
  whose square does not fit the dtype is a caller error.
"""

import itertools
import math
import numpy as np
from typing import Dict, Iterator, Optional


def _check_index_type(index_type) -> type:
    """Reject anything that is not int or a NumPy integer scalar type."""
    if index_type is int:
        return int
    if isinstance(index_type, type) and issubclass(index_type, np.integer):
        return index_type
    raise TypeError(
        f"index_type must be int or a NumPy integer type, got {index_type!r}"
    )


def _infer_index_type(upper) -> type:
    """Index type of a bound: int for Python ints, the scalar type for NumPy."""
    if isinstance(upper, (bool, np.bool_)):
        raise TypeError(f"upper must be an integer, got {upper!r}")
    if isinstance(upper, np.integer):
        return type(upper)
    if isinstance(upper, int):
        return int
    raise TypeError(f"upper must be an integer, got {upper!r}")


def max_safe_candidate(index_type: type) -> Optional[int]:
    """
    Largest candidate whose square still fits in index_type.

    Primes above this value schedule a wrapped square and can poison
    later results. The sieve does not check this; callers do.

    Returns
    -------
    int or None
        None for int (no limit).
    """
    index_type = _check_index_type(index_type)
    if index_type is int:
        return None
    return math.isqrt(int(np.iinfo(index_type).max))


def _candidates(index_type: type, upper: Optional[int] = None) -> Iterator:
    """
    Step-1 candidate sequence starting at 2.

    Parameters
    ----------
    index_type : type
        Type of the yielded values.
    upper : int, optional
        Last candidate (inclusive). None means unbounded.

    Returns
    -------
    iterator
        2, 3, 4, ... (as index_type).
    """
    if upper is None:
        numbers = itertools.count(2)
    else:
        numbers = iter(range(2, upper + 1))
    if index_type is int:
        return numbers
    return map(index_type, numbers)


class IncrementalSieve:
    """
    Lazy prime iterator backed by a composite -> witness dict.

    Use the ``infinite`` / ``bounded`` constructors rather than calling
    the class directly.

    Not thread-safe: ``__next__`` mutates the map and the candidate cursor.
    """

    def __init__(self, index_type: type = int, upper=None):
        self.index_type = _check_index_type(index_type)
        if upper is None:
            self.upper = None
        else:
            _infer_index_type(upper)
            self.upper = int(upper)
        self._cursor = 2
        self._iter = _candidates(self.index_type, self.upper)
        self.composite: Dict = {}

    @classmethod
    def infinite(cls, index_type: type = int) -> 'IncrementalSieve':
        """Sieve over all integers >= 2."""
        return cls(index_type)

    @classmethod
    def bounded(cls, upper, index_type: Optional[type] = None) -> 'IncrementalSieve':
        """
        Sieve over the integers 2..upper (inclusive).

        Parameters
        ----------
        upper : int or np.integer
            Largest candidate examined. Values below 2 give an empty sieve.
        index_type : type, optional
            Defaults to the type of ``upper``.
        """
        if index_type is None:
            index_type = _infer_index_type(upper)
        return cls(index_type, upper)

    def size(self) -> int:
        """Number of pending composites (one per prime emitted so far)."""
        return len(self.composite)

    def __iter__(self):
        return self

    def __next__(self):
        composite = self.composite
        for n in self._iter:
            self._cursor += 1
            p = composite.pop(n, None)
            if p is None:
                # n is prime: every smaller multiple has a smaller factor
                composite[n * n] = n
                return n

            # Move witness p to its next unclaimed multiple
            key = n + p
            while key in composite:
                key = key + p
            composite[key] = p

        raise StopIteration

    def __length_hint__(self):
        if self.upper is None:
            return NotImplemented
        return max(0, self.upper - self._cursor + 1)

    def __repr__(self):
        name = self.index_type.__name__
        bound = 'inf' if self.upper is None else self.upper
        return f"IncrementalSieve(index_type={name}, upper={bound}, size={self.size()})"


def infinite(index_type: type = int) -> IncrementalSieve:
    """Unbounded prime sieve. See ``IncrementalSieve.infinite``."""
    return IncrementalSieve.infinite(index_type)


def bounded(upper, index_type: Optional[type] = None) -> IncrementalSieve:
    """Primes <= upper. See ``IncrementalSieve.bounded``."""
    return IncrementalSieve.bounded(upper, index_type)


# Names accepted in config files and on the command line
INDEX_TYPES = {
    'int': int,
    'int64': np.int64,
    'uint32': np.uint32,
    'uint64': np.uint64,
}


def resolve_index_type(name: str) -> type:
    """Map a config name ('int', 'uint32', ...) to its index type."""
    try:
        return INDEX_TYPES[name]
    except KeyError:
        raise ValueError(
            f"unknown index type {name!r}, expected one of {sorted(INDEX_TYPES)}"
        ) from None


def next_prime(sieve: IncrementalSieve):
    """
    Advance ``sieve`` by one prime.

    Returns
    -------
    index_type or None
        The next prime, or None once a bounded sieve is exhausted.
    """
    return next(sieve, None)
