"""
Diagnostics for incremental sieve runs.

Responsibility: quantities we report about a run (map size, ordering).
Guarantees the reported numbers come from the sieve itself, not a model.
"""

import numpy as np
import pandas as pd
from typing import Dict, Iterable

from .sieve import IncrementalSieve


def size_trace(sieve: IncrementalSieve, count: int) -> pd.DataFrame:
    """
    Advance the sieve and record the composite map size after each prime.

    Parameters
    ----------
    sieve : IncrementalSieve
        Sieve to consume (mutated).
    count : int
        Maximum number of primes to draw. Stops early if a bounded sieve
        runs out.

    Returns
    -------
    pd.DataFrame
        Columns: index (1-based), prime, size.
    """
    rows = []
    for index in range(1, count + 1):
        prime = next(sieve, None)
        if prime is None:
            break
        rows.append({
            'index': index,
            'prime': int(prime),
            'size': sieve.size()
        })
    return pd.DataFrame(rows, columns=['index', 'prime', 'size'])


def is_strictly_increasing(values: Iterable) -> bool:
    """True iff every value is larger than the one before it."""
    arr = np.asarray(list(values), dtype=object)
    if len(arr) < 2:
        return True
    return bool(np.all(arr[1:] > arr[:-1]))


def size_is_monotone(trace: pd.DataFrame) -> bool:
    """True iff the size column never decreases."""
    return bool(trace['size'].is_monotonic_increasing)


def summarize_trace(trace: pd.DataFrame) -> Dict[str, float]:
    """
    Summary statistics for a size trace.

    Parameters
    ----------
    trace : pd.DataFrame
        Output of size_trace.

    Returns
    -------
    dict
        count, max_prime, final_size, size_per_prime.
    """
    if len(trace) == 0:
        return {
            'count': 0,
            'max_prime': np.nan,
            'final_size': 0,
            'size_per_prime': np.nan
        }

    final_size = int(trace['size'].iloc[-1])
    return {
        'count': len(trace),
        'max_prime': int(trace['prime'].iloc[-1]),
        'final_size': final_size,
        'size_per_prime': final_size / len(trace)
    }
