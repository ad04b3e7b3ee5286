"""
Tests for run diagnostics.
"""

import numpy as np
import pandas as pd
import pytest

from incremental_sieve.sieve import bounded, infinite
from incremental_sieve.metrics import (
    size_trace,
    is_strictly_increasing,
    size_is_monotone,
    summarize_trace,
)


class TestSizeTrace:
    """size_trace records one row per prime drawn."""

    def test_columns_and_rows(self):
        trace = size_trace(infinite(), 50)
        assert list(trace.columns) == ['index', 'prime', 'size']
        assert len(trace) == 50
        assert trace['prime'].iloc[-1] == 229

    def test_size_equals_index(self):
        trace = size_trace(infinite(), 300)
        assert (trace['size'] == trace['index']).all()

    def test_stops_on_exhaustion(self):
        trace = size_trace(bounded(30), 100)
        assert len(trace) == 10
        assert trace['prime'].iloc[-1] == 29

    def test_empty(self):
        trace = size_trace(bounded(1), 10)
        assert len(trace) == 0
        assert list(trace.columns) == ['index', 'prime', 'size']

    def test_numpy_index_type_stored_as_int(self):
        trace = size_trace(infinite(np.uint32), 20)
        assert trace['prime'].dtype == np.int64


class TestOrderingChecks:

    def test_strictly_increasing(self):
        assert is_strictly_increasing([2, 3, 5, 7])
        assert not is_strictly_increasing([2, 3, 3, 5])
        assert not is_strictly_increasing([3, 2])
        assert is_strictly_increasing([])
        assert is_strictly_increasing([11])

    def test_size_monotone(self):
        assert size_is_monotone(size_trace(infinite(), 100))
        shrinking = pd.DataFrame({'index': [1, 2], 'prime': [2, 3], 'size': [2, 1]})
        assert not size_is_monotone(shrinking)


class TestSummarizeTrace:

    def test_summary(self):
        summary = summarize_trace(size_trace(infinite(), 100))
        assert summary['count'] == 100
        assert summary['max_prime'] == 541
        assert summary['final_size'] == 100
        assert summary['size_per_prime'] == pytest.approx(1.0)

    def test_empty_summary(self):
        summary = summarize_trace(size_trace(bounded(0), 10))
        assert summary['count'] == 0
        assert summary['final_size'] == 0
        assert np.isnan(summary['max_prime'])
        assert np.isnan(summary['size_per_prime'])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
