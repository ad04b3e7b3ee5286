"""
Experiment: Composite map growth.

Draws primes from an unbounded sieve and records how many pending
composites the map holds after each one. Outputs the trace and a
one-row summary as CSV.
"""

import pandas as pd
from pathlib import Path

from ..sieve import infinite, resolve_index_type
from ..metrics import size_trace, size_is_monotone, summarize_trace


def run_memory_growth_experiment(count: int, output_dir: Path,
                                 index_type: type = int) -> pd.DataFrame:
    """
    Run the memory growth experiment.

    Parameters
    ----------
    count : int
        Number of primes to draw.
    output_dir : Path
        Directory for output files.
    index_type : type
        Index type of the sieve.

    Returns
    -------
    pd.DataFrame
        Size trace (index, prime, size).
    """
    print(f"Running memory growth experiment with count={count:,}")

    trace = size_trace(infinite(index_type), count)

    summary = summarize_trace(trace)
    summary['index_type'] = index_type.__name__
    summary['monotone'] = size_is_monotone(trace)
    df_summary = pd.DataFrame([summary])

    # Save results
    output_dir.mkdir(parents=True, exist_ok=True)
    trace.to_csv(output_dir / 'memory_growth_trace.csv', index=False)
    df_summary.to_csv(output_dir / 'memory_growth_summary.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return trace


if __name__ == '__main__':
    import yaml

    with open('config/default.yaml') as f:
        config = yaml.safe_load(f)

    output_dir = Path(config.get('output_dir', 'data/results'))
    trace = run_memory_growth_experiment(
        config['trace_count'],
        output_dir,
        resolve_index_type(config['index_types'][0])
    )
    print("\nSummary:")
    print(pd.DataFrame([summarize_trace(trace)]).to_string(index=False))
