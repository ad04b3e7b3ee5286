#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file re-verifies the sieve and regenerates every table and
figure.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import yaml
from pathlib import Path
import time

from incremental_sieve.sieve import resolve_index_type
from incremental_sieve.metrics import summarize_trace
from incremental_sieve.experiments.verify_sieve import verify_index_types
from incremental_sieve.experiments.exp_memory_growth import run_memory_growth_experiment
from incremental_sieve.plotting import plot_size_trace


def main():
    parser = argparse.ArgumentParser(description='Run all incremental sieve experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("Incremental Sieve - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  count = {config['count']:,}")
    print(f"  bounds = {config['bounds']}")
    print(f"  index_types = {config['index_types']}")
    print(f"  trace_count = {config['trace_count']:,}")
    print()

    output_dir = Path(config.get('output_dir', 'data/results'))
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Verification against the array sieve
    print("-" * 60)
    print("1. Verification")
    print("-" * 60)
    start = time.time()
    verified = verify_index_types(
        config['count'],
        config['bounds'],
        config['index_types']
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Memory growth
    print("-" * 60)
    print("2. Memory Growth")
    print("-" * 60)
    start = time.time()
    trace = run_memory_growth_experiment(
        config['trace_count'],
        output_dir,
        resolve_index_type(config['index_types'][0])
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Generate Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Size trace...")
    plot_size_trace(trace, figures_dir / 'size_trace.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    # Print key results
    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    summary = summarize_trace(trace)
    print(f"\nVerification: {'passed' if verified else 'FAILED'}")
    print(f"Primes drawn: {summary['count']:,}")
    print(f"Largest prime: {summary['max_prime']:,}")
    print(f"Final map size: {summary['final_size']:,} "
          f"({summary['size_per_prime']:.3f} entries per prime)")

    if not verified:
        sys.exit(1)


if __name__ == '__main__':
    main()
