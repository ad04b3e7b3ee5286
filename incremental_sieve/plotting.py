"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_size_trace(trace: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot composite map size and largest prime against prime index.

    Parameters
    ----------
    trace : pd.DataFrame
        DataFrame from metrics.size_trace with columns index, prime, size.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.plot(trace['index'], trace['size'], '-', label='Map entries')
    ax.plot(trace['index'], trace['index'], '--', alpha=0.5, label='y = k')
    ax.set_xlabel('Primes emitted (k)')
    ax.set_ylabel('Composite map size')
    ax.set_title('Memory growth')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(trace['index'], trace['prime'], '-', label='k-th prime')
    if len(trace) > 1:
        k = trace['index'].to_numpy(dtype=float)[1:]
        ax.plot(k, k * np.log(k), '--', alpha=0.5, label='k ln k')
    ax.set_xlabel('k')
    ax.set_ylabel('Prime')
    ax.set_title('Largest prime reached')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
