"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_runtime(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot sieve runtime against N for each engine.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from run_benchmark with columns N, engine, seconds.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    for engine, engine_df in df.groupby('engine'):
        engine_df = engine_df.sort_values('N')
        ax.plot(engine_df['N'], engine_df['seconds'], 'o-', label=engine)

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('N (sieve bound)')
    ax.set_ylabel('Time (s)')
    ax.set_title('Sieve runtime')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_memory(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot buffer size of the wheel sieve against a boolean flag array.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from run_benchmark with columns N, buffer_bytes, flag_bytes.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    sizes = df.drop_duplicates('N').sort_values('N')
    wheel_bytes = sizes['flag_bytes'] / sizes['memory_ratio']

    ax.plot(sizes['N'], sizes['flag_bytes'], 's--', label='bool flags (1 byte / n)')
    ax.plot(sizes['N'], wheel_bytes, 'o-', label='mod-30 wheel (1 byte / 30)')

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('N (sieve bound)')
    ax.set_ylabel('Bytes')
    ax.set_title('Candidate buffer size')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
