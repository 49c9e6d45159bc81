"""
Experiment: runtime and memory of the wheel sieve.

Times each engine (plus the plain reference sieve) over a grid of bounds
and records how much smaller the packed wheel buffer is than a boolean
flag array. Outputs a CSV.
"""

import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import List

from ..bounds import byte_count, rounded_bound
from ..primes import prime_flags_upto, primes_upto

REFERENCE = 'reference'


def time_engine(N: int, engine: str, repeats: int = 3) -> tuple:
    """
    Best-of-`repeats` wall time for one engine at one bound.

    Returns
    -------
    tuple
        (seconds, number of primes found)
    """
    best = np.inf
    count = 0
    for _ in range(repeats):
        t0 = time.perf_counter()
        if engine == REFERENCE:
            count = int(np.count_nonzero(prime_flags_upto(N)))
        else:
            count = len(primes_upto(N, exact=True, engine=engine))
        best = min(best, time.perf_counter() - t0)
    return best, count


def run_benchmark(bounds: List[int], engines: List[str], repeats: int = 3,
                  output_dir: Path = None) -> pd.DataFrame:
    """
    Benchmark every engine at every bound.

    Parameters
    ----------
    bounds : list of int
        Sieve bounds to test.
    engines : list of str
        Engine names ('python', 'jit', or 'reference' for the plain sieve).
    repeats : int
        Runs per measurement; the fastest is kept.
    output_dir : Path, optional
        If provided, write benchmark.csv there.

    Returns
    -------
    pd.DataFrame
        One row per (N, engine).
    """
    # Compile the JIT kernels before anything is timed
    if 'jit' in engines:
        primes_upto(100, engine='jit')

    rows = []
    for N in bounds:
        buffer_bytes = byte_count(rounded_bound(N))
        flag_bytes = N + 1
        for engine in engines:
            print(f"  N={N:,} engine={engine}...", end=" ", flush=True)
            seconds, count = time_engine(N, engine, repeats)
            print(f"{seconds:.3f}s ({count:,} primes)")
            rows.append({
                'N': N,
                'engine': engine,
                'seconds': seconds,
                'primes': count,
                'buffer_bytes': flag_bytes if engine == REFERENCE else buffer_bytes,
                'flag_bytes': flag_bytes,
                'memory_ratio': flag_bytes / max(buffer_bytes, 1),
            })

    df = pd.DataFrame(rows)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_dir / 'benchmark.csv', index=False)

    return df
