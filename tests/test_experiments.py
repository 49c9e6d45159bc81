"""
Smoke tests for the verification and benchmark experiments.
"""

import importlib
import sys

import pandas as pd
import pytest

from primewheel.experiments import verify_wheel_sieve
from primewheel.experiments.bench_wheel_sieve import run_benchmark
from primewheel.experiments.verify_wheel_sieve import (
    run_verification,
    verify_buffers_match,
    verify_engine,
    verify_small_bounds,
)
from primewheel.plotting import plot_memory, plot_runtime


class TestVerification:

    def test_import_leaves_sys_path_alone(self):
        """Importing the verification module must not touch sys.path."""
        before = list(sys.path)
        importlib.reload(verify_wheel_sieve)
        assert sys.path == before

    def test_small_bounds(self):
        assert verify_small_bounds(200, verbose=False)

    @pytest.mark.parametrize("engine", ['python', 'jit'])
    def test_engine(self, engine):
        assert verify_engine(20000, engine, verbose=False)

    def test_buffers(self):
        assert verify_buffers_match(20000, verbose=False)

    def test_run_verification_reports(self, capsys):
        assert run_verification(5000, 100)
        assert "✓" in capsys.readouterr().out


class TestBenchmark:

    def test_run_benchmark_writes_csv(self, tmp_path):
        df = run_benchmark([1000, 10000], ['python', 'jit', 'reference'], repeats=1,
                           output_dir=tmp_path)

        assert len(df) == 6
        assert set(df['engine']) == {'python', 'jit', 'reference'}
        assert set(df[df['N'] == 1000]['primes']) == {168}
        assert (df['seconds'] >= 0).all()

        saved = pd.read_csv(tmp_path / 'benchmark.csv')
        assert list(saved.columns) == list(df.columns)

    def test_memory_ratio(self):
        df = run_benchmark([30000], ['python'], repeats=1)
        assert df['buffer_bytes'].iloc[0] == 1000
        assert df['memory_ratio'].iloc[0] == pytest.approx(30.001)

    def test_plots(self, tmp_path):
        df = run_benchmark([1000, 3000], ['python', 'reference'], repeats=1)
        plot_runtime(df, tmp_path / 'runtime.png')
        plot_memory(df, tmp_path / 'memory.png')
        assert (tmp_path / 'runtime.png').exists()
        assert (tmp_path / 'memory.png').exists()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
