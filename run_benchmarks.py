#!/usr/bin/env python3
"""
Verification and benchmark suite.

Checks the wheel sieve against the plain sieve, then times every engine
and writes a CSV plus figures.

Usage:
    python run_benchmarks.py
    python run_benchmarks.py --config config/custom.yaml
"""

import argparse
import sys
import yaml
from pathlib import Path
import time

from primewheel.experiments.bench_wheel_sieve import run_benchmark
from primewheel.experiments.verify_wheel_sieve import run_verification
from primewheel.plotting import plot_memory, plot_runtime


def main():
    parser = argparse.ArgumentParser(description='Verify and benchmark the wheel sieve')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("Mod-30 Wheel Sieve - Verification and Benchmarks")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  bounds = {config['bounds']}")
    print(f"  engines = {config['engines']}")
    print(f"  repeats = {config['repeats']}")
    print(f"  verify_limit = {config['verify_limit']:,}")
    print()

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Verification
    print("-" * 60)
    print("1. Verification against plain sieve")
    print("-" * 60)
    start = time.time()
    ok = run_verification(config['verify_limit'], config['small_limit'])
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    if not ok:
        print("✗ Verification failed, skipping benchmarks")
        sys.exit(1)

    # 2. Benchmarks
    print("-" * 60)
    print("2. Benchmarks")
    print("-" * 60)
    start = time.time()
    df = run_benchmark(config['bounds'], config['engines'], config['repeats'], output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Figures
    print("-" * 60)
    print("3. Generating Figures")
    print("-" * 60)

    figures_dir = output_dir / 'figures'
    figures_dir.mkdir(exist_ok=True)

    print("  - Runtime...")
    plot_runtime(df, figures_dir / 'runtime.png')

    print("  - Buffer size...")
    plot_memory(df, figures_dir / 'memory.png')

    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    print("\nResults:")
    print(df[['N', 'engine', 'seconds', 'primes', 'memory_ratio']].to_string(index=False))


if __name__ == '__main__':
    main()
