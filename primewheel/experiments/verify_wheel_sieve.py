#!/usr/bin/env python3
"""
Verify the wheel sieve produces identical results to the plain sieve.

Compares:
1. primes_upto(n, exact=True) for every n <= small limit
2. Both engines against prime_flags_upto at larger N
3. Python and JIT buffers byte for byte

Run at small N first to verify correctness before scaling up.

Usage:
    python -m primewheel.experiments.verify_wheel_sieve --N 1e7
"""

import sys
import time
import numpy as np

from primewheel.bounds import byte_count, rounded_bound
from primewheel.buffer import build_candidate_buffer
from primewheel.jit_sieve import sieve_buffer_jit
from primewheel.primes import prime_flags_upto, primes_upto
from primewheel.sieve import sieve_buffer


def verify_small_bounds(limit: int, verbose: bool = True) -> bool:
    """Check every bound 0..limit in exact mode against the reference."""
    if verbose:
        print(f"\n=== Verifying exact results for every N <= {limit:,} ===")

    reference = np.flatnonzero(prime_flags_upto(limit))

    errors = 0
    for N in range(limit + 1):
        expected = reference[:np.searchsorted(reference, N, side='right')]
        got = primes_upto(N, exact=True)
        if not np.array_equal(got, expected):
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at N={N}: got {len(got)} primes, expected {len(expected)}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {limit + 1:,} bounds match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_engine(N: int, engine: str, verbose: bool = True) -> bool:
    """Compare one engine against the reference at a single bound."""
    if verbose:
        print(f"\n=== Verifying engine={engine} for N={N:,} ===")

    t0 = time.time()
    flags = prime_flags_upto(N)
    t_ref = time.time() - t0

    t0 = time.time()
    primes = primes_upto(N, exact=True, engine=engine)
    t_wheel = time.time() - t0

    expected = np.flatnonzero(flags)
    ok = np.array_equal(primes, expected)

    if verbose:
        wheel_bytes = byte_count(rounded_bound(N))
        print(f"  Plain sieve: {t_ref:.2f}s, size={flags.nbytes/1e6:.1f}MB")
        print(f"  Wheel sieve: {t_wheel:.2f}s, size={wheel_bytes/1e6:.1f}MB")
        print(f"  Memory ratio: {flags.nbytes / max(wheel_bytes, 1):.1f}x")
        if ok:
            print(f"  ✓ All {len(expected):,} primes match!")
        else:
            missing = np.setdiff1d(expected, primes)
            extra = np.setdiff1d(primes, expected)
            print(f"  ✗ {len(missing):,} missing, {len(extra):,} extra")
            print(f"    first missing: {missing[:5].tolist()}, first extra: {extra[:5].tolist()}")

    return ok


def verify_buffers_match(N: int, verbose: bool = True) -> bool:
    """Python and JIT engines must leave identical buffers."""
    n = rounded_bound(N)
    buf_py = sieve_buffer(build_candidate_buffer(byte_count(n)), n)
    buf_jit = sieve_buffer_jit(build_candidate_buffer(byte_count(n)), n)
    ok = np.array_equal(buf_py, buf_jit)

    if verbose:
        print(f"\n=== Comparing engine buffers for N={N:,} ===")
        if ok:
            print(f"  ✓ {len(buf_py):,} bytes identical")
        else:
            diff = np.flatnonzero(buf_py != buf_jit)
            print(f"  ✗ {len(diff):,} bytes differ, first at byte {diff[0]}")

    return ok


def run_verification(N: int, small: int, verbose: bool = True) -> bool:
    """Run all checks; True iff everything matches."""
    small_ok = verify_small_bounds(small, verbose)
    python_ok = verify_engine(N, 'python', verbose)
    jit_ok = verify_engine(N, 'jit', verbose)
    buffers_ok = verify_buffers_match(N, verbose)
    return small_ok and python_ok and jit_ok and buffers_ok


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify wheel sieve correctness')
    parser.add_argument('--N', type=float, default=1e6, help='Sieve bound (default: 1e6)')
    parser.add_argument('--small', type=int, default=2000,
                        help='Check every bound up to this value (default: 2000)')
    args = parser.parse_args()

    N = int(args.N)

    print(f"Wheel Sieve Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    all_ok = run_verification(N, args.small)

    print("\n" + "=" * 50)
    if all_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)
