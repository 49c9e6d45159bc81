"""
Prime generation entry points.

Responsibility: the public API. Wires the wheel pipeline together:

    N → round up to a multiple of 30 → build buffer → sieve → extract

and keeps a plain Sieve of Eratosthenes around as an independent reference.
"""

import operator

import numpy as np

from .bounds import SMALL_LIMIT, byte_count, rounded_bound
from .buffer import build_candidate_buffer, count_candidates
from .extract import extract_primes, small_primes, trim_to
from .jit_sieve import sieve_buffer_jit
from .sieve import sieve_buffer

ENGINES = {
    'python': sieve_buffer,
    'jit': sieve_buffer_jit,
}


def _check_bound(N) -> int:
    """Validate a bound and return it as a plain int."""
    if isinstance(N, (bool, np.bool_)):
        raise TypeError(f"N must be an integer, got {N!r}")
    N = operator.index(N)
    if N < 0:
        raise ValueError(f"N must be >= 0, got {N}")
    return N


def _sieve(n: int, engine: str) -> np.ndarray:
    """Build and sieve the candidate buffer for a rounded bound n."""
    try:
        sieve = ENGINES[engine]
    except KeyError:
        raise ValueError(f"Unknown engine {engine!r}, expected one of {sorted(ENGINES)}") from None

    buf = build_candidate_buffer(byte_count(n))
    return sieve(buf, n)


def primes_upto(N: int, exact: bool = False, engine: str = 'python') -> np.ndarray:
    """
    Return the primes found by sieving up to N rounded up to a multiple of 30.

    Parameters
    ----------
    N : int
        Requested bound (>= 0).
    exact : bool
        If True, drop primes greater than N. Otherwise the result may also
        contain primes in (N, N + 29].
    engine : str
        'python' or 'jit' (numba-compiled sieve).

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes. Empty for N < 2.
    """
    N = _check_bound(N)
    if N < 2:
        return np.array([], dtype=np.int64)

    n = rounded_bound(N)
    limit = N if exact else n

    if n <= SMALL_LIMIT:
        return small_primes(limit)

    buf = _sieve(n, engine)
    primes = extract_primes(buf, n)
    if exact:
        primes = trim_to(primes, N)
    return primes


def prime_count(N: int, exact: bool = False, engine: str = 'python') -> int:
    """
    Return len(primes_upto(N, exact, engine)).

    In non-exact mode the count comes straight from the buffer's popcount,
    without decoding the primes.
    """
    N = _check_bound(N)
    n = rounded_bound(N)
    if exact or N < 2 or n <= SMALL_LIMIT:
        return len(primes_upto(N, exact=exact, engine=engine))

    # +3 for 2, 3, 5, which the wheel never stores
    return count_candidates(_sieve(n, engine)) + 3


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Plain Sieve of Eratosthenes over every integer; used as the reference
    the wheel sieve is checked against.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags
