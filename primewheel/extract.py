"""
Turning a finished candidate buffer into a list of primes.

Responsibility: decoding and trimming. The buffer is only read here.
"""

import numpy as np

from .bounds import prime_bound
from .buffer import CHUNK_BYTES, decode_candidates

SMALL_PRIMES = np.array(
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59],
    dtype=np.int64,
)

# 2, 3, 5 divide the wheel and are never stored in the buffer
WHEEL_PRIMES = SMALL_PRIMES[:3]


def _grow(out: np.ndarray, needed: int) -> np.ndarray:
    """Reallocate `out` with room for at least `needed` elements."""
    capacity = max(2 * len(out), needed)
    grown = np.empty(capacity, dtype=out.dtype)
    grown[:len(out)] = out
    return grown


def extract_primes(buf: np.ndarray, bound: int, chunk_bytes: int = CHUNK_BYTES) -> np.ndarray:
    """
    Collect 2, 3, 5 followed by every number still marked in `buf`.

    The output is presized from prime_bound(bound) and the buffer is decoded
    chunk by chunk straight into it. The estimate is only a capacity hint,
    so the output grows whenever a chunk does not fit.

    Parameters
    ----------
    buf : np.ndarray
        Sieved candidate buffer.
    bound : int
        Limit the buffer was sieved to (used for presizing only).
    chunk_bytes : int
        Buffer bytes decoded per pass.

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes.
    """
    out = np.empty(max(prime_bound(bound), len(WHEEL_PRIMES)), dtype=np.int64)
    out[:3] = WHEEL_PRIMES
    count = 3

    for start in range(0, len(buf), chunk_bytes):
        candidates = decode_candidates(buf[start:start + chunk_bytes], first_byte=start)
        end = count + len(candidates)
        if end > len(out):
            out = _grow(out[:count], end)
        out[count:end] = candidates
        count = end

    return out[:count]


def trim_to(primes: np.ndarray, limit: int) -> np.ndarray:
    """
    Drop trailing elements greater than `limit`.

    `primes` must be ascending; only the tail is inspected.
    """
    end = len(primes)
    while end > 0 and primes[end - 1] > limit:
        end -= 1
    return primes[:end]


def small_primes(limit: int) -> np.ndarray:
    """Primes <= limit from the literal table (limit <= 60)."""
    return trim_to(SMALL_PRIMES, limit).copy()
