"""
Numba-compiled wheel sieve.

Same traversal as sieve.py, compiled with @njit. Sequential on purpose:
bytes must be visited in increasing order so that a set bit at the
frontier is known to be prime.

The wheel tables are passed in as arrays so the kernels stay free of
Python objects.
"""

import numpy as np
from numba import njit

from .wheel import CLEAR_MASK, INCREMENT, RESIDUES


@njit
def _sift_out_kernel(buf, p, n, increment, clear_mask):
    """Clear p*j for j = p, p+2/4/6, ... (coprime to 30) while p*j <= n."""
    j = p
    m = p * j
    while m <= n:
        r = m % 30
        buf[m // 30] = buf[m // 30] & clear_mask[r]
        j += increment[j % 30]
        m = p * j


@njit
def _sieve_kernel(buf, n, residues, increment, clear_mask):
    for k in range(buf.shape[0]):
        base = 30 * k
        if (base + 1) * (base + 1) > n:
            break

        byte = buf[k]
        for i in range(8):
            if (byte >> i) & 1:
                _sift_out_kernel(buf, base + residues[i], n, increment, clear_mask)

    return buf


def sift_out_jit(buf: np.ndarray, p: int, n: int) -> None:
    """Compiled counterpart of sieve.sift_out."""
    _sift_out_kernel(buf, np.int64(p), np.int64(n), INCREMENT, CLEAR_MASK)


def sieve_buffer_jit(buf: np.ndarray, n: int) -> np.ndarray:
    """
    Compiled counterpart of sieve.sieve_buffer.

    First call pays the numba compilation cost; later calls reuse it.
    """
    return _sieve_kernel(buf, np.int64(n), RESIDUES, INCREMENT, CLEAR_MASK)
