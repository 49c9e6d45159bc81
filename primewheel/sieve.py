"""
Sequential wheel sieve (mod 30) over a packed candidate buffer.

The buffer is mutated in place. Bytes are visited in increasing order; any
bit still set when its byte is reached has survived sifting by every
smaller prime, so it is prime and its multiples get cleared.

Only multiples p*j with j coprime to 30 are visited. Starting from j = p,
the cofactor walks the wheel: j → j + increment(j % 30). Every product is
then coprime to 30 and lands on a stored bit.

For p = 7:  j = 7, 11, 13, 17, 19, 23, 29, 31, ...
            m = 49, 77, 91, 119, 133, 161, 203, 217, ...
"""

import numpy as np

from .wheel import WHEEL, clear_mask, increment, index_to_n


def sift_out(buf: np.ndarray, p: int, n: int) -> None:
    """
    Clear the bit of every multiple p*j <= n with j >= p coprime to 30.

    Parameters
    ----------
    buf : np.ndarray
        Candidate buffer, modified in place.
    p : int
        Prime whose multiples are removed.
    n : int
        Sieve limit (inclusive); a multiple of 30 in normal use.
    """
    j = p
    m = p * j
    while m <= n:
        buf[m // WHEEL] &= clear_mask(m % WHEEL)
        j += increment(j % WHEEL)
        m = p * j


def sieve_buffer(buf: np.ndarray, n: int) -> np.ndarray:
    """
    Run the sieve over a freshly built candidate buffer.

    Parameters
    ----------
    buf : np.ndarray
        Buffer from build_candidate_buffer, modified in place.
    n : int
        Sieve limit (inclusive).

    Returns
    -------
    np.ndarray
        The same buffer; afterwards a bit is set iff its number is prime.
    """
    for k in range(len(buf)):
        # Nothing in this byte or later has a square <= n
        if (WHEEL * k + 1) ** 2 > n:
            break

        byte = int(buf[k])
        for i in range(8):
            if byte >> i & 1:
                sift_out(buf, index_to_n(k, i), n)

    return buf
