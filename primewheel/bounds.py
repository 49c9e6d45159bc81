"""
Size bookkeeping for the wheel sieve.

Responsibility: how big things are. No sieving here.
"""

import math

from .wheel import WHEEL

# Rounded bounds up to this value are answered from a literal table.
SMALL_LIMIT = 60

# Dusart-style constant in pi(n) <= n/ln n * (1 + 1.2762/ln n)
DUSART_C = 1.2762


def prime_bound(n: int) -> int:
    """
    Estimate an upper bound on the number of primes <= n.

    Uses (n / ln n) * (1 + 1.2762 / ln n), rounded up. The formula is only
    proven for large n, so treat the result as a presizing hint: containers
    sized by it must still be able to grow.

    Parameters
    ----------
    n : int
        Upper bound of the range.

    Returns
    -------
    int
        Estimated prime count, 0 for n < 2.
    """
    if n < 2:
        return 0
    log_n = math.log(n)
    return math.ceil(n / log_n * (1 + DUSART_C / log_n))


def rounded_bound(n: int) -> int:
    """Smallest multiple of 30 that is >= n."""
    return -(-n // WHEEL) * WHEEL


def byte_count(n: int) -> int:
    """Number of wheel bytes needed to cover [0, n)."""
    return -(-n // WHEEL)
