#!/usr/bin/env python3
"""
Count primes with the mod-30 wheel sieve.

Usage:
    python count_primes.py 1000000
    python count_primes.py 100 --exact --list
    python count_primes.py 10000000 --engine jit

Without --exact the count covers the bound rounded up to a multiple of 30.
"""

import argparse
import sys

from primewheel.primes import ENGINES, prime_count, primes_upto

INVALID_INPUT = "Invalid input: give a positive integer."


def parse_bound(value):
    """Parse a natural number, or return None if `value` is not one."""
    if value is None:
        return None
    try:
        N = int(value)
    except ValueError:
        return None
    if N < 0:
        return None
    return N


def main(argv=None):
    parser = argparse.ArgumentParser(description='Count primes with the mod-30 wheel sieve')
    parser.add_argument('N', nargs='?', help='Upper bound (natural number)')
    parser.add_argument('--exact', action='store_true',
                        help='Count primes <= N instead of <= N rounded up to a multiple of 30')
    parser.add_argument('--engine', choices=sorted(ENGINES), default='python',
                        help='Sieve implementation (default: python)')
    parser.add_argument('--list', action='store_true', help='Print the primes instead of the count')
    # Unknown options and extra positionals count as bad input, not usage errors
    args, extra = parser.parse_known_args(argv)

    N = parse_bound(args.N)
    if N is None or extra:
        print(INVALID_INPUT)
        return 0

    if args.list:
        print(' '.join(str(p) for p in primes_upto(N, exact=args.exact, engine=args.engine)))
    else:
        print(prime_count(N, exact=args.exact, engine=args.engine))
    return 0


if __name__ == '__main__':
    sys.exit(main())
