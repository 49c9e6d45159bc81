"""
Tests for the public entry points primes_upto and prime_count.

Checked against trial division, which shares no code with the sieve.
"""

import numpy as np
import pytest

from primewheel.primes import prime_count, prime_flags_upto, primes_upto

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59]
PRIMES_TO_100 = SMALL_PRIMES + [61, 67, 71, 73, 79, 83, 89, 97]


def is_prime_trial(n: int) -> bool:
    """Trial division reference."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


TRIAL_PRIMES = [n for n in range(10_060) if is_prime_trial(n)]


def trial_primes_upto(N: int) -> list:
    return [p for p in TRIAL_PRIMES if p <= N]


class TestBoundaryScenarios:
    """Literal cases for small and rounded bounds."""

    @pytest.mark.parametrize("N", [0, 1])
    @pytest.mark.parametrize("exact", [False, True])
    def test_below_two_is_empty(self, N, exact):
        result = primes_upto(N, exact=exact)
        assert len(result) == 0
        assert result.dtype == np.int64

    def test_thirty(self):
        assert primes_upto(30).tolist() == SMALL_PRIMES[:10]

    def test_thirty_two_rounds_to_sixty(self):
        assert primes_upto(32).tolist() == SMALL_PRIMES

    def test_thirty_two_exact(self):
        assert primes_upto(32, exact=True).tolist() == SMALL_PRIMES[:11]

    def test_sixty_one_exact(self):
        result = primes_upto(61, exact=True).tolist()
        assert result == SMALL_PRIMES + [61]
        assert len(result) == 18

    def test_hundred_exact(self):
        result = primes_upto(100, exact=True).tolist()
        assert result == PRIMES_TO_100
        assert len(result) == 25
        assert result[-1] == 97

    def test_hundred_rounds_to_120(self):
        assert primes_upto(100).tolist() == PRIMES_TO_100 + [101, 103, 107, 109, 113]


class TestAgainstTrialDivision:
    """exact=True returns exactly the primes <= N."""

    def test_every_bound_up_to_500(self):
        for N in range(501):
            got = primes_upto(N, exact=True).tolist()
            assert got == trial_primes_upto(N), f"mismatch at N={N}"

    @pytest.mark.parametrize("N", [599, 600, 601, 997, 1000, 4096, 9973, 10_000])
    @pytest.mark.parametrize("engine", ['python', 'jit'])
    def test_selected_bounds(self, N, engine):
        assert primes_upto(N, exact=True, engine=engine).tolist() == trial_primes_upto(N)


class TestRoundingSlack:
    """exact=False covers N and at most the primes in (N, N + 29]."""

    @pytest.mark.parametrize("N", [2, 29, 30, 31, 59, 61, 89, 90, 1001, 5000, 9999])
    def test_slack_within_29(self, N):
        result = primes_upto(N).tolist()
        assert result[:len(trial_primes_upto(N))] == trial_primes_upto(N)
        assert all(p <= N + 29 for p in result)
        assert result == trial_primes_upto(-(-N // 30) * 30)


class TestProperties:
    """Determinism and prefix monotonicity."""

    def test_deterministic(self):
        a = primes_upto(12345, exact=True)
        b = primes_upto(12345, exact=True)
        assert np.array_equal(a, b)
        assert a.tobytes() == b.tobytes()

    def test_prefix_property(self):
        big = primes_upto(3000, exact=True)
        for N in [0, 2, 50, 61, 100, 997, 1500, 2999]:
            small = primes_upto(N, exact=True)
            assert np.array_equal(big[:len(small)], small), f"N={N} is not a prefix"

    def test_engines_agree(self):
        assert np.array_equal(primes_upto(10**5, engine='python'), primes_upto(10**5, engine='jit'))

    def test_matches_reference_sieve_large(self):
        expected = np.flatnonzero(prime_flags_upto(10**6))
        assert np.array_equal(primes_upto(10**6, exact=True, engine='jit'), expected)


class TestPrimeCount:
    """prime_count agrees with len(primes_upto)."""

    @pytest.mark.parametrize("N", [0, 1, 30, 32, 61, 100, 1000, 10**4, 10**5])
    @pytest.mark.parametrize("exact", [False, True])
    def test_matches_list_length(self, N, exact):
        assert prime_count(N, exact=exact) == len(primes_upto(N, exact=exact))

    def test_known_counts(self):
        assert prime_count(100, exact=True) == 25
        assert prime_count(100) == 30
        assert prime_count(10**5, exact=True) == 9592
        assert prime_count(10**6, exact=True, engine='jit') == 78498


class TestInvalidInput:
    """Bad bounds and engines raise."""

    def test_negative(self):
        with pytest.raises(ValueError):
            primes_upto(-1)

    @pytest.mark.parametrize("N", [2.5, "100", None, True])
    def test_non_integer(self, N):
        with pytest.raises(TypeError):
            primes_upto(N)

    def test_numpy_integer_accepted(self):
        assert primes_upto(np.int64(100), exact=True).tolist() == PRIMES_TO_100

    def test_unknown_engine(self):
        with pytest.raises(ValueError, match="Unknown engine"):
            primes_upto(1000, engine='gpu')


class TestReferenceSieve:
    """prime_flags_upto edge cases."""

    def test_tiny_bounds(self):
        assert prime_flags_upto(0).tolist() == [False]
        assert prime_flags_upto(1).tolist() == [False, False]
        assert np.flatnonzero(prime_flags_upto(2)).tolist() == [2]

    def test_hundred(self):
        assert np.flatnonzero(prime_flags_upto(100)).tolist() == PRIMES_TO_100


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
