"""
Tests for the numpy export of a prime table.
"""

import numpy as np
import pytest

from primetable.arrays import prime_flags, primes_array
from primetable.prime_table import PrimeTable


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestPrimeFlags:
    """flags[n] is True iff n is prime."""

    def test_known_values(self):
        flags = prime_flags(PrimeTable(50))
        assert flags.dtype == bool
        assert len(flags) == 51
        for p in SMALL_PRIMES:
            assert flags[p], f"{p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"{n} should not be prime"
        assert not flags[0]
        assert not flags[1]

    @pytest.mark.parametrize("N", [0, 1, 2, 3, 30, 31])
    def test_agrees_with_test(self, N):
        table = PrimeTable(N)
        flags = prime_flags(table)
        assert len(flags) == N + 1
        for n in range(1, N + 1):
            assert flags[n] == table.test(n), f"flags[{n}]"

    def test_flags_are_writable_copy(self):
        table = PrimeTable(30)
        flags = prime_flags(table)
        flags[3] = False
        assert table.test(3)


class TestPrimesArray:
    """primes_array lists the primes ascending."""

    def test_reference_list(self):
        assert primes_array(PrimeTable(47)).tolist() == SMALL_PRIMES

    def test_dtype(self):
        assert primes_array(PrimeTable(100)).dtype == np.int64

    @pytest.mark.parametrize("N", [0, 1])
    def test_empty(self, N):
        assert len(primes_array(PrimeTable(N))) == 0

    def test_matches_cursor(self):
        table = PrimeTable(10**4, window=99)
        assert primes_array(table).tolist() == list(table)

    def test_count_one_million(self):
        assert len(primes_array(PrimeTable(10**6))) == 78498


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
