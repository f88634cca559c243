"""
Prime table built by a segmented Sieve of Eratosthenes.

Responsibility: build the table once, then answer primality queries and hand
out cursors. No factorization, no counting.

Index mapping (odd numbers only):
- Bit k    → 2k + 1
- Odd n    → bit (n - 1) // 2 == n // 2
- Bit 0 (n = 1) is a permanent non-prime sentinel.

2 is the only even prime and is never stored in the bit array.

For n=1:  bit 0 ✓ (always False)
For n=3:  bit 1 ✓
For n=29: bit 14 ✓

Memory: one bit per odd number, so N / 16 bytes for a table up to N.
"""

import operator
from math import isqrt
from typing import Iterator, List

from bitarray import frozenbitarray
from bitarray.util import ones

from .bounds import nth_prime_bounds
from .cursor import END, PrimeCursor

# 16 numbers per byte (odd numbers only), ~32k bytes per window
DEFAULT_WINDOW = 32 * 1000 * 16 // 2


def _next_multiple(t: int, p: int, bound: int) -> int:
    """Advance multiple index t by steps of p to the first index > bound."""
    if t <= bound:
        t += ((bound - t) // p + 1) * p
    return t


class PrimeTable:
    """
    Table of all primes up to a fixed limit.

    Each odd number n = 2k + 1 in [1, limit] owns bit k of a frozen bitarray;
    the bit is set iff n is prime. The table is never modified after
    construction, so any number of cursors may walk it at once.

    Parameters
    ----------
    limit : int
        Upper bound N (inclusive). Must be >= 0.
    window : int
        Segment width in bit indices for the segmented phase.
    verbose : bool
        Print progress while sieving.

    Complexity
    ----------
    Construction is O(N log log N) time and O(N) bits of space. Primality
    queries are O(1).
    """

    def __init__(self, limit: int, window: int = DEFAULT_WINDOW,
                 verbose: bool = False):
        limit = operator.index(limit)
        window = operator.index(window)
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")

        self._limit = limit
        self._bits = frozenbitarray(_segmented_sieve(limit, window, verbose))

    @classmethod
    def from_prime_count(cls, count: int, **kwargs) -> 'PrimeTable':
        """
        Build a table holding at least the first `count` primes.

        The limit is the upper end of nth_prime_bounds(count), so the table
        usually holds a few more primes than requested.
        """
        _, upper = nth_prime_bounds(count)
        return cls(upper, **kwargs)

    @property
    def limit(self) -> int:
        """Upper bound of the table (inclusive)."""
        return self._limit

    @property
    def bits(self) -> frozenbitarray:
        """Sieve bits; bits[k] is True iff 2k + 1 is prime."""
        return self._bits

    def test_odd(self, n: int) -> bool:
        """
        Test whether an odd integer n is prime.

        Parameters
        ----------
        n : int
            Odd integer with 1 <= n <= limit.

        Returns
        -------
        bool
            True if n is prime.
        """
        n = operator.index(n)
        if n % 2 == 0:
            raise ValueError(f"test_odd expects an odd number, got {n}")
        if n < 1 or n > self._limit:
            raise ValueError(f"{n} is outside the table range [1, {self._limit}]")
        return bool(self._bits[n // 2])

    def test(self, n: int) -> bool:
        """
        Test whether n is prime by looking it up in the table.

        Parameters
        ----------
        n : int
            Integer with 1 <= n <= limit.

        Returns
        -------
        bool
            True if n is prime.
        """
        n = operator.index(n)
        if n < 1 or n > self._limit:
            raise ValueError(f"{n} is outside the table range [1, {self._limit}]")

        if n == 1:
            return False
        elif n == 2:
            return True
        elif n % 2 == 0:
            return False
        else:
            return self.test_odd(n)

    def begin(self) -> PrimeCursor:
        """Cursor at the smallest prime in the table, or end() if there is none."""
        return PrimeCursor(self, 2 if self._limit >= 2 else END)

    def end(self) -> PrimeCursor:
        """Past-the-end cursor."""
        return PrimeCursor(self, END)

    def lower_bound(self, n: int) -> PrimeCursor:
        """
        Find the smallest prime in the table that is >= n.

        Walks forward from begin(), so the cost grows with the number of
        primes skipped.

        Returns
        -------
        PrimeCursor
            Cursor at the first prime >= n, or end() if no such prime is in
            the table.
        """
        n = operator.index(n)
        it = self.begin()
        while it != self.end() and it.value < n:
            it.advance()
        return it

    def __iter__(self) -> Iterator[int]:
        return self.begin()

    def __repr__(self) -> str:
        return f"PrimeTable(limit={self._limit})"


def _segmented_sieve(N: int, window: int, verbose: bool):
    """
    Sieve odd numbers up to N into a mutable bitarray.

    Phase 1 sieves the odd numbers up to isqrt(N) with the ordinary method and
    keeps every small prime together with the index of its next odd multiple.
    Phase 2 walks the rest of the index range in windows of `window` bits,
    crossing out multiples of the small primes one window at a time.
    """
    # One bit per odd number in [1, N]; bit 0 is kept even when N == 0
    bits = ones(max((N + 1) // 2, 1))

    # 1 is not prime
    bits[0] = False

    K = (N - 1) // 2

    # (2*SMALL_K + 1)^2 <= N < (2*SMALL_K + 3)^2
    SMALL_N = isqrt(N)
    SMALL_K = (SMALL_N - 1) // 2

    small_primes: List[int] = []
    next_multiple: List[int] = []

    # Phase 1: ordinary sieve over the small range
    for k in range(1, SMALL_K + 1):
        if bits[k]:  # 2k+1 is prime
            p = 2 * k + 1
            t = 2 * k * (k + 1)  # 2t+1 = p^2
            if t <= SMALL_K:
                bits[t:SMALL_K + 1:p] = False
            small_primes.append(p)
            next_multiple.append(_next_multiple(t, p, SMALL_K))

    if verbose:
        print(f"    Found {len(small_primes)} small primes up to {SMALL_N}")

    # Phase 2: segmented sieve over the remaining range
    segments = 0
    for segment_start in range(SMALL_K + 1, K + 1, window):
        segment_end = min(segment_start + window, K + 1)
        for i, p in enumerate(small_primes):
            t = next_multiple[i]
            if t < segment_end:
                bits[t:segment_end:p] = False
                next_multiple[i] = _next_multiple(t, p, segment_end - 1)
        segments += 1

    if verbose:
        print(f"    Sieved {segments} segments of {window:,} odd numbers up to {N:,}")

    return bits
