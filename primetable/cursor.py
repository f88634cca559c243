"""
Forward cursor over the primes of a PrimeTable.

Responsibility: enumeration only. The cursor never writes to the table.
"""

# 0 is never a candidate prime, so it marks the past-the-end state
END = 0


class PrimeCursor:
    """
    Restartable, forward-only position in a prime table.

    Holds a reference to the table and the current prime. The cursor is also
    a Python iterator: next() returns the current prime and advances.

    Equality is deliberately narrow: two cursors compare equal iff both are
    past-the-end. It serves `while it != table.end()` loops only; positions
    and tables are not compared.
    """

    def __init__(self, table, current: int):
        self._table = table
        self._current = current

    @property
    def table(self):
        return self._table

    @property
    def at_end(self) -> bool:
        return self._current == END

    @property
    def value(self) -> int:
        """The prime the cursor points at."""
        if self._current == END:
            raise ValueError("past-the-end cursor has no value")
        return self._current

    def advance(self) -> 'PrimeCursor':
        """
        Move to the next prime in the table, or to end if there is none.

        Returns
        -------
        PrimeCursor
            self, so calls can be chained.
        """
        if self._current == END:
            raise ValueError("cannot advance a past-the-end cursor")

        limit = self._table.limit
        if self._current == 2:
            # 3 is odd and prime; it only needs to be in range
            self._current = 3 if limit >= 3 else END
        else:
            bits = self._table.bits
            # bit k <-> 2k+1; every index below len(bits) is <= limit
            k = bits.find(1, self._current // 2 + 1, len(bits))
            self._current = 2 * k + 1 if k >= 0 else END
        return self

    def copy(self) -> 'PrimeCursor':
        """Independent cursor at the same position."""
        return PrimeCursor(self._table, self._current)

    def __eq__(self, other):
        if not isinstance(other, PrimeCursor):
            return NotImplemented
        return self._current == END and other._current == END

    __hash__ = None

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self._current == END:
            raise StopIteration
        p = self._current
        self.advance()
        return p

    def __repr__(self):
        if self._current == END:
            return "PrimeCursor(end)"
        return f"PrimeCursor({self._current})"
