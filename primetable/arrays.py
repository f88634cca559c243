"""
numpy views of a built prime table.

Responsibility: export only. Sieving lives in prime_table.
"""

import numpy as np

from .prime_table import PrimeTable


def prime_flags(table: PrimeTable) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    table : PrimeTable
        Built prime table.

    Returns
    -------
    np.ndarray
        Boolean array of length table.limit + 1.
    """
    N = table.limit
    flags = np.zeros(N + 1, dtype=bool)
    if N >= 2:
        flags[2] = True

    # bit k <-> odd number 2k+1; flags[1::2] holds exactly the odd numbers <= N
    odd = np.frombuffer(table.bits.unpack(), dtype=bool)
    n_odd = len(flags[1::2])
    flags[1::2] = odd[:n_odd]
    return flags


def primes_array(table: PrimeTable) -> np.ndarray:
    """
    Return array of all primes <= table.limit, ascending.

    Parameters
    ----------
    table : PrimeTable
        Built prime table.

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    flags = prime_flags(table)
    return np.nonzero(flags)[0].astype(np.int64)
