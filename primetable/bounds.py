"""
Bounds on the n-th prime.

Responsibility: closed-form sizing aid for callers. The sieve itself never
calls into this module.

For n >= 6 the classical inequality

    n ln n + n ln ln n - n < p_n < n ln n + n ln ln n

brackets the n-th prime p_n. Both ends are widened by one so the returned
bracket is inclusive.
"""

import operator
import numpy as np
from typing import Tuple

# The first five primes all lie in [2, 11].
SMALL_BRACKET = (2, 11)


def nth_prime_bounds(n: int) -> Tuple[int, int]:
    """
    Return an inclusive bracket (lower, upper) containing the n-th prime.

    Parameters
    ----------
    n : int
        1-based index into the primes (n=1 is the prime 2).

    Returns
    -------
    tuple
        (lower, upper), both inclusive.

    Note
    ----
    The logarithms are taken in np.longdouble (80-bit extended precision on
    x86 Linux) whatever the integer type of n. For very large n the bracket
    gets loose, but it still contains p_n.
    """
    n = operator.index(n)
    if n < 1:
        raise ValueError(f"prime index must be >= 1, got {n}")

    if n < 6:
        return SMALL_BRACKET

    ln_n = np.log(np.longdouble(n))
    ln_ln_n = np.log(ln_n)
    t = ln_n + ln_ln_n
    x = int(np.floor(np.longdouble(n) * t))
    return (x - n - 1, x + 1)
