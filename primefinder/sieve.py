"""Sieve of Eratosthenes over an inclusive range ``0..limit``.

:func:`nth_prime` in :mod:`primefinder.finder` re-runs this sieve with larger
limits until it holds enough primes, so the function here is pure and keeps
nothing between calls.
"""

from __future__ import annotations

from math import isqrt


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """List the primes up to and including ``limit``, smallest first.

    A negative or too-small ``limit`` (anything below 2) simply has no
    primes, so it gives an empty list rather than an error.

    Args:
        limit: Largest value to consider.

    Raises:
        TypeError: If ``limit`` is not an ``int`` (``bool`` included).

    Examples:
        >>> sieve_of_eratosthenes(30)
        [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        >>> sieve_of_eratosthenes(-3)
        []
    """
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise TypeError("limit must be an integer")
    if limit < 2:
        return []

    table: list[bool] = [False, False] + [True] * (limit - 1)

    for factor in range(2, isqrt(limit) + 1):
        if not table[factor]:
            continue
        # Multiples below factor**2 have a smaller prime factor
        first = factor * factor
        table[first::factor] = [False] * len(range(first, limit + 1, factor))

    return [value for value, marked in enumerate(table) if marked]
