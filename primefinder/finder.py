"""Find the N-th prime (0-indexed) with a bounded-retry Sieve of Eratosthenes.

The sieve needs an upper bound before it can run, so :func:`nth_prime` seeds
one from the known growth rate of the primes and sieves up to it. When the
seed turns out too small the bound is grown by half and the sieve runs again.

Termination: the number of primes below ``L`` grows like ``L / ln(L)``, which
is unbounded, and :func:`grow_bound` strictly increases the bound on every
attempt. Some attempt therefore yields more than ``n`` primes.
"""

from __future__ import annotations

import logging
import math

from primefinder.sieve import sieve_of_eratosthenes

log = logging.getLogger(__name__)

SEED_BOUND = 20  # holds the first 6 primes: 2, 3, 5, 7, 11, 13
SAFETY_MARGIN = 1.2
FLAT_PADDING = 100
GROWTH_FACTOR = 1.5

FIRST_PRIMES = (2, 3, 5, 7, 11)


class InvalidArgument(ValueError):
    """Raised when a prime index is negative."""


def _check_index(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("index must be an integer")
    if n < 0:
        raise InvalidArgument("index must be non-negative")


def estimate_upper_bound(n: int) -> int:
    """Return a sieve bound that should contain the prime at index ``n``.

    Uses ``n * (ln n + ln ln n)`` with a 20% margin plus 100. This is a
    heuristic; :func:`nth_prime` retries with a larger bound when it falls
    short.
    """
    _check_index(n)
    return _seed_bound(n)


def _seed_bound(n: int) -> int:
    if n < 6:
        return SEED_BOUND

    ln_n = math.log(n)
    estimate = n * (ln_n + math.log(ln_n))
    return int(estimate * SAFETY_MARGIN) + FLAT_PADDING


def grow_bound(bound: int) -> int:
    """Grow ``bound`` by half, always by at least one."""
    return max(int(bound * GROWTH_FACTOR), bound + 1)


def find_with_attempts(n: int) -> tuple[list[int], int]:
    """Sieve until more than ``n`` primes are found.

    Returns the ascending prime list from the last sieve together with the
    number of sieve attempts it took.
    """
    _check_index(n)
    return _sieve_until(n)


def _sieve_until(n: int) -> tuple[list[int], int]:
    bound = _seed_bound(n)
    log.debug("Seed bound for index %d: %d", n, bound)

    attempts = 0
    while True:
        attempts += 1
        primes = sieve_of_eratosthenes(bound)
        log.debug("Attempt %d: sieved up to %d, found %d primes", attempts, bound, len(primes))
        if len(primes) > n:
            return primes, attempts

        new_bound = grow_bound(bound)
        log.debug("Bound %d too small for index %d, growing to %d", bound, n, new_bound)
        bound = new_bound


def nth_prime(n: int) -> int:
    """Return the prime at 0-indexed position ``n`` (``0 -> 2``, ``1 -> 3``, ...).

    Raises:
        InvalidArgument: If ``n`` is negative.
        TypeError: If ``n`` is not an integer.

    Examples:
        >>> nth_prime(0)
        2
        >>> nth_prime(99)
        541
    """
    _check_index(n)

    # Fast path, skips the sieve entirely
    if n < len(FIRST_PRIMES):
        return FIRST_PRIMES[n]

    primes, _ = _sieve_until(n)
    return primes[n]
