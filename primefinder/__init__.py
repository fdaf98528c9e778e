"""Compute the N-th prime number (0-indexed) with a Sieve of Eratosthenes."""

from primefinder.finder import (
    InvalidArgument,
    estimate_upper_bound,
    find_with_attempts,
    grow_bound,
    nth_prime,
)
from primefinder.sieve import sieve_of_eratosthenes

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "estimate_upper_bound",
    "find_with_attempts",
    "grow_bound",
    "nth_prime",
    "sieve_of_eratosthenes",
]
