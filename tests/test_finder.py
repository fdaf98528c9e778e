import logging

import pytest

from primefinder import finder
from primefinder.finder import (
    InvalidArgument,
    estimate_upper_bound,
    find_with_attempts,
    grow_bound,
    nth_prime,
)
from primefinder.sieve import sieve_of_eratosthenes

FIRST_100_PRIMES = sieve_of_eratosthenes(541)


@pytest.mark.parametrize('n,expected', [
    (0, 2),
    (1, 3),
    (2, 5),
    (3, 7),
    (4, 11),
    (5, 13),
    (9, 29),
    (99, 541),
    (999, 7919),
    (10_000, 104_743),
])
def test_reference_values(n: int, expected: int):
    assert nth_prime(n) == expected


def test_first_hundred():
    assert len(FIRST_100_PRIMES) == 100
    assert [nth_prime(n) for n in range(100)] == FIRST_100_PRIMES


@pytest.mark.parametrize('n', [-1, -2, -100])
def test_negative_index(n: int):
    with pytest.raises(InvalidArgument):
        nth_prime(n)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError, match='non-negative'):
        nth_prime(-1)


def test_negative_index_skips_sieve(monkeypatch):
    def fail(limit):
        raise AssertionError('sieve should not run')

    monkeypatch.setattr(finder, 'sieve_of_eratosthenes', fail)
    with pytest.raises(InvalidArgument):
        nth_prime(-1)


@pytest.mark.parametrize('n', [1.0, '3', None, False])
def test_rejects_non_integer(n):
    with pytest.raises(TypeError):
        nth_prime(n)


def test_fast_path_skips_sieve(monkeypatch):
    def fail(limit):
        raise AssertionError('sieve should not run')

    monkeypatch.setattr(finder, 'sieve_of_eratosthenes', fail)
    assert [nth_prime(n) for n in range(5)] == [2, 3, 5, 7, 11]


@pytest.mark.parametrize('n', range(8))
def test_fast_path_agrees_with_sieve(n: int):
    primes, _ = find_with_attempts(n)
    assert primes[n] == nth_prime(n)


def test_idempotent():
    assert nth_prime(1234) == nth_prime(1234) == nth_prime(1234)


def test_monotonic():
    values = [nth_prime(n) for n in range(0, 600, 7)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize('n', range(6))
def test_estimate_seed(n: int):
    assert estimate_upper_bound(n) == 20


@pytest.mark.parametrize('n,expected', [
    (6, 117),
    (10, 137),
    (100, 835),
    (1000, 10_708),
])
def test_estimate_formula(n: int, expected: int):
    assert estimate_upper_bound(n) == expected


def test_estimate_rejects_negative():
    with pytest.raises(InvalidArgument):
        estimate_upper_bound(-1)


@pytest.mark.parametrize('n', [6, 50, 500, 5000, 50_000])
def test_estimate_covers_prime(n: int):
    assert estimate_upper_bound(n) >= nth_prime(n)


@pytest.mark.parametrize('bound,expected', [
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 4),
    (20, 30),
    (21, 31),
    (1000, 1500),
])
def test_grow_bound(bound: int, expected: int):
    assert grow_bound(bound) == expected


def test_grow_bound_strictly_increases():
    bound = 0
    for _ in range(60):
        grown = grow_bound(bound)
        assert grown > bound
        bound = grown


def test_single_attempt_when_estimate_suffices():
    primes, attempts = find_with_attempts(500)
    assert attempts == 1
    assert len(primes) > 500


def test_retries_when_estimate_too_small(monkeypatch):
    monkeypatch.setattr(finder, '_seed_bound', lambda n: 2)
    primes, attempts = find_with_attempts(99)
    # 2 -> 3 -> 4 -> 6 -> 9 -> 13 -> ... until more than 100 primes
    assert attempts > 1
    assert primes[99] == 541
    assert nth_prime(99) == 541


def test_retry_logged(monkeypatch, caplog):
    monkeypatch.setattr(finder, '_seed_bound', lambda n: 20)
    with caplog.at_level(logging.DEBUG, logger='primefinder.finder'):
        assert nth_prime(20) == 73

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == 'Seed bound for index 20: 20'
    assert 'Bound 20 too small for index 20, growing to 30' in messages
    assert any(message.startswith('Attempt 4: sieved up to 67') for message in messages)


@pytest.mark.parametrize('call,n', [
    (nth_prime, 3),
    (nth_prime, 250),
    (find_with_attempts, 250),
    (estimate_upper_bound, 250),
])
def test_index_checked_once_per_call(monkeypatch, call, n: int):
    checked = []
    real_check = finder._check_index

    def counting_check(value):
        checked.append(value)
        real_check(value)

    monkeypatch.setattr(finder, '_check_index', counting_check)
    call(n)
    assert checked == [n]
