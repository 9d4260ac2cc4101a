"""Tests for the prime sequence and integer helpers."""
import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from pf_core import primes
from pf_core.errors import DomainError


def test_first_primes():
    assert primes.first_primes(0) == ()
    assert primes.first_primes(10) == (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)


def test_first_primes_count_exact():
    for n in (1, 5, 6, 64, 200):
        ps = primes.first_primes(n)
        assert len(ps) == n
        assert list(ps) == sorted(set(ps))


def test_nth_prime():
    assert primes.nth_prime(0) == 2
    assert primes.nth_prime(1) == 3
    assert primes.nth_prime(99) == 541
    assert primes.nth_prime(100) == 547


def test_tape_prime_offset():
    """Tape cell 0 uses the third prime."""
    assert primes.tape_prime(0) == 5
    assert primes.tape_prime(1) == 7


def test_iter_primes_crosses_blocks():
    it = primes.iter_primes(62)
    got = [next(it) for _ in range(4)]
    assert got == [primes.nth_prime(i) for i in range(62, 66)]


def test_negative_index_rejected():
    with pytest.raises(DomainError):
        primes.nth_prime(-1)


def test_multiplicity():
    assert primes.multiplicity(72, 2) == (3, 9)
    assert primes.multiplicity(72, 3) == (2, 8)
    assert primes.multiplicity(35, 3) == (0, 35)


def test_digit_sum_base3():
    """735 = 1·3⁶ + 2·3¹ -> D₃ = 3."""
    assert primes.digit_sum(735) == 3
    assert primes.digit_sum(0) == 0
    assert primes.digit_sum(26) == 6
    assert primes.digit_sum(255, base=2) == 8


def test_digit_sum_domain():
    with pytest.raises(DomainError):
        primes.digit_sum(-1)
    with pytest.raises(DomainError):
        primes.digit_sum(10, base=1)
