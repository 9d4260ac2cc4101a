"""
Prime sequence and integer helpers for the prime-power codec.

Primes are produced by a numpy sieve in power-of-two blocks; each block is
memoized, so repeated lookups of small indices cost a tuple index.
"""

import functools
import math

import numpy as np

from .config import DIGIT_SUM_BASE, TAPE_PRIME_OFFSET
from .errors import DomainError

_MIN_BLOCK = 64


# ---- Sieve ----

def _sieve_upper_bound(count):
    """Upper bound on the count-th prime (Rosser: p_n < n(ln n + ln ln n), n >= 6)."""
    if count < 6:
        return 15
    n = float(count)
    return int(n * (math.log(n) + math.log(math.log(n)))) + 1


def _sieve(limit):
    """All primes <= limit as a numpy integer array."""
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False
    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = False
    return np.flatnonzero(is_prime)


@functools.lru_cache(maxsize=None)
def first_primes(count):
    """
    The first `count` primes in increasing order.

    Parameters
    ----------
    count : int
        Number of primes, >= 0.

    Returns
    -------
    tuple of int
        (2, 3, 5, ...) with exactly `count` entries.
    """
    if count < 0:
        raise DomainError(f"prime count must be >= 0, got {count}")
    if count == 0:
        return ()
    primes = _sieve(_sieve_upper_bound(count))[:count]
    return tuple(int(p) for p in primes)


def _block_for(index):
    block = _MIN_BLOCK
    while block <= index:
        block *= 2
    return block


def nth_prime(index):
    """The prime with 0-based position `index` (nth_prime(0) == 2)."""
    if index < 0:
        raise DomainError(f"prime index must be >= 0, got {index}")
    return first_primes(_block_for(index))[index]


def tape_prime(cell):
    """Prime carrying tape cell `cell` (cell 0 -> 5)."""
    return nth_prime(cell + TAPE_PRIME_OFFSET)


def iter_primes(start=0):
    """Yield primes from 0-based position `start` onward, without end."""
    index = start
    while True:
        block = _block_for(index)
        primes = first_primes(block)
        while index < block:
            yield primes[index]
            index += 1


# ---- Integer helpers ----

def multiplicity(n, p):
    """
    Exponent of p in n.

    Returns
    -------
    (e, cofactor) with n == p**e * cofactor and cofactor not divisible by p.
    """
    e = 0
    while n % p == 0:
        n //= p
        e += 1
    return e, n


def digit_sum(n, base=DIGIT_SUM_BASE):
    """Sum of the base-`base` digits of n (D₃ for the default base)."""
    if n < 0:
        raise DomainError(f"digit sum needs n >= 0, got {n}")
    if base < 2:
        raise DomainError(f"base must be >= 2, got {base}")
    total = 0
    while n:
        n, d = divmod(n, base)
        total += d
    return total
