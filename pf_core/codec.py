"""
Gödel numbering of Turing-machine configurations.

A configuration (state q, head position h, tape t_0 ... t_{n-1}) maps to

    encode(C) = 2^q × 3^h × ∏_{j=0}^{n-1} p_{j+2}^(t_j + 1)

where p_i is the i-th prime (p_0 = 2, p_1 = 3, p_2 = 5, ...). Tape exponents
are shifted by one so that symbol 0 still leaves a factor; the tape therefore
ends at the first tape prime that does not divide the number.

Decoding reads the exponents back. Tape exponents must be contiguous from
cell 0: a missing prime followed by a present one is a malformed encoding.
All arithmetic is on Python integers (exact, unbounded).
"""

import operator
from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_ALPHABET_SIZE, DEFAULT_MAX_TAPE_LENGTH, TAPE_PRIME_OFFSET
from .errors import DomainError
from .primes import iter_primes, multiplicity


@dataclass(frozen=True)
class TMConfig:
    """Snapshot of a machine: state index, head position and tape symbols."""

    state: int
    head: int
    tape: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'tape', tuple(self.tape))


def _as_int(value, name):
    if isinstance(value, bool):
        raise DomainError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise DomainError(f"{name} must be an integer, got {value!r}") from None


def _optional_positive(value, name):
    if value is None:
        return None
    value = _as_int(value, name)
    if value < 1:
        raise DomainError(f"{name} must be >= 1, got {value}")
    return value


class ConfigCodec:
    """
    Bijection between TMConfig values and natural numbers.

    Parameters
    ----------
    alphabet_size : int or None
        When set, tape symbols must lie in [0, alphabet_size).
    max_tape_length : int or None
        When set, only the first `max_tape_length` tape primes (5, 7, 11, ...)
        are reserved for the tape; longer tapes cannot be encoded and
        numbers with larger prime factors cannot be decoded.
    """

    def __init__(self, alphabet_size=DEFAULT_ALPHABET_SIZE,
                 max_tape_length=DEFAULT_MAX_TAPE_LENGTH):
        self.alphabet_size = _optional_positive(alphabet_size, 'alphabet_size')
        self.max_tape_length = _optional_positive(max_tape_length, 'max_tape_length')

    def __repr__(self):
        return (f"ConfigCodec(alphabet_size={self.alphabet_size}, "
                f"max_tape_length={self.max_tape_length})")

    def _check_symbol(self, cell, symbol):
        if symbol < 0:
            raise DomainError(f"tape[{cell}] = {symbol} is negative")
        if self.alphabet_size is not None and symbol >= self.alphabet_size:
            raise DomainError(
                f"tape[{cell}] = {symbol} outside alphabet of size {self.alphabet_size}")

    def encode(self, config):
        """
        Encode a configuration as a single natural number.

        Raises
        ------
        DomainError
            Negative state, head outside [0, len(tape)], a negative or
            out-of-alphabet symbol, or a tape longer than max_tape_length.
        """
        state = _as_int(config.state, 'state')
        head = _as_int(config.head, 'head')
        tape = [_as_int(s, 'tape symbol') for s in config.tape]

        if state < 0:
            raise DomainError(f"state must be >= 0, got {state}")
        if not 0 <= head <= len(tape):
            raise DomainError(f"head {head} outside [0, {len(tape)}]")
        if self.max_tape_length is not None and len(tape) > self.max_tape_length:
            raise DomainError(
                f"tape length {len(tape)} exceeds {self.max_tape_length} reserved primes")

        value = 2**state * 3**head
        for cell, (symbol, p) in enumerate(zip(tape, iter_primes(TAPE_PRIME_OFFSET))):
            self._check_symbol(cell, symbol)
            value *= p ** (symbol + 1)
        return value

    def decode(self, value):
        """
        Recover the configuration whose encoding is `value`.

        Raises
        ------
        DomainError
            value < 1, a gap in the tape exponents, a prime factor beyond the
            reserved tape primes, or exponents that no valid configuration
            produces (symbol outside the alphabet, head past the tape end).
        """
        value = _as_int(value, 'encoded value')
        if value < 1:
            raise DomainError(f"encoded value must be >= 1, got {value}")

        state, rest = multiplicity(value, 2)
        head, rest = multiplicity(rest, 3)

        tape = []
        for cell, p in enumerate(iter_primes(TAPE_PRIME_OFFSET)):
            if rest == 1:
                break
            if self.max_tape_length is not None and cell >= self.max_tape_length:
                raise DomainError(
                    f"cofactor {rest} of {value} has a prime factor outside the "
                    f"{self.max_tape_length} reserved tape primes")
            e, rest = multiplicity(rest, p)
            if e == 0:
                raise DomainError(
                    f"malformed encoding {value}: tape prime {p} (cell {cell}) is "
                    f"missing but cofactor {rest} remains")
            symbol = e - 1
            self._check_symbol(cell, symbol)
            tape.append(symbol)

        if head > len(tape):
            raise DomainError(
                f"malformed encoding {value}: head {head} past tape of length {len(tape)}")
        return TMConfig(state, head, tuple(tape))


_DEFAULT_CODEC = ConfigCodec()


def encode(config):
    """Encode with the unconstrained codec."""
    return _DEFAULT_CODEC.encode(config)


def decode(value):
    """Decode with the unconstrained codec."""
    return _DEFAULT_CODEC.decode(value)
