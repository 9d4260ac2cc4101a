"""Tests for the Turing-machine simulator and its per-step encodings."""
import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from pf_core import machines
from pf_core.errors import DomainError
from pf_core.machines import MACHINES, TuringMachine
from pf_core.primes import digit_sum


def test_catalog_consistent():
    for name, spec in MACHINES.items():
        machines.check_machine(spec)


def test_binary_increment():
    """1011 + 1 = 1100 in three steps."""
    tm = TuringMachine('binary-increment')
    trace = tm.run()
    assert tm.halted
    assert tm.state == 'qH'
    assert tm.steps == 3
    assert len(trace) == 3
    assert tm.tape_string().rstrip('B') == '1100'


def test_palindrome_accepts():
    tm = TuringMachine('palindrome')
    tm.run()
    assert tm.state == 'qA'
    assert tm.steps == 9


def test_palindrome_rejects():
    spec = dict(MACHINES['palindrome'], initial_tape=['1', '0', 'B'])
    tm = TuringMachine(spec)
    tm.run()
    assert tm.state == 'qR'


def test_busy_beaver():
    """Three-state busy beaver: six 1s, halts after 13 steps."""
    tm = TuringMachine('busy-beaver-3')
    tm.run()
    assert tm.state == 'HALT'
    assert tm.steps == 13
    assert tm.tape.count('1') == 6


def test_sat_verifier_accepts():
    tm = TuringMachine('sat-verifier')
    tm.run()
    assert tm.state == 'qA'
    assert tm.steps == 10


def test_initial_encoding():
    """Binary incrementer start: state q0 -> 1, head 3, tape 1011BBB."""
    tm = TuringMachine('binary-increment')
    cfg = tm.configuration()
    assert cfg.state == 1
    assert cfg.head == 3
    assert cfg.tape == (1, 0, 1, 1, 2, 2, 2)
    expected = 2 * 3**3 * 5**2 * 7**1 * 11**2 * 13**2 * 17**3 * 19**3 * 23**3
    assert tm.encoding() == expected


def test_trace_encodings_decode():
    """Every recorded encoding decodes and carries its D₃."""
    tm = TuringMachine('palindrome')
    trace = tm.run()
    for entry in trace:
        cfg = tm.codec.decode(entry['encoding'])
        assert cfg.head == entry['head']
        assert cfg.state == MACHINES['palindrome']['states'].index(entry['state']) + 1
        assert entry['d3'] == digit_sum(entry['encoding'])
    assert tm.codec.decode(tm.encoding_history[-1]) == tm.configuration()
    assert len(tm.d3_history) == tm.steps


def test_step_after_halt():
    tm = TuringMachine('binary-increment')
    tm.run()
    assert tm.step() is False
    assert tm.steps == 3


def test_reset():
    tm = TuringMachine('binary-increment')
    tm.run()
    tm.reset()
    assert not tm.halted
    assert tm.steps == 0
    assert tm.d3_history == []
    assert tm.tape_string() == '1011BBB'


def test_max_steps_and_tape_growth():
    """A machine that only moves right is cut off by max_steps."""
    spec = {
        'name': 'runner',
        'alphabet': ['0'],
        'blank': '0',
        'states': ['s'],
        'initial_state': 's',
        'initial_tape': ['0'],
        'initial_head': 0,
        'halt_states': [],
        'transitions': {('s', '0'): ('0', 'R', 's')},
    }
    tm = TuringMachine(spec)
    trace = tm.run(max_steps=25)
    assert len(trace) == 25
    assert not tm.halted
    assert tm.head == 25
    assert len(tm.tape) == 26


def test_missing_transition_halts():
    spec = dict(MACHINES['binary-increment'], transitions={})
    tm = TuringMachine(spec)
    assert tm.run() == []
    assert tm.halted
    assert tm.state == 'q0'


def test_unknown_machine():
    with pytest.raises(DomainError):
        TuringMachine('unary-tripler')


def test_bad_definition():
    spec = dict(MACHINES['binary-increment'], blank='Z')
    with pytest.raises(DomainError):
        TuringMachine(spec)
    spec = dict(MACHINES['binary-increment'], initial_tape=['1', '2'])
    with pytest.raises(DomainError):
        TuringMachine(spec)


def test_unknown_halt_state_rejected():
    """A misspelled halt state is caught when the machine is built."""
    spec = dict(MACHINES['binary-increment'], halt_states=['qh'])
    with pytest.raises(DomainError):
        TuringMachine(spec)
