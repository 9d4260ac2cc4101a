"""
Sample Turing machines and a step simulator that Gödel-encodes every
configuration it passes through.

Each step records the encoding of the new configuration and its base-3
digit sum D₃. Configurations are mapped to integers with the state as its
1-based index in the machine's state list and each symbol as its index in
the alphabet.
"""

import logging

from .codec import ConfigCodec, TMConfig
from .config import DEFAULT_MAX_STEPS
from .errors import DomainError
from .primes import digit_sum

log = logging.getLogger(__name__)

MOVES = ('L', 'R', 'N')

# ---------------------------------------------------------------------------
# Machine catalog
# transitions: (state, read) -> (write, move, next_state)
# ---------------------------------------------------------------------------

MACHINES = {
    'binary-increment': {
        'name': 'Binary Incrementer',
        'description': 'Increments a binary number by 1, starting at the LSB',
        'complexity': 'P',
        'alphabet': ['0', '1', 'B'],
        'blank': 'B',
        'states': ['q0', 'qH'],
        'initial_state': 'q0',
        'initial_tape': ['1', '0', '1', '1', 'B', 'B', 'B'],   # 1011 = 11
        'initial_head': 3,
        'halt_states': ['qH'],
        'transitions': {
            ('q0', '0'): ('1', 'N', 'qH'),   # no carry
            ('q0', '1'): ('0', 'L', 'q0'),   # carry left
            ('q0', 'B'): ('1', 'N', 'qH'),   # overflow
        },
    },
    'palindrome': {
        'name': 'Palindrome Checker',
        'description': 'Checks whether the input is a palindrome, marking matched ends with X',
        'complexity': 'P',
        'alphabet': ['0', '1', 'X', 'B'],
        'blank': 'B',
        'states': ['q0', 'q1', 'q2', 'q3', 'q4', 'qA', 'qR'],
        'initial_state': 'q0',
        'initial_tape': ['1', '0', '0', '1', 'B', 'B', 'B'],
        'initial_head': 0,
        'halt_states': ['qA', 'qR'],
        'transitions': {
            ('q0', '0'): ('X', 'R', 'q1'),
            ('q0', '1'): ('X', 'R', 'q2'),
            ('q0', 'X'): ('X', 'R', 'q0'),
            ('q0', 'B'): ('B', 'N', 'qA'),
            ('q1', '0'): ('0', 'R', 'q1'),
            ('q1', '1'): ('1', 'R', 'q1'),
            ('q1', 'X'): ('X', 'L', 'q3'),
            ('q1', 'B'): ('B', 'L', 'q3'),
            ('q2', '0'): ('0', 'R', 'q2'),
            ('q2', '1'): ('1', 'R', 'q2'),
            ('q2', 'X'): ('X', 'L', 'q4'),
            ('q2', 'B'): ('B', 'L', 'q4'),
            ('q3', '0'): ('X', 'L', 'q0'),
            ('q3', '1'): ('1', 'N', 'qR'),
            ('q3', 'X'): ('X', 'N', 'qA'),
            ('q4', '0'): ('0', 'N', 'qR'),
            ('q4', '1'): ('X', 'L', 'q0'),
            ('q4', 'X'): ('X', 'N', 'qA'),
        },
    },
    'busy-beaver-3': {
        'name': '3-State Busy Beaver',
        'description': 'Writes six 1s on a blank tape before halting',
        'complexity': 'Uncomputable',
        'alphabet': ['0', '1'],
        'blank': '0',
        'states': ['A', 'B', 'C', 'HALT'],
        'initial_state': 'A',
        'initial_tape': ['0'] * 13,
        'initial_head': 6,
        'halt_states': ['HALT'],
        'transitions': {
            ('A', '0'): ('1', 'R', 'B'),
            ('A', '1'): ('1', 'L', 'C'),
            ('B', '0'): ('1', 'L', 'A'),
            ('B', '1'): ('1', 'R', 'B'),
            ('C', '0'): ('1', 'L', 'B'),
            ('C', '1'): ('1', 'N', 'HALT'),
        },
    },
    'sat-verifier': {
        'name': 'SAT Certificate Verifier',
        'description': 'Verifies an assignment against (x1 or not x2) and (not x1 or x2)',
        'complexity': 'NP',
        'alphabet': ['0', '1', 'T', 'F', 'B'],
        'blank': 'B',
        'states': ['q0', 'q1', 'q2', 'qA', 'qR'],
        'initial_state': 'q0',
        'initial_tape': ['1', '1', 'B', 'T', 'F', 'B', 'F', 'T', 'B', 'B'],
        'initial_head': 0,
        'halt_states': ['qA', 'qR'],
        'transitions': {
            ('q0', '0'): ('0', 'R', 'q0'),
            ('q0', '1'): ('1', 'R', 'q0'),
            ('q0', 'B'): ('B', 'R', 'q1'),
            ('q1', 'T'): ('T', 'R', 'q1'),
            ('q1', 'F'): ('F', 'R', 'q1'),
            ('q1', 'B'): ('B', 'R', 'q2'),
            ('q2', 'T'): ('T', 'R', 'q1'),
            ('q2', 'F'): ('F', 'R', 'q1'),
            ('q2', 'B'): ('B', 'N', 'qA'),
        },
    },
}


def check_machine(spec):
    """Raise DomainError if a machine definition is internally inconsistent."""
    alphabet = set(spec['alphabet'])
    states = set(spec['states'])
    if spec['blank'] not in alphabet:
        raise DomainError(f"blank {spec['blank']!r} not in alphabet")
    if spec['initial_state'] not in states:
        raise DomainError(f"initial state {spec['initial_state']!r} not in states")
    unknown_halts = [s for s in spec['halt_states'] if s not in states]
    if unknown_halts:
        raise DomainError(f"halt states {unknown_halts} not in states")
    bad = [s for s in spec['initial_tape'] if s not in alphabet]
    if bad:
        raise DomainError(f"initial tape symbols {bad} not in alphabet")
    if not 0 <= spec['initial_head'] <= len(spec['initial_tape']):
        raise DomainError(f"initial head {spec['initial_head']} outside tape")
    for (state, read), (write, move, nxt) in spec['transitions'].items():
        if state not in states or nxt not in states:
            raise DomainError(f"transition {state},{read} uses an unknown state")
        if read not in alphabet or write not in alphabet:
            raise DomainError(f"transition {state},{read} uses a symbol outside the alphabet")
        if move not in MOVES:
            raise DomainError(f"transition {state},{read} has move {move!r}")


class TuringMachine:
    """
    Single-tape simulator over a catalog entry.

    Parameters
    ----------
    machine : str or dict
        Key into MACHINES, or a definition with the same keys.
    """

    def __init__(self, machine='binary-increment'):
        if isinstance(machine, str):
            if machine not in MACHINES:
                raise DomainError(f"Unknown machine: {machine}")
            spec = MACHINES[machine]
        else:
            spec = machine
        check_machine(spec)
        self.spec = spec
        self.codec = ConfigCodec(alphabet_size=len(spec['alphabet']))
        self.reset()

    def reset(self):
        self.state = self.spec['initial_state']
        self.tape = list(self.spec['initial_tape'])
        self.head = self.spec['initial_head']
        self.steps = 0
        self.halted = False
        self.encoding_history = []
        self.d3_history = []

    def configuration(self):
        """Current configuration as a TMConfig of indices."""
        alphabet = self.spec['alphabet']
        return TMConfig(
            state=self.spec['states'].index(self.state) + 1,
            head=self.head,
            tape=tuple(alphabet.index(s) for s in self.tape),
        )

    def encoding(self):
        return self.codec.encode(self.configuration())

    def _read(self):
        if self.head < len(self.tape):
            return self.tape[self.head]
        return self.spec['blank']

    def step(self):
        """
        Apply one transition.

        Returns
        -------
        bool
            True while the machine can keep running.
        """
        if self.halted:
            return False

        key = (self.state, self._read())
        transition = self.spec['transitions'].get(key)
        if transition is None:
            self.halted = True
            log.info("%s: no transition for %s, halted after %d steps",
                     self.spec['name'], key, self.steps)
            return False

        write, move, nxt = transition
        if self.head == len(self.tape):
            self.tape.append(self.spec['blank'])
        self.tape[self.head] = write

        if move == 'L':
            self.head = max(0, self.head - 1)
        elif move == 'R':
            self.head += 1
            while self.head >= len(self.tape):
                self.tape.append(self.spec['blank'])

        self.state = nxt
        self.steps += 1
        if nxt in self.spec['halt_states']:
            self.halted = True

        value = self.encoding()
        self.encoding_history.append(value)
        self.d3_history.append(digit_sum(value))
        log.debug("step %d: state=%s head=%d D3=%d",
                  self.steps, self.state, self.head, self.d3_history[-1])
        if self.halted:
            log.info("%s halted in %s after %d steps",
                     self.spec['name'], self.state, self.steps)
        return not self.halted

    def run(self, max_steps=DEFAULT_MAX_STEPS):
        """
        Step until halted or max_steps transitions have been applied.

        Returns
        -------
        list of dict
            One entry per applied step: step, state, head, encoding, d3.
        """
        trace = []
        while not self.halted and len(trace) < max_steps:
            before = self.steps
            self.step()
            if self.steps == before:
                break
            trace.append({
                'step': self.steps,
                'state': self.state,
                'head': self.head,
                'encoding': self.encoding_history[-1],
                'd3': self.d3_history[-1],
            })
        return trace

    def tape_string(self):
        return ''.join(self.tape)
