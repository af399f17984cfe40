from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, NamedTuple, Optional, Tuple


# Keys every DFA dictionary must carry
DFA_KEYS = ('states', 'alphabet', 'transitions', 'start_state', 'accept_states')

DEFAULT_ACCEPT_STATE = 'q_accept'
DEFAULT_REJECT_STATE = 'q_reject'
DEFAULT_BLANK_SYMBOL = '_'


class InvalidAutomatonError(ValueError):
    """Raised when an operation is given a DFA that fails validation."""

    def __init__(self, reason: str = 'Invalid DFA'):
        super().__init__(reason)
        self.reason = reason


class Move(Enum):
    """Head movement of a Turing machine transition."""
    LEFT = 'L'
    RIGHT = 'R'
    STAY = 'S'

    @property
    def offset(self) -> int:
        if self is Move.LEFT:
            return -1
        if self is Move.RIGHT:
            return 1
        return 0


class TMTransition(NamedTuple):
    next_state: str
    write_symbol: str
    move: Move


@dataclass(frozen=True)
class Configuration:
    """
    A snapshot of the machine at one point of a run.

    The head may sit one cell outside the tape (at -1 or at len(tape)) right
    after a move; the tape is only grown when that cell is read.
    """
    state: str
    tape: Tuple[str, ...]
    head: int

    def to_dict(self) -> Dict:
        return {'state': self.state, 'tape': list(self.tape), 'head': self.head}


@dataclass(frozen=True)
class TuringMachine:
    states: Tuple[str, ...]
    alphabet: Tuple[str, ...]
    transitions: Dict[Tuple[str, str], TMTransition]
    start_state: str
    accept_state: str
    reject_state: str
    blank_symbol: str

    def transition(self, state: str, symbol: str) -> Optional[TMTransition]:
        return self.transitions.get((state, symbol))

    def is_halting(self, state: str) -> bool:
        return state == self.accept_state or state == self.reject_state


@dataclass(frozen=True)
class IndexedDFA:
    """
    A validated DFA with states and symbols interned as integers.

    State i is ``state_names[i]`` and symbol j is ``symbols[j]``;
    ``table[i][j]`` is the index of the successor state.
    """
    state_names: Tuple[str, ...]
    symbols: Tuple[str, ...]
    table: Tuple[Tuple[int, ...], ...]
    start: int
    accepting: FrozenSet[int]

    @classmethod
    def from_dict(cls, dfa: Dict) -> 'IndexedDFA':
        """Intern a DFA dictionary. The DFA must already be valid."""
        state_names = tuple(dfa['states'])
        symbols = tuple(dfa['alphabet'])
        state_index = {state: i for i, state in enumerate(state_names)}

        table = tuple(
            tuple(state_index[dfa['transitions'][state][symbol]] for symbol in symbols)
            for state in state_names
        )

        return cls(
            state_names=state_names,
            symbols=symbols,
            table=table,
            start=state_index[dfa['start_state']],
            accepting=frozenset(state_index[state] for state in dfa['accept_states'])
        )

    def symbol_index(self, symbol: str) -> Optional[int]:
        try:
            return self.symbols.index(symbol)
        except ValueError:
            return None

    def step(self, state: int, symbol: int) -> int:
        return self.table[state][symbol]

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting

    def name(self, state: int) -> str:
        return self.state_names[state]


def fresh_name(base: str, taken: List[str]) -> str:
    """Append primes to ``base`` until it is not one of ``taken``."""
    taken_set = set(taken)
    name = base
    while name in taken_set:
        name += "'"
    return name
