import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .automaton import Configuration, TuringMachine

logger = logging.getLogger(__name__)

# Safety bound on the number of executed transitions
MAX_STEPS = 1000

OUTCOME_ACCEPT = 'accept'
OUTCOME_REJECT = 'reject'
OUTCOME_STEP_LIMIT = 'step_limit'


class Tape:
    """
    A tape unbounded in both directions, storing only the visited window.

    Cell 0 is the first input cell. Cells 0, 1, 2, ... live in one list and
    cells -1, -2, ... in another, so growing either end is amortized O(1).
    """

    def __init__(self, symbols: str, blank: str):
        self.blank = blank
        self._right = list(symbols) or [blank]
        self._left = []

    @property
    def start(self) -> int:
        """Position of the leftmost stored cell."""
        return -len(self._left)

    @property
    def end(self) -> int:
        """Position one past the rightmost stored cell."""
        return len(self._right)

    def extend_to(self, position: int):
        while position < self.start:
            self._left.append(self.blank)
        while position >= self.end:
            self._right.append(self.blank)

    def read(self, position: int) -> str:
        if position >= 0:
            return self._right[position]
        return self._left[-position - 1]

    def write(self, position: int, symbol: str):
        if position >= 0:
            self._right[position] = symbol
        else:
            self._left[-position - 1] = symbol

    def snapshot(self, position: int) -> Tuple[Tuple[str, ...], int]:
        """Returns the stored cells left to right and ``position`` relative to them."""
        cells = tuple(reversed(self._left)) + tuple(self._right)
        return cells, position - self.start


@dataclass
class SimulationResult:
    accepted: bool
    configurations: List[Configuration] = field(default_factory=list)
    outcome: str = OUTCOME_REJECT
    steps: int = 0

    def to_dict(self) -> Dict:
        return {
            'accepted': self.accepted,
            'outcome': self.outcome,
            'steps': self.steps,
            'configurations': [config.to_dict() for config in self.configurations]
        }


def simulate_tm(tm: TuringMachine, input_string: str, max_steps: int = MAX_STEPS) -> SimulationResult:
    """
    Runs a Turing machine on the input string, recording every configuration.

    The tape starts with the input characters (a single blank for the empty
    string) and the head on the first cell. The run stops when the machine
    enters its accept or reject state, or after ``max_steps`` transitions.
    If no transition exists for the current state and symbol the machine is
    sent to the reject state without recording a further configuration.

    Args:
        tm: The Turing machine to run
        input_string: The initial tape contents
        max_steps: Maximum number of transitions to execute

    Returns:
        SimulationResult: ``accepted`` is True only if the final state is the
        accept state. ``outcome`` also distinguishes a run cut off by the step
        limit from a rejection.
    """
    tape = Tape(input_string, tm.blank_symbol)
    head = 0
    state = tm.start_state
    steps = 0

    configurations = [_configuration(state, tape, head)]

    while not tm.is_halting(state) and steps < max_steps:
        tape.extend_to(head)
        symbol = tape.read(head)

        transition = tm.transition(state, symbol)
        if transition is None:
            logger.debug("No transition for state %s on symbol %r, rejecting", state, symbol)
            state = tm.reject_state
            break

        tape.write(head, transition.write_symbol)
        state = transition.next_state
        head += transition.move.offset
        steps += 1

        configurations.append(_configuration(state, tape, head))

    if state == tm.accept_state:
        outcome = OUTCOME_ACCEPT
    elif state == tm.reject_state:
        outcome = OUTCOME_REJECT
    else:
        outcome = OUTCOME_STEP_LIMIT
        logger.warning("Simulation stopped after %d steps in state %s", steps, state)

    logger.debug("Simulated %r in %d steps: %s", input_string, steps, outcome)

    return SimulationResult(
        accepted=outcome == OUTCOME_ACCEPT,
        configurations=configurations,
        outcome=outcome,
        steps=steps
    )


def _configuration(state: str, tape: Tape, head: int) -> Configuration:
    cells, relative_head = tape.snapshot(head)
    return Configuration(state=state, tape=cells, head=relative_head)


def format_configuration(config: Configuration) -> str:
    """Renders a configuration as ``State=q0, Tape: a [b] _`` with the head cell bracketed."""
    cells = [
        f'[{symbol}]' if i == config.head else symbol
        for i, symbol in enumerate(config.tape)
    ]
    return f"State={config.state}, Tape: {' '.join(cells)}"
